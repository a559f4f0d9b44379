import json

import pytest

import main
from config.settings import Config
from core.errors import ConnectivityError
from fakes import FakeChainClient

TEST_KEY = "0x" + "a" * 64


class ConnectedClient(FakeChainClient):
    instances = []

    def __init__(self, rpc_url, wallet, **_kwargs):
        super().__init__()
        self.rpc_url = rpc_url
        self.wallet = wallet
        ConnectedClient.instances.append(self)

    def connect(self):
        return 1


class UnreachableClient(ConnectedClient):
    def connect(self):
        raise ConnectivityError("RPC endpoint is unreachable")


@pytest.fixture
def config(tmp_path, monkeypatch):
    monkeypatch.delenv("RPC_URL", raising=False)
    monkeypatch.delenv("MAX_SWAPS", raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "swap": {"max_swaps": 2, "delay_min_ms": 0, "delay_max_ms": 0}
    }))
    return Config(str(path))


@pytest.mark.asyncio
async def test_full_run_approves_then_swaps(config, monkeypatch):
    ConnectedClient.instances.clear()
    monkeypatch.setattr(main, "ChainClient", ConnectedClient)

    exit_code = await main.run_auto_swapper(TEST_KEY, config)

    assert exit_code == 0
    client = ConnectedClient.instances[0]
    submitted = [fn_name for _, fn_name, _, _ in client.submitted]
    assert submitted == ["approve"] * 4 + ["swapExactTokensForTokens"] * 2
    assert any(fn_name == "balanceOf" for _, fn_name, _ in client.calls)


@pytest.mark.asyncio
async def test_connectivity_error_is_fatal(config, monkeypatch):
    monkeypatch.setattr(main, "ChainClient", UnreachableClient)

    assert await main.run_auto_swapper(TEST_KEY, config) == 1


@pytest.mark.asyncio
async def test_invalid_config_is_fatal(tmp_path, monkeypatch):
    monkeypatch.setattr(main, "ChainClient", ConnectedClient)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tokens": []}))

    assert await main.run_auto_swapper(TEST_KEY, Config(str(path))) == 1


@pytest.mark.asyncio
async def test_invalid_private_key_is_fatal(config, monkeypatch):
    monkeypatch.setattr(main, "ChainClient", ConnectedClient)

    assert await main.run_auto_swapper("0x1234", config) == 1
