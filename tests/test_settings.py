import json

import pytest

from config.settings import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("RPC_URL", "MAX_SWAPS", "ROUTER_FROM_ENV"):
        monkeypatch.delenv(name, raising=False)


def test_default_config_is_created_and_valid(tmp_path):
    path = tmp_path / "config" / "config.json"

    config = Config(str(path))

    assert path.exists()
    assert config.validate_config()
    assert [token["symbol"] for token in config.tokens] == ["MOG", "WETH", "RISE", "USDT"]
    settings = config.get_swap_settings()
    assert settings.slippage_bps == 500
    assert settings.max_swaps == 50
    assert (settings.delay_min_ms, settings.delay_max_ms) == (15000, 30000)
    assert settings.gas_limit == 200000
    assert settings.skip_sufficient_allowance is False


def test_env_overrides_and_placeholders(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "router_address": "${ROUTER_FROM_ENV}",
        "swap": {"max_swaps": 10}
    }))
    monkeypatch.setenv("RPC_URL", "http://127.0.0.1:8545")
    monkeypatch.setenv("MAX_SWAPS", "3")
    monkeypatch.setenv("ROUTER_FROM_ENV", "0x" + "9" * 40)

    config = Config(str(path))

    assert config.network["rpc_url"] == "http://127.0.0.1:8545"
    assert config.router_address == "0x" + "9" * 40
    assert config.get_swap_settings().max_swaps == 3
    # сеть по умолчанию дополняет недостающие поля
    assert config.network["chain_id"] == 11155931


def test_corrupt_config_is_backed_up(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    config = Config(str(path))

    assert (tmp_path / "config.json.backup").exists()
    assert len(config.tokens) == 4


def test_config_issues_are_reported(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "tokens": [{"symbol": "MOG", "address": "0x" + "1" * 40, "decimals": 18}],
        "swap": {"amount_min": 3, "amount_max": 2, "slippage_bps": 20000, "delay_min_ms": 10, "delay_max_ms": 5}
    }))

    issues = Config(str(path)).get_config_issues()

    assert "At least two distinct tokens are required" in issues
    assert "Swap amount range must satisfy 0 < min <= max" in issues
    assert "slippage_bps must be within 0..10000" in issues
    assert "Delay range must satisfy 0 <= min <= max" in issues
