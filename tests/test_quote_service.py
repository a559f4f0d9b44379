import pytest

from core.errors import ChainError, ConnectivityError, QuoteError
from services.quote_service import QuoteService, apply_slippage
from fakes import FakeChainClient, MOG, WETH, ROUTER


def test_slippage_scenario_1000_at_5_percent():
    assert apply_slippage(1000, 500) == 950


def test_slippage_matches_integer_floor():
    for expected_out in (0, 1, 19, 999, 10 ** 18 + 7, 2 ** 200 + 3):
        for bps in (0, 1, 30, 500, 9999, 10000):
            assert apply_slippage(expected_out, bps) == (expected_out * (10000 - bps)) // 10000


def test_slippage_rejects_out_of_range():
    with pytest.raises(ValueError):
        apply_slippage(1000, 10001)
    with pytest.raises(ValueError):
        apply_slippage(-1, 500)


@pytest.mark.asyncio
async def test_quote_uses_second_element_of_amounts_out():
    client = FakeChainClient(amounts_out=[10 ** 18, 1000])
    service = QuoteService(client, ROUTER, slippage_bps=500)

    amount_out_min = await service.quote(10 ** 18, [MOG.address, WETH.address])

    assert amount_out_min == 950
    assert client.calls == [(ROUTER, "getAmountsOut", (10 ** 18, [MOG.address, WETH.address]))]


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [ChainError("execution reverted"), ConnectivityError("rpc down")])
async def test_quote_failure_raises_quote_error(error):
    client = FakeChainClient(call_errors={"getAmountsOut": error})
    service = QuoteService(client, ROUTER)

    with pytest.raises(QuoteError):
        await service.quote(10 ** 18, [MOG.address, WETH.address])


@pytest.mark.asyncio
async def test_quote_rejects_short_result():
    client = FakeChainClient(amounts_out=[10 ** 18])
    service = QuoteService(client, ROUTER)

    with pytest.raises(QuoteError):
        await service.quote(10 ** 18, [MOG.address, WETH.address])
