from typing import List

from config.constants import BPS_DENOMINATOR, ROUTER_ABI
from core.errors import ChainError, QuoteError
from utils.logger import setup_logger


def apply_slippage(expected_out: int, slippage_bps: int) -> int:
    """Минимальный выход с учётом slippage, целочисленно"""
    if expected_out < 0:
        raise ValueError("expected_out must be non-negative")
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise ValueError(f"slippage_bps must be within 0..{BPS_DENOMINATOR}")
    return expected_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


class QuoteService:
    def __init__(self, chain_client, router_address: str, slippage_bps: int = 500):
        self.chain_client = chain_client
        self.router_address = router_address
        self.slippage_bps = slippage_bps
        self.router_contract = chain_client.contract(router_address, ROUTER_ABI)
        self.logger = setup_logger(__name__)

    async def get_expected_out(self, amount_in: int, path: List[str]) -> int:
        """getAmountsOut → ожидаемый выход последнего хопа"""
        try:
            amounts = await self.chain_client.call(self.router_contract, "getAmountsOut", amount_in, path)
        except ChainError as e:
            raise QuoteError(f"Quote failed: {e.reason}")

        if not amounts or len(amounts) < 2:
            raise QuoteError(f"Unexpected getAmountsOut result: {amounts!r}")

        return int(amounts[1])

    async def quote(self, amount_in: int, path: List[str]) -> int:
        """Минимально допустимый выход для свопа"""
        expected_out = await self.get_expected_out(amount_in, path)
        amount_out_min = apply_slippage(expected_out, self.slippage_bps)
        self.logger.debug(f"📊 Expected out: {expected_out}, min out: {amount_out_min}")
        return amount_out_min
