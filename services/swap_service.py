import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from web3 import Web3

from config.constants import ROUTER_ABI
from config.settings import SwapSettings
from core.token_registry import TokenDescriptor
from utils.logger import setup_logger
from utils.randomizer import Randomizer


class SwapOutcome(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class SwapAttempt:
    sequence_number: int
    from_token: TokenDescriptor
    to_token: TokenDescriptor
    outcome: SwapOutcome
    human_amount_in: Optional[float] = None
    base_amount_in: Optional[int] = None
    minimum_amount_out: Optional[int] = None
    tx_hash: Optional[str] = None
    block_number: Optional[int] = None
    failure_reason: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is SwapOutcome.SUCCESS


class SwapService:
    def __init__(self, chain_client, wallet, quote_service, router_address: str,
                 settings: SwapSettings, randomizer: Randomizer = None, clock=time.time):
        self.chain_client = chain_client
        self.wallet = wallet
        self.quote_service = quote_service
        self.settings = settings
        self.randomizer = randomizer or Randomizer()
        self.clock = clock
        self.logger = setup_logger(__name__)

        self.router_address = Web3.to_checksum_address(router_address)
        self.router_contract = chain_client.contract(self.router_address, ROUTER_ABI)

    async def execute_swap(self, sequence_number: int, from_token: TokenDescriptor,
                           to_token: TokenDescriptor) -> SwapAttempt:
        """Один своп from_token → to_token; ошибки возвращаются как FAILURE"""
        self.logger.info(f"🔄 Swap #{sequence_number}: {from_token.symbol} → {to_token.symbol}")

        # Значения накапливаем по шагам, чтобы FAILURE содержал всё, что успели посчитать
        details = {}
        try:
            human_amount = self.randomizer.get_random_amount(
                self.settings.amount_min, self.settings.amount_max
            )
            details['human_amount_in'] = human_amount
            self.logger.info(f"💰 Amount: {human_amount:.6f} {from_token.symbol}")

            amount_in = from_token.to_base_units(f"{human_amount:.6f}")
            details['base_amount_in'] = amount_in

            path = [
                Web3.to_checksum_address(from_token.address),
                Web3.to_checksum_address(to_token.address)
            ]
            amount_out_min = await self.quote_service.quote(amount_in, path)
            details['minimum_amount_out'] = amount_out_min

            deadline = int(self.clock()) + self.settings.deadline_seconds

            tx_hash = await self.chain_client.submit(
                self.router_contract,
                "swapExactTokensForTokens",
                amount_in,
                amount_out_min,
                path,
                self.wallet.address,
                deadline,
                gas_limit=self.settings.gas_limit
            )
            details['tx_hash'] = tx_hash
            self.logger.info(f"📤 TX Hash: {tx_hash}")

            receipt = await self.chain_client.wait_for_receipt(
                tx_hash, confirmations=self.settings.confirmations
            )
            block_number = receipt['blockNumber']
            self.logger.info(f"✅ Confirmed in block: {block_number}")

            return SwapAttempt(
                sequence_number=sequence_number,
                from_token=from_token,
                to_token=to_token,
                outcome=SwapOutcome.SUCCESS,
                block_number=block_number,
                **details
            )

        except Exception as e:
            self.logger.error(f"❌ Swap failed: {e}")
            return SwapAttempt(
                sequence_number=sequence_number,
                from_token=from_token,
                to_token=to_token,
                outcome=SwapOutcome.FAILURE,
                failure_reason=str(e),
                **details
            )
