from typing import Dict, List

from config.constants import ERC20_ABI
from core.errors import ChainError
from core.token_registry import TokenDescriptor
from utils.logger import setup_logger


class BalanceService:
    def __init__(self, chain_client, wallet):
        self.chain_client = chain_client
        self.wallet = wallet
        self.logger = setup_logger(__name__)

    async def check_balances(self, tokens: List[TokenDescriptor]) -> Dict[str, int]:
        """Баланс каждого токена каталога (ошибки чтения только логируются)"""
        self.logger.info("💰 Checking token balances...")
        balances = {}

        for token in tokens:
            token_contract = self.chain_client.contract(token.address, ERC20_ABI)
            try:
                balance = await self.chain_client.call(token_contract, "balanceOf", self.wallet.address)
            except ChainError as e:
                self.logger.warning(f"   {token.symbol}: Error reading balance ({e})")
                continue

            balances[token.symbol] = balance
            self.logger.info(f"   {token.symbol}: {token.format_amount(balance)}")

            await self._verify_decimals(token, token_contract)

        return balances

    async def _verify_decimals(self, token: TokenDescriptor, token_contract):
        try:
            onchain_decimals = await self.chain_client.call(token_contract, "decimals")
        except ChainError as e:
            self.logger.debug(f"ℹ️ Could not read decimals for {token.symbol}: {e}")
            return

        if onchain_decimals != token.decimals:
            self.logger.warning(
                f"⚠️ {token.symbol} decimals mismatch: catalog {token.decimals}, on-chain {onchain_decimals}"
            )
