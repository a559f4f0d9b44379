from typing import Dict, List
from web3 import Web3

from config.constants import ERC20_ABI, MAX_UINT256
from core.errors import AutoSwapError
from core.token_registry import TokenDescriptor
from utils.logger import setup_logger


class ApprovalService:
    """Выдаёт роутеру безлимитный allowance по каждому токену"""

    def __init__(self, chain_client, wallet, gas_limit: int = 100000,
                 skip_sufficient: bool = False, required_amount: float = 0):
        self.chain_client = chain_client
        self.wallet = wallet
        self.gas_limit = gas_limit
        self.skip_sufficient = skip_sufficient
        self.required_amount = required_amount
        self.logger = setup_logger(__name__)

    async def ensure_approvals(self, tokens: List[TokenDescriptor], spender: str) -> Dict[str, bool]:
        """Approve всех токенов по очереди; ошибка по одному токену не прерывает остальные"""
        self.logger.info("✅ Approving tokens...")
        spender_checksum = Web3.to_checksum_address(spender)
        results = {}

        for token in tokens:
            try:
                results[token.symbol] = await self._approve_token(token, spender_checksum)
            except AutoSwapError as e:
                self.logger.error(f"❌ Failed to approve {token.symbol}: {e}")
                results[token.symbol] = False

        approved = sum(1 for ok in results.values() if ok)
        self.logger.info(f"🔓 Approvals done: {approved}/{len(results)}")
        return results

    async def _approve_token(self, token: TokenDescriptor, spender: str) -> bool:
        token_contract = self.chain_client.contract(token.address, ERC20_ABI)

        # ✅ ОПЦИОНАЛЬНО ПРОВЕРЯЕМ ТЕКУЩИЙ ALLOWANCE
        if self.skip_sufficient:
            required = token.to_base_units(self.required_amount)
            current_allowance = await self.chain_client.call(
                token_contract, "allowance", self.wallet.address, spender
            )
            if current_allowance >= required:
                self.logger.info(f"✅ {token.symbol} allowance already sufficient")
                return True

        tx_hash = await self.chain_client.submit(
            token_contract, "approve", spender, MAX_UINT256, gas_limit=self.gas_limit
        )
        self.logger.info(f"📝 Approving {token.symbol}... TX: {tx_hash}")

        await self.chain_client.wait_for_receipt(tx_hash, confirmations=1)
        self.logger.info(f"✅ {token.symbol} approved")
        return True
