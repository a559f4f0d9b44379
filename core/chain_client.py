import asyncio
from requests.exceptions import RequestException
from web3 import Web3
from web3.exceptions import ContractLogicError, TimeExhausted

from core.errors import (
    ChainError,
    ConnectivityError,
    ContractRevertError,
    TransactionTimeoutError
)
from core.gas_monitor import GasMonitor
from utils.logger import setup_logger


class ChainClient:
    """Подписывает и отправляет вызовы, читает состояние контрактов, ждёт подтверждений"""

    def __init__(self, rpc_url: str, wallet, chain_id: int = None, gas_monitor: GasMonitor = None,
                 receipt_timeout: int = 180, poll_latency: float = 1.0, web3_instance=None):
        self.rpc_url = rpc_url
        self.wallet = wallet
        self.expected_chain_id = int(chain_id) if chain_id else None
        self.gas_monitor = gas_monitor or GasMonitor()
        self.receipt_timeout = receipt_timeout
        self.poll_latency = poll_latency
        self.logger = setup_logger("ChainClient")
        self.web3 = web3_instance or Web3(Web3.HTTPProvider(rpc_url, request_kwargs={'timeout': 30}))
        self.chain_id = None

    def connect(self) -> int:
        """Проверка подключения к RPC и chain id, возвращает номер блока"""
        try:
            if not self.web3.is_connected():
                raise ConnectivityError(f"RPC endpoint is unreachable: {self.rpc_url}")
            self.chain_id = self.web3.eth.chain_id
            block_number = self.web3.eth.block_number
        except ChainError:
            raise
        except Exception as e:
            raise self._translate_error(e, "connect")

        if self.expected_chain_id and self.chain_id != self.expected_chain_id:
            raise ConnectivityError(
                f"Unexpected chain id {self.chain_id}, expected {self.expected_chain_id}"
            )

        self.logger.info(f"🌐 Connected to chain {self.chain_id}, block: {block_number}")
        return block_number

    def contract(self, address: str, abi: list):
        return self.web3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    async def call(self, contract, fn_name: str, *args):
        """Read-only вызов функции контракта"""
        try:
            return getattr(contract.functions, fn_name)(*args).call()
        except Exception as e:
            raise self._translate_error(e, fn_name)

    async def submit(self, contract, fn_name: str, *args, gas_limit: int) -> str:
        """Подписать и отправить транзакцию, возвращает hash"""
        try:
            transaction = getattr(contract.functions, fn_name)(*args).build_transaction({
                'from': self.wallet.address,
                'gas': gas_limit,
                'gasPrice': self.gas_monitor.get_optimal_gas_price(self.web3),
                'nonce': self.web3.eth.get_transaction_count(self.wallet.address, 'pending'),
                'chainId': self.chain_id or self.web3.eth.chain_id
            })

            signed_txn = self.wallet.sign_transaction(transaction)
            tx_hash = self.web3.eth.send_raw_transaction(signed_txn.raw_transaction)
        except Exception as e:
            raise self._translate_error(e, fn_name)

        return Web3.to_hex(tx_hash)

    async def wait_for_receipt(self, tx_hash: str, confirmations: int = 1):
        """Ожидание включения транзакции в блок и нужного числа подтверждений"""
        try:
            receipt = await asyncio.to_thread(
                self.web3.eth.wait_for_transaction_receipt,
                tx_hash,
                timeout=self.receipt_timeout,
                poll_latency=self.poll_latency
            )
        except Exception as e:
            raise self._translate_error(e, f"receipt {tx_hash}")

        if receipt['status'] != 1:
            raise ContractRevertError(f"Transaction {tx_hash} reverted in block {receipt['blockNumber']}")

        while confirmations > 1:
            try:
                current_block = self.web3.eth.block_number
            except Exception as e:
                raise self._translate_error(e, "block_number")
            if current_block - receipt['blockNumber'] + 1 >= confirmations:
                break
            await asyncio.sleep(self.poll_latency)

        return receipt

    def _translate_error(self, error: Exception, action: str) -> ChainError:
        """Приводим ошибки web3/requests к ChainError"""
        if isinstance(error, ChainError):
            return error
        if isinstance(error, ContractLogicError):
            return ContractRevertError(f"{action} reverted: {error}")
        if isinstance(error, TimeExhausted):
            return TransactionTimeoutError(f"{action} timed out: {error}")
        if isinstance(error, (RequestException, ConnectionError, TimeoutError)):
            return ConnectivityError(f"{action} failed, RPC unreachable: {error}")
        return ChainError(f"{action} failed: {error}")
