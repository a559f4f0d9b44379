import asyncio
import logging
import os
import signal
import sys

sys.path.append(os.path.dirname(__file__))

from config.settings import Config
from core.chain_client import ChainClient
from core.errors import AutoSwapError, ConfigError
from core.gas_monitor import GasMonitor
from core.run_loop import RunLoop, RunState
from core.token_registry import TokenRegistry
from core.wallet_manager import WalletSession, resolve_private_key
from services.approval_service import ApprovalService
from services.balance_service import BalanceService
from services.quote_service import QuoteService
from services.summary_service import SummaryService
from services.swap_service import SwapService
from utils.input_utils import safe_getpass
from utils.logger import setup_logger
from utils.randomizer import Randomizer
from utils.security import encrypt_private_key


class RiseAutoSwapper:
    def __init__(self, config: Config = None, randomizer: Randomizer = None):
        self.config = config or Config()
        self.randomizer = randomizer or Randomizer()
        self.logger = setup_logger("AutoSwapper")
        self.settings = None
        self.wallet = None
        self.chain_client = None
        self.registry = None
        self.swap_service = None
        self.summary_service = None

    async def initialize(self, private_key: str) -> bool:
        """Подключение, проверка балансов и approve токенов"""
        self.logger.info("🚀 Rise Testnet Auto Swapper")

        try:
            issues = self.config.get_config_issues()
            if issues:
                raise ConfigError("; ".join(issues))

            self.settings = self.config.get_swap_settings()
            self.registry = TokenRegistry.from_config(self.config.tokens)
            self.wallet = WalletSession(private_key)

            network = self.config.network
            self.chain_client = ChainClient(
                network['rpc_url'],
                self.wallet,
                chain_id=network.get('chain_id'),
                gas_monitor=GasMonitor(),
                receipt_timeout=self.settings.receipt_timeout
            )
            self.chain_client.connect()

            self.logger.info(f"🔗 Connected to {self.config.get_network_display_info()}")
            self.logger.info(f"👛 Wallet: {self.wallet.address}")

            tokens = self.registry.list_tokens()
            await BalanceService(self.chain_client, self.wallet).check_balances(tokens)

            approval_service = ApprovalService(
                self.chain_client,
                self.wallet,
                gas_limit=self.settings.approve_gas_limit,
                skip_sufficient=self.settings.skip_sufficient_allowance,
                required_amount=self.settings.amount_max
            )
            await approval_service.ensure_approvals(tokens, self.config.router_address)

            quote_service = QuoteService(
                self.chain_client, self.config.router_address, self.settings.slippage_bps
            )
            self.swap_service = SwapService(
                self.chain_client,
                self.wallet,
                quote_service,
                self.config.router_address,
                self.settings,
                randomizer=self.randomizer
            )
            self.summary_service = SummaryService(self.wallet.address, network['explorer'])
            return True

        except (AutoSwapError, ValueError) as e:
            self.logger.error(f"❌ Error during initialization: {e}")
            return False

    async def start_auto_swapping(self) -> RunState:
        run_loop = RunLoop(
            self.swap_service,
            self.registry.list_tokens(),
            self.settings,
            randomizer=self.randomizer,
            on_complete=self.summary_service.report
        )
        return await run_loop.run()


async def run_auto_swapper(private_key: str, config: Config = None) -> int:
    swapper = RiseAutoSwapper(config)

    if not await swapper.initialize(private_key):
        swapper.logger.error("❌ Initialization failed")
        return 1

    swapper.logger.info("Press Ctrl+C to stop anytime...")
    await swapper.start_auto_swapping()
    return 0


def handle_interrupt(signum, frame):
    """Немедленная остановка без итоговой статистики"""
    print("\n🛑 Stopping auto swapper...")
    logging.shutdown()
    os._exit(0)


def encrypt_key_interactive() -> int:
    """Вывод зашифрованного ключа для ENCRYPTED_PRIVATE_KEY"""
    try:
        encrypted = encrypt_private_key(safe_getpass("🔐 Приватный ключ для шифрования"))
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    print(f"ENCRYPTED_PRIVATE_KEY={encrypted}")
    return 0


def main() -> int:
    signal.signal(signal.SIGINT, handle_interrupt)

    if "--encrypt-key" in sys.argv[1:]:
        return encrypt_key_interactive()

    try:
        private_key = resolve_private_key()
    except ValueError as e:
        print(f"❌ Invalid private key: {e}")
        return 1

    return asyncio.run(run_auto_swapper(private_key))


if __name__ == "__main__":
    sys.exit(main())
