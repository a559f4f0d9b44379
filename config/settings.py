import os
import json
import copy
from dataclasses import dataclass
from typing import List
from dotenv import load_dotenv
from utils.logger import setup_logger
from config.constants import (
    RISE_NETWORK,
    ROUTER_ADDRESS,
    DEFAULT_TOKENS,
    DEFAULT_SWAP_SETTINGS,
    BPS_DENOMINATOR
)

load_dotenv()


@dataclass(frozen=True)
class SwapSettings:
    amount_min: float
    amount_max: float
    delay_min_ms: int
    delay_max_ms: int
    max_swaps: int
    slippage_bps: int
    gas_limit: int = 200000
    approve_gas_limit: int = 100000
    deadline_seconds: int = 300
    confirmations: int = 1
    receipt_timeout: int = 180
    skip_sufficient_allowance: bool = False


class Config:
    def __init__(self, config_path: str = "config/config.json"):
        self.logger = setup_logger("Config")
        self.config_path = config_path
        self.network = {}
        self.router_address = None
        self.tokens = []
        self.swap_config = {}
        self.approval_config = {}
        self.config_data = {}

        # Создаем папку config если её нет
        config_dir = os.path.dirname(config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        self.load_config()

    def load_config(self):
        """Загрузка конфигурации из JSON файла"""
        if not os.path.exists(self.config_path):
            self.logger.warning(f"⚠️ Config file not found: {self.config_path}")
            self.create_default_config()
            return

        try:
            with open(self.config_path, 'r') as f:
                self.config_data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"❌ JSON decode error in config: {e}")
            self.logger.info("🔄 Creating backup and generating new config...")
            self._backup_and_create_config()
            return

        self._apply_config_data()
        self.logger.info(
            f"✅ Configuration loaded: {self.network.get('name')} | {len(self.tokens)} tokens"
        )

    def _apply_config_data(self):
        """Раскладываем config_data по атрибутам с подстановкой окружения"""
        data = self._substitute_env(copy.deepcopy(self.config_data or {}))

        self.network = {**RISE_NETWORK, **self._safe_get(data, 'network', {})}
        self.router_address = self._safe_get(data, 'router_address', ROUTER_ADDRESS)
        self.tokens = self._safe_get(data, 'tokens', [])
        self.swap_config = {**DEFAULT_SWAP_SETTINGS, **self._safe_get(data, 'swap', {})}
        self.approval_config = self._safe_get(data, 'approval', {})

        # ✅ ПЕРЕОПРЕДЕЛЕНИЯ ИЗ ОКРУЖЕНИЯ
        rpc_override = os.getenv('RPC_URL')
        if rpc_override:
            self.network['rpc_url'] = rpc_override

        max_swaps_override = os.getenv('MAX_SWAPS')
        if max_swaps_override:
            self.swap_config['max_swaps'] = max_swaps_override

    def _safe_get(self, data, key, default):
        """Безопасное получение значения из словаря"""
        if not isinstance(data, dict):
            return default
        value = data.get(key)
        return default if value is None else value

    def _substitute_env(self, value):
        """Подстановка ${VAR} из переменных окружения"""
        if isinstance(value, dict):
            return {key: self._substitute_env(item) for key, item in value.items()}
        if isinstance(value, list):
            return [self._substitute_env(item) for item in value]
        if isinstance(value, str) and value.startswith('${') and value.endswith('}'):
            env_var = value[2:-1]
            return os.getenv(env_var, value)
        return value

    def _backup_and_create_config(self):
        """Создание бэкапа поврежденного конфига и генерация нового"""
        if os.path.exists(self.config_path):
            backup_path = self.config_path + '.backup'
            os.replace(self.config_path, backup_path)
            self.logger.info(f"💾 Backup created: {backup_path}")

        self.create_default_config()

    def create_default_config(self):
        """Создание конфигурации по умолчанию (RISE Testnet)"""
        self.logger.info("🔄 Creating default configuration...")

        self.config_data = {
            "network": dict(RISE_NETWORK),
            "router_address": ROUTER_ADDRESS,
            "tokens": [dict(token) for token in DEFAULT_TOKENS],
            "swap": dict(DEFAULT_SWAP_SETTINGS),
            "approval": {
                "skip_if_sufficient": False
            }
        }

        self.save_config()
        self._apply_config_data()

    def save_config(self):
        """Сохранение конфигурации в файл"""
        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.config_data, f, indent=2)
            self.logger.info(f"💾 Configuration saved to {self.config_path}")
        except OSError as e:
            self.logger.error(f"❌ Failed to save configuration: {e}")

    def get_swap_settings(self) -> SwapSettings:
        """✅ НАСТРОЙКИ СВОПОВ В ТИПИЗИРОВАННОМ ВИДЕ"""
        swap = self.swap_config
        return SwapSettings(
            amount_min=float(swap['amount_min']),
            amount_max=float(swap['amount_max']),
            delay_min_ms=int(swap['delay_min_ms']),
            delay_max_ms=int(swap['delay_max_ms']),
            max_swaps=int(swap['max_swaps']),
            slippage_bps=int(swap['slippage_bps']),
            gas_limit=int(swap['gas_limit']),
            approve_gas_limit=int(swap['approve_gas_limit']),
            deadline_seconds=int(swap['deadline_seconds']),
            confirmations=int(swap['confirmations']),
            receipt_timeout=int(swap['receipt_timeout']),
            skip_sufficient_allowance=bool(self.approval_config.get('skip_if_sufficient', False))
        )

    def get_config_issues(self) -> List[str]:
        """Список проблем конфигурации"""
        issues = []

        if not self.network.get('rpc_url'):
            issues.append("Network missing RPC URL")
        if not self.network.get('chain_id'):
            issues.append("Network missing chain_id")
        if not self.router_address:
            issues.append("Router address is not set")

        symbols = set()
        addresses = set()
        for token in self.tokens:
            if not isinstance(token, dict) or not token.get('address') or not token.get('symbol'):
                issues.append(f"Malformed token entry: {token}")
                continue
            decimals = token.get('decimals')
            if not isinstance(decimals, int) or decimals < 0:
                issues.append(f"Token {token['symbol']} has invalid decimals: {decimals}")
            symbols.add(token['symbol'])
            addresses.add(token['address'].lower())

        if len(symbols) < 2 or len(addresses) < 2:
            issues.append("At least two distinct tokens are required")

        try:
            settings = self.get_swap_settings()
        except (KeyError, TypeError, ValueError) as e:
            issues.append(f"Invalid swap settings: {e}")
            return issues

        if settings.amount_min <= 0 or settings.amount_min > settings.amount_max:
            issues.append("Swap amount range must satisfy 0 < min <= max")
        if settings.delay_min_ms < 0 or settings.delay_min_ms > settings.delay_max_ms:
            issues.append("Delay range must satisfy 0 <= min <= max")
        if settings.max_swaps < 0:
            issues.append("max_swaps must be non-negative")
        if not 0 <= settings.slippage_bps <= BPS_DENOMINATOR:
            issues.append(f"slippage_bps must be within 0..{BPS_DENOMINATOR}")
        if settings.confirmations < 1:
            issues.append("confirmations must be at least 1")

        return issues

    def validate_config(self) -> bool:
        """Валидация конфигурации при загрузке"""
        issues = self.get_config_issues()
        if issues:
            self.logger.warning(f"Config validation issues: {issues}")
        return len(issues) == 0

    def get_network_display_info(self) -> str:
        """Отображаемая информация о сети"""
        return (f"{self.network.get('name', 'Unknown')} "
                f"(ChainID: {self.network.get('chain_id', 'N/A')}, "
                f"Tokens: {len(self.tokens)})")

