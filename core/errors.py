class AutoSwapError(Exception):
    """Базовая ошибка авто-свопера"""


class ConfigError(AutoSwapError):
    """Некорректная конфигурация"""


class UnitConversionError(AutoSwapError):
    """Сумма не помещается в точность токена"""


class ChainError(AutoSwapError):
    """Ошибка взаимодействия с сетью"""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ConnectivityError(ChainError):
    """RPC недоступен"""


class ContractRevertError(ChainError):
    """Транзакция или eth_call откатились"""


class TransactionTimeoutError(ChainError):
    """Не дождались receipt"""


class QuoteError(ChainError):
    """getAmountsOut не отработал"""
