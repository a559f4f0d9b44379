from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, List, Optional

from core.errors import ConfigError, UnitConversionError


@dataclass(frozen=True)
class TokenDescriptor:
    address: str
    symbol: str
    decimals: int

    def to_base_units(self, amount) -> int:
        """Перевод человеческой суммы в base units без потери точности"""
        try:
            value = Decimal(str(amount))
        except InvalidOperation:
            raise UnitConversionError(f"Invalid amount for {self.symbol}: {amount!r}")

        if not value.is_finite() or value < 0:
            raise UnitConversionError(f"Invalid amount for {self.symbol}: {amount!r}")

        scaled = value.scaleb(self.decimals)
        if scaled != scaled.to_integral_value():
            raise UnitConversionError(
                f"Amount {amount} exceeds {self.decimals} decimal places of {self.symbol}"
            )
        return int(scaled)

    def from_base_units(self, amount: int) -> Decimal:
        """Перевод base units в человеческую сумму"""
        return Decimal(int(amount)).scaleb(-self.decimals)

    def format_amount(self, amount: int) -> str:
        """Форматирование суммы для логов"""
        return f"{self.from_base_units(amount):.6f}"


class TokenRegistry:
    """Статический каталог токенов в порядке объявления"""

    def __init__(self, tokens: Iterable[TokenDescriptor]):
        self._tokens = tuple(tokens)

    @classmethod
    def from_config(cls, tokens_config: List[dict]) -> "TokenRegistry":
        tokens = []
        for entry in tokens_config:
            try:
                tokens.append(TokenDescriptor(
                    address=entry['address'],
                    symbol=entry['symbol'],
                    decimals=int(entry['decimals'])
                ))
            except (KeyError, TypeError, ValueError) as e:
                raise ConfigError(f"Malformed token entry {entry!r}: {e}")
        return cls(tokens)

    def list_tokens(self) -> List[TokenDescriptor]:
        return list(self._tokens)

    def get(self, symbol: str) -> Optional[TokenDescriptor]:
        for token in self._tokens:
            if token.symbol == symbol:
                return token
        return None

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)
