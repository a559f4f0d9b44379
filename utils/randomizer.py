import random
from typing import Sequence, Tuple, TypeVar

from config.constants import AMOUNT_PRECISION

T = TypeVar("T")


class Randomizer:
    """Утилиты для генерации случайных значений (с подменяемым источником)"""

    def __init__(self, rng: random.Random = None):
        self.rng = rng or random.Random()

    def pick_pair(self, tokens: Sequence[T]) -> Tuple[T, T]:
        """Случайная пара (from, to) с разными концами"""
        if len(set(tokens)) < 2:
            raise ValueError("At least two distinct tokens are required to pick a pair")

        from_token = self.rng.choice(tokens)
        to_token = self.rng.choice(tokens)

        # Перевыбираем пока не получим другой токен
        while to_token == from_token:
            to_token = self.rng.choice(tokens)

        return from_token, to_token

    def get_random_amount(self, min_amount: float, max_amount: float,
                          precision: int = AMOUNT_PRECISION) -> float:
        """Случайная сумма из [min, max], округленная до precision знаков"""
        amount = round(self.rng.uniform(min_amount, max_amount), precision)
        # Округление не должно выталкивать за границы интервала
        return min(max(amount, min_amount), max_amount)

    def get_random_delay_ms(self, min_ms: int, max_ms: int) -> int:
        """Случайная задержка в миллисекундах"""
        return self.rng.randint(min_ms, max_ms)
