import asyncio
from dataclasses import dataclass
from typing import Callable, List, Optional

from config.settings import SwapSettings
from core.token_registry import TokenDescriptor
from services.swap_service import SwapAttempt
from utils.logger import setup_logger
from utils.randomizer import Randomizer


@dataclass
class RunState:
    attempts_completed: int = 0
    success_count: int = 0
    failure_count: int = 0

    def record(self, attempt: SwapAttempt):
        self.attempts_completed += 1
        if attempt.succeeded:
            self.success_count += 1
        else:
            self.failure_count += 1

    @property
    def success_rate(self) -> float:
        if self.attempts_completed == 0:
            return 0.0
        return self.success_count / self.attempts_completed * 100


class RunLoop:
    """Ограниченная серия свопов со случайными паузами между ними"""

    def __init__(self, swap_service, tokens: List[TokenDescriptor], settings: SwapSettings,
                 randomizer: Randomizer = None, on_complete: Optional[Callable] = None,
                 sleep=asyncio.sleep):
        self.swap_service = swap_service
        self.tokens = list(tokens)
        self.settings = settings
        self.randomizer = randomizer or Randomizer()
        self.on_complete = on_complete
        self.sleep = sleep
        self.logger = setup_logger("RunLoop")
        self.state = RunState()

    async def run(self) -> RunState:
        max_swaps = self.settings.max_swaps

        self.logger.info("🎯 Starting auto swap with random pairs")
        self.logger.info(f"📊 Target: {max_swaps} swaps")
        self.logger.info(
            f"⏱️ Delay: {self.settings.delay_min_ms / 1000:g}-{self.settings.delay_max_ms / 1000:g} seconds"
        )

        while self.state.attempts_completed < max_swaps:
            from_token, to_token = self.randomizer.pick_pair(self.tokens)
            attempt = await self.swap_service.execute_swap(
                self.state.attempts_completed + 1, from_token, to_token
            )
            self.state.record(attempt)

            self.logger.info(
                f"📈 Progress: {self.state.attempts_completed}/{max_swaps} | "
                f"Success: {self.state.success_count} | Failed: {self.state.failure_count}"
            )

            if self.state.attempts_completed < max_swaps:
                delay_ms = self.randomizer.get_random_delay_ms(
                    self.settings.delay_min_ms, self.settings.delay_max_ms
                )
                self.logger.info(f"⏳ Waiting {delay_ms / 1000:g} seconds...")
                await self.sleep(delay_ms / 1000)

        if self.on_complete:
            self.on_complete(self.state)

        return self.state
