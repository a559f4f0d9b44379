from dataclasses import dataclass
from typing import List

from config.constants import explorer_address_url
from utils.logger import setup_logger


@dataclass(frozen=True)
class SwapSummary:
    total_swaps: int
    successful: int
    failed: int
    success_rate: float
    explorer_link: str

    def render(self) -> List[str]:
        return [
            "=" * 50,
            "🏁 AUTO SWAP COMPLETED",
            "=" * 50,
            f"Total Swaps: {self.total_swaps}",
            f"✅ Successful: {self.successful}",
            f"❌ Failed: {self.failed}",
            f"📊 Success Rate: {self.success_rate:.2f}%",
            f"🔗 Explorer: {self.explorer_link}",
            "=" * 50,
        ]


def build_summary(state, wallet_address: str, explorer_url: str) -> SwapSummary:
    """Итоговая статистика; при нуле попыток success rate = 0"""
    return SwapSummary(
        total_swaps=state.attempts_completed,
        successful=state.success_count,
        failed=state.failure_count,
        success_rate=state.success_rate,
        explorer_link=explorer_address_url(explorer_url, wallet_address)
    )


class SummaryService:
    def __init__(self, wallet_address: str, explorer_url: str):
        self.wallet_address = wallet_address
        self.explorer_url = explorer_url
        self.logger = setup_logger(__name__)

    def report(self, state) -> SwapSummary:
        summary = build_summary(state, self.wallet_address, self.explorer_url)
        for line in summary.render():
            self.logger.info(line)
        return summary
