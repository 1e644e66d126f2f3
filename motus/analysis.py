"""
Motus Analysis - Password strength estimation backed by zxcvbn.

Only the command-line layer calls analyze(); generators never do.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from zxcvbn import zxcvbn

from motus.core.log import get_logger

logger = get_logger('analysis')

# zxcvbn rejects or slows down sharply on long inputs; only this prefix is scored
MAX_ANALYZED_LENGTH = 72

STRENGTH_LABELS = ("very weak", "weak", "reasonable", "strong", "very strong")

# Report label -> zxcvbn crack time scenario
CRACK_TIME_SCENARIOS = {
    "100/h": "online_throttling_100_per_hour",
    "10/s": "online_no_throttling_10_per_second",
    "10^4/s": "offline_slow_hashing_1e4_per_second",
    "10^10/s": "offline_fast_hashing_1e10_per_second",
}


@dataclass(frozen=True)
class StrengthReport:
    """zxcvbn verdict for one password."""

    score: int
    guesses: float
    guesses_log10: float
    crack_times: Dict[str, str] = field(default_factory=dict)

    @property
    def strength(self) -> str:
        return STRENGTH_LABELS[self.score]

    @property
    def guesses_display(self) -> str:
        return f"10^{self.guesses_log10:.0f}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strength": self.strength,
            "guesses": self.guesses_display,
            "crack_times": dict(self.crack_times),
        }


def analyze(secret: str) -> StrengthReport:
    """
    Estimate how hard secret is to guess.

    Args:
        secret: The generated password

    Returns:
        StrengthReport with score (0-4), guess count and crack time estimates
    """
    result = zxcvbn(secret[:MAX_ANALYZED_LENGTH])
    display = result["crack_times_display"]

    report = StrengthReport(
        score=int(result["score"]),
        guesses=float(result["guesses"]),
        guesses_log10=float(result["guesses_log10"]),
        crack_times={label: str(display[key]) for label, key in CRACK_TIME_SCENARIOS.items()},
    )
    logger.debug("Strength score %d (%s)", report.score, report.strength)
    return report
