"""
Advisory priority value object.

Suggestions, nutrition recommendations and assessment recommendations
are all ranked on the same scale.
"""

from enum import Enum


class AdvisoryPriority(str, Enum):
    """Priority of an advisory item, ordered by weight."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def __str__(self) -> str:
        return self.value

    @property
    def weight(self) -> int:
        return _PRIORITY_WEIGHTS[self]


_PRIORITY_WEIGHTS = {
    AdvisoryPriority.LOW: 1,
    AdvisoryPriority.MEDIUM: 2,
    AdvisoryPriority.HIGH: 3,
    AdvisoryPriority.CRITICAL: 4,
}
