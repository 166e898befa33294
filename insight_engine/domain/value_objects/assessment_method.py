"""
Assessment scoring methods.
"""

from enum import Enum


class AssessmentMethod(str, Enum):
    """How per-issue answers are aggregated into an issue score."""

    WEIGHTED_AVERAGE = "weighted_average"
    T_SCORE_NON_WEIGHTED = "t_score_non_weighted"
    T_SCORE_WEIGHTED = "t_score_weighted"

    def __str__(self) -> str:
        return self.value

    @property
    def uses_t_score(self) -> bool:
        return self is not AssessmentMethod.WEIGHTED_AVERAGE
