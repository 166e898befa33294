"""
Score normalizer.

Maps a raw answer onto the 0-100 scale and splits it into per-issue
contributions using the question's weightages.
"""

import logging
import math
from dataclasses import dataclass

from insight_engine.domain.entities.assessment import Question
from insight_engine.domain.utils.numeric import clamp

BOOLEAN_TRUE_SCORE = 100.0
BOOLEAN_FALSE_SCORE = 0.0


@dataclass(frozen=True)
class IssueContribution:
    issue_id: str
    issue_name: str
    value: float
    weightage: float


class ScoreNormalizer:
    """Normalizes answers against a question's rating scale and value table."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(__name__)

    def normalize_answer(self, question: Question, answer: bool | float | str) -> float | None:
        """
        Normalize one answer to the 0-100 scale.

        Booleans map to 100/0. Text answers are looked up in the
        question's option table and otherwise parsed as numbers. Numbers
        are rescaled linearly from the rating scale when the question has
        one and are taken as already on 0-100 when it does not; either way
        the result is clamped to 0-100.

        Args:
            question: Question the answer belongs to
            answer: Raw submitted answer

        Returns:
            The normalized value, or None when the answer cannot be scored
        """
        if isinstance(answer, bool):
            return BOOLEAN_TRUE_SCORE if answer else BOOLEAN_FALSE_SCORE

        if isinstance(answer, str):
            value = question.option_value(answer)
            if value is None:
                try:
                    value = float(answer.strip())
                except ValueError:
                    self._logger.warning(
                        f"Unscorable answer '{answer}' for question {question.id}; skipping"
                    )
                    return None
        else:
            value = float(answer)

        if not math.isfinite(value):
            self._logger.warning(f"Non-finite answer for question {question.id}; skipping")
            return None

        scale = question.rating_scale
        if scale is not None:
            value = (value - scale.min) / (scale.max - scale.min) * 100

        return clamp(value)

    def contributions(self, question: Question, answer: bool | float | str) -> list[IssueContribution]:
        """Per-issue contributions of one answer, in the question's weightage order."""
        value = self.normalize_answer(question, answer)
        if value is None:
            return []
        return [
            IssueContribution(
                issue_id=w.issue_id,
                issue_name=w.issue_name,
                value=value,
                weightage=w.weightage,
            )
            for w in question.issue_weightages
        ]
