"""
Interface for the question catalog store.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from insight_engine.domain.entities.assessment import Question


class IQuestionRepository(ABC):
    """Read access to assessment question definitions."""

    @abstractmethod
    async def get_by_ids(self, question_ids: Sequence[str], active_only: bool = True) -> list[Question]:
        """
        Fetch questions by id.

        Args:
            question_ids: Ids referenced by a submission
            active_only: Leave out deactivated questions

        Returns:
            The questions found; missing ids are simply absent
        """
        pass
