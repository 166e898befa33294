"""
Interface for the per-child assessment history.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from insight_engine.domain.entities.assessment import AssessmentResult


class IAssessmentRepository(ABC):
    @abstractmethod
    async def add(self, result: AssessmentResult) -> AssessmentResult:
        """Append a result to the owning child's history."""
        pass

    @abstractmethod
    async def get_by_id(self, child_id: str, assessment_id: UUID) -> AssessmentResult | None:
        pass

    @abstractmethod
    async def list_by_child_id(self, child_id: str) -> list[AssessmentResult]:
        """All results for a child, oldest first."""
        pass
