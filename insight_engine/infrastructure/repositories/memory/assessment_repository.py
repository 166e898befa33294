"""
In-Memory Assessment Repository Module.
"""

from collections import defaultdict
from uuid import UUID

from insight_engine.domain.entities.assessment import AssessmentResult
from insight_engine.domain.repositories.assessment_repository import IAssessmentRepository


class InMemoryAssessmentRepository(IAssessmentRepository):
    def __init__(self):
        self._history: dict[str, list[AssessmentResult]] = defaultdict(list)

    async def add(self, result: AssessmentResult) -> AssessmentResult:
        self._history[result.child_id].append(result)
        return result

    async def get_by_id(self, child_id: str, assessment_id: UUID) -> AssessmentResult | None:
        return next(
            (r for r in self._history.get(child_id, []) if r.assessment_id == assessment_id),
            None,
        )

    async def list_by_child_id(self, child_id: str) -> list[AssessmentResult]:
        return list(self._history.get(child_id, []))
