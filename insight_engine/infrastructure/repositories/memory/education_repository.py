"""
In-Memory Education Repository Module.
"""

from collections import defaultdict

from insight_engine.domain.entities.education import EducationRecord, Suggestion
from insight_engine.domain.repositories.education_repository import IEducationRepository


class InMemoryEducationRepository(IEducationRepository):
    def __init__(self):
        self._records: dict[str, list[EducationRecord]] = defaultdict(list)
        self._suggestions: dict[str, list[Suggestion]] = {}

    async def append_record(self, child_id: str, record: EducationRecord) -> list[EducationRecord]:
        self._records[child_id].append(record)
        return list(self._records[child_id])

    async def list_records(self, child_id: str) -> list[EducationRecord]:
        return list(self._records.get(child_id, []))

    async def get_suggestions(self, child_id: str) -> list[Suggestion]:
        return list(self._suggestions.get(child_id, []))

    async def replace_suggestions(self, child_id: str, suggestions: list[Suggestion]) -> None:
        self._suggestions[child_id] = list(suggestions)
