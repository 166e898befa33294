"""
Interface for education record histories and their suggestion lists.
"""

from abc import ABC, abstractmethod

from insight_engine.domain.entities.education import EducationRecord, Suggestion


class IEducationRepository(ABC):
    """
    Append-only grade histories keyed by child id.

    ``replace_suggestions`` must swap the whole list at once.
    """

    @abstractmethod
    async def append_record(self, child_id: str, record: EducationRecord) -> list[EducationRecord]:
        """Append a record and return the full history in append order."""
        pass

    @abstractmethod
    async def list_records(self, child_id: str) -> list[EducationRecord]:
        pass

    @abstractmethod
    async def get_suggestions(self, child_id: str) -> list[Suggestion]:
        pass

    @abstractmethod
    async def replace_suggestions(self, child_id: str, suggestions: list[Suggestion]) -> None:
        pass
