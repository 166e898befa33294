"""
Interface for nutrition record histories and their recommendation lists.
"""

from abc import ABC, abstractmethod

from insight_engine.domain.entities.nutrition import NutritionRecord, Recommendation


class INutritionRepository(ABC):
    """
    Append-only nutrition histories keyed by child id.

    ``replace_recommendations`` must swap the whole list at once.
    """

    @abstractmethod
    async def append_record(self, child_id: str, record: NutritionRecord) -> list[NutritionRecord]:
        """Append a record and return the full history in append order."""
        pass

    @abstractmethod
    async def list_records(self, child_id: str) -> list[NutritionRecord]:
        pass

    @abstractmethod
    async def get_recommendations(self, child_id: str) -> list[Recommendation]:
        pass

    @abstractmethod
    async def replace_recommendations(self, child_id: str, recommendations: list[Recommendation]) -> None:
        pass
