"""
In-Memory Nutrition Repository Module.
"""

from collections import defaultdict

from insight_engine.domain.entities.nutrition import NutritionRecord, Recommendation
from insight_engine.domain.repositories.nutrition_repository import INutritionRepository


class InMemoryNutritionRepository(INutritionRepository):
    def __init__(self):
        self._records: dict[str, list[NutritionRecord]] = defaultdict(list)
        self._recommendations: dict[str, list[Recommendation]] = {}

    async def append_record(self, child_id: str, record: NutritionRecord) -> list[NutritionRecord]:
        self._records[child_id].append(record)
        return list(self._records[child_id])

    async def list_records(self, child_id: str) -> list[NutritionRecord]:
        return list(self._records.get(child_id, []))

    async def get_recommendations(self, child_id: str) -> list[Recommendation]:
        return list(self._recommendations.get(child_id, []))

    async def replace_recommendations(self, child_id: str, recommendations: list[Recommendation]) -> None:
        self._recommendations[child_id] = list(recommendations)
