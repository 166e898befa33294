"""
Child nutrition application service.

Appends nutrition records and keeps the child's recommendation list in
step with the history.
"""

import logging

from insight_engine.domain.entities.nutrition import NutritionRecord, NutritionReport, Recommendation
from insight_engine.domain.repositories.nutrition_repository import INutritionRepository
from insight_engine.domain.services.nutrition_analyzer import NutritionAnalyzer

NO_NUTRITION_DATA_MESSAGE = "No nutrition records found for analysis"


class ChildNutritionService:
    def __init__(
        self,
        nutrition_repository: INutritionRepository,
        analyzer: NutritionAnalyzer,
        logger: logging.Logger | None = None,
    ):
        self.nutrition_repository = nutrition_repository
        self.analyzer = analyzer
        self.logger = logger or logging.getLogger(__name__)

    async def add_nutrition_entry(self, child_id: str, record: NutritionRecord) -> list[Recommendation]:
        """
        Append a nutrition record, then regenerate and replace the recommendation list.

        Returns:
            The new recommendation list
        """
        records = await self.nutrition_repository.append_record(child_id, record)
        recommendations = self.analyzer.generate_recommendations(records)
        await self.nutrition_repository.replace_recommendations(child_id, recommendations)
        self.logger.info(
            f"Added nutrition record for child {child_id}; "
            f"{len(recommendations)} recommendations generated"
        )
        return recommendations

    async def regenerate_recommendations(self, child_id: str) -> list[Recommendation]:
        records = await self.nutrition_repository.list_records(child_id)
        recommendations = self.analyzer.generate_recommendations(records)
        await self.nutrition_repository.replace_recommendations(child_id, recommendations)
        return recommendations

    async def get_nutrition_analysis(self, child_id: str) -> NutritionReport:
        """Nutrition report for a child; ``has_data`` is False when there is no history."""
        records = await self.nutrition_repository.list_records(child_id)
        if not records:
            return NutritionReport(child_id=child_id, has_data=False, message=NO_NUTRITION_DATA_MESSAGE)

        latest = records[-1]
        return NutritionReport(
            child_id=child_id,
            has_data=True,
            analysis=self.analyzer.analyze(latest),
            record_count=len(records),
            latest_measurement=latest.physical_measurement,
            recommendations=await self.nutrition_repository.get_recommendations(child_id),
        )
