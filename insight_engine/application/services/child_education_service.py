"""
Child education application service.

Appends grade records and keeps the child's suggestion list in step
with the history.
"""

import logging

from insight_engine.domain.entities.education import EducationRecord, PerformanceReport, Suggestion
from insight_engine.domain.repositories.education_repository import IEducationRepository
from insight_engine.domain.services.education_performance_analyzer import EducationPerformanceAnalyzer

NO_EDUCATION_DATA_MESSAGE = "No education records found for analysis"


class ChildEducationService:
    def __init__(
        self,
        education_repository: IEducationRepository,
        analyzer: EducationPerformanceAnalyzer,
        logger: logging.Logger | None = None,
    ):
        self.education_repository = education_repository
        self.analyzer = analyzer
        self.logger = logger or logging.getLogger(__name__)

    async def add_grade_record(self, child_id: str, record: EducationRecord) -> list[Suggestion]:
        """
        Append a grade record, then regenerate and replace the suggestion list.

        Returns:
            The new suggestion list
        """
        records = await self.education_repository.append_record(child_id, record)
        suggestions = self.analyzer.generate_suggestions(records)
        await self.education_repository.replace_suggestions(child_id, suggestions)
        self.logger.info(
            f"Added grade record {record.grade_year} for child {child_id}; "
            f"{len(suggestions)} suggestions generated"
        )
        return suggestions

    async def regenerate_suggestions(self, child_id: str) -> list[Suggestion]:
        records = await self.education_repository.list_records(child_id)
        suggestions = self.analyzer.generate_suggestions(records)
        await self.education_repository.replace_suggestions(child_id, suggestions)
        return suggestions

    async def get_performance_analysis(self, child_id: str) -> PerformanceReport:
        """Performance report for a child; ``has_data`` is False when there is no history."""
        records = await self.education_repository.list_records(child_id)
        if not records:
            return PerformanceReport(child_id=child_id, has_data=False, message=NO_EDUCATION_DATA_MESSAGE)

        return PerformanceReport(
            child_id=child_id,
            has_data=True,
            analysis=self.analyzer.analyze_performance(records),
            record_count=len(records),
            latest_grade=records[-1].grade_year,
            suggestions=await self.education_repository.get_suggestions(child_id),
        )
