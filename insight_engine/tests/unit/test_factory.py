"""
Tests for the engine composition root.
"""

import pytest

from insight_engine.core.config import Settings
from insight_engine.domain.entities import AssessmentResponse
from insight_engine.factory import create_insight_engine
from insight_engine.infrastructure.repositories.memory import InMemoryQuestionRepository
from insight_engine.tests.conftest import make_education_record, make_nutrition_record


@pytest.fixture
def settings():
    return Settings(_env_file=None, DEFAULT_ASSESSMENT_METHOD="t_score_non_weighted")


class TestCreateInsightEngine:
    def test_wires_shared_catalog(self, settings):
        engine = create_insight_engine(settings=settings, configure_logging=False)

        assert len(engine.catalog) == 5
        assert engine.orchestrator.catalog is engine.catalog
        assert engine.assessment_service.orchestrator is engine.orchestrator
        assert engine.education_service.analyzer is engine.education_analyzer
        assert engine.nutrition_service.analyzer is engine.nutrition_analyzer

    def test_injected_catalog_is_used(self, settings, catalog):
        engine = create_insight_engine(settings=settings, catalog=catalog, configure_logging=False)

        assert engine.catalog is catalog

    @pytest.mark.asyncio
    async def test_end_to_end(self, settings, mixed_questions):
        # Arrange
        engine = create_insight_engine(
            settings=settings,
            question_repository=InMemoryQuestionRepository(mixed_questions),
            configure_logging=False,
        )

        # Act
        result = await engine.assessment_service.process_assessment(
            child_id="child-1",
            responses=[AssessmentResponse(question_id="worry", answer=5)],
            conducted_by="parent-1",
        )
        suggestions = await engine.education_service.add_grade_record(
            "child-1", make_education_record("Grade 5", Math=45)
        )
        recommendations = await engine.nutrition_service.add_nutrition_entry("child-1", make_nutrition_record())

        # Assert
        assert result.method.value == "t_score_non_weighted"
        assert [i.issue_id for i in result.issues] == ["anxiety", "depression"]
        assert suggestions[0].subject == "Math"
        assert recommendations[0].target_area == "Positive Reinforcement"
