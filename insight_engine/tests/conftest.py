"""
Shared fixtures for the insight engine test suite.
"""

import logging
from datetime import datetime

import pytest

from insight_engine.core.config.settings import BUNDLED_CATALOG_PATH
from insight_engine.domain.entities.assessment import (
    AnswerOption,
    AssessmentResponse,
    IssueWeightage,
    Question,
    RatingScale,
)
from insight_engine.domain.entities.education import EducationRecord, SubjectGrade
from insight_engine.domain.entities.nutrition import EatingHabits, NutritionRecord, PhysicalMeasurement
from insight_engine.domain.services.assessment_orchestrator import AssessmentOrchestrator
from insight_engine.domain.utils.datetime_utils import UTC
from insight_engine.domain.value_objects.threshold_catalog import ThresholdCatalog

FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=UTC)

ALL_HABITS = EatingHabits(
    eats_breakfast_regularly=True,
    drinks_enough_water=True,
    eats_fruits_daily=True,
    eats_vegetables_daily=True,
    limits_junk_food=True,
    has_regular_meal_times=True,
    enjoys_variety_of_foods=True,
    eats_appropriate_portions=True,
)


def make_question(question_id: str, *weightages: tuple[str, str, float], **kwargs) -> Question:
    """Build a question from ``(issue_id, issue_name, weightage)`` tuples."""
    return Question(
        id=question_id,
        issue_weightages=[
            IssueWeightage(issue_id=issue_id, issue_name=name, weightage=weight)
            for issue_id, name, weight in weightages
        ],
        **kwargs,
    )


def make_education_record(grade_year: str, **marks: float) -> EducationRecord:
    return EducationRecord(
        grade_year=grade_year,
        subjects=[SubjectGrade(subject=subject, marks=value) for subject, value in marks.items()],
        recorded_at=FIXED_NOW,
    )


def make_nutrition_record(
    height_cm: float | None = 150,
    weight_kg: float | None = 45,
    habits: EatingHabits = ALL_HABITS,
) -> NutritionRecord:
    return NutritionRecord(
        physical_measurement=PhysicalMeasurement(height_cm=height_cm, weight_kg=weight_kg),
        eating_habits=habits,
        recorded_at=FIXED_NOW,
    )


@pytest.fixture(scope="session")
def catalog() -> ThresholdCatalog:
    """The bundled five-issue threshold catalog."""
    return ThresholdCatalog.from_json_file(BUNDLED_CATALOG_PATH)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def test_logger() -> logging.Logger:
    # Outside the insight_engine namespace so caplog still sees records after setup_logging
    return logging.getLogger("tests.insight_engine")


@pytest.fixture
def orchestrator(catalog, test_logger, fixed_clock) -> AssessmentOrchestrator:
    return AssessmentOrchestrator(catalog, logger=test_logger, clock=fixed_clock)


@pytest.fixture
def anxiety_questions() -> list[Question]:
    """Two anxiety questions answered directly on the 0-100 scale."""
    return [
        make_question("q1", ("anxiety", "Anxiety Disorder", 75)),
        make_question("q2", ("anxiety", "Anxiety Disorder", 25)),
    ]


@pytest.fixture
def mixed_questions() -> list[Question]:
    """Rating-scale questions spanning anxiety, depression and ADHD."""
    scale = RatingScale(min=1, max=5)
    frequency = [
        AnswerOption(option_text="Never", option_value=1),
        AnswerOption(option_text="Sometimes", option_value=3),
        AnswerOption(option_text="Often", option_value=5),
    ]
    return [
        make_question("worry", ("anxiety", "Anxiety Disorder", 80), ("depression", "Depression", 20), rating_scale=scale),
        make_question("sad", ("depression", "Depression", 100), rating_scale=scale, options=frequency),
        make_question("focus", ("adhd", "ADHD", 60), rating_scale=scale),
    ]


@pytest.fixture
def responses_factory():
    def _build(**answers) -> list[AssessmentResponse]:
        return [AssessmentResponse(question_id=qid, answer=answer) for qid, answer in answers.items()]

    return _build
