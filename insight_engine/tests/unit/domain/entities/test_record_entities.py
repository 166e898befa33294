"""
Unit tests for education and nutrition record entities.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from insight_engine.domain.entities import (
    EatingHabits,
    EducationRecord,
    NutritionRecord,
    PerformanceAnalysis,
    PerformanceTrend,
    PhysicalMeasurement,
    SubjectGrade,
    Suggestion,
    SuggestionType,
)
from insight_engine.domain.value_objects import AdvisoryPriority
from insight_engine.tests.conftest import make_education_record


class TestEducationRecord:
    def test_average(self):
        record = make_education_record("Grade 5", Math=80, English=70, Science=90)

        assert record.average == 80

    def test_requires_a_subject(self):
        with pytest.raises(PydanticValidationError):
            EducationRecord(grade_year="Grade 5", subjects=[])

    @pytest.mark.parametrize("marks", [-1, 100.5])
    def test_marks_out_of_range(self, marks):
        with pytest.raises(PydanticValidationError):
            SubjectGrade(subject="Math", marks=marks)

    def test_duplicate_subjects_rejected(self):
        # Arrange
        subjects = [
            SubjectGrade(subject="Math", marks=40),
            SubjectGrade(subject="Math", marks=45),
        ]

        # Act & Assert
        with pytest.raises(PydanticValidationError, match="Duplicate subjects"):
            EducationRecord(grade_year="Grade 5", subjects=subjects)

    def test_records_are_immutable(self):
        record = make_education_record("Grade 5", Math=80)

        with pytest.raises(PydanticValidationError):
            record.grade_year = "Grade 6"


class TestSuggestion:
    def test_critical_priority_is_not_a_study_priority(self):
        with pytest.raises(PydanticValidationError):
            Suggestion(
                subject="Math",
                suggestion="Practice",
                priority=AdvisoryPriority.CRITICAL,
                type=SuggestionType.PERFORMANCE,
            )

    def test_empty_analysis_defaults(self):
        analysis = PerformanceAnalysis.empty()

        assert analysis.current_average == 0
        assert analysis.trend is PerformanceTrend.STABLE
        assert analysis.trend_strength == 0
        assert analysis.subjects_needing_attention == []
        assert analysis.overall_gpa == 0


class TestNutritionRecord:
    def test_eight_habit_flags(self):
        assert len(EatingHabits().flags()) == 8

    def test_notes_limited_to_500_characters(self):
        with pytest.raises(PydanticValidationError):
            NutritionRecord(notes="x" * 501)

    @pytest.mark.parametrize("height, weight", [(260, 40), (150, 250), (-1, 40)])
    def test_measurement_bounds(self, height, weight):
        with pytest.raises(PydanticValidationError):
            PhysicalMeasurement(height_cm=height, weight_kg=weight)

    def test_measurements_are_optional(self):
        record = NutritionRecord()

        assert record.physical_measurement.height_cm is None
        assert not any(record.eating_habits.flags().values())
