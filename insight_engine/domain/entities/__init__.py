"""
Domain entities.
"""

from insight_engine.domain.entities.assessment import (
    AnswerOption,
    AssessmentMetadata,
    AssessmentRecommendation,
    AssessmentResponse,
    AssessmentResult,
    IssueResult,
    IssueWeightage,
    ProfessionalReferral,
    Question,
    RatingScale,
    Severity,
)
from insight_engine.domain.entities.education import (
    EducationRecord,
    PerformanceAnalysis,
    PerformanceReport,
    PerformanceTrend,
    SubjectGrade,
    Suggestion,
    SuggestionType,
)
from insight_engine.domain.entities.nutrition import (
    BMICategory,
    EatingHabits,
    NutritionAnalysis,
    NutritionRecord,
    NutritionReport,
    PhysicalMeasurement,
    Recommendation,
    RecommendationCategory,
)

__all__ = [
    "AnswerOption",
    "AssessmentMetadata",
    "AssessmentRecommendation",
    "AssessmentResponse",
    "AssessmentResult",
    "BMICategory",
    "EatingHabits",
    "EducationRecord",
    "IssueResult",
    "IssueWeightage",
    "NutritionAnalysis",
    "NutritionRecord",
    "NutritionReport",
    "PerformanceAnalysis",
    "PerformanceReport",
    "PerformanceTrend",
    "PhysicalMeasurement",
    "ProfessionalReferral",
    "Question",
    "RatingScale",
    "Recommendation",
    "RecommendationCategory",
    "Severity",
    "SubjectGrade",
    "Suggestion",
    "SuggestionType",
]
