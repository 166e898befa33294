"""
Domain services.

Pure, synchronous analyzers of the insight engine.
"""

from insight_engine.domain.services.advisory_rules import AdvisoryRule, RuleCascade, sort_by_priority
from insight_engine.domain.services.assessment_orchestrator import AssessmentOrchestrator
from insight_engine.domain.services.education_performance_analyzer import (
    EducationPerformanceAnalyzer,
    marks_to_gpa,
)
from insight_engine.domain.services.nutrition_analyzer import (
    NutritionAnalyzer,
    calculate_bmi,
    calculate_health_score,
    calculate_healthy_habits_score,
    get_bmi_category,
    is_healthy_bmi,
)
from insight_engine.domain.services.referral_resolver import ReferralResolver
from insight_engine.domain.services.score_normalizer import ScoreNormalizer
from insight_engine.domain.services.severity_classifier import SeverityClassifier

__all__ = [
    "AdvisoryRule",
    "AssessmentOrchestrator",
    "EducationPerformanceAnalyzer",
    "NutritionAnalyzer",
    "ReferralResolver",
    "RuleCascade",
    "ScoreNormalizer",
    "SeverityClassifier",
    "calculate_bmi",
    "calculate_health_score",
    "calculate_healthy_habits_score",
    "get_bmi_category",
    "is_healthy_bmi",
    "marks_to_gpa",
    "sort_by_priority",
]
