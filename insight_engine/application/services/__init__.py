"""
Application services.

Async coordinators between the repositories and the pure analyzers.
"""

from insight_engine.application.services.assessment_service import AssessmentService
from insight_engine.application.services.child_education_service import ChildEducationService
from insight_engine.application.services.child_nutrition_service import ChildNutritionService

__all__ = ["AssessmentService", "ChildEducationService", "ChildNutritionService"]
