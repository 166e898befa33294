"""
Repository interfaces.

Persistence is an external collaborator; the engine only sees these
abstract, async interfaces.
"""

from insight_engine.domain.repositories.assessment_repository import IAssessmentRepository
from insight_engine.domain.repositories.education_repository import IEducationRepository
from insight_engine.domain.repositories.nutrition_repository import INutritionRepository
from insight_engine.domain.repositories.question_repository import IQuestionRepository

__all__ = [
    "IAssessmentRepository",
    "IEducationRepository",
    "INutritionRepository",
    "IQuestionRepository",
]
