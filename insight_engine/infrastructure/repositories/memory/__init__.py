"""
In-Memory Repository Implementations.

This package contains in-memory implementations of repository interfaces,
primarily used for testing, development, and scenarios where
persistent storage is not required.
"""

from insight_engine.infrastructure.repositories.memory.assessment_repository import (
    InMemoryAssessmentRepository,
)
from insight_engine.infrastructure.repositories.memory.education_repository import (
    InMemoryEducationRepository,
)
from insight_engine.infrastructure.repositories.memory.nutrition_repository import (
    InMemoryNutritionRepository,
)
from insight_engine.infrastructure.repositories.memory.question_repository import (
    InMemoryQuestionRepository,
)

__all__ = [
    "InMemoryAssessmentRepository",
    "InMemoryEducationRepository",
    "InMemoryNutritionRepository",
    "InMemoryQuestionRepository",
]
