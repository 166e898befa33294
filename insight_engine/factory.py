"""
Insight engine composition root.

Builds the analyzers and application services around one loaded
threshold catalog.
"""

import logging
from dataclasses import dataclass

from insight_engine.application.services import (
    AssessmentService,
    ChildEducationService,
    ChildNutritionService,
)
from insight_engine.core.config import Settings, get_settings, load_threshold_catalog
from insight_engine.core.logging_config import setup_logging
from insight_engine.domain.repositories import (
    IAssessmentRepository,
    IEducationRepository,
    INutritionRepository,
    IQuestionRepository,
)
from insight_engine.domain.services import (
    AssessmentOrchestrator,
    EducationPerformanceAnalyzer,
    NutritionAnalyzer,
)
from insight_engine.domain.value_objects import ThresholdCatalog
from insight_engine.infrastructure.repositories.memory import (
    InMemoryAssessmentRepository,
    InMemoryEducationRepository,
    InMemoryNutritionRepository,
    InMemoryQuestionRepository,
)


@dataclass(frozen=True)
class InsightEngine:
    """Wired analyzers and services sharing one catalog."""

    settings: Settings
    catalog: ThresholdCatalog
    orchestrator: AssessmentOrchestrator
    education_analyzer: EducationPerformanceAnalyzer
    nutrition_analyzer: NutritionAnalyzer
    assessment_service: AssessmentService
    education_service: ChildEducationService
    nutrition_service: ChildNutritionService


def create_insight_engine(
    settings: Settings | None = None,
    catalog: ThresholdCatalog | None = None,
    question_repository: IQuestionRepository | None = None,
    assessment_repository: IAssessmentRepository | None = None,
    education_repository: IEducationRepository | None = None,
    nutrition_repository: INutritionRepository | None = None,
    configure_logging: bool = True,
) -> InsightEngine:
    """
    Create a fully wired engine.

    Repositories default to the in-memory implementations.

    Args:
        settings: Engine settings; the cached settings when omitted
        catalog: Threshold catalog; loaded from ``settings`` when omitted
        configure_logging: Apply the engine logging configuration

    Returns:
        The wired engine
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings)

    logger = logging.getLogger("insight_engine")
    if catalog is None:
        catalog = load_threshold_catalog(settings.catalog_path)

    orchestrator = AssessmentOrchestrator(
        catalog,
        logger=logging.getLogger("insight_engine.assessment"),
        weightage_warning_limit=settings.WEIGHTAGE_WARNING_LIMIT,
    )
    education_analyzer = EducationPerformanceAnalyzer()
    nutrition_analyzer = NutritionAnalyzer()

    engine = InsightEngine(
        settings=settings,
        catalog=catalog,
        orchestrator=orchestrator,
        education_analyzer=education_analyzer,
        nutrition_analyzer=nutrition_analyzer,
        assessment_service=AssessmentService(
            question_repository=question_repository or InMemoryQuestionRepository(),
            assessment_repository=assessment_repository or InMemoryAssessmentRepository(),
            orchestrator=orchestrator,
            default_method=settings.DEFAULT_ASSESSMENT_METHOD,
        ),
        education_service=ChildEducationService(
            education_repository=education_repository or InMemoryEducationRepository(),
            analyzer=education_analyzer,
        ),
        nutrition_service=ChildNutritionService(
            nutrition_repository=nutrition_repository or InMemoryNutritionRepository(),
            analyzer=nutrition_analyzer,
        ),
    )
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} ready with {len(catalog)} catalogued issues")
    return engine
