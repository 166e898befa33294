"""
Domain value objects.
"""

from insight_engine.domain.value_objects.advisory import AdvisoryPriority
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod
from insight_engine.domain.value_objects.threshold_catalog import (
    DEFAULT_T_SCORE_BANDS,
    IssueConfig,
    NormativeStats,
    ProfessionalContact,
    SeverityBand,
    SeverityBands,
    ThresholdCatalog,
)

__all__ = [
    "DEFAULT_T_SCORE_BANDS",
    "AdvisoryPriority",
    "AssessmentMethod",
    "IssueConfig",
    "NormativeStats",
    "ProfessionalContact",
    "SeverityBand",
    "SeverityBands",
    "ThresholdCatalog",
]
