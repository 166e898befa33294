"""
Education entities.

Grade records form an append-only history per child; suggestions are
derived from it and replaced wholesale whenever a record is added.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from insight_engine.domain.utils.datetime_utils import now_utc
from insight_engine.domain.utils.numeric import mean
from insight_engine.domain.value_objects.advisory import AdvisoryPriority


class PerformanceTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"

    def __str__(self) -> str:
        return self.value


class SuggestionType(str, Enum):
    PERFORMANCE = "performance"
    TREND = "trend"
    CONSISTENCY = "consistency"
    STRATEGIC = "strategic"

    def __str__(self) -> str:
        return self.value


class SubjectGrade(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject: str = Field(min_length=1)
    marks: float = Field(ge=0, le=100)


class EducationRecord(BaseModel):
    """Grades for one grade year, recorded at a point in time."""

    model_config = ConfigDict(frozen=True)

    grade_year: str = Field(min_length=1)
    subjects: list[SubjectGrade] = Field(min_length=1)
    recorded_at: datetime = Field(default_factory=now_utc)

    @field_validator("subjects")
    @classmethod
    def check_unique_subjects(cls, v: list[SubjectGrade]) -> list[SubjectGrade]:
        names = [s.subject for s in v]
        if len(names) != len(set(names)):
            raise ValueError("Duplicate subjects are not allowed in a grade record")
        return v

    @property
    def average(self) -> float:
        return mean([s.marks for s in self.subjects])

    @property
    def marks(self) -> list[float]:
        return [s.marks for s in self.subjects]


class Suggestion(BaseModel):
    """Study suggestion derived from the grade history."""

    model_config = ConfigDict(frozen=True)

    subject: str
    suggestion: str
    priority: AdvisoryPriority
    type: SuggestionType
    created_at: datetime = Field(default_factory=now_utc)

    @field_validator("priority")
    @classmethod
    def check_priority(cls, v: AdvisoryPriority) -> AdvisoryPriority:
        if v is AdvisoryPriority.CRITICAL:
            raise ValueError("Study suggestions are ranked low, medium or high")
        return v


class PerformanceAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_average: float = 0.0
    trend: PerformanceTrend = PerformanceTrend.STABLE
    trend_strength: float = 0.0
    subjects_needing_attention: list[str] = Field(default_factory=list)
    top_performing_subjects: list[str] = Field(default_factory=list)
    consistency_score: float = 0.0
    overall_gpa: float = 0.0

    @classmethod
    def empty(cls) -> "PerformanceAnalysis":
        """Zeroed, stable analysis used when there is no history."""
        return cls()


class PerformanceReport(BaseModel):
    """Analysis summary returned to callers; branch on ``has_data``."""

    child_id: str
    has_data: bool
    message: str | None = None
    analysis: PerformanceAnalysis | None = None
    record_count: int = 0
    latest_grade: str | None = None
    suggestions: list[Suggestion] = Field(default_factory=list)
