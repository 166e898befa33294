"""
Assessment entities.

Questions carry the issue weightages that drive scoring; an
AssessmentResult is the immutable outcome of scoring one submission.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from insight_engine.domain.utils.datetime_utils import now_utc
from insight_engine.domain.value_objects.advisory import AdvisoryPriority
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod
from insight_engine.domain.value_objects.threshold_catalog import ProfessionalContact


class Severity(str, Enum):
    """Severity classification of an issue score."""

    NORMAL = "normal"
    BORDERLINE = "borderline"
    CLINICAL = "clinical"

    def __str__(self) -> str:
        return self.value


class IssueWeightage(BaseModel):
    """Contribution strength of a question toward one issue."""

    model_config = ConfigDict(frozen=True)

    issue_id: str = Field(min_length=1)
    issue_name: str = Field(min_length=1)
    weightage: float = Field(ge=0, le=100)


class RatingScale(BaseModel):
    model_config = ConfigDict(frozen=True)

    min: float = 1
    max: float = 5

    @model_validator(mode="after")
    def check_span(self) -> "RatingScale":
        if self.max <= self.min:
            raise ValueError("Rating scale max must be greater than min")
        return self


class AnswerOption(BaseModel):
    """Entry of a question's categorical value table."""

    model_config = ConfigDict(frozen=True)

    option_text: str = Field(min_length=1)
    option_value: float


class Question(BaseModel):
    """Assessment question definition."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    text: str = ""
    issue_weightages: list[IssueWeightage] = Field(min_length=1)
    rating_scale: RatingScale | None = None
    options: list[AnswerOption] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("issue_weightages")
    @classmethod
    def check_unique_issues(cls, v: list[IssueWeightage]) -> list[IssueWeightage]:
        issue_ids = [w.issue_id for w in v]
        if len(issue_ids) != len(set(issue_ids)):
            raise ValueError("Duplicate issue IDs are not allowed in issue weightages")
        return v

    @property
    def total_weightage(self) -> float:
        return sum(w.weightage for w in self.issue_weightages)

    @property
    def primary_issue(self) -> IssueWeightage:
        """Weightage entry with the highest weight; first one wins a tie."""
        return max(self.issue_weightages, key=lambda w: w.weightage)

    def option_value(self, option_text: str) -> float | None:
        """Look up a categorical answer in the value table, ignoring case and surrounding space."""
        wanted = option_text.strip().casefold()
        for option in self.options:
            if option.option_text.strip().casefold() == wanted:
                return option.option_value
        return None


class AssessmentResponse(BaseModel):
    """One submitted answer."""

    question_id: str = Field(min_length=1)
    answer: bool | float | str


class ProfessionalReferral(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: bool = True
    contact_details: ProfessionalContact


class IssueResult(BaseModel):
    """Scored outcome for one issue."""

    model_config = ConfigDict(frozen=True)

    issue_id: str
    issue_name: str
    score: float
    normalized_score: float = Field(ge=0, le=100)
    t_score: float | None = None
    severity: Severity
    recommended_course_id: str | None = None
    professional_referral: ProfessionalReferral | None = None


class AssessmentRecommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    text: str
    priority: AdvisoryPriority


class AssessmentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_questions: int = Field(ge=0)
    confidence: float = Field(ge=0, le=1)
    risk_indicators: list[str] = Field(default_factory=list)


class AssessmentResult(BaseModel):
    """
    Immutable result of scoring one assessment submission.

    Owned by the child's assessment history once stored.
    """

    model_config = ConfigDict(frozen=True)

    assessment_id: UUID = Field(default_factory=uuid4)
    child_id: str
    method: AssessmentMethod
    assessment_date: datetime = Field(default_factory=now_utc)
    conducted_by: str
    issues: list[IssueResult] = Field(default_factory=list)
    primary_concerns: list[str] = Field(default_factory=list)
    overall_summary: str
    recommendations: list[AssessmentRecommendation] = Field(default_factory=list)
    metadata: AssessmentMetadata

    def get_issue(self, issue_id: str) -> IssueResult | None:
        return next((issue for issue in self.issues if issue.issue_id == issue_id), None)
