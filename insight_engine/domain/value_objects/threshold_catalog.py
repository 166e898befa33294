"""
Threshold catalog value objects.

The catalog is the static configuration behind assessment scoring:
severity bands per issue and method, normative parameters for the
T-score methods, recommended courses and professional referral contacts.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from insight_engine.domain.exceptions import ConfigurationError
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod


class SeverityBand(BaseModel):
    """Closed-open score interval ``[min, max)``."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def check_order(self) -> "SeverityBand":
        if self.max < self.min:
            raise ValueError(f"Band max {self.max} is below min {self.min}")
        return self

    def contains(self, score: float) -> bool:
        return self.min <= score < self.max


class SeverityBands(BaseModel):
    """
    Normal, borderline and clinical bands for one scoring scale.

    Bands must be contiguous and ascending: normal ends where borderline
    starts and borderline ends where clinical starts.
    """

    model_config = ConfigDict(frozen=True)

    normal: SeverityBand
    borderline: SeverityBand
    clinical: SeverityBand

    @model_validator(mode="after")
    def check_contiguous(self) -> "SeverityBands":
        if self.normal.max != self.borderline.min or self.borderline.max != self.clinical.min:
            raise ValueError(
                "Severity bands must be contiguous: "
                f"normal ends at {self.normal.max}, borderline spans "
                f"[{self.borderline.min}, {self.borderline.max}), clinical starts at {self.clinical.min}"
            )
        return self


DEFAULT_T_SCORE_BANDS = SeverityBands(
    normal=SeverityBand(min=0, max=65),
    borderline=SeverityBand(min=65, max=70),
    clinical=SeverityBand(min=70, max=100),
)


class NormativeStats(BaseModel):
    """Population mean and standard deviation for the T-score transform."""

    model_config = ConfigDict(frozen=True)

    mean: float = 50.0
    std_dev: float = Field(default=10.0, ge=0)


class ProfessionalContact(BaseModel):
    """Referral contact block for an issue."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    alternate_phone: str | None = None
    email: EmailStr
    address: str


class IssueConfig(BaseModel):
    """Catalog entry for one issue."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    bands: SeverityBands
    normative: NormativeStats = NormativeStats()
    recommended_course_id: str | None = None
    professional: ProfessionalContact | None = None


class ThresholdCatalog(BaseModel):
    """
    Static scoring configuration keyed by issue id.

    Issue order is preserved from the source file and defines the
    catalog's iteration order.
    """

    model_config = ConfigDict(frozen=True)

    issues: dict[str, IssueConfig] = Field(default_factory=dict)
    t_score_bands: SeverityBands = DEFAULT_T_SCORE_BANDS

    @model_validator(mode="before")
    @classmethod
    def index_issue_list(cls, data: Any) -> Any:
        # Accept the file form, a list of issues, and key it by id
        if isinstance(data, dict) and isinstance(data.get("issues"), list):
            data = dict(data)
            data["issues"] = {issue["id"]: issue for issue in data["issues"]}
        return data

    @model_validator(mode="after")
    def check_keys(self) -> "ThresholdCatalog":
        for key, issue in self.issues.items():
            if key != issue.id:
                raise ValueError(f"Catalog key '{key}' does not match issue id '{issue.id}'")
        return self

    def __len__(self) -> int:
        return len(self.issues)

    def __contains__(self, issue_id: object) -> bool:
        return issue_id in self.issues

    @property
    def issue_ids(self) -> list[str]:
        return list(self.issues)

    def get_issue(self, issue_id: str) -> IssueConfig | None:
        return self.issues.get(issue_id)

    def bands_for(self, issue_id: str, method: AssessmentMethod) -> SeverityBands | None:
        """
        Band table for an issue under a scoring method.

        Both T-score methods share the global T-score bands; the weighted
        average uses the issue's own bands.

        Returns:
            The bands, or None when the issue is not catalogued
        """
        issue = self.issues.get(issue_id)
        if issue is None:
            return None
        if method.uses_t_score:
            return self.t_score_bands
        return issue.bands

    def normative_for(self, issue_id: str) -> NormativeStats:
        issue = self.issues.get(issue_id)
        return issue.normative if issue else NormativeStats()

    @classmethod
    def from_json_file(cls, path: str | Path) -> "ThresholdCatalog":
        """
        Load and validate a catalog from a JSON file.

        Raises:
            ConfigurationError: If the file cannot be read or fails validation
        """
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Unable to read threshold catalog {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid threshold catalog {path}: {e}") from e
