"""
Nutrition entities.

Physical measurements and eating-habit checklists are appended per child;
recommendations are regenerated from the whole history on every append.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from insight_engine.domain.utils.datetime_utils import now_utc
from insight_engine.domain.value_objects.advisory import AdvisoryPriority


class BMICategory(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL_WEIGHT = "normal_weight"
    OVERWEIGHT = "overweight"
    OBESE = "obese"

    def __str__(self) -> str:
        return self.value


class RecommendationCategory(str, Enum):
    DIET = "diet"
    EXERCISE = "exercise"
    HABITS = "habits"
    MEDICAL = "medical"

    def __str__(self) -> str:
        return self.value


class PhysicalMeasurement(BaseModel):
    model_config = ConfigDict(frozen=True)

    height_cm: float | None = Field(default=None, ge=0, le=250)
    weight_kg: float | None = Field(default=None, ge=0, le=200)
    measurement_date: datetime | None = None


class EatingHabits(BaseModel):
    """The eight tracked eating-habit flags."""

    model_config = ConfigDict(frozen=True)

    eats_breakfast_regularly: bool = False
    drinks_enough_water: bool = False
    eats_fruits_daily: bool = False
    eats_vegetables_daily: bool = False
    limits_junk_food: bool = False
    has_regular_meal_times: bool = False
    enjoys_variety_of_foods: bool = False
    eats_appropriate_portions: bool = False

    def flags(self) -> dict[str, bool]:
        return self.model_dump()


class NutritionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    physical_measurement: PhysicalMeasurement = Field(default_factory=PhysicalMeasurement)
    eating_habits: EatingHabits = Field(default_factory=EatingHabits)
    recorded_at: datetime = Field(default_factory=now_utc)
    notes: str | None = Field(default=None, max_length=500)


class Recommendation(BaseModel):
    """Nutrition recommendation derived from the record history."""

    model_config = ConfigDict(frozen=True)

    category: RecommendationCategory
    recommendation: str
    priority: AdvisoryPriority
    target_area: str
    created_at: datetime = Field(default_factory=now_utc)


class NutritionAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_bmi: float
    bmi_category: BMICategory
    health_score: float
    healthy_habits_score: float
    is_healthy_weight: bool


class NutritionReport(BaseModel):
    """Analysis summary returned to callers; branch on ``has_data``."""

    child_id: str
    has_data: bool
    message: str | None = None
    analysis: NutritionAnalysis | None = None
    record_count: int = 0
    latest_measurement: PhysicalMeasurement | None = None
    recommendations: list[Recommendation] = Field(default_factory=list)
