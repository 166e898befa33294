"""
Nutrition analyzer.

BMI, eating-habit and health-score computation over a child's
physical and habit records, plus the ranked recommendation cascade.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from insight_engine.domain.entities.nutrition import (
    BMICategory,
    EatingHabits,
    NutritionAnalysis,
    NutritionRecord,
    PhysicalMeasurement,
    Recommendation,
    RecommendationCategory,
)
from insight_engine.domain.services.advisory_rules import AdvisoryRule, RuleCascade
from insight_engine.domain.utils.datetime_utils import Clock, now_utc
from insight_engine.domain.utils.numeric import round_half_up
from insight_engine.domain.value_objects.advisory import AdvisoryPriority

UNDERWEIGHT_BELOW = 16.0
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0
HEALTHY_BMI_SCORE = 100.0
UNHEALTHY_BMI_SCORE = 70.0
BMI_CHANGE_ALERT = 2.0
PRAISE_HABITS_SCORE = 85.0


def calculate_bmi(height_cm: float | None, weight_kg: float | None) -> float:
    """BMI rounded to one decimal; 0 when either input is missing or non-positive."""
    if not height_cm or not weight_kg or height_cm <= 0 or weight_kg <= 0:
        return 0.0
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def get_bmi_category(bmi: float) -> BMICategory:
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BMICategory.NORMAL_WEIGHT
    if bmi < OBESE_FROM:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def is_healthy_bmi(bmi: float) -> bool:
    return UNDERWEIGHT_BELOW <= bmi < OVERWEIGHT_FROM


def calculate_healthy_habits_score(habits: EatingHabits) -> float:
    """Percentage of the eight habit flags that are set, to one decimal."""
    flags = habits.flags()
    return round_half_up(sum(flags.values()) / len(flags) * 100, 1)


def calculate_health_score(measurement: PhysicalMeasurement, habits: EatingHabits) -> float:
    bmi = calculate_bmi(measurement.height_cm, measurement.weight_kg)
    bmi_score = HEALTHY_BMI_SCORE if is_healthy_bmi(bmi) else UNHEALTHY_BMI_SCORE
    return round_half_up(0.5 * bmi_score + 0.5 * calculate_healthy_habits_score(habits), 1)


@dataclass(frozen=True)
class RecommendationContext:
    habits: EatingHabits
    bmi: float
    previous_bmi: float | None
    habits_score: float
    created_at: datetime

    @property
    def has_bmi(self) -> bool:
        return self.bmi > 0

    @property
    def category(self) -> BMICategory | None:
        return get_bmi_category(self.bmi) if self.has_bmi else None

    @property
    def bmi_change(self) -> float | None:
        if not self.has_bmi or not self.previous_bmi:
            return None
        return round_half_up(self.bmi - self.previous_bmi, 1)


def _recommendation(
    ctx: RecommendationContext,
    category: RecommendationCategory,
    text: str,
    priority: AdvisoryPriority,
    target_area: str,
) -> Recommendation:
    return Recommendation(
        category=category,
        recommendation=text,
        priority=priority,
        target_area=target_area,
        created_at=ctx.created_at,
    )


def _weight_priority(ctx: RecommendationContext) -> AdvisoryPriority:
    return AdvisoryPriority.CRITICAL if ctx.category is BMICategory.OBESE else AdvisoryPriority.HIGH


def _habit_rule(
    name: str,
    lacking: Callable[[EatingHabits], bool],
    category: RecommendationCategory,
    target_area: str,
    text: str,
) -> AdvisoryRule[RecommendationContext, Recommendation]:
    return AdvisoryRule(
        name=name,
        when=lambda ctx: lacking(ctx.habits),
        build=lambda ctx: [
            _recommendation(ctx, category, text, AdvisoryPriority.MEDIUM, target_area)
        ],
    )


def _bmi_change_recommendation(ctx: RecommendationContext) -> list[Recommendation]:
    change = ctx.bmi_change
    direction = "increased" if change > 0 else "decreased"
    return [
        _recommendation(
            ctx,
            RecommendationCategory.MEDICAL,
            f"Significant BMI change detected ({direction} by {abs(change):.1f}). "
            "Monitor closely and consult healthcare provider if trend continues.",
            AdvisoryPriority.HIGH,
            "BMI Monitoring",
        )
    ]


RECOMMENDATION_RULES: list[AdvisoryRule[RecommendationContext, Recommendation]] = [
    AdvisoryRule(
        name="underweight",
        when=lambda ctx: ctx.category is BMICategory.UNDERWEIGHT,
        build=lambda ctx: [
            _recommendation(
                ctx,
                RecommendationCategory.DIET,
                "Increase caloric intake with nutritious, energy-dense foods. Include more "
                "protein, healthy fats, and complex carbohydrates.",
                AdvisoryPriority.HIGH,
                "Weight Gain",
            ),
            _recommendation(
                ctx,
                RecommendationCategory.MEDICAL,
                "Consult with a pediatrician to rule out underlying health conditions "
                "affecting weight.",
                AdvisoryPriority.CRITICAL,
                "Medical Consultation",
            ),
        ],
    ),
    AdvisoryRule(
        name="excess_weight",
        when=lambda ctx: ctx.category in (BMICategory.OVERWEIGHT, BMICategory.OBESE),
        build=lambda ctx: [
            _recommendation(
                ctx,
                RecommendationCategory.DIET,
                "Focus on balanced meals with controlled portions. Reduce sugary drinks "
                "and processed foods.",
                _weight_priority(ctx),
                "Weight Management",
            ),
            _recommendation(
                ctx,
                RecommendationCategory.EXERCISE,
                "Increase physical activity to at least 60 minutes daily. Include both "
                "aerobic and strength exercises.",
                _weight_priority(ctx),
                "Physical Activity",
            ),
        ],
    ),
    _habit_rule(
        "breakfast",
        lambda h: not h.eats_breakfast_regularly,
        RecommendationCategory.HABITS,
        "Breakfast Habits",
        "Establish a regular breakfast routine. A nutritious breakfast improves focus "
        "and energy throughout the day.",
    ),
    _habit_rule(
        "hydration",
        lambda h: not h.drinks_enough_water,
        RecommendationCategory.HABITS,
        "Hydration",
        "Increase water intake to 6-8 glasses daily. Proper hydration supports overall "
        "health and cognitive function.",
    ),
    _habit_rule(
        "fruits_vegetables",
        lambda h: not h.eats_fruits_daily or not h.eats_vegetables_daily,
        RecommendationCategory.DIET,
        "Fruits & Vegetables",
        "Include at least 5 servings of fruits and vegetables daily for essential "
        "vitamins and minerals.",
    ),
    _habit_rule(
        "junk_food",
        lambda h: not h.limits_junk_food,
        RecommendationCategory.HABITS,
        "Junk Food Reduction",
        "Reduce junk food consumption. Replace with healthier snack alternatives like "
        "nuts, fruits, and yogurt.",
    ),
    _habit_rule(
        "meal_timing",
        lambda h: not h.has_regular_meal_times,
        RecommendationCategory.HABITS,
        "Meal Timing",
        "Establish consistent meal times to regulate metabolism and improve digestion.",
    ),
    _habit_rule(
        "food_variety",
        lambda h: not h.enjoys_variety_of_foods,
        RecommendationCategory.DIET,
        "Food Variety",
        "Introduce variety in meals to ensure diverse nutrient intake and develop "
        "healthy eating patterns.",
    ),
    AdvisoryRule(
        name="bmi_change",
        when=lambda ctx: ctx.bmi_change is not None and abs(ctx.bmi_change) > BMI_CHANGE_ALERT,
        build=_bmi_change_recommendation,
    ),
    AdvisoryRule(
        name="positive_reinforcement",
        when=lambda ctx: ctx.habits_score >= PRAISE_HABITS_SCORE,
        build=lambda ctx: [
            _recommendation(
                ctx,
                RecommendationCategory.HABITS,
                "Excellent eating habits! Continue maintaining this healthy lifestyle.",
                AdvisoryPriority.LOW,
                "Positive Reinforcement",
            )
        ],
    ),
]


class NutritionAnalyzer:
    """Pure analysis over an append-ordered list of nutrition records."""

    def __init__(
        self,
        rules: Sequence[AdvisoryRule[RecommendationContext, Recommendation]] | None = None,
        clock: Clock = now_utc,
    ):
        self._cascade = RuleCascade(RECOMMENDATION_RULES if rules is None else rules)
        self._clock = clock

    @property
    def cascade(self) -> RuleCascade[RecommendationContext, Recommendation]:
        return self._cascade

    def analyze(self, record: NutritionRecord) -> NutritionAnalysis:
        """Summarize one record, normally the latest."""
        measurement = record.physical_measurement
        bmi = calculate_bmi(measurement.height_cm, measurement.weight_kg)
        return NutritionAnalysis(
            current_bmi=bmi,
            bmi_category=get_bmi_category(bmi),
            health_score=calculate_health_score(measurement, record.eating_habits),
            healthy_habits_score=calculate_healthy_habits_score(record.eating_habits),
            is_healthy_weight=is_healthy_bmi(bmi),
        )

    def generate_recommendations(
        self, records: Sequence[NutritionRecord], created_at: datetime | None = None
    ) -> list[Recommendation]:
        """
        Run the recommendation cascade over the latest record.

        The BMI-change rule compares the latest record against the one
        before it. Every recommendation in one run shares ``created_at``.
        """
        if not records:
            return []

        latest = records[-1]
        previous_bmi = None
        if len(records) > 1:
            prior = records[-2].physical_measurement
            previous_bmi = calculate_bmi(prior.height_cm, prior.weight_kg)

        latest_measurement = latest.physical_measurement
        context = RecommendationContext(
            habits=latest.eating_habits,
            bmi=calculate_bmi(latest_measurement.height_cm, latest_measurement.weight_kg),
            previous_bmi=previous_bmi,
            habits_score=calculate_healthy_habits_score(latest.eating_habits),
            created_at=created_at or self._clock(),
        )
        return self._cascade.evaluate(context)
