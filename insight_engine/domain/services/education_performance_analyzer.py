"""
Education performance analyzer.

Computes trend, consistency and GPA metrics over a child's grade-record
history and derives ranked study suggestions from them.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from insight_engine.domain.entities.education import (
    EducationRecord,
    PerformanceAnalysis,
    PerformanceTrend,
    Suggestion,
    SuggestionType,
)
from insight_engine.domain.services.advisory_rules import AdvisoryRule, RuleCascade
from insight_engine.domain.utils.datetime_utils import Clock, now_utc
from insight_engine.domain.utils.numeric import mean, population_std_dev, round_half_up
from insight_engine.domain.value_objects.advisory import AdvisoryPriority

TREND_THRESHOLD = 5.0
RECENT_WINDOW = 3
ATTENTION_MARKS = 60.0
TOP_MARKS = 85.0
MAX_LISTED_SUBJECTS = 3
DECLINE_STRENGTH_TRIGGER = 0.3
LOW_CONSISTENCY = 60.0
ADVANCED_GPA = 3.5

GPA_BANDS = ((90.0, 4.0), (80.0, 3.0), (70.0, 2.0), (60.0, 1.0))


def marks_to_gpa(marks: float) -> float:
    """Map a percentage to the 0.0-4.0 GPA scale."""
    for floor, gpa in GPA_BANDS:
        if marks >= floor:
            return gpa
    return 0.0


def _trend(averages: Sequence[float]) -> tuple[PerformanceTrend, float]:
    # The recent window never swallows the whole history, so there is always an older part to compare
    if len(averages) < 2:
        return PerformanceTrend.STABLE, 0.0

    window = min(RECENT_WINDOW, len(averages) - 1)
    difference = mean(averages[-window:]) - mean(averages[:-window])

    if difference > TREND_THRESHOLD:
        trend = PerformanceTrend.IMPROVING
    elif difference < -TREND_THRESHOLD:
        trend = PerformanceTrend.DECLINING
    else:
        return PerformanceTrend.STABLE, 0.0

    return trend, round_half_up(min(abs(difference) / 10, 1.0), 2)


@dataclass(frozen=True)
class SuggestionContext:
    analysis: PerformanceAnalysis
    created_at: datetime


def _suggestion(
    ctx: SuggestionContext,
    subject: str,
    text: str,
    priority: AdvisoryPriority,
    suggestion_type: SuggestionType,
) -> Suggestion:
    return Suggestion(
        subject=subject,
        suggestion=text,
        priority=priority,
        type=suggestion_type,
        created_at=ctx.created_at,
    )


SUGGESTION_RULES: list[AdvisoryRule[SuggestionContext, Suggestion]] = [
    AdvisoryRule(
        name="subject_attention",
        when=lambda ctx: bool(ctx.analysis.subjects_needing_attention),
        build=lambda ctx: [
            _suggestion(
                ctx,
                subject,
                f"Focus on improving {subject}. Consider additional practice sessions "
                "and consulting with the teacher.",
                AdvisoryPriority.HIGH,
                SuggestionType.PERFORMANCE,
            )
            for subject in ctx.analysis.subjects_needing_attention
        ],
    ),
    AdvisoryRule(
        name="declining_trend",
        when=lambda ctx: ctx.analysis.trend is PerformanceTrend.DECLINING
        and ctx.analysis.trend_strength > DECLINE_STRENGTH_TRIGGER,
        build=lambda ctx: [
            _suggestion(
                ctx,
                "Overall Performance",
                "Recent decline in overall performance detected. Consider reviewing "
                "study habits and time management strategies.",
                AdvisoryPriority.HIGH,
                SuggestionType.TREND,
            )
        ],
    ),
    AdvisoryRule(
        name="improving_trend",
        when=lambda ctx: ctx.analysis.trend is PerformanceTrend.IMPROVING,
        build=lambda ctx: [
            _suggestion(
                ctx,
                "Overall Performance",
                "Great progress! Keep up the good work and maintain your current study routine.",
                AdvisoryPriority.LOW,
                SuggestionType.TREND,
            )
        ],
    ),
    AdvisoryRule(
        name="low_consistency",
        when=lambda ctx: ctx.analysis.consistency_score < LOW_CONSISTENCY,
        build=lambda ctx: [
            _suggestion(
                ctx,
                "Study Balance",
                "High variation in subject performance. Try to balance study time across "
                "all subjects for more consistent results.",
                AdvisoryPriority.MEDIUM,
                SuggestionType.CONSISTENCY,
            )
        ],
    ),
    AdvisoryRule(
        name="strategic_balance",
        when=lambda ctx: bool(ctx.analysis.top_performing_subjects)
        and bool(ctx.analysis.subjects_needing_attention),
        build=lambda ctx: [
            _suggestion(
                ctx,
                "Strategic Planning",
                f"Leverage strengths in {', '.join(ctx.analysis.top_performing_subjects)} "
                "to boost confidence while working on weaker areas.",
                AdvisoryPriority.MEDIUM,
                SuggestionType.STRATEGIC,
            )
        ],
    ),
    AdvisoryRule(
        name="advanced_learning",
        when=lambda ctx: ctx.analysis.overall_gpa >= ADVANCED_GPA,
        build=lambda ctx: [
            _suggestion(
                ctx,
                "Advanced Learning",
                "Excellent academic performance! Consider exploring advanced topics "
                "or competitive examinations.",
                AdvisoryPriority.LOW,
                SuggestionType.STRATEGIC,
            )
        ],
    ),
]


class EducationPerformanceAnalyzer:
    """Pure analysis over an append-ordered list of education records."""

    def __init__(
        self,
        rules: Sequence[AdvisoryRule[SuggestionContext, Suggestion]] | None = None,
        clock: Clock = now_utc,
    ):
        self._cascade = RuleCascade(SUGGESTION_RULES if rules is None else rules)
        self._clock = clock

    @property
    def cascade(self) -> RuleCascade[SuggestionContext, Suggestion]:
        return self._cascade

    def analyze_performance(self, records: Sequence[EducationRecord]) -> PerformanceAnalysis:
        """
        Compute performance metrics for a grade history.

        Args:
            records: Records in append (chronological) order

        Returns:
            The analysis; the zeroed stable default when there are no records
        """
        if not records:
            return PerformanceAnalysis.empty()

        averages = [record.average for record in records]
        trend, trend_strength = _trend(averages)

        latest = records[-1]
        attention = [s.subject for s in latest.subjects if s.marks < ATTENTION_MARKS]
        top = [s.subject for s in latest.subjects if s.marks >= TOP_MARKS]

        consistency = max(0.0, 100 - population_std_dev(latest.marks))
        gpa = mean([marks_to_gpa(avg) for avg in averages])

        return PerformanceAnalysis(
            current_average=round_half_up(averages[-1], 2),
            trend=trend,
            trend_strength=trend_strength,
            subjects_needing_attention=attention[:MAX_LISTED_SUBJECTS],
            top_performing_subjects=top[:MAX_LISTED_SUBJECTS],
            consistency_score=round_half_up(consistency, 2),
            overall_gpa=round_half_up(gpa, 2),
        )

    def generate_suggestions(
        self, records: Sequence[EducationRecord], created_at: datetime | None = None
    ) -> list[Suggestion]:
        """
        Run the suggestion cascade over the analysis of ``records``.

        Every suggestion in one run shares ``created_at``.
        """
        if not records:
            return []
        context = SuggestionContext(
            analysis=self.analyze_performance(records),
            created_at=created_at or self._clock(),
        )
        return self._cascade.evaluate(context)
