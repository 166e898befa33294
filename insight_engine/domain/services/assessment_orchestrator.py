"""
Assessment orchestrator.

Drives normalization, severity classification and referral resolution
across every issue touched by a response set, and composes the final
AssessmentResult.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from insight_engine.domain.entities.assessment import (
    AssessmentMetadata,
    AssessmentRecommendation,
    AssessmentResponse,
    AssessmentResult,
    IssueResult,
    Question,
    Severity,
)
from insight_engine.domain.exceptions import ValidationError
from insight_engine.domain.services.advisory_rules import sort_by_priority
from insight_engine.domain.services.referral_resolver import ReferralResolver
from insight_engine.domain.services.score_normalizer import ScoreNormalizer
from insight_engine.domain.services.severity_classifier import SeverityClassifier
from insight_engine.domain.utils.datetime_utils import Clock, now_utc
from insight_engine.domain.utils.numeric import clamp, mean, round_half_up, weighted_mean
from insight_engine.domain.value_objects.advisory import AdvisoryPriority
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod
from insight_engine.domain.value_objects.threshold_catalog import NormativeStats, ThresholdCatalog

NO_CONCERNS_SUMMARY = "No significant concerns identified"
MAX_SUMMARY_CONCERNS = 3
T_SCORE_MEAN = 50.0
T_SCORE_STD_DEV = 10.0


@dataclass
class _IssueAccumulator:
    issue_name: str
    values: list[float] = field(default_factory=list)
    weights: list[float] = field(default_factory=list)
    question_ids: set[str] = field(default_factory=set)

    def add(self, question_id: str, value: float, weight: float) -> None:
        self.values.append(value)
        self.weights.append(weight)
        self.question_ids.add(question_id)


def to_t_score(value: float, normative: NormativeStats) -> float:
    """Convert a mean answer to the T scale (mean 50, SD 10) against the issue norms."""
    z = 0.0 if normative.std_dev == 0 else (value - normative.mean) / normative.std_dev
    return T_SCORE_MEAN + T_SCORE_STD_DEV * z


def join_names(names: Sequence[str]) -> str:
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} and {names[-1]}"


def build_overall_summary(issues: Sequence[IssueResult]) -> str:
    """
    Templated summary naming up to three primary concerns.

    ``issues`` must already be ordered by score, highest first.
    """
    concerns = [issue for issue in issues if issue.severity is not Severity.NORMAL]
    if not concerns:
        return NO_CONCERNS_SUMMARY

    named = join_names([issue.issue_name for issue in concerns[:MAX_SUMMARY_CONCERNS]])
    if any(issue.severity is Severity.CLINICAL for issue in concerns):
        return (
            f"Assessment indicates {len(concerns)} concern(s) requiring attention: {named}. "
            "Professional consultation is strongly recommended."
        )
    return (
        f"Assessment shows {len(concerns)} borderline concern(s): {named}. "
        "Professional evaluation is recommended."
    )


def build_recommendation(issue: IssueResult) -> AssessmentRecommendation | None:
    if issue.severity is Severity.CLINICAL:
        return AssessmentRecommendation(
            category=issue.issue_name,
            text=f"Immediate professional intervention recommended for {issue.issue_name}",
            priority=AdvisoryPriority.CRITICAL,
        )
    if issue.severity is Severity.BORDERLINE:
        return AssessmentRecommendation(
            category=issue.issue_name,
            text=f"Professional consultation recommended for {issue.issue_name}",
            priority=AdvisoryPriority.HIGH,
        )
    return None


class AssessmentOrchestrator:
    """
    Scores a questionnaire submission.

    The orchestrator is stateless apart from its collaborators; the same
    responses and questions always produce the same issues, concerns and
    recommendations.
    """

    def __init__(
        self,
        catalog: ThresholdCatalog,
        normalizer: ScoreNormalizer | None = None,
        classifier: SeverityClassifier | None = None,
        resolver: ReferralResolver | None = None,
        logger: logging.Logger | None = None,
        clock: Clock = now_utc,
        weightage_warning_limit: float = 100.0,
    ):
        self._catalog = catalog
        self._logger = logger or logging.getLogger(__name__)
        self._normalizer = normalizer or ScoreNormalizer(logger=self._logger)
        self._classifier = classifier or SeverityClassifier(catalog)
        self._resolver = resolver or ReferralResolver(catalog)
        self._clock = clock
        self._weightage_warning_limit = weightage_warning_limit

    @property
    def catalog(self) -> ThresholdCatalog:
        return self._catalog

    @staticmethod
    def parse_method(method: AssessmentMethod | str) -> AssessmentMethod:
        """
        Resolve a method selector.

        Raises:
            ValidationError: If the selector names no known method
        """
        if isinstance(method, AssessmentMethod):
            return method
        try:
            return AssessmentMethod(str(method).strip().lower())
        except ValueError:
            valid = ", ".join(m.value for m in AssessmentMethod)
            raise ValidationError(f"Invalid assessment method: {method}. Expected one of: {valid}")

    def score(
        self,
        responses: Sequence[AssessmentResponse],
        questions: Iterable[Question],
        method: AssessmentMethod | str,
        child_id: str,
        conducted_by: str,
    ) -> AssessmentResult:
        """
        Score a response set.

        Args:
            responses: Submitted answers
            questions: Question definitions for the referenced ids
            method: Scoring method selector
            child_id: Child the assessment belongs to
            conducted_by: Who administered the assessment

        Returns:
            The composed, immutable assessment result

        Raises:
            ValidationError: On an unknown method, an empty response set,
                or when no response resolves to a scorable catalogued issue
        """
        method = self.parse_method(method)
        if not responses:
            raise ValidationError("An assessment needs at least one response")

        accumulators = self._accumulate(responses, {q.id: q for q in questions})
        if not accumulators:
            raise ValidationError("No valid questions found")

        issues = [
            self._score_issue(issue_id, acc, method) for issue_id, acc in accumulators.items()
        ]
        issues.sort(key=lambda issue: issue.score, reverse=True)

        primary_concerns = [i.issue_name for i in issues if i.severity is not Severity.NORMAL]
        risk_indicators = [i.issue_name for i in issues if i.severity is Severity.CLINICAL]
        recommendations = sort_by_priority(
            rec for rec in (build_recommendation(issue) for issue in issues) if rec is not None
        )

        contributing_questions = set().union(*(acc.question_ids for acc in accumulators.values()))
        confidence = len(accumulators) / len(self._catalog) if len(self._catalog) else 0.0

        result = AssessmentResult(
            child_id=child_id,
            method=method,
            assessment_date=self._clock(),
            conducted_by=conducted_by,
            issues=issues,
            primary_concerns=primary_concerns,
            overall_summary=build_overall_summary(issues),
            recommendations=recommendations,
            metadata=AssessmentMetadata(
                total_questions=len(contributing_questions),
                confidence=round_half_up(confidence, 2),
                risk_indicators=risk_indicators,
            ),
        )
        self._logger.info(
            f"Scored assessment {result.assessment_id} for child {child_id} using {method}: "
            f"{len(issues)} issues, {len(primary_concerns)} concerns"
        )
        return result

    def _accumulate(
        self, responses: Sequence[AssessmentResponse], questions: dict[str, Question]
    ) -> dict[str, _IssueAccumulator]:
        accumulators: dict[str, _IssueAccumulator] = {}
        warned_issues: set[str] = set()
        warned_questions: set[str] = set()

        for response in responses:
            question = questions.get(response.question_id)
            if question is None:
                self._logger.warning(f"Unknown question {response.question_id}; skipping response")
                continue

            if (
                question.total_weightage > self._weightage_warning_limit
                and question.id not in warned_questions
            ):
                warned_questions.add(question.id)
                self._logger.warning(
                    f"Question {question.id} weightages sum to {question.total_weightage}, "
                    f"above {self._weightage_warning_limit}"
                )

            for contribution in self._normalizer.contributions(question, response.answer):
                if contribution.issue_id not in self._catalog:
                    if contribution.issue_id not in warned_issues:
                        warned_issues.add(contribution.issue_id)
                        self._logger.warning(
                            f"Issue {contribution.issue_id} is not in the threshold catalog; skipping"
                        )
                    continue

                acc = accumulators.get(contribution.issue_id)
                if acc is None:
                    acc = accumulators[contribution.issue_id] = _IssueAccumulator(
                        issue_name=contribution.issue_name
                    )
                acc.add(question.id, contribution.value, contribution.weightage)

        return accumulators

    def _score_issue(
        self, issue_id: str, acc: _IssueAccumulator, method: AssessmentMethod
    ) -> IssueResult:
        t_score = None
        if method is AssessmentMethod.WEIGHTED_AVERAGE:
            average = weighted_mean(acc.values, acc.weights)
            score = round_half_up(clamp(average if average is not None else 0.0), 2)
            normalized = score
        else:
            if method is AssessmentMethod.T_SCORE_WEIGHTED:
                average = weighted_mean(acc.values, acc.weights)
                if average is None:
                    average = mean(acc.values)
            else:
                average = mean(acc.values)
            t_score = round_half_up(to_t_score(average, self._catalog.normative_for(issue_id)), 2)
            score = t_score
            normalized = clamp(t_score)

        severity = self._classifier.classify(issue_id, score, method)
        referral = self._resolver.resolve(issue_id, severity)

        return IssueResult(
            issue_id=issue_id,
            issue_name=acc.issue_name,
            score=score,
            normalized_score=normalized,
            t_score=t_score,
            severity=severity,
            recommended_course_id=referral.recommended_course_id,
            professional_referral=referral.professional_referral,
        )
