"""
Unit tests for severity classification and referral resolution.
"""

import pytest

from insight_engine.domain.entities import Severity
from insight_engine.domain.services.referral_resolver import NO_REFERRAL, ReferralResolver
from insight_engine.domain.services.severity_classifier import SeverityClassifier, classify_with_bands
from insight_engine.domain.value_objects import DEFAULT_T_SCORE_BANDS, AssessmentMethod


@pytest.fixture
def classifier(catalog):
    return SeverityClassifier(catalog)


@pytest.fixture
def resolver(catalog):
    return ReferralResolver(catalog)


class TestSeverityClassifier:
    @pytest.mark.parametrize(
        "score, expected",
        [
            (0, Severity.NORMAL),
            (64.99, Severity.NORMAL),
            (65, Severity.BORDERLINE),
            (69.99, Severity.BORDERLINE),
            (70, Severity.CLINICAL),
            (118.5, Severity.CLINICAL),
        ],
    )
    @pytest.mark.parametrize("method", [AssessmentMethod.T_SCORE_WEIGHTED, AssessmentMethod.T_SCORE_NON_WEIGHTED])
    def test_t_score_bands(self, classifier, method, score, expected):
        assert classifier.classify("depression", score, method) is expected

    @pytest.mark.parametrize(
        "issue_id, score, expected",
        [
            ("anxiety", 49.99, Severity.NORMAL),
            ("anxiety", 50, Severity.BORDERLINE),
            ("anxiety", 70, Severity.CLINICAL),
            ("depression", 45, Severity.BORDERLINE),
            ("depression", 65, Severity.CLINICAL),
            ("adhd", 74.9, Severity.BORDERLINE),
            ("ocd", 47.9, Severity.NORMAL),
        ],
    )
    def test_weighted_average_uses_issue_bands(self, classifier, issue_id, score, expected):
        assert classifier.classify(issue_id, score, AssessmentMethod.WEIGHTED_AVERAGE) is expected

    def test_unknown_issue_is_normal(self, classifier):
        assert classifier.classify("insomnia", 99, AssessmentMethod.WEIGHTED_AVERAGE) is Severity.NORMAL

    def test_classification_never_decreases_with_score(self):
        order = [Severity.NORMAL, Severity.BORDERLINE, Severity.CLINICAL]
        ranks = [order.index(classify_with_bands(s / 4, DEFAULT_T_SCORE_BANDS)) for s in range(0, 480)]

        assert ranks == sorted(ranks)


class TestReferralResolver:
    def test_normal_severity_has_no_referral(self, resolver):
        assert resolver.resolve("anxiety", Severity.NORMAL) is NO_REFERRAL

    @pytest.mark.parametrize("severity", [Severity.BORDERLINE, Severity.CLINICAL])
    def test_concerning_severity_attaches_course_and_contact(self, resolver, severity):
        resolved = resolver.resolve("depression", severity)

        assert resolved.recommended_course_id == "507f1f77bcf86cd799439022"
        assert resolved.professional_referral.required is True
        assert resolved.professional_referral.contact_details.name == "Dr. Michael Chen"
        assert resolved.professional_referral.contact_details.alternate_phone == "+1-555-0202"

    def test_unknown_issue_has_no_referral(self, resolver):
        assert resolver.resolve("insomnia", Severity.CLINICAL) is NO_REFERRAL
