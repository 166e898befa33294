"""
Referral resolver.

Attaches the recommended course and the professional contact block to
issues whose severity warrants follow-up.
"""

from dataclasses import dataclass

from insight_engine.domain.entities.assessment import ProfessionalReferral, Severity
from insight_engine.domain.value_objects.threshold_catalog import ThresholdCatalog

REFERRAL_SEVERITIES = frozenset({Severity.BORDERLINE, Severity.CLINICAL})


@dataclass(frozen=True)
class ResolvedReferral:
    recommended_course_id: str | None = None
    professional_referral: ProfessionalReferral | None = None


NO_REFERRAL = ResolvedReferral()


class ReferralResolver:
    def __init__(self, catalog: ThresholdCatalog):
        self._catalog = catalog

    def resolve(self, issue_id: str, severity: Severity) -> ResolvedReferral:
        """
        Resolve course and referral for an issue.

        Args:
            issue_id: Catalog issue id
            severity: Classified severity of the issue

        Returns:
            Both fields populated for borderline and clinical issues,
            NO_REFERRAL for normal or uncatalogued ones
        """
        issue = self._catalog.get_issue(issue_id)
        if issue is None or severity not in REFERRAL_SEVERITIES:
            return NO_REFERRAL

        referral = None
        if issue.professional is not None:
            referral = ProfessionalReferral(required=True, contact_details=issue.professional)

        return ResolvedReferral(
            recommended_course_id=issue.recommended_course_id,
            professional_referral=referral,
        )
