"""
Assessment application service.

Resolves questions for a submission, scores it with the orchestrator and
records the result in the child's assessment history.
"""

import logging
from collections.abc import Sequence
from uuid import UUID

from insight_engine.domain.entities.assessment import AssessmentResponse, AssessmentResult, IssueResult
from insight_engine.domain.exceptions import DataNotFoundError, ValidationError
from insight_engine.domain.repositories.assessment_repository import IAssessmentRepository
from insight_engine.domain.repositories.question_repository import IQuestionRepository
from insight_engine.domain.services.assessment_orchestrator import AssessmentOrchestrator
from insight_engine.domain.value_objects.assessment_method import AssessmentMethod


class AssessmentService:
    """Coordinates question lookup, scoring and storage of assessments."""

    def __init__(
        self,
        question_repository: IQuestionRepository,
        assessment_repository: IAssessmentRepository,
        orchestrator: AssessmentOrchestrator,
        default_method: AssessmentMethod | str = AssessmentMethod.WEIGHTED_AVERAGE,
        logger: logging.Logger | None = None,
    ):
        self.question_repository = question_repository
        self.assessment_repository = assessment_repository
        self.orchestrator = orchestrator
        self.default_method = AssessmentOrchestrator.parse_method(default_method)
        self.logger = logger or logging.getLogger(__name__)

    async def process_assessment(
        self,
        child_id: str,
        responses: Sequence[AssessmentResponse],
        conducted_by: str,
        method: AssessmentMethod | str | None = None,
    ) -> AssessmentResult:
        """
        Score a submission and append it to the child's history.

        Args:
            child_id: Child the assessment belongs to
            responses: Submitted answers
            conducted_by: Who administered the assessment
            method: Scoring method; the service default when omitted

        Returns:
            The stored assessment result

        Raises:
            ValidationError: If the submission cannot be scored
        """
        if not child_id:
            raise ValidationError("child_id is required")

        method = self.default_method if method is None else method
        question_ids = [response.question_id for response in responses]
        questions = await self.question_repository.get_by_ids(question_ids)
        self.logger.debug(
            f"Resolved {len(questions)} of {len(set(question_ids))} questions for child {child_id}"
        )

        result = self.orchestrator.score(
            responses=responses,
            questions=questions,
            method=method,
            child_id=child_id,
            conducted_by=conducted_by,
        )
        return await self.assessment_repository.add(result)

    async def get_assessment_by_id(self, child_id: str, assessment_id: UUID) -> AssessmentResult:
        result = await self.assessment_repository.get_by_id(child_id, assessment_id)
        if result is None:
            raise DataNotFoundError(f"Assessment {assessment_id} not found for child {child_id}")
        return result

    async def get_child_assessments(self, child_id: str) -> list[AssessmentResult]:
        return await self.assessment_repository.list_by_child_id(child_id)

    @staticmethod
    def courses_to_assign(result: AssessmentResult) -> list[str]:
        """Distinct recommended course ids, in issue order."""
        course_ids = [i.recommended_course_id for i in result.issues if i.recommended_course_id]
        return list(dict.fromkeys(course_ids))

    @staticmethod
    def referrals_needed(result: AssessmentResult) -> list[IssueResult]:
        return [issue for issue in result.issues if issue.professional_referral is not None]
