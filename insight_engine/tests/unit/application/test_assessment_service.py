"""
Tests for the assessment application service.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from insight_engine.application.services import AssessmentService
from insight_engine.domain.entities import AssessmentResponse, Question, Severity
from insight_engine.domain.exceptions import DataNotFoundError, ValidationError
from insight_engine.domain.value_objects import AssessmentMethod
from insight_engine.infrastructure.repositories.memory import (
    InMemoryAssessmentRepository,
    InMemoryQuestionRepository,
)
from insight_engine.tests.conftest import make_question


@pytest.fixture
def question_repository(anxiety_questions, mixed_questions):
    inactive = make_question("retired", ("ocd", "OCD", 100), is_active=False)
    return InMemoryQuestionRepository([*anxiety_questions, *mixed_questions, inactive])


@pytest.fixture
def assessment_repository():
    return InMemoryAssessmentRepository()


@pytest.fixture
def assessment_service(question_repository, assessment_repository, orchestrator, test_logger):
    return AssessmentService(
        question_repository=question_repository,
        assessment_repository=assessment_repository,
        orchestrator=orchestrator,
        logger=test_logger,
    )


class TestProcessAssessment:
    @pytest.mark.asyncio
    async def test_scores_and_stores_result(self, assessment_service, assessment_repository, responses_factory):
        # Act
        result = await assessment_service.process_assessment(
            child_id="child-1",
            responses=responses_factory(q1=80, q2=40),
            conducted_by="parent-1",
        )

        # Assert
        assert result.method is AssessmentMethod.WEIGHTED_AVERAGE
        assert result.get_issue("anxiety").score == 70.0
        assert await assessment_repository.list_by_child_id("child-1") == [result]

    @pytest.mark.asyncio
    async def test_method_override(self, assessment_service, responses_factory):
        result = await assessment_service.process_assessment(
            child_id="child-1",
            responses=responses_factory(q1=80, q2=40),
            conducted_by="parent-1",
            method="t_score_weighted",
        )

        assert result.method is AssessmentMethod.T_SCORE_WEIGHTED
        assert result.get_issue("anxiety").t_score == 70.0

    @pytest.mark.asyncio
    async def test_inactive_questions_are_not_scored(self, assessment_service, responses_factory):
        with pytest.raises(ValidationError, match="No valid questions found"):
            await assessment_service.process_assessment(
                child_id="child-1", responses=responses_factory(retired=100), conducted_by="parent-1"
            )

    @pytest.mark.asyncio
    async def test_child_id_required(self, assessment_service, responses_factory):
        with pytest.raises(ValidationError):
            await assessment_service.process_assessment(
                child_id="", responses=responses_factory(q1=50), conducted_by="parent-1"
            )

    @pytest.mark.asyncio
    async def test_invalid_submission_is_not_stored(self, assessment_service, assessment_repository):
        with pytest.raises(ValidationError):
            await assessment_service.process_assessment(child_id="child-1", responses=[], conducted_by="parent-1")

        assert await assessment_repository.list_by_child_id("child-1") == []

    @pytest.mark.asyncio
    async def test_uses_repository_collaborators(self, orchestrator, anxiety_questions):
        # Arrange
        question_repository = MagicMock()
        question_repository.get_by_ids = AsyncMock(return_value=anxiety_questions)
        assessment_repository = MagicMock()
        assessment_repository.add = AsyncMock(side_effect=lambda result: result)
        service = AssessmentService(question_repository, assessment_repository, orchestrator)

        # Act
        await service.process_assessment(
            child_id="child-9",
            responses=[AssessmentResponse(question_id="q1", answer=55)],
            conducted_by="teacher-2",
        )

        # Assert
        question_repository.get_by_ids.assert_awaited_once_with(["q1"])
        assessment_repository.add.assert_awaited_once()
        stored = assessment_repository.add.await_args.args[0]
        assert stored.child_id == "child-9"

    def test_invalid_default_method_rejected(self, question_repository, assessment_repository, orchestrator):
        with pytest.raises(ValidationError):
            AssessmentService(question_repository, assessment_repository, orchestrator, default_method="mode")


class TestAssessmentHistory:
    @pytest.mark.asyncio
    async def test_get_by_id(self, assessment_service, responses_factory):
        stored = await assessment_service.process_assessment(
            child_id="child-1", responses=responses_factory(q1=10), conducted_by="parent-1"
        )

        found = await assessment_service.get_assessment_by_id("child-1", stored.assessment_id)

        assert found == stored

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, assessment_service):
        with pytest.raises(DataNotFoundError):
            await assessment_service.get_assessment_by_id("child-1", uuid.uuid4())

    @pytest.mark.asyncio
    async def test_history_is_per_child_in_order(self, assessment_service, responses_factory):
        first = await assessment_service.process_assessment(
            child_id="child-1", responses=responses_factory(q1=10), conducted_by="parent-1"
        )
        await assessment_service.process_assessment(
            child_id="child-2", responses=responses_factory(q1=20), conducted_by="parent-2"
        )
        second = await assessment_service.process_assessment(
            child_id="child-1", responses=responses_factory(q1=90), conducted_by="parent-1"
        )

        assert await assessment_service.get_child_assessments("child-1") == [first, second]
        assert await assessment_service.get_child_assessments("child-3") == []


class TestFollowUp:
    @pytest.mark.asyncio
    async def test_courses_and_referrals(self, assessment_service, responses_factory):
        result = await assessment_service.process_assessment(
            child_id="child-1",
            responses=responses_factory(worry=5, sad="Sometimes", focus=2),
            conducted_by="parent-1",
        )

        assert AssessmentService.courses_to_assign(result) == [
            "507f1f77bcf86cd799439021",
            "507f1f77bcf86cd799439022",
        ]
        referrals = AssessmentService.referrals_needed(result)
        assert [issue.issue_id for issue in referrals] == ["anxiety", "depression"]
        assert all(issue.severity is not Severity.NORMAL for issue in referrals)
