"""
In-Memory Question Repository Module.
"""

from collections.abc import Iterable, Sequence

from insight_engine.domain.entities.assessment import Question
from insight_engine.domain.repositories.question_repository import IQuestionRepository


class InMemoryQuestionRepository(IQuestionRepository):
    """Question catalog held in a dict keyed by question id."""

    def __init__(self, questions: Iterable[Question] = ()):
        self._questions: dict[str, Question] = {}
        for question in questions:
            self.add(question)

    def add(self, question: Question) -> Question:
        self._questions[question.id] = question
        return question

    async def get_by_ids(self, question_ids: Sequence[str], active_only: bool = True) -> list[Question]:
        found = []
        for question_id in dict.fromkeys(question_ids):
            question = self._questions.get(question_id)
            if question is None or (active_only and not question.is_active):
                continue
            found.append(question)
        return found
