import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from quiz_api.models.quiz import QuizQuestion
from quiz_api.utils.exceptions import StoreError

logger = logging.getLogger(__name__)


class QuizStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_all(self) -> list[QuizQuestion]:
        """Return every question in insertion order."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(QuizQuestion).order_by(QuizQuestion.created_at)
                )
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise StoreError("Failed to list questions", error=str(exc)) from exc

    async def create(self, question: str | None, choices: list[str], correct: int | None) -> QuizQuestion:
        # correct is not checked against len(choices)
        quiz = QuizQuestion(question=question, choices=list(choices), correct=correct)
        async with self._session_factory() as session:
            session.add(quiz)
            try:
                await session.commit()
            except (SQLAlchemyError, OverflowError) as exc:
                # OverflowError: sqlite cannot bind ints beyond 64 bits
                await session.rollback()
                logger.exception("Failed to store question")
                raise StoreError("Failed to store question", error=str(exc)) from exc

        logger.info("Created question %s", quiz.id)
        return quiz

    async def delete_by_id(self, question_id: str) -> bool:
        """Delete a question. Returns False if it did not exist; that is not an error."""
        async with self._session_factory() as session:
            try:
                quiz = await session.get(QuizQuestion, question_id)
                if quiz is None:
                    logger.info("Delete of unknown question %s, nothing to do", question_id)
                    return False
                await session.delete(quiz)
                await session.commit()
            except SQLAlchemyError as exc:
                await session.rollback()
                logger.exception("Failed to delete question %s", question_id)
                raise StoreError("Failed to delete question", error=str(exc)) from exc

        logger.info("Deleted question %s", question_id)
        return True
