import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, JSON, String

from quiz_api.database import Base


def _utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class QuizQuestion(Base):
    __tablename__ = "quiz_questions"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    question = Column(String, nullable=True)
    choices = Column(JSON, nullable=False, default=list)
    correct = Column(Integer, nullable=True)
    created_at = Column(String, nullable=False, default=_utcnow_iso)
