import uuid

from sqlalchemy import Column, String

from quiz_api.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
