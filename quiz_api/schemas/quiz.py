from pydantic import BaseModel


class QuizCreate(BaseModel):
    question: str | None = None
    choices: list[str] = []
    correct: int | None = None


class QuizResponse(BaseModel):
    id: str
    question: str | None = None
    choices: list[str]
    correct: int | None = None

    model_config = {"from_attributes": True}
