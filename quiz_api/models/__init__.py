from quiz_api.models.quiz import QuizQuestion
from quiz_api.models.user import User

__all__ = ["QuizQuestion", "User"]
