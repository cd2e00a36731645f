from app.models.answer import Answer
from app.models.base import Base, get_db
from app.models.exam import Exam, ExamStatus
from app.models.question import CHOICE_SYMBOLS, Question
from app.models.user import User, UserRole

__all__ = [
    "Base",
    "User",
    "UserRole",
    "Exam",
    "ExamStatus",
    "Question",
    "CHOICE_SYMBOLS",
    "Answer",
    "get_db",
]
