from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, JSONMap, TimestampMixin

CHOICE_SYMBOLS = ("A", "B", "C", "D")


class Question(Base, TimestampMixin):
    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    exam_id: Mapped[int] = mapped_column(ForeignKey("exams.id"), nullable=False, index=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    choices: Mapped[list[str]] = mapped_column(JSONMap, nullable=False)  # 보기 4개 (A, B, C, D 순서)
    correct_choice: Mapped[str] = mapped_column(String(1), nullable=False)

    exam: Mapped["Exam"] = relationship("Exam", back_populates="questions")
