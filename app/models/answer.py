from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, JSONMap, TimestampMixin


class Answer(Base, TimestampMixin):
    """응시자별 답안 기록 (시험, 사용자 쌍당 1건)"""
    __tablename__ = "answers"
    __table_args__ = (UniqueConstraint("exam_id", "user_id", name="uq_answers_exam_user"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    exam_id: Mapped[int] = mapped_column(ForeignKey("exams.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    answers: Mapped[dict[str, str]] = mapped_column(JSONMap, nullable=False, default=dict)  # {question_id: 선택 기호}
    score: Mapped[int] = mapped_column(nullable=False, default=0)
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_submitted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    progress: Mapped[dict[str, str] | None] = mapped_column(JSONMap, default=None)  # 자동 저장

    exam: Mapped["Exam"] = relationship("Exam", back_populates="answers")
    user: Mapped["User"] = relationship("User", back_populates="answers")
