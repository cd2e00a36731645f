import enum
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Enum as SAEnum, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin


class ExamStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class Exam(Base, TimestampMixin):
    __tablename__ = "exams"
    __table_args__ = (CheckConstraint("end_at > start_at", name="ck_exams_date_order"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_minutes: Mapped[int] = mapped_column(nullable=False)
    status: Mapped[ExamStatus] = mapped_column(
        SAEnum(ExamStatus, native_enum=False, length=20, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        index=True,
    )

    # 삭제는 cascade_service에서 answers -> questions -> exam 순서로 명시적으로 수행
    questions: Mapped[list["Question"]] = relationship(
        "Question",
        back_populates="exam",
        passive_deletes=True,
    )
    answers: Mapped[list["Answer"]] = relationship(
        "Answer",
        back_populates="exam",
        passive_deletes=True,
    )
