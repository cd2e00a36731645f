from datetime import datetime
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exam import Exam, ExamStatus


async def get_exam_by_id(session: AsyncSession, exam_id: int) -> Exam | None:
    """ID로 시험 조회"""
    result = await session.execute(select(Exam).where(Exam.id == exam_id))
    return result.scalar_one_or_none()


async def get_all_exams(session: AsyncSession) -> Sequence[Exam]:
    """전체 시험 조회 (최신순)"""
    result = await session.execute(select(Exam).order_by(Exam.created_at.desc(), Exam.id.desc()))
    return result.scalars().all()


async def get_exams_by_status(session: AsyncSession, status: ExamStatus) -> Sequence[Exam]:
    """상태별 시험 조회 (시작 시각순)"""
    result = await session.execute(
        select(Exam).where(Exam.status == status).order_by(Exam.start_at, Exam.id)
    )
    return result.scalars().all()


async def create_exam(
    session: AsyncSession,
    title: str,
    description: str,
    start_at: datetime,
    end_at: datetime,
    duration_minutes: int,
    status: ExamStatus,
) -> Exam:
    """시험 생성"""
    exam = Exam(
        title=title,
        description=description,
        start_at=start_at,
        end_at=end_at,
        duration_minutes=duration_minutes,
        status=status,
    )
    session.add(exam)
    await session.commit()
    await session.refresh(exam)
    return exam


async def update_exam(
    session: AsyncSession,
    exam: Exam,
    title: str | None = None,
    description: str | None = None,
    start_at: datetime | None = None,
    end_at: datetime | None = None,
    duration_minutes: int | None = None,
    status: ExamStatus | None = None,
) -> Exam:
    """시험 수정 (None이 아닌 필드만 반영)"""
    if title is not None:
        exam.title = title
    if description is not None:
        exam.description = description
    if start_at is not None:
        exam.start_at = start_at
    if end_at is not None:
        exam.end_at = end_at
    if duration_minutes is not None:
        exam.duration_minutes = duration_minutes
    if status is not None:
        exam.status = status

    await session.commit()
    await session.refresh(exam)
    return exam


async def delete_exam(session: AsyncSession, exam_id: int) -> int:
    """시험 행 삭제 (커밋하지 않음)"""
    result = await session.execute(
        delete(Exam).where(Exam.id == exam_id).execution_options(synchronize_session=False)
    )
    return result.rowcount
