from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.question import Question


async def get_question_by_id(session: AsyncSession, question_id: int) -> Question | None:
    """ID로 문제 조회"""
    result = await session.execute(select(Question).where(Question.id == question_id))
    return result.scalar_one_or_none()


async def get_questions_by_exam_id(session: AsyncSession, exam_id: int) -> Sequence[Question]:
    """시험 ID로 문제 목록 조회 (등록순)"""
    result = await session.execute(
        select(Question).where(Question.exam_id == exam_id).order_by(Question.id)
    )
    return result.scalars().all()


async def get_answer_keys_by_exam_id(session: AsyncSession, exam_id: int) -> list[tuple[int, str]]:
    """채점용 정답 키 조회: [(question_id, correct_choice), ...]"""
    result = await session.execute(
        select(Question.id, Question.correct_choice)
        .where(Question.exam_id == exam_id)
        .order_by(Question.id)
    )
    return [(row.id, row.correct_choice) for row in result.all()]


async def create_question(
    session: AsyncSession,
    exam_id: int,
    text: str,
    choices: list[str],
    correct_choice: str,
) -> Question:
    """문제 생성"""
    question = Question(
        exam_id=exam_id,
        text=text,
        choices=list(choices),
        correct_choice=correct_choice,
    )
    session.add(question)
    await session.commit()
    await session.refresh(question)
    return question


async def update_question(
    session: AsyncSession,
    question: Question,
    text: str | None = None,
    choices: list[str] | None = None,
    correct_choice: str | None = None,
) -> Question:
    """문제 수정 (None이 아닌 필드만 반영)"""
    if text is not None:
        question.text = text
    if choices is not None:
        question.choices = list(choices)
    if correct_choice is not None:
        question.correct_choice = correct_choice

    await session.commit()
    await session.refresh(question)
    return question


async def delete_question(session: AsyncSession, question_id: int) -> int:
    """문제 행 삭제 (커밋하지 않음)"""
    result = await session.execute(
        delete(Question).where(Question.id == question_id).execution_options(synchronize_session=False)
    )
    return result.rowcount


async def delete_questions_by_exam_id(session: AsyncSession, exam_id: int) -> int:
    """시험의 문제 일괄 삭제 (커밋하지 않음)"""
    result = await session.execute(
        delete(Question).where(Question.exam_id == exam_id).execution_options(synchronize_session=False)
    )
    return result.rowcount
