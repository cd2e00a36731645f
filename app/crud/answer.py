from datetime import datetime
from typing import Sequence

from sqlalchemy import Text, cast, delete, func, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.answer import Answer


async def get_answer_by_id(
    session: AsyncSession,
    answer_id: int,
    populate_existing: bool = False,
) -> Answer | None:
    """ID로 답안 기록 조회

    Args:
        session: 데이터베이스 세션
        answer_id: 답안 기록 ID
        populate_existing: 세션에 이미 로드된 객체도 DB 값으로 덮어쓸지 여부
            (벌크 UPDATE 직후 재조회 시 사용)
    """
    stmt = select(Answer).where(Answer.id == answer_id)
    if populate_existing:
        stmt = stmt.execution_options(populate_existing=True)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_answer_by_exam_and_user(
    session: AsyncSession,
    exam_id: int,
    user_id: int,
) -> Answer | None:
    """시험 ID와 사용자 ID로 답안 기록 조회"""
    stmt = select(Answer).where(
        Answer.exam_id == exam_id,
        Answer.user_id == user_id,
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_answers_by_exam_id(session: AsyncSession, exam_id: int) -> Sequence[Answer]:
    """시험 ID로 답안 기록 목록 조회"""
    result = await session.execute(
        select(Answer).where(Answer.exam_id == exam_id).order_by(Answer.id)
    )
    return result.scalars().all()


async def get_answers_by_user_id(session: AsyncSession, user_id: int) -> Sequence[Answer]:
    """사용자 ID로 답안 기록 목록 조회"""
    result = await session.execute(select(Answer).where(Answer.user_id == user_id))
    return result.scalars().all()


async def create_answer(
    session: AsyncSession,
    exam_id: int,
    user_id: int,
    answers: dict[str, str],
    submitted_at: datetime,
    is_submitted: bool = False,
    progress: dict[str, str] | None = None,
) -> Answer:
    """답안 기록 생성

    (exam_id, user_id) 유니크 제약 위반 시 IntegrityError가 그대로 전파된다.
    """
    answer = Answer(
        exam_id=exam_id,
        user_id=user_id,
        answers=dict(answers),
        score=0,
        submitted_at=submitted_at,
        is_submitted=is_submitted,
        progress=dict(progress) if progress is not None else None,
    )
    session.add(answer)
    await session.commit()
    await session.refresh(answer)
    return answer


async def update_answer_progress(
    session: AsyncSession,
    answer_id: int,
    progress: dict[str, str],
) -> Answer | None:
    """자동 저장 진행 상황 교체

    제출되지 않은 행에만 적용되는 조건부 UPDATE.
    갱신된 행이 없으면 None을 반환한다 (없는 ID 또는 이미 제출됨).
    """
    stmt = (
        update(Answer)
        .where(Answer.id == answer_id, Answer.is_submitted.is_(False))
        .values(progress=dict(progress))
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    await session.commit()
    if result.rowcount == 0:
        return None
    return await get_answer_by_id(session, answer_id, populate_existing=True)


async def update_answer_submission(
    session: AsyncSession,
    answer_id: int,
    answers: dict[str, str],
    score: int,
    submitted_at: datetime,
) -> Answer | None:
    """최종 제출 반영 (answers, score, is_submitted, submitted_at을 한 번에 갱신)

    is_submitted = false 인 행에만 적용되므로 동시 제출 중 하나만 성공한다.
    갱신된 행이 없으면 None을 반환한다.
    """
    stmt = (
        update(Answer)
        .where(Answer.id == answer_id, Answer.is_submitted.is_(False))
        .values(
            answers=dict(answers),
            score=score,
            is_submitted=True,
            submitted_at=submitted_at,
        )
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    await session.commit()
    if result.rowcount == 0:
        return None
    return await get_answer_by_id(session, answer_id, populate_existing=True)


def _remove_json_key(session: AsyncSession, column, key: str):
    """DB 방언별 JSON 키 제거 표현식"""
    if session.get_bind().dialect.name == "postgresql":
        # jsonb - text
        return column.op("-")(cast(literal(key), Text))
    # SQLite / MySQL: json_remove(doc, path)
    return func.json_remove(column, f'$."{key}"')


async def prune_question_key(session: AsyncSession, exam_id: int, question_id: int) -> int:
    """시험의 모든 답안 기록에서 문제 키를 제거 (커밋하지 않음)

    answers와 progress 양쪽에서 str(question_id) 키를 지우는 단일 UPDATE.
    score, is_submitted는 건드리지 않는다.
    """
    key = str(question_id)
    stmt = (
        update(Answer)
        .where(Answer.exam_id == exam_id)
        .values(
            answers=_remove_json_key(session, Answer.answers, key),
            progress=_remove_json_key(session, Answer.progress, key),
        )
        .execution_options(synchronize_session=False)
    )
    result = await session.execute(stmt)
    return result.rowcount


async def delete_answers_by_exam_id(session: AsyncSession, exam_id: int) -> int:
    """시험의 답안 기록 일괄 삭제 (커밋하지 않음)"""
    result = await session.execute(
        delete(Answer).where(Answer.exam_id == exam_id).execution_options(synchronize_session=False)
    )
    return result.rowcount


async def count_answers_by_user_id(session: AsyncSession, user_id: int) -> int:
    """사용자의 답안 기록 수"""
    count = await session.scalar(select(func.count(Answer.id)).where(Answer.user_id == user_id))
    return count or 0
