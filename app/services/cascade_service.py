"""부모 엔티티 삭제 시 답안 기록 정합성 유지

- 문제 삭제: 같은 시험의 모든 답안 기록에서 해당 문제 키를 제거한 뒤 문제 삭제
- 시험 삭제: 답안 기록 -> 문제 -> 시험 순서로 삭제

각 삭제는 단일 트랜잭션으로 처리되어 일부만 반영된 상태가 보이지 않는다.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import answer as answer_crud, exam as exam_crud, question as question_crud
from app.exceptions import ExamNotFoundError, QuestionNotFoundError

logger = logging.getLogger(__name__)


async def delete_question(session: AsyncSession, question_id: int) -> None:
    """문제 삭제 (답안 기록의 answers/progress에서 키 제거 포함)"""
    question = await question_crud.get_question_by_id(session, question_id)
    if not question:
        raise QuestionNotFoundError(question_id)

    exam_id = question.exam_id
    try:
        pruned = await answer_crud.prune_question_key(session, exam_id, question_id)
        await question_crud.delete_question(session, question_id)
        await session.commit()
    except Exception as e:
        logger.error(f"문제 삭제 실패: question_id={question_id}, error={e}", exc_info=True)
        await session.rollback()
        raise

    logger.info(f"문제 삭제 완료: question_id={question_id}, exam_id={exam_id}, pruned_answers={pruned}")


async def delete_exam(session: AsyncSession, exam_id: int) -> dict[str, int]:
    """시험 삭제 (답안 기록, 문제 포함)

    Returns:
        삭제된 행 수: {"answers": n, "questions": n}
    """
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)

    try:
        deleted_answers = await answer_crud.delete_answers_by_exam_id(session, exam_id)
        deleted_questions = await question_crud.delete_questions_by_exam_id(session, exam_id)
        await exam_crud.delete_exam(session, exam_id)
        await session.commit()
    except Exception as e:
        logger.error(f"시험 삭제 실패: exam_id={exam_id}, error={e}", exc_info=True)
        await session.rollback()
        raise

    logger.info(
        f"시험 삭제 완료: exam_id={exam_id}, answers={deleted_answers}, questions={deleted_questions}"
    )
    return {"answers": deleted_answers, "questions": deleted_questions}
