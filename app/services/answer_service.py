import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.crud import answer as answer_crud, exam as exam_crud, user as user_crud
from app.exceptions import (
    AlreadySubmittedError,
    AnswerNotFoundError,
    DuplicateAnswerError,
    ExamClosedError,
    ExamNotFoundError,
    UserNotFoundError,
)
from app.schemas import answer as answer_schema
from app.services import scoring_service
from app.services.availability import is_exam_open, utcnow

logger = logging.getLogger(__name__)


async def create_answer(
    session: AsyncSession,
    request: answer_schema.AnswerCreateRequest,
) -> answer_schema.AnswerResponse:
    """응시 시작: 시험/사용자 쌍당 하나의 답안 기록 생성"""
    exam = await exam_crud.get_exam_by_id(session, request.exam_id)
    if not exam:
        raise ExamNotFoundError(request.exam_id)

    if not await user_crud.user_exists(session, request.user_id):
        raise UserNotFoundError(request.user_id)

    existing = await answer_crud.get_answer_by_exam_and_user(session, request.exam_id, request.user_id)
    if existing:
        raise DuplicateAnswerError(request.exam_id, request.user_id)

    now = utcnow()
    if settings.enforce_exam_window and not is_exam_open(exam, now):
        logger.warning(f"응시 시간 외 응시 시작 시도: exam_id={exam.id}, user_id={request.user_id}")
        raise ExamClosedError(exam.id)

    try:
        answer = await answer_crud.create_answer(
            session,
            exam_id=request.exam_id,
            user_id=request.user_id,
            answers=request.answers,
            submitted_at=now,
            is_submitted=request.is_submitted,
            progress=request.progress,
        )
    except IntegrityError:
        # 동시 생성 요청이 유니크 제약에 걸린 경우
        await session.rollback()
        logger.warning(
            f"답안 기록 중복 생성 충돌: exam_id={request.exam_id}, user_id={request.user_id}"
        )
        raise DuplicateAnswerError(request.exam_id, request.user_id)

    logger.info(f"답안 기록 생성: answer_id={answer.id}, exam_id={answer.exam_id}, user_id={answer.user_id}")
    return answer_schema.AnswerResponse.model_validate(answer)


async def get_answer(
    session: AsyncSession,
    answer_id: int,
) -> answer_schema.AnswerResponse:
    """답안 기록 단건 조회"""
    answer = await answer_crud.get_answer_by_id(session, answer_id)
    if not answer:
        raise AnswerNotFoundError(answer_id)
    return answer_schema.AnswerResponse.model_validate(answer)


async def get_user_answer(
    session: AsyncSession,
    exam_id: int,
    user_id: int,
) -> answer_schema.AnswerResponse | None:
    """응시자의 답안 기록 조회 (응시 전이면 None)"""
    answer = await answer_crud.get_answer_by_exam_and_user(session, exam_id, user_id)
    if answer is None:
        return None
    return answer_schema.AnswerResponse.model_validate(answer)


async def update_progress(
    session: AsyncSession,
    answer_id: int,
    request: answer_schema.ProgressUpdateRequest,
) -> answer_schema.AnswerResponse:
    """자동 저장 (진행 상황을 통째로 교체)"""
    answer = await answer_crud.update_answer_progress(session, answer_id, request.progress)
    if answer is None:
        # 조건부 UPDATE가 적용되지 않은 이유 구분
        existing = await answer_crud.get_answer_by_id(session, answer_id)
        if not existing:
            raise AnswerNotFoundError(answer_id)
        logger.warning(f"제출 완료된 답안의 자동 저장 시도: answer_id={answer_id}")
        raise AlreadySubmittedError("제출된 시험의 진행 상황은 수정할 수 없습니다")

    logger.debug(f"진행 상황 저장: answer_id={answer_id}, count={len(request.progress)}")
    return answer_schema.AnswerResponse.model_validate(answer)


async def submit_exam(
    session: AsyncSession,
    answer_id: int,
    request: answer_schema.AnswerSubmitRequest,
) -> answer_schema.AnswerResponse:
    """최종 제출 및 자동 채점 (되돌릴 수 없음)"""
    answer = await answer_crud.get_answer_by_id(session, answer_id)
    if not answer:
        raise AnswerNotFoundError(answer_id)

    if answer.is_submitted:
        logger.warning(f"중복 제출 시도: answer_id={answer_id}")
        raise AlreadySubmittedError()

    exam_id = answer.exam_id
    now = utcnow()
    if settings.enforce_exam_window:
        exam = await exam_crud.get_exam_by_id(session, exam_id)
        if not exam:
            raise ExamNotFoundError(exam_id)
        if not is_exam_open(exam, now):
            logger.warning(f"응시 시간 외 제출 시도: answer_id={answer_id}, exam_id={exam_id}")
            raise ExamClosedError(exam_id)

    score = await scoring_service.calculate_score(session, exam_id, request.answers)

    submitted = await answer_crud.update_answer_submission(
        session,
        answer_id,
        answers=request.answers,
        score=score,
        submitted_at=now,
    )
    if submitted is None:
        # 동시 제출 중 다른 요청이 먼저 반영됨
        logger.warning(f"동시 제출 충돌: answer_id={answer_id}")
        raise AlreadySubmittedError()

    logger.info(f"시험 제출 완료: answer_id={answer_id}, exam_id={exam_id}, score={score}")
    return answer_schema.AnswerResponse.model_validate(submitted)


async def get_answers_by_exam(
    session: AsyncSession,
    exam_id: int,
) -> answer_schema.AnswerListResponse:
    """시험별 답안 기록 목록 (관리자 검토용)"""
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)

    answers = await answer_crud.get_answers_by_exam_id(session, exam_id)
    answer_responses = [answer_schema.AnswerResponse.model_validate(a) for a in answers]
    return answer_schema.AnswerListResponse(answers=answer_responses, total=len(answer_responses))
