import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import answer as answer_crud, exam as exam_crud, user as user_crud
from app.exceptions import ExamNotFoundError, InvalidExamDateRangeError, UserNotFoundError
from app.models.exam import ExamStatus
from app.schemas import exam as exam_schema
from app.services.availability import as_utc, filter_open_exams, utcnow

logger = logging.getLogger(__name__)


def _validate_date_range(start_at: datetime, end_at: datetime) -> None:
    if as_utc(end_at) <= as_utc(start_at):
        raise InvalidExamDateRangeError()


async def create_exam(
    session: AsyncSession,
    request: exam_schema.ExamCreateRequest,
) -> exam_schema.ExamResponse:
    """시험 생성"""
    _validate_date_range(request.start_at, request.end_at)

    exam = await exam_crud.create_exam(
        session,
        title=request.title,
        description=request.description,
        start_at=as_utc(request.start_at),
        end_at=as_utc(request.end_at),
        duration_minutes=request.duration_minutes,
        status=request.status,
    )
    logger.info(f"시험 생성: exam_id={exam.id}, title={exam.title}")
    return exam_schema.ExamResponse.model_validate(exam)


async def get_exam(session: AsyncSession, exam_id: int) -> exam_schema.ExamResponse:
    """시험 단건 조회"""
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)
    return exam_schema.ExamResponse.model_validate(exam)


async def get_all_exams(session: AsyncSession) -> exam_schema.ExamListResponse:
    """전체 시험 목록 (관리자용)"""
    exams = await exam_crud.get_all_exams(session)
    exam_responses = [exam_schema.ExamResponse.model_validate(e) for e in exams]
    return exam_schema.ExamListResponse(exams=exam_responses, total=len(exam_responses))


async def get_active_exams(
    session: AsyncSession,
    now: datetime | None = None,
) -> exam_schema.ExamListResponse:
    """현재 응시 가능한 시험 목록"""
    candidates = await exam_crud.get_exams_by_status(session, ExamStatus.ACTIVE)
    exams = filter_open_exams(candidates, now or utcnow())
    exam_responses = [exam_schema.ExamResponse.model_validate(e) for e in exams]
    return exam_schema.ExamListResponse(exams=exam_responses, total=len(exam_responses))


async def update_exam(
    session: AsyncSession,
    exam_id: int,
    request: exam_schema.ExamUpdateRequest,
) -> exam_schema.ExamResponse:
    """시험 수정 (시작/종료 시각이 바뀌면 기존 값과 합쳐 다시 검증)"""
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)

    if request.start_at is not None or request.end_at is not None:
        _validate_date_range(
            request.start_at if request.start_at is not None else exam.start_at,
            request.end_at if request.end_at is not None else exam.end_at,
        )

    exam = await exam_crud.update_exam(
        session,
        exam,
        title=request.title,
        description=request.description,
        start_at=as_utc(request.start_at) if request.start_at is not None else None,
        end_at=as_utc(request.end_at) if request.end_at is not None else None,
        duration_minutes=request.duration_minutes,
        status=request.status,
    )
    logger.info(f"시험 수정: exam_id={exam_id}")
    return exam_schema.ExamResponse.model_validate(exam)


async def get_exams_for_participant(
    session: AsyncSession,
    user_id: int,
    now: datetime | None = None,
) -> exam_schema.ParticipantExamListResponse:
    """응시자가 볼 수 있는 시험 목록 (본인 제출 상태 포함)"""
    if not await user_crud.user_exists(session, user_id):
        raise UserNotFoundError(user_id)

    candidates = await exam_crud.get_exams_by_status(session, ExamStatus.ACTIVE)
    exams = filter_open_exams(candidates, now or utcnow())

    answers_by_exam = {a.exam_id: a for a in await answer_crud.get_answers_by_user_id(session, user_id)}

    exam_responses = []
    for exam in exams:
        response = exam_schema.ParticipantExamResponse.model_validate(exam)
        answer = answers_by_exam.get(exam.id)
        if answer is not None:
            response.answer_id = answer.id
            response.is_submitted = answer.is_submitted
            response.score = answer.score if answer.is_submitted else None
        exam_responses.append(response)

    return exam_schema.ParticipantExamListResponse(exams=exam_responses, total=len(exam_responses))
