import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import exam as exam_crud, question as question_crud
from app.exceptions import (
    ExamNotFoundError,
    InvalidChoiceCountError,
    QuestionNotFoundError,
    UnknownChoiceSymbolError,
)
from app.models.question import CHOICE_SYMBOLS
from app.schemas import question as question_schema

logger = logging.getLogger(__name__)


def _validate_choices(choices: list[str]) -> None:
    if len(choices) != len(CHOICE_SYMBOLS):
        raise InvalidChoiceCountError(len(choices))


def _validate_correct_choice(symbol: str) -> None:
    if symbol not in CHOICE_SYMBOLS:
        raise UnknownChoiceSymbolError(symbol)


async def create_question(
    session: AsyncSession,
    request: question_schema.QuestionCreateRequest,
) -> question_schema.QuestionResponse:
    """문제 생성 (시험이 존재해야 함)"""
    _validate_choices(request.choices)
    _validate_correct_choice(request.correct_choice)

    exam = await exam_crud.get_exam_by_id(session, request.exam_id)
    if not exam:
        raise ExamNotFoundError(request.exam_id)

    question = await question_crud.create_question(
        session,
        exam_id=request.exam_id,
        text=request.text,
        choices=request.choices,
        correct_choice=request.correct_choice,
    )
    logger.info(f"문제 생성: question_id={question.id}, exam_id={question.exam_id}")
    return question_schema.QuestionResponse.model_validate(question)


async def get_question(session: AsyncSession, question_id: int) -> question_schema.QuestionResponse:
    question = await question_crud.get_question_by_id(session, question_id)
    if not question:
        raise QuestionNotFoundError(question_id)
    return question_schema.QuestionResponse.model_validate(question)


async def get_questions_by_exam(
    session: AsyncSession,
    exam_id: int,
) -> question_schema.QuestionListResponse:
    """시험별 문제 목록 (관리자용, 정답 포함)"""
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)

    questions = await question_crud.get_questions_by_exam_id(session, exam_id)
    question_responses = [question_schema.QuestionResponse.model_validate(q) for q in questions]
    return question_schema.QuestionListResponse(questions=question_responses, total=len(question_responses))


async def get_questions_for_participant(
    session: AsyncSession,
    exam_id: int,
) -> question_schema.ParticipantQuestionListResponse:
    """응시자용 문제 목록 (정답 제외)"""
    exam = await exam_crud.get_exam_by_id(session, exam_id)
    if not exam:
        raise ExamNotFoundError(exam_id)

    questions = await question_crud.get_questions_by_exam_id(session, exam_id)
    question_responses = [question_schema.ParticipantQuestionResponse.model_validate(q) for q in questions]
    return question_schema.ParticipantQuestionListResponse(
        questions=question_responses,
        total=len(question_responses),
    )


async def update_question(
    session: AsyncSession,
    question_id: int,
    request: question_schema.QuestionUpdateRequest,
) -> question_schema.QuestionResponse:
    """문제 수정"""
    if request.choices is not None:
        _validate_choices(request.choices)
    if request.correct_choice is not None:
        _validate_correct_choice(request.correct_choice)

    question = await question_crud.get_question_by_id(session, question_id)
    if not question:
        raise QuestionNotFoundError(question_id)

    question = await question_crud.update_question(
        session,
        question,
        text=request.text,
        choices=request.choices,
        correct_choice=request.correct_choice,
    )
    logger.info(f"문제 수정: question_id={question_id}")
    return question_schema.QuestionResponse.model_validate(question)
