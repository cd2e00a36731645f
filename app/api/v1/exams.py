from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import answer as answer_schema, exam as exam_schema, question as question_schema
from app.services import answer_service, cascade_service, exam_service, question_service

router = APIRouter(prefix="/exams", tags=["exams"])


@router.post("", response_model=exam_schema.ExamResponse, status_code=status.HTTP_201_CREATED)
async def create_exam(
    request: exam_schema.ExamCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """시험 생성 API (관리자용)"""
    return await exam_service.create_exam(db, request)


@router.get("", response_model=exam_schema.ExamListResponse)
async def get_exams(
    db: AsyncSession = Depends(get_db),
):
    """전체 시험 목록 API (관리자용)"""
    return await exam_service.get_all_exams(db)


@router.get("/active", response_model=exam_schema.ExamListResponse)
async def get_active_exams(
    db: AsyncSession = Depends(get_db),
):
    """현재 응시 가능한 시험 목록 API"""
    return await exam_service.get_active_exams(db)


@router.get("/participant/{user_id}", response_model=exam_schema.ParticipantExamListResponse)
async def get_exams_for_participant(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """응시자용 시험 목록 API (제출 상태 포함)"""
    return await exam_service.get_exams_for_participant(db, user_id)


@router.get("/{exam_id}", response_model=exam_schema.ExamResponse)
async def get_exam(
    exam_id: int,
    db: AsyncSession = Depends(get_db),
):
    """시험 조회 API"""
    return await exam_service.get_exam(db, exam_id)


@router.patch("/{exam_id}", response_model=exam_schema.ExamResponse)
async def update_exam(
    exam_id: int,
    request: exam_schema.ExamUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """시험 수정 API (관리자용)"""
    return await exam_service.update_exam(db, exam_id, request)


@router.delete("/{exam_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exam(
    exam_id: int,
    db: AsyncSession = Depends(get_db),
):
    """시험 삭제 API (문제, 답안 기록 포함)"""
    await cascade_service.delete_exam(db, exam_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{exam_id}/questions", response_model=question_schema.QuestionListResponse)
async def get_exam_questions(
    exam_id: int,
    db: AsyncSession = Depends(get_db),
):
    """시험 문제 목록 API (관리자용, 정답 포함)"""
    return await question_service.get_questions_by_exam(db, exam_id)


@router.get("/{exam_id}/questions/participant", response_model=question_schema.ParticipantQuestionListResponse)
async def get_exam_questions_for_participant(
    exam_id: int,
    db: AsyncSession = Depends(get_db),
):
    """시험 문제 목록 API (응시자용, 정답 제외)"""
    return await question_service.get_questions_for_participant(db, exam_id)


@router.get("/{exam_id}/answers", response_model=answer_schema.AnswerListResponse)
async def get_exam_answers(
    exam_id: int,
    db: AsyncSession = Depends(get_db),
):
    """시험 답안 기록 목록 API (관리자 검토용)"""
    return await answer_service.get_answers_by_exam(db, exam_id)


@router.get("/{exam_id}/answers/{user_id}", response_model=answer_schema.AnswerResponse | None)
async def get_user_answer(
    exam_id: int,
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """응시자 답안 기록 조회 API (응시 전이면 null)"""
    return await answer_service.get_user_answer(db, exam_id, user_id)
