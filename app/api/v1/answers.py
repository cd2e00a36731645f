from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import answer as answer_schema
from app.services import answer_service

router = APIRouter(prefix="/answers", tags=["answers"])


@router.post("", response_model=answer_schema.AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: answer_schema.AnswerCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """응시 시작 API (답안 기록 생성)"""
    return await answer_service.create_answer(db, request)


@router.get("/{answer_id}", response_model=answer_schema.AnswerResponse)
async def get_answer(
    answer_id: int,
    db: AsyncSession = Depends(get_db),
):
    """답안 기록 조회 API"""
    return await answer_service.get_answer(db, answer_id)


@router.put("/{answer_id}/progress", response_model=answer_schema.AnswerResponse)
async def update_progress(
    answer_id: int,
    request: answer_schema.ProgressUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """자동 저장 API"""
    return await answer_service.update_progress(db, answer_id, request)


@router.post("/{answer_id}/submit", response_model=answer_schema.AnswerResponse)
async def submit_exam(
    answer_id: int,
    request: answer_schema.AnswerSubmitRequest,
    db: AsyncSession = Depends(get_db),
):
    """최종 제출 API (자동 채점)"""
    return await answer_service.submit_exam(db, answer_id, request)
