from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import question as question_schema
from app.services import cascade_service, question_service

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post("", response_model=question_schema.QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: question_schema.QuestionCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """문제 생성 API (관리자용)"""
    return await question_service.create_question(db, request)


@router.get("/{question_id}", response_model=question_schema.QuestionResponse)
async def get_question(
    question_id: int,
    db: AsyncSession = Depends(get_db),
):
    """문제 조회 API"""
    return await question_service.get_question(db, question_id)


@router.patch("/{question_id}", response_model=question_schema.QuestionResponse)
async def update_question(
    question_id: int,
    request: question_schema.QuestionUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """문제 수정 API (관리자용)"""
    return await question_service.update_question(db, question_id, request)


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: int,
    db: AsyncSession = Depends(get_db),
):
    """문제 삭제 API (답안 기록에서 해당 문제 키 제거)"""
    await cascade_service.delete_question(db, question_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
