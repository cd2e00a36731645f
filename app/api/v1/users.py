from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.models.user import UserRole
from app.schemas import user as user_schema
from app.services import user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=user_schema.UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: user_schema.UserCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """사용자 등록 API"""
    return await user_service.create_user(db, request)


@router.get("", response_model=user_schema.UserListResponse)
async def get_users(
    role: UserRole | None = Query(None, description="역할 필터"),
    db: AsyncSession = Depends(get_db),
):
    """사용자 목록 조회 API"""
    return await user_service.get_users(db, role)


@router.get("/{user_id}", response_model=user_schema.UserResponse)
async def get_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """사용자 조회 API"""
    return await user_service.get_user(db, user_id)


@router.patch("/{user_id}", response_model=user_schema.UserResponse)
async def update_user(
    user_id: int,
    request: user_schema.UserUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """사용자 수정 API"""
    return await user_service.update_user(db, user_id, request)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int,
    db: AsyncSession = Depends(get_db),
):
    """사용자 삭제 API (답안 기록이 있으면 409)"""
    await user_service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
