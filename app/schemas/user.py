from datetime import datetime

from pydantic import BaseModel, Field

from app.models.user import UserRole


class UserCreateRequest(BaseModel):
    """사용자 생성 요청 스키마"""
    name: str = Field(..., min_length=1, max_length=100, description="이름")
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$", description="이메일")
    role: UserRole = Field(..., description="역할 (admin | participant)")
    class_name: str | None = Field(None, max_length=50, description="반 (관리자는 생략)")


class UserUpdateRequest(BaseModel):
    """사용자 수정 요청 스키마 (전달된 필드만 변경, 역할은 변경 불가)"""
    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    class_name: str | None = Field(None, max_length=50)


class UserResponse(BaseModel):
    """사용자 응답 스키마"""
    id: int
    name: str
    email: str
    role: UserRole
    class_name: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class UserListResponse(BaseModel):
    """사용자 목록 응답 스키마"""
    users: list[UserResponse]
    total: int
