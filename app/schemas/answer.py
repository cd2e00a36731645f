from datetime import datetime

from pydantic import BaseModel, Field


class AnswerCreateRequest(BaseModel):
    """답안 기록 생성(응시 시작) 요청 스키마"""
    exam_id: int = Field(..., description="시험 ID")
    user_id: int = Field(..., description="사용자 ID")
    answers: dict[str, str] = Field(default_factory=dict, description="{문제 ID: 선택 기호}")
    is_submitted: bool = Field(False, description="제출 완료 상태로 생성할지 여부 (일반적으로 False)")
    progress: dict[str, str] | None = Field(None, description="초기 자동 저장 값")


class ProgressUpdateRequest(BaseModel):
    """자동 저장 요청 스키마 (기존 값을 통째로 교체)"""
    progress: dict[str, str] = Field(..., description="{문제 ID: 선택 기호}")


class AnswerSubmitRequest(BaseModel):
    """최종 제출 요청 스키마"""
    answers: dict[str, str] = Field(..., description="{문제 ID: 선택 기호}")


class AnswerResponse(BaseModel):
    """답안 기록 응답 스키마"""
    id: int
    exam_id: int
    user_id: int
    answers: dict[str, str]
    score: int
    submitted_at: datetime
    is_submitted: bool
    progress: dict[str, str] | None
    created_at: datetime

    model_config = {"from_attributes": True}


class AnswerListResponse(BaseModel):
    """답안 기록 목록 응답 스키마"""
    answers: list[AnswerResponse]
    total: int
