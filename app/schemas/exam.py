from datetime import datetime

from pydantic import BaseModel, Field

from app.models.exam import ExamStatus


class ExamCreateRequest(BaseModel):
    """시험 생성 요청 스키마"""
    title: str = Field(..., min_length=1, description="시험 제목")
    description: str = Field(..., description="시험 설명")
    start_at: datetime = Field(..., description="응시 시작 시각")
    end_at: datetime = Field(..., description="응시 종료 시각 (start_at 이후)")
    duration_minutes: int = Field(..., gt=0, description="제한 시간 (분)")
    status: ExamStatus = Field(..., description="시험 상태 (active | inactive)")


class ExamUpdateRequest(BaseModel):
    """시험 수정 요청 스키마 (전달된 필드만 변경)"""
    title: str | None = Field(None, min_length=1)
    description: str | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    duration_minutes: int | None = Field(None, gt=0)
    status: ExamStatus | None = None


class ExamResponse(BaseModel):
    """시험 응답 스키마"""
    id: int
    title: str
    description: str
    start_at: datetime
    end_at: datetime
    duration_minutes: int
    status: ExamStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class ExamListResponse(BaseModel):
    """시험 목록 응답 스키마"""
    exams: list[ExamResponse]
    total: int


class ParticipantExamResponse(ExamResponse):
    """응시자용 시험 응답 스키마 (본인 제출 상태 포함)"""
    answer_id: int | None = Field(None, description="답안 기록 ID (응시 전이면 None)")
    is_submitted: bool = False
    score: int | None = Field(None, description="제출한 경우에만 점수")


class ParticipantExamListResponse(BaseModel):
    """응시자용 시험 목록 응답 스키마"""
    exams: list[ParticipantExamResponse]
    total: int
