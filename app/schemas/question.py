from datetime import datetime

from pydantic import BaseModel, Field


class QuestionCreateRequest(BaseModel):
    """문제 생성 요청 스키마

    보기 개수와 정답 기호는 서비스 계층에서 검증한다 (400 응답).
    """
    exam_id: int = Field(..., description="시험 ID")
    text: str = Field(..., min_length=1, description="문제 본문")
    choices: list[str] = Field(..., description="보기 4개 (A, B, C, D 순서)")
    correct_choice: str = Field(..., description="정답 기호 (A | B | C | D)")


class QuestionUpdateRequest(BaseModel):
    """문제 수정 요청 스키마 (전달된 필드만 변경)"""
    text: str | None = Field(None, min_length=1)
    choices: list[str] | None = None
    correct_choice: str | None = None


class QuestionResponse(BaseModel):
    """문제 응답 스키마 (관리자용, 정답 포함)"""
    id: int
    exam_id: int
    text: str
    choices: list[str]
    correct_choice: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ParticipantQuestionResponse(BaseModel):
    """응시자용 문제 응답 스키마 (정답 제외)"""
    id: int
    exam_id: int
    text: str
    choices: list[str]
    created_at: datetime

    model_config = {"from_attributes": True}


class QuestionListResponse(BaseModel):
    """문제 목록 응답 스키마"""
    questions: list[QuestionResponse]
    total: int


class ParticipantQuestionListResponse(BaseModel):
    """응시자용 문제 목록 응답 스키마"""
    questions: list[ParticipantQuestionResponse]
    total: int
