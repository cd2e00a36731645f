from app.schemas.answer import (
    AnswerCreateRequest,
    AnswerListResponse,
    AnswerResponse,
    AnswerSubmitRequest,
    ProgressUpdateRequest,
)
from app.schemas.exam import (
    ExamCreateRequest,
    ExamListResponse,
    ExamResponse,
    ExamUpdateRequest,
    ParticipantExamListResponse,
    ParticipantExamResponse,
)
from app.schemas.question import (
    ParticipantQuestionListResponse,
    ParticipantQuestionResponse,
    QuestionCreateRequest,
    QuestionListResponse,
    QuestionResponse,
    QuestionUpdateRequest,
)
from app.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "UserListResponse",
    "ExamCreateRequest",
    "ExamUpdateRequest",
    "ExamResponse",
    "ExamListResponse",
    "ParticipantExamResponse",
    "ParticipantExamListResponse",
    "QuestionCreateRequest",
    "QuestionUpdateRequest",
    "QuestionResponse",
    "ParticipantQuestionResponse",
    "QuestionListResponse",
    "ParticipantQuestionListResponse",
    "AnswerCreateRequest",
    "ProgressUpdateRequest",
    "AnswerSubmitRequest",
    "AnswerResponse",
    "AnswerListResponse",
]
