from app.services.answer_service import (
    create_answer,
    get_answer,
    get_answers_by_exam,
    get_user_answer,
    submit_exam,
    update_progress,
)
from app.services.availability import filter_open_exams, is_exam_open
from app.services.cascade_service import delete_exam, delete_question
from app.services.exam_service import (
    create_exam,
    get_active_exams,
    get_all_exams,
    get_exam,
    get_exams_for_participant,
    update_exam,
)
from app.services.question_service import (
    create_question,
    get_question,
    get_questions_by_exam,
    get_questions_for_participant,
    update_question,
)
from app.services.scoring_service import calculate_score, compute_score
from app.services.user_service import create_user, delete_user, get_user, get_users, update_user

__all__ = [
    "is_exam_open",
    "filter_open_exams",
    "compute_score",
    "calculate_score",
    "create_answer",
    "get_answer",
    "get_user_answer",
    "update_progress",
    "submit_exam",
    "get_answers_by_exam",
    "delete_question",
    "delete_exam",
    "create_exam",
    "get_exam",
    "get_all_exams",
    "get_active_exams",
    "update_exam",
    "get_exams_for_participant",
    "create_question",
    "get_question",
    "get_questions_by_exam",
    "get_questions_for_participant",
    "update_question",
    "create_user",
    "get_user",
    "get_users",
    "update_user",
    "delete_user",
]
