from app.crud.answer import (
    count_answers_by_user_id,
    create_answer,
    delete_answers_by_exam_id,
    get_answer_by_exam_and_user,
    get_answer_by_id,
    get_answers_by_exam_id,
    get_answers_by_user_id,
    prune_question_key,
    update_answer_progress,
    update_answer_submission,
)
from app.crud.exam import (
    create_exam,
    delete_exam,
    get_all_exams,
    get_exam_by_id,
    get_exams_by_status,
    update_exam,
)
from app.crud.question import (
    create_question,
    delete_question,
    delete_questions_by_exam_id,
    get_answer_keys_by_exam_id,
    get_question_by_id,
    get_questions_by_exam_id,
    update_question,
)
from app.crud.user import (
    create_user,
    delete_user,
    get_user_by_email,
    get_user_by_id,
    get_users,
    update_user,
    user_exists,
)

__all__ = [
    "get_user_by_id",
    "get_user_by_email",
    "user_exists",
    "get_users",
    "create_user",
    "update_user",
    "delete_user",
    "get_exam_by_id",
    "get_all_exams",
    "get_exams_by_status",
    "create_exam",
    "update_exam",
    "delete_exam",
    "get_question_by_id",
    "get_questions_by_exam_id",
    "get_answer_keys_by_exam_id",
    "create_question",
    "update_question",
    "delete_question",
    "delete_questions_by_exam_id",
    "get_answer_by_id",
    "get_answer_by_exam_and_user",
    "get_answers_by_exam_id",
    "get_answers_by_user_id",
    "create_answer",
    "update_answer_progress",
    "update_answer_submission",
    "prune_question_key",
    "delete_answers_by_exam_id",
    "count_answers_by_user_id",
]
