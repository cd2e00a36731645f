import logging
from typing import Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import question as question_crud

logger = logging.getLogger(__name__)


def compute_score(answer_keys: Iterable[tuple[int, str]], answers: Mapping[str, str]) -> int:
    """정답 키와 응답으로 백분율 점수 계산 (0-100)

    Args:
        answer_keys: [(question_id, correct_choice), ...]
        answers: {str(question_id): 선택 기호}

    Returns:
        정답 수 / 문제 수 * 100 을 반올림(0.5는 올림)한 정수.
        문제가 없으면 0. 응답하지 않은 문제는 오답으로 처리한다.
    """
    keys = list(answer_keys)
    total = len(keys)
    if total == 0:
        return 0

    # 대소문자 구분, 정확히 일치할 때만 정답
    correct = sum(1 for question_id, correct_choice in keys if answers.get(str(question_id)) == correct_choice)

    # round-half-up을 정수 연산으로: floor((correct * 100 / total) + 0.5)
    return (correct * 200 + total) // (total * 2)


async def calculate_score(
    session: AsyncSession,
    exam_id: int,
    answers: Mapping[str, str],
) -> int:
    """시험의 현재 문제 세트 기준으로 점수 계산 (저장하지 않음)"""
    answer_keys = await question_crud.get_answer_keys_by_exam_id(session, exam_id)
    score = compute_score(answer_keys, answers)
    logger.debug(f"채점 완료: exam_id={exam_id}, questions={len(answer_keys)}, score={score}")
    return score
