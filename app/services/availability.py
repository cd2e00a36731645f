"""응시 가능 여부 판정

시험은 status가 active이고 start_at <= now <= end_at 일 때만 열려 있다.
양 끝 시각 모두 포함이다.
"""
from datetime import datetime, timezone
from typing import Iterable

from app.models.exam import Exam, ExamStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """UTC 기준 aware datetime으로 변환

    naive 값은 이미 UTC로 저장된 값으로 간주한다 (SQLite는 오프셋 없이 시각만 저장).
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def is_exam_open(exam: Exam, now: datetime | None = None) -> bool:
    """시험이 현재 응시 가능한지 여부"""
    if exam.status != ExamStatus.ACTIVE:
        return False
    current = as_utc(now) if now is not None else utcnow()
    return as_utc(exam.start_at) <= current <= as_utc(exam.end_at)


def filter_open_exams(exams: Iterable[Exam], now: datetime | None = None) -> list[Exam]:
    """응시 가능한 시험만 추림"""
    current = now if now is not None else utcnow()
    return [exam for exam in exams if is_exam_open(exam, current)]
