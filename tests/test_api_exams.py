"""Exams API 통합 테스트"""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from app.models.answer import Answer
from app.models.exam import Exam, ExamStatus
from app.models.question import Question

EXAM_PAYLOAD = {
    "title": "기말고사",
    "description": "1학기 기말고사",
    "start_at": "2026-06-20T09:00:00+00:00",
    "end_at": "2026-06-20T11:00:00+00:00",
    "duration_minutes": 120,
    "status": "active",
}


@pytest.mark.asyncio
async def test_create_exam(client, test_db_session):
    response = await client.post("/api/v1/exams", json=EXAM_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "기말고사"
    assert data["duration_minutes"] == 120
    assert data["status"] == "active"
    assert "id" in data
    assert "created_at" in data


@pytest.mark.asyncio
@pytest.mark.parametrize("end_at", ["2026-06-20T08:00:00+00:00", "2026-06-20T09:00:00+00:00"])
async def test_create_exam_rejects_bad_date_order(client, test_db_session, end_at):
    """종료 시각이 시작 시각과 같거나 이르면 400"""
    response = await client.post("/api/v1/exams", json={**EXAM_PAYLOAD, "end_at": end_at})

    assert response.status_code == 400
    assert "종료 시각은 시작 시각 이후여야 합니다" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_exam_rejects_unknown_status(client, test_db_session):
    response = await client.post("/api/v1/exams", json={**EXAM_PAYLOAD, "status": "archived"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_exam_validates_merged_dates(client, test_db_session):
    """한쪽 시각만 바꿔도 기존 값과 합쳐 검증"""
    created = await client.post("/api/v1/exams", json=EXAM_PAYLOAD)
    exam_id = created.json()["id"]

    only_end = await client.patch(f"/api/v1/exams/{exam_id}", json={"end_at": "2026-06-20T08:59:00+00:00"})
    only_start = await client.patch(f"/api/v1/exams/{exam_id}", json={"start_at": "2026-06-20T11:00:00+00:00"})
    both = await client.patch(
        f"/api/v1/exams/{exam_id}",
        json={"start_at": "2026-06-21T12:00:00+00:00", "end_at": "2026-06-21T10:00:00+00:00"},
    )

    assert only_end.status_code == 400
    assert only_start.status_code == 400
    assert both.status_code == 400


@pytest.mark.asyncio
async def test_update_exam(client, test_db_session):
    created = await client.post("/api/v1/exams", json=EXAM_PAYLOAD)
    exam_id = created.json()["id"]

    response = await client.patch(
        f"/api/v1/exams/{exam_id}",
        json={"title": "기말고사(수정)", "end_at": "2026-06-20T12:00:00+00:00", "status": "inactive"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "기말고사(수정)"
    assert data["status"] == "inactive"
    assert data["description"] == "1학기 기말고사"


@pytest.mark.asyncio
async def test_update_exam_not_found(client, test_db_session):
    response = await client.patch("/api/v1/exams/999", json={"title": "없음"})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_exam(client, test_db_session):
    created = await client.post("/api/v1/exams", json=EXAM_PAYLOAD)
    exam_id = created.json()["id"]

    found = await client.get(f"/api/v1/exams/{exam_id}")
    missing = await client.get("/api/v1/exams/999")

    assert found.status_code == 200
    assert found.json()["id"] == exam_id
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_get_exams(client, test_db_session):
    await client.post("/api/v1/exams", json=EXAM_PAYLOAD)
    await client.post("/api/v1/exams", json={**EXAM_PAYLOAD, "title": "쪽지시험", "status": "inactive"})

    response = await client.get("/api/v1/exams")

    assert response.status_code == 200
    assert response.json()["total"] == 2


@pytest.mark.asyncio
async def test_get_active_exams(client, test_db_session, exam_factory):
    """활성 상태이면서 응시 시간 안인 시험만"""
    test_db_session.add_all([
        exam_factory(title="진행중"),
        exam_factory(title="비활성", status=ExamStatus.INACTIVE),
        exam_factory(title="종료", opens_in=timedelta(days=-2), length=timedelta(hours=1)),
        exam_factory(title="예정", opens_in=timedelta(days=1)),
    ])
    await test_db_session.commit()

    response = await client.get("/api/v1/exams/active")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["exams"][0]["title"] == "진행중"


@pytest.mark.asyncio
async def test_get_exams_for_participant(client, test_db_session, exam_factory, participant_factory):
    """응시 가능한 시험 + 본인 제출 상태"""
    started = exam_factory(title="응시함")
    fresh = exam_factory(title="응시 전")
    closed = exam_factory(title="비활성", status=ExamStatus.INACTIVE)
    user = participant_factory()
    test_db_session.add_all([started, fresh, closed, user])
    await test_db_session.commit()
    started_id, fresh_id, user_id = started.id, fresh.id, user.id

    created = await client.post("/api/v1/answers", json={"exam_id": started_id, "user_id": user_id})
    await client.post(f"/api/v1/answers/{created.json()['id']}/submit", json={"answers": {}})

    response = await client.get(f"/api/v1/exams/participant/{user_id}")

    assert response.status_code == 200
    exams = {e["id"]: e for e in response.json()["exams"]}
    assert set(exams) == {started_id, fresh_id}
    assert exams[started_id]["is_submitted"] is True
    assert exams[started_id]["score"] == 0
    assert exams[fresh_id]["is_submitted"] is False
    assert exams[fresh_id]["answer_id"] is None
    assert exams[fresh_id]["score"] is None


@pytest.mark.asyncio
async def test_get_exams_for_unknown_participant(client, test_db_session):
    response = await client.get("/api/v1/exams/participant/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_exam_cascades(client, test_db_session, exam_factory, participant_factory):
    """문제 1개, 답안 1개인 시험 삭제 후 세 테이블 모두 0건"""
    exam = exam_factory()
    other = exam_factory(title="다른 시험")
    user = participant_factory()
    test_db_session.add_all([exam, other, user])
    await test_db_session.commit()
    exam_id, other_id = exam.id, other.id

    test_db_session.add_all([
        Question(exam_id=exam_id, text="문제", choices=["1", "2", "3", "4"], correct_choice="A"),
        Question(exam_id=other_id, text="문제", choices=["1", "2", "3", "4"], correct_choice="A"),
    ])
    await test_db_session.commit()
    await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user.id})

    response = await client.delete(f"/api/v1/exams/{exam_id}")

    assert response.status_code == 204
    assert await test_db_session.scalar(select(func.count(Exam.id)).where(Exam.id == exam_id)) == 0
    assert await test_db_session.scalar(select(func.count(Question.id)).where(Question.exam_id == exam_id)) == 0
    assert await test_db_session.scalar(select(func.count(Answer.id)).where(Answer.exam_id == exam_id)) == 0
    # 다른 시험은 영향 없음
    assert await test_db_session.scalar(select(func.count(Question.id)).where(Question.exam_id == other_id)) == 1


@pytest.mark.asyncio
async def test_delete_exam_without_dependents(client, test_db_session, exam_factory):
    exam = exam_factory()
    test_db_session.add(exam)
    await test_db_session.commit()

    response = await client.delete(f"/api/v1/exams/{exam.id}")

    assert response.status_code == 204


@pytest.mark.asyncio
async def test_delete_exam_not_found(client, test_db_session):
    response = await client.delete("/api/v1/exams/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_offset_window_is_stored_as_utc(client, test_db_session):
    """+09:00으로 입력한 응시 시간도 같은 시점으로 판정"""
    kst = timezone(timedelta(hours=9))
    now = datetime.now(kst)
    payload = {
        **EXAM_PAYLOAD,
        "start_at": (now - timedelta(minutes=30)).isoformat(),
        "end_at": (now + timedelta(minutes=30)).isoformat(),
    }

    created = await client.post("/api/v1/exams", json=payload)
    active = await client.get("/api/v1/exams/active")

    assert created.status_code == 201
    assert active.json()["total"] == 1
    assert active.json()["exams"][0]["id"] == created.json()["id"]


@pytest.mark.asyncio
async def test_offset_update_is_stored_as_utc(client, test_db_session):
    """수정 시에도 오프셋 시각을 UTC로 맞춰 저장"""
    created = await client.post(
        "/api/v1/exams",
        json={**EXAM_PAYLOAD, "start_at": "2020-01-01T00:00:00+00:00", "end_at": "2020-01-01T01:00:00+00:00"},
    )
    exam_id = created.json()["id"]
    kst = timezone(timedelta(hours=9))
    now = datetime.now(kst)

    await client.patch(
        f"/api/v1/exams/{exam_id}",
        json={"start_at": (now - timedelta(minutes=30)).isoformat(), "end_at": (now + timedelta(minutes=30)).isoformat()},
    )
    active = await client.get("/api/v1/exams/active")

    assert active.json()["total"] == 1


@pytest.mark.asyncio
async def test_exam_date_order_check_constraint(test_db_session, exam_factory):
    """DB 제약으로도 종료 시각 <= 시작 시각 저장 불가"""
    exam = exam_factory(length=timedelta(0))
    test_db_session.add(exam)

    with pytest.raises(IntegrityError):
        await test_db_session.commit()
    await test_db_session.rollback()
