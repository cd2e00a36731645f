"""Answers API 통합 테스트"""
import pytest
from sqlalchemy import func, select

from app.models.answer import Answer
from app.models.question import Question


async def _seed(session, exam_factory, participant_factory, correct=("C", "C")):
    """응시 가능한 시험 + 문제 + 응시자 준비"""
    exam = exam_factory()
    user = participant_factory()
    session.add_all([exam, user])
    await session.commit()

    questions = [
        Question(exam_id=exam.id, text=f"문제{i}", choices=["1", "2", "3", "4"], correct_choice=symbol)
        for i, symbol in enumerate(correct, start=1)
    ]
    session.add_all(questions)
    await session.commit()
    return exam.id, user.id, [q.id for q in questions]


async def _reload_answer(session, answer_id: int) -> Answer:
    result = await session.execute(
        select(Answer).where(Answer.id == answer_id).execution_options(populate_existing=True)
    )
    return result.scalar_one()


@pytest.mark.asyncio
async def test_answer_lifecycle(client, test_db_session, exam_factory, participant_factory):
    """응시 시작 -> 자동 저장 -> 제출 -> 채점"""
    exam_id, user_id, (q1, q2) = await _seed(test_db_session, exam_factory, participant_factory)

    response = await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})
    assert response.status_code == 201
    created = response.json()
    assert created["score"] == 0
    assert created["is_submitted"] is False
    assert created["progress"] is None
    answer_id = created["id"]

    response = await client.put(
        f"/api/v1/answers/{answer_id}/progress",
        json={"progress": {str(q1): "C"}},
    )
    assert response.status_code == 200
    assert response.json()["progress"] == {str(q1): "C"}
    assert response.json()["answers"] == {}

    # 자동 저장은 병합이 아니라 교체
    response = await client.put(
        f"/api/v1/answers/{answer_id}/progress",
        json={"progress": {str(q2): "A"}},
    )
    assert response.json()["progress"] == {str(q2): "A"}

    response = await client.post(
        f"/api/v1/answers/{answer_id}/submit",
        json={"answers": {str(q1): "C", str(q2): "A"}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["is_submitted"] is True
    assert data["score"] == 50
    assert data["answers"] == {str(q1): "C", str(q2): "A"}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "submitted, expected",
    [
        ({"q1": "C", "q2": "C"}, 100),
        ({"q1": "C", "q2": "A"}, 50),
        ({"q1": "C"}, 50),
    ],
)
async def test_submit_scores(client, test_db_session, exam_factory, participant_factory, submitted, expected):
    """정답이 C, C인 두 문제 시험의 채점"""
    exam_id, user_id, (q1, q2) = await _seed(test_db_session, exam_factory, participant_factory)
    ids = {"q1": str(q1), "q2": str(q2)}

    created = await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})
    answer_id = created.json()["id"]

    response = await client.post(
        f"/api/v1/answers/{answer_id}/submit",
        json={"answers": {ids[key]: value for key, value in submitted.items()}},
    )

    assert response.status_code == 200
    assert response.json()["score"] == expected


@pytest.mark.asyncio
async def test_create_answer_duplicate(client, test_db_session, exam_factory, participant_factory):
    """같은 시험/사용자로 두 번째 생성은 409"""
    exam_id, user_id, _ = await _seed(test_db_session, exam_factory, participant_factory)

    first = await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})
    second = await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})

    assert first.status_code == 201
    assert second.status_code == 409
    count = await test_db_session.scalar(
        select(func.count(Answer.id)).where(Answer.exam_id == exam_id, Answer.user_id == user_id)
    )
    assert count == 1


@pytest.mark.asyncio
async def test_create_answer_missing_exam_or_user(client, test_db_session, exam_factory, participant_factory):
    exam_id, user_id, _ = await _seed(test_db_session, exam_factory, participant_factory)

    response = await client.post("/api/v1/answers", json={"exam_id": 999, "user_id": user_id})
    assert response.status_code == 404
    assert "시험을 찾을 수 없습니다" in response.json()["detail"]

    response = await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": 999})
    assert response.status_code == 404
    assert "사용자를 찾을 수 없습니다" in response.json()["detail"]


@pytest.mark.asyncio
async def test_create_answer_outside_window(client, test_db_session, exam_factory, participant_factory):
    """종료된 시험은 응시 시작 불가 (403)"""
    from datetime import timedelta

    exam = exam_factory(opens_in=timedelta(hours=-3), length=timedelta(hours=1))
    user = participant_factory()
    test_db_session.add_all([exam, user])
    await test_db_session.commit()

    response = await client.post("/api/v1/answers", json={"exam_id": exam.id, "user_id": user.id})

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_submitted_answer_is_final(client, test_db_session, exam_factory, participant_factory):
    """제출 후 자동 저장/재제출은 409이고 저장된 값은 그대로"""
    exam_id, user_id, (q1, q2) = await _seed(test_db_session, exam_factory, participant_factory)

    created = await client.post(
        "/api/v1/answers",
        json={"exam_id": exam_id, "user_id": user_id, "progress": {str(q1): "B"}},
    )
    answer_id = created.json()["id"]
    await client.post(f"/api/v1/answers/{answer_id}/submit", json={"answers": {str(q1): "C", str(q2): "C"}})

    progress = await client.put(f"/api/v1/answers/{answer_id}/progress", json={"progress": {str(q1): "D"}})
    resubmit = await client.post(f"/api/v1/answers/{answer_id}/submit", json={"answers": {}})

    assert progress.status_code == 409
    assert resubmit.status_code == 409

    answer = await _reload_answer(test_db_session, answer_id)
    assert answer.is_submitted is True
    assert answer.score == 100
    assert answer.answers == {str(q1): "C", str(q2): "C"}
    assert answer.progress == {str(q1): "B"}


@pytest.mark.asyncio
async def test_answer_not_found(client, test_db_session):
    progress = await client.put("/api/v1/answers/999/progress", json={"progress": {}})
    submit = await client.post("/api/v1/answers/999/submit", json={"answers": {}})
    fetch = await client.get("/api/v1/answers/999")

    assert progress.status_code == 404
    assert submit.status_code == 404
    assert fetch.status_code == 404
    assert "답안 기록을 찾을 수 없습니다" in progress.json()["detail"]


@pytest.mark.asyncio
async def test_get_user_answer(client, test_db_session, exam_factory, participant_factory):
    """응시 전에는 null, 응시 후에는 기록"""
    exam_id, user_id, _ = await _seed(test_db_session, exam_factory, participant_factory)

    before = await client.get(f"/api/v1/exams/{exam_id}/answers/{user_id}")
    assert before.status_code == 200
    assert before.json() is None

    await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})

    after = await client.get(f"/api/v1/exams/{exam_id}/answers/{user_id}")
    assert after.status_code == 200
    assert after.json()["user_id"] == user_id


@pytest.mark.asyncio
async def test_list_answers_by_exam(client, test_db_session, exam_factory, participant_factory):
    """없는 시험은 404, 응시자 없는 시험은 빈 목록"""
    exam_id, user_id, _ = await _seed(test_db_session, exam_factory, participant_factory)

    missing = await client.get("/api/v1/exams/999/answers")
    assert missing.status_code == 404

    empty = await client.get(f"/api/v1/exams/{exam_id}/answers")
    assert empty.status_code == 200
    assert empty.json() == {"answers": [], "total": 0}

    await client.post("/api/v1/answers", json={"exam_id": exam_id, "user_id": user_id})

    listed = await client.get(f"/api/v1/exams/{exam_id}/answers")
    assert listed.json()["total"] == 1
