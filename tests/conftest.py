"""테스트 공통 픽스처

임시 SQLite(aiosqlite) DB를 테스트마다 새로 만들고 get_db 의존성을 교체한다.
"""
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.main import app
from app.models import Base
from app.models.base import get_db
from app.models.exam import Exam, ExamStatus
from app.models.user import User, UserRole


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_maker(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db_session(test_session_maker):
    """테스트 데이터 준비/검증용 세션"""
    async with test_session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def client(test_session_maker):
    """앱과 같은 이벤트 루프에서 동작하는 HTTP 클라이언트"""
    async def override_get_db():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def make_exam(
    status: ExamStatus = ExamStatus.ACTIVE,
    opens_in: timedelta = timedelta(hours=-1),
    length: timedelta = timedelta(hours=2),
    title: str = "중간고사",
) -> Exam:
    """현재 시각 기준 상대 시간으로 시험 생성 (기본값: 지금 응시 가능)"""
    start_at = datetime.now(timezone.utc) + opens_in
    return Exam(
        title=title,
        description="테스트 시험",
        start_at=start_at,
        end_at=start_at + length,
        duration_minutes=60,
        status=status,
    )


def make_participant(email: str = "student@example.com", name: str = "응시자") -> User:
    return User(name=name, email=email, role=UserRole.PARTICIPANT, class_name="3-1")


@pytest.fixture
def exam_factory():
    return make_exam


@pytest.fixture
def participant_factory():
    return make_participant
