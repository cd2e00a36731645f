from typing import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User, UserRole


async def get_user_by_id(session: AsyncSession, user_id: int) -> User | None:
    """ID로 사용자 조회"""
    result = await session.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    """이메일로 사용자 조회"""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def user_exists(session: AsyncSession, user_id: int) -> bool:
    """사용자 존재 여부"""
    count = await session.scalar(select(func.count(User.id)).where(User.id == user_id))
    return bool(count)


async def get_users(session: AsyncSession, role: UserRole | None = None) -> Sequence[User]:
    """사용자 목록 조회 (역할 필터 선택)"""
    stmt = select(User)
    if role is not None:
        stmt = stmt.where(User.role == role)
    result = await session.execute(stmt.order_by(User.id))
    return result.scalars().all()


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    role: UserRole,
    class_name: str | None = None,
) -> User:
    """사용자 생성"""
    user = User(name=name, email=email, role=role, class_name=class_name)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


async def update_user(
    session: AsyncSession,
    user: User,
    name: str | None = None,
    email: str | None = None,
    class_name: str | None = None,
) -> User:
    """사용자 수정 (None이 아닌 필드만 반영)"""
    if name is not None:
        user.name = name
    if email is not None:
        user.email = email
    if class_name is not None:
        user.class_name = class_name

    await session.commit()
    await session.refresh(user)
    return user


async def delete_user(session: AsyncSession, user_id: int) -> int:
    """사용자 삭제"""
    result = await session.execute(delete(User).where(User.id == user_id))
    await session.commit()
    return result.rowcount
