import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import answer as answer_crud, user as user_crud
from app.exceptions import DuplicateEmailError, UserHasAnswersError, UserNotFoundError
from app.models.user import UserRole
from app.schemas import user as user_schema

logger = logging.getLogger(__name__)


async def create_user(
    session: AsyncSession,
    request: user_schema.UserCreateRequest,
) -> user_schema.UserResponse:
    """사용자 등록"""
    if await user_crud.get_user_by_email(session, request.email):
        raise DuplicateEmailError(request.email)

    user = await user_crud.create_user(
        session,
        name=request.name,
        email=request.email,
        role=request.role,
        class_name=request.class_name,
    )
    logger.info(f"사용자 생성: user_id={user.id}, role={user.role.value}")
    return user_schema.UserResponse.model_validate(user)


async def get_user(session: AsyncSession, user_id: int) -> user_schema.UserResponse:
    user = await user_crud.get_user_by_id(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)
    return user_schema.UserResponse.model_validate(user)


async def get_users(
    session: AsyncSession,
    role: UserRole | None = None,
) -> user_schema.UserListResponse:
    users = await user_crud.get_users(session, role)
    user_responses = [user_schema.UserResponse.model_validate(u) for u in users]
    return user_schema.UserListResponse(users=user_responses, total=len(user_responses))


async def update_user(
    session: AsyncSession,
    user_id: int,
    request: user_schema.UserUpdateRequest,
) -> user_schema.UserResponse:
    """사용자 수정 (이메일 변경 시 중복 재검사)"""
    user = await user_crud.get_user_by_id(session, user_id)
    if not user:
        raise UserNotFoundError(user_id)

    if request.email is not None and request.email != user.email:
        if await user_crud.get_user_by_email(session, request.email):
            raise DuplicateEmailError(request.email)

    user = await user_crud.update_user(
        session,
        user,
        name=request.name,
        email=request.email,
        class_name=request.class_name,
    )
    logger.info(f"사용자 수정: user_id={user_id}")
    return user_schema.UserResponse.model_validate(user)


async def delete_user(session: AsyncSession, user_id: int) -> None:
    """사용자 삭제

    채점 기록 보존을 위해 답안 기록이 있는 사용자는 삭제하지 않는다.
    """
    if not await user_crud.user_exists(session, user_id):
        raise UserNotFoundError(user_id)

    answer_count = await answer_crud.count_answers_by_user_id(session, user_id)
    if answer_count:
        logger.warning(f"답안 기록이 있는 사용자 삭제 시도: user_id={user_id}, answers={answer_count}")
        raise UserHasAnswersError(user_id)

    await user_crud.delete_user(session, user_id)
    logger.info(f"사용자 삭제: user_id={user_id}")
