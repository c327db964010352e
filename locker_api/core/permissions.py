"""
권한 확인.

라우트가 요구하는 권한 집합(USER, ADMIN, BOTH)과 요청자의 권한을 비교하는
순수 함수 is_allowed 와, 이를 FastAPI 의존성으로 감싼 require_authority 를
제공합니다.
"""
import enum
from typing import Callable

from fastapi import Depends

from locker_api.core.deps import Identity, get_current_identity
from locker_api.core.exceptions import ForbiddenException
from locker_api.models.user import UserAuthority


class RequiredAuthority(str, enum.Enum):
    """라우트가 요구하는 권한."""
    USER = "user"
    ADMIN = "admin"
    BOTH = "both"


_ALLOWED = {
    RequiredAuthority.USER: frozenset({UserAuthority.USER}),
    RequiredAuthority.ADMIN: frozenset({UserAuthority.ADMIN}),
    RequiredAuthority.BOTH: frozenset({UserAuthority.USER, UserAuthority.ADMIN}),
}


def is_allowed(authority: UserAuthority, required: RequiredAuthority) -> bool:
    """요청자의 권한이 요구 권한 집합에 속하는지 확인."""
    return authority in _ALLOWED[required]


def require_authority(required: RequiredAuthority) -> Callable[..., Identity]:
    """
    권한 확인 의존성 생성.

    토큰 검증(get_current_identity) 후 권한을 비교합니다.

    Args:
        required: 요구 권한

    Returns:
        인증된 Identity 를 돌려주는 의존성

    Raises:
        ForbiddenException: 권한이 맞지 않는 경우
    """

    async def dependency(identity: Identity = Depends(get_current_identity)) -> Identity:
        if not is_allowed(identity.authority, required):
            raise ForbiddenException()
        return identity

    return dependency


require_admin = require_authority(RequiredAuthority.ADMIN)
require_any = require_authority(RequiredAuthority.BOTH)
