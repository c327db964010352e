"""
FastAPI 공통 의존성.
"""
from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from jose import JWTError

from locker_api.db.session import SessionLocal
from locker_api.core.security import decode_token
from locker_api.core.exceptions import UnauthorizedException
from locker_api.schemas.auth import Identity

# 토큰이 없을 때도 직접 401 을 돌려주기 위해 auto_error=False
security = HTTPBearer(auto_error=False)


def get_db() -> Generator:
    """
    데이터베이스 세션 의존성.

    Yields:
        Session: SQLAlchemy 세션
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _resolve_identity(db: Session, token: str) -> Identity:
    from locker_api.crud.user import user as crud_user

    invalid_token = UnauthorizedException("유효하지 않은 토큰입니다.")
    try:
        payload = decode_token(token)
    except JWTError:
        raise invalid_token

    sub = payload.get("sub")
    if sub is None or payload.get("type") != "access":
        raise invalid_token
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        raise invalid_token

    # 삭제된 사용자는 기본 조회에서 제외됨
    user = crud_user.get(db, id=user_id)
    if user is None:
        raise UnauthorizedException("존재하지 않는 사용자입니다.")

    return Identity(id=user.id, email=user.email, authority=user.authority)


async def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Identity:
    """
    Bearer 토큰을 검증하고 요청자 정보를 request.state.identity 에 저장.

    Returns:
        요청자 Identity

    Raises:
        UnauthorizedException: 토큰이 없거나 유효하지 않은 경우
    """
    if credentials is None:
        raise UnauthorizedException("로그인이 필요합니다.")

    identity = _resolve_identity(db, credentials.credentials)
    request.state.identity = identity
    return identity


async def get_optional_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[Identity]:
    """
    토큰이 있으면 검증하고, 없으면 None.
    토큰이 있는데 유효하지 않으면 401 입니다.
    """
    if credentials is None:
        return None

    identity = _resolve_identity(db, credentials.credentials)
    request.state.identity = identity
    return identity
