"""
보안 유틸리티: JWT, 비밀번호 해시.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from locker_api.config import settings

# 비밀번호 해시 컨텍스트
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    평문 비밀번호가 해시와 일치하는지 확인.

    Args:
        plain_password: 평문 비밀번호
        hashed_password: 저장된 해시

    Returns:
        일치하면 True
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """비밀번호 bcrypt 해시 생성."""
    return pwd_context.hash(password)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    JWT access token 생성.

    Args:
        data: 토큰에 담을 데이터 (sub, authority)
        expires_delta: 만료 시간 (기본값은 설정의 ACCESS_TOKEN_EXPIRE_MINUTES)

    Returns:
        인코딩된 JWT
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire, "type": "access"})

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """
    JWT 디코딩 및 검증.

    Args:
        token: JWT

    Returns:
        디코딩된 payload

    Raises:
        JWTError: 토큰이 유효하지 않거나 만료된 경우
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise JWTError(f"유효하지 않은 토큰: {str(e)}")
