"""
인증 스키마.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field, StrictStr

from locker_api.core.validation import Email, Password
from locker_api.models.user import UserAuthority
from locker_api.schemas.common import CamelModel


class SignUpRequest(CamelModel):
    """회원가입 요청."""

    email: Email
    password: Password


class SignUpResponse(CamelModel):
    """회원가입 응답."""

    id: int
    email: str
    created_at: Optional[datetime] = None


class SignInRequest(CamelModel):
    """로그인 요청."""

    email: StrictStr = Field(..., min_length=1)
    password: StrictStr = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """JWT 응답."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # 초


class Identity(CamelModel):
    """토큰으로 확인된 요청자."""

    id: int
    email: str
    authority: UserAuthority
