"""
사용자 스키마.
"""
from datetime import datetime
from typing import List, Optional

from locker_api.models.user import UserAuthority
from locker_api.schemas.common import CamelModel
from locker_api.schemas.locker import LockerResponse


class UserResponse(CamelModel):
    """로그인한 사용자 정보."""

    id: int
    email: str
    created_at: Optional[datetime] = None


class UserDetailResponse(CamelModel):
    """사용자와 사용 중인 사물함."""

    id: int
    email: str
    lockers: List[LockerResponse] = []


class UserAdminResponse(CamelModel):
    """관리자용 사용자 정보 (복구 응답)."""

    id: int
    email: str
    authority: UserAuthority
    created_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
