"""
ORM 모델 모듈.
SQLAlchemy 가 인식하도록 모든 모델을 import 합니다.
"""
from locker_api.db.base import Base

# 사용자
from locker_api.models.user import User, UserAuthority

# 역 / 사물함
from locker_api.models.station import Station
from locker_api.models.locker import Locker, LockerStatus

# 문의사항
from locker_api.models.post import Post
from locker_api.models.comment import Comment

__all__ = [
    "Base",
    # 사용자
    "User",
    "UserAuthority",
    # 역 / 사물함
    "Station",
    "Locker",
    "LockerStatus",
    # 문의사항
    "Post",
    "Comment",
]
