"""
API v1 엔드포인트.
"""
from locker_api.api.v1.endpoints import (
    auth,
    users,
    stations,
    lockers,
    posts,
    comments,
)

__all__ = [
    "auth",
    "users",
    "stations",
    "lockers",
    "posts",
    "comments",
]
