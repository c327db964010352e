"""
API v1 메인 라우터.
모든 엔드포인트를 포함합니다.
"""
from fastapi import APIRouter

from locker_api.api.v1.endpoints import (
    auth,
    users,
    stations,
    lockers,
    posts,
    comments,
)

api_router = APIRouter()

# ============================================================================
# 인증
# ============================================================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["인증"]
)

# ============================================================================
# 사용자
# ============================================================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["사용자"]
)

# ============================================================================
# 역 / 사물함
# ============================================================================
api_router.include_router(
    stations.router,
    prefix="/stations",
    tags=["역"]
)

api_router.include_router(
    lockers.router,
    prefix="/lockers",
    tags=["사물함"]
)

# ============================================================================
# 문의사항
# ============================================================================
api_router.include_router(
    posts.router,
    prefix="/posts",
    tags=["문의사항"]
)

api_router.include_router(
    comments.router,
    prefix="/comments",
    tags=["문의사항"]
)
