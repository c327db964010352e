"""
사용자 엔드포인트.
"""
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from locker_api.core.deps import get_db, get_current_identity
from locker_api.core.exceptions import BadRequestException, ForbiddenException
from locker_api.core.permissions import require_admin, require_any
from locker_api.crud.locker import locker as crud_locker
from locker_api.crud.user import user as crud_user
from locker_api.models.user import UserAuthority
from locker_api.schemas.auth import Identity
from locker_api.schemas.user import UserResponse, UserDetailResponse, UserAdminResponse
from locker_api.services import lifecycle_service

router = APIRouter()


@router.get("", response_model=UserResponse)
def get_current_user_info(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """
    로그인한 사용자 정보 조회.

    Requires 토큰.
    """
    user = crud_user.get(db, id=identity.id)
    if user is None:
        raise BadRequestException("없는 유저 입니다.")
    return user


@router.get("/{user_id}", response_model=UserDetailResponse)
def get_user(
    user_id: int = Path(..., ge=1),
    db: Session = Depends(get_db)
):
    """사용자 정보와 사용 중인 사물함 조회."""
    user = crud_user.get(db, id=user_id)
    if user is None:
        raise BadRequestException("없는 유저 입니다.")

    return UserDetailResponse(
        id=user.id,
        email=user.email,
        lockers=crud_locker.get_by_user(db, user_id=user.id),
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_any),
    db: Session = Depends(get_db)
):
    """
    사용자 삭제 (soft delete).

    관리자는 모든 사용자를, 일반 사용자는 본인만 삭제할 수 있습니다.
    """
    if identity.authority == UserAuthority.USER and identity.id != user_id:
        raise ForbiddenException("본인 계정만 삭제할 수 있습니다.")

    lifecycle_service.soft_delete(db, crud_user, user_id, not_found="없는 유저 입니다.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/restore/{user_id}", response_model=UserAdminResponse)
def restore_user(
    user_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    삭제된 사용자 복구.
    관리자 권한 필요.
    """
    return lifecycle_service.restore(
        db,
        crud_user,
        user_id,
        not_deleted="삭제된 user 가 아닙니다.",
        not_found="없는 유저 입니다.",
    )
