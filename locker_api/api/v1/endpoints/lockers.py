"""
사물함 엔드포인트.
"""
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session

from locker_api.config import settings
from locker_api.core.deps import get_db
from locker_api.core.exceptions import BadRequestException, ForbiddenException
from locker_api.core.permissions import require_admin, require_any
from locker_api.crud.locker import locker as crud_locker
from locker_api.crud.station import station as crud_station
from locker_api.models.locker import Locker
from locker_api.models.user import UserAuthority
from locker_api.schemas.auth import Identity
from locker_api.schemas.locker import LockerCreate, LockerReserve, LockerResponse
from locker_api.services import lifecycle_service

router = APIRouter()


def _get_active_locker(db: Session, locker_id: int) -> Locker:
    locker = crud_locker.get(db, id=locker_id)
    if locker is None:
        raise BadRequestException("해당하는 사물함이 없습니다.")
    return locker


@router.post("", response_model=List[LockerResponse], status_code=status.HTTP_201_CREATED)
def create_lockers(
    locker_in: LockerCreate,
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    역에 빈 사물함 추가. 관리자 권한 필요.
    삭제된 역에는 추가할 수 없습니다.
    """
    if locker_in.count > settings.MAX_LOCKERS_PER_REQUEST:
        raise BadRequestException(
            f"한 번에 추가할 수 있는 사물함은 {settings.MAX_LOCKERS_PER_REQUEST}개 이하입니다."
        )
    # 역 삭제와 동시에 실행되지 않도록 역 행을 잠금
    if crud_station.get(db, id=locker_in.station_id, for_update=True) is None:
        raise BadRequestException("해당하는 역은 없습니다.")

    return crud_locker.create_for_station(
        db, station_id=locker_in.station_id, count=locker_in.count
    )


@router.patch("/{locker_id}/reserve", response_model=LockerResponse)
def reserve_locker(
    reservation: LockerReserve,
    locker_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_any),
    db: Session = Depends(get_db)
):
    """
    사물함 예약.

    비어 있는 사물함만 예약할 수 있으며, 요청자가 사용자로 배정됩니다.
    """
    locker = _get_active_locker(db, locker_id)
    if crud_station.get(db, id=locker.station_id, for_update=True) is None:
        raise BadRequestException("해당하는 역은 없습니다.")

    reserved = crud_locker.reserve(
        db,
        locker_id=locker.id,
        user_id=identity.id,
        start_date=reservation.start_date,
        end_date=reservation.end_date,
    )
    if reserved is None:
        raise BadRequestException("이미 사용 중인 사물함입니다.")
    return reserved


@router.patch("/{locker_id}/release", response_model=LockerResponse)
def release_locker(
    locker_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_any),
    db: Session = Depends(get_db)
):
    """
    사물함 반납.
    일반 사용자는 본인이 사용 중인 사물함만 반납할 수 있습니다.
    """
    locker = _get_active_locker(db, locker_id)
    if not locker.is_occupied():
        raise BadRequestException("사용 중인 사물함이 아닙니다.")
    if identity.authority == UserAuthority.USER and locker.user_id != identity.id:
        raise ForbiddenException("본인이 사용 중인 사물함만 반납할 수 있습니다.")

    released = crud_locker.release(db, locker_id=locker.id, holder_id=locker.user_id)
    if released is None:
        raise BadRequestException("사용 중인 사물함이 아닙니다.")
    return released


@router.delete("/{locker_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_locker(
    locker_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """사물함 삭제 (soft delete). 관리자 권한 필요."""
    lifecycle_service.soft_delete(db, crud_locker, locker_id, not_found="해당하는 사물함이 없습니다.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/restore/{locker_id}", response_model=LockerResponse)
def restore_locker(
    locker_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    삭제된 사물함 복구. 관리자 권한 필요.
    역이 삭제된 상태면 복구할 수 없습니다.
    """
    return lifecycle_service.restore_locker(db, locker_id)
