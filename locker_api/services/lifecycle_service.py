"""
Soft delete / 복구 상태 전이.

모든 soft delete 대상(User, Station, Locker, Comment)은
활성 → 삭제 → 활성 으로만 전이합니다.

- 삭제: 기본 조회에서 찾을 수 없으면 오류
- 복구: 기본 조회에서 찾을 수 있으면 (= 삭제 상태가 아니면) 오류

역과 사물함은 하나의 트랜잭션으로 처리하며, 역이 삭제된 상태에서
그 역의 사물함이 활성 상태로 남지 않도록 합니다.
"""
import logging
from typing import Any, List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from locker_api.core.exceptions import BadRequestException
from locker_api.crud.base import CRUDBase, ModelType
from locker_api.crud.locker import locker as crud_locker
from locker_api.crud.station import station as crud_station
from locker_api.db.base import utcnow
from locker_api.models.locker import Locker
from locker_api.models.station import Station

logger = logging.getLogger(__name__)


def soft_delete(
    db: Session,
    crud: CRUDBase,
    id: Any,
    *,
    not_found: str,
) -> ModelType:
    """
    단일 레코드 soft delete.

    Args:
        db: 데이터베이스 세션
        crud: 대상 CRUD
        id: 레코드 ID
        not_found: 활성 레코드가 없을 때 메시지

    Returns:
        삭제된 레코드

    Raises:
        BadRequestException: 활성 레코드가 없는 경우
    """
    obj = crud.soft_delete(db, id=id)
    if obj is None:
        raise BadRequestException(not_found)
    logger.info("%s %s soft-deleted", crud.model.__name__, id)
    return obj


def restore(
    db: Session,
    crud: CRUDBase,
    id: Any,
    *,
    not_deleted: str,
    not_found: str,
) -> ModelType:
    """
    단일 레코드 복구.

    Args:
        db: 데이터베이스 세션
        crud: 대상 CRUD
        id: 레코드 ID
        not_deleted: 레코드가 삭제 상태가 아닐 때 메시지
        not_found: 레코드가 아예 없을 때 메시지

    Returns:
        복구된 레코드

    Raises:
        BadRequestException: 삭제 상태가 아니거나 레코드가 없는 경우
    """
    if crud.get(db, id=id) is not None:
        raise BadRequestException(not_deleted)

    obj = crud.restore(db, id=id)
    if obj is None:
        raise BadRequestException(not_found)
    logger.info("%s %s restored", crud.model.__name__, id)
    return obj


def delete_station(db: Session, station_id: int) -> Station:
    """
    역과 그 역의 활성 사물함을 같은 시각으로 soft delete.

    Raises:
        BadRequestException: 활성 역이 없는 경우
    """
    station = crud_station.get(db, id=station_id, for_update=True)
    if station is None:
        raise BadRequestException("없는 역 입니다.")

    deleted_at = utcnow()
    try:
        lockers = crud_locker.get_by_station(db, station_id=station.id)
        for locker in lockers:
            locker.soft_delete(deleted_at)
        station.soft_delete(deleted_at)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Station %s soft-deleted with %d lockers", station_id, len(lockers))
    return station


def restore_station(db: Session, station_id: int) -> Tuple[Station, List[Locker]]:
    """
    삭제된 역과, 역 삭제 시 함께 삭제된 사물함을 복구.

    역 삭제 이전에 개별적으로 삭제된 사물함은 삭제 상태로 남습니다.

    Returns:
        (복구된 역, 역의 활성 사물함)

    Raises:
        BadRequestException: 역이 삭제 상태가 아니거나 없는 경우
    """
    if crud_station.get(db, id=station_id) is not None:
        raise BadRequestException("삭제된 station 이 아닙니다.")

    station = crud_station.get(db, id=station_id, include_deleted=True)
    if station is None:
        raise BadRequestException("해당하는 역은 없습니다.")

    try:
        lockers = crud_locker.get_deleted_with_station(
            db, station_id=station.id, deleted_at=station.deleted_at
        )
        for locker in lockers:
            locker.restore()
        station.restore()
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Station %s restored with %d lockers", station_id, len(lockers))
    return station, crud_locker.get_by_station(db, station_id=station.id)


def restore_locker(db: Session, locker_id: int) -> Locker:
    """
    삭제된 사물함 복구. 역이 삭제된 상태면 복구할 수 없습니다.

    Raises:
        BadRequestException: 삭제 상태가 아니거나, 없거나, 역이 삭제된 경우
    """
    if crud_locker.get(db, id=locker_id) is not None:
        raise BadRequestException("삭제된 사물함이 아닙니다.")

    locker = crud_locker.get(db, id=locker_id, include_deleted=True)
    if locker is None:
        raise BadRequestException("해당하는 사물함이 없습니다.")

    if crud_station.get(db, id=locker.station_id, for_update=True) is None:
        raise BadRequestException("역이 삭제된 상태에서는 사물함을 복구할 수 없습니다.")

    locker = crud_locker.restore(db, id=locker_id)
    logger.info("Locker %s restored", locker_id)
    return locker
