"""
사물함 CRUD.
"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from locker_api.crud.base import CRUDBase
from locker_api.models.locker import Locker, LockerStatus


class CRUDLocker(CRUDBase[Locker, dict, dict]):
    """사물함 CRUD."""

    def get_by_station(
        self, db: Session, *, station_id: int, include_deleted: bool = False
    ) -> List[Locker]:
        """역에 속한 사물함 (id 순)."""
        return (
            self._base_query(db, include_deleted)
            .filter(Locker.station_id == station_id)
            .order_by(Locker.id)
            .all()
        )

    def get_by_user(self, db: Session, *, user_id: int) -> List[Locker]:
        """사용자가 사용 중인 활성 사물함."""
        return (
            self._base_query(db)
            .filter(Locker.user_id == user_id)
            .order_by(Locker.id)
            .all()
        )

    def get_deleted_with_station(
        self, db: Session, *, station_id: int, deleted_at: datetime
    ) -> List[Locker]:
        """역 삭제와 같은 시각에 함께 삭제된 사물함."""
        return (
            db.query(Locker)
            .filter(
                Locker.station_id == station_id,
                Locker.deleted_at == deleted_at,
            )
            .order_by(Locker.id)
            .all()
        )

    def create_for_station(
        self, db: Session, *, station_id: int, count: int, commit: bool = True
    ) -> List[Locker]:
        """
        역에 빈 사물함 여러 개 생성.

        Args:
            db: 데이터베이스 세션
            station_id: 역 ID
            count: 생성할 개수
            commit: False 면 flush 만 수행

        Returns:
            생성된 사물함 리스트
        """
        lockers = [
            Locker(station_id=station_id, status=LockerStatus.UNOCCUPIED.value)
            for _ in range(count)
        ]
        db.add_all(lockers)
        if commit:
            db.commit()
            for locker in lockers:
                db.refresh(locker)
        else:
            db.flush()
        return lockers

    def reserve(
        self,
        db: Session,
        *,
        locker_id: int,
        user_id: int,
        start_date: datetime,
        end_date: datetime
    ) -> Optional[Locker]:
        """
        사물함을 사용자에게 배정.

        비어 있는 활성 사물함일 때만 갱신하는 조건부 UPDATE 입니다.
        동시에 들어온 예약 중 하나만 성공합니다.

        Args:
            db: 데이터베이스 세션
            locker_id: 사물함 ID
            user_id: 사용자 ID
            start_date: 시작 시각
            end_date: 종료 시각

        Returns:
            예약된 사물함, 이미 사용 중이거나 삭제되었으면 None
        """
        updated = (
            db.query(Locker)
            .filter(
                Locker.id == locker_id,
                Locker.status == LockerStatus.UNOCCUPIED.value,
                Locker.deleted_at.is_(None),
            )
            .update(
                {
                    Locker.user_id: user_id,
                    Locker.start_date: start_date,
                    Locker.end_date: end_date,
                    Locker.status: LockerStatus.OCCUPIED.value,
                },
                synchronize_session=False,
            )
        )
        if not updated:
            db.rollback()
            return None

        db.commit()
        locker = self.get(db, id=locker_id)
        db.refresh(locker)
        return locker

    def release(self, db: Session, *, locker_id: int, holder_id: int) -> Optional[Locker]:
        """
        사물함 반납.

        holder_id 가 사용 중인 경우에만 비웁니다.

        Returns:
            반납된 사물함, 그 사이 상태가 바뀌었으면 None
        """
        updated = (
            db.query(Locker)
            .filter(
                Locker.id == locker_id,
                Locker.user_id == holder_id,
                Locker.status == LockerStatus.OCCUPIED.value,
            )
            .update(
                {
                    Locker.user_id: None,
                    Locker.start_date: None,
                    Locker.end_date: None,
                    Locker.status: LockerStatus.UNOCCUPIED.value,
                },
                synchronize_session=False,
            )
        )
        if not updated:
            db.rollback()
            return None

        db.commit()
        locker = self.get(db, id=locker_id, include_deleted=True)
        db.refresh(locker)
        return locker


# 전역 CRUD 인스턴스
locker = CRUDLocker(Locker)
