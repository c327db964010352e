"""
역 CRUD.
"""
from typing import Optional
from sqlalchemy.orm import Session

from locker_api.crud.base import CRUDBase
from locker_api.models.station import Station
from locker_api.schemas.station import StationCreate


class CRUDStation(CRUDBase[Station, StationCreate, dict]):
    """역 CRUD."""

    def get_by_name(
        self, db: Session, *, name: str, include_deleted: bool = True
    ) -> Optional[Station]:
        """
        이름으로 역 조회.

        이름은 삭제된 역을 포함해 유일해야 하므로 기본값으로
        삭제된 역도 찾습니다.
        """
        return self._base_query(db, include_deleted).filter(Station.name == name).first()


# 전역 CRUD 인스턴스
station = CRUDStation(Station)
