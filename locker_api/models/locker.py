"""
사물함(Locker) ORM 모델.
"""
import enum
from sqlalchemy import Column, Integer, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from locker_api.db.base import Base, SoftDeleteMixin


class LockerStatus(str, enum.Enum):
    """
    사물함 상태.

    MY_LOCKER 는 조회 전용 값으로, 요청한 사용자가 사용 중인 사물함을
    표시할 때만 응답에 쓰이며 저장되지 않습니다.
    """
    OCCUPIED = "occupied"
    UNOCCUPIED = "unoccupied"
    MY_LOCKER = "my locker"


locker_status_enum = Enum(
    LockerStatus.OCCUPIED.value,
    LockerStatus.UNOCCUPIED.value,
    name="locker_status",
)


class Locker(Base, SoftDeleteMixin):
    """역에 속한 개별 사물함."""

    __tablename__ = "lockers"

    id = Column(Integer, primary_key=True, index=True)
    station_id = Column(Integer, ForeignKey("stations.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    status = Column(locker_status_enum, nullable=False, default=LockerStatus.UNOCCUPIED.value)
    start_date = Column(DateTime(timezone=True))
    end_date = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    # deleted_at 은 SoftDeleteMixin 에서 옴

    # Relationships
    station = relationship("Station", back_populates="lockers")
    user = relationship("User", back_populates="lockers")

    def __repr__(self):
        return f"<Locker {self.id} @ station {self.station_id}>"

    def is_occupied(self) -> bool:
        return self.status == LockerStatus.OCCUPIED.value
