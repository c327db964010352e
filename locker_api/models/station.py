"""
역(Station) ORM 모델.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from locker_api.db.base import Base, SoftDeleteMixin


class Station(Base, SoftDeleteMixin):
    """사물함이 설치된 역. soft delete 시 사물함도 함께 삭제됩니다."""

    __tablename__ = "stations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    # deleted_at 은 SoftDeleteMixin 에서 옴

    # Constraints
    __table_args__ = (
        CheckConstraint('latitude > -90 AND latitude < 90', name='check_latitude_range'),
        CheckConstraint('longitude > -180 AND longitude < 180', name='check_longitude_range'),
    )

    # Relationships
    lockers = relationship("Locker", back_populates="station")

    def __repr__(self):
        return f"<Station {self.name}>"
