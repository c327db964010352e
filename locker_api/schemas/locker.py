"""
사물함 스키마.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, model_validator
from pydantic_core import PydanticCustomError

from locker_api.core.validation import StrictId
from locker_api.schemas.common import CamelModel


class LockerResponse(CamelModel):
    """사물함 응답. status 는 occupied / unoccupied / my locker."""

    id: int
    station_id: int
    user_id: Optional[int] = None
    status: str
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class LockerCreate(CamelModel):
    """역에 사물함 추가."""

    station_id: StrictId
    count: int = Field(1, strict=True, ge=1)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class LockerReserve(CamelModel):
    """사물함 예약 기간."""

    start_date: datetime
    end_date: datetime

    @model_validator(mode="after")
    def check_period(self):
        """종료일은 시작일 이후여야 함."""
        self.start_date = _as_utc(self.start_date)
        self.end_date = _as_utc(self.end_date)
        if self.end_date <= self.start_date:
            raise PydanticCustomError("date_order", "endDate 는 startDate 이후여야 합니다.")
        return self
