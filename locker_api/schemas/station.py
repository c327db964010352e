"""
역 스키마.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field, StrictStr, model_validator

from locker_api.core.validation import Latitude, Longitude, check_exact_keys
from locker_api.schemas.common import CamelModel
from locker_api.schemas.locker import LockerResponse

STATION_KEYS = ("name", "latitude", "longitude")


class StationCreate(CamelModel):
    """역 추가 항목. name, latitude, longitude 세 개의 키만 허용."""

    name: StrictStr = Field(..., min_length=1, max_length=100)
    latitude: Latitude
    longitude: Longitude

    @model_validator(mode="before")
    @classmethod
    def check_keys(cls, data):
        return check_exact_keys(data, STATION_KEYS)


class StationResponse(CamelModel):
    """역 응답."""

    id: int
    name: str
    latitude: float
    longitude: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


class StationDetailResponse(CamelModel):
    """역 상세: 역 정보, 사물함, 날씨 (날씨 조회 실패 시 생략)."""

    station: StationResponse
    locker_info: List[LockerResponse]
    temperature: Optional[float] = None
    humidity: Optional[float] = None


class StationRestoreResponse(CamelModel):
    """복구된 역과 사물함."""

    station: StationResponse
    lockers: List[LockerResponse]
