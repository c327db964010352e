"""
역 엔드포인트.
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Path, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from locker_api.core.deps import get_db, get_optional_identity
from locker_api.core.exceptions import BadRequestException
from locker_api.core.permissions import require_admin
from locker_api.core.validation import validate_payload
from locker_api.crud.locker import locker as crud_locker
from locker_api.crud.station import station as crud_station
from locker_api.models.locker import Locker, LockerStatus
from locker_api.models.station import Station
from locker_api.schemas.auth import Identity
from locker_api.schemas.locker import LockerResponse
from locker_api.schemas.station import (
    StationCreate,
    StationResponse,
    StationDetailResponse,
    StationRestoreResponse,
)
from locker_api.services import lifecycle_service
from locker_api.services.weather_service import WeatherService, get_weather_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _station_items(payload: Any) -> List[Any]:
    """
    요청 본문에서 역 항목 목록 추출.

    {"data": [...]} 배열 형식과 단일 객체 형식을 모두 받습니다.
    """
    if payload is None:
        raise BadRequestException("역을 추가하기 위한 데이터(역명, 경도, 위도) 를 입력해주세요.")
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict) and "data" in payload:
        items = payload["data"]
        if isinstance(items, dict):
            items = [items]
    else:
        items = [payload]

    if not isinstance(items, list) or not items:
        raise BadRequestException("역을 추가하기 위한 데이터(역명, 경도, 위도) 를 입력해주세요.")
    return items


def _locker_view(locker: Locker, identity: Optional[Identity]) -> LockerResponse:
    """요청자가 사용 중인 사물함은 'my locker' 로 표시."""
    view = LockerResponse.model_validate(locker)
    if identity is not None and locker.user_id == identity.id:
        view.status = LockerStatus.MY_LOCKER.value
    return view


# ================================================================
# 공개 엔드포인트
# ================================================================

@router.get("", response_model=List[StationResponse])
def get_stations(db: Session = Depends(get_db)):
    """모든 역 조회. 인증 불필요."""
    return crud_station.get_multi(db)


@router.get("/{station_id}", response_model=StationDetailResponse, response_model_exclude_unset=True)
def get_station(
    station_id: int = Path(..., ge=1),
    identity: Optional[Identity] = Depends(get_optional_identity),
    weather: WeatherService = Depends(get_weather_service),
    db: Session = Depends(get_db)
):
    """
    역 상세 조회.

    역 정보, 역의 사물함, 역 좌표 기준 기온과 습도를 돌려줍니다.
    로그인한 경우 본인이 사용 중인 사물함은 status 가 'my locker' 입니다.
    날씨 조회에 실패하면 temperature, humidity 는 생략됩니다.
    """
    station = crud_station.get(db, id=station_id)
    if station is None:
        raise BadRequestException("해당하는 역은 없습니다.")

    lockers = crud_locker.get_by_station(db, station_id=station.id)
    detail = {
        "station": StationResponse.model_validate(station),
        "locker_info": [_locker_view(locker, identity) for locker in lockers],
    }

    report = weather.get_weather(station.latitude, station.longitude)
    if report is not None:
        detail["temperature"] = report.temperature
        detail["humidity"] = report.humidity

    return StationDetailResponse(**detail)


# ================================================================
# 관리자 엔드포인트
# ================================================================

@router.post("", response_model=List[StationResponse], status_code=status.HTTP_201_CREATED)
def create_stations(
    payload: Any = Body(None),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    역 추가. 관리자 권한 필요.

    {"data": [{name, latitude, longitude}, ...]} 또는 단일 객체를 받습니다.
    모든 항목을 검증한 뒤 한 번에 저장하며, 하나라도 실패하면 아무것도
    저장하지 않습니다.
    """
    items = [validate_payload(StationCreate, item) for item in _station_items(payload)]

    seen = set()
    for item in items:
        if item.name in seen or crud_station.get_by_name(db, name=item.name):
            raise BadRequestException(f"{item.name} 은 이미 저장되어 있습니다.")
        seen.add(item.name)

    try:
        stations: List[Station] = [
            crud_station.create(db, obj_in=item, commit=False) for item in items
        ]
        db.commit()
    except IntegrityError:
        db.rollback()
        raise BadRequestException("이미 저장되어 있는 역이 있습니다.")

    for station in stations:
        db.refresh(station)
    logger.info("Created %d stations", len(stations))
    return stations


@router.delete("/{station_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_station(
    station_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    역 삭제 (soft delete). 관리자 권한 필요.
    역에 연결된 사물함도 함께 삭제됩니다.
    """
    lifecycle_service.delete_station(db, station_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/restore/{station_id}", response_model=StationRestoreResponse)
def restore_station(
    station_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    삭제된 역과 역 삭제 시 함께 삭제된 사물함 복구. 관리자 권한 필요.
    """
    station, lockers = lifecycle_service.restore_station(db, station_id)
    return StationRestoreResponse(station=station, lockers=lockers)
