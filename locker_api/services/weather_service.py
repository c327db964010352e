"""
역 좌표 기준 날씨 조회 서비스.

OpenWeatherMap 호환 API 를 호출합니다. 조회가 실패하면 (타임아웃,
연결 오류, 2xx 가 아닌 응답, 형식이 맞지 않는 응답, 미설정) None 을
돌려주고 경고 로그만 남기며, 역 상세 응답에서는 날씨 필드가 생략됩니다.
"""
import logging
from typing import Optional

import httpx
from pydantic import BaseModel

from locker_api.config import settings

logger = logging.getLogger(__name__)


class WeatherReport(BaseModel):
    """역 상세에 합쳐지는 날씨 정보."""

    temperature: float
    humidity: float


class WeatherService:
    """날씨 API 클라이언트."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float,
        enabled: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.enabled = enabled
        self._transport = transport

    def is_configured(self) -> bool:
        """사용 가능 여부."""
        return bool(self.enabled and self.base_url and self.api_key)

    def get_weather(self, latitude: float, longitude: float) -> Optional[WeatherReport]:
        """
        좌표의 현재 기온과 습도 조회.

        Args:
            latitude: 위도
            longitude: 경도

        Returns:
            WeatherReport, 실패하면 None
        """
        if not self.is_configured():
            logger.warning("Weather lookup skipped: service not configured")
            return None

        params = {
            "lat": latitude,
            "lon": longitude,
            "appid": self.api_key,
            "units": "metric",
        }
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(self.base_url, params=params)
                response.raise_for_status()
                body = response.json()
            main = body["main"]
            return WeatherReport(temperature=main["temp"], humidity=main["humidity"])
        except httpx.HTTPError as e:
            logger.warning("Weather lookup failed for (%s, %s): %r", latitude, longitude, e)
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("Malformed weather response for (%s, %s): %r", latitude, longitude, e)
        return None


_weather_service: Optional[WeatherService] = None


def get_weather_service() -> WeatherService:
    """날씨 서비스 Singleton (FastAPI 의존성)."""
    global _weather_service
    if _weather_service is None:
        _weather_service = WeatherService(
            base_url=settings.WEATHER_API_URL,
            api_key=settings.WEATHER_API_KEY,
            timeout=settings.WEATHER_TIMEOUT_SECONDS,
            enabled=settings.WEATHER_ENABLED,
        )
    return _weather_service
