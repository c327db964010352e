"""
사물함 대여 API 설정.
환경 변수와 전역 설정을 관리합니다.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Pydantic Settings v2 기반 애플리케이션 설정."""

    # Database (필수 - .env 에 있어야 함)
    DATABASE_URL: str

    # Security (필수 - .env 에 있어야 함)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Application
    APP_NAME: str = "Locker Rental API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = ""
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # 개발 환경에서 시작 시 테이블 생성 (운영은 마이그레이션 사용)
    AUTO_CREATE_TABLES: bool = False

    # Initial Admin (선택)
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    # Weather (OpenWeatherMap 호환 API)
    WEATHER_ENABLED: bool = True
    WEATHER_API_URL: str = "https://api.openweathermap.org/data/2.5/weather"
    WEATHER_API_KEY: str = ""
    WEATHER_TIMEOUT_SECONDS: float = 3.0

    # Pagination / limits
    DEFAULT_COMMENT_PAGE_SIZE: int = 5
    MAX_LOCKERS_PER_REQUEST: int = 50

    # Computed properties
    @property
    def allowed_origins_list(self) -> List[str]:
        """ALLOWED_ORIGINS 문자열을 리스트로 변환."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",")]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# 설정 Singleton 인스턴스
_settings_instance = None


def get_settings() -> Settings:
    """
    설정 Singleton 인스턴스를 반환.
    최초 한 번만 로드하고 재사용합니다.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


# 전역 설정 인스턴스 (Singleton)
settings = get_settings()
