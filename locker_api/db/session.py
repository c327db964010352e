"""
Singleton 패턴의 SQLAlchemy 데이터베이스 세션 설정.
"""
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker
from typing import Optional
from locker_api.config import get_settings


class DatabaseConnection:
    """
    데이터베이스 연결 Singleton.
    engine 과 sessionmaker 를 하나만 유지합니다.
    """
    _instance: Optional['DatabaseConnection'] = None
    _engine: Optional[Engine] = None
    _session_factory: Optional[sessionmaker] = None

    def __new__(cls):
        """Singleton 구현."""
        if cls._instance is None:
            cls._instance = super(DatabaseConnection, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        """연결은 한 번만 초기화."""
        if self._engine is None:
            settings = get_settings()

            if settings.is_sqlite:
                # SQLite 는 요청 스레드와 생성 스레드가 다를 수 있음
                self._engine = create_engine(
                    settings.DATABASE_URL,
                    connect_args={"check_same_thread": False},
                    echo=settings.DEBUG,
                )
            else:
                self._engine = create_engine(
                    settings.DATABASE_URL,
                    pool_pre_ping=True,      # 사용 전 연결 확인
                    pool_recycle=3600,        # 1시간마다 연결 재활용
                    pool_size=5,
                    max_overflow=10,
                    echo=settings.DEBUG,      # 디버그 모드에서 SQL 로그
                )

            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self._engine
            )

    @property
    def engine(self) -> Engine:
        """SQLAlchemy engine."""
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        """세션 factory."""
        return self._session_factory

    def close(self):
        """모든 연결 종료."""
        if self._engine:
            self._engine.dispose()


# Singleton 인스턴스
_db = DatabaseConnection()

engine = _db.engine
SessionLocal = _db.session_factory


def get_db_connection() -> DatabaseConnection:
    """연결 Singleton 반환."""
    return _db
