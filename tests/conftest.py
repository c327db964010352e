"""
공통 테스트 fixture.

애플리케이션을 import 하기 전에 임시 SQLite 데이터베이스와 SECRET_KEY 를
환경 변수로 지정합니다. 테이블은 테스트마다 다시 만듭니다.
"""
import os
import tempfile
from typing import Optional

_DB_DIR = tempfile.mkdtemp(prefix="locker-api-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["WEATHER_API_KEY"] = ""
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient

from locker_api.core.security import create_access_token
from locker_api.crud.user import user as crud_user
from locker_api.db.session import SessionLocal, engine
from locker_api.main import app
from locker_api.models import Base, User, UserAuthority
from locker_api.schemas.auth import SignUpRequest
from locker_api.services.weather_service import WeatherReport, get_weather_service


class FakeWeatherService:
    """고정된 결과를 돌려주는 날씨 서비스."""

    def __init__(self, report: Optional[WeatherReport] = None):
        self.report = report
        self.calls = []

    def get_weather(self, latitude: float, longitude: float) -> Optional[WeatherReport]:
        self.calls.append((latitude, longitude))
        return self.report


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def weather():
    fake = FakeWeatherService(WeatherReport(temperature=21.5, humidity=40.0))
    app.dependency_overrides[get_weather_service] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_weather_service, None)


@pytest.fixture
def client(weather):
    return TestClient(app)


def _create_user(db, email: str, password: str, authority: UserAuthority) -> User:
    return crud_user.create(
        db,
        obj_in=SignUpRequest(email=email, password=password),
        authority=authority,
    )


def auth_headers(user: User) -> dict:
    token = create_access_token({"sub": str(user.id), "authority": user.authority.value})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(db_session) -> User:
    return _create_user(db_session, "admin@locker.com", "admin1234", UserAuthority.ADMIN)


@pytest.fixture
def member(db_session) -> User:
    return _create_user(db_session, "member@locker.com", "member1234", UserAuthority.USER)


@pytest.fixture
def other_member(db_session) -> User:
    return _create_user(db_session, "other@locker.com", "other1234", UserAuthority.USER)


@pytest.fixture
def admin_headers(admin) -> dict:
    return auth_headers(admin)


@pytest.fixture
def member_headers(member) -> dict:
    return auth_headers(member)


@pytest.fixture
def other_headers(other_member) -> dict:
    return auth_headers(other_member)


SEOUL_STATION = {"name": "서울역", "latitude": 37.5283169, "longitude": 126.9294254}


@pytest.fixture
def station(client, admin_headers) -> dict:
    response = client.post("/stations", json=SEOUL_STATION, headers=admin_headers)
    assert response.status_code == 201
    return response.json()[0]


@pytest.fixture
def lockers(client, admin_headers, station) -> list:
    response = client.post(
        "/lockers",
        json={"stationId": station["id"], "count": 3},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()
