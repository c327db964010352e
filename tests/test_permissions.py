import pytest

from locker_api.core.permissions import RequiredAuthority, is_allowed
from locker_api.models.user import UserAuthority


@pytest.mark.parametrize("authority, required, expected", [
    (UserAuthority.USER, RequiredAuthority.USER, True),
    (UserAuthority.USER, RequiredAuthority.ADMIN, False),
    (UserAuthority.USER, RequiredAuthority.BOTH, True),
    (UserAuthority.ADMIN, RequiredAuthority.USER, False),
    (UserAuthority.ADMIN, RequiredAuthority.ADMIN, True),
    (UserAuthority.ADMIN, RequiredAuthority.BOTH, True),
])
def test_is_allowed(authority, required, expected):
    assert is_allowed(authority, required) is expected


def test_missing_token_is_unauthorized(client):
    response = client.post("/stations", json={"name": "서울역", "latitude": 37.5, "longitude": 126.9})
    assert response.status_code == 401
    assert response.json()["detail"] == "로그인이 필요합니다."


def test_invalid_token_is_unauthorized(client):
    response = client.get("/users", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["detail"] == "유효하지 않은 토큰입니다."


def test_user_token_on_admin_route_has_no_side_effect(client, member_headers):
    response = client.post(
        "/stations",
        json={"name": "서울역", "latitude": 37.5, "longitude": 126.9},
        headers=member_headers,
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "접근 권한이 없습니다."
    assert client.get("/stations").json() == []


def test_user_token_cannot_delete_station(client, member_headers, station):
    response = client.delete(f"/stations/{station['id']}", headers=member_headers)
    assert response.status_code == 403
    assert client.get(f"/stations/{station['id']}").status_code == 200
