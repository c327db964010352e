from locker_api.db.session import SessionLocal
from locker_api.models import Locker, Station


SEOUL_STATION = {"name": "서울역", "latitude": 37.5283169, "longitude": 126.9294254}


def test_create_single_station(client, admin_headers):
    response = client.post("/stations", json=SEOUL_STATION, headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert len(body) == 1
    assert body[0]["name"] == "서울역"
    assert body[0]["latitude"] == 37.5283169
    assert body[0]["deletedAt"] is None


def test_create_duplicate_station(client, admin_headers, station):
    response = client.post("/stations", json=SEOUL_STATION, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "서울역 은 이미 저장되어 있습니다."


def test_create_station_batch(client, admin_headers):
    payload = {"data": [
        {"name": "강남역", "latitude": 37.4979, "longitude": 127.0276},
        {"name": "홍대입구역", "latitude": 37.5572, "longitude": 126.9245},
    ]}
    response = client.post("/stations", json=payload, headers=admin_headers)

    assert response.status_code == 201
    assert [item["name"] for item in response.json()] == ["강남역", "홍대입구역"]


def test_station_batch_is_all_or_nothing(client, admin_headers):
    payload = {"data": [
        {"name": "강남역", "latitude": 37.4979, "longitude": 127.0276},
        {"name": "홍대입구역", "latitude": 137.5572, "longitude": 126.9245},
    ]}
    response = client.post("/stations", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["rule"] == "range"
    assert client.get("/stations").json() == []


def test_station_batch_with_duplicate_names(client, admin_headers):
    item = {"name": "강남역", "latitude": 37.4979, "longitude": 127.0276}
    response = client.post("/stations", json={"data": [item, dict(item)]}, headers=admin_headers)

    assert response.status_code == 400
    assert client.get("/stations").json() == []


def test_create_station_without_body(client, admin_headers):
    response = client.post("/stations", headers=admin_headers)
    assert response.status_code == 400


def test_get_station_with_weather(client, weather, station, lockers):
    response = client.get(f"/stations/{station['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["station"]["name"] == "서울역"
    assert [locker["status"] for locker in body["lockerInfo"]] == ["unoccupied"] * 3
    assert body["temperature"] == 21.5
    assert body["humidity"] == 40.0
    assert weather.calls == [(37.5283169, 126.9294254)]


def test_get_station_when_weather_fails(client, weather, station):
    weather.report = None

    response = client.get(f"/stations/{station['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["station"]["id"] == station["id"]
    assert "temperature" not in body
    assert "humidity" not in body


def test_get_unknown_station(client):
    response = client.get("/stations/999")

    assert response.status_code == 400
    assert response.json()["detail"] == "해당하는 역은 없습니다."


def test_delete_and_restore_station(client, admin_headers, station, lockers):
    station_id = station["id"]

    response = client.delete(f"/stations/{station_id}", headers=admin_headers)
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/stations/{station_id}").status_code == 400
    assert client.get("/stations").json() == []

    response = client.patch(f"/stations/restore/{station_id}", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["station"]["deletedAt"] is None
    assert sorted(locker["id"] for locker in body["lockers"]) == sorted(locker["id"] for locker in lockers)

    assert client.get(f"/stations/{station_id}").status_code == 200


def test_station_delete_cascades_to_lockers(client, admin_headers, station, lockers):
    client.delete(f"/stations/{station['id']}", headers=admin_headers)

    with SessionLocal() as db:
        deleted_station = db.get(Station, station["id"])
        rows = db.query(Locker).filter(Locker.station_id == station["id"]).all()
        assert len(rows) == 3
        assert all(row.deleted_at == deleted_station.deleted_at for row in rows)


def test_station_restore_keeps_individually_deleted_locker(client, admin_headers, station, lockers):
    removed_id = lockers[0]["id"]
    assert client.delete(f"/lockers/{removed_id}", headers=admin_headers).status_code == 204

    client.delete(f"/stations/{station['id']}", headers=admin_headers)
    response = client.patch(f"/stations/restore/{station['id']}", headers=admin_headers)

    assert response.status_code == 200
    restored_ids = [locker["id"] for locker in response.json()["lockers"]]
    assert removed_id not in restored_ids
    assert len(restored_ids) == 2

    with SessionLocal() as db:
        assert db.get(Locker, removed_id).deleted_at is not None


def test_restore_active_station(client, admin_headers, station):
    response = client.patch(f"/stations/restore/{station['id']}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "삭제된 station 이 아닙니다."
    assert client.get(f"/stations/{station['id']}").status_code == 200


def test_restore_unknown_station(client, admin_headers):
    response = client.patch("/stations/restore/999", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "해당하는 역은 없습니다."


def test_delete_station_twice(client, admin_headers, station):
    assert client.delete(f"/stations/{station['id']}", headers=admin_headers).status_code == 204

    response = client.delete(f"/stations/{station['id']}", headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "없는 역 입니다."


def test_deleted_station_name_stays_reserved(client, admin_headers, station):
    client.delete(f"/stations/{station['id']}", headers=admin_headers)

    response = client.post("/stations", json=SEOUL_STATION, headers=admin_headers)
    assert response.status_code == 400
