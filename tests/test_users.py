def test_get_current_user(client, member, member_headers):
    response = client.get("/users", headers=member_headers)

    assert response.status_code == 200
    assert response.json()["id"] == member.id
    assert response.json()["email"] == "member@locker.com"


def test_get_unknown_user(client):
    response = client.get("/users/999")

    assert response.status_code == 400
    assert response.json()["detail"] == "없는 유저 입니다."


def test_user_cannot_delete_another_user(client, other_member, member_headers):
    response = client.delete(f"/users/{other_member.id}", headers=member_headers)

    assert response.status_code == 403
    assert client.get(f"/users/{other_member.id}").status_code == 200


def test_user_deletes_own_account(client, member, member_headers):
    assert client.delete(f"/users/{member.id}", headers=member_headers).status_code == 204

    assert client.get(f"/users/{member.id}").status_code == 400
    assert client.get("/users", headers=member_headers).status_code == 401


def test_admin_deletes_and_restores_user(client, member, admin_headers):
    assert client.delete(f"/users/{member.id}", headers=admin_headers).status_code == 204

    response = client.patch(f"/users/restore/{member.id}", headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["id"] == member.id
    assert body["authority"] == "user"
    assert body["deletedAt"] is None

    assert client.get(f"/users/{member.id}").status_code == 200


def test_restore_active_user(client, member, admin_headers):
    response = client.patch(f"/users/restore/{member.id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "삭제된 user 가 아닙니다."


def test_restore_user_requires_admin(client, member, other_member, admin_headers, other_headers):
    client.delete(f"/users/{member.id}", headers=admin_headers)

    response = client.patch(f"/users/restore/{member.id}", headers=other_headers)
    assert response.status_code == 403
    assert client.get(f"/users/{member.id}").status_code == 400


def test_user_id_must_be_positive(client):
    response = client.get("/users/0")

    assert response.status_code == 400
    assert response.json()["rule"] == "greater_than_equal"
