import pytest


@pytest.fixture
def post(client, member):
    response = client.post(
        "/posts",
        json={"email": member.email, "title": "사물함 문의", "content": "사물함이 열리지 않습니다."},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def comment(client, admin_headers, post):
    response = client.post(
        "/comments",
        json={"postId": post["id"], "content": "확인 후 조치하겠습니다."},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()


def test_create_post(client, member, post):
    assert post["userId"] == member.id
    assert post["title"] == "사물함 문의"


def test_create_post_with_unknown_email(client):
    response = client.post(
        "/posts",
        json={"email": "nobody@locker.com", "title": "문의", "content": "내용"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "해당하는 이메일은 등록되어 있지 않습니다."


def test_create_post_with_blank_title(client, member):
    response = client.post("/posts", json={"email": member.email, "title": "  ", "content": "내용"})

    assert response.status_code == 400
    assert response.json()["field"] == "title"
    assert response.json()["rule"] == "blank"


def test_posts_newest_first(client, member, post):
    client.post("/posts", json={"email": member.email, "title": "두번째", "content": "내용"})

    titles = [item["title"] for item in client.get("/posts").json()]
    assert titles == ["두번째", "사물함 문의"]


def test_create_comment_requires_admin(client, member_headers, post):
    response = client.post(
        "/comments",
        json={"postId": post["id"], "content": "답변"},
        headers=member_headers,
    )

    assert response.status_code == 403
    assert client.get("/comments", params={"page": 1}).json()["items"] == []


def test_create_comment_on_unknown_post(client, admin_headers):
    response = client.post("/comments", json={"postId": 999, "content": "답변"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "해당 포스트가 없습니다."


def test_comment_pagination(client, admin_headers, post):
    for index in range(7):
        client.post(
            "/comments",
            json={"postId": post["id"], "content": f"답변 {index}"},
            headers=admin_headers,
        )

    first = client.get("/comments", params={"page": 1}).json()
    assert first["total"] == 7
    assert first["totalPages"] == 2
    assert first["limit"] == 5
    assert first["hasMore"] is True
    assert [item["content"] for item in first["items"]] == [f"답변 {index}" for index in range(6, 1, -1)]

    second = client.get("/comments", params={"page": 2}).json()
    assert [item["content"] for item in second["items"]] == ["답변 1", "답변 0"]
    assert second["hasMore"] is False

    response = client.get("/comments", params={"page": 3})
    assert response.status_code == 400
    assert response.json()["detail"] == "page 범위는 1부터 2 입니다."

    custom = client.get("/comments", params={"page": 1, "limit": 3}).json()
    assert len(custom["items"]) == 3
    assert custom["totalPages"] == 3


def test_comment_pagination_without_comments(client):
    response = client.get("/comments", params={"page": 1})

    assert response.status_code == 200
    assert response.json()["items"] == []
    assert response.json()["totalPages"] == 1


def test_comment_page_is_required(client):
    response = client.get("/comments")

    assert response.status_code == 400
    assert response.json()["field"] == "page"
    assert response.json()["rule"] == "missing"


def test_comment_page_must_be_positive(client):
    for page in (0, -1):
        response = client.get("/comments", params={"page": page})
        assert response.status_code == 400
        assert response.json()["detail"] == "page 범위는 1부터 1 입니다."


def test_get_comment_by_owner_and_admin(client, member_headers, admin_headers, comment):
    assert client.get(f"/comments/{comment['id']}", headers=member_headers).status_code == 200
    assert client.get(f"/comments/{comment['id']}", headers=admin_headers).status_code == 200


def test_get_comment_of_another_users_post(client, other_headers, comment):
    response = client.get(f"/comments/{comment['id']}", headers=other_headers)

    assert response.status_code == 401
    assert response.json()["detail"] == "해당 댓글에 대한 접근 권한이 없습니다."


def test_get_unknown_comment(client, admin_headers):
    response = client.get("/comments/999", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "해당하는 댓글이 없습니다."


def test_delete_and_restore_comment(client, admin_headers, comment):
    assert client.delete(f"/comments/{comment['id']}", headers=admin_headers).status_code == 204
    assert client.get("/comments", params={"page": 1}).json()["total"] == 0

    response = client.patch(f"/comments/restore/{comment['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["deletedAt"] is None
    assert client.get("/comments", params={"page": 1}).json()["total"] == 1


def test_delete_unknown_comment(client, admin_headers):
    response = client.delete("/comments/999", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "존재하지 않는 댓글입니다."


def test_restore_active_comment(client, admin_headers, comment):
    response = client.patch(f"/comments/restore/{comment['id']}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "삭제된 comment 가 아닙니다."
    assert client.get(f"/comments/{comment['id']}", headers=admin_headers).json()["deletedAt"] is None
