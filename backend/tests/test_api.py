import inspect

from fastapi.testclient import TestClient

from socialstream.api.handlers import (
    auth_handler,
    discovery_handler,
    download_handler,
    health_handler,
    post_handler,
    user_handler,
)
from socialstream.shared.services.ai_service import BUSY_REPLY, DEFAULT_TAGS

from conftest import TEST_PASSWORD


def _register(client: TestClient, username: str = "admin", password: str = TEST_PASSWORD):
    return client.post(
        "/auth/register",
        json={"username": username, "name": username.title(), "password": password, "confirmPassword": password},
    )


def _login(client: TestClient, username: str = "admin", password: str = TEST_PASSWORD):
    _register(client, username, password)
    response = client.post("/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.json()["user"]


def _publish(client: TestClient, src: str = "https://cdn.example.com/trailer.mp4", **fields):
    body = {"src": src, "description": "Space trailer", "tags": ["movie", "scifi"], **fields}
    return client.post("/posts", json=body)


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH
# ═══════════════════════════════════════════════════════════════════════════════


def test_health_endpoints(client: TestClient) -> None:
    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["service"] == "socialstream"

    assert client.get("/ready").json() == {"status": "ready"}
    assert client.get("/live").json() == {"status": "alive"}


# ═══════════════════════════════════════════════════════════════════════════════
# AUTH
# ═══════════════════════════════════════════════════════════════════════════════


def test_register_returns_public_user(client: TestClient) -> None:
    response = _register(client)

    assert response.status_code == 201
    user = response.json()["user"]
    assert user["username"] == "admin"
    assert user["postCount"] == 0
    assert user["tier"] == "BRONZE"
    assert "passwordHash" not in user


def test_register_duplicate_is_conflict(client: TestClient) -> None:
    _register(client, "admin")

    response = _register(client, "ADMIN")

    assert response.status_code == 409
    error = response.json()["error"]
    assert error["code"] == "CONFLICT"
    assert error["details"] == {"reason": "USERNAME_TAKEN"}


def test_register_short_password(client: TestClient) -> None:
    response = _register(client, password="abc")

    assert response.status_code == 400
    assert response.json()["error"]["details"] == {"reason": "PASSWORD_TOO_SHORT"}


def test_malformed_body_is_validation_error(client: TestClient) -> None:
    response = client.post("/auth/register", json={"username": "admin"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_login_failures_are_unauthorized(client: TestClient) -> None:
    _register(client)

    wrong = client.post("/auth/login", json={"username": "admin", "password": "nope-nope"})
    missing = client.post("/auth/login", json={"username": "ghost", "password": TEST_PASSWORD})

    assert wrong.status_code == 401
    assert wrong.json()["error"]["details"] == {"reason": "WRONG_PASSWORD"}
    assert missing.status_code == 401
    assert missing.json()["error"]["details"] == {"reason": "USER_NOT_FOUND"}


def test_session_lifecycle(client: TestClient) -> None:
    assert client.get("/auth/me").status_code == 401

    user = _login(client)
    me = client.get("/auth/me")
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]

    assert client.post("/auth/logout").json()["success"] is True
    assert client.get("/auth/me").status_code == 401


# ═══════════════════════════════════════════════════════════════════════════════
# POSTS
# ═══════════════════════════════════════════════════════════════════════════════


def test_create_post_requires_login(client: TestClient) -> None:
    assert _publish(client).status_code == 401


def test_sessions_are_per_client(client: TestClient) -> None:
    _login(client)
    anonymous = TestClient(client.app)

    assert _publish(anonymous).status_code == 401
    assert anonymous.get("/auth/me").status_code == 401
    assert _publish(client).status_code == 201


def test_bearer_token_identifies_session(client: TestClient) -> None:
    _register(client, "admin")
    login = client.post("/auth/login", json={"username": "admin", "password": TEST_PASSWORD}).json()
    other = TestClient(client.app)

    me = other.get("/auth/me", headers={"Authorization": f"Bearer {login['sessionId']}"})

    assert me.status_code == 200
    assert me.json()["username"] == "admin"
    assert other.get("/auth/me", headers={"Authorization": "Bearer forged"}).status_code == 401


def test_logout_ends_only_own_session(client: TestClient) -> None:
    _login(client, "admin")
    other = TestClient(client.app)
    _register(other, "bob")
    other.post("/auth/login", json={"username": "bob", "password": TEST_PASSWORD})

    client.post("/auth/logout")

    assert client.get("/auth/me").status_code == 401
    assert other.get("/auth/me").json()["username"] == "bob"


def test_create_post_rewards_author(client: TestClient) -> None:
    user = _login(client)

    response = _publish(client)

    assert response.status_code == 201
    post = response.json()
    assert post["type"] == "video"
    assert post["userId"] == user["id"]
    assert post["userTier"] == "BRONZE"

    me = client.get("/auth/me").json()
    assert me["postCount"] == 1
    assert me["points"] == 10

    assert [p["id"] for p in client.get("/posts").json()] == [post["id"]]
    assert client.get(f"/posts/{post['id']}").json()["description"] == "Space trailer"


def test_create_post_with_explicit_type(client: TestClient) -> None:
    _login(client)

    response = _publish(client, src="https://cdn.example.com/clip.mp4", type="image")

    assert response.json()["type"] == "image"


def test_missing_post_is_not_found(client: TestClient) -> None:
    response = client.get("/posts/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


def test_tag_suggestions_fall_back_without_key(client: TestClient) -> None:
    response = client.post("/posts/tags", json={"description": "A cat"})

    assert response.status_code == 200
    assert response.json() == {"tags": DEFAULT_TAGS}


def test_user_profile_and_posts(client: TestClient) -> None:
    user = _login(client)
    post = _publish(client).json()

    profile = client.get(f"/users/{user['id']}")
    posts = client.get(f"/users/{user['id']}/posts")

    assert profile.json()["username"] == "admin"
    assert [p["id"] for p in posts.json()] == [post["id"]]
    assert client.get("/users/nobody").status_code == 404
    assert client.get("/users/nobody/posts").status_code == 404


# ═══════════════════════════════════════════════════════════════════════════════
# DOWNLOADS & DISCOVERY
# ═══════════════════════════════════════════════════════════════════════════════


def test_downloads_are_deduplicated(client: TestClient) -> None:
    _login(client)
    post = _publish(client).json()

    first = client.post("/downloads", json={"postId": post["id"]})
    second = client.post("/downloads", json={"postId": post["id"]})

    assert first.json()["added"] is True
    assert second.json()["added"] is False
    assert [p["id"] for p in client.get("/downloads").json()] == [post["id"]]
    assert client.post("/downloads", json={"postId": "nope"}).status_code == 404


def test_search_and_leaderboard(client: TestClient) -> None:
    _login(client)
    post = _publish(client).json()
    _register(client, "bob")

    found = client.get("/search", params={"q": "SCI"}).json()
    assert [p["id"] for p in found["posts"]] == [post["id"]]
    assert found["users"] == []

    empty = client.get("/search").json()
    assert empty["users"] == [] and empty["posts"] == []

    board = client.get("/leaderboard").json()
    assert [u["username"] for u in board] == ["admin", "bob"]


# ═══════════════════════════════════════════════════════════════════════════════
# ROOMS
# ═══════════════════════════════════════════════════════════════════════════════


def test_rooms_and_chat(client: TestClient) -> None:
    rooms = client.get("/rooms").json()
    assert [room["id"] for room in rooms] == ["room1", "room2", "room3"]
    assert client.get("/rooms/room9").status_code == 404

    assert client.post("/rooms/room1/messages", json={"text": "hi"}).status_code == 401

    _login(client)
    exchange = client.post("/rooms/room1/messages", json={"text": "hi"})

    assert exchange.status_code == 201
    assert exchange.json()["reply"]["text"] == BUSY_REPLY
    history = client.get("/rooms/room1/messages").json()
    assert [m["text"] for m in history] == ["hi", BUSY_REPLY]


def test_store_bound_handlers_run_in_threadpool() -> None:
    handlers = [
        auth_handler.register,
        auth_handler.login,
        auth_handler.logout,
        post_handler.list_posts,
        post_handler.create_post,
        download_handler.add_download,
        discovery_handler.search,
        user_handler.list_user_posts,
        health_handler.readiness_check,
    ]

    assert not any(inspect.iscoroutinefunction(handler) for handler in handlers)
