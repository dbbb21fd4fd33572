from app.core.config import config
from conftest import login


def test_google_redirect_url(client):
    resp = client.get("/api/oauth/google/redirect_url")
    assert resp.status_code == 200
    assert resp.json() == {"redirectUrl": "https://identity.test/oauth/google/start"}


def test_create_session_sets_cookie(client):
    resp = client.post("/api/sessions", json={"code": "code-a"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith(f"{config.session_cookie_name}=token-a")
    assert "HttpOnly" in set_cookie
    assert "Secure" in set_cookie
    assert "samesite=none" in set_cookie.lower()
    assert "Path=/" in set_cookie
    assert f"Max-Age={60 * 24 * 60 * 60}" in set_cookie

    # The cookie now authenticates follow-up requests
    me = client.get("/api/users/me")
    assert me.status_code == 200
    assert me.json()["id"] == "user-a"


def test_create_session_without_code_returns_400(client):
    assert client.post("/api/sessions", json={}).status_code == 400
    assert client.post("/api/sessions", json={"code": ""}).status_code == 400


def test_create_session_with_rejected_code_returns_401(client):
    resp = client.post("/api/sessions", json={"code": "bogus"})
    assert resp.status_code == 401
    assert "set-cookie" not in resp.headers


def test_users_me_requires_session(client):
    assert client.get("/api/users/me").status_code == 401


def test_users_me_returns_identity_profile(client):
    login(client, "token-b")
    resp = client.get("/api/users/me")
    assert resp.status_code == 200
    assert resp.json() == {"id": "user-b", "email": "b@example.com"}


def test_logout_revokes_session_and_clears_cookie(client, identity):
    login(client, "token-a")
    resp = client.get("/api/logout")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert identity.revoked == ["token-a"]

    set_cookie = resp.headers["set-cookie"]
    assert set_cookie.startswith(f'{config.session_cookie_name}=""') or set_cookie.startswith(
        f"{config.session_cookie_name}=;"
    )
    assert "Max-Age=0" in set_cookie

    login(client, "token-a")
    assert client.get("/api/containers").status_code == 401


def test_logout_without_session_still_succeeds(client, identity):
    resp = client.get("/api/logout")
    assert resp.status_code == 200
    assert identity.revoked == []
