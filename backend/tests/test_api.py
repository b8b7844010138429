from fastapi.testclient import TestClient

from unfold_india.services.responders import CANNED_RESPONSES


def test_home_and_health_are_public(client: TestClient):
    home = client.get("/")
    assert home.status_code == 200
    assert [f["path"] for f in home.json()["features"]] == ["/translator", "/routes", "/chatbot"]
    assert client.get("/health").json() == {"status": "ok"}


def test_protected_endpoints_require_a_session(client: TestClient):
    for method, path in [
        ("get", "/chats/"),
        ("get", "/profile/me"),
        ("get", "/chatbot/greeting"),
        ("get", "/translator/languages"),
        ("post", "/routes/search"),
    ]:
        response = getattr(client, method)(path)
        assert response.status_code == 401, path
        assert response.headers["www-authenticate"] == "Bearer"


def test_register_login_and_me(client: TestClient, auth_headers):
    me = client.get("/auth/me", headers=auth_headers)
    assert me.status_code == 200
    assert me.json()["email"] == "traveler@example.com"

    login = client.post(
        "/auth/login", json={"email": "traveler@example.com", "password": "namaste123"}
    )
    assert login.status_code == 200
    assert login.json()["token_type"] == "bearer"


def test_login_with_wrong_password_is_401(client: TestClient, auth_headers):
    response = client.post(
        "/auth/login", json={"email": "traveler@example.com", "password": "nope-nope"}
    )
    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect email or password"


def test_duplicate_registration_is_400(client: TestClient, auth_headers):
    response = client.post(
        "/auth/register", json={"email": "traveler@example.com", "password": "namaste123"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"


def test_logout_revokes_token(client: TestClient, auth_headers):
    assert client.post("/auth/logout", headers=auth_headers).status_code == 204
    assert client.get("/auth/me", headers=auth_headers).status_code == 401


def test_chatbot_message_is_answered_and_saved(client: TestClient, auth_headers):
    greeting = client.get("/chatbot/greeting", headers=auth_headers)
    assert greeting.json()["text"].startswith("Hello!")

    response = client.post(
        "/chatbot/messages", json={"message": "Best street food in Delhi?"}, headers=auth_headers
    )
    assert response.status_code == 200
    turn = response.json()
    assert turn["answer"] in CANNED_RESPONSES
    assert turn["saved"] is True

    history = client.get("/chats/", headers=auth_headers).json()
    assert history["total_count"] == 1
    assert history["items"][0]["question"] == "Best street food in Delhi?"
    assert history["items"][0]["created_label"] == "Today"


def test_blank_chatbot_message_is_400(client: TestClient, auth_headers):
    response = client.post("/chatbot/messages", json={"message": "  "}, headers=auth_headers)
    assert response.status_code == 400


def test_chat_history_pagination(client: TestClient, auth_headers):
    for index in range(12):
        created = client.post(
            "/chats/", json={"question": f"q{index}", "answer": f"a{index}"}, headers=auth_headers
        )
        assert created.status_code == 201

    first = client.get("/chats/", params={"page": 1, "page_size": 5}, headers=auth_headers).json()
    last = client.get("/chats/", params={"page": 3, "page_size": 5}, headers=auth_headers).json()
    beyond = client.get("/chats/", params={"page": 4, "page_size": 5}, headers=auth_headers).json()

    assert [item["question"] for item in first["items"]] == ["q11", "q10", "q9", "q8", "q7"]
    assert len(last["items"]) == 2
    assert beyond["items"] == []
    assert first["total_pages"] == last["total_pages"] == 3
    assert {first["total_count"], last["total_count"], beyond["total_count"]} == {12}


def test_chat_history_default_page_size(client: TestClient, auth_headers):
    for index in range(11):
        client.post("/chats/", json={"question": f"q{index}", "answer": "a"}, headers=auth_headers)

    page = client.get("/chats/", headers=auth_headers).json()

    assert page["page_size"] == 10
    assert len(page["items"]) == 10


def test_invalid_page_is_400(client: TestClient, auth_headers):
    response = client.get("/chats/", params={"page": 0}, headers=auth_headers)
    assert response.status_code == 400


def test_zero_page_size_is_400(client: TestClient, auth_headers):
    for index in range(12):
        client.post("/chats/", json={"question": f"q{index}", "answer": "a"}, headers=auth_headers)

    response = client.get("/chats/", params={"page_size": 0}, headers=auth_headers)
    assert response.status_code == 400


def test_chat_history_is_per_user(client: TestClient, auth_headers, register_user):
    other_headers = register_user("friend@example.com")
    client.post("/chats/", json={"question": "mine", "answer": "a"}, headers=auth_headers)

    page = client.get("/chats/", headers=other_headers).json()

    assert page == {"items": [], "total_count": 0, "page": 1, "page_size": 10, "total_pages": 0}


def test_profile_defaults_then_saves(client: TestClient, auth_headers):
    initial = client.get("/profile/me", headers=auth_headers).json()
    assert initial["email"] == "traveler@example.com"
    assert initial["full_name"] is None

    payload = {
        "full_name": "Asha Verma",
        "username": "asha_travels",
        "gender": "prefer-not-to-say",
        "email": "asha@example.com",
        "phone": "+91 98765 43210",
        "avatar_url": None,
    }
    saved = client.put("/profile/me", json=payload, headers=auth_headers)
    assert saved.status_code == 200

    fetched = client.get("/profile/me", headers=auth_headers).json()
    for field, value in payload.items():
        assert fetched[field] == value


def test_profile_rejects_unknown_gender(client: TestClient, auth_headers):
    response = client.put("/profile/me", json={"gender": "robot"}, headers=auth_headers)
    assert response.status_code == 422


def test_avatar_upload_returns_public_url(client: TestClient, auth_headers, object_store):
    me = client.get("/auth/me", headers=auth_headers).json()

    response = client.post(
        "/profile/me/avatar",
        files={"file": ("me.png", b"\x89PNG avatar", "image/png")},
        headers=auth_headers,
    )

    assert response.status_code == 200
    url = response.json()["avatar_url"]
    assert url.startswith(f"http://testserver/media/avatars/{me['id']}/")
    assert url.endswith(".png")
    relative = url.removeprefix("http://testserver/media/")
    assert (object_store.root / relative).read_bytes() == b"\x89PNG avatar"


def test_change_password_validation_and_success(client: TestClient, auth_headers):
    short = client.post(
        "/auth/change-password",
        json={"new_password": "abc", "confirm_password": "abc"},
        headers=auth_headers,
    )
    assert short.status_code == 400
    assert short.json()["detail"] == "Password must be at least 6 characters long."

    mismatch = client.post(
        "/auth/change-password",
        json={"new_password": "abcdef", "confirm_password": "abcxyz"},
        headers=auth_headers,
    )
    assert mismatch.status_code == 400
    assert mismatch.json()["detail"] == "Passwords do not match."

    ok = client.post(
        "/auth/change-password",
        json={"new_password": "monsoon-2026", "confirm_password": "monsoon-2026"},
        headers=auth_headers,
    )
    assert ok.status_code == 200
    login = client.post(
        "/auth/login", json={"email": "traveler@example.com", "password": "monsoon-2026"}
    )
    assert login.status_code == 200


def test_delete_account(client: TestClient, auth_headers):
    client.put("/profile/me", json={"full_name": "Asha"}, headers=auth_headers)
    client.post("/chats/", json={"question": "q", "answer": "a"}, headers=auth_headers)

    assert client.delete("/profile/me", headers=auth_headers).status_code == 204

    assert client.get("/auth/me", headers=auth_headers).status_code == 401
    login = client.post(
        "/auth/login", json={"email": "traveler@example.com", "password": "namaste123"}
    )
    assert login.status_code == 401


def test_routes_and_translator(client: TestClient, auth_headers):
    plan = client.post(
        "/routes/search",
        json={"start_location": "Jaipur", "destination": "Udaipur"},
        headers=auth_headers,
    )
    assert plan.status_code == 200
    assert plan.json()["safest"]["safety_score"] == 92

    languages = client.get("/translator/languages", headers=auth_headers).json()
    assert len(languages) == 6

    translated = client.post(
        "/translator/translate",
        json={"text": "Welcome", "language": "bengali"},
        headers=auth_headers,
    )
    assert translated.status_code == 200
    assert translated.json()["translation"].startswith("নমস্কার")


def test_navigation_signed_out(client: TestClient):
    nav = client.get("/navigation").json()
    assert nav["session"] == "unauthenticated"
    assert nav["account"] is None
    outcomes = {item["path"]: item for item in nav["items"]}
    assert outcomes["/"]["outcome"] == "render"
    assert outcomes["/my-chats"]["outcome"] == "redirect"
    assert outcomes["/my-chats"]["redirect_to"] == "/login"


def test_navigation_signed_in_shows_account(client: TestClient, auth_headers):
    nav = client.get("/navigation", headers=auth_headers).json()
    assert nav["session"] == "authenticated"
    assert {item["outcome"] for item in nav["items"]} == {"render"}
    assert nav["account"]["display_name"] == "traveler"
    assert nav["account"]["initial"] == "T"

    client.put("/profile/me", json={"full_name": "asha verma"}, headers=auth_headers)
    nav = client.get("/navigation", headers=auth_headers).json()
    assert nav["account"]["display_name"] == "asha verma"
    assert nav["account"]["initial"] == "A"
