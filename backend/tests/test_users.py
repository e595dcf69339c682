from app.core.security import pwd_context


def test_create_user_hides_password(client, storage):
    response = client.post(
        "/api/users",
        json={
            "username": "sarah",
            "password": "recruiter123",
            "companyName": "Acme",
            "email": "sarah@example.com",
        },
    )
    assert response.status_code == 201
    user = response.json()
    assert "password" not in user
    assert user["role"] == "HR Manager"
    assert user["companyName"] == "Acme"

    stored = storage.get_user(user["id"])
    assert stored.password != "recruiter123"
    assert pwd_context.verify("recruiter123", stored.password)


def test_oauth_user_without_password(client, storage):
    user = client.post(
        "/api/users",
        json={"username": "oauth-user", "companyName": "Acme", "email": "oauth@example.com"},
    ).json()
    assert storage.get_user(user["id"]).password == ""


def test_duplicate_username_is_conflict(client):
    payload = {"username": "dup", "companyName": "Acme", "email": "dup@example.com"}
    assert client.post("/api/users", json=payload).status_code == 201

    response = client.post("/api/users", json=payload)
    assert response.status_code == 409
    assert response.json()["detail"] == "Username 'dup' is already taken"


def test_get_user_by_id_and_username(client):
    created = client.post(
        "/api/users",
        json={"username": "lookup", "companyName": "Acme", "role": "Recruiter", "email": "lookup@example.com"},
    ).json()

    assert client.get(f"/api/users/{created['id']}").json() == created
    assert client.get("/api/users/by-username/lookup").json() == created
    assert client.get("/api/users/nope").status_code == 404
    assert client.get("/api/users/by-username/nope").status_code == 404
