def test_profile_missing_is_404(client, auth_headers):
    assert client.get("/profile", headers=auth_headers()).status_code == 404


def test_profile_requires_token(client):
    assert client.get("/profile").status_code == 401


def test_create_and_read_profile(client, auth_headers):
    headers = auth_headers("writer")
    response = client.post(
        "/profile",
        json={"full_name": "  Ada Lovelace ", "bio": "  Notes on engines  ", "avatar_url": ""},
        headers=headers,
    )
    assert response.status_code == 201
    created = response.json()
    assert created["user_id"] == "writer"
    assert created["email"] == "writer@example.com"
    assert created["full_name"] == "Ada Lovelace"
    assert created["bio"] == "Notes on engines"
    assert created["avatar_url"] is None

    fetched = client.get("/profile", headers=headers).json()
    assert fetched == created


def test_create_requires_full_name(client, auth_headers):
    headers = auth_headers()
    assert client.post("/profile", json={"full_name": "   "}, headers=headers).status_code == 400
    assert client.post("/profile", json={"bio": "no name"}, headers=headers).status_code == 400
    assert client.get("/profile", headers=headers).status_code == 404


def test_second_create_conflicts(client, auth_headers):
    headers = auth_headers()
    assert client.post("/profile", json={"full_name": "Ada"}, headers=headers).status_code == 201
    response = client.post("/profile", json={"full_name": "Ada again"}, headers=headers)
    assert response.status_code == 409


def test_update_profile(client, auth_headers):
    headers = auth_headers()
    client.post("/profile", json={"full_name": "Ada", "bio": "First bio"}, headers=headers)

    response = client.put("/profile", json={"avatar_url": "https://img.example.com/ada.png"}, headers=headers)
    assert response.status_code == 200
    body = response.json()
    assert body["avatar_url"] == "https://img.example.com/ada.png"
    assert body["full_name"] == "Ada"
    assert body["bio"] == "First bio"

    body = client.put("/profile", json={"full_name": " Ada K. ", "bio": "   "}, headers=headers).json()
    assert body["full_name"] == "Ada K."
    assert body["bio"] is None


def test_update_needs_a_field(client, auth_headers):
    headers = auth_headers()
    client.post("/profile", json={"full_name": "Ada"}, headers=headers)
    assert client.put("/profile", json={}, headers=headers).status_code == 400
    assert client.put("/profile", json={"bio": ""}, headers=headers).status_code == 400


def test_update_rejects_blank_name(client, auth_headers):
    headers = auth_headers()
    client.post("/profile", json={"full_name": "Ada"}, headers=headers)
    assert client.put("/profile", json={"full_name": "  ", "bio": "x"}, headers=headers).status_code == 400
    assert client.get("/profile", headers=headers).json()["full_name"] == "Ada"


def test_update_missing_profile_is_404(client, auth_headers):
    assert client.put("/profile", json={"bio": "hello"}, headers=auth_headers()).status_code == 404


def test_delete_profile(client, auth_headers):
    headers = auth_headers()
    client.post("/profile", json={"full_name": "Ada"}, headers=headers)

    response = client.delete("/profile", headers=headers)
    assert response.status_code == 200
    assert response.json() == {"message": "Profile deleted successfully"}
    assert client.get("/profile", headers=headers).status_code == 404

    # deleting again is still a success
    assert client.delete("/profile", headers=headers).status_code == 200


def test_profiles_are_per_user(client, auth_headers):
    client.post("/profile", json={"full_name": "Alice"}, headers=auth_headers("alice"))
    assert client.get("/profile", headers=auth_headers("bob")).status_code == 404
    assert client.get("/profile", headers=auth_headers("alice")).json()["full_name"] == "Alice"
