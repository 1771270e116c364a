import re

def _submit(client, name="Alice", email="alice@example.com", reason="Team lead for SIH"):
    return client.post("/api/v1/access-requests", json={"name": name, "email": email, "reason": reason})

def test_submit_access_request(client, db_session):
    response = _submit(client)
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["email"] == "alice@example.com"

def test_submit_requires_name_and_valid_email(client, db_session):
    assert _submit(client, name="  ").status_code == 422
    assert _submit(client, email="not-an-email").status_code == 422

def test_duplicate_request_conflicts(client, db_session):
    _submit(client)
    assert _submit(client).status_code == 409

def test_list_requests_requires_admin(client, user_headers):
    response = client.get("/api/v1/admin/requests", headers=user_headers)
    assert response.status_code == 403

def test_list_requests(client, admin_headers):
    _submit(client)
    _submit(client, name="Bob", email="bob@example.com")

    response = client.get("/api/v1/admin/requests", headers=admin_headers)
    assert response.status_code == 200
    assert {r["email"] for r in response.json()} == {"alice@example.com", "bob@example.com"}

    pending = client.get("/api/v1/admin/requests?status=pending", headers=admin_headers)
    assert len(pending.json()) == 2
    assert client.get("/api/v1/admin/requests?status=bogus", headers=admin_headers).status_code == 422

def test_new_user_onboarding_flow(client, admin_headers):
    request_id = _submit(client).json()["id"]

    approved = client.post(f"/api/v1/admin/requests/{request_id}/approve", headers=admin_headers)
    assert approved.status_code == 200
    body = approved.json()
    assert body["request"]["status"] == "approved"
    assert body["provisioned_email"] == "alice@example.com"
    temp_password = body["temp_password"]
    assert re.match(r"^HT-[A-Za-z0-9]{8}!$", temp_password)

    login = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": temp_password})
    assert login.status_code == 200
    assert login.json()["must_change_password"] is True
    headers = {"Authorization": f"Bearer {login.json()['access_token']}"}

    # The onboarding gate holds until the profile is complete
    route = client.get("/api/v1/navigation/resolve?path=/dashboard/tasks", headers=headers).json()
    assert route == {"path": "/dashboard/tasks", "action": "redirect", "target": "/dashboard/complete-profile"}
    assert client.get("/api/v1/tasks", headers=headers).status_code == 403

    completed = client.post(
        "/api/v1/users/me/complete-profile",
        headers=headers,
        json={"mobile": "9876543210", "date_of_birth": "2003-05-17", "university_roll_number": "21CS042"}
    )
    assert completed.status_code == 200
    assert completed.json()["profile_completed"] is True

    route = client.get("/api/v1/navigation/resolve?path=/dashboard/tasks", headers=headers).json()
    assert route["action"] == "render"
    assert client.get("/api/v1/tasks", headers=headers).status_code == 200

    # Temporary credential cannot be used again
    again = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": temp_password})
    assert again.status_code == 401

def test_reject_request(client, admin_headers):
    request_id = _submit(client).json()["id"]

    response = client.post(f"/api/v1/admin/requests/{request_id}/reject", headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["request"]["status"] == "rejected"
    assert response.json()["temp_password"] is None

    again = client.post(f"/api/v1/admin/requests/{request_id}/approve", headers=admin_headers)
    assert again.status_code == 400

def test_non_admin_cannot_approve(client, admin_headers, user_headers):
    request_id = _submit(client).json()["id"]

    response = client.post(f"/api/v1/admin/requests/{request_id}/approve", headers=user_headers)
    assert response.status_code == 403

    requests = client.get("/api/v1/admin/requests", headers=admin_headers).json()
    assert requests[0]["status"] == "pending"
    login = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": "anything"})
    assert login.status_code == 401

def test_approve_unknown_request(client, admin_headers):
    response = client.post("/api/v1/admin/requests/999/approve", headers=admin_headers)
    assert response.status_code == 404

def test_direct_provision(client, admin_headers):
    response = client.post(
        "/api/v1/admin/provision",
        headers=admin_headers,
        json={"email": "carol@example.com", "name": "Carol"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert re.match(r"^HT-[A-Za-z0-9]{8}!$", data["tempPassword"])

    duplicate = client.post(
        "/api/v1/admin/provision",
        headers=admin_headers,
        json={"email": "carol@example.com"}
    )
    assert duplicate.status_code == 502

def test_spent_temp_password_recovered_by_reissue(client, admin_headers):
    request_id = _submit(client).json()["id"]
    temp_password = client.post(f"/api/v1/admin/requests/{request_id}/approve", headers=admin_headers).json()["temp_password"]

    login = {"email": "alice@example.com", "password": temp_password}
    assert client.post("/api/v1/auth/login", json=login).status_code == 200
    # The token from that login is lost; the temporary password is already spent
    assert client.post("/api/v1/auth/login", json=login).status_code == 401

    reissued = client.post(
        "/api/v1/admin/reissue-credential",
        headers=admin_headers,
        json={"email": "alice@example.com"}
    )
    assert reissued.status_code == 200
    new_password = reissued.json()["tempPassword"]
    assert re.match(r"^HT-[A-Za-z0-9]{8}!$", new_password)

    relogin = client.post("/api/v1/auth/login", json={"email": "alice@example.com", "password": new_password})
    assert relogin.status_code == 200
    assert relogin.json()["must_change_password"] is True

def test_reissue_requires_admin(client, user_headers, regular_user):
    response = client.post(
        "/api/v1/admin/reissue-credential",
        headers=user_headers,
        json={"email": regular_user.email}
    )
    assert response.status_code == 403

def test_reissue_unknown_account(client, admin_headers):
    response = client.post(
        "/api/v1/admin/reissue-credential",
        headers=admin_headers,
        json={"email": "ghost@example.com"}
    )
    assert response.status_code == 404

def test_approve_after_direct_provision(client, admin_headers):
    request_id = _submit(client).json()["id"]
    direct = client.post(
        "/api/v1/admin/provision",
        headers=admin_headers,
        json={"email": "alice@example.com", "name": "Alice"}
    )
    assert direct.status_code == 200

    approved = client.post(f"/api/v1/admin/requests/{request_id}/approve", headers=admin_headers)
    assert approved.status_code == 200
    assert approved.json()["request"]["status"] == "approved"
    assert approved.json()["temp_password"] is None
