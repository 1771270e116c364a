EVENT = {"title": "Smart India Hackathon", "event_date": "2026-12-01T09:00:00", "visibility": "shared"}

def test_event_approval_notifies_creator(client, admin_headers, user_headers):
    created = client.post("/api/v1/events", headers=user_headers, json=EVENT)
    assert created.status_code == 201
    event = created.json()
    assert event["approved"] is False

    approved = client.post(f"/api/v1/events/{event['id']}/approve", headers=admin_headers)
    assert approved.status_code == 200
    assert approved.json()["approved"] is True

    feed = client.get("/api/v1/notifications", headers=user_headers).json()
    assert feed["notifications"][0]["message"] == 'Your event "Smart India Hackathon" has been approved! 🎉'
    assert feed["notifications"][0]["read"] is False
    assert feed["unread_count"] == 2

def test_member_cannot_approve_event(client, user_headers, make_user, headers_for):
    other = headers_for(make_user("other@example.com"))
    event = client.post("/api/v1/events", headers=user_headers, json=EVENT).json()

    response = client.post(f"/api/v1/events/{event['id']}/approve", headers=other)
    assert response.status_code == 403

    mine = client.get("/api/v1/events", headers=user_headers).json()
    assert mine[0]["approved"] is False

def test_admin_event_is_visible_to_members(client, admin_headers, user_headers):
    client.post("/api/v1/events", headers=admin_headers, json={**EVENT, "title": "Kickoff"})
    client.post("/api/v1/events", headers=admin_headers, json={**EVENT, "title": "Judges only", "visibility": "private"})

    titles = [e["title"] for e in client.get("/api/v1/events", headers=user_headers).json()]
    assert titles == ["Kickoff"]

def test_event_validation(client, user_headers):
    assert client.post("/api/v1/events", headers=user_headers, json={**EVENT, "title": " "}).status_code == 422
    assert client.post("/api/v1/events", headers=user_headers, json={**EVENT, "visibility": "secret"}).status_code == 422

def test_delete_event(client, user_headers):
    event = client.post("/api/v1/events", headers=user_headers, json=EVENT).json()
    assert client.delete(f"/api/v1/events/{event['id']}", headers=user_headers).status_code == 204
    assert client.get("/api/v1/events", headers=user_headers).json() == []
