"""Tests for session domain router."""

from fastapi.testclient import TestClient


def test_anonymous_view_defaults_to_landing(client: TestClient):
    response = client.get("/session/view")

    assert response.status_code == 200
    assert response.json()["view"] == "landing"
    assert response.json()["account"] is None


def test_anonymous_view_follows_nav(client: TestClient):
    response = client.get("/session/view", params={"nav": "signup"})

    assert response.json()["view"] == "signup"


def test_invalid_nav(client: TestClient):
    response = client.get("/session/view", params={"nav": "dashboard"})

    assert response.status_code == 422


def test_onboarding_views(user_client: TestClient):
    assert user_client.get("/session/view").json()["view"] == "plan_selection"

    user_client.post("/accounts/me/plan", json={"plan": "yearly_1000"})
    assert user_client.get("/session/view").json()["view"] == "contact_form"

    user_client.post("/accounts/me/contact", json={"whatsapp": "+213555001122"})
    data = user_client.get("/session/view").json()
    assert data["view"] == "status_page"
    assert data["status"] == "pending"
    assert data["support_url"].startswith("https://wa.me/213555112233?text=")


def test_admin_view(admin_client: TestClient):
    data = admin_client.get("/session/view").json()

    assert data["view"] == "admin_dashboard"
    assert data["account"]["role"] == "admin"


def test_rejected_view_shows_reason(client: TestClient, admin_client: TestClient):
    user_id = client.post("/auth/signup", json={"email": "a@x.com"}).json()["id"]
    client.post("/accounts/me/plan", json={"plan": "yearly_1000"})
    client.post("/accounts/me/contact", json={"whatsapp": "+213555001122"})
    admin_client.patch(
        f"/admin/accounts/{user_id}", json={"status": "rejected", "reason": "No payment"}
    )

    data = client.get("/session/view").json()

    assert data["view"] == "status_page"
    assert data["status"] == "rejected"
    assert data["rejection_reason"] == "No payment"
