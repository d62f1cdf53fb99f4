"""Tests for admin domain router."""

from fastapi.testclient import TestClient


def _pending_user_id(client: TestClient, email: str = "user@example.com") -> str:
    response = client.post("/auth/signup", json={"email": email})
    client.post("/accounts/me/plan", json={"plan": "yearly_1000"})
    client.post("/accounts/me/contact", json={"whatsapp": "+213555001122"})
    return response.json()["id"]


# --- access control ---


def test_admin_routes_require_login(client: TestClient):
    response = client.get("/admin/accounts")

    assert response.status_code == 401


def test_admin_routes_reject_users(user_client: TestClient):
    response = user_client.get("/admin/accounts")

    assert response.status_code == 403
    assert response.json()["type"] == "admin_required"


# --- GET /admin/accounts, /admin/stats ---


def test_list_accounts_hides_admin(client: TestClient, admin_client: TestClient):
    user_id = _pending_user_id(client)

    response = admin_client.get("/admin/accounts")

    assert response.status_code == 200
    rows = response.json()
    assert [r["id"] for r in rows] == [user_id]
    assert rows[0]["actions"] == ["approve", "reject"]
    assert rows[0]["contact_url"].startswith("https://wa.me/213555001122")


def test_list_accounts_status_filter(client: TestClient, admin_client: TestClient):
    _pending_user_id(client)
    client.post("/auth/signup", json={"email": "new@example.com"})

    pending = admin_client.get("/admin/accounts", params={"status": "pending"}).json()
    new = admin_client.get("/admin/accounts", params={"status": "new"}).json()

    assert [r["email"] for r in pending] == ["user@example.com"]
    assert [r["email"] for r in new] == ["new@example.com"]


def test_stats(client: TestClient, admin_client: TestClient):
    _pending_user_id(client)

    response = admin_client.get("/admin/stats")

    assert response.json() == {"total": 1, "pending": 1, "active": 0}


# --- PATCH /admin/accounts/{id} ---


def test_approve_account(client: TestClient, admin_client: TestClient):
    user_id = _pending_user_id(client)

    response = admin_client.patch(f"/admin/accounts/{user_id}", json={"status": "active"})

    assert response.status_code == 200
    assert response.json()["status"] == "active"
    # The user's own session sees the change on the next request.
    assert client.get("/accounts/me").json()["status"] == "active"


def test_reject_uses_default_reason(client: TestClient, admin_client: TestClient):
    user_id = _pending_user_id(client)

    response = admin_client.patch(
        f"/admin/accounts/{user_id}", json={"status": "rejected"}
    )

    assert response.status_code == 200
    assert response.json()["rejection_reason"] == "Payment not received"


def test_reject_with_reason(client: TestClient, admin_client: TestClient):
    user_id = _pending_user_id(client)

    response = admin_client.patch(
        f"/admin/accounts/{user_id}",
        json={"status": "rejected", "reason": "Duplicate account"},
    )

    assert response.json()["rejection_reason"] == "Duplicate account"


def test_suspended_user_cannot_requeue_via_contact(
    client: TestClient, admin_client: TestClient
):
    user_id = _pending_user_id(client)
    admin_client.patch(f"/admin/accounts/{user_id}", json={"status": "active"})
    admin_client.patch(f"/admin/accounts/{user_id}", json={"status": "suspended"})

    response = client.post("/accounts/me/contact", json={"whatsapp": "+213555001122"})

    assert response.status_code == 409
    assert response.json()["type"] == "contact_already_submitted"
    assert client.get("/accounts/me").json()["status"] == "suspended"


def test_invalid_transition(client: TestClient, admin_client: TestClient):
    user_id = client.post("/auth/signup", json={"email": "new@example.com"}).json()["id"]

    response = admin_client.patch(
        f"/admin/accounts/{user_id}", json={"status": "suspended"}
    )

    assert response.status_code == 409
    assert response.json()["type"] == "invalid_transition"


def test_admin_account_not_moderable(admin_client: TestClient):
    response = admin_client.patch(
        "/admin/accounts/admin-id", json={"status": "suspended"}
    )

    assert response.status_code == 403
    assert response.json()["type"] == "account_not_moderable"


def test_unknown_account(admin_client: TestClient):
    response = admin_client.patch(
        "/admin/accounts/nonexistent", json={"status": "active"}
    )

    assert response.status_code == 404


def test_invalid_status_value(admin_client: TestClient):
    response = admin_client.patch(
        "/admin/accounts/admin-id", json={"status": "banned"}
    )

    assert response.status_code == 422
