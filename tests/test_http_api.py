from __future__ import annotations

from datetime import timedelta

import pytest
from flask_jwt_extended import create_access_token, decode_token
from werkzeug.security import generate_password_hash

from src.dayflow.dayflow.core.enums import Role
from src.dayflow.dayflow.main import create_app

PASSWORD = "Secret123"


@pytest.fixture
def app(container, users):
    users.add(
        employee_id="ADMIN001",
        email="boss@example.com",
        role=Role.ADMIN,
        password_hash=generate_password_hash(PASSWORD),
    )
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def _signup(client, **overrides):
    body = {
        "employee_id": "EMP001",
        "username": "Alice Nguyen",
        "email": "alice@example.com",
        "password": PASSWORD,
    }
    body.update(overrides)
    return client.post("/api/auth/signup", json=body)


def _token(client, email: str) -> str:
    resp = client.post("/api/auth/signin", json={"email": email, "password": PASSWORD})
    assert resp.status_code == 200
    return resp.get_json()["token"]


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_signup_then_signin_token_carries_role(app, client):
    resp = _signup(client)
    assert resp.status_code == 201
    user_id = resp.get_json()["userId"]

    token = _token(client, "alice@example.com")
    with app.app_context():
        claims = decode_token(token)

    assert claims["sub"] == str(user_id)
    assert claims["role"] == "employee"
    assert claims["email"] == "alice@example.com"


def test_signup_validation_errors_list_fields(client):
    resp = client.post("/api/auth/signup", json={"username": "x", "email": "not-an-email"})

    assert resp.status_code == 400
    fields = {e["field"] for e in resp.get_json()["errors"]}
    assert {"employee_id", "email", "password"} <= fields


def test_signup_duplicate_is_conflict(client):
    _signup(client)
    resp = _signup(client, username="someone", email="other@example.com")

    assert resp.status_code == 409
    assert resp.get_json() == {"error": "Employee ID already registered"}


def test_signin_bad_password(client):
    _signup(client)
    resp = client.post("/api/auth/signin", json={"email": "alice@example.com", "password": "Wrong1234"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_missing_or_bad_token_is_401(client):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/auth/me", headers=_auth("garbage")).status_code == 401


def test_me(client):
    _signup(client)
    resp = client.get("/api/auth/me", headers=_auth(_token(client, "alice@example.com")))

    assert resp.status_code == 200
    assert resp.get_json()["user"]["profile"]["first_name"] == "Alice"


def test_admin_routes_reject_employees(client):
    _signup(client)
    headers = _auth(_token(client, "alice@example.com"))

    resp = client.get("/api/employees", headers=headers)

    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Admin access required"}
    assert client.get("/api/reports/analytics", headers=headers).status_code == 403


def test_attendance_flow_over_http(client):
    _signup(client)
    headers = _auth(_token(client, "alice@example.com"))

    assert client.post("/api/attendance/checkin", headers=headers).status_code == 200
    again = client.post("/api/attendance/checkin", headers=headers)
    assert again.status_code == 409
    assert again.get_json() == {"error": "Already checked in today"}

    assert client.post("/api/attendance/checkout", headers=headers).status_code == 200
    today = client.get("/api/attendance/today", headers=headers).get_json()
    assert today["status"] == "present"


def test_leave_submit_and_reject_over_http(client, attendance):
    user_id = _signup(client).get_json()["userId"]
    employee = _auth(_token(client, "alice@example.com"))
    admin = _auth(_token(client, "boss@example.com"))

    resp = client.post(
        "/api/leave",
        headers=employee,
        json={"leave_type": "sick", "start_date": "2026-03-09", "end_date": "2026-03-11", "remarks": "flu"},
    )
    assert resp.status_code == 201
    leave_id = resp.get_json()["id"]

    pending = client.get("/api/leave/all?status=pending", headers=admin).get_json()
    assert [r["id"] for r in pending] == [leave_id]

    resp = client.put(f"/api/leave/{leave_id}/approve", headers=admin, json={"status": "rejected"})
    assert resp.status_code == 200
    statuses = {r.status.value for r in attendance.rows.values() if r.user_id == user_id}
    assert statuses == {"absent"}


def test_leave_inverted_range_is_400(client):
    _signup(client)
    resp = client.post(
        "/api/leave",
        headers=_auth(_token(client, "alice@example.com")),
        json={"leave_type": "paid", "start_date": "2026-03-11", "end_date": "2026-03-09"},
    )
    assert resp.status_code == 400


def test_payroll_and_salary_slip_over_http(client):
    user_id = _signup(client).get_json()["userId"]
    employee = _auth(_token(client, "alice@example.com"))
    admin = _auth(_token(client, "boss@example.com"))

    resp = client.post(
        "/api/payroll",
        headers=admin,
        json={"user_id": user_id, "month": 3, "year": 2026, "base_salary": 5000, "allowances": 500, "deductions": 200},
    )
    assert resp.status_code == 200
    payroll_id = resp.get_json()["payroll"]["id"]

    bad = client.put(f"/api/payroll/{payroll_id}/status", headers=admin, json={"status": "void"})
    assert bad.status_code == 400

    mine = client.get("/api/payroll/my-payroll?year=2026", headers=employee).get_json()
    assert mine[0]["net_salary"] == 5300.0

    slip = client.get(f"/api/reports/salary-slip/{user_id}?month=3&year=2026", headers=employee)
    assert slip.status_code == 200
    assert slip.get_json()["employee"]["employee_id"] == "EMP001"

    missing = client.get(f"/api/reports/salary-slip/{user_id}", headers=employee)
    assert missing.status_code == 400


def test_employee_cannot_read_other_profile(client, users):
    _signup(client)
    admin_user = users.get_by_email("boss@example.com")

    resp = client.get(
        f"/api/employees/{admin_user.user_id}",
        headers=_auth(_token(client, "alice@example.com")),
    )
    assert resp.status_code == 403


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_token_is_valid_for_seven_days(app, client):
    _signup(client)
    token = _token(client, "alice@example.com")

    with app.app_context():
        claims = decode_token(token)

    assert claims["exp"] - claims["iat"] == 7 * 86400


def test_expired_token_is_401(app, client):
    user_id = _signup(client).get_json()["userId"]
    with app.app_context():
        token = create_access_token(
            identity=str(user_id),
            additional_claims={"role": "employee", "email": "alice@example.com"},
            expires_delta=timedelta(seconds=-1),
        )

    resp = client.get("/api/auth/me", headers=_auth(token))

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid or expired token"}


def test_leave_on_last_calendar_day_over_http(client, leaves):
    _signup(client)
    resp = client.post(
        "/api/leave",
        headers=_auth(_token(client, "alice@example.com")),
        json={"leave_type": "paid", "start_date": "9999-12-31", "end_date": "9999-12-31"},
    )

    assert resp.status_code == 201
    assert len(leaves.requests) == 1


def test_oversized_leave_is_400_and_not_stored(client, leaves, attendance):
    _signup(client)
    resp = client.post(
        "/api/leave",
        headers=_auth(_token(client, "alice@example.com")),
        json={"leave_type": "paid", "start_date": "0001-01-01", "end_date": "9999-12-30"},
    )

    assert resp.status_code == 400
    assert leaves.requests == {}
    assert attendance.rows == {}


def test_weekly_start_near_calendar_end_is_400(client):
    _signup(client)
    resp = client.get(
        "/api/attendance/weekly?startDate=9999-12-30",
        headers=_auth(_token(client, "alice@example.com")),
    )

    assert resp.status_code == 400
