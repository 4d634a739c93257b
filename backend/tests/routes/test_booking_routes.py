# backend/tests/routes/test_booking_routes.py
"""Booking routes: session gate, validation mapping and admin transitions."""

import pytest

from courtbook.models.user import User


class TestSessionGate:
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/api/v1/bookings"),
            ("post", "/api/v1/bookings"),
            ("put", "/api/v1/bookings/01J00000000000000000000000/status"),
            ("put", "/api/v1/bookings/01J00000000000000000000000/payment"),
            ("delete", "/api/v1/bookings/01J00000000000000000000000"),
            ("get", "/api/v1/users"),
            ("post", "/api/v1/courts"),
            ("post", "/api/v1/coupons"),
            ("post", "/api/v1/announcements"),
            ("post", "/api/v1/payments/success"),
            ("get", "/api/v1/payments/reconciliation"),
        ],
    )
    def test_requires_session_cookie(self, client, method, path):
        kwargs = {"json": {}} if method in {"post", "put"} else {}

        response = getattr(client, method)(path, **kwargs)

        assert response.status_code == 401

    def test_invalid_cookie_is_rejected(self, client):
        client.cookies.set("token", "garbage")

        response = client.get("/api/v1/bookings")

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_logout_clears_cookie(self, client):
        client.post("/api/v1/jwt", json={"email": "x@club.test"})
        assert "token" in client.cookies

        response = client.post("/api/v1/logout")

        assert response.status_code == 200
        assert "token" not in client.cookies

    def test_jwt_requires_email(self, client):
        response = client.post("/api/v1/jwt", json={})

        assert response.status_code == 400

    def test_session_cookie_is_http_only(self, client):
        response = client.post("/api/v1/jwt", json={"email": "x@club.test"})

        cookie_header = response.headers["set-cookie"].lower()
        assert "httponly" in cookie_header
        assert "samesite=lax" in cookie_header


class TestBookingRoutes:
    def test_create_rejects_empty_slots(self, auth_client, test_user, test_court):
        response = auth_client.post(
            "/api/v1/bookings",
            json={
                "courtId": test_court.id,
                "userId": test_user.id,
                "userEmail": test_user.email,
                "slots": [],
                "date": "2025-07-01",
                "price": 25,
            },
        )

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("application/problem+json")

    def test_filter_by_court_name(self, auth_client, make_booking):
        make_booking()

        hit = auth_client.get("/api/v1/bookings", params={"courtName": "CENTER"})
        miss = auth_client.get("/api/v1/bookings", params={"courtName": "padel"})

        assert len(hit.json()["bookings"]) == 1
        assert miss.json()["bookings"] == []

    def test_approval_promotes_user(self, auth_client, make_booking, db):
        booking = make_booking()

        response = auth_client.put(
            f"/api/v1/bookings/{booking.id}/status", json={"status": "Approved"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "Approved"
        users = auth_client.get("/api/v1/users").json()["users"]
        assert [u["role"] for u in users if u["email"] == "player@club.test"] == ["member"]

    def test_invalid_status_returns_400(self, auth_client, make_booking):
        booking = make_booking()

        response = auth_client.put(
            f"/api/v1/bookings/{booking.id}/status", json={"status": "Confirmed"}
        )

        assert response.status_code == 400

    def test_status_of_unknown_booking_returns_404(self, auth_client, unknown_id):
        response = auth_client.put(
            f"/api/v1/bookings/{unknown_id}/status", json={"status": "Rejected"}
        )

        assert response.status_code == 404

    def test_payment_override_cannot_regress(self, auth_client, make_booking):
        booking = make_booking(payment_status="completed")

        response = auth_client.put(
            f"/api/v1/bookings/{booking.id}/payment", json={"paymentStatus": "pending"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "PAYMENT_STATUS_REGRESSION"

    def test_payment_override_forward(self, auth_client, make_booking):
        booking = make_booking()

        response = auth_client.put(
            f"/api/v1/bookings/{booking.id}/payment", json={"paymentStatus": "completed"}
        )

        assert response.status_code == 200
        assert response.json()["paymentStatus"] == "completed"

    def test_payment_override_is_left_out_of_reconciliation(self, auth_client, make_booking):
        booking = make_booking()

        response = auth_client.put(
            f"/api/v1/bookings/{booking.id}/payment", json={"paymentStatus": "completed"}
        )
        report = auth_client.get("/api/v1/payments/reconciliation")

        assert response.json()["confirmedBy"] == "admin"
        assert report.status_code == 200
        assert report.json() == {"count": 0, "bookings": []}

    def test_delete_booking(self, auth_client, make_booking):
        booking = make_booking()

        first = auth_client.delete(f"/api/v1/bookings/{booking.id}")
        second = auth_client.delete(f"/api/v1/bookings/{booking.id}")

        assert first.status_code == 200
        assert first.json()["deletedCount"] == 1
        assert second.status_code == 404

    def test_payment_success_for_unknown_booking(self, auth_client, unknown_id):
        response = auth_client.post(
            "/api/v1/payments/success",
            json={"bookingId": unknown_id, "transactionId": "pi_1"},
        )

        assert response.status_code == 404

    def test_role_change(self, auth_client, test_user, db):
        response = auth_client.put(f"/api/v1/users/{test_user.id}/role", json={"role": "admin"})

        assert response.status_code == 200
        db.refresh(test_user)
        assert test_user.role == "admin"
        assert db.query(User).count() == 1
