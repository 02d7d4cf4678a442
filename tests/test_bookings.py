"""
Integration tests for ground bookings and double-booking prevention
"""

import pytest

from conftest import auth_headers, days_from_today


@pytest.fixture
def ground(create_ground):
    return create_ground(price=40)


def book(client, headers, ground_id, date, time="18:00"):
    return client.post("/bookings", json={"groundId": ground_id, "date": date, "time": time}, headers=headers)


class TestCreateBooking:

    def test_booking_copies_ground_price(self, client, user_headers, regular_user, ground):
        response = book(client, user_headers, ground["groundId"], days_from_today(3))

        assert response.status_code == 201
        booking = response.json()["booking"]
        assert booking["totalAmount"] == 40
        assert booking["status"] == "confirmed"
        assert booking["userId"] == regular_user.user_id
        assert booking["ground"]["groundName"] == ground["groundName"]
        assert booking["user"] == {"userId": regular_user.user_id, "name": "Jordan", "email": "jordan@example.com"}

    def test_same_slot_cannot_be_booked_twice(self, client, user_headers, make_user, ground):
        date = days_from_today(3)
        book(client, user_headers, ground["groundId"], date, "09:00")
        other = make_user(name="Casey")

        response = book(client, auth_headers(other), ground["groundId"], date, "9:00")

        assert response.status_code == 400
        assert response.json()["message"] == "Already booked for this date and time"

    def test_slot_is_day_bounded(self, client, user_headers, ground):
        date = days_from_today(3)
        book(client, user_headers, ground["groundId"], date, "18:00")

        response = book(client, user_headers, ground["groundId"], f"{date}T21:45:00", "18:00")

        assert response.status_code == 400

    def test_other_slots_remain_free(self, client, user_headers, ground, create_ground):
        date = days_from_today(3)
        book(client, user_headers, ground["groundId"], date, "18:00")
        other_ground = create_ground(name="East Field")

        assert book(client, user_headers, ground["groundId"], date, "19:00").status_code == 201
        assert book(client, user_headers, ground["groundId"], days_from_today(4), "18:00").status_code == 201
        assert book(client, user_headers, other_ground["groundId"], date, "18:00").status_code == 201

    def test_cancelled_booking_frees_slot(self, client, user_headers, ground):
        date = days_from_today(3)
        first = book(client, user_headers, ground["groundId"], date).json()["booking"]

        cancelled = client.patch(f"/bookings/{first['bookingId']}/cancel", headers=user_headers)
        assert cancelled.status_code == 200
        assert cancelled.json()["booking"]["status"] == "cancelled"

        assert book(client, user_headers, ground["groundId"], date).status_code == 201

    def test_missing_ground(self, client, user_headers):
        response = book(client, user_headers, "G404", days_from_today(3))
        assert response.status_code == 404
        assert response.json()["message"] == "Ground not found"

    def test_invalid_time(self, client, user_headers, ground):
        response = book(client, user_headers, ground["groundId"], days_from_today(3), "25:00")
        assert response.status_code == 400

    def test_requires_login(self, client, ground):
        assert book(client, {}, ground["groundId"], days_from_today(3)).status_code == 401


class TestBookingAccess:

    def test_user_sees_only_own_bookings(self, client, user_headers, make_user, ground):
        book(client, user_headers, ground["groundId"], days_from_today(3), "10:00")
        other = make_user(name="Casey")
        book(client, auth_headers(other), ground["groundId"], days_from_today(3), "11:00")

        mine = client.get("/bookings/user", headers=user_headers).json()

        assert [b["time"] for b in mine] == ["10:00"]

    def test_all_bookings_admin_only(self, client, user_headers, admin_headers, ground):
        book(client, user_headers, ground["groundId"], days_from_today(3))

        assert client.get("/bookings", headers=user_headers).status_code == 403
        response = client.get("/bookings", headers=admin_headers)
        assert response.status_code == 200
        assert len(response.json()) == 1
        assert response.json()[0]["user"]["name"] == "Jordan"

    def test_only_owner_or_admin_can_cancel(self, client, user_headers, make_user, ground):
        booking = book(client, user_headers, ground["groundId"], days_from_today(3)).json()["booking"]
        stranger = make_user(name="Casey")

        response = client.patch(f"/bookings/{booking['bookingId']}/cancel", headers=auth_headers(stranger))

        assert response.status_code == 403

    def test_admin_deletes_booking(self, client, user_headers, admin_headers, ground):
        booking = book(client, user_headers, ground["groundId"], days_from_today(3)).json()["booking"]

        assert client.delete(f"/bookings/{booking['bookingId']}", headers=user_headers).status_code == 403
        response = client.delete(f"/bookings/{booking['bookingId']}", headers=admin_headers)
        assert response.status_code == 200
        assert client.delete(f"/bookings/{booking['bookingId']}", headers=admin_headers).status_code == 404
