import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from starlette.requests import Request

from portal.db import GuestTokenRecord
from portal.hotel_context import (
    extract_token_from_path,
    get_hotel_context,
    get_subdomain,
    validate_hotel,
    validate_token,
)
from shared.types import TokenStatus


def _request(path="/", headers=None):
    raw = [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()]
    return Request({"type": "http", "method": "GET", "path": path, "headers": raw})


def _token(expires_at):
    now = datetime.now(timezone.utc)
    return GuestTokenRecord(
        id="token-1",
        token="A13FB9K2M",
        guest_id="guest-1",
        hotel_id="hotel-1",
        check_in_date=now,
        check_out_date=now,
        expires_at=expires_at,
    )


class SubdomainTests(unittest.TestCase):
    def test_production_hosts(self):
        self.assertEqual(get_subdomain("movenpick.in-evan.com"), "movenpick")
        self.assertEqual(get_subdomain("admin.in-evan.site"), "admin")
        self.assertIsNone(get_subdomain("in-evan.com"))
        self.assertIsNone(get_subdomain("www.in-evan.com"))

    def test_local_hosts(self):
        self.assertEqual(get_subdomain("movenpick.localhost:3000"), "movenpick")
        self.assertIsNone(get_subdomain("localhost:3000"))
        self.assertIsNone(get_subdomain("127.0.0.1:8000"))

    def test_token_from_path(self):
        self.assertEqual(extract_token_from_path("/c/A13FB9K2M/welcome"), "A13FB9K2M")
        self.assertEqual(extract_token_from_path("/c/A13FB9K2M"), "A13FB9K2M")
        self.assertIsNone(extract_token_from_path("/admin"))


class HotelContextTests(unittest.TestCase):
    def test_header_wins_over_host(self):
        request = _request(
            "/c/A13FB9K2M/terms",
            {"host": "other.in-evan.com", "x-hotel-subdomain": "movenpick"},
        )

        context = get_hotel_context(request)

        self.assertEqual(context.subdomain, "movenpick")
        self.assertEqual(context.token, "A13FB9K2M")
        self.assertIsNone(context.session_token)

    def test_session_cookie(self):
        request = _request(
            "/guest-app",
            {"host": "movenpick.in-evan.com", "cookie": "guest_session=abc"},
        )

        self.assertEqual(get_hotel_context(request).session_token, "abc")

    def test_no_tenant(self):
        self.assertIsNone(get_hotel_context(_request("/", {"host": "in-evan.com"})))
        self.assertIsNone(get_hotel_context(_request("/", {"host": "admin.in-evan.site"})))


class ValidationTests(unittest.TestCase):
    def test_validate_hotel_passes_through(self):
        db = MagicMock()
        db.get_active_hotel.return_value = None

        self.assertIsNone(validate_hotel(db, "nowhere"))
        db.get_active_hotel.assert_called_once_with("nowhere")

    def test_valid_token(self):
        db = MagicMock()
        record = _token(datetime.now(timezone.utc) + timedelta(days=1))
        db.find_active_token.return_value = record

        self.assertIs(validate_token(db, "A13FB9K2M", "hotel-1"), record)
        db.update_token_status.assert_not_called()

    def test_expired_token_is_marked(self):
        db = MagicMock()
        db.find_active_token.return_value = _token(
            datetime.now(timezone.utc) - timedelta(hours=1)
        )

        self.assertIsNone(validate_token(db, "A13FB9K2M", "hotel-1"))
        db.update_token_status.assert_called_once_with("token-1", TokenStatus.EXPIRED)

    def test_data_errors_propagate(self):
        db = MagicMock()
        db.find_active_token.side_effect = RuntimeError("connection reset")

        with self.assertRaises(RuntimeError):
            validate_token(db, "A13FB9K2M", "hotel-1")


if __name__ == "__main__":
    unittest.main()
