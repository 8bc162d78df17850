import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from shared.tokens import (
    CHARSET,
    TOKEN_LENGTH,
    TokenGenerationError,
    calculate_token_expiration,
    generate_guest_token,
    generate_session_token,
    generate_unique_token,
    is_token_expired,
    is_valid_token_format,
)


class TokenTests(unittest.TestCase):
    def test_generated_tokens_use_unambiguous_charset(self):
        for _ in range(50):
            token = generate_guest_token()
            self.assertEqual(len(token), TOKEN_LENGTH)
            self.assertTrue(set(token) <= set(CHARSET))
            self.assertTrue(is_valid_token_format(token))
        for ambiguous in "0O1Il":
            self.assertNotIn(ambiguous, CHARSET)

    def test_format_validation(self):
        self.assertTrue(is_valid_token_format("A13FB9K2"))
        self.assertTrue(is_valid_token_format("A13FB9K2M0"))
        self.assertFalse(is_valid_token_format("abc123"))
        self.assertFalse(is_valid_token_format("A13FB9K2M01"))
        self.assertFalse(is_valid_token_format("A13FB-K2M"))
        self.assertFalse(is_valid_token_format(""))

    def test_unique_token_retries_until_free(self):
        exists = MagicMock(side_effect=[True, True, False])

        token = generate_unique_token(exists)

        self.assertEqual(exists.call_count, 3)
        self.assertEqual(exists.call_args[0][0], token)

    def test_unique_token_gives_up(self):
        exists = MagicMock(return_value=True)

        with self.assertRaises(TokenGenerationError):
            generate_unique_token(exists, max_attempts=4)
        self.assertEqual(exists.call_count, 4)

    def test_session_token_is_hex(self):
        token = generate_session_token()
        self.assertEqual(len(token), 64)
        int(token, 16)

    def test_expiration_is_end_of_next_day(self):
        check_out = datetime(2025, 3, 4, 11, 0, tzinfo=timezone.utc)

        expires = calculate_token_expiration(check_out)

        self.assertEqual(expires.date(), datetime(2025, 3, 5).date())
        self.assertEqual((expires.hour, expires.minute, expires.second), (23, 59, 59))
        self.assertEqual(expires.tzinfo, timezone.utc)

    def test_is_token_expired(self):
        now = datetime(2025, 3, 4, tzinfo=timezone.utc)
        self.assertTrue(is_token_expired(now - timedelta(seconds=1), now=now))
        self.assertFalse(is_token_expired(now + timedelta(seconds=1), now=now))
        # Naive timestamps are read as UTC.
        self.assertTrue(is_token_expired(datetime(2025, 3, 3), now=now))


if __name__ == "__main__":
    unittest.main()
