import unittest

from shared.json_utils import KeyCase, camel_to_snake, convert_keys, snake_to_camel


class KeyCaseTests(unittest.TestCase):
    def test_single_names(self):
        self.assertEqual(snake_to_camel("image_url"), "imageUrl")
        self.assertEqual(snake_to_camel("check_in_date"), "checkInDate")
        self.assertEqual(snake_to_camel("id"), "id")
        self.assertEqual(camel_to_snake("imageUrl"), "image_url")
        self.assertEqual(camel_to_snake("numberOfGuests"), "number_of_guests")
        self.assertEqual(camel_to_snake("id"), "id")

    def test_nested_conversion(self):
        stored = {
            "first_name": "Sara",
            "tokens": [{"check_in_date": "2025-03-01", "status": "active"}],
            "preferences": {"late_checkout": True},
        }

        wire = convert_keys(stored, KeyCase.CAMEL)

        self.assertEqual(
            wire,
            {
                "firstName": "Sara",
                "tokens": [{"checkInDate": "2025-03-01", "status": "active"}],
                "preferences": {"lateCheckout": True},
            },
        )
        self.assertEqual(convert_keys(wire, "snake"), stored)

    def test_values_are_left_alone(self):
        self.assertEqual(
            convert_keys({"room_type": "deluxe_king"}, KeyCase.CAMEL),
            {"roomType": "deluxe_king"},
        )
        self.assertEqual(convert_keys("first_name", KeyCase.CAMEL), "first_name")


if __name__ == "__main__":
    unittest.main()
