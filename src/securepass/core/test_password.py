import dataclasses
import unittest
from datetime import datetime

from securepass.core.password import PasswordEntry


class TestPasswordEntry(unittest.TestCase):
    def test_name_is_trimmed(self):
        entry = PasswordEntry("  Gmail  ", "Ab3!xQ9z", True)
        self.assertEqual(entry.name, "Gmail")

    def test_blank_values_rejected(self):
        for name in ("", "   ", None):
            with self.assertRaises(ValueError):
                PasswordEntry(name, "secret1A")
        for password in ("", None):
            with self.assertRaises(ValueError):
                PasswordEntry("Gmail", password)

    def test_immutable(self):
        entry = PasswordEntry("Gmail", "Ab3!xQ9z", True)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.password = "other"

    def test_equality_uses_name_and_password(self):
        first = PasswordEntry("Gmail", "Ab3!xQ9z", True, datetime(2024, 1, 1))
        second = PasswordEntry("Gmail", "Ab3!xQ9z", False, datetime(2025, 6, 3))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, PasswordEntry("gmail", "Ab3!xQ9z", True))

    def test_file_format(self):
        entry = PasswordEntry("Gmail", "Ab3!xQ9z", True, datetime(2025, 6, 3, 14, 5, 9))
        self.assertEqual(
            entry.to_file_format(),
            "Name: Gmail | Password: Ab3!xQ9z | Created: 2025-06-03 14:05:09 | Special Chars: Yes",
        )
        plain = PasswordEntry("Bank", "xY7abcde", False, datetime(2025, 6, 3, 14, 5, 9))
        self.assertTrue(plain.to_file_format().endswith("| Special Chars: No"))

    def test_repr_hides_password(self):
        entry = PasswordEntry("Gmail", "Ab3!xQ9z", True)
        self.assertNotIn("Ab3!xQ9z", repr(entry))
        self.assertIn("password_length=8", repr(entry))

    def test_created_at_defaults_to_now(self):
        before = datetime.now()
        entry = PasswordEntry("Gmail", "Ab3!xQ9z")
        self.assertTrue(before <= entry.created_at <= datetime.now())
        self.assertFalse(entry.has_special_chars)


if __name__ == '__main__':
    unittest.main()
