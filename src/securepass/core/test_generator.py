import unittest

from securepass.core.errors import InvalidConfigurationError, InvalidLengthError
from securepass.core.generator import (
    CHARACTER_CLASSES,
    DIGITS,
    LOWERCASE,
    SPECIAL_CHARACTERS,
    UPPERCASE,
    PasswordGenerator,
    password_strength,
)


class TestPasswordGenerator(unittest.TestCase):
    def setUp(self):
        self.generator = PasswordGenerator(8, 16)

    def test_character_classes_are_disjoint(self):
        """No character belongs to two classes"""
        seen = set()
        for char_class in CHARACTER_CLASSES:
            self.assertEqual(len(set(char_class)), len(char_class))
            self.assertFalse(seen & set(char_class))
            seen |= set(char_class)
        self.assertEqual([len(c) for c in CHARACTER_CLASSES], [26, 26, 10, 26])

    def test_random_length_within_bounds(self):
        lengths = set()
        for _ in range(300):
            password = self.generator.generate()
            self.assertTrue(8 <= len(password) <= 16)
            lengths.add(len(password))
        self.assertIn(8, lengths)
        self.assertIn(16, lengths)

    def test_single_value_range(self):
        generator = PasswordGenerator(12, 12)
        for _ in range(20):
            self.assertEqual(len(generator.generate(include_special=True)), 12)

    def test_explicit_length_is_exact(self):
        for length in (4, 5, 13, 64, 128):
            self.assertEqual(len(self.generator.generate(length, True)), length)
            self.assertEqual(len(self.generator.generate(length, False)), length)

    def test_special_generation_covers_all_classes(self):
        for _ in range(200):
            password = self.generator.generate(4, include_special=True)
            for char_class in (LOWERCASE, UPPERCASE, DIGITS, SPECIAL_CHARACTERS):
                self.assertTrue(set(password) & set(char_class), password)

    def test_plain_generation_has_no_special_characters(self):
        for _ in range(200):
            password = self.generator.generate(include_special=False)
            self.assertTrue(set(password) & set(LOWERCASE))
            self.assertTrue(set(password) & set(UPPERCASE))
            self.assertTrue(set(password) & set(DIGITS))
            self.assertFalse(set(password) & set(SPECIAL_CHARACTERS))

    def test_mandatory_characters_are_not_positional(self):
        """Shuffling moves the seeded lowercase character away from index 0"""
        first_chars = {self.generator.generate(16)[0] for _ in range(200)}
        self.assertTrue(first_chars & set(UPPERCASE + DIGITS))

    def test_invalid_lengths(self):
        for length in (0, 3, 129, -1):
            with self.assertRaises(InvalidLengthError):
                self.generator.generate(length)
        with self.assertRaises(ValueError):
            self.generator.generate(200, True)

    def test_invalid_configuration(self):
        for bounds in ((3, 10), (10, 8), (4, 129)):
            with self.assertRaises(InvalidConfigurationError):
                PasswordGenerator(*bounds)

    def test_non_integer_bounds_rejected(self):
        for bounds in ((8.5, 10), (8, 12.0), ("8", 12), (True, 12), (8, None)):
            with self.assertRaises(InvalidConfigurationError):
                PasswordGenerator(*bounds)
        with self.assertRaises(InvalidConfigurationError):
            self.generator.max_length = 12.0
        with self.assertRaises(InvalidConfigurationError):
            self.generator.configure(8.0, 12)
        self.assertEqual((self.generator.min_length, self.generator.max_length), (8, 16))

    def test_non_integer_length_rejected(self):
        for length in (8.0, "8", True):
            with self.assertRaises(InvalidLengthError):
                self.generator.generate(length)

    def test_failed_reconfiguration_keeps_previous_values(self):
        with self.assertRaises(InvalidConfigurationError):
            self.generator.min_length = 20
        with self.assertRaises(InvalidConfigurationError):
            self.generator.max_length = 7
        with self.assertRaises(InvalidConfigurationError):
            self.generator.configure(2, 200)
        self.assertEqual((self.generator.min_length, self.generator.max_length), (8, 16))

    def test_reconfiguration(self):
        self.generator.max_length = 40
        self.generator.min_length = 30
        self.assertEqual((self.generator.min_length, self.generator.max_length), (30, 40))
        self.generator.configure(4, 4)
        self.assertEqual(len(self.generator.generate()), 4)


class TestPasswordStrength(unittest.TestCase):
    def test_empty_and_none(self):
        self.assertEqual(password_strength(""), 0)
        self.assertEqual(password_strength(None), 0)
        self.assertEqual(PasswordGenerator().strength(None), 0)

    def test_scores(self):
        self.assertEqual(password_strength("abc"), 15)
        self.assertEqual(password_strength("!!!!"), 25)
        self.assertEqual(password_strength("Ab1!"), 70)
        self.assertEqual(password_strength("abcdefgh"), 25)
        self.assertEqual(password_strength("Abcdefgh1234"), 65)
        self.assertEqual(password_strength("ABCDEFGHIJKLMNOP"), 45)

    def test_score_is_capped(self):
        self.assertEqual(password_strength("Abcdefgh1234!@#$"), 100)
        self.assertEqual(password_strength("Abcdefgh1234!@#$" * 4), 100)

    def test_external_strings(self):
        """Characters outside every class only count toward length"""
        self.assertEqual(password_strength("        "), 10)
        self.assertEqual(password_strength("pässwörd"), 25)


if __name__ == '__main__':
    unittest.main()
