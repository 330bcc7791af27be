# securepass/core/generator.py

import secrets
import string
import threading
from typing import Optional

from securepass.constants import (
    ABSOLUTE_MAX_LENGTH,
    ABSOLUTE_MIN_LENGTH,
)
from securepass.core.errors import InvalidConfigurationError, InvalidLengthError

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

CHARACTER_CLASSES = (LOWERCASE, UPPERCASE, DIGITS, SPECIAL_CHARACTERS)


def _is_int(value) -> bool:
    # bool is an int subclass but never a length
    return isinstance(value, int) and not isinstance(value, bool)


def password_strength(password: Optional[str]) -> int:
    """Score a password from 0 to 100 by length and character variety."""
    if not password:
        return 0

    score = 0
    # Length scoring (up to 30 points)
    if len(password) >= 8:
        score += 10
    if len(password) >= 12:
        score += 10
    if len(password) >= 16:
        score += 10

    # Character variety scoring (up to 70 points)
    chars = set(password)
    if chars & set(LOWERCASE):
        score += 15
    if chars & set(UPPERCASE):
        score += 15
    if chars & set(DIGITS):
        score += 15
    if chars & set(SPECIAL_CHARACTERS):
        score += 25

    return min(score, 100)


class PasswordGenerator:
    """Generates passwords that contain every requested character class.

    Lengths are drawn from ``[min_length, max_length]`` unless given
    explicitly. All randomness comes from the ``secrets`` module.
    """

    def __init__(self, min_length: int = 8, max_length: int = 16):
        self._check_bounds(min_length, max_length)
        self._min_length = min_length
        self._max_length = max_length
        self._lock = threading.Lock()
        self._random = secrets.SystemRandom()

    @staticmethod
    def _check_bounds(min_length: int, max_length: int) -> None:
        for value in (min_length, max_length):
            if not _is_int(value):
                raise InvalidConfigurationError(f"Length bounds must be integers, got {value!r}")
        if min_length < ABSOLUTE_MIN_LENGTH:
            raise InvalidConfigurationError(
                f"Minimum length must be at least {ABSOLUTE_MIN_LENGTH} characters")
        if max_length > ABSOLUTE_MAX_LENGTH:
            raise InvalidConfigurationError(
                f"Maximum length cannot exceed {ABSOLUTE_MAX_LENGTH} characters")
        if min_length > max_length:
            raise InvalidConfigurationError("Minimum length cannot exceed maximum length")

    @property
    def min_length(self) -> int:
        with self._lock:
            return self._min_length

    @min_length.setter
    def min_length(self, value: int) -> None:
        with self._lock:
            self._check_bounds(value, self._max_length)
            self._min_length = value

    @property
    def max_length(self) -> int:
        with self._lock:
            return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        with self._lock:
            self._check_bounds(self._min_length, value)
            self._max_length = value

    def configure(self, min_length: int, max_length: int) -> None:
        """Replace both bounds at once; nothing changes if either is invalid."""
        with self._lock:
            self._check_bounds(min_length, max_length)
            self._min_length = min_length
            self._max_length = max_length

    def _random_length(self) -> int:
        with self._lock:
            low, high = self._min_length, self._max_length
        return low + secrets.randbelow(high - low + 1)

    def generate(self, length: Optional[int] = None, include_special: bool = False) -> str:
        if length is None:
            length = self._random_length()
        if not _is_int(length):
            raise InvalidLengthError(f"Password length must be an integer, got {length!r}")
        if not ABSOLUTE_MIN_LENGTH <= length <= ABSOLUTE_MAX_LENGTH:
            raise InvalidLengthError(
                f"Password length must be between {ABSOLUTE_MIN_LENGTH} "
                f"and {ABSOLUTE_MAX_LENGTH} characters")

        classes = CHARACTER_CLASSES if include_special else CHARACTER_CLASSES[:3]
        alphabet = "".join(classes)

        # One character from every active class, then uniform fill.
        chars = [secrets.choice(char_class) for char_class in classes]
        chars.extend(secrets.choice(alphabet) for _ in range(length - len(chars)))

        self._random.shuffle(chars)
        return "".join(chars)

    def strength(self, password: Optional[str]) -> int:
        return password_strength(password)
