from dataclasses import dataclass, field
from datetime import datetime

from securepass.constants import TIMESTAMP_FORMAT


@dataclass(frozen=True)
class PasswordEntry:
    """Represents a stored password entry.

    Two entries are equal when their name and password match; the creation
    time and special-character flag are metadata only.
    """
    name: str
    password: str = field(repr=False)
    has_special_chars: bool = field(default=False, compare=False)
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def __post_init__(self):
        if self.name is None or not self.name.strip():
            raise ValueError("Name cannot be null or empty")
        if not self.password:
            raise ValueError("Password cannot be null or empty")
        object.__setattr__(self, "name", self.name.strip())

    @property
    def formatted_timestamp(self) -> str:
        return self.created_at.strftime(TIMESTAMP_FORMAT)

    @property
    def password_length(self) -> int:
        return len(self.password)

    def to_file_format(self) -> str:
        """Render the entry as one line of the storage file."""
        return (
            f"Name: {self.name} | Password: {self.password} | "
            f"Created: {self.formatted_timestamp} | "
            f"Special Chars: {'Yes' if self.has_special_chars else 'No'}"
        )

    def __repr__(self) -> str:
        return (
            f"PasswordEntry(name={self.name!r}, password_length={self.password_length}, "
            f"has_special_chars={self.has_special_chars}, created={self.formatted_timestamp})"
        )
