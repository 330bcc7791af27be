# securepass/core/vault.py
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from securepass.constants import DEFAULT_FILENAME, STORAGE_DIRECTORY, TIMESTAMP_FORMAT
from securepass.core.errors import (
    DuplicateNameError,
    ExportError,
    PersistenceError,
    StoreInitError,
)
from securepass.core.generator import password_strength
from securepass.core.password import PasswordEntry
from securepass.core.strength import describe

HEADER_RULE = "=" * 80
SEPARATOR = "-" * 40
FIELD_SEPARATOR = " | "
NAME_PREFIX = "Name: "
PASSWORD_PREFIX = "Password: "
CREATED_PREFIX = "Created: "
STORAGE_TITLE = "Password Manager - Secure Password Storage"
EXPORT_TITLE = "Password Export"

# Lines that belong to a file header rather than to an entry.
SKIPPED_PREFIXES = ("=", "Password Manager", "Generated on")


def format_header(title: str) -> str:
    return (
        f"{HEADER_RULE}\n"
        f"{title}\n"
        f"Generated on: {datetime.now().strftime(TIMESTAMP_FORMAT)}\n"
        f"{HEADER_RULE}\n"
        "\n"
    )


def _parse_created(field: str) -> datetime:
    field = field.strip()
    if field.startswith(CREATED_PREFIX):
        try:
            return datetime.strptime(field[len(CREATED_PREFIX):].strip(), TIMESTAMP_FORMAT)
        except ValueError:
            pass
    return datetime.now()


def parse_entry_line(line: str) -> PasswordEntry:
    """Parse one ``Name: ... | Password: ... | Created: ... | Special Chars: ...`` line.

    Raises ValueError when the line has fewer than four fields or the name or
    password is empty. A missing or unreadable ``Created`` field falls back
    to the current time.
    """
    parts = line.strip().split(FIELD_SEPARATOR)
    if len(parts) < 4:
        raise ValueError(f"expected 4 fields, found {len(parts)}")
    name = parts[0][len(NAME_PREFIX):].strip()
    password = parts[1][len(PASSWORD_PREFIX):].strip()
    has_special_chars = "Yes" in parts[3]
    return PasswordEntry(name, password, has_special_chars, _parse_created(parts[2]))


class PasswordStore:
    """Keeps password entries in memory and appends them to a flat text file.

    The backing file is read once at construction and only appended to
    afterwards. Every public operation holds a single lock, so the
    in-memory list and the file never diverge for concurrent callers.
    """

    def __init__(self, storage_directory: Union[str, Path] = STORAGE_DIRECTORY,
                 filename: str = DEFAULT_FILENAME, logger: Optional[logging.Logger] = None):
        if filename is None or not filename.strip():
            raise ValueError("Filename cannot be null or empty")
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._entries: List[PasswordEntry] = []

        storage_path = Path(storage_directory)
        try:
            created = not storage_path.is_dir()
            storage_path.mkdir(parents=True, exist_ok=True)
            if created:
                self.logger.info(f"Created storage directory: {storage_path.resolve()}")
            self._file_path = storage_path / filename.strip()
            if self._file_path.exists():
                self._load_entries()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to initialize password store in {storage_path}", exc_info=e)
            raise StoreInitError(f"Failed to initialize password store in {storage_path}: {e}") from e

    @property
    def file_path(self) -> Path:
        return self._file_path

    def _load_entries(self) -> None:
        with open(self._file_path, "r", encoding="utf-8") as f:
            for line_number, raw_line in enumerate(f, start=1):
                line = raw_line.strip()
                if not line or line.startswith(SKIPPED_PREFIXES) or SEPARATOR in line:
                    continue
                if not line.startswith(NAME_PREFIX):
                    continue
                try:
                    self._entries.append(parse_entry_line(line))
                except ValueError as e:
                    self.logger.warning(
                        f"Skipping malformed entry on line {line_number} of {self._file_path}: {e}")
        self.logger.info(f"Loaded {len(self._entries)} password entries from file")

    def _find(self, name: Optional[str]) -> Optional[PasswordEntry]:
        if name is None or not name.strip():
            return None
        wanted = name.strip().lower()
        return next((entry for entry in self._entries if entry.name.lower() == wanted), None)

    def _append_to_file(self, entry: PasswordEntry) -> None:
        content = "" if self._file_path.exists() else format_header(STORAGE_TITLE)
        content += entry.to_file_format() + "\n"
        with open(self._file_path, "a", encoding="utf-8") as f:
            f.write(content)

    def save(self, entry: PasswordEntry) -> None:
        """Append an entry to the file and then to memory."""
        if entry is None:
            raise ValueError("Password entry cannot be null")
        with self._lock:
            if self._find(entry.name) is not None:
                raise DuplicateNameError(entry.name)
            try:
                self._append_to_file(entry)
            except OSError as e:
                self.logger.error(f"Failed to save password entry: {entry.name}", exc_info=e)
                raise PersistenceError(f"Failed to save password '{entry.name}' to {self._file_path}: {e}") from e
            self._entries.append(entry)
        self.logger.info(f"Successfully saved password entry: {entry.name}")

    def find_by_name(self, name: Optional[str]) -> Optional[PasswordEntry]:
        with self._lock:
            return self._find(name)

    def contains(self, name: Optional[str]) -> bool:
        return self.find_by_name(name) is not None

    def all(self) -> List[PasswordEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.count

    def export_to(self, export_path: Union[str, Path]) -> None:
        """Write a full snapshot, with a strength label per entry, to ``export_path``."""
        if export_path is None:
            raise ValueError("Export path cannot be null")
        entries = self.all()
        parts = [
            format_header(EXPORT_TITLE),
            f"Total Passwords: {len(entries)}\n",
            f"{SEPARATOR}\n",
            "\n",
        ]
        for index, entry in enumerate(entries, start=1):
            parts.append(f"Entry #{index}:\n")
            parts.append(entry.to_file_format() + "\n")
            parts.append(f"Password Strength: {describe(password_strength(entry.password))}\n")
            parts.append("\n")
        try:
            with open(export_path, "w", encoding="utf-8") as f:
                f.write("".join(parts))
        except OSError as e:
            self.logger.error(f"Failed to export passwords to {export_path}", exc_info=e)
            raise ExportError(f"Failed to export passwords to {export_path}: {e}") from e
        self.logger.info(f"Successfully exported {len(entries)} passwords to: {export_path}")

    def clear(self, delete_file: bool = False) -> None:
        """Forget every entry; with ``delete_file`` also remove the backing file."""
        with self._lock:
            self._entries.clear()
            if not delete_file:
                return
            try:
                self._file_path.unlink()
                self.logger.info(f"Deleted password file: {self._file_path}")
            except FileNotFoundError:
                pass
            except OSError as e:
                self.logger.warning(f"Failed to delete password file {self._file_path}", exc_info=e)
                raise PersistenceError(f"Failed to delete password file {self._file_path}: {e}") from e

    def reload(self) -> None:
        """Discard memory and re-read the backing file."""
        with self._lock:
            self._entries.clear()
            if not self._file_path.exists():
                return
            try:
                self._load_entries()
            except (OSError, UnicodeDecodeError) as e:
                self._entries.clear()
                self.logger.error("Failed to reload passwords from file", exc_info=e)
                raise PersistenceError(f"Failed to reload passwords from {self._file_path}: {e}") from e
