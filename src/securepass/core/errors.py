# securepass/core/errors.py


class PasswordManagerError(Exception):
    """Base class for all password manager failures."""


class InvalidConfigurationError(PasswordManagerError, ValueError):
    """Generator length bounds are out of range."""


class InvalidLengthError(PasswordManagerError, ValueError):
    """A requested password length is out of range."""


class DuplicateNameError(PasswordManagerError):
    """An entry with the same name (ignoring case) is already stored."""

    def __init__(self, name: str):
        super().__init__(f"A password with the name '{name}' already exists")
        self.name = name


class StoreInitError(PasswordManagerError):
    """The store could not prepare its directory or read its file."""


class PersistenceError(PasswordManagerError):
    """Writing to or deleting the backing file failed."""


class ExportError(PasswordManagerError):
    """Writing an export snapshot failed."""
