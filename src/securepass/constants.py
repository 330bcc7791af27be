from pathlib import Path

# Setup directories and files
STORAGE_DIRECTORY = Path("password_storage")
DEFAULT_FILENAME = "passwords.txt"
SETTINGS_FILE = "settings.json"
LOG_FILE = "password_manager.log"

# Length bounds accepted by the generator
ABSOLUTE_MIN_LENGTH = 4
ABSOLUTE_MAX_LENGTH = 128
DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 20

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
