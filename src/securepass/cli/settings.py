import json
import logging
from pathlib import Path

from securepass.constants import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from securepass.core.errors import InvalidConfigurationError
from securepass.core.generator import PasswordGenerator


class Settings:
    """Generator length bounds persisted between runs as JSON."""

    def __init__(self, settings_file: Path):
        self.settings_file = Path(settings_file)
        self.min_length = DEFAULT_MIN_LENGTH
        self.max_length = DEFAULT_MAX_LENGTH
        self.load_settings()

    def load_settings(self):
        if not self.settings_file.exists():
            return
        try:
            with open(self.settings_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"Ignoring unreadable settings file {self.settings_file}: {e}")
            return
        if not isinstance(data, dict):
            logging.warning(f"Ignoring settings file {self.settings_file}: expected a JSON object")
            return
        min_length = data.get("min_length", DEFAULT_MIN_LENGTH)
        max_length = data.get("max_length", DEFAULT_MAX_LENGTH)
        for value in (min_length, max_length):
            if not isinstance(value, int) or isinstance(value, bool):
                logging.warning(f"Ignoring settings file {self.settings_file}: lengths must be integers")
                return
        self.min_length = min_length
        self.max_length = max_length

    def save_settings(self):
        settings_data = {
            "min_length": self.min_length,
            "max_length": self.max_length,
        }
        with open(self.settings_file, "w") as f:
            json.dump(settings_data, f, indent=2)

    def build_generator(self) -> PasswordGenerator:
        """Create a generator from the stored bounds, falling back to defaults."""
        try:
            return PasswordGenerator(self.min_length, self.max_length)
        except InvalidConfigurationError as e:
            logging.warning(f"Invalid stored generator settings, using defaults: {e}")
            self.min_length = DEFAULT_MIN_LENGTH
            self.max_length = DEFAULT_MAX_LENGTH
            return PasswordGenerator(DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH)

    def update_from(self, generator: PasswordGenerator):
        self.min_length = generator.min_length
        self.max_length = generator.max_length
        self.save_settings()
