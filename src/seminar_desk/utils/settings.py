"""
Settings management for Seminar Desk
"""

import json
import os
from dataclasses import asdict, dataclass
from typing import Optional

CONFIG_DIR = os.path.expanduser("~/.config/seminar-desk")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass
class Settings:
    """Application settings"""

    window_width: int = 1280
    window_height: int = 800

    # Ask before logging out
    confirm_logout: bool = True

    def save(self):
        """Save settings to config file"""
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, or return defaults"""
        if not os.path.exists(CONFIG_FILE):
            return cls()

        try:
            with open(CONFIG_FILE, "r") as f:
                data = json.load(f)

            # Ignore keys from older versions
            valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
            filtered_data = {k: v for k, v in data.items() if k in valid_fields}

            return cls(**filtered_data)
        except (OSError, ValueError, TypeError):
            return cls()


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def save_settings():
    """Save the global settings"""
    if _settings is not None:
        _settings.save()
