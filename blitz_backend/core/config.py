# blitz_backend/core/config.py
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv


DEFAULT_TEMPLATE_URL = (
    "https://raw.githubusercontent.com/BLITZ-BOTS/blitz-builder/refs/heads/main/event.js"
)
DEFAULT_PLUGIN_INFO_URL = "https://blitz-pugins.charcodes.online/plugin"


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


class Settings:
    """Runtime configuration, resolved once at startup.

    Values come from the environment (and a ``.env`` file if present).
    Keyword arguments override the environment, which is how tests build
    isolated settings.
    """

    def __init__(self, bots_dir: Optional[str] = None, **overrides):
        load_dotenv()
        self.BOTS_DIR = Path(
            bots_dir or os.getenv("BLITZ_BOTS_DIR") or Path.home() / "blitz-bots"
        ).expanduser()
        self.TEMPLATE_URL = os.getenv("BLITZ_TEMPLATE_URL", DEFAULT_TEMPLATE_URL)
        self.ENTRYPOINT_FILE = os.getenv("BLITZ_ENTRYPOINT_FILE", "bot.js")
        self.PLUGIN_INFO_URL = os.getenv(
            "BLITZ_PLUGIN_INFO_URL", DEFAULT_PLUGIN_INFO_URL)
        self.REPOSITORY_BASE_URL = os.getenv(
            "BLITZ_REPOSITORY_BASE_URL", "https://github.com")
        self.DEFAULT_PREFIX = os.getenv("BLITZ_DEFAULT_PREFIX", "!")
        self.HTTP_TIMEOUT = _env_float("BLITZ_HTTP_TIMEOUT", 10.0)
        self.CLONE_TIMEOUT = _env_int("BLITZ_CLONE_TIMEOUT", 300)
        self.HOST = os.getenv("BLITZ_HOST", "0.0.0.0")
        self.PORT = _env_int("BLITZ_PORT", 8115)
        self.LOG_LEVEL = os.getenv("BLITZ_LOG_LEVEL", "INFO").upper()

        for key, value in overrides.items():
            attr = key.upper()
            if not hasattr(self, attr):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, attr, value)


settings = Settings()
