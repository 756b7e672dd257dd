# blitz_backend/core/workspace.py
import os
from pathlib import Path
from typing import List, Union

from blitz_backend.core.errors import NotFoundError, ValidationError, WorkspaceIOError


PLUGINS_DIRNAME = "plugins"
CONFIG_FILENAME = "config.json"
MANIFEST_FILENAME = "manifest.json"


def validate_component(value: str, label: str) -> str:
    """Check that ``value`` is usable as a single directory name."""
    if not value or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} is required")
    if "/" in value or "\\" in value or value in (".", "..") or "\x00" in value:
        raise ValidationError(f"Invalid {label.lower()}: {value!r}")
    return value


class WorkspaceRoot:
    """The directory that holds one sub-directory per bot."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def ensure(self) -> Path:
        try:
            self.path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise WorkspaceIOError(
                f"Failed to create workspace root {self.path}: {e}") from e
        return self.path

    def bot_dir(self, name: str) -> Path:
        return self.path / validate_component(name, "Name")

    def plugins_dir(self, name: str) -> Path:
        return self.bot_dir(name) / PLUGINS_DIRNAME

    def config_path(self, name: str) -> Path:
        return self.bot_dir(name) / CONFIG_FILENAME

    def manifest_path(self, name: str) -> Path:
        return self.bot_dir(name) / MANIFEST_FILENAME

    def exists(self, name: str) -> bool:
        return self.bot_dir(name).is_dir()

    def require_bot(self, name: str) -> Path:
        bot_dir = self.bot_dir(name)
        if not bot_dir.is_dir():
            raise NotFoundError(f'Bot "{name}" not found.')
        return bot_dir

    @staticmethod
    def list_subdirectories(directory: Path, include_hidden: bool = True) -> List[str]:
        """Names of the directories directly under ``directory``, sorted."""
        try:
            with os.scandir(directory) as entries:
                return sorted(
                    entry.name for entry in entries
                    if entry.is_dir() and (include_hidden or not entry.name.startswith(".")))
        except FileNotFoundError:
            return []
        except OSError as e:
            raise WorkspaceIOError(
                f"Failed to read directory {directory}: {e}") from e
