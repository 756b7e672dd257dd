# blitz_backend/services/config_store.py
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict

from blitz_backend.core.errors import (
    NotFoundError,
    ParseError,
    ValidationError,
    WorkspaceIOError,
)
from blitz_backend.core.workspace import WorkspaceRoot

logger = logging.getLogger(__name__)


def load_json_object(path: Path) -> Dict[str, Any]:
    """Read ``path`` and parse it as a JSON object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise WorkspaceIOError(f"Failed to read {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object in {path}")
    return data


class ConfigStore:
    """Reads, merges and persists each bot's ``config.json``."""

    def __init__(self, workspace: WorkspaceRoot):
        self.workspace = workspace

    def read(self, name: str) -> Dict[str, Any]:
        self.workspace.require_bot(name)
        path = self.workspace.config_path(name)
        try:
            return load_json_object(path)
        except FileNotFoundError:
            raise NotFoundError(f'Config file for bot "{name}" not found.')

    def write(self, name: str, document: Dict[str, Any]) -> None:
        """Replace the config document in a single atomic rename."""
        path = self.workspace.config_path(name)
        tmp = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent,
                prefix=".config-", suffix=".tmp", delete=False
            ) as fh:
                tmp = Path(fh.name)
                json.dump(document, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, path)
        except OSError as e:
            if tmp is not None and tmp.exists():
                tmp.unlink()
            raise WorkspaceIOError(
                f"Failed to write config for bot {name}: {e}") from e

    def write_default(self, name: str, token: str, prefix: str = "!") -> Dict[str, Any]:
        document = {"bot_token": token, "prefix": prefix}
        self.write(name, document)
        return document

    def update(self, name: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow-merge ``patch`` into the stored document.

        Top-level keys in ``patch`` replace stored ones; nested objects are
        replaced whole, never merged.
        """
        if not isinstance(patch, dict):
            raise ValidationError("Config update must be a JSON object")

        current = self.read(name)
        updated = {**current, **patch}
        self.write(name, updated)
        logger.info(f"Config for bot {name} updated: keys {sorted(patch)}")
        return updated
