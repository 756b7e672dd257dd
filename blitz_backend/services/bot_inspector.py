# blitz_backend/services/bot_inspector.py
import logging
from typing import Any, Dict, Optional

from blitz_backend.core.errors import ParseError, WorkspaceIOError
from blitz_backend.core.workspace import WorkspaceRoot
from blitz_backend.models.bot import BotView
from blitz_backend.services.config_store import ConfigStore, load_json_object

logger = logging.getLogger(__name__)


class BotInspector:
    def __init__(self, workspace: WorkspaceRoot, config_store: ConfigStore):
        self.workspace = workspace
        self.config_store = config_store

    def inspect(self, name: str) -> BotView:
        """Collect manifest, plugin list and config for a bot.

        The manifest is optional and any problem reading it counts as "no
        manifest". The config is required: a missing or malformed config is
        an error.
        """
        bot_dir = self.workspace.require_bot(name)
        manifest = self._read_manifest(name)
        plugins = self.workspace.list_subdirectories(
            self.workspace.plugins_dir(name), include_hidden=False)
        config = self.config_store.read(name)

        return BotView(
            name=name,
            directory=str(bot_dir),
            manifest=manifest,
            plugins=plugins,
            config=config,
        )

    def _read_manifest(self, name: str) -> Optional[Dict[str, Any]]:
        path = self.workspace.manifest_path(name)
        if not path.is_file():
            return None
        try:
            return load_json_object(path)
        except (OSError, ParseError, WorkspaceIOError) as e:
            logger.warning(f"Ignoring unreadable manifest for bot {name}: {e}")
            return None
