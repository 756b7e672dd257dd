# blitz_backend/services/lifecycle.py
import logging
import shutil
from pathlib import Path
from typing import List

from blitz_backend.core.errors import (
    AlreadyExistsError,
    NotFoundError,
    ValidationError,
    WorkspaceIOError,
)
from blitz_backend.core.workspace import WorkspaceRoot
from blitz_backend.services.config_store import ConfigStore
from blitz_backend.services.template_fetcher import TemplateFetcher

logger = logging.getLogger(__name__)


class BotLifecycleManager:
    """Creates, lists and deletes bot directories.

    Creation is not transactional. If a step fails after the bot directory
    has been made, the partial directory stays on disk and blocks another
    create with the same name until it is deleted.
    """

    def __init__(self, workspace: WorkspaceRoot, config_store: ConfigStore,
                 template_fetcher: TemplateFetcher,
                 entrypoint_file: str = "bot.js", default_prefix: str = "!"):
        self.workspace = workspace
        self.config_store = config_store
        self.template_fetcher = template_fetcher
        self.entrypoint_file = entrypoint_file
        self.default_prefix = default_prefix

    def list(self) -> List[str]:
        return self.workspace.list_subdirectories(self.workspace.path)

    def create(self, name: str, token: str) -> Path:
        if not name or not token:
            raise ValidationError("Name and token are required")
        bot_dir = self.workspace.bot_dir(name)

        try:
            bot_dir.mkdir()
        except FileExistsError:
            raise AlreadyExistsError(
                f'A bot with the name "{name}" already exists.')
        except OSError as e:
            raise WorkspaceIOError(f"Failed to create bot folder: {e}") from e

        try:
            self.workspace.plugins_dir(name).mkdir()
        except OSError as e:
            raise WorkspaceIOError(f"Failed to create plugins folder: {e}") from e

        code = self.template_fetcher.fetch()
        try:
            (bot_dir / self.entrypoint_file).write_text(code, encoding="utf-8")
        except OSError as e:
            raise WorkspaceIOError(f"Failed to write entrypoint file: {e}") from e

        self.config_store.write_default(name, token, prefix=self.default_prefix)
        logger.info(f"Bot {name} created at {bot_dir}")
        return bot_dir

    def delete(self, name: str) -> None:
        bot_dir = self.workspace.require_bot(name)
        try:
            shutil.rmtree(bot_dir)
        except FileNotFoundError:
            # lost a race with another delete
            raise NotFoundError(f'Bot "{name}" not found.')
        except OSError as e:
            raise WorkspaceIOError(f"Failed to delete bot {name}: {e}") from e
        logger.info(f"Bot {name} deleted")
