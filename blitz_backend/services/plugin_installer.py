# blitz_backend/services/plugin_installer.py
import logging
import os
import shutil
import uuid
from pathlib import Path

from blitz_backend.core.errors import (
    AlreadyExistsError,
    BlitzError,
    ValidationError,
    WorkspaceIOError,
)
from blitz_backend.core.workspace import WorkspaceRoot, validate_component
from blitz_backend.services.plugin_resolver import PluginResolver
from blitz_backend.services.repository_fetcher import RepositoryFetcher

logger = logging.getLogger(__name__)


class PluginInstaller:
    """Installs a resolved plugin repository into a bot's plugins folder.

    Once the name has resolved, the plugin directory is claimed with an
    exclusive mkdir, so of two concurrent installs only one ever fetches.
    The repository is fetched into a hidden staging directory next to the
    claim and renamed onto it when complete. A failed fetch removes both,
    leaving the plugin uninstalled.
    """

    def __init__(self, workspace: WorkspaceRoot, resolver: PluginResolver,
                 fetcher: RepositoryFetcher):
        self.workspace = workspace
        self.resolver = resolver
        self.fetcher = fetcher

    def install(self, bot_name: str, plugin_name: str) -> str:
        validate_component(plugin_name, "Plugin name")
        if plugin_name.startswith("."):
            raise ValidationError(f"Invalid plugin name: {plugin_name!r}")
        self.workspace.require_bot(bot_name)

        plugins_dir = self.workspace.plugins_dir(bot_name)
        try:
            # bots created before the plugins folder convention lack it
            plugins_dir.mkdir(exist_ok=True)
        except OSError as e:
            raise WorkspaceIOError(
                f"Failed to create plugins folder for bot {bot_name}: {e}") from e

        repo_id = self.resolver.resolve(plugin_name)

        target = plugins_dir / plugin_name
        self._claim(target, bot_name, plugin_name)
        staging = plugins_dir / f".{plugin_name}.{uuid.uuid4().hex}.tmp"
        try:
            self.fetcher.materialize(repo_id, staging)
            os.replace(staging, target)
        except (BlitzError, OSError) as e:
            self._release(target, staging)
            if isinstance(e, OSError):
                raise WorkspaceIOError(
                    f"Failed to install plugin {plugin_name}: {e}") from e
            raise

        logger.info(f"Plugin {plugin_name} ({repo_id}) installed into bot {bot_name}")
        return f'Plugin "{plugin_name}" added to bot "{bot_name}" successfully.'

    @staticmethod
    def _claim(target: Path, bot_name: str, plugin_name: str) -> None:
        try:
            target.mkdir()
        except FileExistsError:
            raise AlreadyExistsError(
                f'Plugin "{plugin_name}" already exists in the bot "{bot_name}".')
        except OSError as e:
            raise WorkspaceIOError(
                f"Failed to create plugin directory {target}: {e}") from e

    @staticmethod
    def _release(target: Path, staging: Path) -> None:
        shutil.rmtree(staging, ignore_errors=True)
        try:
            target.rmdir()
        except OSError as e:
            logger.warning(f"Could not remove plugin claim {target}: {e}")
