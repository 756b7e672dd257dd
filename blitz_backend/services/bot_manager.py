# blitz_backend/services/bot_manager.py
from pathlib import Path
from typing import Any, Dict, List, Optional

from blitz_backend.core.config import Settings
from blitz_backend.core.workspace import WorkspaceRoot
from blitz_backend.models.bot import BotView
from blitz_backend.services.bot_inspector import BotInspector
from blitz_backend.services.config_store import ConfigStore
from blitz_backend.services.lifecycle import BotLifecycleManager
from blitz_backend.services.plugin_installer import PluginInstaller
from blitz_backend.services.plugin_resolver import PluginResolver
from blitz_backend.services.repository_fetcher import (
    GitRepositoryFetcher,
    RepositoryFetcher,
)
from blitz_backend.services.template_fetcher import TemplateFetcher


class BotManager:
    """Entry point for every bot and plugin operation.

    Holds no state of its own beyond the wired components; the workspace
    directory is the only shared resource between concurrent calls.
    """

    def __init__(self, workspace: WorkspaceRoot, template_fetcher: TemplateFetcher,
                 resolver: PluginResolver, fetcher: RepositoryFetcher,
                 entrypoint_file: str = "bot.js", default_prefix: str = "!"):
        self.workspace = workspace
        self.workspace.ensure()
        self.config_store = ConfigStore(workspace)
        self.inspector = BotInspector(workspace, self.config_store)
        self.lifecycle = BotLifecycleManager(
            workspace,
            self.config_store,
            template_fetcher,
            entrypoint_file=entrypoint_file,
            default_prefix=default_prefix,
        )
        self.installer = PluginInstaller(workspace, resolver, fetcher)

    @classmethod
    def from_settings(cls, settings: Settings) -> "BotManager":
        return cls(
            WorkspaceRoot(settings.BOTS_DIR),
            TemplateFetcher(settings.TEMPLATE_URL, timeout=settings.HTTP_TIMEOUT),
            PluginResolver(settings.PLUGIN_INFO_URL, timeout=settings.HTTP_TIMEOUT),
            GitRepositoryFetcher(settings.REPOSITORY_BASE_URL,
                                 timeout=settings.CLONE_TIMEOUT),
            entrypoint_file=settings.ENTRYPOINT_FILE,
            default_prefix=settings.DEFAULT_PREFIX,
        )

    def list_bots(self) -> List[str]:
        return self.lifecycle.list()

    def create_bot(self, name: Optional[str], token: Optional[str]) -> Path:
        return self.lifecycle.create(name, token)

    def install_plugin(self, bot_name: str, plugin_name: str) -> str:
        return self.installer.install(bot_name, plugin_name)

    def inspect_bot(self, name: str) -> BotView:
        return self.inspector.inspect(name)

    def update_config(self, name: str, patch: Dict[str, Any]) -> Dict[str, Any]:
        return self.config_store.update(name, patch)

    def delete_bot(self, name: str) -> None:
        self.lifecycle.delete(name)
