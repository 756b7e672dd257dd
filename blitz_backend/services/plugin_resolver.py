# blitz_backend/services/plugin_resolver.py
import logging
from typing import Optional
from urllib.parse import quote

import requests

from blitz_backend.core.errors import NotFoundError, UpstreamError
from blitz_backend.core.workspace import validate_component

logger = logging.getLogger(__name__)

REPOSITORY_FIELD = "github_repo"


class PluginResolver:
    """Looks up a plugin's repository in the plugin metadata service."""

    def __init__(self, base_url: str, timeout: float = 10.0,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def info_url(self, plugin_name: str) -> str:
        return f"{self.base_url}/{quote(plugin_name, safe='')}"

    def resolve(self, plugin_name: str) -> str:
        """Return the repository identifier (``owner/repo``) for a plugin.

        A 404 or a response without a repository field means the plugin does
        not exist. Any other failure is reported as an upstream error.
        """
        validate_component(plugin_name, "Plugin name")
        url = self.info_url(plugin_name)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Plugin lookup for {plugin_name} failed: {e}")
            raise UpstreamError(
                f'Failed to look up plugin "{plugin_name}": {e}') from e

        if response.status_code == 404:
            raise NotFoundError(f'Plugin "{plugin_name}" not found.')
        if not response.ok:
            logger.error(
                f"Plugin lookup for {plugin_name} returned {response.status_code}")
            raise UpstreamError(
                f'Plugin service returned {response.status_code} for "{plugin_name}"')

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(
                f'Plugin service returned malformed data for "{plugin_name}"') from e

        repo = data.get(REPOSITORY_FIELD) if isinstance(data, dict) else None
        if not repo or not isinstance(repo, str):
            raise NotFoundError(f'Plugin "{plugin_name}" not found.')
        return repo
