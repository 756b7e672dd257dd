# blitz_backend/services/repository_fetcher.py
import logging
from pathlib import Path
from typing import Protocol

from git import Git
from git.exc import GitCommandError

from blitz_backend.core.errors import UpstreamError

logger = logging.getLogger(__name__)


class RepositoryFetcher(Protocol):
    def materialize(self, repo_id: str, dest: Path) -> None:
        """Place the full tree of ``repo_id`` at ``dest``."""


class GitRepositoryFetcher:
    """Clones repositories with git.

    ``dest`` must not exist yet. The clone is killed once it has run for
    ``timeout`` seconds.
    """

    def __init__(self, base_url: str = "https://github.com", timeout: int = 300):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def clone_url(self, repo_id: str) -> str:
        if repo_id.startswith(("http://", "https://", "git@", "ssh://")):
            return repo_id
        return f"{self.base_url}/{repo_id.strip('/')}"

    def materialize(self, repo_id: str, dest: Path) -> None:
        url = self.clone_url(repo_id)
        # never wait on a credential or host-key prompt
        env = {
            "GIT_TERMINAL_PROMPT": "0",
            "GIT_SSH_COMMAND": f"ssh -o BatchMode=yes -o ConnectTimeout={self.timeout}",
            "GIT_HTTP_LOW_SPEED_LIMIT": "1",
            "GIT_HTTP_LOW_SPEED_TIME": str(self.timeout),
        }
        try:
            Git().clone(url, str(dest), env=env, kill_after_timeout=self.timeout)
        except GitCommandError as e:
            logger.error(f"git clone {url} into {dest} failed: {e}")
            raise UpstreamError(f"Failed to clone {url}: {e.stderr or e}") from e
        logger.info(f"Cloned {url} into {dest}")
