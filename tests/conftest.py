"""Shared fixtures: a temporary workspace and fake network collaborators."""

import os
import tempfile
import threading
from pathlib import Path

import pytest
import requests

# keep the module-level app in main.py out of the real home directory
os.environ.setdefault("BLITZ_BOTS_DIR", tempfile.mkdtemp(prefix="blitz-bots-"))

from blitz_backend.core.errors import NotFoundError, UpstreamError, UpstreamFetchError
from blitz_backend.core.workspace import WorkspaceRoot
from blitz_backend.services.bot_manager import BotManager

TEMPLATE_CODE = "const { Client } = require('discord.js');\n"


class FakeTemplateFetcher:
    def __init__(self, code=TEMPLATE_CODE, fail=False):
        self.code = code
        self.fail = fail
        self.calls = 0

    def fetch(self):
        self.calls += 1
        if self.fail:
            raise UpstreamFetchError("Failed to fetch bot template: offline")
        return self.code


class FakeResolver:
    def __init__(self, repos=None, fail=False):
        self.repos = repos if repos is not None else {"welcome": "blitz/welcome-plugin"}
        self.fail = fail
        self.calls = []

    def resolve(self, plugin_name):
        self.calls.append(plugin_name)
        if self.fail:
            raise UpstreamError("Plugin service returned 500")
        if plugin_name not in self.repos:
            raise NotFoundError(f'Plugin "{plugin_name}" not found.')
        return self.repos[plugin_name]


class FakeRepositoryFetcher:
    """Writes a small file tree instead of cloning.

    With ``fail`` set, it leaves a partial tree behind and raises, the way an
    interrupted clone does.
    """

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def materialize(self, repo_id, dest: Path):
        self.calls.append((repo_id, Path(dest)))
        dest = Path(dest)
        dest.mkdir(parents=True)
        if self.fail:
            (dest / ".git").mkdir()
            raise UpstreamError(f"Failed to clone {repo_id}")
        (dest / "index.js").write_text(f"// {repo_id} call {len(self.calls)}\n")
        (dest / "README.md").write_text(repo_id)


class BlockingRepositoryFetcher(FakeRepositoryFetcher):
    """Holds every fetch until ``release`` is set."""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()

    def materialize(self, repo_id, dest: Path):
        self.entered.set()
        self.release.wait(timeout=5)
        super().materialize(repo_id, dest)


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text="", json_error=False):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stands in for requests.Session, recording requested URLs."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []

    def get(self, url, timeout=None):
        self.requests.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def workspace(tmp_path):
    return WorkspaceRoot(tmp_path / "blitz-bots")


@pytest.fixture
def template_fetcher():
    return FakeTemplateFetcher()


@pytest.fixture
def resolver():
    return FakeResolver()


@pytest.fixture
def repo_fetcher():
    return FakeRepositoryFetcher()


@pytest.fixture
def bot_manager(workspace, template_fetcher, resolver, repo_fetcher):
    return BotManager(workspace, template_fetcher, resolver, repo_fetcher)
