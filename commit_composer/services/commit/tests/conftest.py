"""Pytest fixtures for commit service tests."""

import pytest
from commit_composer.engine.host import MockPromptHost
from commit_composer.engine.loader import SETTINGS_FILENAME, SettingsStore
from commit_composer.engine.runner import MockActionRunner
from commit_composer.services.commit.gitmoji import GitmojiCatalog


@pytest.fixture
def host():
    return MockPromptHost()


@pytest.fixture
def runner():
    return MockActionRunner()


@pytest.fixture
def store(tmp_path):
    return SettingsStore(workspace=tmp_path)


@pytest.fixture
def write_settings(tmp_path):
    """Write a workspace settings file."""
    def write(content):
        path = tmp_path / SETTINGS_FILENAME
        path.write_text(content, encoding='utf-8')
        return path
    return write


@pytest.fixture
def catalog(tmp_path):
    """Offline catalogue reading the bundled gitmoji list."""
    return GitmojiCatalog(cache_path=tmp_path / 'cache' / 'gitmojis.json', update=False)
