"""SettingsStore - loads, validates and saves composer settings (YAML)."""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ConfigError

DEFAULTS_PATH = Path(__file__).parent.parent / "defaults" / "composer.yaml"
SETTINGS_FILENAME = ".commit-composer.yaml"


class CommitField(str, Enum):
    """Answer record keys of the commit wizard."""

    STEPS = 'steps'
    HEADER = 'header'
    TYPE = 'type'
    SCOPE = 'scope'
    GITMOJI = 'gitmoji'
    SUBJECT = 'subject'
    BODY = 'body'
    FOOTER = 'footer'
    BREAKING = 'breaking'
    ISSUES = 'issues'


class CommitType(BaseModel):
    """One entry of the commit type list."""

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
    emoji: Optional[str] = None


class LintSettings(BaseModel):
    """
    Commit message conventions.

    ``rules`` use the commitlint shape ``name: [level, "always"|"never", value]``
    where level 2 is an error, 1 a warning and 0 disabled.
    """

    model_config = ConfigDict(extra="allow")

    emoji_in_header: bool = Field(False, description="Prefix the type with its emoji")
    breaking_keyword: str = Field("BREAKING CHANGE", description="Footer keyword for breaking changes")
    questions: Dict[str, str] = Field(default_factory=dict, description="Prompt text per field")
    types: Dict[str, CommitType] = Field(default_factory=dict, description="Commit types by name")
    rules: Dict[str, List[Any]] = Field(default_factory=dict, description="Lint rules by name")


class ComposerSettings(BaseModel):
    """Validated composer settings."""

    model_config = ConfigDict(extra="allow")

    steps: Dict[str, List[CommitField]] = Field(default_factory=dict, description="Step presets by name")
    scopes: List[str] = Field(default_factory=list, description="Saved scopes")
    remember_step: str = Field("", description="Preset used for the last commit")
    append_branch_name: bool = Field(False, description="Append the branch name to the message")
    update_gitmoji: bool = Field(False, description="Refresh the gitmoji catalogue once a day")
    lint: LintSettings = Field(default_factory=LintSettings)


def deep_merge(base: dict, update: dict) -> dict:
    """Deep merge update dict into base dict.

    Args:
        base: Base dictionary
        update: Dictionary with updates to merge

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


class SettingsStore:
    """
    Reads the bundled defaults and the workspace settings file.

    Workspace values are deep-merged over the defaults; ``save`` writes only
    the workspace file.
    """

    def __init__(self, workspace: Optional[Path] = None, defaults_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            workspace: Directory holding .commit-composer.yaml (default: cwd)
            defaults_path: Bundled defaults file
        """
        if workspace is None:
            workspace = Path.cwd()
        self.workspace = Path(workspace)
        self.path = self.workspace / SETTINGS_FILENAME
        self.defaults_path = Path(defaults_path) if defaults_path else DEFAULTS_PATH

    def _read(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings in {path} must be a mapping")
        return data

    def load(self) -> ComposerSettings:
        """
        Load the merged settings.

        Returns:
            Validated ComposerSettings

        Raises:
            ConfigError: If a file is not valid YAML or fails validation
        """
        data = deep_merge(self._read(self.defaults_path), self._read(self.path))
        try:
            return ComposerSettings(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {self.path}: {e}") from e

    def save(self, updates: Dict[str, Any]) -> None:
        """Deep merge updates into the workspace settings file."""
        merged = deep_merge(self._read(self.path), updates)
        with open(self.path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(merged, f, allow_unicode=True, sort_keys=False)
