"""Commit actions - run the wizard and hand the message to git."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ...engine.host import PromptHost
from ...engine.inquiry import loop_inquiry
from ...engine.loader import CommitField, SettingsStore
from ...engine.runner import ActionRunner
from .gitmoji import GitmojiCatalog
from .message import assemble_message
from .questions import build_commit_wizard

logger = logging.getLogger(__name__)


def is_git_repository(workspace: Path, runner: ActionRunner) -> bool:
    return runner.file_exists(os.path.join(str(workspace), '.git'))


def current_branch(workspace: Path, runner: ActionRunner) -> Optional[str]:
    """Name of the checked out branch, or None outside a repository."""
    result = runner.run_shell(['git', 'rev-parse', '--abbrev-ref', 'HEAD'], cwd=str(workspace))
    if result.get('returncode') != 0:
        return None
    return result.get('stdout', '').strip() or None


def commit_message(message: str, workspace: Path, runner: ActionRunner) -> Dict[str, Any]:
    """Commit the staged changes with ``message``.

    Returns:
        The runner's result dict
    """
    return runner.run_shell(['git', 'commit', '-m', message], cwd=str(workspace))


async def compose_commit(
    host: PromptHost,
    runner: ActionRunner,
    store: SettingsStore,
    catalog: Optional[GitmojiCatalog] = None,
) -> Optional[str]:
    """
    Run the commit wizard and assemble the message.

    The chosen preset is remembered in the workspace settings.

    Args:
        host: PromptHost for the questions
        runner: ActionRunner for git commands
        store: Workspace settings
        catalog: Gitmoji catalogue (default: per settings)

    Returns:
        The composed message, or None when the wizard was cancelled or
        produced nothing beyond the preset choice
    """
    settings = store.load()
    steps = build_commit_wizard(settings, host, catalog=catalog, store=store)

    answers = await loop_inquiry(steps)
    if not answers or len(answers) <= 1:
        logger.info("No commit message composed")
        return None

    branch = None
    if settings.append_branch_name:
        if is_git_repository(store.workspace, runner):
            branch = current_branch(store.workspace, runner)
        else:
            logger.warning(f"No git repository found in {store.workspace}")

    message = assemble_message(answers, settings, branch=branch)
    store.save({'remember_step': answers.get(CommitField.STEPS.value, '')})
    logger.info(f"Composed commit message:\n{message}")
    return message
