"""Commit service module - questions, lint rules, gitmojis and message assembly."""

from .actions import compose_commit, commit_message, current_branch
from .gitmoji import GitmojiCatalog
from .message import assemble_message
from .questions import build_commit_wizard, build_questions
from .rules import lint_field

__all__ = [
    'compose_commit',
    'commit_message',
    'current_branch',
    'GitmojiCatalog',
    'assemble_message',
    'build_commit_wizard',
    'build_questions',
    'lint_field',
]
