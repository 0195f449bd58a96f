"""Commit message assembly from the wizard's answer record."""

from typing import Any, Dict, Optional

from ...engine.loader import ComposerSettings


def format_header(answers: Dict[str, Any]) -> str:
    """``type(scope): <gitmoji> subject``, or the free-form header when one was entered."""
    if answers.get('header'):
        return answers['header']
    scope = answers.get('scope')
    gitmoji = answers.get('gitmoji')
    header = f"{answers.get('type', '')}{f'({scope})' if scope else ''}: "
    if gitmoji:
        header += f"{gitmoji} "
    return header + answers.get('subject', '')


def format_footer(answers: Dict[str, Any], breaking_keyword: str) -> str:
    if answers.get('footer'):
        return answers['footer']
    lines = []
    if answers.get('breaking'):
        lines.append(f"{breaking_keyword}: {answers['breaking']}")
    issues = answers.get('issues')
    if issues:
        lines.append(f"{'Closes' if ',' in issues else 'Close'} {issues}")
    return '\n'.join(lines)


def assemble_message(answers: Dict[str, Any], settings: ComposerSettings,
                     branch: Optional[str] = None) -> str:
    """
    Build the full commit message.

    Args:
        answers: Answer record returned by the commit wizard
        settings: Composer settings (breaking change keyword)
        branch: Branch name to append, if any

    Returns:
        Header, then body and footer each separated by a blank line

    Examples:
        >>> assemble_message({'type': 'feat', 'scope': 'core', 'subject': 'add x'}, ComposerSettings())
        'feat(core): add x'
    """
    paragraphs = [format_header(answers)]
    if answers.get('body'):
        paragraphs.append(answers['body'])
    footer = format_footer(answers, settings.lint.breaking_keyword)
    if footer:
        paragraphs.append(footer)

    message = '\n\n'.join(paragraphs)
    if branch:
        message += f"\nBranch: {branch}"
    return message
