"""Tests for commit message assembly."""

from commit_composer.engine.loader import ComposerSettings
from commit_composer.services.commit.message import assemble_message, format_footer, format_header


def test_header_with_scope():
    assert format_header({'type': 'feat', 'scope': 'core', 'subject': 'add x'}) == 'feat(core): add x'


def test_header_without_scope():
    assert format_header({'type': 'fix', 'scope': '', 'subject': 'y'}) == 'fix: y'


def test_header_with_gitmoji():
    answers = {'type': 'feat', 'scope': 'ui', 'gitmoji': '✨', 'subject': 'add x'}

    assert format_header(answers) == 'feat(ui): ✨ add x'


def test_free_form_header_wins():
    assert format_header({'header': 'chore: release 1.0', 'type': 'feat'}) == 'chore: release 1.0'


def test_footer_from_breaking_and_issues():
    answers = {'breaking': 'drop py2', 'issues': '#12'}

    assert format_footer(answers, 'BREAKING CHANGE') == 'BREAKING CHANGE: drop py2\nClose #12'


def test_several_issues_use_closes():
    assert format_footer({'issues': '#1, #2'}, 'BREAKING CHANGE') == 'Closes #1, #2'


def test_footer_field_wins():
    answers = {'footer': 'Reviewed-by: someone', 'breaking': 'x'}

    assert format_footer(answers, 'BREAKING CHANGE') == 'Reviewed-by: someone'


def test_full_message_paragraphs():
    """Header, body and footer are separated by one blank line."""
    answers = {
        'type': 'feat', 'scope': 'core', 'subject': 'add x',
        'body': 'Longer text.', 'breaking': 'config moved',
    }

    message = assemble_message(answers, ComposerSettings())

    assert message == 'feat(core): add x\n\nLonger text.\n\nBREAKING CHANGE: config moved'


def test_empty_parts_skipped():
    answers = {'type': 'fix', 'scope': '', 'subject': 'y', 'body': '', 'issues': ''}

    assert assemble_message(answers, ComposerSettings()) == 'fix: y'


def test_custom_breaking_keyword():
    settings = ComposerSettings(lint={'breaking_keyword': 'BREAKING'})

    message = assemble_message({'type': 'feat', 'subject': 'x', 'breaking': 'yes'}, settings)

    assert message.endswith('\n\nBREAKING: yes')


def test_branch_appended():
    message = assemble_message({'type': 'feat', 'subject': 'x'}, ComposerSettings(), branch='main')

    assert message == 'feat: x\nBranch: main'
