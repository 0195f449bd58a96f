"""Tests for the commit wizard questions."""

import asyncio

import yaml
from commit_composer.engine.host import DISMISS, PRESS_BACK
from commit_composer.engine.inquiry import loop_inquiry
from commit_composer.engine.loader import SETTINGS_FILENAME, ComposerSettings
from commit_composer.services.commit.questions import (
    NEW_SCOPE,
    NO_SCOPE,
    ONCE_SCOPE,
    build_commit_wizard,
    scope_items,
    type_items,
)


def run_wizard(host, store, catalog):
    settings = store.load()
    steps = build_commit_wizard(settings, host, catalog=catalog, store=store)
    return asyncio.run(loop_inquiry(steps)), settings


def pick_calls(host, title):
    return [call for call in host.calls if call[0] == 'quick_pick' and call[1] == title]


class TestPresets:
    """Choosing a preset and answering its questions."""

    def test_simple_preset(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', '', 'add x']

        answers, _ = run_wizard(host, store, catalog)

        assert answers == {'steps': 'Simple', 'type': 'feat', 'scope': NO_SCOPE, 'subject': 'add x'}

    def test_preset_items_in_settings_order(self, host, store, catalog):
        host.input_queue = [DISMISS]

        run_wizard(host, store, catalog)

        assert host.calls[0] == ('quick_pick', 'Select steps', ['Simple'])

    def test_remembered_preset_listed_first(self, host, store, catalog, write_settings):
        write_settings("remember_step: Full\n")
        host.input_queue = [DISMISS]

        answers, _ = run_wizard(host, store, catalog)

        assert answers is None
        assert host.calls[0] == ('quick_pick', 'Select steps', ['Full'])

    def test_full_preset_with_gitmoji(self, host, store, catalog):
        host.input_queue = ['Full', 'feat', '', '✨', 'add x', 'More text.', '', '#1']

        answers, _ = run_wizard(host, store, catalog)

        assert answers == {
            'steps': 'Full',
            'type': 'feat',
            'scope': NO_SCOPE,
            'gitmoji': '✨',
            'subject': 'add x',
            'body': 'More text.',
            'breaking': '',
            'issues': '#1',
        }

    def test_header_only_preset(self, host, store, catalog):
        host.input_queue = ['Header only', 'chore: release', '']

        answers, _ = run_wizard(host, store, catalog)

        assert answers == {'steps': 'Header only', 'header': 'chore: release', 'body': ''}

    def test_questions_follow_field_order(self, host, store, catalog, write_settings):
        """Preset order does not change the asking order."""
        write_settings("steps:\n  Reversed: [subject, type]\n")
        host.input_queue = ['Reversed', 'fix', 'y']

        answers, _ = run_wizard(host, store, catalog)

        assert answers == {'steps': 'Reversed', 'type': 'fix', 'subject': 'y'}

    def test_cancel_inside_preset_cancels_wizard(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', DISMISS]

        answers, _ = run_wizard(host, store, catalog)

        assert answers is None

    def test_dismiss_preset_picker_cancels(self, host, store, catalog):
        host.input_queue = [DISMISS]

        answers, _ = run_wizard(host, store, catalog)

        assert answers is None


class TestNavigation:
    """Moving between the preset picker and its questions."""

    def test_back_from_first_question_returns_to_preset_picker(self, host, store, catalog):
        host.input_queue = ['Full', PRESS_BACK, 'Simple', 'fix', '', 'y']

        answers, _ = run_wizard(host, store, catalog)

        assert len(pick_calls(host, 'Select steps')) == 2
        assert answers['steps'] == 'Simple'

    def test_answers_survive_preset_switch_and_stale_ones_are_dropped(self, host, store, catalog):
        """Shared fields keep their answer; fields of the old preset are removed."""
        host.input_queue = [
            'Full', 'feat', '', '✨',
            PRESS_BACK, PRESS_BACK, PRESS_BACK, PRESS_BACK,
            'Simple', '', '', 'add x',
        ]

        answers, _ = run_wizard(host, store, catalog)

        # The type picker highlights the earlier answer on the second pass
        assert pick_calls(host, 'type')[-1] == ('quick_pick', 'type', ['feat'])
        assert answers == {'steps': 'Simple', 'type': 'feat', 'scope': NO_SCOPE, 'subject': 'add x'}

    def test_back_inside_preset(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', '', PRESS_BACK, PRESS_BACK, 'fix', '', 'y']

        answers, _ = run_wizard(host, store, catalog)

        assert answers['type'] == 'fix'

    def test_invalid_subject_stays_on_question(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', '', 'add x.', 'add x']

        answers, _ = run_wizard(host, store, catalog)

        assert ('validation', 'subject', 'subject may not end with full stop') in host.calls
        assert answers['subject'] == 'add x'


class TestScopeQuestion:
    """Saved, new and one-off scopes."""

    def test_saved_scope_picked(self, host, store, catalog, write_settings):
        write_settings("scopes: [core, cli]\n")
        host.input_queue = ['Simple', 'feat', 'cli', 'add x']

        answers, _ = run_wizard(host, store, catalog)

        assert answers['scope'] == 'cli'

    def test_new_scope_saved_to_workspace(self, host, store, catalog, tmp_path):
        host.input_queue = ['Simple', 'feat', NEW_SCOPE, 'core', 'add x']

        answers, settings = run_wizard(host, store, catalog)

        assert answers['scope'] == 'core'
        assert settings.scopes == ['core']
        data = yaml.safe_load((tmp_path / SETTINGS_FILENAME).read_text(encoding='utf-8'))
        assert data['scopes'] == ['core']

    def test_once_scope_not_saved(self, host, store, catalog, tmp_path):
        host.input_queue = ['Simple', 'feat', ONCE_SCOPE, 'tmp', 'add x']

        answers, settings = run_wizard(host, store, catalog)

        assert answers['scope'] == 'tmp'
        assert settings.scopes == []
        assert not (tmp_path / SETTINGS_FILENAME).exists()

    def test_dismissed_new_scope_repeats_picker(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', NEW_SCOPE, DISMISS, ONCE_SCOPE, 'x', 'add x']

        answers, _ = run_wizard(host, store, catalog)

        assert len(pick_calls(host, 'scope')) == 2
        assert answers['scope'] == 'x'

    def test_existing_scope_rejected(self, host, store, catalog, write_settings):
        write_settings("scopes: [core]\n")
        host.input_queue = ['Simple', 'feat', NEW_SCOPE, 'core', 'api', 'add x']

        answers, settings = run_wizard(host, store, catalog)

        assert ('validation', 'scope', 'Scope already exists') in host.calls
        assert answers['scope'] == 'api'
        assert settings.scopes == ['core', 'api']

    def test_empty_new_scope_rejected(self, host, store, catalog):
        host.input_queue = ['Simple', 'feat', ONCE_SCOPE, '', 'x', 'add x']

        run_wizard(host, store, catalog)

        assert ('validation', 'scope', 'Scope cannot be empty') in host.calls


class TestItems:
    """Picker item lists built from settings."""

    def test_scope_items_order(self):
        settings = ComposerSettings(
            scopes=['core'],
            lint={'rules': {'scope-enum': [2, 'always', ['core', 'docs']]}},
        )

        values = [item.value for item in scope_items(settings)]

        assert values == [NO_SCOPE, 'core', 'docs', NEW_SCOPE, ONCE_SCOPE]

    def test_scope_enum_ignored_unless_error_level(self):
        settings = ComposerSettings(lint={'rules': {'scope-enum': [1, 'always', ['docs']]}})

        values = [item.value for item in scope_items(settings)]

        assert values == [NO_SCOPE, NEW_SCOPE, ONCE_SCOPE]

    def test_type_items_plain(self):
        settings = ComposerSettings(lint={'types': {'feat': {'title': 'Features', 'emoji': '✨'}}})

        item = type_items(settings)[0]

        assert (item.label, item.value, item.description) == ('feat', 'feat', 'Features')

    def test_type_items_with_emoji(self):
        settings = ComposerSettings(lint={
            'emoji_in_header': True,
            'types': {'feat': {'title': 'Features', 'emoji': '✨'}},
        })

        item = type_items(settings)[0]

        assert item.label == '✨ feat'
        assert item.value == '✨feat'
