"""Tests for schema models and navigation signal normalization."""

import pytest
from pydantic import ValidationError
from commit_composer.engine.schema import (
    ABANDONED,
    ADVANCE,
    RETREAT,
    STEPPED_BACK,
    Abort,
    InputOptions,
    JumpBy,
    PickItem,
    PickOptions,
    to_signal,
)


class TestToSignal:
    """Loose handler results map to tagged signals."""

    def test_true_advances(self):
        assert to_signal(True) == ADVANCE

    def test_truthy_non_integer_advances(self):
        assert to_signal('yes') == ADVANCE

    def test_false_retreats(self):
        assert to_signal(False) == RETREAT

    def test_empty_string_retreats(self):
        assert to_signal('') == RETREAT

    def test_stepped_back_retreats(self):
        assert to_signal(STEPPED_BACK) == RETREAT

    def test_integer_jumps(self):
        assert to_signal(-3) == JumpBy(-3)

    def test_zero_repeats_instead_of_retreating(self):
        """0 is a jump of zero, not a falsy retreat."""
        assert to_signal(0) == JumpBy(0)

    def test_none_aborts(self):
        assert to_signal(None) == Abort()

    def test_abandoned_aborts(self):
        assert to_signal(ABANDONED) == Abort()

    def test_exception_aborts_with_reason(self):
        assert to_signal(RuntimeError('no repository')) == Abort('no repository')

    def test_tagged_signals_pass_through(self):
        assert to_signal(JumpBy(2)) == JumpBy(2)
        assert to_signal(Abort('stop')) == Abort('stop')


class TestOptions:
    """Prompt configuration models."""

    def test_input_options_kind(self):
        assert InputOptions().kind == 'input'

    def test_pick_options_kind(self):
        assert PickOptions().kind == 'quick_pick'

    def test_unset_fields_not_in_fields_set(self):
        options = InputOptions(placeholder='Type here')
        assert options.model_fields_set == {'placeholder'}

    def test_pick_item_requires_label(self):
        with pytest.raises(ValidationError) as exc_info:
            PickItem(value='x')

        assert 'label' in str(exc_info.value)

    def test_pick_item_defaults(self):
        item = PickItem(label='feat', value='feat')

        assert item.disabled is False
        assert item.always_show is False
        assert item.description is None
