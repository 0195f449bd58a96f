"""Inquiry engine - prompt sessions, steps and the wizard driver."""

from .boxes import Event, InputBox, QuickPick
from .host import PromptHost, TerminalPromptHost, MockPromptHost
from .inquiry import create_inquiry_item, loop_inquiry
from .loader import CommitField, ComposerSettings, SettingsStore
from .prompts import show_box
from .runner import ActionRunner, RealActionRunner, MockActionRunner
from .schema import (
    ABANDONED,
    ADVANCE,
    RETREAT,
    STEPPED_BACK,
    Abandoned,
    Abort,
    Advance,
    InputOptions,
    InquiryContext,
    InquiryItem,
    JumpBy,
    PickItem,
    PickOptions,
    Produced,
    Retreat,
    SteppedBack,
    SteppedOut,
    to_signal,
)

__all__ = [
    'Event',
    'InputBox',
    'QuickPick',
    'PromptHost',
    'TerminalPromptHost',
    'MockPromptHost',
    'create_inquiry_item',
    'loop_inquiry',
    'show_box',
    'ActionRunner',
    'RealActionRunner',
    'MockActionRunner',
    'CommitField',
    'ComposerSettings',
    'SettingsStore',
    'ABANDONED',
    'ADVANCE',
    'RETREAT',
    'STEPPED_BACK',
    'Abandoned',
    'Abort',
    'Advance',
    'InputOptions',
    'InquiryContext',
    'InquiryItem',
    'JumpBy',
    'PickItem',
    'PickOptions',
    'Produced',
    'Retreat',
    'SteppedBack',
    'SteppedOut',
    'to_signal',
]
