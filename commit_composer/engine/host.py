"""PromptHost interface - all user interaction goes here."""

import asyncio
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .boxes import InputBox, QuickInput, QuickPick
from .schema import BACK, CANCEL, CONFIRM, FORWARD, PickItem

# Scripted actions understood by MockPromptHost
PRESS_BACK = '<back>'
PRESS_CONFIRM = '<confirm>'
PRESS_CANCEL = '<cancel>'
DISMISS = '<dismiss>'


def read_line(prompt: str) -> str:
    """Like input(), but the prompt goes to stderr."""
    sys.stderr.write(prompt)
    sys.stderr.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def write_line(message: str) -> None:
    print(message, file=sys.stderr)


class PromptHost(ABC):
    """Host UI layer: creates boxes and drives them until they are disposed."""

    def create_input_box(self) -> InputBox:
        return InputBox(self)

    def create_quick_pick(self) -> QuickPick:
        return QuickPick(self)

    def present(self, box: QuickInput) -> 'asyncio.Task':
        """Start driving a box that was just shown."""
        return asyncio.get_running_loop().create_task(self.drive(box))

    @abstractmethod
    async def drive(self, box: QuickInput) -> None:
        """Render the box and fire its events until it is disposed or hidden."""
        pass

    @abstractmethod
    def display(self, message: str) -> None:
        """Display a message to the user.

        Args:
            message: Text to display (may contain newlines)
        """
        pass

    async def dismiss(self, box: QuickInput) -> None:
        box.hide()
        await box.on_did_hide.fire()


class TerminalPromptHost(PromptHost):
    """Real implementation - reads stdin, writes the dialogue to stderr.

    stdout is left to the caller, so the composed message can be redirected.

    Typed commands:
        ``<``  go back (when the box offers a back control)
        ``!``  cancel the wizard
        empty line accepts the current value or highlighted item
    Ctrl-D (end of input) dismisses the prompt.
    """

    BACK_COMMAND = '<'
    CANCEL_COMMAND = '!'

    def __init__(self, input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], Any]] = None):
        self.input_fn = input_fn or read_line
        self.output_fn = output_fn or write_line

    def display(self, message: str) -> None:
        self.output_fn(message)

    async def drive(self, box: QuickInput) -> None:
        self._render(box)
        while not box.disposed:
            try:
                line = await asyncio.to_thread(self.input_fn, self._prompt_line(box))
            except EOFError:
                await self.dismiss(box)
                return
            line = line.strip()

            if line == self.BACK_COMMAND and BACK in box.buttons:
                await box.on_did_trigger_button.fire(BACK)
                continue
            if line == self.CANCEL_COMMAND:
                await box.on_did_trigger_button.fire(CANCEL)
                continue

            if isinstance(box, InputBox):
                if line:
                    box.value = line
                    await box.on_did_change_value.fire(line)
                await box.on_did_accept.fire()
                if not box.disposed and box.validation_message:
                    self.display(f"Error: {box.validation_message}")
            else:
                if line:
                    picks = self._parse_picks(box, line)
                    if picks is None:
                        self.display(f"Error: Invalid selection: {line}")
                        continue
                    if box.can_select_many:
                        await box.on_did_change_selection.fire(picks)
                    else:
                        await box.on_did_change_active.fire(picks)
                        await box.on_did_change_selection.fire(picks)
                await box.on_did_accept.fire()

    def _render(self, box: QuickInput) -> None:
        counter = f"[{box.step}/{box.total_steps}] " if box.step and box.total_steps else ''
        self.display(f"{counter}{box.title}")
        if isinstance(box, InputBox):
            if box.prompt:
                self.display(box.prompt)
            return

        self.display("")  # Blank line before options
        active = box.selected_items if box.can_select_many else box.active_items
        for i, item in enumerate(box.items, 1):
            marker = '*' if item in active else ' '
            line = f" {marker}{i}. {item.label}"
            if item.description:
                line += f" - {item.description}"
            if item.disabled:
                line += " (unavailable)"
            self.display(line)
            if item.detail:
                self.display(f"      {item.detail}")
        self.display("")  # Blank line after options

    def _prompt_line(self, box: QuickInput) -> str:
        hint = box.placeholder or box.title or ''
        if isinstance(box, InputBox):
            default = '*' * len(box.value) if box.password else box.value
            return f"{hint} [{default}]: " if default else f"{hint}: "
        if box.can_select_many:
            return f"{hint} (numbers separated by commas): "
        return f"{hint}: "

    def _parse_picks(self, box: QuickPick, line: str) -> Optional[List[PickItem]]:
        picks = []
        for part in line.split(','):
            try:
                number = int(part.strip())
            except ValueError:
                return None
            if not 1 <= number <= len(box.items):
                return None
            item = box.items[number - 1]
            if item.disabled:
                return None
            picks.append(item)
        if not box.can_select_many and len(picks) != 1:
            return None
        return picks


class MockPromptHost(PromptHost):
    """Mock for testing - plays scripted answers and records calls.

    Each entry of ``input_queue`` answers one accept attempt:
        - ``PRESS_BACK`` / ``PRESS_CONFIRM`` / ``PRESS_CANCEL`` trigger the
          matching button
        - ``DISMISS`` hides the box
        - for text boxes, a string is typed and accepted ('' accepts the
          current value)
        - for pickers, an item value is picked (a list of values for
          multi-select; '' or None accepts the highlighted item)
    An exhausted queue dismisses the box.
    """

    def __init__(self):
        self.calls = []
        self.input_queue = []

    def display(self, message: str) -> None:
        """Capture display call for test verification."""
        self.calls.append(('display', message))

    async def drive(self, box: QuickInput) -> None:
        if isinstance(box, InputBox):
            self.calls.append(('input', box.title, box.value))
        else:
            self.calls.append(('quick_pick', box.title, [item.value for item in box.active_items]))

        while not box.disposed:
            if not self.input_queue:
                await self.dismiss(box)
                return
            answer = self.input_queue.pop(0)

            if answer == DISMISS:
                await self.dismiss(box)
                return
            if answer == PRESS_BACK:
                await box.on_did_trigger_button.fire(BACK)
                continue
            if answer == PRESS_CANCEL:
                await box.on_did_trigger_button.fire(CANCEL)
                continue
            if answer == PRESS_CONFIRM:
                button = CONFIRM if CONFIRM in box.buttons else FORWARD
                await box.on_did_trigger_button.fire(button)
                self._record_rejection(box)
                continue

            if isinstance(box, InputBox):
                if answer:
                    box.value = answer
                    await box.on_did_change_value.fire(answer)
                await box.on_did_accept.fire()
                self._record_rejection(box)
            else:
                if answer not in ('', None):
                    picks = self._find_items(box, answer)
                    if box.can_select_many:
                        await box.on_did_change_selection.fire(picks)
                    else:
                        await box.on_did_change_active.fire(picks)
                        await box.on_did_change_selection.fire(picks)
                await box.on_did_accept.fire()

    def _record_rejection(self, box: QuickInput) -> None:
        if not box.disposed and isinstance(box, InputBox) and box.validation_message:
            self.calls.append(('validation', box.title, box.validation_message))

    def _find_items(self, box: QuickPick, answer: Any) -> List[PickItem]:
        values = answer if isinstance(answer, list) else [answer]
        picks = []
        for value in values:
            matches = [item for item in box.items if item.value == value]
            if not matches:
                raise ValueError(f"No item with value {value!r} in picker {box.title!r}")
            picks.append(matches[0])
        return picks
