"""Prompt session - one modal prompt resolved to exactly one outcome."""

import asyncio
import inspect
from typing import Any, Awaitable, Callable, List, Optional

from ..errors import EmptySelectionError, InquiryError
from .boxes import InputBox, QuickInput, QuickPick
from .host import PromptHost
from .schema import (
    ABANDONED,
    BACK,
    CANCEL,
    CONFIRM,
    FORWARD,
    STEPPED_BACK,
    InputOptions,
    PickItem,
    PickOptions,
    Produced,
    PromptOptions,
    PromptOutcome,
)


def default_buttons(step: Optional[int], total_steps: Optional[int]):
    """Back on every step but the first, then confirm on the last step or next otherwise."""
    buttons = [BACK] if (step or 0) > 1 else []
    buttons.append(CONFIRM if step == total_steps else FORWARD)
    return buttons


async def show_box(options: PromptOptions, host: PromptHost) -> PromptOutcome:
    """
    Show one prompt and wait for its outcome.

    The session resolves exactly once: with ``Produced`` when a value is
    accepted, ``SteppedBack`` when the back control is used, or
    ``Abandoned`` when the prompt is dismissed or cancelled. The box is
    disposed on every path.

    Args:
        options: InputOptions or PickOptions describing the prompt
        host: PromptHost that renders the box

    Returns:
        The prompt outcome

    Raises:
        EmptySelectionError: If a single-select picker is accepted with nothing to pick
    """
    if options.kind == 'input':
        box = host.create_input_box()
    elif options.kind == 'quick_pick':
        box = host.create_quick_pick()
    else:
        raise InquiryError(f"Unknown prompt kind: {options.kind}")

    outcome: asyncio.Future = asyncio.get_running_loop().create_future()

    def resolve(value) -> None:
        if not outcome.done():
            outcome.set_result(value)
        box.dispose()

    def fail(error: BaseException) -> None:
        if not outcome.done():
            outcome.set_exception(error)
        box.dispose()

    _apply_chrome(box, options)

    # Returns True once the session resolved with a value
    submit: Callable[[], Awaitable[bool]]
    if options.kind == 'input':
        submit = _wire_input(box, options, resolve)
    else:
        submit = _wire_picker(box, options, resolve)

    async def on_accept():
        try:
            await submit()
        except Exception as e:
            fail(e)

    async def on_button(button):
        try:
            if button == BACK:
                resolve(STEPPED_BACK)
            elif button == CANCEL:
                resolve(ABANDONED)
            elif button in (FORWARD, CONFIRM):
                await submit()
        except Exception as e:
            fail(e)

    def on_hide():
        resolve(ABANDONED)

    box.on_did_accept(on_accept)
    box.on_did_trigger_button(on_button)
    box.on_did_hide(on_hide)

    try:
        driver = box.show()
        done, _ = await asyncio.wait({outcome, driver}, return_when=asyncio.FIRST_COMPLETED)
        if outcome in done:
            return outcome.result()
        # Host stopped on its own; surface its error if it had one
        driver.result()
        raise InquiryError(f"Prompt host stopped before {box.title!r} resolved")
    finally:
        box.dispose()


def _apply_chrome(box: QuickInput, options: PromptOptions) -> None:
    box.title = options.title or 'Title'
    box.enabled = options.enabled
    box.busy = options.busy
    box.step = options.step
    box.total_steps = options.total_steps
    box.ignore_focus_out = options.ignore_focus_out
    box.value = options.value or ''
    box.placeholder = options.placeholder
    if options.buttons is not None:
        box.buttons = list(options.buttons)
    elif box.step is not None and box.total_steps is not None:
        box.buttons = default_buttons(box.step, box.total_steps)


def _wire_input(box: InputBox, options: InputOptions, resolve) -> Callable[[], Awaitable[bool]]:
    box.password = options.password
    box.prompt = options.prompt

    async def validate() -> Optional[str]:
        if options.validate_input is None:
            return None
        message = options.validate_input(box.value)
        if inspect.isawaitable(message):
            message = await message
        return message or None

    async def submit() -> bool:
        box.validation_message = await validate()
        if box.validation_message is None:
            resolve(Produced(box.value))
            return True
        return False

    async def on_change(_value: str):
        box.validation_message = await validate()

    box.on_did_change_value(on_change)
    return submit


def _wire_picker(box: QuickPick, options: PickOptions, resolve) -> Callable[[], Awaitable[bool]]:
    box.items = list(options.items)
    box.can_select_many = options.can_select_many
    box.match_on_description = options.match_on_description
    box.match_on_detail = options.match_on_detail
    box.keep_scroll_position = options.keep_scroll_position
    if options.active_items is not None:
        box.active_items = list(options.active_items)
    else:
        box.active_items = box.items[:1]
    box.selected_items = list(options.selected_items or [])

    def enabled(items: List[PickItem]) -> List[PickItem]:
        return [item for item in items if not item.disabled]

    def on_change_active(items: List[PickItem]):
        box.active_items = enabled(items)

    def on_change_selection(items: List[PickItem]):
        box.selected_items = enabled(items)

    async def submit() -> bool:
        if box.can_select_many:
            resolve(Produced(list(box.selected_items)))
            return True
        picked: Any = (box.selected_items or box.active_items or [None])[0]
        if picked is None:
            raise EmptySelectionError(f"Nothing selected in picker {box.title!r}")
        resolve(Produced(picked))
        return True

    box.on_did_change_active(on_change_active)
    box.on_did_change_selection(on_change_selection)
    return submit
