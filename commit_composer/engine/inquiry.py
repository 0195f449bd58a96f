"""Inquiry engine - step factory and the wizard driver loop."""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..utils.aio import maybe_await
from .host import PromptHost
from .prompts import show_box
from .schema import (
    ADVANCE,
    Abort,
    Advance,
    InputOptions,
    InquiryContext,
    InquiryItem,
    JumpBy,
    PickOptions,
    Produced,
    PromptOptions,
    Retreat,
    SteppedOut,
    to_signal,
)

logger = logging.getLogger(__name__)

OptionsResolver = Callable[[PromptOptions, InquiryContext], Any]


def _merge_baseline(baseline: PromptOptions, custom: Optional[PromptOptions]) -> PromptOptions:
    """Fill every field the custom options left unset from the baseline."""
    if custom is None:
        return baseline
    if isinstance(custom, dict):
        custom = type(baseline)(**custom)
    missing = {
        name: getattr(baseline, name)
        for name in baseline.model_fields_set
        if name not in custom.model_fields_set
    }
    return custom.model_copy(update=missing)


def _seed_picker(options: PickOptions, default: Any) -> PickOptions:
    if options.active_items is not None or default is None:
        return options
    if isinstance(default, (list, tuple, set)):
        chosen = [item for item in options.items if item.value in default]
    else:
        chosen = [item for item in options.items if item.value == default]
    if not chosen:
        # Nothing matches; keep the first item highlighted
        return options
    update: Dict[str, Any] = {'active_items': chosen}
    if options.can_select_many and options.selected_items is None:
        update['selected_items'] = chosen
    return options.model_copy(update=update)


def _default_value(options: PromptOptions, outcome: Any) -> Any:
    if isinstance(options, InputOptions):
        return outcome
    if isinstance(outcome, list):
        return [item.value for item in outcome]
    return outcome.value


def create_inquiry_item(
    kind: str,
    key: str,
    host: PromptHost,
    options: Union[PromptOptions, OptionsResolver, None] = None,
    default: Any = None,
    value_format: Optional[Callable[[PromptOptions, Any], Any]] = None,
    custom_result: Optional[Callable[[InquiryContext, PromptOptions, Any], Any]] = None,
    handling: Optional[Callable[[InquiryContext], Any]] = None,
) -> InquiryItem:
    """
    Build a wizard step around a single prompt.

    On every visit the step computes a baseline configuration (title and
    step counters), lets ``options`` refine it, seeds the prompt from the
    answer record (or ``default`` on the first visit) and shows it.

    Args:
        kind: 'input' or 'quick_pick'
        key: Answer record key this step writes
        host: PromptHost that renders the prompt
        options: Static options, or a (possibly async) callable
                 ``(baseline, context) -> options`` evaluated per visit
        default: Initial value used while the record has no entry for ``key``
        value_format: Optional (possibly async) ``(options, value) -> stored value``
        custom_result: Optional (possibly async) interpreter
                       ``(context, options, outcome) -> navigation signal``;
                       replaces the default record write entirely
        handling: Replace the whole step behaviour with this coroutine

    Returns:
        InquiryItem for loop_inquiry
    """
    if handling is not None:
        return InquiryItem(key=key, handling=handling)

    options_type = InputOptions if kind == 'input' else PickOptions

    async def handle(context: InquiryContext):
        baseline = options_type(
            title=f"Enter {context.key}",
            step=context.index + 1,
            total_steps=len(context.steps),
        )
        if callable(options):
            custom = await maybe_await(options(baseline, context))
        else:
            custom = options
        resolved = _merge_baseline(baseline, custom)

        seed = context.record.get(key, default)
        if isinstance(resolved, InputOptions):
            if seed is not None:
                resolved = resolved.model_copy(update={'value': seed})
        else:
            resolved = _seed_picker(resolved, seed)

        outcome = await show_box(resolved, host)

        if custom_result is not None:
            return await maybe_await(custom_result(context, resolved, outcome))

        if isinstance(outcome, Produced):
            value = None
            if value_format is not None:
                value = await maybe_await(value_format(resolved, outcome.value))
            if value is None:
                value = _default_value(resolved, outcome.value)
            context.record[key] = value
            return ADVANCE
        return outcome

    return InquiryItem(key=key, handling=handle)


async def loop_inquiry(
    steps: List[InquiryItem],
    index: int = 0,
    seed: Optional[Dict[str, Any]] = None,
    parent: Optional[Dict[str, Any]] = None,
) -> Union[Dict[str, Any], SteppedOut, None]:
    """
    Run steps until the cursor passes the last one.

    Args:
        steps: Ordered wizard steps
        index: Starting cursor position
        seed: Record whose entries become defaults for steps not answered yet
              in this run (resume or re-entry)
        parent: Record of an enclosing wizard; marks this run as nested.
                Answers are merged into it when the run completes or the
                user backs out of the first step.

    Returns:
        The answer record when completed, ``SteppedOut`` when a nested run
        was backed out of, or None when cancelled
    """
    record: Dict[str, Any] = {}

    while index < len(steps):
        if index < 0:
            if parent is not None:
                parent.update(record)
                return SteppedOut(index)
            # Nothing to go back to at the top level
            logger.info("Stepped back past the first step, cancelling")
            return None

        item = steps[index]
        if seed is not None and item.key not in record and item.key in seed:
            record[item.key] = seed[item.key]

        result = await item.handling(
            InquiryContext(key=item.key, record=record, steps=steps, index=index)
        )
        signal = to_signal(result)

        if isinstance(signal, JumpBy):
            index += signal.delta
        elif isinstance(signal, Abort):
            logger.info(signal.reason or "Operation cancelled")
            return None
        elif isinstance(signal, Retreat):
            index -= 1
        elif isinstance(signal, Advance):
            index += 1

    if parent is not None:
        parent.update(record)
    return record
