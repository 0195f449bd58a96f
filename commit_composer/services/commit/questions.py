"""Commit wizard questions - steps built on the inquiry engine.

Each commit field becomes one step. The top-level wizard has a single
``steps`` step: it asks which preset to use and runs the matching fields
as a nested wizard.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional

from ...engine.host import PromptHost
from ...engine.inquiry import create_inquiry_item, loop_inquiry
from ...engine.loader import CommitField, ComposerSettings, SettingsStore
from ...engine.prompts import show_box
from ...engine.schema import (
    ADVANCE,
    BACK,
    CONFIRM,
    FORWARD,
    RETREAT,
    InputOptions,
    InquiryContext,
    InquiryItem,
    JumpBy,
    PickItem,
    PickOptions,
    Produced,
    PromptOptions,
    SteppedOut,
)
from ...utils.aio import maybe_await
from .gitmoji import GitmojiCatalog
from .rules import lint_field

INPUT_FIELDS = ['header', 'subject', 'body', 'footer', 'breaking', 'issues']
# Order in which preset fields are asked, whatever order the preset lists them in
QUESTION_ORDER = ['header', 'type', 'scope', 'gitmoji', 'subject', 'body', 'footer', 'breaking', 'issues']

NO_SCOPE = ''
NEW_SCOPE = 'new'
ONCE_SCOPE = 'once'


def navigation_buttons(options: PromptOptions):
    return [BACK, CONFIRM if options.step == options.total_steps else FORWARD]


def create_input_question(field: str, settings: ComposerSettings, host: PromptHost) -> InquiryItem:
    """Text question validated against the lint rules for ``field``."""
    lint = settings.lint

    def options(baseline: InputOptions, context: InquiryContext) -> InputOptions:
        return InputOptions(
            title=field,
            placeholder=lint.questions.get(field, f"Enter {field}"),
            buttons=navigation_buttons(baseline),
            validate_input=lambda value: lint_field(field, value, lint.rules),
        )

    return create_inquiry_item('input', field, host, options=options)


def create_pick_question(
    field: str,
    settings: ComposerSettings,
    host: PromptHost,
    items: Callable[[], Any],
    value_format: Optional[Callable[[PickOptions, PickItem], Any]] = None,
    custom_result: Optional[Callable[[InquiryContext, PickOptions, Any], Any]] = None,
) -> InquiryItem:
    """Single-select question whose items are recomputed on every visit.

    Args:
        items: Callable returning the items (or an awaitable of them)
    """
    lint = settings.lint

    async def options(baseline: PickOptions, context: InquiryContext) -> PickOptions:
        choices = await maybe_await(items())
        current = context.record.get(field)
        active = [item for item in choices if item.value == current]
        return PickOptions(
            title=field,
            placeholder=lint.questions.get(field, f"Select {field}"),
            match_on_description=True,
            match_on_detail=True,
            buttons=navigation_buttons(baseline),
            items=choices,
            active_items=active or choices[:1],
        )

    return create_inquiry_item(
        'quick_pick', field, host,
        options=options,
        value_format=value_format,
        custom_result=custom_result,
    )


def type_items(settings: ComposerSettings) -> List[PickItem]:
    lint = settings.lint
    items = []
    for name, commit_type in lint.types.items():
        with_emoji = lint.emoji_in_header and commit_type.emoji
        items.append(PickItem(
            label=f"{commit_type.emoji} {name}" if with_emoji else name,
            value=f"{commit_type.emoji}{name}" if with_emoji else name,
            description=commit_type.title,
            detail=commit_type.description,
        ))
    return items


def scope_items(settings: ComposerSettings) -> List[PickItem]:
    items = [PickItem(label='None', value=NO_SCOPE, detail='No scope.', always_show=True)]
    items += [
        PickItem(label=scope, value=scope, detail='Loaded from workspace settings.')
        for scope in settings.scopes
    ]

    rule = settings.lint.rules.get('scope-enum')
    if rule and len(rule) > 2 and rule[0] == 2 and rule[1] == 'always' and isinstance(rule[2], list):
        items += [
            PickItem(label=scope, value=scope, detail='Loaded from lint rules.')
            for scope in rule[2]
            if scope not in settings.scopes
        ]

    items += [
        PickItem(label='New scope', value=NEW_SCOPE,
                 detail='Create a new scope (saved to the workspace settings).', always_show=True),
        PickItem(label='New scope (once)', value=ONCE_SCOPE,
                 detail='Use a new scope without saving it.', always_show=True),
    ]
    return items


def gitmoji_items(catalog: GitmojiCatalog) -> List[PickItem]:
    items = [PickItem(label='None', value='', detail='No gitmoji.', always_show=True)]
    items += [
        PickItem(label=gitmoji.emoji, value=gitmoji.emoji,
                 description=gitmoji.description, detail=gitmoji.code)
        for gitmoji in catalog.gitmojis()
    ]
    return items


def create_scope_question(settings: ComposerSettings, host: PromptHost,
                          store: Optional[SettingsStore] = None) -> InquiryItem:
    """Scope picker; the 'new' entries open a follow-up text prompt.

    Dismissing or backing out of the follow-up prompt repeats the picker.
    A scope created with 'new' is appended to the saved scopes.
    """

    def validate_new_scope(value: str) -> Optional[str]:
        if not (value or '').strip():
            return 'Scope cannot be empty'
        if value in settings.scopes:
            return 'Scope already exists'
        return None

    async def scope_result(context: InquiryContext, options: PickOptions, outcome):
        if not isinstance(outcome, Produced):
            return outcome

        value = outcome.value.value
        if value in (NEW_SCOPE, ONCE_SCOPE):
            typed = await show_box(InputOptions(
                title='scope',
                placeholder=settings.lint.questions.get('scope', 'Enter a scope'),
                step=options.step,
                total_steps=options.total_steps,
                validate_input=validate_new_scope,
            ), host)
            if not isinstance(typed, Produced):
                return JumpBy(0)
            if value == NEW_SCOPE:
                settings.scopes.append(typed.value)
                if store is not None:
                    store.save({'scopes': list(settings.scopes)})
            value = typed.value

        context.record[context.key] = value
        return ADVANCE

    return create_pick_question(
        'scope', settings, host,
        items=lambda: scope_items(settings),
        custom_result=scope_result,
    )


def build_questions(settings: ComposerSettings, host: PromptHost, catalog: GitmojiCatalog,
                    store: Optional[SettingsStore] = None) -> List[InquiryItem]:
    """All commit field questions in asking order."""
    questions: Dict[str, InquiryItem] = {
        field: create_input_question(field, settings, host) for field in INPUT_FIELDS
    }
    questions['type'] = create_pick_question('type', settings, host, items=lambda: type_items(settings))
    questions['scope'] = create_scope_question(settings, host, store)
    questions['gitmoji'] = create_pick_question(
        'gitmoji', settings, host,
        # The catalogue may refresh over the network
        items=lambda: asyncio.to_thread(gitmoji_items, catalog),
    )
    return [questions[field] for field in QUESTION_ORDER]


def create_steps_question(settings: ComposerSettings, host: PromptHost,
                          questions: List[InquiryItem]) -> InquiryItem:
    """Top-level step: choose a preset, then run its questions as a nested wizard."""

    async def handling(context: InquiryContext):
        remembered = settings.remember_step
        items = [
            PickItem(
                label=name,
                value=name,
                detail=','.join(field.value for field in fields),
                description='Used last time' if name == remembered else None,
            )
            for name, fields in settings.steps.items()
        ]
        items.sort(key=lambda item: item.value != remembered)

        outcome = await show_box(PickOptions(
            title='Select steps',
            placeholder='Select the steps to go through',
            items=items,
            active_items=[item for item in items if item.value == remembered] or items[:1],
        ), host)
        if not isinstance(outcome, Produced):
            return outcome

        preset = outcome.value.value
        context.record[context.key] = preset
        fields = [field.value for field in settings.steps[preset]]
        sub_steps = [item for item in questions if item.key in fields]

        result = await loop_inquiry(sub_steps, seed=context.record, parent=context.record)
        if isinstance(result, SteppedOut):
            # Back out of the first question: pick a preset again
            return JumpBy(0)
        if result is None:
            context.record.clear()
            return RETREAT

        # Drop answers left over from presets visited earlier
        for key in list(context.record):
            if key != context.key and key not in fields:
                del context.record[key]
        return ADVANCE

    return create_inquiry_item('quick_pick', CommitField.STEPS.value, host, handling=handling)


def build_commit_wizard(settings: ComposerSettings, host: PromptHost,
                        catalog: Optional[GitmojiCatalog] = None,
                        store: Optional[SettingsStore] = None) -> List[InquiryItem]:
    """Top-level step list for the commit wizard."""
    if catalog is None:
        catalog = GitmojiCatalog(update=settings.update_gitmoji)
    questions = build_questions(settings, host, catalog, store)
    return [create_steps_question(settings, host, questions)]
