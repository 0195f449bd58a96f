"""Pydantic models and tagged values shared by the inquiry engine."""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class QuickInputButton:
    """A navigation control shown in the prompt chrome."""

    id: str
    tooltip: str


BACK = QuickInputButton('back', 'Back')
FORWARD = QuickInputButton('forward', 'Next')
CANCEL = QuickInputButton('cancel', 'Cancel')
CONFIRM = QuickInputButton('confirm', 'Confirm')


class PickItem(BaseModel):
    """One entry of a picker list."""

    model_config = ConfigDict(extra="allow")

    label: str = Field(..., description="Text shown for the item")
    value: Any = Field(None, description="Value recorded when the item is picked")
    description: Optional[str] = Field(None, description="Secondary text on the same line")
    detail: Optional[str] = Field(None, description="Text on a separate line")
    always_show: bool = Field(False, description="Keep visible while filtering")
    disabled: bool = Field(False, description="Item can never be active or selected")


class BoxOptions(BaseModel):
    """
    Prompt chrome common to text entry and pickers.

    Fields left unset are filled by the step factory's baseline
    (title and step counters) and then by the prompt session defaults.
    """

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    title: Optional[str] = Field(None, description="Prompt title")
    step: Optional[int] = Field(None, description="Current step number (1-based)")
    total_steps: Optional[int] = Field(None, description="Number of steps in the wizard")
    enabled: bool = Field(True, description="Whether the prompt accepts input")
    busy: bool = Field(False, description="Show a progress indicator")
    ignore_focus_out: bool = Field(True, description="Keep open when focus moves away")
    value: Optional[str] = Field(None, description="Initial text value")
    placeholder: Optional[str] = Field(None, description="Hint shown when empty")
    buttons: Optional[List[QuickInputButton]] = Field(None, description="Navigation controls")


class InputOptions(BoxOptions):
    """Configuration of a text entry prompt."""

    kind: Literal['input'] = 'input'
    password: bool = Field(False, description="Mask the typed text")
    prompt: Optional[str] = Field(None, description="Help text below the input")
    validate_input: Optional[Callable[[str], Any]] = Field(
        None, description="Returns a message (or awaitable of one) when the text is invalid"
    )


class PickOptions(BoxOptions):
    """Configuration of a single or multi select picker."""

    kind: Literal['quick_pick'] = 'quick_pick'
    items: List[PickItem] = Field(default_factory=list, description="Items to choose from")
    can_select_many: bool = Field(False, description="Multi-select picker")
    match_on_description: bool = False
    match_on_detail: bool = False
    keep_scroll_position: bool = False
    active_items: Optional[List[PickItem]] = Field(None, description="Highlighted items")
    selected_items: Optional[List[PickItem]] = Field(None, description="Pre-selected items")


PromptOptions = Union[InputOptions, PickOptions]


# Prompt outcomes: exactly one per prompt session.

@dataclass(frozen=True)
class Produced:
    """The user accepted a value (text, item or list of items)."""

    value: Any


@dataclass(frozen=True)
class SteppedBack:
    """The user pressed the back control."""


@dataclass(frozen=True)
class Abandoned:
    """The prompt was dismissed without an answer."""


PromptOutcome = Union[Produced, SteppedBack, Abandoned]

STEPPED_BACK = SteppedBack()
ABANDONED = Abandoned()


# Navigation signals returned by step handlers.

@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retreat:
    pass


@dataclass(frozen=True)
class JumpBy:
    """Move the cursor by a signed delta; 0 repeats the current step."""

    delta: int


@dataclass(frozen=True)
class Abort:
    """Terminate the whole wizard unsuccessfully."""

    reason: Optional[str] = None


NavigationSignal = Union[Advance, Retreat, JumpBy, Abort]

ADVANCE = Advance()
RETREAT = Retreat()


@dataclass(frozen=True)
class SteppedOut:
    """Returned by a nested wizard whose user backed out of its first step."""

    index: int = -1


def to_signal(result: Any) -> NavigationSignal:
    """Normalize whatever a step handler returned into a navigation signal.

    Args:
        result: Handler return value

    Returns:
        Tagged navigation signal

    Examples:
        >>> to_signal(True)
        Advance()
        >>> to_signal(-2)
        JumpBy(delta=-2)
    """
    if isinstance(result, (Advance, Retreat, JumpBy, Abort)):
        return result
    if isinstance(result, Abandoned) or result is None:
        return Abort()
    if isinstance(result, BaseException):
        return Abort(str(result) or type(result).__name__)
    if isinstance(result, SteppedBack):
        return RETREAT
    # bool is an int subclass but means advance/retreat
    if isinstance(result, int) and not isinstance(result, bool):
        return JumpBy(result)
    return ADVANCE if result else RETREAT


@dataclass
class InquiryContext:
    """Bundle handed to a step handler on every visit."""

    key: str
    record: Dict[str, Any]
    steps: List['InquiryItem']
    index: int


Handling = Callable[[InquiryContext], Awaitable[Any]]


@dataclass(frozen=True)
class InquiryItem:
    """One wizard step: a key and the coroutine that handles it."""

    key: str
    handling: Handling
