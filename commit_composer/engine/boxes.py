"""Prompt boxes - host independent state objects with reactive events.

A host creates the boxes, renders them and fires their events in response
to the user. The prompt session in ``prompts.py`` subscribes to those
events and decides when a box resolves.
"""

import inspect
from typing import Any, Callable, List, Optional

from .schema import PickItem, QuickInputButton


class Event:
    """Subscribable event. Listeners may be plain functions or coroutines."""

    def __init__(self):
        self._listeners: List[Callable[..., Any]] = []

    def __call__(self, listener: Callable[..., Any]) -> Callable[[], None]:
        """Subscribe a listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def fire(self, *args) -> None:
        """Call every listener in subscription order, awaiting coroutines."""
        for listener in list(self._listeners):
            result = listener(*args)
            if inspect.isawaitable(result):
                await result

    def clear(self) -> None:
        self._listeners.clear()


class QuickInput:
    """Chrome and lifecycle shared by text boxes and pickers."""

    def __init__(self, host):
        self._host = host
        self.title: Optional[str] = None
        self.step: Optional[int] = None
        self.total_steps: Optional[int] = None
        self.enabled = True
        self.busy = False
        self.ignore_focus_out = True
        self.value = ''
        self.placeholder: Optional[str] = None
        self.buttons: List[QuickInputButton] = []

        self.visible = False
        self.disposed = False

        self.on_did_accept = Event()
        self.on_did_trigger_button = Event()
        self.on_did_hide = Event()

    def show(self):
        """Hand the box to its host for rendering.

        Returns:
            The task driving the box
        """
        if self.disposed:
            raise RuntimeError("Cannot show a disposed box")
        self.visible = True
        return self._host.present(self)

    def hide(self) -> None:
        self.visible = False

    def dispose(self) -> None:
        """Release the box. Safe to call more than once."""
        if self.disposed:
            return
        self.disposed = True
        self.visible = False
        for event in self._events():
            event.clear()

    def _events(self) -> List[Event]:
        return [self.on_did_accept, self.on_did_trigger_button, self.on_did_hide]


class InputBox(QuickInput):
    """Single line text entry."""

    def __init__(self, host):
        super().__init__(host)
        self.password = False
        self.prompt: Optional[str] = None
        self.validation_message: Optional[str] = None
        self.on_did_change_value = Event()

    def _events(self) -> List[Event]:
        return super()._events() + [self.on_did_change_value]


class QuickPick(QuickInput):
    """Single or multi select list."""

    def __init__(self, host):
        super().__init__(host)
        self.items: List[PickItem] = []
        self.can_select_many = False
        self.match_on_description = False
        self.match_on_detail = False
        self.keep_scroll_position = False
        self.active_items: List[PickItem] = []
        self.selected_items: List[PickItem] = []
        self.on_did_change_active = Event()
        self.on_did_change_selection = Event()

    def _events(self) -> List[Event]:
        return super()._events() + [self.on_did_change_active, self.on_did_change_selection]
