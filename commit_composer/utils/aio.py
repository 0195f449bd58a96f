"""Helpers for callbacks that may or may not be coroutines."""

import inspect


async def maybe_await(value):
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value
