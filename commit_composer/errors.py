"""Exceptions raised by the composer."""


class InquiryError(Exception):
    """Base class for inquiry engine errors."""


class EmptySelectionError(InquiryError):
    """A single-select picker was accepted with neither a selected nor an active item.

    Only happens when a step is built with an empty item list, so it is a
    programming error in the step definition rather than a user error.
    """


class ConfigError(Exception):
    """The composer settings file could not be loaded or validated."""
