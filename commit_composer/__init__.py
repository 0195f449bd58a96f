"""Interactive commit message composer."""

__version__ = "0.1.0"
