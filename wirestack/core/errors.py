"""Errors raised while evaluating a pipeline script or assembling its result.

Script errors and middleware construction errors are not wrapped: they reach
the caller exactly as raised.  An unreadable script is not an error either;
the loader reports it as a ``None`` result.
"""

from __future__ import annotations


class WirestackError(Exception):
    """Base class for errors raised by wirestack itself."""


class InvalidCallableError(WirestackError, TypeError):
    """A hook or warmup registration was given something it cannot call."""


class MissingApplicationError(WirestackError, RuntimeError):
    """Assembly was attempted before the script declared an application."""

    def __init__(self, filename: str | None = None) -> None:
        self.filename = filename
        where = f" in {filename}" if filename else ""
        super().__init__(f"application object missing{where}: the script never called run()")


class BuilderStateError(WirestackError, RuntimeError):
    """A builder was reused after evaluating its script or being assembled."""
