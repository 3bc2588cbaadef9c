"""Exceptions raised inside the library.

Public operations are total and never raise these; they are caught at the
adapter/error-decoder boundary and turned into values.
"""

from __future__ import annotations


class RailsHttpError(Exception):
    """Base class for rails-http errors."""


class DecodeError(RailsHttpError, ValueError):
    """A body did not match the expected shape."""

    def __init__(self, message: str, *, path: tuple[str, ...] = ()) -> None:
        self.message = message
        self.path = path
        where = ".".join(path)
        super().__init__(f"{message} (at {where})" if where else message)
