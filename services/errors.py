"""
services/errors.py
------------------
Error taxonomy shared by the parsers, the API client and the handlers.

A single exception type carries an ErrorKind so the reporter can decide
what the user sees without inspecting exception classes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    USAGE = "usage"          # malformed command text
    NOT_FOUND = "not_found"  # provider has no such player
    UPSTREAM = "upstream"    # anything wrong on the provider side


class BotError(Exception):
    """
    A failure raised while handling one command.

    Attributes:
        kind: Which ErrorKind this is.
        message: Text shown to the user for user-facing kinds,
            internal detail otherwise.
        status_code: HTTP status from the provider, when there was one.
    """

    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        self.kind = kind
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_user_facing(self) -> bool:
        return self.kind in (ErrorKind.USAGE, ErrorKind.NOT_FOUND)

    @classmethod
    def usage(cls, message: str) -> "BotError":
        return cls(ErrorKind.USAGE, message)

    @classmethod
    def not_found(cls, tag: str) -> "BotError":
        return cls(ErrorKind.NOT_FOUND, f"Couldn't find account by the tag {tag}", status_code=404)

    @classmethod
    def upstream(cls, reason: str, status_code: Optional[int] = None) -> "BotError":
        return cls(ErrorKind.UPSTREAM, reason, status_code=status_code)

    def __repr__(self) -> str:
        return f"BotError({self.kind.name}, {self.message!r}, status_code={self.status_code})"
