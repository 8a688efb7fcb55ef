# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings."""

from __future__ import annotations

from enum import Enum


class IntErrorKind(str, Enum):
    """Why a numeric version component could not be read."""

    EMPTY = "cannot parse integer from empty string"
    INVALID_DIGIT = "invalid digit found in string"
    OVERFLOW = "number too large to fit in target type"


class ParseError(Exception):
    """Raised when a string cannot be parsed into a Version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version!r}"
        super().__init__(self.message)


class IntError(ParseError):
    """Raised when a dot-separated component is not a valid unsigned integer.

    Attributes:
        token: The offending component text, verbatim
        position: Which component failed ("major", "minor" or "patch")
        kind: The underlying numeric failure
    """

    def __init__(self, version: str, token: str, position: str, kind: IntErrorKind):
        self.token = token
        self.position = position
        self.kind = kind
        super().__init__(
            version,
            f"Invalid {position} component {token!r} in version {version!r}: {kind.value}",
        )


class LengthError(ParseError):
    """Raised when the numeric part does not have two or three components."""

    def __init__(self, version: str, count: int):
        self.count = count
        super().__init__(
            version,
            f"Version {version!r} has {count} numeric component(s), expected 2 or 3",
        )
