# SPDX-License-Identifier: MIT
"""Version value type for MAJOR.MINOR[.PATCH][-SUFFIX] strings.

The numeric part holds two or three dot-separated unsigned integers; a
missing patch defaults to 0. Everything after the first ``-`` is kept as a
free-text suffix. A blank suffix marks a release build, anything else a
pre-release of the same numeric triple.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import IntError, IntErrorKind, LengthError

logger = logging.getLogger(__name__)

# Upper bound for each numeric component (unsigned 32-bit)
MAX_COMPONENT = 2**32 - 1

# Single-byte bound used by older version strings
LEGACY_MAX_COMPONENT = 255

_POSITIONS = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number, 0 when the input omitted it
        suffix: Verbatim text after the first "-", or "" for a release build

    Build instances with parse_version. The constructor is public and checks
    types and signs, but does not apply the max_component bound.
    """

    major: int
    minor: int
    patch: int = 0
    suffix: str = ""

    def __post_init__(self) -> None:
        for name in _POSITIONS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if not isinstance(self.suffix, str):
            raise TypeError(f"suffix must be a str, got {type(self.suffix).__name__}")

    @classmethod
    def parse(cls, version_string: str, *, max_component: int = MAX_COMPONENT) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string, max_component=max_component)

    @property
    def is_release(self) -> bool:
        """Return True if the suffix is blank."""
        return not self.suffix.strip()

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a non-blank suffix."""
        return not self.is_release

    @property
    def numeric_triple(self) -> tuple[int, int, int]:
        """Return (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    @property
    def base_version(self) -> str:
        """Return the version without its suffix."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def is_newer(self, other: Version) -> bool:
        """Return True if this version is strictly more recent than ``other``.

        Numeric triples are compared first. When they are equal, a release
        build is newer than a pre-release, and every other combination
        returns False.

        This is not a total order: ``a.is_newer(b) is False`` does not imply
        ``b.is_newer(a)``. Use :func:`tinyver.compare_versions` for a
        three-way result.
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        return _compare(self, other) > 0

    def to_display_string(self) -> str:
        """Return the canonical string form.

        The suffix is appended verbatim unless it is blank.
        """
        if self.is_release:
            return self.base_version
        return f"{self.base_version}-{self.suffix}"

    def __str__(self) -> str:
        return self.to_display_string()


def _compare(v1: Version, v2: Version) -> int:
    if v1.numeric_triple != v2.numeric_triple:
        return -1 if v1.numeric_triple < v2.numeric_triple else 1
    if v1.is_release == v2.is_release:
        return 0
    return 1 if v1.is_release else -1


def _parse_component(version_string: str, token: str, position: str, max_component: int) -> int:
    if not token:
        kind = IntErrorKind.EMPTY
    elif not (token.isascii() and token.isdigit()):
        kind = IntErrorKind.INVALID_DIGIT
    else:
        digits = token.lstrip("0") or "0"
        if len(digits) <= len(str(max_component)):
            value = int(digits)
            if value <= max_component:
                return value
        kind = IntErrorKind.OVERFLOW

    logger.debug("Rejecting %s component %r of %r: %s", position, token, version_string, kind.name)
    raise IntError(version_string, token, position, kind)


def parse_version(version_string: str, *, max_component: int = MAX_COMPONENT) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form MAJOR.MINOR[.PATCH][-SUFFIX]
        max_component: Largest value accepted for each numeric component.
            Pass LEGACY_MAX_COMPONENT to keep the single-byte range.

    Returns:
        A Version object with parsed components

    Raises:
        TypeError: If version_string is not a string
        LengthError: If the numeric part does not have 2 or 3 components
        IntError: If a numeric component is not an unsigned integer within
            max_component

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, suffix='')

        >>> parse_version("1.0-beta")
        Version(major=1, minor=0, patch=0, suffix='beta')

        >>> parse_version("2.0.0-rc-1")
        Version(major=2, minor=0, patch=0, suffix='rc-1')
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    numeric, _, suffix = version_string.partition("-")
    tokens = numeric.split(".")
    if len(tokens) not in (2, 3):
        logger.debug("Rejecting %r: %d numeric components", version_string, len(tokens))
        raise LengthError(version_string, len(tokens))

    values = [
        _parse_component(version_string, token, position, max_component)
        for token, position in zip(tokens, _POSITIONS)
    ]
    return Version(*values, suffix=suffix)


def is_valid_version(version_string: str, *, max_component: int = MAX_COMPONENT) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0.0.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string, max_component=max_component)
    except (IntError, LengthError):
        return False
    return True
