# SPDX-License-Identifier: MIT
"""Small version value type: parse, compare and format version strings.

Versions look like ``MAJOR.MINOR[.PATCH][-SUFFIX]``. A missing patch is 0 and
a blank suffix marks a release build.

Example:
    >>> from tinyver import parse_version, compare_versions
    >>>
    >>> old = parse_version("1.0.0")
    >>> new = parse_version("1.1-beta")
    >>> new.is_newer(old)
    True
    >>> new.to_display_string()
    '1.1.0-beta'
    >>>
    >>> compare_versions("1.0.0-rc1", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ParseError,
    IntError,
    IntErrorKind,
    LengthError,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    MAX_COMPONENT,
    LEGACY_MAX_COMPONENT,
)
from .compare import compare_versions

__all__ = [
    # Errors
    "ParseError",
    "IntError",
    "IntErrorKind",
    "LengthError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "MAX_COMPONENT",
    "LEGACY_MAX_COMPONENT",
    # Version comparison
    "compare_versions",
]
