# SPDX-License-Identifier: MIT
"""Three-way version comparison.

Ordering is by (major, minor, patch), then a release build sorts above a
pre-release of the same numeric triple. Suffix text is otherwise ignored:
"1.0.0-alpha" and "1.0.0-beta" compare equal.
"""

from __future__ import annotations

from typing import Union

from .version import Version, _compare, parse_version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid
        TypeError: If either argument is neither a string nor a Version

    Examples:
        >>> compare_versions("1.0.0", "1.1")
        -1
        >>> compare_versions("1.0.0", "1.0.0-beta")
        1
        >>> compare_versions("1.0.0-alpha", "1.0-beta")
        0
    """
    for version in (version1, version2):
        if not isinstance(version, (str, Version)):
            raise TypeError(f"Cannot compare {type(version).__name__} as a version")

    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return _compare(v1, v2)
