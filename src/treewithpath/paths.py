# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path utilities.

Paths look like filesystem paths: ``/`` is the root, ``/a/b`` is node ``b``
under node ``a`` under the root. Parsing maps the leading empty segment to
the literal root name so that resolution can start from the root node
itself.

Example:
    >>> parse_path('/a/b/')
    ['root', 'a', 'b']
    >>> join_path('/a', 'b')
    '/a/b'
"""

from __future__ import annotations

from .exceptions import InvalidPathError

ROOT_NAME = 'root'
SEPARATOR = '/'


def parse_path(path: str) -> list[str]:
    """Split a path into the segment names used for resolution.

    Args:
        path: Path string, must start with ``/``.

    Returns:
        List of segments, always starting with ``'root'``. A single
        trailing empty segment (from a trailing ``/``) is dropped.

    Raises:
        InvalidPathError: If the path does not start with ``/``.
    """
    if not path.startswith(SEPARATOR):
        raise InvalidPathError(f"Wrong path: {path!r}")

    segments = path.split(SEPARATOR)
    segments[0] = ROOT_NAME
    if segments[-1] == '':
        segments.pop()
    return segments


def join_path(first: str, second: str) -> str:
    """Join two paths with exactly one separator at the boundary.

    Only the boundary between the two operands is touched; anything else
    (doubled separators inside either string, a trailing ``/``) is kept.

    Example:
        >>> join_path('/node1', 'node2')
        '/node1/node2'
        >>> join_path('/node1/', '/node2/')
        '/node1/node2/'
    """
    first_sep = first.endswith(SEPARATOR)
    second_sep = second.startswith(SEPARATOR)
    if first_sep and second_sep:
        return first + second[1:]
    if first_sep or second_sep:
        return first + second
    return f"{first}{SEPARATOR}{second}"
