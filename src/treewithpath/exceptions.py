# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree exceptions."""

from __future__ import annotations


class TreeError(Exception):
    """Base exception for tree errors."""

    pass


class InvalidPathError(TreeError):
    """Raised when a path does not start with the root separator."""

    pass


class NodeNotFoundError(TreeError, KeyError):
    """Raised when a path segment cannot be resolved.

    Attributes:
        segment: The name that had no matching node.
        path: The full path being resolved.
    """

    def __init__(self, segment: str, path: str | None = None) -> None:
        self.segment = segment
        self.path = path
        message = f"{segment}: node does not exist"
        if path is not None:
            message = f"{message} (resolving {path!r})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class NodeAlreadyExistsError(TreeError):
    """Raised when adding a node at a path that already resolves."""

    pass


class DetachedNodeError(TreeError):
    """Raised when a node that no longer belongs to a tree is used."""

    pass


class RootRemovalError(TreeError):
    """Raised on any attempt to remove the root node."""

    pass
