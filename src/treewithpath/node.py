# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node class."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .exceptions import (
    DetachedNodeError,
    InvalidPathError,
    NodeAlreadyExistsError,
    RootRemovalError,
)
from .paths import SEPARATOR, join_path
from .serialization import node_to_json

if TYPE_CHECKING:
    from .serialization import NodeJson
    from .tree import Tree

logger = logging.getLogger(__name__)


class Node:
    """A vertex of a Tree.

    Each node has:
    - name: Identifier, unique among its siblings
    - data: Opaque payload supplied by the caller
    - children: Ordered child nodes (read-only snapshot)
    - parent: The node whose children include this one (None for root)
    - tree: The owning Tree, or None once the node has been removed

    Nodes are created by Tree() (the root), Tree.add() and add_child().
    Do not instantiate Node directly.

    Example:
        >>> tree = Tree({'text': 'Hello'})
        >>> node = tree.root.add_child('node1', {'text': 'hoI!'})
        >>> node.path
        '/node1'
        >>> node.parent is tree.root
        True
    """

    __slots__ = ('name', 'data', '_children', '_parent', '_tree')

    def __init__(
        self,
        name: str,
        data: Any = None,
        tree: Tree | None = None,
        parent: Node | None = None,
    ) -> None:
        self.name = name
        self.data = data
        self._children: list[Node] = []
        self._parent = parent
        self._tree = tree

    def __repr__(self) -> str:
        if self._tree is None:
            return f"Node({self.name!r}, detached)"
        return f"Node({self.name!r}, children={len(self._children)})"

    # ==================== Membership ====================

    @property
    def tree(self) -> Tree | None:
        """The tree this node belongs to, or None if detached."""
        return self._tree

    @property
    def is_detached(self) -> bool:
        """True once the node has been removed from its tree."""
        return self._tree is None

    @property
    def is_root(self) -> bool:
        """True if this node is the root of its tree."""
        return self._tree is not None and self._tree.root is self

    def _require_tree(self) -> Tree:
        if self._tree is None:
            raise DetachedNodeError(
                f"Node {self.name!r} does not belong to any tree"
            )
        return self._tree

    # ==================== Navigation ====================

    @property
    def children(self) -> tuple[Node, ...]:
        """Direct children in insertion order."""
        return tuple(self._children)

    @property
    def parent(self) -> Node | None:
        """The parent node, or None for the root.

        Raises:
            DetachedNodeError: If the node has been removed.
        """
        self._require_tree()
        return self._parent

    @property
    def path(self) -> str:
        """Absolute path of this node, ``/`` for the root.

        Raises:
            DetachedNodeError: If the node has been removed.
        """
        self._require_tree()
        names = []
        node = self
        while node._parent is not None:
            names.append(node.name)
            node = node._parent
        return SEPARATOR + SEPARATOR.join(reversed(names))

    @property
    def depth(self) -> int:
        """Number of edges between this node and the root (root=0)."""
        self._require_tree()
        depth = 0
        node = self._parent
        while node is not None:
            depth += 1
            node = node._parent
        return depth

    # ==================== Mutation ====================

    def add_child(self, name: str, data: Any = None) -> Node:
        """Append a new child node and return it.

        Args:
            name: Name of the new node. Must not contain ``/``.
            data: Payload of the new node.

        Returns:
            The created Node.

        Raises:
            DetachedNodeError: If this node has been removed.
            InvalidPathError: If the name contains the path separator.
            NodeAlreadyExistsError: If the resulting path already exists.
        """
        tree = self._require_tree()
        if SEPARATOR in name:
            raise InvalidPathError(
                f"Node name {name!r} must not contain {SEPARATOR!r}"
            )

        path = join_path(self.path, name)
        if tree.has(path):
            raise NodeAlreadyExistsError(f"Node {path!r} already exists")

        node = Node(name, data, tree=tree, parent=self)
        self._children.append(node)
        logger.debug("Added node %s", path)
        return node

    def remove(self) -> Node:
        """Remove this node and its whole subtree from the tree.

        The node keeps its name and data but loses its children, its
        parent and its tree. A removed node cannot be added back.

        Returns:
            This node, now detached.

        Raises:
            DetachedNodeError: If the node was already removed.
            RootRemovalError: If this node is the root.
        """
        self._require_tree()
        parent = self._parent
        if parent is None:
            raise RootRemovalError("Cannot remove root node")

        path = self.path
        # match by identity, not by name
        for index, child in enumerate(parent._children):
            if child is self:
                del parent._children[index]
                break

        self._detach()
        logger.debug("Removed node %s", path)
        return self

    def _detach(self) -> None:
        pending = [self]
        while pending:
            node = pending.pop()
            pending.extend(node._children)
            node._children = []
            node._parent = None
            node._tree = None

    # ==================== Traversal ====================

    def traverse(self, callback: Callable[[Node], Any]) -> None:
        """Call callback on this node and every descendant, pre-order.

        Children are visited in insertion order. An exception raised by
        callback propagates and stops the traversal.
        """
        pending = [self]
        while pending:
            node = pending.pop()
            callback(node)
            pending.extend(reversed(node._children))

    def walk(self) -> Iterator[tuple[str, Node]]:
        """Yield (path, node) for this node and its descendants, pre-order.

        Example:
            >>> for path, node in tree.root.walk():
            ...     print(path, node.data)
        """
        pending = [(self.path, self)]
        while pending:
            path, node = pending.pop()
            yield path, node
            pending.extend(
                (join_path(path, child.name), child)
                for child in reversed(node._children)
            )

    # ==================== Conversion ====================

    def to_json(self) -> NodeJson:
        """Return ``{'name', 'data', 'children'}`` for this subtree."""
        return node_to_json(self)
