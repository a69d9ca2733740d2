# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - a hierarchy of named nodes addressed by path.

This module provides the Tree class, which owns the root node and offers
path-based access to the whole hierarchy. Every path operation resolves
its path to a Node first and then delegates to that node.

Path Syntax:
    - ``/`` is the root node (always named ``root``)
    - ``/a/b`` is node ``b`` below node ``a`` below the root
    - A trailing ``/`` is accepted (``/a/b/`` is ``/a/b``)

Example:
    Basic usage::

        tree = Tree({'text': 'Hello, world!'})
        tree.add('node1', {'text': 'hoI!'}, '/')
        tree.add('node2', None, '/node1')

        tree.get('/node1/node2').path   # '/node1/node2'
        tree.has('/node1/missing')      # False

        tree.remove('/node1')           # drops node1 and node2
        Tree.from_json(tree.to_json())  # structural copy
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator, TYPE_CHECKING

from .exceptions import NodeNotFoundError
from .node import Node
from .paths import ROOT_NAME, join_path, parse_path
from .serialization import load_from_json

if TYPE_CHECKING:
    from .serialization import NodeJson

logger = logging.getLogger(__name__)


class Tree:
    """A tree of named nodes with filesystem-like path addressing.

    Tree provides:
    - add(name, data, path): Create a node below the node at path
    - get(path, error) / tree[path]: Resolve a path to a Node
    - has(path) / path in tree: Non-raising existence check
    - remove(path): Detach a node and its subtree
    - traverse(callback) / walk(): Pre-order iteration
    - to_json() / from_json(): Plain dict round trip

    Attributes:
        root: The root Node. Its name is always ``'root'`` and it can
            never be removed.

    Example:
        >>> tree = Tree({'text': 'Hello, world!'})
        >>> node = tree.add('node1', 42, '/')
        >>> tree.get('/node1') is node
        True
    """

    __slots__ = ('_root',)

    join_path = staticmethod(join_path)

    def __init__(self, data: Any = None) -> None:
        """Initialize a Tree.

        Args:
            data: Payload of the root node.
        """
        self._root = Node(ROOT_NAME, data, tree=self)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        names = [child.name for child in self._root.children]
        return f"Tree({names})"

    def __len__(self) -> int:
        """Return the number of nodes, root included."""
        count = 0
        for _ in self:
            count += 1
        return count

    def __iter__(self) -> Iterator[Node]:
        """Iterate over all nodes in pre-order."""
        for _, node in self.walk():
            yield node

    def __contains__(self, path: str) -> bool:
        return self.has(path)

    def __getitem__(self, path: str) -> Node:
        return self.get(path)

    @property
    def root(self) -> Node:
        """The root node."""
        return self._root

    # ==================== Core API ====================

    def add(self, name: str, data: Any, path: str) -> Node:
        """Create a node below the node at path and return it.

        Args:
            name: Name of the new node.
            data: Payload of the new node.
            path: Path of the parent node.

        Returns:
            The created Node.

        Raises:
            InvalidPathError: If path is malformed or name contains ``/``.
            NodeNotFoundError: If the parent path does not resolve.
            NodeAlreadyExistsError: If the new node's path already exists.

        Example:
            >>> tree.add('node2', {'text': 'hoI!'}, '/node1')
        """
        return self.get(path).add_child(name, data)

    def get(self, path: str, error: bool = True) -> Node | None:
        """Return the node at path.

        Args:
            path: Absolute path, e.g. ``'/node1/node2'``.
            error: If True (default), a missing node raises. Otherwise
                None is returned.

        Returns:
            The resolved Node, or None if missing and error is False.

        Raises:
            InvalidPathError: If path does not start with ``/``.
            NodeNotFoundError: If a segment is missing and error is True.
        """
        candidates: list[Node] = [self._root]
        node = None
        for segment in parse_path(path):
            node = None
            for candidate in candidates:
                if candidate.name == segment:
                    node = candidate
                    break
            if node is None:
                if error:
                    raise NodeNotFoundError(segment, path)
                return None
            candidates = node._children
        return node

    def has(self, path: str) -> bool:
        """Check whether a node exists at path.

        Example:
            >>> tree.has('/notExists/child')
            False
        """
        return self.get(path, error=False) is not None

    def remove(self, path: str) -> Node:
        """Remove the node at path together with its subtree.

        Returns:
            The removed node. It keeps its name and data, has no children
            and no longer belongs to any tree.

        Raises:
            NodeNotFoundError: If path does not resolve.
            RootRemovalError: If path is the root.
        """
        return self.get(path).remove()

    # ==================== Traversal ====================

    def traverse(self, callback: Callable[[Node], Any]) -> None:
        """Call callback for every node, pre-order, children in order.

        Example:
            >>> tree.traverse(lambda node: print(node.name))
        """
        self._root.traverse(callback)

    def walk(self) -> Iterator[tuple[str, Node]]:
        """Yield (path, node) pairs for every node, pre-order."""
        return self._root.walk()

    def is_unique_name(self, name: str) -> bool:
        """Return True if no node in the tree is called name."""
        for node in self:
            if node.name == name:
                return False
        return True

    # ==================== Conversion ====================

    def to_json(self) -> NodeJson:
        """Return the whole tree as nested ``{name, data, children}`` dicts.

        Example:
            >>> Tree({'a': 1}).to_json()
            {'name': 'root', 'data': {'a': 1}, 'children': []}
        """
        return self._root.to_json()

    @classmethod
    def from_json(cls, source: NodeJson) -> Tree:
        """Build a tree from the output of to_json().

        The root's name in source is ignored: the root is always ``root``.

        Args:
            source: A NodeJson dict.

        Returns:
            A new Tree with the same shape and data.

        Raises:
            NodeAlreadyExistsError: If source has duplicate sibling names.
        """
        tree = cls(source.get('data'))
        load_from_json(tree.root, source.get('children') or [])
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Loaded tree with %d nodes", len(tree))
        return tree

    def dumps(self, **kwargs: Any) -> str:
        """Serialize the tree to a JSON string.

        Args:
            **kwargs: Forwarded to json.dumps (indent, sort_keys, ...).

        Raises:
            TypeError: If some node data is not JSON serializable.
            RecursionError: If the tree is nested deeper than the json
                module can encode.
        """
        return json.dumps(self.to_json(), **kwargs)

    @classmethod
    def loads(cls, text: str | bytes, **kwargs: Any) -> Tree:
        """Build a tree from a JSON string produced by dumps()."""
        return cls.from_json(json.loads(text, **kwargs))
