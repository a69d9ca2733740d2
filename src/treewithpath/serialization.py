# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conversion between nodes and their JSON-shaped form.

A node is represented as a plain dict with keys in this order::

    {'name': str, 'data': Any, 'children': [<same shape>, ...]}

``data`` is passed through untouched in both directions.
"""

from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from .node import Node


class NodeJson(TypedDict):
    """JSON-shaped representation of a node and its subtree."""

    name: str
    data: Any
    children: list[NodeJson]


def node_to_json(node: Node) -> NodeJson:
    """Convert a node and its descendants to nested dicts.

    Args:
        node: The subtree root.

    Returns:
        A NodeJson dict. Child order matches the tree.
    """
    result: NodeJson = {'name': node.name, 'data': node.data, 'children': []}
    pending = [(node, result)]
    while pending:
        current, shape = pending.pop()
        for child in current.children:
            child_shape: NodeJson = {
                'name': child.name,
                'data': child.data,
                'children': [],
            }
            shape['children'].append(child_shape)
            pending.append((child, child_shape))
    return result


def load_from_json(parent: Node, children: Iterable[NodeJson]) -> None:
    """Recreate serialized children, at any depth, under parent.

    Args:
        parent: Attached node receiving the children.
        children: Sequence of NodeJson dicts, added in order.

    Raises:
        NodeAlreadyExistsError: If two siblings share a name.
        KeyError: If an entry has no 'name'.
    """
    pending = [(parent, children)]
    while pending:
        node, items = pending.pop()
        for item in items:
            child = node.add_child(item['name'], item.get('data'))
            pending.append((child, item.get('children') or []))
