# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeWithPath - A tree of named nodes addressed by filesystem-like paths.

A lightweight, zero-dependency library for organizing hierarchical state
(scene graphs, configuration trees, virtual filesystems) and reaching
nodes by path such as ``/a/b/c``.
"""

__version__ = "0.1.0"

from .exceptions import (
    DetachedNodeError,
    InvalidPathError,
    NodeAlreadyExistsError,
    NodeNotFoundError,
    RootRemovalError,
    TreeError,
)
from .node import Node
from .paths import ROOT_NAME, SEPARATOR, join_path, parse_path
from .serialization import NodeJson
from .tree import Tree

__all__ = [
    # Core classes
    "Tree",
    "Node",
    "NodeJson",
    # Paths
    "ROOT_NAME",
    "SEPARATOR",
    "join_path",
    "parse_path",
    # Exceptions
    "TreeError",
    "InvalidPathError",
    "NodeNotFoundError",
    "NodeAlreadyExistsError",
    "DetachedNodeError",
    "RootRemovalError",
]
