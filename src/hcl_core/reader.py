"""Reader layer: converts pyhcl output into the tree model."""

from __future__ import annotations

import logging
from typing import Any

import hcl

from .errors import ParseError
from .nodes import AssignmentNode, ListNode, LiteralNode, LiteralType, Node, ObjectNode

logger = logging.getLogger(__name__)


def parse(text: str) -> ObjectNode:
    """Parse HCL *text* into an ObjectNode root."""
    try:
        raw = hcl.loads(text)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc

    root = to_node(raw, "root")
    if not isinstance(root, ObjectNode):
        raise ParseError(f"document root is not an object: {type(raw).__name__}")
    logger.debug("parsed document with %d top-level entries", len(root.entries))
    return root


def to_node(value: Any, path: str = "root") -> Node:
    """Convert one plain value as produced by ``hcl.loads`` to a Node.

    - dict → ObjectNode (one AssignmentNode per key, in dict order)
    - list → ListNode
    - int → Int literal, str → String literal

    Booleans, floats and anything else have no literal type and raise
    ParseError naming *path*.
    """
    if isinstance(value, dict):
        return ObjectNode(tuple(
            AssignmentNode(str(k), to_node(v, f"{path}.{k}"))
            for k, v in value.items()
        ))
    if isinstance(value, list):
        return ListNode(tuple(
            to_node(v, f"{path}.{i}") for i, v in enumerate(value)
        ))
    if isinstance(value, bool):
        raise ParseError(f"{path}: unsupported literal: bool")
    if isinstance(value, int):
        return LiteralNode(LiteralType.Int, value)
    if isinstance(value, str):
        return LiteralNode(LiteralType.String, value)
    raise ParseError(f"{path}: unsupported literal: {type(value).__name__}")
