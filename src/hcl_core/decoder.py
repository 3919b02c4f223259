"""Decoder: walks a tree and fills a Slot according to its declared shape."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator

from .config import DecoderConfig
from .errors import (
    InvalidMapKeyShape,
    LiteralTypeMismatch,
    ShapeMismatch,
    UnrecognizedNodeShape,
    UnsupportedOutputShape,
)
from .nodes import (
    AssignmentNode,
    ListNode,
    LiteralNode,
    LiteralType,
    Node,
    ObjectNode,
    node_kind,
)
from .shapes import INT, STRING, DYNAMIC, Shape, ShapeKind, Slot

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = DecoderConfig()


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def decode(out: Slot, text: str, config: DecoderConfig | None = None) -> None:
    """Parse *text* and decode the resulting tree into *out*."""
    from .reader import parse
    decode_tree(out, parse(text), config)


def decode_tree(out: Slot, root: ObjectNode, config: DecoderConfig | None = None) -> None:
    """Decode an already-parsed document *root* into *out*."""
    config = config or _DEFAULT_CONFIG
    if not isinstance(root, ObjectNode):
        raise ShapeMismatch(config.root_name, f"root must be an object, got {node_kind(root)}")
    logger.debug("decoding %d entries into %s", len(root.entries), out.shape.describe())
    decode_node(config.root_name, root, out, config)


def load(tp: Any, text: str, config: DecoderConfig | None = None) -> Any:
    """Decode *text* into a fresh output of type *tp* and return its value."""
    out = Slot.of(tp)
    decode(out, text, config)
    return out.value


def load_tree(tp: Any, root: ObjectNode, config: DecoderConfig | None = None) -> Any:
    """Decode *root* into a fresh output of type *tp* and return its value."""
    out = Slot.of(tp)
    decode_tree(out, root, config)
    return out.value


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

def decode_node(
    path: str,
    node: Node,
    slot: Slot,
    config: DecoderConfig | None = None,
) -> None:
    """Route *node* to the converter for *slot*'s declared shape."""
    converter = _CONVERTERS.get(slot.shape.kind)
    if converter is None:
        raise UnsupportedOutputShape(path, f"unknown kind: {slot.shape.describe()}")
    converter(path, node, slot, config or _DEFAULT_CONFIG)


def _join(path: str, segment: str | int) -> str:
    return f"{path}.{segment}"


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def _decode_int(path: str, node: Node, slot: Slot, config: DecoderConfig) -> None:
    """Int literal → int."""
    slot.value = _literal_value(path, node, LiteralType.Int)


def _decode_string(path: str, node: Node, slot: Slot, config: DecoderConfig) -> None:
    """String literal → str."""
    slot.value = _literal_value(path, node, LiteralType.String)


def _literal_value(path: str, node: Node, expected: LiteralType) -> int | str:
    if not isinstance(node, LiteralNode):
        raise ShapeMismatch(path, f"not a literal type: {node_kind(node)}")
    if node.type != expected:
        actual = getattr(node.type, "name", node.type)
        raise LiteralTypeMismatch(path, f"unknown type {actual}, expected {expected.name}")
    return node.value


# ---------------------------------------------------------------------------
# Dynamic (inferred) output
# ---------------------------------------------------------------------------

_LITERAL_SHAPES: dict[LiteralType, Shape] = {
    LiteralType.Int: INT,
    LiteralType.String: STRING,
}


def _decode_dynamic(path: str, node: Node, slot: Slot, config: DecoderConfig) -> None:
    """Object → dict, List → list, Literal → int | str, chosen from *node* itself."""
    if isinstance(node, ObjectNode):
        result: dict[str, Any] = {}
        for key, value in _assignments(path, node):
            inner = Slot(DYNAMIC)
            decode_node(_join(path, key), value, inner, config)
            result[key] = inner.value
        slot.value = result
        return

    if isinstance(node, ListNode):
        items: list[Any] = []
        for idx, elem in enumerate(node.elements):
            inner = Slot(DYNAMIC)
            decode_node(_join(path, idx), elem, inner, config)
            items.append(inner.value)
        slot.value = items
        return

    if isinstance(node, LiteralNode):
        shape = _LITERAL_SHAPES.get(node.type)
        if shape is None:
            raise LiteralTypeMismatch(path, f"unknown literal type: {node.type}")
        # Only the kind of slot is chosen here; the scalar converter fills it.
        concrete = Slot(shape)
        decode_node(path, node, concrete, config)
        slot.value = concrete.value
        return

    raise UnrecognizedNodeShape(
        path, f"cannot decode into dynamic output: {node_kind(node)}"
    )


# ---------------------------------------------------------------------------
# Mapping output
# ---------------------------------------------------------------------------

def _decode_mapping(path: str, node: Node, slot: Slot, config: DecoderConfig) -> None:
    """Object → dict, merged over the slot's existing mapping."""
    shape = slot.shape
    if shape.key is None or shape.key.kind != ShapeKind.String:
        raise InvalidMapKeyShape(path, "map must have string keys")
    if shape.elem is None:
        raise UnsupportedOutputShape(path, f"no value shape: {shape.describe()}")
    if not isinstance(node, ObjectNode):
        raise ShapeMismatch(path, f"not an object type: {node_kind(node)}")

    existing = slot.value
    if existing is not None and not isinstance(existing, Mapping):
        raise ShapeMismatch(path, f"existing value is not a mapping: {type(existing).__name__}")

    # Built aside and committed once; the caller's mapping is never mutated.
    result: dict[str, Any] = dict(existing) if existing is not None else {}

    for key, value in _assignments(path, node):
        # Seed with the existing entry so nested mappings merge.
        inner = Slot(shape.elem, result.get(key))
        decode_node(_join(path, key), value, inner, config)
        result[key] = inner.value

    slot.value = result


def _assignments(path: str, node: ObjectNode) -> Iterator[tuple[str, Node]]:
    """Yield (key, value) for each entry of *node*."""
    for entry in node.entries:
        if not isinstance(entry, AssignmentNode):
            raise UnrecognizedNodeShape(
                path, f"object entry is not an assignment: {node_kind(entry)}"
            )
        yield entry.key, entry.value


# ---------------------------------------------------------------------------
# Sequence output
# ---------------------------------------------------------------------------

def _decode_sequence(path: str, node: Node, slot: Slot, config: DecoderConfig) -> None:
    """List → list of the element shape (elements only decoded when enabled)."""
    if not isinstance(node, ListNode):
        raise ShapeMismatch(path, f"not a list type: {node_kind(node)}")
    if slot.shape.elem is None:
        raise UnsupportedOutputShape(path, f"no element shape: {slot.shape.describe()}")

    items: list[Any] = []
    if config.decode_list_elements:
        for idx, elem in enumerate(node.elements):
            inner = Slot(slot.shape.elem)
            decode_node(_join(path, idx), elem, inner, config)
            items.append(inner.value)
    elif node.elements:
        logger.debug("%s: leaving %d list elements undecoded", path, len(node.elements))

    slot.value = items


_CONVERTERS: dict[ShapeKind, Callable[[str, Node, Slot, DecoderConfig], None]] = {
    ShapeKind.Int: _decode_int,
    ShapeKind.String: _decode_string,
    ShapeKind.Dynamic: _decode_dynamic,
    ShapeKind.Mapping: _decode_mapping,
    ShapeKind.Sequence: _decode_sequence,
}
