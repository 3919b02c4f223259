"""HCL Core — decodes HCL syntax trees into typed Python values."""

from .config import DecoderConfig
from .decoder import decode, decode_node, decode_tree, load, load_tree
from .errors import (
    DecodeError,
    HCLCoreError,
    InvalidMapKeyShape,
    LiteralTypeMismatch,
    ParseError,
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
    lit,
    lst,
    obj,
)
from .reader import parse
from .shapes import Shape, ShapeKind, Slot, mapping_of, sequence_of, shape_of

__all__ = [
    "decode",
    "decode_tree",
    "decode_node",
    "load",
    "load_tree",
    "parse",
    "DecoderConfig",
    "Slot",
    "Shape",
    "ShapeKind",
    "shape_of",
    "mapping_of",
    "sequence_of",
    "Node",
    "LiteralType",
    "LiteralNode",
    "ObjectNode",
    "ListNode",
    "AssignmentNode",
    "lit",
    "obj",
    "lst",
    "HCLCoreError",
    "ParseError",
    "DecodeError",
    "ShapeMismatch",
    "LiteralTypeMismatch",
    "UnsupportedOutputShape",
    "InvalidMapKeyShape",
    "UnrecognizedNodeShape",
]
