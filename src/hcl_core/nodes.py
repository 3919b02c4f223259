"""Tree model consumed by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class LiteralType(Enum):
    Int = auto()
    String = auto()


@dataclass(frozen=True, slots=True)
class LiteralNode:
    type: LiteralType
    value: int | str


@dataclass(frozen=True, slots=True)
class AssignmentNode:
    key: str
    value: "Node"


@dataclass(frozen=True, slots=True)
class ObjectNode:
    """Keyed collection. Entries keep source order; keys may repeat."""

    entries: tuple[AssignmentNode, ...] = ()


@dataclass(frozen=True, slots=True)
class ListNode:
    elements: tuple["Node", ...] = ()


Node = Union[LiteralNode, ObjectNode, ListNode, AssignmentNode]


def node_kind(node: object) -> str:
    """Name used for *node* in diagnostics."""
    return type(node).__name__


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def lit(value: int | str) -> LiteralNode:
    """Build an Int or String literal from a Python value."""
    # bool is an int subclass but has no literal type of its own
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"no literal type for {type(value).__name__}")
    if isinstance(value, int):
        return LiteralNode(LiteralType.Int, value)
    return LiteralNode(LiteralType.String, value)


def obj(*pairs: tuple[str, Node], **kwargs: Node) -> ObjectNode:
    """Build an ObjectNode.

    Positional ``(key, node)`` pairs come first and may repeat a key;
    keyword arguments follow in call order::

        obj(("k", lit(1)), ("k", lit(2)), name=lit("web"))
    """
    entries = [AssignmentNode(k, v) for k, v in pairs]
    entries.extend(AssignmentNode(k, v) for k, v in kwargs.items())
    return ObjectNode(tuple(entries))


def lst(*elements: Node) -> ListNode:
    return ListNode(tuple(elements))
