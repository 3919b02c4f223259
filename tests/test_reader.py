"""Tests for the Reader layer."""

import pytest

from hcl_core.errors import ParseError
from hcl_core.nodes import AssignmentNode, ListNode, LiteralNode, LiteralType, ObjectNode, lit, lst, obj
from hcl_core.reader import parse, to_node


# ---------------------------------------------------------------------------
# to_node
# ---------------------------------------------------------------------------

def test_to_node_int():
    assert to_node(3) == LiteralNode(LiteralType.Int, 3)

def test_to_node_string():
    assert to_node("x") == LiteralNode(LiteralType.String, "x")

def test_to_node_dict():
    assert to_node({"a": 1, "b": "x"}) == obj(a=lit(1), b=lit("x"))

def test_to_node_list():
    assert to_node([1, [2]]) == lst(lit(1), lst(lit(2)))

def test_to_node_bool_rejected():
    with pytest.raises(ParseError) as exc:
        to_node({"flag": True})
    assert str(exc.value) == "root.flag: unsupported literal: bool"

def test_to_node_float_rejected():
    with pytest.raises(ParseError) as exc:
        to_node({"xs": [1, 2.5]})
    assert str(exc.value) == "root.xs.1: unsupported literal: float"


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------

def test_parse_assignments():
    root = parse('port = 80\nname = "web"\n')
    assert isinstance(root, ObjectNode)
    assert root.entries == (
        AssignmentNode("port", lit(80)),
        AssignmentNode("name", lit("web")),
    )

def test_parse_list():
    root = parse("ports = [80, 443]\n")
    assert root.entries[0].value == ListNode((lit(80), lit(443)))

def test_parse_block():
    root = parse('server {\n  port = 80\n}\n')
    assert root == obj(server=obj(port=lit(80)))

def test_parse_syntax_error():
    with pytest.raises(ParseError):
        parse("= 1")

def test_parse_bool_rejected():
    with pytest.raises(ParseError):
        parse("enabled = true\n")
