"""Tests for hcl_core.nodes."""

import dataclasses

import pytest

from hcl_core.nodes import (
    AssignmentNode,
    ListNode,
    LiteralNode,
    LiteralType,
    ObjectNode,
    lit,
    lst,
    node_kind,
    obj,
)


class TestLit:
    def test_int(self):
        assert lit(5) == LiteralNode(LiteralType.Int, 5)

    def test_string(self):
        assert lit("x") == LiteralNode(LiteralType.String, "x")

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            lit(True)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            lit(1.5)


class TestObj:
    def test_keywords_keep_order(self):
        node = obj(a=lit(1), b=lit("x"))
        assert [e.key for e in node.entries] == ["a", "b"]

    def test_pairs_allow_duplicate_keys(self):
        node = obj(("k", lit(1)), ("k", lit(2)))
        assert node.entries == (
            AssignmentNode("k", lit(1)),
            AssignmentNode("k", lit(2)),
        )

    def test_pairs_before_keywords(self):
        node = obj(("a", lit(1)), b=lit(2))
        assert [e.key for e in node.entries] == ["a", "b"]

    def test_empty(self):
        assert obj() == ObjectNode(())


def test_lst():
    assert lst(lit(1), lit(2)) == ListNode((lit(1), lit(2)))


def test_nodes_are_frozen():
    node = lit(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 2


def test_node_kind():
    assert node_kind(obj()) == "ObjectNode"
    assert node_kind(lst()) == "ListNode"
    assert node_kind(AssignmentNode("k", lit(1))) == "AssignmentNode"
    assert node_kind(42) == "int"
