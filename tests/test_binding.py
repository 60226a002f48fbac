"""Tests for the generic node binder."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from lxml import etree

from weatherbug.data.binding import (
    REGISTRY,
    BindFailure,
    BindingRegistry,
    Bound,
    bind,
    bind_single,
    guarded,
)
from weatherbug.data.station import Station
from weatherbug.data.utils import get_int, get_string
from weatherbug.data.xml import Node

from .conftest import aws_element


@dataclass(frozen=True)
class Reading:
    """Minimal binding target used by these tests."""

    name: str
    value: int

    @classmethod
    def from_node(cls, node: Node) -> Reading:
        value = get_int(node, "@value", None)
        if value is None:
            raise ValueError(f"reading {get_string(node, '@name')} has no value")
        return cls(name=get_string(node, "@name"), value=value)


class Unregistered:
    """A type nobody registered."""

    def __init__(self, node: Node) -> None:
        self.node = node


READINGS = aws_element(
    '<aws:reading name="a" value="1"/>'
    '<aws:reading name="b" value="oops"/>'
    '<aws:reading name="c" value="3"/>'
    '<aws:reading name="d"/>'
    '<aws:reading name="e" value="5"/>'
)


@pytest.fixture
def registry() -> BindingRegistry:
    """A registry with Reading registered."""
    registry = BindingRegistry()
    registry.register(Reading, Reading.from_node)
    return registry


class TestGuarded:
    """Tests for guarded node constructors."""

    def test_success_is_bound(self) -> None:
        """A successful construction is wrapped in Bound."""
        node = READINGS[0]
        result = guarded(Reading.from_node)(node)

        assert result == Bound(Reading(name="a", value=1))

    def test_exception_is_failure(self) -> None:
        """An exception becomes a BindFailure carrying node and error."""
        node = READINGS[1]
        result = guarded(Reading.from_node)(node)

        assert isinstance(result, BindFailure)
        assert result.node is node
        assert isinstance(result.error, ValueError)

    def test_signature_mismatch_is_failure(self) -> None:
        """A constructor that cannot take a node still yields a failure."""

        def needs_two(node: Node, other: Node) -> object:
            return (node, other)

        result = guarded(needs_two)(READINGS[0])  # type: ignore[arg-type]

        assert isinstance(result, BindFailure)
        assert isinstance(result.error, TypeError)


class TestBindingRegistry:
    """Tests for BindingRegistry."""

    def test_register_and_lookup(self, registry: BindingRegistry) -> None:
        """Registered types resolve to a constructor."""
        assert Reading in registry
        assert registry.constructor_for(Reading) is not None

    def test_unknown_type(self, registry: BindingRegistry) -> None:
        """Unregistered types resolve to None."""
        assert Unregistered not in registry
        assert registry.constructor_for(Unregistered) is None

    def test_unregister(self, registry: BindingRegistry) -> None:
        """Unregistering removes the constructor."""
        registry.unregister(Reading)
        registry.unregister(Reading)
        assert Reading not in registry

    def test_decorated_records_are_registered(self) -> None:
        """Record classes register themselves in the default registry."""
        assert Station in REGISTRY


class TestBind:
    """Tests for bind."""

    def test_skips_failed_nodes_in_document_order(
        self, registry: BindingRegistry
    ) -> None:
        """Failing nodes are dropped; the rest keep their order."""
        readings = bind(READINGS, "aws:reading", Reading, registry=registry)

        assert [r.name for r in readings] == ["a", "c", "e"]
        assert [r.value for r in readings] == [1, 3, 5]

    def test_values_match_direct_extraction(self, registry: BindingRegistry) -> None:
        """Bound records hold the values extracted from their nodes."""
        readings = bind(READINGS, "aws:reading", Reading, registry=registry)
        nodes = [READINGS[0], READINGS[2], READINGS[4]]

        for reading, node in zip(readings, nodes, strict=True):
            assert reading.name == get_string(node, "@name")
            assert reading.value == get_int(node, "@value", -1)

    def test_failure_hook_sees_each_failure(self, registry: BindingRegistry) -> None:
        """The hook is called once per failing node and changes nothing."""
        failures: list[BindFailure] = []

        readings = bind(
            READINGS,
            "aws:reading",
            Reading,
            registry=registry,
            on_failure=failures.append,
        )

        assert len(readings) == 3
        assert [get_string(f.node, "@name") for f in failures] == ["b", "d"]

    def test_no_matches(self, registry: BindingRegistry) -> None:
        """A path that matches nothing yields an empty list."""
        assert bind(READINGS, "aws:missing", Reading, registry=registry) == []

    def test_all_nodes_fail(self, registry: BindingRegistry) -> None:
        """When every node fails the result is empty."""
        root = aws_element('<aws:reading name="x"/><aws:reading name="y"/>')
        assert bind(root, "aws:reading", Reading, registry=registry) == []

    def test_unregistered_type_is_empty(self) -> None:
        """Binding a type without a constructor yields an empty list."""
        assert bind(READINGS, "aws:reading", Unregistered) == []

    def test_invalid_path_is_empty(self, registry: BindingRegistry) -> None:
        """A path lxml cannot evaluate yields an empty list."""
        assert bind(READINGS, "aws:[", Reading, registry=registry) == []

    def test_accepts_document(self, registry: BindingRegistry) -> None:
        """A document binds from its root element."""
        document = etree.ElementTree(READINGS)

        readings = bind(document, "aws:reading", Reading, registry=registry)

        assert [r.name for r in readings] == ["a", "c", "e"]

    def test_constructor_resolved_once_per_call(
        self, registry: BindingRegistry
    ) -> None:
        """The target's constructor is looked up once, not per node."""
        lookups: list[type] = []
        original = registry.constructor_for

        def counting(target_type: type):  # type: ignore[no-untyped-def]
            lookups.append(target_type)
            return original(target_type)

        registry.constructor_for = counting  # type: ignore[method-assign]

        bind(READINGS, "aws:reading", Reading, registry=registry)

        assert lookups == [Reading]

    def test_does_not_mutate_document(self, registry: BindingRegistry) -> None:
        """Binding leaves the source tree untouched."""
        before = etree.tostring(READINGS)

        bind(READINGS, "aws:reading", Reading, registry=registry)

        assert etree.tostring(READINGS) == before


class TestBindSingle:
    """Tests for bind_single."""

    def test_no_match_is_none(self, registry: BindingRegistry) -> None:
        """Zero matched nodes yield None."""
        assert bind_single(READINGS, "aws:missing", Reading, registry=registry) is None

    def test_first_bound_record(self, registry: BindingRegistry) -> None:
        """The first record of bind is returned."""
        single = bind_single(READINGS, "aws:reading", Reading, registry=registry)

        assert single == bind(READINGS, "aws:reading", Reading, registry=registry)[0]
        assert single == Reading(name="a", value=1)

    def test_skips_leading_failures(self, registry: BindingRegistry) -> None:
        """A failing first node falls through to the next bound record."""
        single = bind_single(
            READINGS, "aws:reading[position() > 1]", Reading, registry=registry
        )

        assert single == Reading(name="c", value=3)

    def test_unregistered_type_is_none(self) -> None:
        """Unregistered targets yield None."""
        assert bind_single(READINGS, "aws:reading", Unregistered) is None
