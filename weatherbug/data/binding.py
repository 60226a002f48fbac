"""Generic binding of WeatherBug XML nodes to record types.

A binding target is a record type registered with exactly one node
constructor, a callable taking a single node. ``bind`` selects nodes by path
and builds one record per node; a node whose construction fails is skipped
and the rest of the batch is still returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .xml import Node, NodeOrDocument, select_nodes

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")
TargetT = TypeVar("TargetT", bound=type)


@dataclass(frozen=True)
class Bound(Generic[T]):
    """A node that was constructed successfully."""

    value: T


@dataclass(frozen=True)
class BindFailure:
    """A node whose construction raised.

    Attributes:
        node: The element that could not be bound.
        error: The exception raised by the node constructor.
    """

    node: Node
    error: Exception


BindResult = Bound[T] | BindFailure
NodeConstructor = Callable[[Node], BindResult[T]]
FailureHook = Callable[[BindFailure], None]


def guarded(factory: Callable[[Node], T]) -> NodeConstructor[T]:
    """Wrap ``factory`` so every outcome is returned as a ``BindResult``."""

    def construct(node: Node) -> BindResult[T]:
        try:
            return Bound(factory(node))
        except Exception as err:
            return BindFailure(node, err)

    construct.__name__ = getattr(factory, "__name__", "construct")
    return construct


class BindingRegistry:
    """Maps binding target types to their node constructors."""

    def __init__(self) -> None:
        self._constructors: dict[type, NodeConstructor[Any]] = {}

    def __contains__(self, target_type: object) -> bool:
        return target_type in self._constructors

    def register(self, target_type: type, factory: Callable[[Node], Any]) -> None:
        """Register ``factory`` as the node constructor of ``target_type``.

        Re-registering a type replaces its constructor.
        """
        self._constructors[target_type] = guarded(factory)

    def unregister(self, target_type: type) -> None:
        """Forget the constructor of ``target_type`` if there is one."""
        self._constructors.pop(target_type, None)

    def constructor_for(self, target_type: type) -> NodeConstructor[Any] | None:
        """Return the node constructor of ``target_type``, or ``None``."""
        return self._constructors.get(target_type)


REGISTRY = BindingRegistry()


def binding_target(cls: TargetT) -> TargetT:
    """Class decorator registering ``cls.from_node`` in the default registry."""
    REGISTRY.register(cls, cls.from_node)
    return cls


def bind(
    root: NodeOrDocument,
    path: str,
    target_type: type[T],
    *,
    registry: BindingRegistry = REGISTRY,
    on_failure: FailureHook | None = None,
) -> list[T]:
    """Build one ``target_type`` record per node selected by ``path``.

    Args:
        root: Element, or document whose root element, the path is
            evaluated against.
        path: XPath selecting zero or more elements.
        target_type: Registered binding target.
        registry: Registry to resolve ``target_type`` in.
        on_failure: Called once per node that could not be constructed.

    Returns:
        Records in document order. Nodes whose construction failed are
        left out, so the list may be shorter than the number of matches.
        An unregistered ``target_type`` yields an empty list.
    """
    construct = registry.constructor_for(target_type)
    if construct is None:
        _LOGGER.debug("No node constructor registered for %s", target_type)
        return []

    records: list[T] = []
    for node in select_nodes(root, path):
        result = construct(node)
        if isinstance(result, Bound):
            records.append(result.value)
            continue
        _LOGGER.debug(
            "Skipping <%s> for %s: %r",
            node.tag,
            target_type.__name__,
            result.error,
        )
        if on_failure is not None:
            on_failure(result)
    return records


def bind_single(
    root: NodeOrDocument,
    path: str,
    target_type: type[T],
    *,
    registry: BindingRegistry = REGISTRY,
    on_failure: FailureHook | None = None,
) -> T | None:
    """Bind like ``bind`` and return the first record, or ``None``."""
    records = bind(
        root, path, target_type, registry=registry, on_failure=on_failure
    )
    return records[0] if records else None
