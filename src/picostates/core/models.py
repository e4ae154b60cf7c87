"""Capability protocols consumed by collection-shaped types.

Collection types implement these so callers can filter and map over the
children of a node without caring how the collection stores them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Filterable(Protocol):
    """Keep only the children a predicate accepts."""

    def filter(self, predicate: Callable[[Any], bool]) -> Any: ...


@runtime_checkable
class Mappable(Protocol):
    """Replace every child with the result of a function."""

    def map(self, fn: Callable[[Any], Any]) -> Any: ...
