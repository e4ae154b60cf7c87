"""Pure functions over the children of a node.

Both functions hand callbacks the *source* of each child: the context-free
node behind the handle. Transitions called on it return a standalone tree
for that child rather than folding into the collection's root, which is what
a collection building its next value needs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from picostates.core.meta import Meta
from picostates.core.node import Picostate, substates


def filter_substates(predicate: Callable[[Picostate], bool], node: Picostate) -> list[Picostate]:
    """Return the sources of the children of ``node`` that ``predicate`` accepts.

    Args:
        predicate: Called with each child's source node.
        node: Collection node.

    Returns:
        Source nodes in child order.
    """
    sources = (Meta.source(child) for _, child in substates(node))
    return [source for source in sources if predicate(source)]


R = TypeVar("R")


def map_substates(fn: Callable[[Picostate], R], node: Picostate) -> list[R]:
    """Apply ``fn`` to the source of every child of ``node``.

    Args:
        fn: Called with each child's source node. May return a raw value or a
            node.
        node: Collection node.

    Returns:
        Results in child order.
    """
    return [fn(Meta.source(child)) for _, child in substates(node)]
