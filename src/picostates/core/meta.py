"""Per-node back-references: where a node sits and what it was bound from.

A node reached through ``parent[key]`` is a contextual handle on a
context-free *source* node. Its Meta record names the parent handle, the key
under that parent, and the source. Transitions run against the source and
fold their result back through the parent chain.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable
from dataclasses import dataclass, replace
from typing import Any, ClassVar

from picostates.core import lens

META_ATTRIBUTE = "_meta"


class MissingContextError(LookupError):
    """Raised when Meta is looked up on ``None``."""

    pass


@dataclass(frozen=True, slots=True, eq=False)
class Meta:
    """Position of a node inside a tree.

    Attributes:
        name: Key of this node under its parent, None for roots.
        parent: Contextual parent node, None for roots.
        source: Context-free node this handle was bound from. None means the
            node is its own source.
    """

    name: Hashable | None = None
    parent: Any = None
    source: Any = None

    @staticmethod
    def get(obj: Any) -> Meta:
        """Return the Meta record of ``obj``.

        Raises:
            MissingContextError: If ``obj`` is None.
        """
        if obj is None:
            raise MissingContextError("cannot lookup Meta of None")
        return lens.view(Meta.lens, obj)

    @staticmethod
    def source(node: Any) -> Any:
        """Return the context-free node behind ``node``."""
        meta = Meta.get(node)
        return node if meta.source is None else meta.source

    @staticmethod
    def lookup(obj: Any) -> Meta:
        state = getattr(obj, "__dict__", None) or {}
        meta = state.get(META_ATTRIBUTE)
        return meta if meta is not None else Meta()

    @staticmethod
    def attach(meta: Meta, obj: Any) -> Any:
        if Meta.lookup(obj) is meta:
            return obj
        clone = copy.copy(obj)
        vars(clone)[META_ATTRIBUTE] = meta
        return clone

    @staticmethod
    def map(fn: Callable[[Meta], dict[str, Any]], obj: Any) -> Any:
        """Return a copy of ``obj`` whose Meta has the fields ``fn`` returns replaced."""
        return lens.over(Meta.lens, lambda meta: replace(meta, **fn(meta)), obj)

    lens: ClassVar[lens.Lens[Any, Meta]]


Meta.lens = lens.Lens(Meta.lookup, Meta.attach)  # type: ignore[misc]
