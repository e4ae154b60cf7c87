"""Functional get/set pairs over immutable values.

Usage:
    from picostates.core import lens

    first = lens.ValueAt(0)
    lens.view(first, ["a", "b"])          # "a"
    lens.set(first, "z", ["a", "b"])      # ["z", "b"] (a new list)
    lens.over(first, str.upper, ["a"])    # ["A"]

    deep = lens.path("records", 0, "content")
    lens.set(deep, "Hi", {"records": [{"content": "Yo"}]})

Every lens here obeys the usual laws:
    view(l, set(l, v, c)) == v            get after set
    set(l, view(l, c), c) is c            set after get is a no-op
    set(l, w, set(l, v, c)) == set(l, w, c)
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

C = TypeVar("C")
V = TypeVar("V")

_SCALARS = (str, bytes, int, float, bool, type(None))


def same_value(a: Any, b: Any) -> bool:
    """Check whether writing ``b`` over ``a`` would change anything.

    Identity for containers and objects, equality for immutable scalars of the
    exact same type.
    """
    if a is b:
        return True
    return type(a) is type(b) and isinstance(a, _SCALARS) and a == b


@dataclass(frozen=True, slots=True)
class Lens(Generic[C, V]):
    """A getter and a setter focused on one position of a context value.

    Attributes:
        get: Reads the focus out of a context.
        set: Takes ``(value, context)`` and returns a context with the focus
            replaced. Must never mutate the given context.
    """

    get: Callable[[C], V]
    set: Callable[[V, C], C]


def view(lens: Lens[C, V], context: C) -> V:
    """Read the focus of ``lens`` in ``context``."""
    return lens.get(context)


def set(lens: Lens[C, V], value: V, context: C) -> C:
    """Return ``context`` with the focus of ``lens`` replaced by ``value``."""
    return lens.set(value, context)


def over(lens: Lens[C, V], fn: Callable[[V], V], context: C) -> C:
    """Return ``context`` with the focus of ``lens`` replaced by ``fn(focus)``."""
    return lens.set(fn(lens.get(context)), context)


def _compose_pair(outer: Lens[Any, Any], inner: Lens[Any, Any]) -> Lens[Any, Any]:
    def get(context: Any) -> Any:
        return inner.get(outer.get(context))

    def put(value: Any, context: Any) -> Any:
        return outer.set(inner.set(value, outer.get(context)), context)

    return Lens(get, put)


def compose(*lenses: Lens[Any, Any]) -> Lens[Any, Any]:
    """Chain lenses left to right, the first one being the outermost.

    Raises:
        ValueError: If no lens is given.
    """
    if not lenses:
        raise ValueError("compose() needs at least one lens")
    return reduce(_compose_pair, lenses)


def ValueAt(key: Hashable) -> Lens[Any, Any]:
    """Focus on ``context[key]`` of a raw list, tuple or mapping.

    Reads of missing keys, out-of-range indices or a ``None`` context give
    ``None``. Writes clone the container shallowly; writing the value already
    read at ``key`` returns the context untouched. A ``None`` context is
    written as an empty mapping. Writing a non-integer key into a list or
    tuple raises ``TypeError``.
    """

    def get(context: Any) -> Any:
        if context is None:
            return None
        if isinstance(context, Mapping):
            return context.get(key)
        if isinstance(context, (list, tuple)):
            if isinstance(key, int) and -len(context) <= key < len(context):
                return context[key]
            return None
        return getattr(context, str(key), None)

    def put(value: Any, context: Any) -> Any:
        if context is None:
            context = {}
        if same_value(value, get(context)):
            return context
        if isinstance(context, (list, tuple)):
            if not isinstance(key, int):
                raise TypeError(
                    f"cannot write key {key!r} into a {type(context).__name__}, "
                    f"expected an integer index"
                )
            index = key
            clone = list(context)
            if index >= len(clone):
                clone.extend([None] * (index + 1 - len(clone)))
            clone[index] = value
            return tuple(clone) if isinstance(context, tuple) else clone
        return {**context, key: value}

    return Lens(get, put)


def path(*keys: Hashable) -> Lens[Any, Any]:
    """Focus on a nested raw slot, e.g. ``path("records", 0, "content")``."""
    return compose(*(ValueAt(key) for key in keys))
