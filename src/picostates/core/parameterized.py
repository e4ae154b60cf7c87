"""Type families parameterized by nested type definitions.

Usage:
    @parameterized
    def ListOf(T):
        class ListOf:
            ...
        return ListOf

    ListOf                 # ListOf[AnyType]
    ListOf.of(Record)      # ListOf[Record], the same class on every call
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable


class AnyType:
    """Holds any raw value as-is: no fields, no transitions."""

    pass


def _type_name(param: object) -> str:
    return getattr(param, "__name__", repr(param))


def parameterized(fn: Callable[..., type]) -> type:
    """Turn a class factory into a type family.

    Args:
        fn: Callable taking one type definition per parameter and returning a
            new class.

    Returns:
        The class built with ``AnyType`` for every parameter. Every class of
        the family exposes ``of(*params)``, memoized by parameters, so type
        identity checks stay meaningful across calls.
    """

    @functools.cache
    def of(*params: type) -> type:
        Type = fn(*params)
        args = ", ".join(_type_name(p) for p in params)
        Type.__name__ = Type.__qualname__ = f"{Type.__name__}[{args}]"
        Type.__picostate_parameters__ = params  # type: ignore[attr-defined]
        Type.of = staticmethod(of)  # type: ignore[attr-defined]
        return Type

    arity = len(inspect.signature(fn).parameters)
    return of(*([AnyType] * arity))
