"""Lifting plain type definitions into picostate types.

Usage:
    class Counter:
        @transition
        def increment(self):
            return (self.state or 0) + 1

    Lifted = to_pico_type(Counter)
    create(Counter, 1).increment().state  # 2

A type definition knows nothing about trees: its transitions read
``self.state`` and return the next raw value (or a node). Lifting derives a
subclass whose transitions feed that return value into ``set``.
"""

from __future__ import annotations

import functools
import inspect
import logging
import warnings
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from picostates.core.meta import Meta
from picostates.core.node import Picostate, is_picostate

if TYPE_CHECKING:
    from picostates.runtime import Runtime

logger = logging.getLogger(__name__)

RESERVED_FIELDS = frozenset({"state", "set"})


F = TypeVar("F", bound=Callable[..., Any])


def transition(fn: F) -> F:
    """Mark a method as a transition.

    The method receives the unwrapped source node and returns the next raw
    value for its position, or a node to install there.
    """
    fn.__picostate_transition__ = True  # type: ignore[attr-defined]
    return fn


def is_lifted(Type: type) -> bool:
    """Check if ``Type`` was produced by lifting (not merely inherits from one)."""
    return bool(vars(Type).get("__picostate_type__", False))


def _definitions(Type: type) -> list[type]:
    # Base first so that subclasses override.
    return [
        cls
        for cls in reversed(Type.__mro__)
        if cls not in (object, Picostate) and not is_lifted(cls)
    ]


def transitions(Type: type, implicit: bool = False) -> dict[str, Callable[..., Any]]:
    """Collect the transition methods of a type definition.

    Args:
        Type: Plain type definition.
        implicit: Also treat every public plain method as a transition.

    Returns:
        Mapping of method name to the original function, in definition order.
    """
    found: dict[str, Callable[..., Any]] = {}
    for cls in _definitions(Type):
        for name, member in vars(cls).items():
            if name.startswith("_") or name == "set":
                continue
            if not inspect.isfunction(member):
                found.pop(name, None)
                continue
            marked = getattr(member, "__picostate_transition__", False)
            # Overriding a transition keeps it a transition.
            if marked or implicit or name == "initialize" or name in found:
                found[name] = member
            else:
                found.pop(name, None)
    return found


def declared_fields(Type: type) -> dict[str, Picostate]:
    """Collect the fields of a type definition: class attributes holding nodes.

    Returns:
        Mapping of field name to its default node, base classes first.
    """
    fields: dict[str, Picostate] = {}
    for cls in _definitions(Type):
        for name, member in vars(cls).items():
            if is_picostate(member):
                fields[name] = member
            else:
                fields.pop(name, None)
    return fields


def _lift_transition(name: str, method: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(method)
    def lifted(self: Picostate, *args: Any, **kwargs: Any) -> Picostate:
        meta = Meta.get(self)
        receiver = self if meta.source is None else meta.source
        logger.debug("Transition %s.%s", type(self).__name__, name)
        return self.set(method(receiver, *args, **kwargs))

    return lifted


def _field_property(name: str) -> property:
    def get(self: Picostate) -> Picostate:
        return self[name]

    return property(get, doc=f"Substate at {name!r}.")


def lift_type(Type: type, runtime: Runtime) -> type[Picostate]:
    """Build the picostate type for a plain type definition.

    Callers should go through ``Runtime.lift`` which memoizes the result.

    Raises:
        TypeError: If the definition declares a field with a reserved name.
    """
    fields = declared_fields(Type)
    reserved = RESERVED_FIELDS.intersection(fields)
    if reserved:
        raise TypeError(f"{Type.__name__} declares reserved field(s): {sorted(reserved)}")
    if any("set" in vars(cls) for cls in _definitions(Type)):
        warnings.warn(
            f"{Type.__name__}.set() is shadowed by Picostate.set() once lifted.",
            stacklevel=2,
        )

    namespace: dict[str, Any] = {
        "__module__": Type.__module__,
        "__qualname__": f"Picostate<{Type.__qualname__}>",
        "__doc__": Type.__doc__,
        "__picostate_type__": True,
        "__picostate_definition__": Type,
        "__picostate_runtime__": runtime,
    }
    for name in fields:
        namespace[name] = _field_property(name)
    lifted = transitions(Type, implicit=runtime.settings.implicit_transitions)
    for name, method in lifted.items():
        namespace[name] = _lift_transition(name, method)

    bases = (Type,) if issubclass(Type, Picostate) else (Picostate, Type)
    pico_type = type(f"Picostate<{Type.__name__}>", bases, namespace)
    logger.debug(
        "Lifted %s with fields %s and transitions %s",
        Type.__qualname__,
        list(fields),
        list(lifted),
    )
    return pico_type
