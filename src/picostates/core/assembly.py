"""Assembly protocol: decomposing a raw value into child nodes.

An assembler has the signature ``assemble(Type, node, value) -> node``. It
receives a freshly allocated node whose ``state`` is ``value`` and returns
that node with its children installed through ``SubstateAt``.

The default assembler treats a type definition as object-shaped: one child
per declared field. Types override it with a static ``assemble`` or by
registering an assembler on the runtime:

    class Pair:
        @staticmethod
        def assemble(Type, node, value):
            node = lens.set(State, list(value or (None, None)), node)
            for index, member in enumerate(node.state):
                node = lens.set(SubstateAt(index), create(AnyType, member), node)
            return node
"""

from __future__ import annotations

import inspect
import logging
import warnings
from collections.abc import Callable
from typing import Any

from picostates.core import lens
from picostates.core.lifting import declared_fields
from picostates.core.node import (
    Picostate,
    SubstateAt,
    definition_of,
    is_picostate,
    runtime_of,
)

logger = logging.getLogger(__name__)

Assembler = Callable[[type, Picostate, Any], Picostate]


class AssemblyError(TypeError):
    """Raised when an assembler does not hand back a node."""

    pass


def assemble_fields(Type: type, node: Picostate, value: Any) -> Picostate:
    """Install one child per declared field of ``Type``.

    A field whose raw value is present (and not None) gets its default node
    set to that value; otherwise the default node is installed as-is.
    Defaults lifted by another runtime are rebuilt on the node's runtime so
    the whole tree shares its settings and assemblers.
    """
    runtime = runtime_of(node)
    for key, default in declared_fields(Type).items():
        member = lens.view(lens.ValueAt(key), value)
        if runtime_of(default) is not runtime:
            raw = default.state if member is None else member
            substate = runtime.create(definition_of(default), raw)
        elif member is not None:
            substate = default.set(member)
        else:
            substate = default
        node = lens.set(SubstateAt(key), substate, node)
    return node


def static_assembler(Type: type) -> Assembler | None:
    """Return the static ``assemble`` declared by ``Type`` or a base, if any.

    An ``assemble`` that is not a staticmethod is ignored with a warning.
    """
    for cls in Type.__mro__:
        member = vars(cls).get("assemble")
        if isinstance(member, staticmethod):
            return getattr(Type, "assemble")
        if member is not None:
            warnings.warn(
                f"{cls.__name__}.assemble is not a staticmethod and is ignored.",
                stacklevel=2,
            )
            return None
    return None


def run_assembler(assembler: Assembler, Type: type, node: Picostate, value: Any) -> Picostate:
    """Call ``assembler`` and check it honoured the protocol.

    Raises:
        AssemblyError: If the assembler returned something other than a node.
    """
    assembled = assembler(Type, node, value)
    if not is_picostate(assembled):
        name = getattr(assembler, "__qualname__", repr(assembler))
        logger.error("Assembler %s for %s returned %r", name, Type.__qualname__, assembled)
        raise AssemblyError(
            f"Assembler {name} for {Type.__name__} returned {type(assembled).__name__}, "
            f"expected a picostate"
        )
    return assembled


def is_assembler(fn: Any) -> bool:
    """Check if ``fn`` can be called as ``fn(Type, node, value)``."""
    if not callable(fn):
        return False
    try:
        inspect.signature(fn).bind(object, object, object)
    except TypeError:
        return False
    except ValueError:
        # Builtins without an introspectable signature.
        return True
    return True
