"""Runtime: lifted-type cache, assembler registry and the ``create`` entry point.

Usage:
    from picostates import create, get_runtime

    node = create(Dataset, {"records": []})

    # Isolated runtime with its own cache and settings
    runtime = Runtime(PicostateSettings(strict_sequences=True))
    node = runtime.create(Dataset, {"records": []})

Lifted types remember the runtime that built them, so every node created
while folding a transition uses the same cache and settings as its root.
"""

from __future__ import annotations

import logging
from typing import Any

from picostates.config import PicostateSettings
from picostates.core.assembly import (
    Assembler,
    assemble_fields,
    is_assembler,
    run_assembler,
    static_assembler,
)
from picostates.core.lifting import is_lifted, lift_type
from picostates.core.node import Picostate, is_picostate, new_node
from picostates.core.parameterized import AnyType

logger = logging.getLogger(__name__)


class Runtime:
    """Owns the memoized lifting of type definitions and their assemblers.

    Lifting is keyed by the identity of the type definition: lifting the same
    class twice yields the same picostate type.

    Args:
        settings: Runtime settings. Loaded from the environment when omitted.
    """

    def __init__(self, settings: PicostateSettings | None = None) -> None:
        """Initialize empty lifted-type and assembler tables."""
        self.settings = settings if settings is not None else PicostateSettings()
        self._lifted: dict[type, type[Picostate]] = {}
        self._assemblers: dict[type, Assembler] = {}

    def lift(self, Type: type) -> type[Picostate]:
        """Return the picostate type for ``Type``, building it on first use.

        Args:
            Type: Plain type definition, or an already lifted type.

        Returns:
            The lifted type. Lifted types are returned as-is.
        """
        if is_lifted(Type):
            return Type
        pico_type = self._lifted.get(Type)
        if pico_type is None:
            pico_type = lift_type(Type, self)
            self._lifted[Type] = pico_type
        return pico_type

    def is_lifted(self, Type: type) -> bool:
        """Check if this runtime already lifted ``Type``."""
        return Type in self._lifted

    def register_assembler(self, Type: type, assembler: Assembler) -> None:
        """Override how values of ``Type`` and its subclasses are assembled.

        Args:
            Type: Type definition the assembler applies to.
            assembler: Callable ``(Type, node, value) -> node``.

        Raises:
            TypeError: If ``assembler`` cannot be called with three arguments.
        """
        if not is_assembler(assembler):
            raise TypeError(f"Assembler for {Type.__name__} must accept (Type, node, value)")
        self._assemblers[Type] = assembler
        logger.debug("Registered assembler %r for %s", assembler, Type.__qualname__)

    def assembler_for(self, Type: type) -> Assembler:
        """Resolve the assembler for ``Type``.

        Tries in order:
        1. An assembler registered for ``Type`` or the nearest base
        2. A static ``assemble`` declared on the type
        3. ``assemble_fields``, one child per declared field
        """
        for cls in Type.__mro__:
            if cls in self._assemblers:
                return self._assemblers[cls]
        return static_assembler(Type) or assemble_fields

    def create(self, Type: type = AnyType, value: Any = None) -> Picostate:
        """Assemble ``value`` into a tree of ``Type`` nodes.

        Args:
            Type: Type definition (or lifted type) of the root.
            value: Raw value. A node is unwrapped to its raw state, which
                re-types that value as ``Type``.

        Returns:
            Root node of the new tree.

        Raises:
            AssemblyError: If the type's assembler does not return a node.
        """
        if is_picostate(value):
            value = value.state
        pico_type = self.lift(Type)
        definition = pico_type.__picostate_definition__
        node = run_assembler(
            self.assembler_for(definition), definition, new_node(pico_type, value), value
        )
        if callable(vars(definition).get("initialize")):
            return node.initialize(value)  # type: ignore[attr-defined]
        return node


# Module-level runtime instance
_runtime = Runtime()


def get_runtime() -> Runtime:
    """Access the default runtime.

    Returns:
        The process-local Runtime instance used when none is passed.
    """
    return _runtime


def create(Type: type = AnyType, value: Any = None, *, runtime: Runtime | None = None) -> Picostate:
    """Create a root node of ``Type`` from ``value``.

    Args:
        Type: Type definition of the root, ``AnyType`` by default.
        value: Raw value (or node) to assemble.
        runtime: Runtime to use, the default one when omitted.

    Returns:
        Root node of the assembled tree.
    """
    return (runtime or _runtime).create(Type, value)


def to_pico_type(Type: type, *, runtime: Runtime | None = None) -> type[Picostate]:
    """Return the memoized picostate type for ``Type``."""
    return (runtime or _runtime).lift(Type)
