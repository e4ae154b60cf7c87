"""Core functionalities: lenses, nodes, lifting and assembly.

Architecture Note:
    core/ contains pure building blocks with no process-wide state. The
    lifted-type cache and assembler registry live on a Runtime, see
    picostates.runtime.
"""

from picostates.core import lens
from picostates.core.assembly import (
    Assembler,
    AssemblyError,
    assemble_fields,
    run_assembler,
    static_assembler,
)
from picostates.core.lens import Lens, ValueAt, compose, over, path, view
from picostates.core.lifting import declared_fields, lift_type, transition, transitions
from picostates.core.meta import Meta, MissingContextError
from picostates.core.models import Filterable, Mappable
from picostates.core.node import (
    Picostate,
    State,
    SubstateAt,
    definition_of,
    is_picostate,
    runtime_of,
    substates,
)
from picostates.core.operations import filter_substates, map_substates
from picostates.core.parameterized import AnyType, parameterized

__all__ = [
    # Lens
    "lens",
    "Lens",
    "ValueAt",
    "view",
    "over",
    "compose",
    "path",
    # Meta
    "Meta",
    "MissingContextError",
    # Node
    "Picostate",
    "SubstateAt",
    "State",
    "is_picostate",
    "substates",
    "definition_of",
    "runtime_of",
    # Lifting
    "transition",
    "transitions",
    "declared_fields",
    "lift_type",
    # Assembly
    "Assembler",
    "AssemblyError",
    "assemble_fields",
    "static_assembler",
    "run_assembler",
    # Parameterized
    "AnyType",
    "parameterized",
    # Collections
    "Filterable",
    "Mappable",
    "filter_substates",
    "map_substates",
]
