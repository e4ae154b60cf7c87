"""Picostates: immutable value trees with typed, structurally shared updates.

Usage:
    from picostates import ArrayType, create, transition

    class StringType:
        @transition
        def concat(self, suffix):
            return f"{self.state}{suffix}"

    class Record:
        content = create(StringType)

    class Dataset:
        records = create(ArrayType.of(Record), [])

    dataset = create(Dataset, {"records": [{"content": "Hi"}]})
    changed = dataset.records[0].content.concat("!")

    changed.state          # {"records": [{"content": "Hi!"}]}
    dataset.state          # unchanged
"""

__version__ = "0.1.0"

# Core primitives
from picostates.core import (
    AnyType,
    AssemblyError,
    Filterable,
    Lens,
    Mappable,
    Meta,
    MissingContextError,
    Picostate,
    State,
    SubstateAt,
    ValueAt,
    assemble_fields,
    compose,
    declared_fields,
    filter_substates,
    is_picostate,
    lens,
    map_substates,
    over,
    parameterized,
    path,
    substates,
    transition,
    view,
)

# Configuration
from picostates.config import PicostateSettings

# Runtime and entry points
from picostates.runtime import Runtime, create, get_runtime, to_pico_type

# Collection types
from picostates.types import ArrayType, ObjectType

__all__ = [
    # Version
    "__version__",
    # Entry points
    "create",
    "to_pico_type",
    "transition",
    "parameterized",
    "AnyType",
    # Runtime
    "Runtime",
    "get_runtime",
    "PicostateSettings",
    # Nodes
    "Picostate",
    "is_picostate",
    "substates",
    "Meta",
    "MissingContextError",
    # Lenses
    "lens",
    "Lens",
    "ValueAt",
    "SubstateAt",
    "State",
    "view",
    "over",
    "compose",
    "path",
    # Assembly
    "AssemblyError",
    "declared_fields",
    "assemble_fields",
    # Collections
    "Filterable",
    "Mappable",
    "filter_substates",
    "map_substates",
    "ArrayType",
    "ObjectType",
]
