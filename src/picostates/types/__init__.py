"""Collection types built on the core: sequences and mappings."""

from picostates.types.array import ArrayType
from picostates.types.object import ObjectType

__all__ = [
    "ArrayType",
    "ObjectType",
]
