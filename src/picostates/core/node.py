"""Picostate nodes and the lenses that address their children.

A node pairs a raw ``state`` with a table of child nodes, one per addressable
slot of that state. The table only ever holds context-free source nodes, so
an edited parent can reuse every untouched child by reference. Reading
``parent[key]`` binds the stored source to ``parent``; the binding is what
lets a transition on the child fold its result back up to the root it was
reached from. Untouched siblings are shared between trees as sources; the
handles returned by ``parent[key]`` are distinct per parent.
"""

from __future__ import annotations

import copy
from collections.abc import Hashable, Iterator
from typing import TYPE_CHECKING, Any, ClassVar

from picostates.core import lens
from picostates.core.meta import META_ATTRIBUTE, Meta

if TYPE_CHECKING:
    from picostates.runtime import Runtime

_SUBSTATES = "_substates"
_HANDLES = "_handles"


class Picostate:
    """Base of every lifted type.

    Instances are immutable snapshots: transitions and ``set`` return new
    trees and leave the receiver, its ancestors and its children untouched.
    """

    __picostate_definition__: ClassVar[type]
    __picostate_runtime__: ClassVar[Runtime]

    state: Any

    def set(self, value: Any) -> Picostate:
        """Replace the value at this position and return the new root.

        Setting the current state returns this node unchanged. Setting a node
        installs it as-is, which can change the type at this position. Any
        other value is assembled into a fresh subtree of this node's type.

        Raises:
            MissingContextError: If called without a node.
        """
        meta = Meta.get(self)
        if lens.same_value(value, self.state):
            return self
        if is_picostate(value):
            candidate = Meta.source(value)
        else:
            candidate = runtime_of(self).create(definition_of(self), value)
        if meta.parent is None:
            return candidate
        return meta.parent.set(lens.set(SubstateAt(meta.name), candidate, meta.parent))

    def __getitem__(self, key: Hashable) -> Picostate:
        handles = self.__dict__[_HANDLES]
        if key in handles:
            return handles[key]
        substates = self.__dict__[_SUBSTATES]
        if key not in substates:
            if isinstance(key, int) and isinstance(self.state, (list, tuple)):
                raise IndexError(f"{type(self).__name__} has no substate at index {key}")
            raise KeyError(key)
        handle = bind(substates[key], self, key)
        handles[key] = handle
        return handle

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        substates = self.__dict__.get(_SUBSTATES, {})
        if name in substates:
            return self[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, use set() or a transition")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable, use set() or a transition")

    def __copy__(self) -> Picostate:
        clone = object.__new__(type(self))
        vars(clone).update(vars(self))
        vars(clone)[_HANDLES] = {}
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state!r})"


def new_node(pico_type: type[Picostate], state: Any) -> Picostate:
    """Allocate an empty, context-free node of a lifted type."""
    node = object.__new__(pico_type)
    vars(node).update({"state": state, _SUBSTATES: {}, _HANDLES: {}, META_ATTRIBUTE: Meta()})
    return node


def is_picostate(value: Any) -> bool:
    """Check if ``value`` is a node."""
    return isinstance(value, Picostate)


def definition_of(node: Picostate) -> type:
    """Return the plain type definition a node was lifted from."""
    return type(node).__picostate_definition__


def runtime_of(node: Picostate) -> Runtime:
    """Return the runtime that lifted the node's type."""
    return type(node).__picostate_runtime__


def bind(source: Picostate, parent: Picostate, name: Hashable) -> Picostate:
    """Return a handle on ``source`` that folds its transitions into ``parent``."""
    return lens.set(Meta.lens, Meta(name=name, parent=parent, source=source), source)


def substates(node: Picostate) -> Iterator[tuple[Hashable, Picostate]]:
    """Iterate ``(key, child)`` pairs of a node in installation order."""
    for key in list(vars(node)[_SUBSTATES]):
        yield key, node[key]


def _replace(node: Picostate, **attrs: Any) -> Picostate:
    clone = object.__new__(type(node))
    vars(clone).update(vars(node))
    vars(clone).update(attrs, **{_HANDLES: {}, META_ATTRIBUTE: Meta()})
    return clone


def SubstateAt(key: Hashable) -> lens.Lens[Picostate, Picostate | None]:
    """Focus on the child node installed at ``key``.

    The getter returns the child's source. The setter returns a new
    context-free parent whose raw state has the child's state written at
    ``key`` and whose other children are shared with the old parent.
    Installing the child that is already there returns the parent unchanged.
    """

    def get(node: Picostate | None) -> Picostate | None:
        if node is None:
            return None
        return vars(node)[_SUBSTATES].get(key)

    def put(substate: Picostate, node: Picostate) -> Picostate:
        source = Meta.source(substate)
        current = vars(node)[_SUBSTATES].get(key)
        if current is source:
            return node
        return _replace(
            node,
            state=lens.set(lens.ValueAt(key), source.state, node.state),
            **{_SUBSTATES: {**vars(node)[_SUBSTATES], key: source}},
        )

    return lens.Lens(get, put)


def _with_state(state: Any, node: Picostate) -> Picostate:
    if state is node.state:
        return node
    clone = copy.copy(node)
    vars(clone)["state"] = state
    return clone


State: lens.Lens[Picostate, Any] = lens.Lens(lambda node: node.state, _with_state)
"""Focus on a node's raw ``state`` without touching its children.

Meant for assemblers normalizing a freshly allocated node, e.g. turning a
``None`` value into an empty list before children are installed.
"""
