"""Sequence-shaped type: one child per index.

Usage:
    Records = ArrayType.of(Record)
    dataset = create(Records, [{"content": "Hi"}])
    dataset.push({"content": "Yo"})[1].content.state  # "Yo"

Structural edits (push, shift, unshift, pop) rebuild every child: the meaning
of a position changes when elements move, so no child is reused by index.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from picostates.core import lens
from picostates.core.lifting import transition
from picostates.core.node import Picostate, State, SubstateAt, is_picostate, runtime_of
from picostates.core.operations import filter_substates, map_substates
from picostates.core.parameterized import parameterized


@parameterized
def ArrayType(T: type) -> type:
    class ArrayType:
        """Ordered sequence of ``T`` values."""

        @staticmethod
        def assemble(Type: type, node: Picostate, value: Any) -> Picostate:
            runtime = runtime_of(node)
            if value is None:
                members: list[Any] = []
            elif isinstance(value, (list, tuple)):
                members = list(value)
            elif runtime.settings.strict_sequences:
                raise TypeError(f"{Type.__name__} expects a list, got {type(value).__name__}")
            else:
                members = [value]

            if type(value) is not list or any(is_picostate(member) for member in members):
                value = [member.state if is_picostate(member) else member for member in members]
            node = lens.set(State, value, node)
            for index, member in enumerate(members):
                substate = member if is_picostate(member) else runtime.create(T, member)
                node = lens.set(SubstateAt(index), substate, node)
            return node

        @transition
        def push(self, value: Any) -> list[Any]:
            return [*self.state, value]

        @transition
        def pop(self) -> list[Any]:
            return self.state[:-1]

        @transition
        def shift(self) -> list[Any]:
            return self.state[1:]

        @transition
        def unshift(self, value: Any) -> list[Any]:
            return [value, *self.state]

        @transition
        def filter(self, predicate: Callable[[Picostate], bool]) -> Picostate:
            return runtime_of(self).create(type(self), filter_substates(predicate, self))

        @transition
        def map(self, fn: Callable[[Picostate], Any]) -> list[Any]:
            return map_substates(fn, self)

        @transition
        def clear(self) -> list[Any]:
            return []

        def __len__(self) -> int:
            return len(self.state)

        def __iter__(self) -> Iterator[Picostate]:
            for index in range(len(self.state)):
                yield self[index]  # type: ignore[index]

    ArrayType.T = T  # type: ignore[attr-defined]
    return ArrayType
