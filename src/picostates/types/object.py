"""Mapping-shaped type: one child per entry.

Usage:
    Scores = ObjectType.of(Counter)
    scores = create(Scores, {"alice": 1})
    scores.put("bob", 2).bob.state  # 2
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from picostates.core import lens
from picostates.core.lifting import transition
from picostates.core.node import Picostate, State, SubstateAt, is_picostate, runtime_of
from picostates.core.parameterized import parameterized


@parameterized
def ObjectType(T: type) -> type:
    class ObjectType:
        """String-keyed mapping of ``T`` values."""

        @staticmethod
        def assemble(Type: type, node: Picostate, value: Any) -> Picostate:
            if value is None:
                value = {}
            elif not isinstance(value, Mapping):
                raise TypeError(f"{Type.__name__} expects a mapping, got {type(value).__name__}")
            members = dict(value)
            if type(value) is not dict or any(is_picostate(m) for m in members.values()):
                value = {
                    key: member.state if is_picostate(member) else member
                    for key, member in members.items()
                }
            node = lens.set(State, value, node)

            runtime = runtime_of(node)
            for key, member in members.items():
                substate = member if is_picostate(member) else runtime.create(T, member)
                node = lens.set(SubstateAt(key), substate, node)
            return node

        @transition
        def assign(self, attrs: Mapping[str, Any]) -> dict[str, Any]:
            return {**self.state, **attrs}

        @transition
        def put(self, name: str, value: Any) -> Picostate:
            return self.assign({name: value})

        @transition
        def delete(self, name: str) -> dict[str, Any]:
            if name not in self.state:
                return self.state
            return {key: value for key, value in self.state.items() if key != name}

        def __len__(self) -> int:
            return len(self.state)

        def __iter__(self) -> Iterator[str]:
            return iter(self.state)

        def __contains__(self, name: object) -> bool:
            return name in self.state

    ObjectType.T = T  # type: ignore[attr-defined]
    return ObjectType
