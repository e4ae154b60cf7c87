"""Tests for lifting type definitions into picostate types."""

import pytest

from picostates import (
    Meta,
    PicostateSettings,
    Picostate,
    Runtime,
    create,
    declared_fields,
    to_pico_type,
    transition,
)
from picostates.core.lifting import transitions


class Toggle:
    @transition
    def flip(self):
        return not self.state

    def describe(self):
        return "on" if self.state else "off"


class Labelled:
    @transition
    def rename(self, name, *, suffix=""):
        return f"{name}{suffix}"


def test_lifting_is_memoized():
    """CRITICAL: Lifting the same definition twice yields the same type.

    Why: isinstance/type checks on nodes must stay meaningful across calls.
    """
    assert to_pico_type(Toggle) is to_pico_type(Toggle)
    assert type(create(Toggle, True)) is type(create(Toggle, False))


def test_lifting_is_scoped_to_runtime(runtime):
    lifted = runtime.lift(Toggle)

    assert lifted is runtime.lift(Toggle)
    assert lifted is not to_pico_type(Toggle)
    assert runtime.is_lifted(Toggle)


def test_lifted_types_pass_through(runtime):
    lifted = runtime.lift(Toggle)

    assert runtime.lift(lifted) is lifted
    assert to_pico_type(lifted) is lifted


def test_lifted_type_subclasses_definition():
    node = create(Toggle, True)

    assert isinstance(node, Toggle)
    assert isinstance(node, Picostate)
    assert type(node).__name__ == "Picostate<Toggle>"
    assert type(node).__picostate_definition__ is Toggle


def test_only_marked_methods_are_transitions():
    node = create(Toggle, True)

    assert node.flip().state is False
    assert node.describe() == "on"


def test_implicit_transitions_lift_public_methods():
    runtime = Runtime(PicostateSettings(implicit_transitions=True))

    node = runtime.create(Toggle, True)

    assert node.describe().state == "on"


def test_arguments_pass_through_unchanged():
    node = create(Labelled, "old")

    assert node.rename("new", suffix="!").state == "new!"


def test_transition_runs_against_source():
    seen = []

    class Probe:
        @transition
        def record(self):
            seen.append(Meta.get(self).parent)
            return self.state

    class Holder:
        probe = create(Probe, "x")

    holder = create(Holder)
    holder.probe.record()

    assert seen == [None]


def test_overriding_a_transition_keeps_it_lifted():
    class Base:
        @transition
        def bump(self):
            return self.state + 1

    class Child(Base):
        def bump(self):
            return self.state + 10

    assert create(Child, 1).bump().state == 11
    assert list(transitions(Child)) == ["bump"]


def test_declared_fields_follow_definition_order():
    class Base:
        first = create(Toggle, True)
        second = create(Toggle, False)

    class Child(Base):
        second = create(Labelled, "x")
        third = create(Toggle, True)

    fields = declared_fields(Child)

    assert list(fields) == ["first", "second", "third"]
    assert fields["second"] is Child.__dict__["second"]


def test_reserved_field_names_are_rejected():
    class Broken:
        state = create(Toggle, True)

    with pytest.raises(TypeError, match="reserved"):
        to_pico_type(Broken)


def test_own_set_method_warns_about_shadowing(runtime):
    class Shadowing:
        def set(self, value):
            return value

    with pytest.warns(UserWarning, match="shadowed"):
        runtime.lift(Shadowing)
