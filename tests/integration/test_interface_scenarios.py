"""End-to-end scenarios through the module-level API and the global registry."""

from abc import abstractmethod
from types import SimpleNamespace

import pytest

import nominal
from nominal import (
    INTERFACE_MARKER_ATTRIBUTE,
    ConflictingMarkerError,
    Interface,
    InterfaceMarker,
    UnboundInterfaceError,
    UntaggableTargetError,
)


# Interface bound with an explicit marker.
FOO_LIKE_MARKER = InterfaceMarker("FooLike")


@nominal.interface(marker=FOO_LIKE_MARKER)
class FooLike(Interface):
    @property
    @abstractmethod
    def name(self) -> str: ...


# Interface with a generated marker.
class BarLike(Interface):
    @property
    @abstractmethod
    def key(self) -> int: ...


nominal.bind_new_marker(BarLike)


class SomeBase:
    name = "SomeBase"


nominal.implements_interface(SomeBase, FooLike)


@nominal.implements(BarLike)
class SomeBaseImpl(SomeBase):
    kind = "SomeBaseImpl"

    def __init__(self, key: int):
        self.key = key


def test_plain_inheritance():
    class Foo(FooLike):
        name = ""

    class Bar(BarLike):
        key = 0

    assert isinstance(Foo(), FooLike)
    assert isinstance(Bar(), BarLike)


def test_tagged_base_class():
    ins = SomeBase()
    assert isinstance(ins, FooLike)
    assert isinstance(ins, SomeBase)
    assert not isinstance(ins, BarLike)


def test_tagged_subclass_collects_all_interfaces():
    ins = SomeBaseImpl(123)
    assert isinstance(ins, FooLike)
    assert isinstance(ins, BarLike)
    assert isinstance(ins, SomeBase)
    assert isinstance(ins, SomeBaseImpl)


def test_multiple_interfaces_on_one_class():
    class Foo:
        key = 123
        name = "Foo"

    nominal.implements_interface(Foo, FooLike, BarLike)

    ins = Foo()
    assert isinstance(ins, FooLike)
    assert isinstance(ins, BarLike)
    assert isinstance(ins, Foo)


def test_inheritance_plus_tagging():
    class Foo(FooLike):
        key = 123
        name = "Foo"

    nominal.implements_interface(Foo, BarLike)

    ins = Foo()
    assert isinstance(ins, FooLike)
    assert isinstance(ins, BarLike)
    assert isinstance(ins, Foo)


def test_interface_merging():
    @nominal.implements(BarLike)
    @nominal.interface
    class FooBarLike(FooLike):
        @property
        @abstractmethod
        def kind(self) -> str: ...

    class Impl(FooBarLike):
        key = 123
        name = "Impl"
        kind = "FooBarLike"

    ins = Impl()
    assert isinstance(ins, FooLike)
    assert isinstance(ins, BarLike)
    assert isinstance(ins, FooBarLike)
    assert isinstance(ins, Impl)


def test_tagged_plain_object():
    ins = nominal.tag_with_interfaces(
        SimpleNamespace(name="ILike", key=123, kind="FooBar"),
        FooLike,
        BarLike,
    )

    assert isinstance(ins, FooLike)
    assert isinstance(ins, BarLike)
    assert not isinstance(SimpleNamespace(name="ILike", key=123), FooLike)


def test_double_definition_is_rejected():
    class Proto:
        pass

    real = nominal.bind_new_marker(Proto)

    with pytest.raises(ConflictingMarkerError):
        nominal.bind_marker(Proto, InterfaceMarker())

    nominal.bind_marker(Proto, real)
    assert nominal.interface_marker(Proto) is real
    assert Proto.__dict__[INTERFACE_MARKER_ATTRIBUTE] is real


def test_fast_tagging_with_resolved_marker():
    marker = nominal.interface_marker(FooLike)
    assert marker is FOO_LIKE_MARKER

    fast = nominal.tag_with_markers(SimpleNamespace(name=""), marker)
    custom = nominal.tag_with_markers(SimpleNamespace(name="customFoo"), marker, value="Foo Like")

    assert isinstance(fast, FooLike)
    assert isinstance(custom, FooLike)
    assert nominal.tag_value(fast, marker) is None
    assert nominal.tag_value(custom, marker) == "Foo Like"


def test_shape_scenario():
    @nominal.interface
    class Shape(Interface):
        pass

    marker = nominal.interface_marker(Shape)
    circle = nominal.tag_with_markers(SimpleNamespace(radius=1), marker)

    assert isinstance(circle, Shape)
    assert not isinstance(SimpleNamespace(radius=1), Shape)


def test_cat_is_an_animal_without_tagging():
    @nominal.interface
    class Animal(Interface):
        pass

    class Cat(Animal):
        pass

    assert isinstance(Cat(), Animal)
    assert nominal.satisfies(Cat(), Animal)


def test_invalid_values_and_unbound_interfaces():
    class Foo:
        pass

    value = None
    assert not isinstance(value, Foo)
    assert not isinstance(value, FooLike)

    assert nominal.interface_marker(Foo) is None
    with pytest.raises(UnboundInterfaceError):
        nominal.tag_with_interfaces(SimpleNamespace(), Foo)
    with pytest.raises(UnboundInterfaceError):
        nominal.implements_interface(type("Bar", (), {}), Foo)
    with pytest.raises(UntaggableTargetError):
        nominal.tag_with_interfaces({"name": "dict"}, FooLike)


def test_public_exports_leave_out_installer_internals():
    import nominal.core as core

    for module in (nominal, core):
        assert all(hasattr(module, name) for name in module.__all__)
        assert "install_capability" not in module.__all__
        assert "PREDICATE_ATTRIBUTE" not in module.__all__
