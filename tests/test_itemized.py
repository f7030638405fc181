"""
Tests for identity-indexed entities.
"""

from dataclasses import dataclass

import pytest

from catdomain.core.counting import CountingDomainRegistry
from catdomain.core.errors import StaleHandle, UnsetValue
from catdomain.core.registry import DomainRegistry
from catdomain.core.scope import DomainScope
from catdomain.variables.handles import CategoricalVariable
from catdomain.variables.itemized import ItemizedEntity


class Person(ItemizedEntity):
    def __init__(self, name):
        self.name = name

    def __eq__(self, other):
        return isinstance(other, Person) and other.name == self.name

    def __hash__(self):
        return hash(self.name)


@dataclass(frozen=True)
class Token(ItemizedEntity):
    text: str


class Label(ItemizedEntity):
    __slots__ = ("text",)

    def __init__(self, text):
        self.text = text


class TestItemizedEntity:
    @pytest.fixture
    def people(self):
        return DomainScope().domain(Person, identity=True)

    def test_distinct_indices_in_creation_order(self, people):
        persons = [Person.create(people, "sam") for _ in range(5)]
        assert [p.index for p in persons] == [0, 1, 2, 3, 4]
        assert people.alloc_size() == 5

    def test_value_is_self(self, people):
        p = Person.create(people, "kim")
        assert p.value() is p
        assert people.get(p.index) is p
        assert p.registry is people

    def test_registered_once(self, people):
        p = Person.create(people, "kim")
        assert people.index(p) == p.index
        assert people.alloc_size() == 1

    def test_bind_twice_raises(self, people):
        p = Person.create(people, "kim")
        with pytest.raises(ValueError):
            p.bind(people)

    def test_requires_identity_registry(self):
        with pytest.raises(ValueError):
            Person.create(DomainRegistry(), "kim")

    def test_unbound_entity(self):
        p = Person("kim")
        with pytest.raises(UnsetValue):
            p.index
        assert p.registry is None

    def test_two_step_bind(self, people):
        p = Person("kim")
        assert p.bind(people) is p
        assert p.index == 0

    def test_frozen_dataclass_entities(self):
        tokens = DomainRegistry(Token, identity=True)
        a = Token.create(tokens, "the")
        b = Token.create(tokens, "the")
        assert a == b
        assert (a.index, b.index) == (0, 1)

    def test_slotted_subclass(self):
        labels = DomainRegistry(Label, identity=True)
        unbound = Label("draft")
        assert unbound.registry is None
        a = Label.create(labels, "x")
        b = Label.create(labels, "x")
        assert (a.index, b.index) == (0, 1)
        assert not hasattr(a, "__dict__")

    def test_stale_after_trim(self):
        reg = CountingDomainRegistry(Person, identity=True)
        a = Person.create(reg, "a")
        b = Person.create(reg, "b")
        reg.index(b)
        reg.trim_below_size(1)
        with pytest.raises(StaleHandle):
            a.index
        assert reg.get(0) is b


class TestEntityReference:
    def test_variable_pointing_at_entities(self):
        people = DomainRegistry(Person, identity=True)
        alice = Person.create(people, "alice")
        bob = Person.create(people, "bob")

        friend = CategoricalVariable(people, alice)
        assert friend.value() is alice
        friend.set(bob)
        assert friend.index == bob.index
        assert people.alloc_size() == 2
