"""
Example: Identity-indexed entities and references to them.

Each Person indexes itself; a CategoricalVariable holds a reference to one of
them and its changes are recorded in a DiffList.
"""

from catdomain import DomainScope, ItemizedEntity, CategoricalVariable, DiffList


class Person(ItemizedEntity):
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Person({self.name!r}={self.index})"


def main():
    scope = DomainScope()
    people = scope.domain(Person, identity=True)

    alice = Person.create(people, "alice")
    bob = Person.create(people, "bob")
    other_alice = Person.create(people, "alice")
    print(f"Entities: {list(people)}")

    best_friend = CategoricalVariable(people, alice)
    diff = DiffList()
    best_friend.set(bob, diff)
    best_friend.set(other_alice, diff)
    print(f"\nBest friend now: {best_friend.value()}")
    print(f"Changes recorded: {[(c.old_index, c.new_index) for c in diff]}")

    diff.undo()
    print(f"After undo: {best_friend.value()}")


if __name__ == "__main__":
    main()
