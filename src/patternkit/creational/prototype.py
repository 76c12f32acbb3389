"""
Prototype pattern: copying a person together with their addresses.

Three copy strategies, differing only in what the copy shares with its source:

==================  ===============  ==========================
strategy            person scalars   addresses
==================  ===============  ==========================
``clone_deep``      independent      new Address instances
``clone_shallow``   independent      same list, same instances
``clone_linked``    shared until     shared until the clone
                    written          assigns its own list
==================  ===============  ==========================

Examples:
    >>> person = Person("Anderson", 20)
    >>> person.add_address(Address("Av. Brasil", 15))
    >>> deep, shallow = person.clone_deep(), person.clone_shallow()
    >>> person.addresses[0].street = "Rua Nova"
    >>> deep.addresses[0].street, shallow.addresses[0].street
    ('Av. Brasil', 'Rua Nova')
"""

from __future__ import annotations

import copy
import types
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

from patternkit.core.logging import get_logger

logger = get_logger(__name__)

_T = TypeVar("_T", bound="Prototype")


@runtime_checkable
class Prototype(Protocol):
    """Objects that know how to copy themselves."""

    def clone(self: _T) -> _T:
        ...


@dataclass
class Address:
    street: str
    number: int

    def clone(self) -> Address:
        return Address(self.street, self.number)


@dataclass
class Person:
    name: str
    age: int
    addresses: list[Address] = field(default_factory=list)

    def add_address(self, address: Address) -> None:
        """Append ``address``; order is kept and duplicates are allowed."""
        self.addresses.append(address)

    def clone(self) -> Person:
        return self.clone_deep()

    def clone_deep(self) -> Person:
        """Copy the person and every address; nothing is shared with the source."""
        new_person = Person(self.name, self.age)
        new_person.addresses = [address.clone() for address in self.addresses]
        logger.debug("prototype.cloned", strategy="deep", addresses=len(new_person.addresses))
        return new_person

    def clone_shallow(self) -> Person:
        """Copy the person's scalars; the address list itself is shared."""
        new_person = copy.copy(self)
        logger.debug("prototype.cloned", strategy="shallow", addresses=len(new_person.addresses))
        return new_person

    def clone_linked(self) -> PrototypeLink:
        """Return a view that reads through to this person until it is written to."""
        logger.debug("prototype.cloned", strategy="linked")
        return PrototypeLink(self)


class PrototypeLink:
    """
    Two-tier object: own fields first, then the linked base.

    Writes always land in own storage, shadowing the base's value without
    touching the base. Deleting an own field uncovers the base value again.
    Methods resolved through the base run against the link, so they see the
    link's own fields.
    """

    def __init__(self, base: Any, **fields: Any) -> None:
        object.__setattr__(self, "_base", base)
        object.__setattr__(self, "_own", dict(fields))

    @property
    def base(self) -> Any:
        return object.__getattribute__(self, "_base")

    def own_fields(self) -> dict[str, Any]:
        return dict(object.__getattribute__(self, "_own"))

    def has_own(self, name: str) -> bool:
        return name in object.__getattribute__(self, "_own")

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        if name in ("_base", "_own"):
            raise AttributeError(name)
        own = object.__getattribute__(self, "_own")
        if name in own:
            return own[name]
        base = object.__getattribute__(self, "_base")
        value = getattr(base, name)
        if isinstance(value, types.MethodType) and value.__self__ is base:
            return types.MethodType(value.__func__, self)
        return value

    def __setattr__(self, name: str, value: Any) -> None:
        object.__getattribute__(self, "_own")[name] = value

    def __delattr__(self, name: str) -> None:
        own = object.__getattribute__(self, "_own")
        if name not in own:
            raise AttributeError(name)
        del own[name]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base={self.base!r}, own={self.own_fields()!r})"


__all__ = ["Prototype", "Address", "Person", "PrototypeLink"]
