"""Creational patterns: prototype."""

from patternkit.creational.prototype import Address, Person, Prototype, PrototypeLink

__all__ = ["Prototype", "Address", "Person", "PrototypeLink"]
