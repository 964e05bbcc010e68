"""Capability contracts shared by the animal variants.

Each contract is an abstract base class. Concrete variants opt in by
subclassing one or both. Shared behavior lives once on the contract instead
of being repeated in every variant.
"""

from abc import ABC, abstractmethod


class Animal(ABC):
    """Anything that has a name and can speak."""

    @abstractmethod
    def speak(self) -> str:
        """Return the variant-specific vocalization."""

    @abstractmethod
    def name(self) -> str:
        """Return the animal's identifying name."""

    def describe(self) -> str:
        """Compose name and vocalization into a human-readable sentence."""
        return f"{self.name()} says: {self.speak()}"


class Swimmer(ABC):
    """Optional capability, independent of Animal."""

    def swim(self) -> str:
        return "Swimming..."
