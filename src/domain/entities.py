"""Pure domain entities without infrastructure dependencies."""

from dataclasses import dataclass

from .constants import HORSE_LEGS, MAX_DOG_AGE, MAX_NAME_LENGTH, MAX_SMALL_UINT
from .contracts import Animal, Swimmer
from .exceptions import ValidationError


def validate_animal_name(name: str, animal_type: str = "animal") -> None:
    """Validate an animal name according to domain rules.

    Pure domain validation without logging or external dependencies.

    Args:
        name: The name to validate
        animal_type: Type of animal being validated (for error messages)

    Raises:
        ValidationError: If name is not a string, empty, too long, or contains
            control characters
    """
    if not isinstance(name, str):
        raise ValidationError(f"{animal_type.title()} name must be a string")

    if not name or not name.strip():
        raise ValidationError(f"{animal_type.title()} name cannot be empty")

    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"{animal_type.title()} name cannot be longer than {MAX_NAME_LENGTH} "
            + "characters"
        )

    for char in name:
        if ord(char) < 32 or ord(char) == 127:
            raise ValidationError(
                f"{animal_type.title()} name cannot contain newlines, tabs, "
                + "or other control characters"
            )


def validate_unsigned(
    value: int, field: str, upper_bound: int | None = MAX_SMALL_UINT
) -> None:
    """Validate that value is a non-negative integer, optionally bounded.

    Raises:
        ValidationError: If value is not an int, is negative, or exceeds
            upper_bound
    """
    # bool is an int subclass but never a valid quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field.capitalize()} must be an integer")

    if value < 0:
        raise ValidationError(f"{field.capitalize()} cannot be negative")

    if upper_bound is not None and value > upper_bound:
        raise ValidationError(
            f"{field.capitalize()} cannot be greater than {upper_bound}"
        )


class Dog(Animal):
    """A dog whose state is only reachable through its public methods."""

    def __init__(self, name: str, age: int, breed: str):
        validate_animal_name(name, "dog")
        validate_unsigned(age, "age")
        if not isinstance(breed, str):
            raise ValidationError("Breed must be a string")

        self._name = name
        self._age = age
        self._breed = breed

    def __repr__(self) -> str:
        return f"Dog(name={self._name!r}, age={self._age}, breed={self._breed!r})"

    def get_age(self) -> int:
        return self._age

    def set_age(self, age: int) -> None:
        """Update the age if it is plausible for a dog.

        Ages above MAX_DOG_AGE are silently discarded and the previous age is
        kept.

        Raises:
            ValidationError: If age is not a non-negative integer
        """
        validate_unsigned(age, "age")
        if age <= MAX_DOG_AGE:
            self._age = age

    def _format_breed(self) -> str:
        return self._breed.upper()

    def speak(self) -> str:
        return f"Woof! I'm a {self._format_breed()}"

    def name(self) -> str:
        return self._name


class Cat(Animal):
    """A cat whose temperament depends on whether it lives indoors."""

    def __init__(self, name: str, indoor: bool):
        validate_animal_name(name, "cat")
        if not isinstance(indoor, bool):
            raise ValidationError("Indoor flag must be a boolean")

        self._name = name
        self._indoor = indoor

    def __repr__(self) -> str:
        return f"Cat(name={self._name!r}, indoor={self._indoor})"

    def speak(self) -> str:
        if self._indoor:
            return "Meow~ (comfortable purr)"
        return "MEOW! (street cat attitude)"

    def name(self) -> str:
        return self._name


class Duck(Animal, Swimmer):
    """A duck: speaks like an Animal and swims like a Swimmer."""

    def __init__(self, name: str):
        validate_animal_name(name, "duck")
        self._name = name

    def __repr__(self) -> str:
        return f"Duck(name={self._name!r})"

    def speak(self) -> str:
        return "Quack quack!"

    def name(self) -> str:
        return self._name

    def swim(self) -> str:
        return f"{self._name} paddles gracefully across the pond"


@dataclass(frozen=True)
class AnimalBase:
    """Shared walking behavior, meant to be embedded rather than subclassed."""

    name: str
    legs: int

    def __post_init__(self):
        """Validate base data after initialization."""
        validate_animal_name(self.name)
        validate_unsigned(self.legs, "legs")

    def walk(self) -> str:
        return f"{self.name} walks on {self.legs} legs"


class Horse(Animal):
    """A horse built by composition: it owns an AnimalBase and forwards to it."""

    def __init__(self, name: str, speed_mph: int):
        validate_animal_name(name, "horse")
        validate_unsigned(speed_mph, "speed", upper_bound=None)

        self._base = AnimalBase(name, HORSE_LEGS)
        self._speed_mph = speed_mph

    def __repr__(self) -> str:
        return f"Horse(name={self._base.name!r}, speed_mph={self._speed_mph})"

    def walk(self) -> str:
        """Delegate to the embedded base."""
        return self._base.walk()

    def gallop(self) -> str:
        return f"{self._base.name} gallops at {self._speed_mph} mph!"

    def speak(self) -> str:
        return "Neigh!"

    def name(self) -> str:
        return self._base.name
