"""The fixed console demonstration of the animal contracts."""

from collections.abc import Callable, Iterator
from typing import TypeVar

from .config import Settings, settings as default_settings
from .domain.contracts import Animal
from .domain.entities import Cat, Dog, Duck, Horse

AnimalT = TypeVar("AnimalT", bound=Animal)

KEY_TAKEAWAYS: tuple[str, ...] = (
    "• ABSTRACTION:   Abstract base classes define behavior contracts",
    "• ENCAPSULATION: Private attributes + public getters/setters",
    "• POLYMORPHISM:  Contract-typed references or generic functions",
    "• INHERITANCE:   Composition + default contract methods",
)


def introduce_animal(animal: Animal) -> str:
    """Describe any animal through the contract type (dynamic dispatch)."""
    return f"  {animal.describe()}"


def make_sound(animal: AnimalT) -> str:
    """Report the sound of one concrete animal type (static dispatch).

    Type checkers resolve AnimalT to the concrete class at each call site,
    so ``make_sound(dog)`` is checked against Dog rather than Animal.
    """
    return f"  Sound: {animal.speak()}"


def _section(heading: str, config: Settings) -> Iterator[str]:
    yield ""
    yield heading
    yield config.section_rule


def demonstration_lines(config: Settings | None = None) -> Iterator[str]:
    """Yield the demonstration output one line at a time.

    Args:
        config: Settings controlling title and rule widths (defaults to the
            global settings)

    Yields:
        Output lines without trailing newlines
    """
    config = config or default_settings

    yield config.banner_rule
    yield config.title
    yield config.banner_rule

    dog = Dog("Rex", 5, "German Shepherd")
    cat = Cat("Whiskers", True)
    street_cat = Cat("Shadow", False)
    duck = Duck("Donald")
    horse = Horse("Spirit", 35)

    yield from _section("1. ENCAPSULATION DEMO:", config)
    yield f"  Dog's age: {dog.get_age()}"
    dog.set_age(6)
    yield f"  After birthday: {dog.get_age()}"
    dog.set_age(100)  # Out of range, silently ignored
    yield f"  After invalid set (100): {dog.get_age()}"

    yield from _section(
        "2. ABSTRACTION DEMO (Abstract base classes define interface):", config
    )
    yield f"  {dog.name()} speaks: {dog.speak()}"
    yield f"  {cat.name()} speaks: {cat.speak()}"

    yield from _section(
        "3. POLYMORPHISM DEMO (Same method, different behavior):", config
    )
    animals: list[Animal] = [dog, cat, street_cat, duck, horse]
    for animal in animals:
        yield introduce_animal(animal)

    yield from _section("4. POLYMORPHISM - Generic functions:", config)
    yield make_sound(dog)
    yield make_sound(cat)
    yield make_sound(duck)

    yield from _section("5. COMPOSITION ('Inheritance' via delegation):", config)
    yield f"  {horse.walk()}"
    yield f"  {horse.gallop()}"

    yield from _section(
        "6. MULTIPLE CONTRACTS (Duck is an Animal + Swimmer):", config
    )
    yield f"  {duck.speak()}"
    yield f"  {duck.swim()}"

    yield from _section("7. DEFAULT CONTRACT METHODS ('Inherited' behavior):", config)
    yield f"  {dog.describe()}"
    yield f"  {horse.describe()}"

    yield ""
    yield config.banner_rule
    yield "KEY TAKEAWAYS:"
    yield config.banner_rule
    yield from KEY_TAKEAWAYS
    yield config.banner_rule


def run_demonstration(
    config: Settings | None = None, echo: Callable[[str], None] = print
) -> int:
    """Write every demonstration line through echo.

    Returns:
        Number of lines written
    """
    count = 0
    for line in demonstration_lines(config):
        echo(line)
        count += 1
    return count
