import pytest

from src.config import Settings
from src.domain.entities import Cat, Dog, Duck, Horse


@pytest.fixture(name="dog")
def dog_fixture() -> Dog:
    return Dog("Rex", 5, "German Shepherd")


@pytest.fixture(name="cat")
def cat_fixture() -> Cat:
    return Cat("Whiskers", True)


@pytest.fixture(name="street_cat")
def street_cat_fixture() -> Cat:
    return Cat("Shadow", False)


@pytest.fixture(name="duck")
def duck_fixture() -> Duck:
    return Duck("Donald")


@pytest.fixture(name="horse")
def horse_fixture() -> Horse:
    return Horse("Spirit", 35)


@pytest.fixture(name="animals")
def animals_fixture(dog, cat, street_cat, duck, horse):
    """The mixed collection used by the polymorphism section."""
    return [dog, cat, street_cat, duck, horse]


@pytest.fixture(name="test_settings")
def test_settings_fixture() -> Settings:
    """Settings isolated from any .env file or environment overrides."""
    return Settings(
        _env_file=None,
        title="OOP CONCEPTS DEMONSTRATION",
        banner_width=60,
        section_rule_width=40,
        log_level="WARNING",
    )
