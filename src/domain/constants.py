"""Domain rules and constants for the animal models."""

from typing import Final

# Dogs rarely live beyond this
MAX_DOG_AGE: Final = 25
HORSE_LEGS: Final = 4

# Type limits for small unsigned quantities (ages, leg counts)
MAX_SMALL_UINT: Final = 255
MAX_NAME_LENGTH: Final = 100
