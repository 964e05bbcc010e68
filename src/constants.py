"""Presentation and technical constants."""

from typing import Final

# Console layout
DEFAULT_BANNER_WIDTH: Final = 60
DEFAULT_SECTION_RULE_WIDTH: Final = 40
MAX_RULE_WIDTH: Final = 200
