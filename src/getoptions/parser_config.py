"""Parser settings container for getoptions."""

from dataclasses import dataclass, replace
from typing import Any

from .exceptions import InvalidConfigError
from .results import SortMode


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings for one CommandLineParser.

    Args:
        option_char: Character introducing options ("-" gives -a and --all)
        sort_mode: Order of the returned results; unrecognized values sort classically
        include_errors: Keep records that are not ok in the returned results

    Raises:
        InvalidConfigError: If option_char is not a single usable character
    """

    option_char: str = "-"
    sort_mode: SortMode | Any = SortMode.CLASSIC
    include_errors: bool = True

    def __post_init__(self) -> None:
        if not self.is_valid_option_char(self.option_char):
            raise InvalidConfigError(
                "ParserConfig",
                message=f"Invalid option character: {self.option_char!r}",
            )

    @staticmethod
    def is_valid_option_char(value: Any) -> bool:
        """
        Validate the option-introducing character.

        It must be exactly one character, not whitespace and not '='
        (which separates long option names from their arguments).
        """
        return (
            isinstance(value, str)
            and len(value) == 1
            and not value.isspace()
            and value != "="
        )

    def with_overrides(self, **changes: Any) -> "ParserConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)
