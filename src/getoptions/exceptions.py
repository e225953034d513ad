"""Custom exceptions for getoptions."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .definitions import OptionDefinition
    from .results import OptionResult


class GetOptionsError(Exception):
    """Base exception for getoptions errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidDefinitionError(GetOptionsError):
    """Raised when an option definition cannot be matched as declared."""

    def __init__(self, definition: "OptionDefinition | None", message: str):
        super().__init__(f"Invalid option definition: {message}")
        self.definition = definition


class ConfigNotFoundError(GetOptionsError):
    """Raised when config file cannot be found."""

    def __init__(self, path: str | None = None):
        message = f"Config file not found{': ' + path if path else ''}"
        super().__init__(message)
        self.path = path


class InvalidConfigError(GetOptionsError):
    """Raised when config file or parser settings have invalid content."""

    def __init__(
        self,
        path: str,
        line_num: int | None = None,
        message: str = "Invalid config format",
    ):
        full_message = f"Invalid config in {path}"
        if line_num:
            full_message += f" at line {line_num}"
        full_message += f": {message}"
        super().__init__(full_message)
        self.path = path
        self.line_num = line_num


class OptionParseError(GetOptionsError):
    """Base for errors raised from a result record by raise_for_errors."""

    def __init__(self, result: "OptionResult", message: str):
        super().__init__(message)
        self.result = result

    @property
    def option(self) -> str:
        return self.result.option


class UnknownOptionError(OptionParseError):
    """Raised for an option that no definition declares."""

    def __init__(self, result: "OptionResult", message: str | None = None):
        super().__init__(result, message or f"no such option: {result.option}")


class AmbiguousOptionError(UnknownOptionError):
    """Raised for a long option prefix shared by several definitions."""

    def __init__(self, result: "OptionResult", candidates: list[str] | None = None):
        self.candidates = candidates or []
        message = f"ambiguous option: {result.option}"
        if self.candidates:
            message += f" ({', '.join(self.candidates)}?)"
        super().__init__(result, message)


class MissingArgumentError(OptionParseError):
    """Raised when an option with a mandatory argument has none."""

    def __init__(self, result: "OptionResult"):
        super().__init__(result, f"option {result.option} requires an argument")


class UnexpectedArgumentError(OptionParseError):
    """Raised when a long option that takes no argument was given one."""

    def __init__(self, result: "OptionResult"):
        super().__init__(
            result,
            f"option {result.option} does not take an argument "
            f"(got {result.argument!r})",
        )


class UnmatchedNonOptionError(OptionParseError):
    """Raised for a non-option when the table declares no non-option definition."""

    def __init__(self, result: "OptionResult"):
        super().__init__(result, f"unexpected argument: {result.argument}")


class FlagWriteError(OptionParseError):
    """Raised when the flag target of a matched option refused the write."""

    def __init__(self, result: "OptionResult"):
        super().__init__(result, f"could not set flag for option {result.option}")
