"""Token classification for getoptions."""

from enum import Enum
from typing import NamedTuple

from .exceptions import InvalidConfigError
from .parser_config import ParserConfig


class OptionMode(Enum):
    """How the current token is processed."""

    SHORT_OPTION = "short_option"
    LONG_OPTION = "long_option"
    NON_OPTION = "non_option"
    # After a bare introducer ("-" or "--") or an empty token every remaining
    # token is a non-option
    NON_OPTIONS = "non_options"


class Classification(NamedTuple):
    """Mode of a token and its text with the introducers removed."""

    mode: OptionMode
    text: str
    terminator: bool = False


class ModeClassifier:
    """Decides whether a token is a short option block, a long option or a non-option."""

    def __init__(self, option_char: str = "-"):
        if not ParserConfig.is_valid_option_char(option_char):
            raise InvalidConfigError(
                "option_char",
                message=f"Invalid option character: {option_char!r}",
            )
        self.option_char = option_char

    def classify(self, token: str, previous_mode: OptionMode) -> Classification:
        """
        Classify a raw token.

        Args:
            token: Token from the argument vector
            previous_mode: Mode of the previous token

        Returns:
            Classification; terminator is True for a token with nothing left
            after its introducers ("-", "--" or ""), which switches to permanent
            non-option mode and yields no result itself
        """
        if previous_mode is OptionMode.NON_OPTIONS:
            return Classification(OptionMode.NON_OPTIONS, token)

        if token and not token.startswith(self.option_char):
            return Classification(OptionMode.NON_OPTION, token)

        text = token[1:]
        mode = OptionMode.SHORT_OPTION
        if text.startswith(self.option_char):
            text = text[1:]
            mode = OptionMode.LONG_OPTION

        if not text:
            return Classification(OptionMode.NON_OPTIONS, text, terminator=True)
        return Classification(mode, text)
