"""Long option matching for getoptions."""

from .argument_cursor import ArgumentCursor
from .definitions import UNKNOWN_DEFINITION, ArgumentPolicy, OptionTable
from .environment_helper import debug_log
from .results import ErrorKind, Resolution
from .types import LongSplit


class LongOptionMatcher:
    """Resolves one long option token, including abbreviated names."""

    def __init__(self, table: OptionTable):
        self.table = table

    @staticmethod
    def split_argument(text: str) -> LongSplit:
        """
        Split "name=argument" at the first '='.

        The argument is None when there is no '=' at all, and "" when the
        '=' is followed by nothing.
        """
        if "=" in text:
            name, argument = text.split("=", 1)
            return name, argument
        return text, None

    def match(self, text: str, cursor: ArgumentCursor) -> Resolution:
        """
        Resolve a long option.

        Args:
            text: Token without its introducers, e.g. "file=a.txt"
            cursor: Argument cursor; a mandatory argument may consume the next token

        Returns:
            The resolution for the whole token
        """
        name, attached = self.split_argument(text)
        long_match = self.table.match_long(name)
        index = long_match.index

        if long_match.ambiguous:
            debug_log(f"match: --{name} matches definitions {long_match.candidates}")
            return Resolution.unmatched(
                name, attached or "", ErrorKind.AMBIGUOUS_OPTION
            )
        if index == UNKNOWN_DEFINITION:
            return Resolution.unmatched(name, attached or "", ErrorKind.UNKNOWN_OPTION)

        policy = self.table[index].argument_policy

        if policy is ArgumentPolicy.MANDATORY:
            if attached is not None:
                return Resolution.matched(self.table, index, name, attached)
            if cursor.has_next():
                argument = cursor.take_next()
                debug_log(f"match: --{name} took next token {argument!r}")
                return Resolution.matched(self.table, index, name, argument)
            return Resolution.matched(
                self.table, index, name, "", ErrorKind.MISSING_ARGUMENT
            )

        if policy is ArgumentPolicy.OPTIONAL:
            return Resolution.matched(self.table, index, name, attached or "")

        if attached is not None:
            # Definition stays resolved so the caller can report the stray value
            return Resolution.matched(
                self.table, index, name, attached, ErrorKind.UNEXPECTED_ARGUMENT
            )
        return Resolution.matched(self.table, index, name, "")
