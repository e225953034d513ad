"""Short option matching for getoptions."""

from .argument_cursor import ArgumentCursor
from .definitions import UNKNOWN_DEFINITION, ArgumentPolicy, OptionTable
from .environment_helper import debug_log
from .results import ErrorKind, Resolution


class ShortOptionMatcher:
    """
    Resolves short options one character at a time.

    A block such as "-abc" is consumed by repeated calls to match(): every
    not-allowed option leaves the rest of the block for the next call, while
    an option taking an argument ends the block.
    """

    def __init__(self, table: OptionTable):
        self.table = table

    def match(self, fragment: str, cursor: ArgumentCursor) -> tuple[Resolution, str]:
        """
        Resolve the first character of a short option block.

        Args:
            fragment: Unprocessed rest of the block, without the introducer
            cursor: Argument cursor; a mandatory argument may consume the next token

        Returns:
            The resolution and the part of the fragment still to be processed
        """
        option, rest = fragment[0], fragment[1:]
        index = self.table.short_option_index(option)

        if index == UNKNOWN_DEFINITION:
            return Resolution.unmatched(option, "", ErrorKind.UNKNOWN_OPTION), rest

        policy = self.table[index].argument_policy

        if policy is ArgumentPolicy.MANDATORY:
            # -aARG
            if rest:
                return Resolution.matched(self.table, index, option, rest), ""
            # -a ARG, taken even when ARG looks like an option
            if cursor.has_next():
                argument = cursor.take_next()
                debug_log(f"match: -{option} took next token {argument!r}")
                return Resolution.matched(self.table, index, option, argument), ""
            resolution = Resolution.matched(
                self.table, index, option, "", ErrorKind.MISSING_ARGUMENT
            )
            return resolution, ""

        if policy is ArgumentPolicy.OPTIONAL:
            # Only attached text counts, the next token is never consumed
            return Resolution.matched(self.table, index, option, rest), ""

        return Resolution.matched(self.table, index, option, ""), rest
