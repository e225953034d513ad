"""Non-option handling for getoptions."""

from .definitions import UNKNOWN_DEFINITION, OptionTable
from .results import ErrorKind, Resolution


class NonOptionHandler:
    """Resolves bare arguments against the table's non-option definition."""

    def __init__(self, table: OptionTable):
        self.table = table

    def match(self, text: str) -> Resolution:
        index = self.table.non_option_index()
        if index == UNKNOWN_DEFINITION:
            return Resolution.unmatched(
                text, text, ErrorKind.UNMATCHED_NON_OPTION, real=False
            )
        return Resolution.matched(self.table, index, text, text, real=False)
