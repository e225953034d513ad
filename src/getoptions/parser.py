"""Command-line parser orchestrator for getoptions."""

import sys
from typing import Any, Optional, Sequence

from .argument_cursor import ArgumentCursor
from .definitions import OptionDefinition, OptionTable
from .environment_helper import debug_log
from .long_options import LongOptionMatcher
from .mode_classifier import ModeClassifier, OptionMode
from .non_options import NonOptionHandler
from .parser_config import ParserConfig
from .results import OptionResult, ResultAccumulator, ResultSorter, SortMode
from .short_options import ShortOptionMatcher


class CommandLineParser:
    """
    Parses an argument vector against an option table in one pass.

    The parser holds no per-call state, so one instance can parse any
    number of argument vectors. Flag targets named by the definitions are
    written as options are encountered, before the results are sorted.
    """

    def __init__(
        self,
        definitions: Sequence[OptionDefinition] | OptionTable,
        config: Optional[ParserConfig] = None,
    ):
        if isinstance(definitions, OptionTable):
            self.table = definitions
        else:
            self.table = OptionTable(definitions)
        self.config = config or ParserConfig()
        self.classifier = ModeClassifier(self.config.option_char)
        self.short_matcher = ShortOptionMatcher(self.table)
        self.long_matcher = LongOptionMatcher(self.table)
        self.non_option_handler = NonOptionHandler(self.table)

    def parse(self, arguments: Optional[Sequence[str]] = None) -> list[OptionResult]:
        """
        Parse an argument vector.

        Args:
            arguments: Tokens to parse, without the program name;
                defaults to sys.argv[1:]

        Returns:
            The results ordered by the configured sort mode
        """
        if arguments is None:
            arguments = sys.argv[1:]

        cursor = ArgumentCursor(arguments)
        accumulator = ResultAccumulator(
            self.table, self.config.sort_mode, self.config.include_errors
        )
        mode = OptionMode.NON_OPTION

        while not cursor.exhausted:
            classification = self.classifier.classify(cursor.current, mode)
            mode = classification.mode
            debug_log(
                f"parse: token {cursor.index} {cursor.current!r} -> {mode.value}"
            )
            if not classification.terminator:
                self._process_token(mode, classification.text, cursor, accumulator)
            cursor.advance()

        return ResultSorter.sort(accumulator)

    def _process_token(
        self,
        mode: OptionMode,
        text: str,
        cursor: ArgumentCursor,
        accumulator: ResultAccumulator,
    ) -> None:
        """Resolve every fragment of one token."""
        if mode is OptionMode.SHORT_OPTION:
            while text:
                resolution, text = self.short_matcher.match(text, cursor)
                accumulator.add(resolution)
        elif mode is OptionMode.LONG_OPTION:
            accumulator.add(self.long_matcher.match(text, cursor))
        elif text:
            # An empty token in permanent non-option mode is already exhausted
            accumulator.add(self.non_option_handler.match(text))


def parse_command_line(
    definitions: Sequence[OptionDefinition],
    sort_mode: SortMode | Any = SortMode.CLASSIC,
    include_errors: bool = True,
    arguments: Optional[Sequence[str]] = None,
    option_char: str = "-",
) -> list[OptionResult]:
    """
    Parse the command line against an option table.

    Args:
        definitions: The option table
        sort_mode: Order of the returned results
        include_errors: Keep records that are not ok
        arguments: Tokens to parse; defaults to sys.argv[1:]
        option_char: Character introducing options

    Returns:
        A new list of OptionResult owned by the caller
    """
    config = ParserConfig(
        option_char=option_char, sort_mode=sort_mode, include_errors=include_errors
    )
    return CommandLineParser(definitions, config).parse(arguments)
