"""Result records, accumulation and sorting for getoptions."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Sequence

from .definitions import UNKNOWN_DEFINITION, OptionTable
from .environment_helper import debug_log
from .exceptions import (
    AmbiguousOptionError,
    FlagWriteError,
    MissingArgumentError,
    OptionParseError,
    UnexpectedArgumentError,
    UnknownOptionError,
    UnmatchedNonOptionError,
)
from .types import DefinitionIndex, InputIndex


class ErrorKind(Enum):
    """Why a result record is not ok."""

    NONE = "none"
    UNKNOWN_OPTION = "unknown_option"
    AMBIGUOUS_OPTION = "ambiguous_option"
    MISSING_ARGUMENT = "missing_argument"
    UNEXPECTED_ARGUMENT = "unexpected_argument"
    UNMATCHED_NON_OPTION = "unmatched_non_option"
    FLAG_WRITE_FAILED = "flag_write_failed"


class SortMode(Enum):
    """Order of the returned result collection."""

    BY_DEFINITION = "definition"
    BY_RETURN_VALUE = "return_value"
    BY_INPUT = "input"
    CLASSIC = "classic"

    @classmethod
    def resolve(cls, value: Any) -> "SortMode":
        """Map a SortMode or its name/value to a member; anything else is CLASSIC."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value.lower() in (member.value, member.name.lower()):
                    return member
        return cls.CLASSIC


class Resolution(NamedTuple):
    """A matched (or failed) token fragment before it gets an input index."""

    real: bool
    return_value: str
    definition_index: DefinitionIndex
    ok: bool
    option: str
    argument: str
    error: ErrorKind = ErrorKind.NONE

    @classmethod
    def matched(
        cls,
        table: OptionTable,
        index: DefinitionIndex,
        option: str,
        argument: str,
        error: ErrorKind = ErrorKind.NONE,
        real: bool = True,
    ) -> "Resolution":
        """Resolution for a known definition; ok unless an error kind is given."""
        return cls(
            real=real,
            return_value=table[index].return_value,
            definition_index=index,
            ok=error is ErrorKind.NONE,
            option=option,
            argument=argument,
            error=error,
        )

    @classmethod
    def unmatched(
        cls, option: str, argument: str, error: ErrorKind, real: bool = True
    ) -> "Resolution":
        """Resolution for text no definition accepts."""
        return cls(real, "", UNKNOWN_DEFINITION, False, option, argument, error)


@dataclass(frozen=True)
class OptionResult:
    """One resolved option or non-option as returned to the caller."""

    return_value: str
    definition_index: DefinitionIndex
    input_index: InputIndex
    ok: bool
    option: str
    argument: str
    error: ErrorKind = ErrorKind.NONE


class ResultAccumulator:
    """
    Collects results for one parse call.

    Options always go to the real bucket. Non-options go to a separate
    bucket under classic sorting so they can be appended after the options;
    under every other sort mode they share the real bucket. Input indexes
    count both buckets, so they stay monotonic whichever bucket a record
    lands in.
    """

    def __init__(
        self,
        table: OptionTable,
        sort_mode: SortMode = SortMode.CLASSIC,
        include_errors: bool = True,
    ):
        self.table = table
        self.sort_mode = SortMode.resolve(sort_mode)
        self.include_errors = include_errors
        self.real: list[OptionResult] = []
        self.non_options: list[OptionResult] = []

    def __len__(self) -> int:
        return len(self.real) + len(self.non_options)

    def add(self, resolution: Resolution) -> OptionResult | None:
        """
        Apply flag side effects and record a resolution.

        Args:
            resolution: Output of one of the matchers

        Returns:
            The stored OptionResult, or None if the record was left out
            (erroneous with include_errors off, or ok with an empty return value)
        """
        ok, error = self._write_flag(resolution)

        if not ok and not self.include_errors:
            debug_log(f"add: dropped erroneous {resolution.option!r} ({error.value})")
            return None

        if ok and not resolution.return_value:
            debug_log(f"add: dropped silent {resolution.option!r}")
            return None

        result = OptionResult(
            return_value=resolution.return_value,
            definition_index=resolution.definition_index,
            input_index=len(self),
            ok=ok,
            option=resolution.option,
            argument=resolution.argument,
            error=error,
        )
        if resolution.real or self.sort_mode is not SortMode.CLASSIC:
            self.real.append(result)
        else:
            self.non_options.append(result)
        debug_log(f"add: {result}")
        return result

    def _write_flag(self, resolution: Resolution) -> tuple[bool, ErrorKind]:
        """Write the definition's flag value, downgrading the record if it fails."""
        if resolution.definition_index == UNKNOWN_DEFINITION:
            return resolution.ok, resolution.error

        definition = self.table[resolution.definition_index]
        if definition.flag_target is None:
            return resolution.ok, resolution.error

        try:
            definition.flag_target.set(definition.flag_value)
        except Exception as e:
            logging.warning(f"Could not set flag for option '{resolution.option}': {e}")
            if resolution.ok:
                return False, ErrorKind.FLAG_WRITE_FAILED
            return False, resolution.error

        return resolution.ok, resolution.error


class ResultSorter:
    """Orders accumulated results according to a sort mode."""

    @staticmethod
    def definition_key(result: OptionResult) -> tuple[DefinitionIndex, InputIndex]:
        return result.definition_index, result.input_index

    @staticmethod
    def return_value_key(result: OptionResult) -> tuple[str, InputIndex]:
        return result.return_value, result.input_index

    @staticmethod
    def sort(accumulator: ResultAccumulator) -> list[OptionResult]:
        """
        Build the final result collection in the accumulator's sort mode.

        The returned list is new and owned by the caller.
        """
        mode = accumulator.sort_mode

        if mode is SortMode.BY_DEFINITION:
            return sorted(accumulator.real, key=ResultSorter.definition_key)
        if mode is SortMode.BY_RETURN_VALUE:
            return sorted(accumulator.real, key=ResultSorter.return_value_key)
        if mode is SortMode.BY_INPUT:
            return list(accumulator.real)
        return accumulator.real + accumulator.non_options


_ERROR_TYPES: dict[ErrorKind, type[OptionParseError]] = {
    ErrorKind.UNKNOWN_OPTION: UnknownOptionError,
    ErrorKind.MISSING_ARGUMENT: MissingArgumentError,
    ErrorKind.UNEXPECTED_ARGUMENT: UnexpectedArgumentError,
    ErrorKind.UNMATCHED_NON_OPTION: UnmatchedNonOptionError,
    ErrorKind.FLAG_WRITE_FAILED: FlagWriteError,
}


def raise_for_errors(
    results: Sequence[OptionResult], table: OptionTable | None = None
) -> Sequence[OptionResult]:
    """
    Raise for the first result that is not ok.

    Args:
        results: Collection returned by a parse call
        table: Option table used for the parse; fills in the candidate
            names of an ambiguous long option when given

    Returns:
        The unchanged results if every record is ok

    Raises:
        OptionParseError: The subclass matching the first failed record's error kind
    """
    for result in results:
        if result.ok:
            continue
        if result.error is ErrorKind.AMBIGUOUS_OPTION:
            candidates = (
                table.candidate_names(result.option) if table is not None else None
            )
            raise AmbiguousOptionError(result, candidates)
        raise _ERROR_TYPES.get(result.error, UnknownOptionError)(result)
    return results
