"""Option table definitions and lookups for getoptions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple, Protocol, Sequence

from .exceptions import InvalidDefinitionError
from .types import DefinitionIndex, FlagValue

UNKNOWN_DEFINITION: DefinitionIndex = -1


class ArgumentPolicy(Enum):
    """Whether an option requires, accepts or refuses an argument."""

    MANDATORY = "mandatory"
    OPTIONAL = "optional"
    NOT_ALLOWED = "not_allowed"


class FlagTarget(Protocol):
    """Caller-owned handle the parser writes flag values through."""

    def set(self, value: FlagValue) -> None: ...


class FlagCell:
    """Mutable cell holding the value of the last matched option that targets it."""

    def __init__(self, value: FlagValue = None):
        self.value = value

    def set(self, value: FlagValue) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"FlagCell({self.value!r})"


def _as_forms(forms: str | Iterable[str], split_chars: bool) -> tuple[str, ...]:
    """Normalize a string or iterable of forms into a tuple."""
    if isinstance(forms, str):
        # "h?" declares two short forms; "help" declares one long form
        return tuple(forms) if split_chars else (forms,)
    return tuple(forms)


@dataclass(frozen=True)
class OptionDefinition:
    """
    One row of the option table.

    A definition with neither short nor long forms designates the
    non-option definition: bare arguments resolve to it.

    Args:
        short_forms: Single characters, e.g. "h?" or ["h", "?"]
        long_forms: Long names, e.g. "help" or ["help", "manual"]
        argument_policy: Whether an argument is mandatory, optional or not allowed
        return_value: Tag reported on match; "" keeps the match out of the results
        flag_target: Object with a set() method written when the option matches
        flag_value: Value written into flag_target

    Raises:
        InvalidDefinitionError: If a short form is not a single character or a
            long form is empty or contains '='
    """

    short_forms: tuple[str, ...] = ()
    long_forms: tuple[str, ...] = ()
    argument_policy: ArgumentPolicy = ArgumentPolicy.NOT_ALLOWED
    return_value: str = ""
    flag_target: FlagTarget | None = field(default=None, compare=False)
    flag_value: FlagValue = 1

    def __post_init__(self) -> None:
        short_forms = _as_forms(self.short_forms, split_chars=True)
        long_forms = _as_forms(self.long_forms, split_chars=False)

        for char in short_forms:
            if not isinstance(char, str) or len(char) != 1:
                raise InvalidDefinitionError(
                    self, f"short form {char!r} must be a single character"
                )
        for name in long_forms:
            if not isinstance(name, str) or not name:
                raise InvalidDefinitionError(
                    self, f"long form {name!r} must be a non-empty string"
                )
            if "=" in name:
                raise InvalidDefinitionError(
                    self, f"long form {name!r} must not contain '='"
                )

        # Frozen dataclass: normalized values are stored through object.__setattr__
        object.__setattr__(self, "short_forms", short_forms)
        object.__setattr__(self, "long_forms", long_forms)

    @property
    def is_non_option(self) -> bool:
        """True if this row catches bare non-option arguments."""
        return not self.short_forms and not self.long_forms


class LongMatch(NamedTuple):
    """Outcome of resolving a long option name against the table."""

    index: DefinitionIndex
    candidates: tuple[DefinitionIndex, ...]

    @property
    def ambiguous(self) -> bool:
        return self.index == UNKNOWN_DEFINITION and len(self.candidates) > 1


class OptionTable:
    """Read-only view over the option definitions with first-wins lookups."""

    def __init__(self, definitions: Sequence[OptionDefinition] = ()):
        self.definitions: tuple[OptionDefinition, ...] = tuple(definitions)
        self._short_index: dict[str, DefinitionIndex] = {}
        self._long_index: dict[str, DefinitionIndex] = {}
        self._non_option_index = UNKNOWN_DEFINITION

        for index, definition in enumerate(self.definitions):
            for char in definition.short_forms:
                self._short_index.setdefault(char, index)
            for name in definition.long_forms:
                self._long_index.setdefault(name, index)
            if definition.is_non_option and self._non_option_index == UNKNOWN_DEFINITION:
                self._non_option_index = index

    def __len__(self) -> int:
        return len(self.definitions)

    def __getitem__(self, index: DefinitionIndex) -> OptionDefinition:
        return self.definitions[index]

    def __iter__(self):
        return iter(self.definitions)

    def short_option_index(self, char: str) -> DefinitionIndex:
        """Index of the first definition declaring the short form, or -1."""
        return self._short_index.get(char, UNKNOWN_DEFINITION)

    def non_option_index(self) -> DefinitionIndex:
        """Index of the first definition without short and long forms, or -1."""
        return self._non_option_index

    def match_long(self, name: str) -> LongMatch:
        """
        Resolve a long option name.

        An exact match wins even when other long forms start with the same
        text. Otherwise the name is treated as an abbreviation: it resolves
        only if exactly one definition has a long form starting with it.

        Args:
            name: Long option name as typed, without introducers or '=argument'

        Returns:
            LongMatch with the resolved index (or -1) and the indexes of every
            definition the name abbreviates
        """
        if name in self._long_index:
            index = self._long_index[name]
            return LongMatch(index, (index,))

        if not name:
            return LongMatch(UNKNOWN_DEFINITION, ())

        candidates = tuple(
            index
            for index, definition in enumerate(self)
            if any(long_form.startswith(name) for long_form in definition.long_forms)
        )
        if len(candidates) == 1:
            return LongMatch(candidates[0], candidates)
        return LongMatch(UNKNOWN_DEFINITION, candidates)

    def candidate_names(self, name: str) -> list[str]:
        """Long forms starting with name, in table order, for diagnostics."""
        names: list[str] = []
        for index in self.match_long(name).candidates:
            for long_form in self.definitions[index].long_forms:
                if long_form.startswith(name) and long_form not in names:
                    names.append(long_form)
        return names
