"""Position tracking over the argument vector for getoptions."""

from typing import Sequence

from .types import ArgsList


class ArgumentCursor:
    """
    Walks the argument vector one token at a time.

    Options with a mandatory argument may take the token after the current
    one; take_next() consumes it so the main loop skips it.
    """

    def __init__(self, arguments: Sequence[str]):
        self.arguments: ArgsList = list(arguments)
        self.index = 0

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.arguments)

    @property
    def current(self) -> str:
        return self.arguments[self.index]

    def has_next(self) -> bool:
        """Check if a token follows the current one."""
        return self.index + 1 < len(self.arguments)

    def take_next(self) -> str:
        """Consume and return the token after the current one."""
        if not self.has_next():
            raise IndexError("no argument follows the current token")
        self.index += 1
        return self.arguments[self.index]

    def advance(self) -> None:
        self.index += 1
