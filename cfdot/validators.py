"""Errors carrying exit codes, and checks on the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence


class CFDotError(Exception):
    """An error that ends the command with a specific exit code."""

    default_exit_code = 4

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self._code = self.default_exit_code if code is None else code

    def exit_code(self) -> int:
        """Return the process exit code for this error."""
        return self._code


class CFDotValidationError(CFDotError):
    """An error in the arguments or flags given to a command."""

    default_exit_code = 3


def validate_conflicting_short_and_long_flag(
    short: str, long: str, argv: Sequence[str] | None = None
) -> None:
    """Raise if both the short and the long form of a flag were passed."""
    args = sys.argv if argv is None else argv
    if short in args and long in args:
        raise CFDotValidationError(f"Only one of {short} and {long} should be passed")