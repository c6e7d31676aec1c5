from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING, Optional

from termcolor import colored

from pyfwjs.utilities.configuration import Debug

if TYPE_CHECKING:
    from pyfwjs.language.expr import Expr

NOT_REACHED = AssertionError("Unreachable code reached")


class FwjsExit(Exception):
    """Abort the current run and leave with the given exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


class FwjsError(Exception):
    def __init__(self, message: str, expr: Optional[Expr] = None) -> None:
        super().__init__(message)
        self.message = message
        self.expr = expr

    @classmethod
    def at_expr(cls, expr: Expr, message: str) -> FwjsError:
        return cls(message, expr)

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"[{self.kind}] {self.message}"


class FwjsRuntimeError(FwjsError):
    """Failure of the interpreted program, raised while it is being evaluated."""


class FwjsTypeMismatch(FwjsRuntimeError):
    pass


class FwjsNotCallable(FwjsTypeMismatch):
    pass


class FwjsArityMismatch(FwjsRuntimeError):
    pass


class FwjsDuplicateDeclaration(FwjsRuntimeError):
    pass


class FwjsArithmeticError(FwjsRuntimeError):
    pass


class FwjsErrorHandler:
    EXIT_CODE = 65

    def __init__(self, debug_flags: Debug = Debug(0)) -> None:
        self.debug_flags = debug_flags
        self.error_state = False

    def err(self, error: FwjsError) -> None:
        """Report `error` on stderr and remember that the run failed."""
        self.error_state = True
        kind = error.kind
        if not self.debug_flags & Debug.REDUCED_ERROR_REPORTING:
            kind = colored(kind, "red", attrs=["bold"])
        print(f"[{kind}] {error.message}", file=sys.stderr)
        if error.expr is not None:
            print(f"    in: {error.expr}", file=sys.stderr)
        if self.debug_flags & Debug.BACKTRACE:
            traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)

    def checkpoint(self) -> None:
        """Abort with `FwjsExit` if an error was reported since the last checkpoint."""
        if self.error_state:
            self.error_state = False
            raise FwjsExit(self.EXIT_CODE)
