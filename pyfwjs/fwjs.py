from typing import Optional

from pyfwjs.language.expr import Expr
from pyfwjs.language.fwjs_types import FwjsValue
from pyfwjs.runtime.environment import Environment
from pyfwjs.utilities import dump_internal
from pyfwjs.utilities.configuration import Debug
from pyfwjs.utilities.error import FwjsErrorHandler, FwjsExit, FwjsRuntimeError


class Fwjs:
    def __init__(self, debug_flags: Debug = Debug(0)) -> None:
        self.debug_flags = debug_flags
        self.error_handler = FwjsErrorHandler(debug_flags)
        self.reinitialize_environment()

    def reinitialize_environment(self) -> None:
        self.environment = Environment()

    def run(self, program: Expr) -> Optional[FwjsValue]:
        """Evaluate `program` in the global environment.

        Bindings made by one run stay visible to the next. A failing program is reported
        through the error handler and ends in `FwjsExit`; output it printed before
        failing is not undone."""
        self.error_handler.debug_flags = self.debug_flags
        if self.debug_flags & Debug.DUMP_AST:
            dump_internal("AST", program)
        if self.debug_flags & Debug.NO_INTERPRET:
            raise FwjsExit(0)

        value: Optional[FwjsValue] = None
        try:
            value = program.evaluate(self.environment)
        except FwjsRuntimeError as error:
            self.error_handler.err(error)
        self.error_handler.checkpoint()
        return value
