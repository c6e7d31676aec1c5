from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence, Tuple

from pyfwjs.language.fwjs_types import FwjsValue
from pyfwjs.runtime.environment import Environment
from pyfwjs.utilities.error import FwjsArityMismatch

if TYPE_CHECKING:
    from pyfwjs.language.expr import Expr


@dataclass(frozen=True, eq=False)
class ClosureVal(FwjsValue):
    params: Tuple[str, ...]
    body: Expr
    environment: Environment
    type_name = "closure"

    @property
    def arity(self) -> int:
        return len(self.params)

    def apply(self, arguments: Sequence[FwjsValue]) -> FwjsValue:
        """Call the closure.

        The parameters are bound in a fresh scope enclosed by the captured environment,
        not by the caller's, which is what makes scoping lexical."""
        if (found := len(arguments)) != (expected := self.arity):
            raise FwjsArityMismatch(f"Expected {expected} arguments but got {found}.")
        local = Environment(self.environment)
        for param, arg in zip(self.params, arguments):
            local.declare(param, arg)
        return self.body.evaluate(local)

    def to_display_string(self) -> str:
        return f"<closure({', '.join(self.params)})>"

    def __repr__(self) -> str:
        return self.to_display_string()
