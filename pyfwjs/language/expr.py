"""Expression forms of FWJS.

Everything in FWJS is an expression, including loops, declarations and sequencing. Each
node evaluates itself against an `Environment`; nodes that need a new scope create it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from operator import eq, ge, gt, le, lt
from typing import Callable, Dict, Tuple

from pyfwjs.language.fwjs_callable import ClosureVal
from pyfwjs.language.fwjs_types import UNDEFINED, BoolVal, FwjsValue, IntVal, Op, fwjs_truncated_divmod
from pyfwjs.runtime.environment import Environment
from pyfwjs.utilities import are_of_expected_type, ast_node_pretty_printer
from pyfwjs.utilities.error import (NOT_REACHED, FwjsArithmeticError, FwjsArityMismatch,
                                    FwjsDuplicateDeclaration, FwjsNotCallable, FwjsTypeMismatch)

_COMPARISONS: Dict[Op, Callable[[int, int], bool]] = {
    Op.GT: gt,
    Op.GE: ge,
    Op.LT: lt,
    Op.LE: le,
    Op.EQ: eq,
}


class Expr(ABC):
    """Base class for expressions which have differing attributes."""

    @abstractmethod
    def evaluate(self, env: Environment) -> FwjsValue:
        ...

    def __str__(self) -> str:
        name, values = ast_node_pretty_printer(self, "Expr")
        return f"({name} {' '.join(values)})"


@dataclass(frozen=True)
class ValueExpr(Expr):
    value: FwjsValue

    def evaluate(self, env: Environment) -> FwjsValue:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class VarExpr(Expr):
    name: str

    def evaluate(self, env: Environment) -> FwjsValue:
        return env.resolve(self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PrintExpr(Expr):
    expression: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        value = self.expression.evaluate(env)
        print(value.to_display_string())
        return value


@dataclass(frozen=True)
class BinOpExpr(Expr):
    op: Op
    left: Expr
    right: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        """Evaluate both operands, left first, then apply the operator.

        There is no short-circuiting and no implicit conversion: both operands must be
        ints."""
        left = self.left.evaluate(env)
        right = self.right.evaluate(env)
        if not are_of_expected_type({IntVal}, left, right):
            raise FwjsTypeMismatch.at_expr(
                self, f"Operands of '{self.op}' must be ints, got {left.type_name} and {right.type_name}."
            )
        lhs, rhs = left.as_int(), right.as_int()

        if self.op in _COMPARISONS:
            return BoolVal(_COMPARISONS[self.op](lhs, rhs))
        if self.op is Op.ADD:
            return IntVal(lhs + rhs)
        if self.op is Op.SUBTRACT:
            return IntVal(lhs - rhs)
        if self.op is Op.MULTIPLY:
            return IntVal(lhs * rhs)
        if self.op in {Op.DIVIDE, Op.MOD}:
            if rhs == 0:
                raise FwjsArithmeticError.at_expr(self, "Division by zero.")
            quotient, remainder = fwjs_truncated_divmod(lhs, rhs)
            return IntVal(quotient if self.op is Op.DIVIDE else remainder)

        raise NOT_REACHED

    def __str__(self) -> str:
        return f"({self.op} {self.left} {self.right})"


@dataclass(frozen=True)
class IfExpr(Expr):
    """Unlike in JavaScript, `if` produces a value."""

    condition: Expr
    then_branch: Expr
    else_branch: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        condition = self.condition.evaluate(env)
        if not isinstance(condition, BoolVal):
            raise FwjsTypeMismatch.at_expr(self, f"Condition must be a bool, got {condition.type_name}.")
        if condition.as_bool():
            return self.then_branch.evaluate(env)
        return self.else_branch.evaluate(env)


@dataclass(frozen=True)
class WhileExpr(Expr):
    condition: Expr
    body: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        """Run the loop and produce the value of the last body evaluation.

        A non-bool initial condition skips the loop, but every later check must be a
        bool."""
        condition = self.condition.evaluate(env)
        if not isinstance(condition, BoolVal):
            return UNDEFINED
        result: FwjsValue = UNDEFINED
        while condition.as_bool():
            result = self.body.evaluate(env)
            condition = self.condition.evaluate(env)
            if not isinstance(condition, BoolVal):
                raise FwjsTypeMismatch.at_expr(
                    self, f"Loop condition must stay a bool, got {condition.type_name}."
                )
        return result


@dataclass(frozen=True)
class SeqExpr(Expr):
    first: Expr
    second: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        self.first.evaluate(env)
        return self.second.evaluate(env)


@dataclass(frozen=True)
class VarDeclExpr(Expr):
    name: str
    initializer: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        value = self.initializer.evaluate(env)
        if self.name in env:
            raise FwjsDuplicateDeclaration.at_expr(
                self, f"Variable '{self.name}' is already declared in this scope."
            )
        env.declare(self.name, value)
        return UNDEFINED

    def __str__(self) -> str:
        return f"(var {self.name} {self.initializer})"


@dataclass(frozen=True)
class AssignExpr(Expr):
    name: str
    value: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        value = self.value.evaluate(env)
        env.update(self.name, value)
        return value

    def __str__(self) -> str:
        return f"(= {self.name} {self.value})"


@dataclass(frozen=True)
class FunctionDeclExpr(Expr):
    params: Tuple[str, ...]
    body: Expr

    def evaluate(self, env: Environment) -> FwjsValue:
        return ClosureVal(tuple(self.params), self.body, env)

    def __str__(self) -> str:
        return f"(function [{', '.join(self.params)}] {self.body})"


@dataclass(frozen=True)
class FunctionAppExpr(Expr):
    callee: Expr
    arguments: Tuple[Expr, ...]

    def evaluate(self, env: Environment) -> FwjsValue:
        callee = self.callee.evaluate(env)
        if not isinstance(callee, ClosureVal):
            raise FwjsNotCallable.at_expr(self, f"Can only call closures, got {callee.type_name}.")
        arguments = tuple(arg.evaluate(env) for arg in self.arguments)
        if (found := len(arguments)) != (expected := callee.arity):
            raise FwjsArityMismatch.at_expr(self, f"Expected {expected} arguments but got {found}.")
        return callee.apply(arguments)

    def __str__(self) -> str:
        return f"(call {self.callee} [{', '.join(map(str, self.arguments))}])"
