from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from pyfwjs.utilities.error import FwjsTypeMismatch


class Op(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    EQ = "=="

    def __str__(self) -> str:
        return self.value


class FwjsValue(ABC):
    """Base class of every runtime value. Values never change once built."""

    type_name = "value"

    @abstractmethod
    def to_display_string(self) -> str:
        ...

    def as_int(self) -> int:
        raise FwjsTypeMismatch(f"Expected an int, got {self.type_name} '{self}'.")

    def as_bool(self) -> bool:
        raise FwjsTypeMismatch(f"Expected a bool, got {self.type_name} '{self}'.")

    def __str__(self) -> str:
        return self.to_display_string()


@dataclass(frozen=True)
class IntVal(FwjsValue):
    value: int
    type_name = "int"

    def to_display_string(self) -> str:
        return str(self.value)

    def as_int(self) -> int:
        return self.value


@dataclass(frozen=True)
class BoolVal(FwjsValue):
    value: bool
    type_name = "bool"

    def to_display_string(self) -> str:
        return "true" if self.value else "false"  # Not Python's "True".

    def as_bool(self) -> bool:
        return self.value


class UndefinedVal(FwjsValue):
    """The absence marker. Use the `UNDEFINED` singleton."""

    type_name = "undefined"

    def to_display_string(self) -> str:
        return "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = UndefinedVal()


def fwjs_truncated_divmod(left: int, right: int) -> Tuple[int, int]:
    """Integer division rounding toward zero; the remainder takes the dividend's sign.

    Python's `divmod` floors instead, which disagrees for operands of mixed sign."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient, left - quotient * right
