import pytest

from pyfwjs.language.expr import BinOpExpr, VarExpr
from pyfwjs.language.fwjs_callable import ClosureVal
from pyfwjs.language.fwjs_types import UNDEFINED, BoolVal, IntVal, Op, fwjs_truncated_divmod
from pyfwjs.runtime.environment import Environment
from pyfwjs.utilities.error import FwjsArityMismatch, FwjsTypeMismatch


@pytest.mark.parametrize("value, text", [
    (IntVal(42), "42"),
    (IntVal(-7), "-7"),
    (BoolVal(True), "true"),
    (BoolVal(False), "false"),
    (UNDEFINED, "undefined"),
])
def test_display_string(value, text):
    assert value.to_display_string() == text
    assert str(value) == text


def test_closure_display_string():
    closure = ClosureVal(("a", "b"), VarExpr("a"), Environment())
    assert str(closure) == "<closure(a, b)>"


def test_accessors():
    assert IntVal(3).as_int() == 3
    assert BoolVal(False).as_bool() is False


@pytest.mark.parametrize("value", [BoolVal(True), UNDEFINED])
def test_as_int_rejects_other_variants(value):
    with pytest.raises(FwjsTypeMismatch):
        value.as_int()


@pytest.mark.parametrize("value", [IntVal(1), UNDEFINED])
def test_as_bool_rejects_other_variants(value):
    with pytest.raises(FwjsTypeMismatch):
        value.as_bool()


def test_values_are_immutable():
    with pytest.raises(AttributeError):
        IntVal(1).value = 2  # type: ignore


def test_apply_binds_params_in_captured_scope():
    captured = Environment()
    captured.declare("base", IntVal(100))
    closure = ClosureVal(("x",), BinOpExpr(Op.ADD, VarExpr("base"), VarExpr("x")), captured)
    assert closure.apply([IntVal(5)]) == IntVal(105)
    assert "x" not in captured


@pytest.mark.parametrize("arguments", [[IntVal(1)], [IntVal(1), IntVal(2), IntVal(3)]])
def test_apply_checks_arity(arguments):
    closure = ClosureVal(("a", "b"), VarExpr("a"), Environment())
    with pytest.raises(FwjsArityMismatch):
        closure.apply(arguments)


@pytest.mark.parametrize("left, right, expected", [
    (10, 3, (3, 1)),
    (-7, 2, (-3, -1)),
    (7, -2, (-3, 1)),
    (-7, -2, (3, -1)),
    (0, 5, (0, 0)),
])
def test_truncated_divmod(left, right, expected):
    assert fwjs_truncated_divmod(left, right) == expected
