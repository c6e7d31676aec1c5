"""Small FWJS programs, built directly as expression trees.

Each entry pairs the program's source text, used for reporting, with its tree."""

from typing import Dict, NamedTuple

from pyfwjs.language.expr import (AssignExpr, BinOpExpr, Expr, FunctionAppExpr, FunctionDeclExpr, IfExpr,
                                  PrintExpr, SeqExpr, ValueExpr, VarDeclExpr, VarExpr, WhileExpr)
from pyfwjs.language.fwjs_types import IntVal, Op


class Sample(NamedTuple):
    source: str
    program: Expr


def _int(value: int) -> ValueExpr:
    return ValueExpr(IntVal(value))


def _seq(*exprs: Expr) -> Expr:
    """Chain `exprs` into nested sequences, evaluated left to right."""
    program = exprs[-1]
    for expr in reversed(exprs[:-1]):
        program = SeqExpr(expr, program)
    return program


SAMPLES: Dict[str, Sample] = {
    "declare": Sample(
        "var v = 3; v;",
        SeqExpr(VarDeclExpr("v", _int(3)), VarExpr("v")),
    ),
    "arithmetic": Sample(
        "print(10 / 3); 10 % 3;",
        SeqExpr(
            PrintExpr(BinOpExpr(Op.DIVIDE, _int(10), _int(3))),
            BinOpExpr(Op.MOD, _int(10), _int(3)),
        ),
    ),
    "divide_by_zero": Sample(
        "10 / 0;",
        BinOpExpr(Op.DIVIDE, _int(10), _int(0)),
    ),
    "while": Sample(
        "var i = 0; while (i < 3) { i = i + 1; } i;",
        _seq(
            VarDeclExpr("i", _int(0)),
            WhileExpr(
                BinOpExpr(Op.LT, VarExpr("i"), _int(3)),
                AssignExpr("i", BinOpExpr(Op.ADD, VarExpr("i"), _int(1))),
            ),
            VarExpr("i"),
        ),
    ),
    "counter": Sample(
        "var count = 1; var peek = function() { count; }; print(peek()); count = 2; peek();",
        _seq(
            VarDeclExpr("count", _int(1)),
            VarDeclExpr("peek", FunctionDeclExpr((), VarExpr("count"))),
            PrintExpr(FunctionAppExpr(VarExpr("peek"), ())),
            AssignExpr("count", _int(2)),
            FunctionAppExpr(VarExpr("peek"), ()),
        ),
    ),
    "make_adder": Sample(
        "var makeAdder = function(x) { function(y) { x + y; }; }; makeAdder(40)(2);",
        SeqExpr(
            VarDeclExpr(
                "makeAdder",
                FunctionDeclExpr(
                    ("x",),
                    FunctionDeclExpr(("y",), BinOpExpr(Op.ADD, VarExpr("x"), VarExpr("y"))),
                ),
            ),
            FunctionAppExpr(FunctionAppExpr(VarExpr("makeAdder"), (_int(40),)), (_int(2),)),
        ),
    ),
    "factorial": Sample(
        "var fact = function(n) { if (n <= 1) { 1; } else { n * fact(n - 1); } }; fact(5);",
        SeqExpr(
            VarDeclExpr(
                "fact",
                FunctionDeclExpr(
                    ("n",),
                    IfExpr(
                        BinOpExpr(Op.LE, VarExpr("n"), _int(1)),
                        _int(1),
                        BinOpExpr(
                            Op.MULTIPLY,
                            VarExpr("n"),
                            FunctionAppExpr(VarExpr("fact"), (BinOpExpr(Op.SUBTRACT, VarExpr("n"), _int(1)),)),
                        ),
                    ),
                ),
            ),
            FunctionAppExpr(VarExpr("fact"), (_int(5),)),
        ),
    ),
}
