import pytest

from pyfwjs.language.fwjs_types import UNDEFINED, IntVal
from pyfwjs.runtime.environment import Environment
from pyfwjs.utilities.error import FwjsDuplicateDeclaration


@pytest.fixture
def chain():
    """A global scope with two nested local scopes."""
    outer = Environment()
    middle = Environment(outer)
    inner = Environment(middle)
    return outer, middle, inner


def test_resolve_walks_outward(chain):
    outer, _, inner = chain
    outer.declare("x", IntVal(1))
    assert inner.resolve("x") == IntVal(1)


def test_resolve_unbound_is_undefined(chain):
    _, _, inner = chain
    assert inner.resolve("missing") is UNDEFINED


def test_declare_shadows_outer_binding(chain):
    outer, _, inner = chain
    outer.declare("x", IntVal(1))
    inner.declare("x", IntVal(2))
    assert inner.resolve("x") == IntVal(2)
    assert outer.resolve("x") == IntVal(1)


def test_declare_twice_in_same_scope_fails():
    env = Environment()
    env.declare("x", IntVal(1))
    with pytest.raises(FwjsDuplicateDeclaration):
        env.declare("x", IntVal(2))
    assert env.resolve("x") == IntVal(1)


def test_update_overwrites_nearest_binding(chain):
    outer, middle, inner = chain
    for env, value in ((outer, 1), (middle, 2), (inner, 3)):
        env.declare("z", IntVal(value))
    inner.update("z", IntVal(30))
    assert inner.resolve("z") == IntVal(30)
    assert middle.resolve("z") == IntVal(2)
    assert outer.resolve("z") == IntVal(1)


def test_update_skips_scopes_without_binding(chain):
    outer, middle, inner = chain
    middle.declare("z", IntVal(2))
    inner.update("z", IntVal(20))
    assert "z" not in inner
    assert middle.resolve("z") == IntVal(20)
    assert outer.resolve("z") is UNDEFINED


def test_update_of_undeclared_name_creates_global(chain):
    outer, middle, inner = chain
    inner.update("y", IntVal(7))
    assert "y" in outer
    assert "y" not in middle
    assert "y" not in inner
    assert outer.resolve("y") == IntVal(7)


def test_global_scope_and_enclosing(chain):
    outer, middle, inner = chain
    assert outer.is_global
    assert not inner.is_global
    assert inner.enclosing is middle
    assert inner.global_scope() is outer
    assert outer.global_scope() is outer
