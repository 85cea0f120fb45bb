import pytest

from jisp.errors import JispInvalidSymbol, JispUnboundSymbol
from jisp.types.environment import Environment
from jisp.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1)
    assert env.lookup(x) == 1
    assert x in env
    assert y not in env


def test_lookup_unbound():
    with pytest.raises(JispUnboundSymbol, match="y"):
        Environment().lookup(y)


def test_lookup_delegates_to_outer():
    root = Environment()
    root.define(x, 1)
    inner = root.child().child()
    assert inner.lookup(x) == 1
    assert inner.find(x) is root
    assert inner.find(y) is None


def test_define_writes_innermost_frame():
    root = Environment()
    root.define(x, 1)
    child = root.child()
    child.define(x, 2)
    assert child.lookup(x) == 2
    assert root.lookup(x) == 1


def test_redefine_in_parent_keeps_child_bindings():
    root = Environment()
    root.define(x, 1)
    root.define(y, 1)
    child = root.child()
    child.define(x, 2)
    root.define(x, 5)
    root.define(y, 6)
    assert child.lookup(x) == 2
    # No own binding for y, so the child sees the parent's current value
    assert child.lookup(y) == 6


def test_define_requires_symbol():
    env = Environment()
    with pytest.raises(JispInvalidSymbol):
        env.define("x", 1)
    with pytest.raises(JispInvalidSymbol):
        env.update({x: 1, "y": 2})


def test_update():
    env = Environment()
    env.update({x: 1, y: 2})
    assert env.vars == {x: 1, y: 2}


def test_symbols_compare_by_name():
    assert Symbol("abc") == Symbol("abc")
    assert Symbol("abc") != "abc"
    assert len({Symbol("abc"), Symbol("abc")}) == 1


def test_str_and_repr():
    root = Environment()
    root.define(x, 1.0)
    child = root.child()
    child.define(y, 2.0)
    assert str(root) == "{x: 1.0}"
    assert str(child) == "{y: 2.0} -> ..."
    assert repr(child) == "<Environment chain: {y: 2.0} -> {x: 1.0}>"


def test_symbol_text_forms():
    sym = Symbol("good-enough?")
    assert str(sym) == "good-enough?"
    assert repr(sym) == "Symbol('good-enough?')"
    assert sym.id is Symbol("good-enough?").id
