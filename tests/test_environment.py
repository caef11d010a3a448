import pytest

from toxlang.environment import Environment
from toxlang.errors import ToxRuntimeError
from toxlang.tokens import Token, TokenType


def ident(name, line=1):
    return Token(TokenType.IDENTIFIER, name, None, line)


def test_define_and_get():
    env = Environment()
    env.define('a', 1.0)
    assert env.get(ident('a')) == 1.0


def test_define_overwrites_in_same_scope():
    env = Environment()
    env.define('a', 1.0)
    env.define('a', 'two')
    assert env.get(ident('a')) == 'two'


def test_get_walks_enclosing_scopes():
    outer = Environment()
    outer.define('a', 'outer')
    inner = Environment(parent=Environment(parent=outer))
    assert inner.get(ident('a')) == 'outer'


def test_inner_definition_shadows_outer():
    outer = Environment()
    outer.define('a', 'outer')
    inner = Environment(parent=outer)
    inner.define('a', 'inner')
    assert inner.get(ident('a')) == 'inner'
    assert outer.get(ident('a')) == 'outer'


def test_assign_updates_nearest_binding():
    outer = Environment()
    outer.define('a', 1.0)
    inner = Environment(parent=outer)
    inner.assign(ident('a'), 2.0)
    assert outer.values['a'] == 2.0
    assert 'a' not in inner.values


def test_get_undefined_raises_with_token():
    token = ident('missing', line=7)
    with pytest.raises(ToxRuntimeError) as excinfo:
        Environment(parent=Environment()).get(token)
    assert excinfo.value.token is token
    assert excinfo.value.message == "Undefined variable 'missing'."


def test_assign_never_creates_a_global():
    globals_ = Environment()
    inner = Environment(parent=globals_)
    with pytest.raises(ToxRuntimeError):
        inner.assign(ident('x'), 1.0)
    assert 'x' not in globals_.values
    assert 'x' not in inner.values


def test_nil_value_is_still_defined():
    env = Environment()
    env.define('a', None)
    assert env.get(ident('a')) is None
