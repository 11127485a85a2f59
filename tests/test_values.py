import pytest

from cobstruct.enum import Kind
from cobstruct.values import Value


def test_kind_is_inferred():
    assert Value.of('abc').kind == Kind.TEXT
    assert Value.of(12).kind == Kind.INTEGER
    assert Value.of(1.5).kind == Kind.REAL
    # bool must not be mistaken for an integer
    assert Value.of(True).kind == Kind.BOOLEAN

    with pytest.raises(TypeError):
        Value.of([1, 2])


def test_coerce_keeps_the_kind():
    integer = Value.integer(7)

    assert integer.coerce(' 42 ').data == 42
    assert integer.coerce('-3').data == -3
    assert integer.coerce(3.9).data == 3
    assert integer.coerce(-3.9).data == -3
    assert integer.coerce('12.5').kind == Kind.INTEGER

    real = Value.real()

    assert real.coerce('3.25').data == 3.25
    assert real.coerce('.5').data == 0.5
    assert real.coerce(2).data == 2.0
    assert isinstance(real.coerce(2).data, float)

    assert Value.text().coerce(12).data == '12'
    assert Value.boolean().coerce('TRUE').data is True
    assert Value.boolean().coerce('yes').data is False


def test_numeric_parse_defaults_to_zero():
    assert Value.integer(5).coerce('xyz').data == 0
    assert Value.integer(5).coerce('1_000').data == 0
    assert Value.integer(5).coerce('   ').data == 0
    assert Value.real(5.0).coerce('inf').data == 0.0
    assert Value.real(5.0).coerce('nan').data == 0.0


def test_render():
    assert Value.text('abc').render() == 'abc'
    assert Value.integer(42).render() == '42'
    assert Value.real(4.5).render() == '4.5'
    assert Value.boolean(True).render() == ''
    assert Value.boolean(True).printed() == 'True'


def test_equality():
    assert Value.integer(3) == Value.integer(3)
    assert Value.integer(3) == 3
    assert Value.text('a') != Value.text('b')
    assert Value.zero(Kind.TEXT) == ''


def test_equal_values_hash_the_same():
    assert Value.integer(1) == Value.real(1.0)
    assert hash(Value.integer(1)) == hash(Value.real(1.0))
    assert len({Value.integer(2), Value.real(2.0), 2}) == 1
