'''
Classification of values, the equivalent of the class conditions
(NUMERIC, ALPHABETIC, ALPHABETIC-UPPER, ALPHABETIC-LOWER).

An empty (or blank) string satisfies all the alphabetic classes.
'''
import string

from .enum import Kind
from .values import Value


UPPER = frozenset(string.ascii_uppercase)
LOWER = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)


def _unwrap(obj) -> Value:
    # fields carry a typed value
    typed = getattr(obj, 'typed', None)
    if isinstance(typed, Value):
        return typed

    if isinstance(obj, Value):
        return obj

    try:
        return Value.of(obj)
    except TypeError:
        return None


def _made_of(obj, allowed) -> bool:
    value = _unwrap(obj)
    if value is None or value.kind != Kind.TEXT:
        return False

    return all(ch in allowed or ch.isspace() for ch in value.data)


def is_numeric(obj) -> bool:
    value = _unwrap(obj)

    return value is not None and value.is_numeric


def is_alphabetic(obj) -> bool:
    return _made_of(obj, UPPER | LOWER)


def is_alphabetic_upper(obj) -> bool:
    return _made_of(obj, UPPER)


def is_alphabetic_lower(obj) -> bool:
    return _made_of(obj, LOWER)


def is_alphanumeric(obj) -> bool:
    return _made_of(obj, UPPER | LOWER | DIGITS)
