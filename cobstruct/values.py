"""
A Value is the runtime content of a field: exactly one of text, integer,
real or boolean. The variant is chosen once and every later assignment is
coerced into it, like a PIC clause does.
"""
import logging
import re

from .enum import Kind


logger = logging.getLogger(__name__)

# what a numeric edit accepts: optional blanks around, optional sign, digits
INTEGER_RE = re.compile(r'^\s*[+-]?\d+\s*$')
REAL_RE = re.compile(r'^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$')

ZEROS = {
    Kind.TEXT: '',
    Kind.INTEGER: 0,
    Kind.REAL: 0.0,
    Kind.BOOLEAN: False,
}


def kind_of(obj) -> Kind:
    # bool before int since bool is a subclass of it
    if isinstance(obj, bool):
        return Kind.BOOLEAN
    if isinstance(obj, int):
        return Kind.INTEGER
    if isinstance(obj, float):
        return Kind.REAL
    if isinstance(obj, str):
        return Kind.TEXT

    raise TypeError(f"'{obj.__class__.__name__}' can't be used as a value")


def parse_integer(text: str) -> int:
    if not INTEGER_RE.match(text):
        logger.debug("'%s' is not an integer, defaulting to zero", text)
        return 0

    return int(text)


def parse_real(text: str) -> float:
    if not REAL_RE.match(text):
        logger.debug("'%s' is not a real, defaulting to zero", text)
        return 0.0

    return float(text)


def parse_boolean(text: str) -> bool:
    return text.strip().lower() == 'true'


class Value(object):
    """Tagged union for the content of a field."""

    __slots__ = ('kind', 'data')

    def __init__(self, kind: Kind, data):
        self.kind = kind
        self.data = data

    @classmethod
    def text(cls, data=''):
        return cls(Kind.TEXT, str(data))

    @classmethod
    def integer(cls, data=0):
        return cls(Kind.INTEGER, int(data))

    @classmethod
    def real(cls, data=0.0):
        return cls(Kind.REAL, float(data))

    @classmethod
    def boolean(cls, data=False):
        return cls(Kind.BOOLEAN, bool(data))

    @classmethod
    def of(cls, obj):
        '''Build the value inferring the kind from the python object.'''
        if isinstance(obj, Value):
            return cls(obj.kind, obj.data)

        return cls(kind_of(obj), obj)

    @classmethod
    def zero(cls, kind: Kind):
        return cls(kind, ZEROS[kind])

    @property
    def is_numeric(self) -> bool:
        return self.kind in (Kind.INTEGER, Kind.REAL)

    def coerce(self, obj) -> "Value":
        '''Return a new value of the same kind obtained from obj.

        Numeric parsing never fails: what can't be read as a number
        becomes zero.'''
        if isinstance(obj, Value):
            obj = obj.data

        if self.kind == Kind.TEXT:
            return Value(Kind.TEXT, obj if isinstance(obj, str) else str(obj))

        if self.kind == Kind.INTEGER:
            if isinstance(obj, bool):
                return Value(Kind.INTEGER, int(obj))
            if isinstance(obj, int):
                return Value(Kind.INTEGER, obj)
            if isinstance(obj, float):
                return Value(Kind.INTEGER, int(obj))  # truncates toward zero
            return Value(Kind.INTEGER, parse_integer(str(obj)))

        if self.kind == Kind.REAL:
            if isinstance(obj, (int, float)) and not isinstance(obj, bool):
                return Value(Kind.REAL, float(obj))
            return Value(Kind.REAL, parse_real(str(obj)))

        if isinstance(obj, bool):
            return Value(Kind.BOOLEAN, obj)

        return Value(Kind.BOOLEAN, parse_boolean(str(obj)))

    def render(self) -> str:
        if self.kind == Kind.BOOLEAN:
            return ''

        return str(self.data)

    def printed(self) -> str:
        '''The textual form of the payload, booleans included.'''
        return str(self.data)

    def __eq__(self, other):
        if isinstance(other, Value):
            return self.data == other.data

        return self.data == other

    def __hash__(self):
        return hash(self.data)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.kind.name}, {self.data!r})>'

    def __str__(self):
        return self.render()
