"""
A Field is the elementary item of a record: a typed value with a declared
size, directly renderable to text without need for relayouting.
"""
import logging

from . import predicates
from .enum import Kind
from .meta import FieldBase
from .properties import Condition
from .values import Value, INTEGER_RE, REAL_RE
from .exceptions import (
    ConditionEvaluationFailure,
    IndexOutOfRange,
    InvalidOperand,
    SubvalueParseError,
    SubvalueUnsupported,
)


class Field(FieldBase):
    """Elementary item.

    The kind of the value (text, integer, real or boolean) is decided by
    the initial value and it's kept for the whole life of the field: whatever
    is set after is converted to it.

        >>> area_code = Field(0, size=3)
        >>> area_code.set('619')
        >>> area_code.value
        619

    A boolean field with a condition takes its value from the predicate
    applied to the owner field, the initial value passed is ignored.
    """

    def __init__(self, value, size: int, occurs: int = 1, condition=None, name=None, father=None):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        if occurs < 1:
            raise ValueError(f'occurs must be at least 1, not {occurs}')

        if isinstance(condition, tuple):
            condition = Condition(*condition)

        self.name = name
        self.father = father
        self.size = size
        self.occurs = occurs
        self.start_index = 0
        self.condition = condition

        if condition is not None:
            self._value = Value.boolean(False)
            # expressions are resolved through the enclosing group
            # that will evaluate the condition when built
            if isinstance(condition.owner, str) and father is None:
                self.logger.debug("condition %r deferred until the field is grouped", condition)
            else:
                self._evaluate()
        else:
            self._value = Value.of(value)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._value.data!r}, size={self.size})>'

    def __str__(self):
        return self.raw

    @property
    def typed(self) -> Value:
        return self._value

    @property
    def kind(self) -> Kind:
        return self._value.kind

    @property
    def is_bool(self) -> bool:
        return self._value.kind == Kind.BOOLEAN

    @property
    def is_string(self) -> bool:
        return self._value.kind == Kind.TEXT

    @property
    def is_int(self) -> bool:
        return self._value.kind == Kind.INTEGER

    @property
    def is_float(self) -> bool:
        return self._value.kind == Kind.REAL

    value = property(
        fget=lambda self: self._value.data,
        fset=lambda self, value: self.set(value))

    @property
    def raw(self) -> str:
        '''The text this field contributes to its group.'''
        if self.is_bool:
            return ''

        return ' '.join([self._value.render()] * self.occurs)

    def relayout(self, offset=0, layout=None):
        self.logger.debug("relayouting %s at %d", self.name or self.__class__.__name__, offset)
        self.start_index = offset

        return self.size

    def _evaluate(self, quiet=False):
        '''Recompute the value from the condition, keeping the old one on failure.

        quiet is used while the enclosing groups are still being built, when
        an expression can legitimately be not resolvable yet.'''
        try:
            self._value = Value.boolean(self.condition.evaluate(self))
        except Exception as e:
            failure = ConditionEvaluationFailure(str(e), chain=[self.name] if self.name else [])
            if quiet:
                self.logger.debug("condition of %r not resolvable yet: %r", self, failure)
                return
            self.logger.error("failed to evaluate the condition of %r: %r", self, failure, exc_info=True)

    def set(self, new_value=None, fill=False):
        if self.condition is not None:
            self._evaluate()
            return

        if fill and self.is_string:
            text = str(new_value) if new_value is not None else ''
            if not text:
                self.logger.error("failed to fill %r: no character to fill with", self)
                return
            self._value = Value.text(text[0] * self.size)
            return

        if new_value is None:
            self.logger.debug("nothing to set for %r", self)
            return

        if isinstance(new_value, Field):
            new_value = new_value.typed
        elif isinstance(new_value, FieldBase):
            # a group contributes its text
            new_value = new_value.value

        self._value = self._value.coerce(new_value)

    # arithmetic

    def _operand(self, other, operation):
        operand = other.typed if isinstance(other, Field) else other

        if isinstance(operand, Value):
            numeric = operand.is_numeric
            operand = operand.data
        else:
            numeric = isinstance(operand, (int, float)) and not isinstance(operand, bool)

        if not self._value.is_numeric or not numeric:
            raise InvalidOperand(
                f'only numeric types can be {operation}',
                chain=[self.name] if self.name else [])

        return operand

    def _store(self, result):
        self._value = self._value.coerce(result)
        return self._value.data

    def add(self, added):
        return self._store(self._value.data + self._operand(added, 'added'))

    def subtract(self, subtracted):
        return self._store(self._value.data - self._operand(subtracted, 'subtracted'))

    def multiply_by(self, multiplier):
        return self._store(self._value.data * self._operand(multiplier, 'multiplied'))

    def divide_by(self, divisor):
        divisor = self._operand(divisor, 'divided')
        if self.is_int and isinstance(divisor, int):
            # integer division truncates toward zero
            quotient = abs(self._value.data) // abs(divisor)
            if (self._value.data < 0) != (divisor < 0):
                quotient = -quotient
            return self._store(quotient)

        return self._store(self._value.data / divisor)

    # class conditions

    def is_numeric(self) -> bool:
        return predicates.is_numeric(self)

    def is_alphabetic(self) -> bool:
        return predicates.is_alphabetic(self)

    def is_alphabetic_upper(self) -> bool:
        return predicates.is_alphabetic_upper(self)

    def is_alphabetic_lower(self) -> bool:
        return predicates.is_alphabetic_lower(self)

    def is_alphanumeric(self) -> bool:
        return predicates.is_alphanumeric(self)

    # reference modification

    def _range(self, printed, start, length):
        begin = start - 1
        end = len(printed) if length is None else begin + length
        if begin < 0 or end > len(printed) or end < begin:
            raise IndexOutOfRange(
                f"range (start: {start} : length: {length}) outside of '{printed}'",
                chain=[self.name] if self.name else [])

        return begin, end

    def _reparse(self, printed, start, length):
        if self.is_string:
            return Value.text(printed)

        pattern = INTEGER_RE if self.is_int else REAL_RE
        if not pattern.match(printed):
            raise SubvalueParseError(
                f"failed to parse subvalue '{printed}' (start: {start} : length: {length})",
                chain=[self.name] if self.name else [])

        return Value.integer(int(printed)) if self.is_int else Value.real(float(printed))

    def get_subvalue(self, start: int, length: int = None):
        '''Return the part of the value starting at the 1-based position start.'''
        if self.is_bool:
            raise SubvalueUnsupported('boolean fields cannot contain a subvalue')

        printed = self._value.printed()
        begin, end = self._range(printed, start, length)

        return self._reparse(printed[begin:end], start, length).data

    def set_subvalue(self, start: int, length, new_value):
        if self.is_bool:
            raise SubvalueUnsupported('boolean fields cannot contain a subvalue')

        printed = self._value.printed()
        begin, end = self._range(printed, start, length)
        printed = printed[:begin] + str(new_value) + printed[end:]

        self._value = self._reparse(printed, start, length)

    def __eq__(self, other):
        if isinstance(other, Field):
            return self._value == other._value

        if isinstance(other, FieldBase):
            return self._value.data == other.value

        return self._value.data == other

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__
