"""
Core module for the group items of a record

"""
import logging
from typing import Iterator, List, Tuple

from .enum import Layout
from .fields import Field
from .meta import FieldBase, MetaRecord
from .exceptions import IndexOutOfRange


logger = logging.getLogger(__name__)


class Group(FieldBase):
    """
    Together with Field is the main class that defines a record: it has no
    value of its own, its text is the concatenation of the text of its members
    and its size is the sum of their sizes.

    The offsets of the members are assigned only once, when the group is built.
    """

    # reserved, a record can't use them as names of its fields
    name = None
    father = None
    members = ()
    layout_mode = Layout.LEGACY
    start_index = 0
    bound = False

    def __init__(self, *members, layout=Layout.LEGACY, name=None, father=None):
        self.name = name
        self.father = father
        self.layout_mode = layout
        self.start_index = 0
        self.bound = False

        for member in members:
            if not isinstance(member, (Field, Group)):
                raise TypeError(f"'{member.__class__.__name__}' can't be a member of a group")

        self.members = list(members)
        for member in self.members:
            member.father = self

        self.relayout()

        # conditions referring to siblings by name can be resolved only now
        for field in self.fields():
            if field.condition is not None and isinstance(field.condition.owner, str):
                field._evaluate(quiet=True)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(repr(_) for _ in self.members))

    def __str__(self):
        return self.raw

    def __getattr__(self, name):
        # only called when the normal lookup fails
        if name.startswith('_'):
            raise AttributeError(name)

        for member in self.__dict__.get('members', []):
            if member.name == name:
                return member

        raise AttributeError(f"'{self.__class__.__name__}' has no member named '{name}'")

    def __len__(self):
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def __getitem__(self, index):
        return self.get_item(index)

    def get_item(self, index: int):
        if not isinstance(index, int) or index < 0 or index >= len(self.members):
            raise IndexOutOfRange(
                f'no member at index {index!r} (the group has {len(self.members)})',
                chain=[self.name] if self.name else [])

        return self.members[index]

    def fields(self) -> Iterator[Field]:
        '''Iterate depth first over all the fields contained.'''
        for member in self.members:
            if isinstance(member, Group):
                yield from member.fields()
            else:
                yield member

    @property
    def size(self) -> int:
        '''the size MUST not be set but MUST be derived from the members'''
        size = 0
        for member in self.members:
            size += member.size

        return size

    @property
    def raw(self) -> str:
        value = ''
        for member in self.members:
            member_raw = member.raw
            logger.debug("member '%s' raw=%r", member.name, member_raw)
            value += member_raw

        return value

    @property
    def value(self) -> str:
        return self.raw

    @value.setter
    def value(self, value):
        self.set(value)

    @property
    def layout(self) -> List[Tuple[str, int, int]]:
        return [(member.name, member.start_index, member.size) for member in self.members]

    def relayout(self, offset=0, layout=None):
        '''Assign the offsets of the members.

        With the legacy layout the offsets are relative to the last nested group
        (or to the start of this group): a nested group resets the counter and
        keeps the offsets it has assigned to its own members. With the absolute
        layout the counter continues past the nested groups and their members
        are relayouted too.'''
        layout = layout or self.layout_mode
        self.start_index = offset

        if layout == Layout.ABSOLUTE:
            size = 0
            for member in self.members:
                logger.debug('relayouting %s.%s', self.__class__.__name__, member.name)
                size += member.relayout(offset=offset + size, layout=layout)

            return size

        next_start_index = 0
        for member in self.members:
            if isinstance(member, Group):
                next_start_index = 0
                continue

            logger.debug('relayouting %s.%s', self.__class__.__name__, member.name)
            next_start_index += member.relayout(offset=next_start_index)

        return self.size

    def set(self, new_value, fill=False):
        '''Spread the value among the members.

        The text is padded with spaces up to the size of the group, then each
        member takes as many characters as its size. A boolean field stops the
        distribution after having evaluated itself.'''
        if new_value is None:
            text = ''
        elif isinstance(new_value, FieldBase):
            text = new_value.raw
        else:
            text = str(new_value)

        size = self.size
        if size > len(text):
            text = text.ljust(size)

        self.bound = True
        last_index = 0

        for member in self.members:
            if last_index >= len(text):
                return

            if isinstance(member, Field) and member.is_bool:
                logger.debug('evaluating %r and stopping', member)
                member.set()
                return

            substr = text[last_index:last_index + member.size]
            last_index += member.size

            logger.debug('setting member %s to %r', member.name, substr)
            member.set(substr, fill=fill)

    def __eq__(self, other):
        if isinstance(other, FieldBase):
            return self.value == other.value

        return self.value == other

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = object.__hash__


class Record(Group, metaclass=MetaRecord):
    """
    Declarative group: the members are the fields (or groups) defined as class
    attributes, in the order they are declared.

        class PhoneNumber(Record):
            area_code = Field(0, 3)
            first = Field(0, 3)
            second = Field(0, 4)

        phone = PhoneNumber('6195551234')

    Each instance works on its own copy of the fields.
    """

    def __init__(self, data=None, layout=Layout.LEGACY, name=None, father=None):
        members = [getattr(self, _) for _ in self.get_ordered_fields_name()]
        super().__init__(*members, layout=layout, name=name, father=father)

        self._bind_conditions()

        if data is not None:
            logger.debug("decoding '%s' from %r", self.__class__.__name__, data)
            self.set(data)

    def _bind_conditions(self):
        # each member is a copy of its class attribute, a condition owned
        # by another class attribute must refer to the copy in this record
        for member in self.members:
            condition = getattr(member, 'condition', None)
            if condition is None or not isinstance(condition.owner, FieldBase):
                continue

            owner = condition.owner
            if owner.father is None and owner.name in self._meta.fields:
                logger.debug("binding the condition of '%s' to '%s'", member.name, owner.name)
                condition.owner = getattr(self, owner.name)
                member._evaluate()

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, FieldBase]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))
