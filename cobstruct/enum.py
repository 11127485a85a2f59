from enum import Enum, auto


class Kind(Enum):
    '''The variant held by a Value'''
    TEXT    = auto()
    INTEGER = auto()
    REAL    = auto()
    BOOLEAN = auto()


class Layout(Enum):
    '''How a Group assigns offsets to the members following a nested Group.

    LEGACY resets the running offset to zero after each nested Group,
    ABSOLUTE keeps counting and relayouts the nested members as well.'''
    LEGACY   = auto()
    ABSOLUTE = auto()


class SortDirection(Enum):
    ASCENDING  = auto()
    DESCENDING = auto()


class QueryType(Enum):
    SELECT = auto()
    INSERT = auto()
    UPDATE = auto()
    DELETE = auto()
