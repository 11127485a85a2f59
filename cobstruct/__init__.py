"""
# Cobstruct: fixed width records for humans.

A record, as intended by the legacy business languages, is a flat text buffer
subdivided into named elementary items (fields) and group items (groups), where
each field has a declared size and a typed value that must fit exactly in it.

Two basic operations are defined for a group and its members:

 1. set(): the decoding, i.e., taking the text and distributing it among the
    members, each one taking as many characters as its size and converting
    them to the kind of its value.

 2. str(): encode the values back into the fixed width text.

to these we add one more

 3. relayout(): assign to each field its offset inside the record. It happens
    only once, when the group is built.

A group can be in one of the following states

 1. UNBOUND (just built, default values)
 2. BOUND (at least one set() done)

"""
from .core import Group, Record
from .enum import Kind, Layout, SortDirection, QueryType
from .fields import Field
from .properties import Condition
from .values import Value
from .sort import sort_lines, sort_text
