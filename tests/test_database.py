import sqlite3

import pytest

from cobstruct.core import Group
from cobstruct.database import DatabaseConnection
from cobstruct.enum import QueryType
from cobstruct.fields import Field
from cobstruct.query import QueryBuilder


@pytest.fixture
def connection():
    connection = sqlite3.connect(':memory:')
    connection.execute('CREATE TABLE ctlno (stamp TEXT, program TEXT, counter INTEGER)')
    connection.executemany('INSERT INTO ctlno VALUES (?, ?, ?)', [
        ('211019123000', 'PGM2', 42),
        ('211018090000', 'PGM1', None),
    ])
    connection.commit()

    return connection


def test_query_first_row(connection):
    db = DatabaseConnection(connection)
    query = QueryBuilder.select().from_('ctlno').order_by('program', 'ASC')

    assert db.query(query) == '211018090000PGM1'


def test_query_into_group(connection):
    db = DatabaseConnection(connection)
    program = Field('', size=4)
    counter = Field(0, size=2)
    record = Group(Field('', size=12), program, counter)

    record.set(db.query(QueryBuilder.select().from_('ctlno').where("program = 'PGM2'")))

    assert program.value == 'PGM2'
    assert counter.value == 42


def test_query_next(connection):
    db = DatabaseConnection(connection)

    with pytest.raises(ValueError):
        db.query_next()

    db.query(QueryBuilder.select('program').from_('ctlno').order_by('program', 'DESC'))

    assert db.query_next() == 'PGM2'
    assert db.query_next() == 'PGM1'
    assert db.query_next() == ''


def test_only_select_is_implemented(connection):
    db = DatabaseConnection(connection)

    with pytest.raises(NotImplementedError):
        db.query(QueryBuilder(QueryType.DELETE))


def test_close(connection):
    with DatabaseConnection(connection):
        pass

    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute('SELECT 1')
