import pytest

from cobstruct.enum import QueryType
from cobstruct.query import QueryBuilder


def test_select_everything():
    assert QueryBuilder.select().from_('ctlno').build() == 'SELECT * FROM ctlno LIMIT 1;'


def test_limit_is_always_one():
    assert QueryBuilder.select().from_('ctlno').limit(10).build() == 'SELECT * FROM ctlno LIMIT 1;'


def test_where():
    query = QueryBuilder.select('a', 'b')\
        .from_('t1', 't2')\
        .where('a = 1')\
        .and_where('b = 2')\
        .or_where('c = 3')

    assert query.build() == 'SELECT a, b FROM t1, t2 WHERE a = 1 AND b = 2 OR c = 3 LIMIT 1;'


def test_where_containment():
    query = QueryBuilder.select()\
        .from_('t')\
        .where('a = 1')\
        .start_where_containment('AND')\
        .or_where('b = 2')\
        .or_where('c = 3')\
        .end_where_containment()

    assert query.build() == 'SELECT * FROM t WHERE a = 1 AND (b = 2 OR c = 3) LIMIT 1;'


def test_order_and_offset():
    query = QueryBuilder.select('id')\
        .from_('t')\
        .order_by('a', 'ASC')\
        .and_order_by('b', 'DESC')\
        .offset_by(5)

    assert query.build() == 'SELECT id FROM t ORDER BY a ASC, b DESC LIMIT 1 OFFSET 5;'


def test_only_select_is_implemented():
    with pytest.raises(NotImplementedError):
        QueryBuilder(QueryType.INSERT).build()
