'''
Builder for the single record SELECT statements used to fill a group
from a table.
'''
from .enum import QueryType


class QueryBuilder(object):
    """
        >>> QueryBuilder.select().from_('ctlno').where('id = 1').build()
        'SELECT * FROM ctlno WHERE id = 1 LIMIT 1;'

    The statements always fetch one row: limit() is accepted but ignored.
    """

    def __init__(self, query_type=QueryType.SELECT):
        self.query_type = query_type
        self.selections = []
        self.tables = []
        self.condition = None
        self.ordering = None
        self.offset = None

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.query_type.name})>'

    @classmethod
    def select(cls, *columns):
        builder = cls(QueryType.SELECT)
        builder.selections = list(columns) if columns else ['*']

        return builder

    def from_(self, *tables):
        self.tables = list(tables)
        return self

    def where(self, condition):
        self.condition = condition
        return self

    def _extend_where(self, text):
        self.condition = (self.condition or '') + text
        return self

    def _combine_where(self, operator, condition):
        # the first condition inside a containment has no operator
        if self.condition is None or self.condition.endswith('('):
            return self._extend_where(condition)

        return self._extend_where(f' {operator} {condition}')

    def and_where(self, condition):
        return self._combine_where('AND', condition)

    def or_where(self, condition):
        return self._combine_where('OR', condition)

    def start_where_containment(self, combined_op):
        return self._extend_where(f' {combined_op} (')

    def end_where_containment(self):
        return self._extend_where(')')

    def order_by(self, column, direction):
        self.ordering = f'{column} {direction}'
        return self

    def and_order_by(self, column, direction):
        self.ordering = (self.ordering or '') + f', {column} {direction}'
        return self

    def limit(self, limit):
        # TODO: honor the limit once DatabaseConnection can return more than one row
        return self

    def offset_by(self, offset):
        self.offset = offset
        return self

    def build(self) -> str:
        if self.query_type == QueryType.SELECT:
            return self._build_select()

        raise NotImplementedError(f"query type '{self.query_type.name}' not yet implemented")

    def _build_select(self):
        selections = ', '.join(self.selections)
        tables = ', '.join(self.tables)
        where = '' if self.condition is None else f' WHERE {self.condition}'
        order_by = '' if self.ordering is None else f' ORDER BY {self.ordering}'
        offset = '' if self.offset is None else f' OFFSET {self.offset}'

        return f'SELECT {selections} FROM {tables}{where}{order_by} LIMIT 1{offset};'
