"""
Connection wrapper returning rows as the text a group can decode.

Any DB-API 2.0 connection can be wrapped (MySQL in production, sqlite3
in the tests).
"""
import logging

from .enum import QueryType


logger = logging.getLogger(__name__)


class DatabaseConnection(object):

    def __init__(self, connection):
        self.connection = connection
        self.query_builder = None
        self.current_offset = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def query(self, query_builder) -> str:
        '''Execute the query and return the values of the first row joined together.'''
        if query_builder is not self.query_builder:
            self.current_offset = 0
        self.query_builder = query_builder

        if query_builder.query_type != QueryType.SELECT:
            raise NotImplementedError(
                f"query type '{query_builder.query_type.name}' not yet implemented for {self.__class__.__name__}")

        statement = query_builder.build()
        logger.debug('executing %s', statement)

        cursor = self.connection.cursor()
        try:
            cursor.execute(statement)
            row = cursor.fetchone()
        finally:
            cursor.close()

        if row is None:
            return ''

        return ''.join('' if _ is None else str(_) for _ in row)

    def query_next(self) -> str:
        '''Fetch the next record of the last query.'''
        if self.query_builder is None:
            raise ValueError('no query executed yet')

        self.query_builder.offset_by(self.current_offset)
        self.current_offset += 1

        return self.query(self.query_builder)

    def close(self):
        self.connection.close()
