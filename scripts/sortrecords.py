#!/usr/bin/env python3
'''
Sort a line sequential file in place by the positions of some fields,
like the SORT statement with its KEY clauses.
'''
import os
import sys
import logging

from cobstruct.enum import SortDirection
from cobstruct.exceptions import CobstructException
from cobstruct.files import RecordFile


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


DIRECTIONS = {
    'asc': SortDirection.ASCENDING,
    'desc': SortDirection.DESCENDING,
}


def usage(progname):
    print(f'''usage: {progname} <path> <asc|desc> <start:size> [<start:size>...]

The keys are the 0-based offset and the size of the fields to sort by,
the first one is the most significant. For example

 $ {progname} /tmp/phonebook.txt asc 0:3 6:4

sorts by area code and then by the last four digits.''')
    sys.exit(1)


def parse_key(text):
    start, size = text.split(':')
    return int(start), int(size)


if __name__ == '__main__':
    if len(sys.argv) < 4 or sys.argv[2] not in DIRECTIONS:
        usage(sys.argv[0])

    path = os.path.abspath(sys.argv[1])

    try:
        keys = [parse_key(_) for _ in sys.argv[3:]]
    except ValueError:
        usage(sys.argv[0])

    try:
        records = RecordFile(os.path.basename(path), directory=os.path.dirname(path))
        records.sort(DIRECTIONS[sys.argv[2]], *keys)
    except (CobstructException, OSError):
        logger.error(f'failed to sort the file at path \'{path}\'', exc_info=True)
        sys.exit(2)
