'''
Sorting of fixed width lines by the positions of some fields, what a SORT
statement with several KEY clauses does.
'''
import logging
from collections import namedtuple
from typing import Iterable, List

from .enum import SortDirection


logger = logging.getLogger(__name__)


KeyRange = namedtuple('KeyRange', ['start_index', 'size'])


def key_range(key) -> KeyRange:
    '''Accept a field (or anything with start_index and size) or a (start, size) couple.'''
    if hasattr(key, 'start_index') and hasattr(key, 'size'):
        return KeyRange(key.start_index, key.size)

    start_index, size = key
    return KeyRange(start_index, size)


def extract(line: str, key: KeyRange) -> str:
    if line == '':
        return line

    end = key.start_index + key.size
    line = line.ljust(end)

    return line[key.start_index:end]


def sort_lines(lines: Iterable[str], keys, direction=SortDirection.ASCENDING) -> List[str]:
    '''Stable sort of the lines by the substrings identified by the keys,
    the first key being the most significant one.'''
    lines = list(lines)
    ranges = [key_range(_) for _ in keys]

    if not ranges:
        return lines

    logger.debug('sorting %d lines by %s (%s)', len(lines), ranges, direction.name)

    return sorted(
        lines,
        key=lambda line: tuple(extract(line, _) for _ in ranges),
        reverse=direction == SortDirection.DESCENDING,
    )


def sort_text(text: str, keys, direction=SortDirection.ASCENDING) -> str:
    return '\n'.join(sort_lines(text.split('\n'), keys, direction))
