import logging
import os
from pathlib import Path

from .enum import SortDirection
from .exceptions import MissingAttachedPayload
from .sort import sort_text


logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = Path('~') / 'cobol_files'


def default_directory() -> Path:
    '''The directory used when the file is not given one explicitly.'''
    directory = os.environ.get('COBSTRUCT_FILES_DIR')
    if directory:
        return Path(directory)

    return DEFAULT_DIRECTORY.expanduser()


class RecordFile(object):
    '''This is a simple wrapper around a line sequential file: records are
    appended as text, one per line, and the file can be sorted by the
    position of some fields.

    A group can be attached to the file so that writes without arguments
    use it, like a WRITE of the record associated to the FD.'''

    def __init__(self, path, attached=None, directory=None):
        directory = Path(directory) if directory is not None else default_directory()
        self.path = directory / path
        self.attached = attached

        if not self.path.parent.exists():
            logger.debug("creating directory '%s'", self.path.parent)
            self.path.parent.mkdir(parents=True)

        if not self.path.exists():
            logger.debug("creating file '%s'", self.path)
            self.path.touch()

    def __repr__(self):
        return f'<{self.__class__.__name__}({str(self.path)!r})>'

    def attach(self, data=None):
        self.attached = data

    def _payload(self, data):
        if data is not None:
            return data

        if self.attached is None:
            raise MissingAttachedPayload(f"failed to implicitly write '{self.path}' without attached data")

        return self.attached

    def read_all(self) -> str:
        with open(self.path, 'r') as f:
            return f.read()

    def read_records(self, group):
        '''Decode each non empty line into the group, yielding it every time.'''
        for line in self.read_all().split('\n'):
            if not line:
                continue
            group.set(line)
            yield group

    def append(self, data=None):
        payload = self._payload(data)
        logger.debug("appending %r to '%s'", payload, self.path)

        with open(self.path, 'a') as f:
            f.write(str(payload))

    def append_line(self, data=None):
        payload = self._payload(data)
        logger.debug("appending line %r to '%s'", payload, self.path)

        with open(self.path, 'a') as f:
            f.write(str(payload) + '\n')

    def delete(self):
        self.path.unlink()

    def sort(self, direction=SortDirection.ASCENDING, *keys):
        '''Sort the lines by the ranges of the fields passed.'''
        if not keys:
            return

        contents = sort_text(self.read_all(), keys, direction)

        with open(self.path, 'w') as f:
            f.write(contents)
