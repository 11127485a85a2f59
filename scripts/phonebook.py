#!/usr/bin/env python3
'''
Read a phone number, decode it into its record and optionally append it to
the phonebook.
'''
import os
import sys
import logging

from cobstruct.core import Record
from cobstruct.exceptions import CobstructException
from cobstruct.fields import Field
from cobstruct.files import RecordFile
from cobstruct.properties import Condition


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


class PhoneNumber(Record):
    area_code = Field(0, 3)
    first = Field(0, 3)
    second = Field(0, 4)
    is_local = Field(False, 1, condition=Condition('.area_code', lambda x: x == 619))


def usage(progname):
    print(f'''usage: {progname} [--save]

Reads a phone number from the standard input; with --save the number
is appended to phonebook.txt inside $COBSTRUCT_FILES_DIR (~/cobol_files
by default).''')
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) > 2 or (len(sys.argv) == 2 and sys.argv[1] != '--save'):
        usage(sys.argv[0])

    phone = PhoneNumber()
    phone.set(input('Phone: '))

    print(f'You entered: {phone}')
    print(f'Area code: {phone.area_code}')
    print(f'First: {phone.first}')
    print(f'Second: {phone.second}')
    print(f'Is local?: {phone.is_local.value}')

    if len(sys.argv) == 2:
        try:
            phonebook = RecordFile('phonebook.txt', attached=phone)
            phonebook.append_line()
        except (CobstructException, OSError):
            logger.error('failed to save the phone number', exc_info=True)
            sys.exit(2)
