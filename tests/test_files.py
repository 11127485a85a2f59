import pytest

from cobstruct.core import Group
from cobstruct.enum import SortDirection
from cobstruct.exceptions import MissingAttachedPayload
from cobstruct.fields import Field
from cobstruct.files import RecordFile, default_directory


def test_file_is_created(tmp_path):
    directory = tmp_path / 'cobol_files'
    phonebook = RecordFile('phonebook.txt', directory=directory)

    assert phonebook.path == directory / 'phonebook.txt'
    assert phonebook.path.is_file()
    assert phonebook.read_all() == ''

    phonebook.delete()
    assert not phonebook.path.exists()


def test_default_directory(tmp_path, monkeypatch):
    monkeypatch.setenv('COBSTRUCT_FILES_DIR', str(tmp_path))

    assert default_directory() == tmp_path
    assert RecordFile('data.txt').path == tmp_path / 'data.txt'


def test_implicit_write(tmp_path):
    phone = Group(Field(0, size=3), Field(0, size=3), Field(0, size=4))
    phonebook = RecordFile('phonebook.txt', directory=tmp_path)

    with pytest.raises(MissingAttachedPayload):
        phonebook.append()

    phonebook.attach(phone)

    phone.set('6195551234')
    phonebook.append_line()
    phone.set('8585550000')
    phonebook.append()
    phonebook.append_line('!')

    # numbers are printed without padding
    assert phonebook.read_all() == '6195551234\n8585550!\n'


def test_read_records(tmp_path):
    phonebook = RecordFile('phonebook.txt', directory=tmp_path)
    phonebook.append('6195551234\n\n8585550000')

    area_code = Field(0, size=3)
    phone = Group(area_code, Field(0, size=3), Field(0, size=4))

    assert [area_code.value for _ in phonebook.read_records(phone)] == [619, 858]


def test_sort(tmp_path):
    data = RecordFile('data.txt', directory=tmp_path)
    data.append('0030B\n0010A\n0020A')

    data.sort(SortDirection.ASCENDING)
    assert data.read_all() == '0030B\n0010A\n0020A'

    code = Field(0, size=4)
    Group(code, Field('', size=1))

    data.sort(SortDirection.ASCENDING, code)
    assert data.read_all() == '0010A\n0020A\n0030B'

    data.sort(SortDirection.DESCENDING, (4, 1), code)
    assert data.read_all() == '0030B\n0020A\n0010A'
