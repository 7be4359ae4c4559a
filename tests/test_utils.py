"""Utility helper tests"""

import pytest

from trellokit.errors import ValidationsFailed
from trellokit.utils import compact_dict, get_ids, require_fields, require_id, require_one_of


def test_compact_dict_drops_none_only():
    assert compact_dict(name='x', desc=None, closed=False) == {'name': 'x', 'closed': False}


def test_require_one_of():
    assert require_one_of(idBoard=None, idCard='k1') == {'idCard': 'k1'}
    with pytest.raises(ValidationsFailed):
        require_one_of(idBoard=None, idCard=None)


def test_require_fields_lists_every_missing_key():
    with pytest.raises(ValidationsFailed, match='name, idBoard'):
        require_fields({'name': '', 'pos': 'top'}, ('name', 'idBoard'), 'cardlist')
    require_fields({'name': 'Doing', 'idBoard': 'b1'}, ('name', 'idBoard'), 'cardlist')


def test_require_id():
    assert require_id('b1', 'close', 'board') == 'b1'
    with pytest.raises(ValidationsFailed, match="close board without id"):
        require_id(None, 'close', 'board')


def test_validations_failed_is_value_error():
    assert issubclass(ValidationsFailed, ValueError)


@pytest.mark.parametrize('payload, expected', [
    ([{'id': 'a'}, {'id': 'b'}], ['a', 'b']),
    ([{'name': 'no id'}, {'id': 'c'}], ['c']),
    ({'id': 'a'}, []),
    (None, []),
])
def test_get_ids(payload, expected):
    assert get_ids(payload) == expected
