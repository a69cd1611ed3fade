import logging

import pytest

from arrayextra.lib import slicing
from arrayextra.lib.array import append, set as array_set


def upper(v):
    return v.upper()


#
# update
#

def test_update_changes_only_the_given_position(letters):
    assert slicing.update(2, upper, letters) == ('a', 'b', 'C', 'd', 'e')


@pytest.mark.parametrize("index", [-1, 5, 42])
def test_update_out_of_range_returns_input(letters, index):
    result = slicing.update(index, upper, letters)
    assert result == letters
    assert len(result) == len(letters)


def test_update_does_not_call_fn_out_of_range(letters):
    calls = []
    slicing.update(-1, calls.append, letters)
    assert calls == []


def test_update_logs_fallback(letters, debug_log):
    slicing.update(9, upper, letters)
    records = [r for r in debug_log.records if getattr(r, 'operation', None) == 'update']
    assert len(records) == 1
    assert "out of range" in records[0].getMessage()


#
# slice_from / slice_until
#

@pytest.mark.parametrize("index, expected", [
    (0, ('a', 'b', 'c', 'd', 'e')),
    (3, ('d', 'e')),
    (5, ()),
    (9, ()),
    (-1, ('e',)),
    (-2, ('d', 'e')),
    (-9, ('a', 'b', 'c', 'd', 'e')),
])
def test_slice_from(letters, index, expected):
    assert slicing.slice_from(index, letters) == expected


@pytest.mark.parametrize("index, expected", [
    (0, ()),
    (2, ('a', 'b')),
    (5, ('a', 'b', 'c', 'd', 'e')),
    (9, ('a', 'b', 'c', 'd', 'e')),
    (-1, ('a', 'b', 'c', 'd')),
    (-9, ()),
])
def test_slice_until(letters, index, expected):
    assert slicing.slice_until(index, letters) == expected


def test_slice_on_empty_array():
    assert slicing.slice_from(-1, ()) == ()
    assert slicing.slice_until(-1, ()) == ()


#
# split_at
#

@pytest.mark.parametrize("index", [1, 2, 3, 4])
def test_split_at_concatenates_back(letters, index):
    left, right = slicing.split_at(index, letters)
    assert len(left) == index
    assert append(left, right) == letters


@pytest.mark.parametrize("index", [0, -1, -3])
def test_split_at_zero_or_negative(letters, index):
    assert slicing.split_at(index, letters) == ((), letters)


def test_split_at_past_the_end(letters):
    assert slicing.split_at(10, letters) == (letters, ())


#
# pop / remove_at / insert_at
#

def test_pop(letters):
    assert slicing.pop(letters) == ('a', 'b', 'c', 'd')
    assert slicing.pop(('a',)) == ()
    assert slicing.pop(()) == ()


def test_remove_at(letters):
    assert slicing.remove_at(0, letters) == ('b', 'c', 'd', 'e')
    assert slicing.remove_at(4, letters) == ('a', 'b', 'c', 'd')
    assert slicing.remove_at(2, letters) == ('a', 'b', 'd', 'e')


@pytest.mark.parametrize("index", [-1, 5])
def test_remove_at_out_of_range(letters, index):
    assert slicing.remove_at(index, letters) == letters


def test_insert_at():
    assert slicing.insert_at(1, 'b', ('a', 'c')) == ('a', 'b', 'c')
    assert slicing.insert_at(0, 'z', ('a', 'c')) == ('z', 'a', 'c')
    assert slicing.insert_at(2, 'd', ('a', 'c')) == ('a', 'c', 'd')
    assert slicing.insert_at(0, 'a', ()) == ('a',)


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_insert_at_out_of_range(index):
    assert slicing.insert_at(index, 'b', ('a', 'c')) == ('a', 'c')


def test_insert_at_logs_fallback(debug_log):
    slicing.insert_at(-1, 'b', ('a', 'c'))
    assert any(getattr(r, 'operation', None) == 'insert_at' for r in debug_log.records)


def test_inputs_are_not_modified():
    source = ['a', 'b', 'c']
    slicing.update(0, upper, source)
    slicing.remove_at(0, source)
    slicing.insert_at(0, 'z', source)
    slicing.pop(source)
    assert source == ['a', 'b', 'c']


#
# Resizing
#

@pytest.mark.parametrize("new_length, expected", [
    (5, (1, 2, 3, 0, 0)),
    (3, (1, 2, 3)),
    (2, (1, 2)),
    (0, ()),
    (-2, ()),
])
def test_resizel_repeat(new_length, expected):
    assert slicing.resizel_repeat(new_length, 0, (1, 2, 3)) == expected


@pytest.mark.parametrize("new_length, expected", [
    (5, (0, 0, 1, 2, 3)),
    (3, (1, 2, 3)),
    (2, (2, 3)),
    (0, ()),
    (-2, ()),
])
def test_resizer_repeat(new_length, expected):
    assert slicing.resizer_repeat(new_length, 0, (1, 2, 3)) == expected


def test_resizer_repeat_examples():
    assert slicing.resizer_repeat(4, 0, (1, 2)) == (0, 0, 1, 2)
    assert slicing.resizer_repeat(2, 0, (1, 2, 3)) == (2, 3)


@pytest.mark.parametrize("new_length", [-1, 0, 2, 4, 7])
def test_resizel_repeat_matches_slice_until_when_shrinking(letters, new_length):
    result = slicing.resizel_repeat(new_length, '-', letters)
    assert len(result) == max(new_length, 0)
    if 0 < new_length < len(letters):
        assert result == slicing.slice_until(new_length, letters)
    if new_length > len(letters):
        assert result[:len(letters)] == letters
        assert set(result[len(letters):]) == {'-'}


def test_resizel_indexed_uses_absolute_indices():
    seen = []

    def letter(i):
        seen.append(i)
        return 'abcdefgh'[i]

    assert slicing.resizel_indexed(5, letter, ('a', 'b', 'c')) == ('a', 'b', 'c', 'd', 'e')
    assert seen == [3, 4]


def test_resizer_indexed_uses_absolute_indices():
    assert slicing.resizer_indexed(5, lambda i: i * 2, (10, 25, 36)) == (0, 2, 10, 25, 36)


@pytest.mark.parametrize("fn", [slicing.resizel_indexed, slicing.resizer_indexed])
def test_resize_indexed_floors_at_zero(fn):
    assert fn(0, str, (1, 2)) == ()
    assert fn(-1, str, (1, 2)) == ()


def test_resize_indexed_truncates_like_repeat(letters):
    assert slicing.resizel_indexed(2, str, letters) == ('a', 'b')
    assert slicing.resizer_indexed(2, str, letters) == ('d', 'e')


def test_resize_does_not_call_fn_when_shrinking(letters):
    calls = []
    slicing.resizel_indexed(3, calls.append, letters)
    slicing.resizer_indexed(3, calls.append, letters)
    assert calls == []


@pytest.mark.parametrize("operation, call", [
    ('set', lambda source: array_set(7, 'z', source)),
    ('remove_at', lambda source: slicing.remove_at(-1, source)),
    ('split_at', lambda source: slicing.split_at(-1, source)),
    ('update', lambda source: slicing.update(5, upper, source)),
    ('insert_at', lambda source: slicing.insert_at(6, 'z', source)),
])
def test_out_of_range_fallbacks_log_once(letters, debug_log, operation, call):
    call(letters)
    records = [r for r in debug_log.records if getattr(r, 'operation', None) == operation]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG


def test_split_at_zero_does_not_log(letters, debug_log):
    slicing.split_at(0, letters)
    assert not [r for r in debug_log.records if getattr(r, 'operation', None) == 'split_at']
