import pytest

from sacommon.stringify import decode, encode
from sacommon.utils import InvalidInput


def test_encode():
    encoded = encode(['abcd', 'cdef'])
    assert encoded.alphabet == 'abcdef'
    assert list(encoded.sequence) == [1, 2, 3, 4, 7, 3, 4, 5, 6, 8]
    assert list(encoded.origin) == [0, 0, 0, 0, 0, 1, 1, 1, 1, 1]
    assert encoded.alphabet_size == 9


def test_encode_with_alphabet():
    encoded = encode(['ba', 'c'], alphabet='abcdefghijklmnopqrstuvwxyz')
    assert list(encoded.sequence) == [2, 1, 27, 3, 28]
    assert encoded.alphabet_size == 29


def test_empty_string_keeps_its_sentinel():
    encoded = encode(['', 'a'])
    assert list(encoded.sequence) == [2, 1, 3]
    assert list(encoded.origin) == [0, 1, 1]


def test_decode():
    assert decode([3, 1, 2], 'abc') == 'cab'
    with pytest.raises(InvalidInput):
        decode([4], 'abc')
    with pytest.raises(InvalidInput):
        decode([0], 'abc')


def test_invalid_input():
    with pytest.raises(InvalidInput):
        encode([])
    with pytest.raises(InvalidInput):
        encode(['abc'], alphabet='ab')
    with pytest.raises(InvalidInput):
        encode(['abc'], alphabet='abca')
