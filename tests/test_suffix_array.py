import itertools
import random

import numpy as np
import pytest

from sacommon.stringify import encode
from sacommon.suffix_array import SuffixArray, build_heights, build_suffix_array
from sacommon.utils import InvalidInput


def brute_suffix_array(seq):
    seq = list(seq)
    return sorted(range(len(seq)), key=lambda i: seq[i:])


def brute_lcp(seq, i, j):
    k = 0
    while i + k < len(seq) and j + k < len(seq) and seq[i + k] == seq[j + k]:
        k += 1
    return k


def check_suffix_array(seq, alphabet_size):
    suffix, rank = build_suffix_array(seq, alphabet_size)
    assert list(suffix) == brute_suffix_array(seq)
    assert sorted(suffix) == list(range(len(seq)))
    for i in range(len(seq)):
        assert rank[suffix[i]] == i

    height = build_heights(seq, suffix, rank)
    assert height[0] == 0
    for i in range(1, len(seq)):
        assert height[i] == brute_lcp(seq, suffix[i - 1], suffix[i])


def test_suffix_array():
    # banana with a=1, b=2, n=3
    examples = [
        ([2, 1, 3, 1, 3, 1], [5, 3, 1, 0, 4, 2]),
        ([1, 2, 1, 1, 2], [2, 3, 0, 4, 1]),
        ([1, 2, 1, 3], [0, 2, 1, 3]),
    ]
    for seq, sa in examples:
        suffix, rank = build_suffix_array(seq, 4)
        assert list(suffix) == sa
        assert list(rank[suffix]) == list(range(len(seq)))


def test_heights():
    seq = [2, 1, 3, 1, 3, 1]
    suffix, rank = build_suffix_array(seq, 4)
    assert list(build_heights(seq, suffix, rank)) == [0, 1, 3, 0, 0, 2]


def test_single_value():
    suffix, rank = build_suffix_array([0], 1)
    assert list(suffix) == [0]
    assert list(rank) == [0]


@pytest.mark.parametrize('n', [1, 2, 3, 4, 5, 6])
def test_short(n):
    for seq in itertools.product(range(3), repeat=n):
        check_suffix_array(list(seq), 3)


@pytest.mark.parametrize('n,alphabet_size', [(50, 2), (200, 4), (500, 27), (300, 300)])
def test_random(n, alphabet_size):
    rng = random.Random(n * alphabet_size)
    for _ in range(10):
        seq = [rng.randrange(alphabet_size) for _ in range(n)]
        check_suffix_array(seq, alphabet_size)


def test_sentinel_joined_strings():
    encoded = encode(['abcd', 'cdef'])
    sa = SuffixArray.from_encoded(encoded)
    seq = list(encoded.sequence)
    assert list(sa.suffix) == brute_suffix_array(seq)
    # Sentinels are the largest values, so their suffixes sort last.
    assert set(sa.suffix[-2:]) == {4, 9}
    # No common prefix runs across a string boundary.
    assert sa.height.max() == 2


def test_rebuild_is_identical():
    encoded = encode(['mississippi', 'missouri', 'sip'])
    first = SuffixArray.from_encoded(encoded)
    second = SuffixArray.from_encoded(encoded)
    assert np.array_equal(first.suffix, second.suffix)
    assert np.array_equal(first.rank, second.rank)
    assert np.array_equal(first.height, second.height)


def test_lcp_between_ranks():
    seq = [2, 1, 3, 1, 3, 1]
    sa = SuffixArray(seq, 4)
    for i in range(len(seq)):
        for j in range(len(seq)):
            assert sa.lcp(i, j) == brute_lcp(seq, sa.suffix[i], sa.suffix[j])


def test_invalid_input():
    with pytest.raises(InvalidInput):
        build_suffix_array([], 4)
    with pytest.raises(InvalidInput):
        build_suffix_array([1, 4, 2], 4)
    with pytest.raises(InvalidInput):
        build_suffix_array([1, -1, 2], 4)
    with pytest.raises(InvalidInput):
        build_suffix_array([[1, 2], [2, 1]], 4)
    with pytest.raises(InvalidInput):
        build_suffix_array([0.5, 1.0], 4)
    suffix, rank = build_suffix_array([1, 2, 1], 3)
    with pytest.raises(InvalidInput):
        build_heights([1, 2], suffix, rank)
    with pytest.raises(InvalidInput):
        build_heights([1, 2, 1], [0, 1, 500000000], [0, 1, 2])
    with pytest.raises(InvalidInput):
        build_heights([1, 2, 1], [0, 1, 1], [0, 1, 2])
    with pytest.raises(InvalidInput):
        build_heights([1, 2, 1], [2, 0, 1], [0, 0, 0])


def test_lcp_rejects_ranks_out_of_range():
    sa = SuffixArray([2, 1, 3, 1, 3, 1], 4)
    with pytest.raises(InvalidInput):
        sa.lcp(-1, 0)
    with pytest.raises(InvalidInput):
        sa.lcp(0, 6)
