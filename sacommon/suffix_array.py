import numpy as np
from numba import jit

from sacommon.utils import InvalidInput, as_int_array


@jit(nopython=True)
def doubling_sort(sequence, alphabet_size):
    """Sort all suffixes of `sequence` by prefix doubling with counting sort.

    Args:
        sequence (n,): int64 values in [0, alphabet_size)
        alphabet_size: exclusive upper bound of the values

    Output:
        suffix (n,): suffix[i] is the start offset of the i-th smallest suffix
    """
    n = sequence.shape[0]
    suffix = np.empty((n,), dtype=np.int64)
    # The two rank buffers swap roles every round: `key` holds the current
    # ranks, `second` first holds offsets in second-key order and then
    # receives the new ranks.
    key = np.empty((n,), dtype=np.int64)
    second = np.empty((n,), dtype=np.int64)
    bucket = np.zeros((max(alphabet_size, n) + 1,), dtype=np.int64)

    for i in range(n):
        key[i] = sequence[i]
        bucket[sequence[i]] += 1
    for c in range(1, alphabet_size):
        bucket[c] += bucket[c - 1]
    for i in range(n - 1, -1, -1):
        bucket[key[i]] -= 1
        suffix[bucket[key[i]]] = i

    classes = alphabet_size
    distinct = 0
    j = 1
    while distinct < n and j < n:
        # Offsets without a second half compare as smallest, so they come first.
        p = 0
        for i in range(n - j, n):
            second[p] = i
            p += 1
        for i in range(n):
            if suffix[i] >= j:
                second[p] = suffix[i] - j
                p += 1

        for c in range(classes):
            bucket[c] = 0
        for i in range(n):
            bucket[key[second[i]]] += 1
        for c in range(1, classes):
            bucket[c] += bucket[c - 1]
        for i in range(n - 1, -1, -1):
            o = second[i]
            bucket[key[o]] -= 1
            suffix[bucket[key[o]]] = o

        old = key
        key = second
        second = old
        key[suffix[0]] = 0
        distinct = 1
        for i in range(1, n):
            a = suffix[i]
            b = suffix[i - 1]
            a2 = old[a + j] if a + j < n else -1
            b2 = old[b + j] if b + j < n else -1
            if old[a] == old[b] and a2 == b2:
                key[a] = distinct - 1
            else:
                key[a] = distinct
                distinct += 1

        classes = distinct
        j *= 2

    return suffix


@jit(nopython=True)
def kasai_heights(sequence, suffix, rank):
    n = sequence.shape[0]
    height = np.zeros((n,), dtype=np.int64)
    p = 0
    for i in range(n):
        r = rank[i]
        if r == 0:
            p = 0
            continue
        if p > 0:
            p -= 1
        j = suffix[r - 1]
        while i + p < n and j + p < n and sequence[i + p] == sequence[j + p]:
            p += 1
        height[r] = p
    return height


def inverse(suffix):
    rank = np.empty_like(suffix)
    rank[suffix] = np.arange(suffix.shape[0], dtype=np.int64)
    return rank


def build_suffix_array(sequence, alphabet_size):
    """Returns (suffix, rank) for a sequence of small non-negative integers."""
    sequence = as_int_array(sequence)
    if sequence.shape[0] == 0:
        raise InvalidInput('Cannot build a suffix array of an empty sequence')
    alphabet_size = int(alphabet_size)
    lo, hi = int(sequence.min()), int(sequence.max())
    if lo < 0:
        raise InvalidInput(f'Sequence holds a negative value {lo}')
    if hi >= alphabet_size:
        raise InvalidInput(f'Sequence value {hi} does not fit the alphabet size {alphabet_size}')

    suffix = doubling_sort(sequence, alphabet_size)
    return suffix, inverse(suffix)


def build_heights(sequence, suffix, rank):
    sequence = as_int_array(sequence)
    suffix = as_int_array(suffix, 'suffix')
    rank = as_int_array(rank, 'rank')
    if not sequence.shape[0] == suffix.shape[0] == rank.shape[0]:
        raise InvalidInput(f'Lengths disagree: sequence {sequence.shape[0]}, '
                           f'suffix {suffix.shape[0]}, rank {rank.shape[0]}')
    n = suffix.shape[0]
    if not np.array_equal(np.sort(suffix), np.arange(n)):
        raise InvalidInput(f'suffix is not a permutation of [0, {n})')
    if not np.array_equal(rank[suffix], np.arange(n)):
        raise InvalidInput('rank is not the inverse of suffix')
    return kasai_heights(sequence, suffix, rank)


class SuffixArray:
    """Suffix array of an integer sequence together with its height (LCP) table.

    Attributes
    ----------
    sequence: the int64 sequence the array was built from
    suffix: start offsets of suffixes in ascending order
    rank: inverse of `suffix`
    height: height[i] is the longest common prefix of suffix[i-1] and
        suffix[i]; height[0] is 0
    """

    def __init__(self, sequence, alphabet_size):
        self.sequence = as_int_array(sequence)
        self.alphabet_size = int(alphabet_size)
        self.suffix, self.rank = build_suffix_array(self.sequence, self.alphabet_size)
        self.height = build_heights(self.sequence, self.suffix, self.rank)

    @classmethod
    def from_encoded(cls, encoded):
        return cls(encoded.sequence, encoded.alphabet_size)

    def __len__(self):
        return self.sequence.shape[0]

    def lcp(self, i, j):
        """Longest common prefix of the suffixes ranked i and j."""
        n = len(self)
        if not (0 <= i < n and 0 <= j < n):
            raise InvalidInput(f'Ranks {i}, {j} are outside [0, {n})')
        if i == j:
            return len(self) - int(self.suffix[i])
        lo, hi = min(i, j), max(i, j)
        return int(self.height[lo + 1:hi + 1].min())
