import numpy as np
from numba import jit

from sacommon.stringify import decode, encode
from sacommon.suffix_array import SuffixArray
from sacommon.utils import InvalidInput, as_int_array


NO_COMMON_MARKER = '?'


@jit(nopython=True)
def quorum_runs(height, suffix, origin, num_strings, length, first_only):
    """Find runs of sorted suffixes sharing a prefix of `length` that reach a strict majority.

    A run is a maximal block of sorted positions whose internal heights are
    all >= `length`. Its suffixes start in some set of input strings; the run
    qualifies when that set has more than num_strings / 2 members.

    Args:
        height, suffix: height and suffix tables of the joined sequence
        origin: origin[o] is the input string that owns offset o
        num_strings: number of input strings
        length: required common prefix length, >= 1
        first_only: stop at the first qualifying run

    Output:
        starts: first suffix offset of every qualifying run, in sorted order
    """
    n = height.shape[0]
    seen = -np.ones((num_strings,), dtype=np.int64)
    starts = np.empty((n,), dtype=np.int64)
    found = 0
    run = 0
    distinct = 0
    start = -1
    in_run = False

    for i in range(1, n + 1):
        if i < n and height[i] >= length:
            if not in_run:
                in_run = True
                start = suffix[i - 1]
            s = origin[suffix[i - 1]]
            if seen[s] != run:
                seen[s] = run
                distinct += 1
            s = origin[suffix[i]]
            if seen[s] != run:
                seen[s] = run
                distinct += 1
        elif in_run:
            if 2 * distinct > num_strings:
                starts[found] = start
                found += 1
                if first_only:
                    break
            run += 1
            distinct = 0
            in_run = False

    return starts[:found]


def check_length(sa, origin, num_strings, length):
    """True if some substring of `length` occurs in a strict majority of the strings."""
    if length <= 0:
        return True
    return quorum_runs(sa.height, sa.suffix, origin, num_strings, length, True).shape[0] > 0


def emit_substrings(sa, origin, num_strings, length):
    starts = quorum_runs(sa.height, sa.suffix, origin, num_strings, length, False)
    return [sa.sequence[s:s + length] for s in starts]


def find_quorum_substrings(sa, origin, num_strings, max_length=None):
    """Longest substrings shared by more than half of the joined strings.

    Args:
        sa: SuffixArray of the sentinel-joined strings
        origin: offset -> string id map of the same sequence
        num_strings: how many strings were joined
        max_length: upper bound for the binary search, defaults to the
            largest height

    Returns:
        (length, substrings): substrings are int64 slices of sa.sequence in
        sorted order; (0, []) when no substring reaches a majority.

    With num_strings == 1 a run still needs two suffixes, so the result is the
    longest repeated substring; longest_quorum_substrings answers a single
    string with the string itself.
    """
    origin = as_int_array(origin, 'origin')
    if origin.shape[0] != len(sa):
        raise InvalidInput(f'Origin map has length {origin.shape[0]}, but the sequence has {len(sa)}')
    if num_strings < 1:
        raise InvalidInput(f'Expected at least one string, but got {num_strings}')
    if origin.min() < 0 or origin.max() >= num_strings:
        raise InvalidInput(f'Origin map refers to strings outside [0, {num_strings})')

    hi = int(sa.height.max()) if max_length is None else int(max_length)
    lo = 0
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if check_length(sa, origin, num_strings, mid):
            lo = mid
        else:
            hi = mid - 1

    if lo == 0:
        return 0, []
    return lo, emit_substrings(sa, origin, num_strings, lo)


def longest_quorum_substrings(strings, alphabet=None):
    """Longest substrings common to a strict majority of `strings`.

    Returns:
        (length, [str, ...]) in alphabet order, (0, []) if there is none
    """
    strings = list(strings)
    encoded = encode(strings, alphabet)
    if len(strings) == 1:
        # A lone string is its own majority.
        return (len(strings[0]), [strings[0]]) if strings[0] else (0, [])

    sa = SuffixArray.from_encoded(encoded)
    length, pieces = find_quorum_substrings(sa, encoded.origin, len(strings))
    return length, [decode(piece, encoded.alphabet) for piece in pieces]
