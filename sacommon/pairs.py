import numpy as np
from numba import jit

from sacommon.stringify import encode
from sacommon.suffix_array import SuffixArray
from sacommon.utils import InvalidInput


@jit(nopython=True)
def anchored_pairs(height, suffix, boundary, min_length, anchor_a, weighted):
    """Count suffix pairs whose later member (in sorted order) belongs to the anchor string.

    Offsets <= boundary belong to A, the rest to B. Within a run of heights
    >= min_length every earlier suffix of the opposite string is still open;
    `contribution` holds what all open suffixes give to the current one.
    The stack keeps (count, height) frames with strictly increasing heights:
    a frame's suffixes have been counted as if their LCP with the current
    suffix were the frame's height, which is corrected on merge.
    """
    n = height.shape[0]
    counts = np.zeros((n,), dtype=np.int64)
    heights = np.zeros((n,), dtype=np.int64)
    top = 0
    contribution = 0
    total = 0

    for i in range(1, n):
        h = height[i]
        if h < min_length:
            top = 0
            contribution = 0
            continue

        merged = 0
        prev_in_a = suffix[i - 1] <= boundary
        if prev_in_a != anchor_a:
            merged = 1
            if weighted:
                contribution += h - min_length + 1
            else:
                contribution += 1

        while top > 0 and heights[top - 1] >= h:
            top -= 1
            if weighted:
                contribution -= counts[top] * (heights[top] - h)
            merged += counts[top]
        counts[top] = merged
        heights[top] = h
        top += 1

        if (suffix[i] <= boundary) == anchor_a:
            total += contribution

    return total


def count_cross_pairs(sa, boundary, min_length, weighted=True):
    """Count common-prefix pairs between the suffixes of A and of B.

    Args:
        sa: SuffixArray of A, a separator, B and a terminator
        boundary: last offset of A; offsets after it belong to B
        min_length: K, the shortest common prefix that counts (>= 1)
        weighted: if True, a pair with LCP l counts l - K + 1 times, i.e. once
            per common substring length in [K, l]; otherwise once

    Returns:
        int, the total over both anchor directions
    """
    n = len(sa)
    boundary = int(boundary)
    min_length = int(min_length)
    if min_length < 1:
        raise InvalidInput(f'Minimal length must be at least 1, but got {min_length}')
    if not 0 <= boundary < n:
        raise InvalidInput(f'Boundary offset {boundary} is outside [0, {n})')

    total = 0
    for anchor_a in (True, False):
        total += int(anchored_pairs(sa.height, sa.suffix, boundary, min_length, anchor_a, weighted))
    return total


def common_substring_pairs(a, b, min_length, alphabet=None, weighted=True):
    """Number of (occurrence in a, occurrence in b) pairs of common substrings of length >= min_length."""
    if min_length < 1:
        raise InvalidInput(f'Minimal length must be at least 1, but got {min_length}')
    if not a or not b:
        return 0
    encoded = encode([a, b], alphabet)
    sa = SuffixArray.from_encoded(encoded)
    return count_cross_pairs(sa, len(a) - 1, min_length, weighted)
