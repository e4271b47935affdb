from collections import namedtuple

import numpy as np

from sacommon.utils import InvalidInput


Encoded = namedtuple('Encoded', 'sequence origin alphabet alphabet_size')


def char_to_int(alphabet):
    return {c: i + 1 for i, c in enumerate(alphabet)}


def encode(strings, alphabet=None):
    """Join strings into one integer sequence for suffix sorting.

    Characters are mapped to 1..len(alphabet) in alphabet order. String `i`
    is followed by the sentinel len(alphabet) + 1 + i, so every sentinel is
    larger than any character and unique to its string.

    Args:
        strings: list of str
        alphabet: ordered characters allowed in the input; derived from the
            strings (sorted) when None

    Returns:
        Encoded(sequence, origin, alphabet, alphabet_size)
    """
    strings = list(strings)
    if not strings:
        raise InvalidInput('Expected at least one string to encode')
    if alphabet is None:
        alphabet = ''.join(sorted(set(''.join(strings))))
    if len(set(alphabet)) != len(alphabet):
        raise InvalidInput(f'Alphabet {alphabet!r} contains repeated characters')

    mapping = char_to_int(alphabet)
    first_sentinel = len(alphabet) + 1
    n = sum(len(s) for s in strings) + len(strings)

    sequence = np.zeros((n,), dtype=np.int64)
    origin = np.zeros((n,), dtype=np.int64)
    pos = 0
    for idx, s in enumerate(strings):
        start = pos
        for c in s:
            if c not in mapping:
                raise InvalidInput(f'Character {c!r} of string {idx} is not in the alphabet {alphabet!r}')
            sequence[pos] = mapping[c]
            pos += 1
        sequence[pos] = first_sentinel + idx
        origin[start:pos + 1] = idx
        pos += 1

    return Encoded(sequence, origin, alphabet, first_sentinel + len(strings))


def decode(values, alphabet):
    out = []
    for x in values:
        x = int(x)
        if not 1 <= x <= len(alphabet):
            raise InvalidInput(f'Value {x} is not a character of the alphabet {alphabet!r}')
        out.append(alphabet[x - 1])
    return ''.join(out)
