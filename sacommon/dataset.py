from sacommon.utils import InvalidInput


def tokenize(lines):
    for line in lines:
        for token in line.split():
            yield token


def read_count(tokens, what):
    token = next(tokens, None)
    if token is None:
        return None
    try:
        value = int(token)
    except ValueError:
        raise InvalidInput(f'Expected {what}, but got {token!r}') from None
    if value < 0:
        raise InvalidInput(f'Expected a non-negative {what}, but got {value}')
    return value


def read_string(tokens, what):
    token = next(tokens, None)
    if token is None:
        raise InvalidInput(f'Input ended while reading {what}')
    return token


def read_quorum_cases(lines):
    """Yield the string lists of a quorum input: `N`, then N strings, ..., ended by `0`."""
    tokens = tokenize(lines)
    case = 0
    while True:
        n = read_count(tokens, 'a number of strings')
        if not n:
            return
        yield [read_string(tokens, f'string {i + 1} of {n} in case {case + 1}') for i in range(n)]
        case += 1


def read_pair_cases(lines):
    """Yield (K, A, B) triples of a pair-count input ended by `0`."""
    tokens = tokenize(lines)
    case = 0
    while True:
        k = read_count(tokens, 'a minimal length')
        if not k:
            return
        a = read_string(tokens, f'string A in case {case + 1}')
        b = read_string(tokens, f'string B in case {case + 1}')
        yield k, a, b
        case += 1


class Cases(object):
    def __init__(self, lines, kind):
        if kind == 'quorum':
            self.data = list(read_quorum_cases(lines))
        elif kind == 'pairs':
            self.data = list(read_pair_cases(lines))
        else:
            raise InvalidInput(f'Invalid case kind, expected \'quorum\' or \'pairs\', but got {kind!r}')

    def __len__(self):
        return len(self.data)

    def __getitem__(self, i):
        return self.data[i]
