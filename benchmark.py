import pathlib
import random
import time
from argparse import ArgumentParser

import pandas
from tqdm import tqdm

from sacommon import utils
from sacommon.pairs import count_cross_pairs
from sacommon.quorum import find_quorum_substrings
from sacommon.stringify import encode
from sacommon.suffix_array import SuffixArray


def parseArgs(argv=None):
    parser = ArgumentParser()

    parser.add_argument('--sizes', type=str, default='1000,10000,50000',
                        help='Comma separated total lengths of the generated input')
    parser.add_argument('--strings', type=int, default=10,
                        help='Number of strings the quorum search runs on')
    parser.add_argument('--alphabet', type=str, default='acgt',
                        help='Alphabet of the random strings')
    parser.add_argument('--min_length', type=int, default=3,
                        help='K for the pair count')
    parser.add_argument('--seed', type=int, default=290956,
                        help='Random seed')
    parser.add_argument('--output', type=pathlib.Path, default=None,
                        help='CSV file to append the timings to')

    return parser.parse_args(argv)


def random_strings(count, total, alphabet, rng):
    size = max(1, total // count)
    return [''.join(rng.choice(alphabet) for _ in range(size)) for _ in range(count)]


def timed(f, *args):
    t1 = time.perf_counter()
    result = f(*args)
    return result, time.perf_counter() - t1


def measure(size, args, rng):
    strings = random_strings(args.strings, size, args.alphabet, rng)
    encoded = encode(strings, args.alphabet)
    sa, build_time = timed(SuffixArray.from_encoded, encoded)
    (length, pieces), quorum_time = timed(find_quorum_substrings, sa, encoded.origin, len(strings))

    a, b = random_strings(2, size, args.alphabet, rng)
    pair_encoded = encode([a, b], args.alphabet)
    pair_sa = SuffixArray.from_encoded(pair_encoded)
    pairs, pairs_time = timed(count_cross_pairs, pair_sa, len(a) - 1, args.min_length)

    return {
        'size': size,
        'n': len(sa),
        'build_s': build_time,
        'quorum_s': quorum_time,
        'quorum_length': length,
        'quorum_pieces': len(pieces),
        'pairs_s': pairs_time,
        'pairs': pairs,
    }


def main(args):
    rng = random.Random(args.seed)
    sizes = utils.format_sizes(args.sizes)

    # Compile the kernels before timing anything.
    warmup = encode(['ab', 'ba'])
    count_cross_pairs(SuffixArray.from_encoded(warmup), 1, 1)
    find_quorum_substrings(SuffixArray.from_encoded(warmup), warmup.origin, 2)

    rows = [measure(size, args, rng) for size in tqdm(sizes)]
    df = pandas.DataFrame(rows)
    print(df.to_string(index=False))

    if args.output is not None:
        exists = utils.ensure_path(args.output)
        df.to_csv(args.output, mode='a' if exists else 'w', header=not exists, index=False)
        print(f'Saved timings to {args.output}', flush=True)
    return df


if __name__ == '__main__':
    args = parseArgs()
    main(args)
