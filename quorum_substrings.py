import pathlib
from argparse import ArgumentParser

from tqdm import tqdm

from sacommon import utils
from sacommon.dataset import Cases
from sacommon.quorum import NO_COMMON_MARKER, longest_quorum_substrings


def parseArgs(argv=None):
    parser = ArgumentParser()

    parser.add_argument('input', type=str,
                        help='Path to the input: blocks of N followed by N strings, ended by 0. Use - for stdin')
    parser.add_argument('--alphabet', type=str, default=None,
                        help='Characters allowed in the strings, in sort order. Default: taken from the config')
    parser.add_argument('--config', type=pathlib.Path, default=None,
                        help='YAML file overriding the default configuration')
    parser.add_argument('--verbose', action='store_true',
                        help='Print progress to stderr')

    return parser.parse_args(argv)


def format_case(length, substrings, marker=None):
    if length == 0:
        return [marker if marker is not None else NO_COMMON_MARKER]
    return substrings


def main(args):
    config = utils.load_config(args.config)
    alphabet = args.alphabet if args.alphabet is not None else config['alphabet']

    utils.status('Loading cases...', args.verbose)
    cases = Cases(utils.read_lines(args.input), 'quorum')
    utils.status(f'Solving {len(cases)} cases...', args.verbose)

    for strings in tqdm(cases, disable=not args.verbose):
        length, substrings = longest_quorum_substrings(strings, alphabet or None)
        for line in format_case(length, substrings, config['no_common_marker']):
            print(line)
        print()


if __name__ == '__main__':
    args = parseArgs()
    main(args)
