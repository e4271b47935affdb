import pathlib
from argparse import ArgumentParser

from tqdm import tqdm

from sacommon import utils
from sacommon.dataset import Cases
from sacommon.pairs import common_substring_pairs


def parseArgs(argv=None):
    parser = ArgumentParser()

    parser.add_argument('input', type=str,
                        help='Path to the input: blocks of K, string A, string B, ended by 0. Use - for stdin')
    parser.add_argument('--alphabet', type=str, default=None,
                        help='Characters allowed in the strings, in sort order. Default: taken from the config')
    parser.add_argument('--unweighted', action='store_true',
                        help='Count every suffix pair with a long enough common prefix once, instead of once per length')
    parser.add_argument('--config', type=pathlib.Path, default=None,
                        help='YAML file overriding the default configuration')
    parser.add_argument('--verbose', action='store_true',
                        help='Print progress to stderr')

    return parser.parse_args(argv)


def main(args):
    config = utils.load_config(args.config)
    alphabet = args.alphabet if args.alphabet is not None else config['alphabet']
    weighted = config['weighted'] and not args.unweighted

    utils.status('Loading cases...', args.verbose)
    cases = Cases(utils.read_lines(args.input), 'pairs')
    utils.status(f'Counting pairs for {len(cases)} cases...', args.verbose)

    for k, a, b in tqdm(cases, disable=not args.verbose):
        print(common_substring_pairs(a, b, k, alphabet or None, weighted))


if __name__ == '__main__':
    args = parseArgs()
    main(args)
