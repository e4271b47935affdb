import os
import pathlib
import sys

import numpy as np
import yaml


DEFAULT_CONFIG = {
    'alphabet': None,
    'weighted': True,
    'no_common_marker': None,
}


class InvalidInput(ValueError):
    """Caller violated an input contract (alphabet, lengths, offsets or judge format)."""


def as_int_array(values, name='sequence'):
    array = np.asarray(values)
    if array.ndim != 1:
        raise InvalidInput(f'{name} must be one-dimensional, but got shape {array.shape}')
    if array.size == 0:
        return np.zeros((0,), dtype=np.int64)
    if not np.issubdtype(array.dtype, np.integer):
        raise InvalidInput(f'{name} must hold integers, but got dtype {array.dtype}')
    return np.ascontiguousarray(array, dtype=np.int64)


def format_sizes(sizes_desc: str):
    try:
        sizes = list(int(x) for x in sizes_desc.split(','))
    except ValueError:
        raise InvalidInput(f'Invalid sizes format, expected a comma separated list of integers, but got {sizes_desc!r}') from None
    if any(x < 1 for x in sizes):
        raise InvalidInput(f'Sizes must be positive, but got {sizes_desc!r}')
    return sizes


def load_config(path=None):
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config
    with open(path, 'r', encoding='utf8') as config_file:
        loaded = yaml.full_load(config_file) or {}
    if not isinstance(loaded, dict):
        raise InvalidInput(f'Config {path} must be a mapping, but got {type(loaded).__name__}')
    unknown = set(loaded.keys()) - set(DEFAULT_CONFIG.keys())
    if unknown:
        raise InvalidInput(f'Unknown config keys in {path}: {", ".join(sorted(unknown))}')
    config.update(loaded)
    return config


def ensure_path(path):
    folderpath = (pathlib.Path(path) / '..').resolve()
    if not os.path.exists(folderpath):
        os.makedirs(folderpath)
    return os.path.exists(path)


def read_lines(path):
    if str(path) == '-':
        return sys.stdin.read().splitlines()
    with open(path, 'r', encoding='utf8') as f:
        return f.read().splitlines()


def status(message, verbose=True):
    if verbose:
        print(message, file=sys.stderr, flush=True)
