import numpy as np
from enum import Enum


def get_float_format(f: int | float | str = '2.3'):
    prefix = '.' if isinstance(f, int) else ''
    suffix = '' if isinstance(f, str) and f.endswith('f') else 'f'
    return f'{prefix}{f}{suffix}'


def to_str(x, f: int | float | str = 2.3):
    if isinstance(x, Enum):
        return x.name.replace('_', ' ').title()
    elif isinstance(x, (float, np.floating)):
        return f"{x:{get_float_format(f)}}"
    elif isinstance(x, (list, tuple, np.ndarray)):
        s = ', '.join([to_str(xx, f=f) for xx in x])
        return f'({s})' if isinstance(x, tuple) else f'[{s}]'
    elif isinstance(x, dict):
        return ', '.join([f"{key}={to_str(val, f=f)}" for key, val in x.items()])
    else:
        return str(x)
