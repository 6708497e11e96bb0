"""Generate synthetic sequences for testing"""
import numpy as np
from typing import Dict, List

SHAPES = ['ASCENDING', 'DESCENDING', 'ALL_NEGATIVE', 'DUPLICATES', 'PLATEAU', 'RANDOM']


def generate_toy_sequence(shape: str, length: int = 25, seed: int = 7) -> List[int]:
    """
    Generate a synthetic integer sequence for testing.

    Shapes:
    - ASCENDING: strictly increasing, winner at the end
    - DESCENDING: strictly decreasing, winner at the start
    - ALL_NEGATIVE: random values in [-1000, -1]
    - DUPLICATES: few distinct values, many repeats
    - PLATEAU: every element equal
    - RANDOM: random values in [-1000, 1000]

    Returns a plain list of Python ints.
    """
    rng = np.random.default_rng(seed)

    if shape == 'ASCENDING':
        values = np.arange(length)
    elif shape == 'DESCENDING':
        values = np.arange(length, 0, -1)
    elif shape == 'ALL_NEGATIVE':
        values = rng.integers(-1000, 0, size=length)
    elif shape == 'DUPLICATES':
        values = rng.integers(0, 3, size=length)
    elif shape == 'PLATEAU':
        values = np.full(length, 4)
    elif shape == 'RANDOM':
        values = rng.integers(-1000, 1001, size=length)
    else:
        raise ValueError(f"Unknown shape: {shape}")

    return [int(v) for v in values]


def toy_suite(lengths=(2, 3, 4, 5, 7, 8, 9, 16, 31, 100), seed: int = 7) -> Dict[str, List[int]]:
    """Every shape at every length, keyed '<SHAPE>-<length>'"""
    suite = {}
    for shape in SHAPES:
        for length in lengths:
            suite[f"{shape}-{length}"] = generate_toy_sequence(shape, length, seed=seed + length)
    return suite
