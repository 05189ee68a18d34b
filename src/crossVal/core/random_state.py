"""
Random source resolution for crossVal.
"""

from typing import Any, Union

import numpy as np

from .exceptions import ConfigError

RandomSource = Union[np.random.RandomState, np.random.Generator]


def check_random_state(seed: Any) -> RandomSource:
    """
    Turn ``seed`` into a numpy random source.

    Args:
        seed: None, an int, or an existing RandomState / Generator

    Returns:
        The process-wide RandomState singleton for None, a new RandomState
        seeded with ``seed`` for an int, or ``seed`` itself when it already is
        a random source.

    Raises:
        ConfigError: If ``seed`` is of any other type
    """
    if seed is None:
        return np.random.mtrand._rand
    if isinstance(seed, (int, np.integer)) and not isinstance(seed, bool):
        return np.random.RandomState(seed)
    if isinstance(seed, (np.random.RandomState, np.random.Generator)):
        return seed
    raise ConfigError(f"{seed!r} cannot be used to seed a numpy.random.RandomState instance")


def shuffle_in_place(rng: RandomSource, values: np.ndarray) -> None:
    """Uniformly permute ``values`` in place with ``rng``."""
    rng.shuffle(values)
