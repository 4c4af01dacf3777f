"""
Random number generation for the synthetic parts of the dashboard payloads.

Fallback payloads, traffic variance and simulated feed items are randomized.
Routing every draw through one generator lets tests and demos pin them.
"""

import logging
from typing import Optional

import numpy as np

from internet_pulse.settings import get_settings

logger = logging.getLogger(__name__)


def get_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Get a numpy Generator for payload randomization.

    Args:
        seed: Explicit seed. If None, uses the configured random_seed,
            and fresh OS entropy when that is unset too.

    Returns:
        numpy.random.Generator
    """
    if seed is None:
        seed = get_settings().random_seed
    if seed is not None:
        logger.debug(f"Creating seeded generator (seed={seed})")
    return np.random.default_rng(seed)


def randint(rng: np.random.Generator, low: int, high: int) -> int:
    """Integer in [low, high], both inclusive."""
    return int(rng.integers(low, high + 1))


def uniform(rng: np.random.Generator, low: float, high: float) -> float:
    return float(rng.uniform(low, high))


def choice(rng: np.random.Generator, options):
    return options[int(rng.integers(0, len(options)))]
