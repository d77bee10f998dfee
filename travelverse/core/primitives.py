"""
Scoring Primitives: small numeric utilities shared by every scorer.

Randomness is always passed in as a RandomSource. Nothing in the scoring
engine calls the module-level functions of `random`, so any computation can
be replayed exactly by handing it the same draw sequence.

Noise Model:
    noisy = value + (r - 0.5) * 2 * magnitude,   r ~ U[0, 1)

    The result lies in [value - magnitude, value + magnitude) and callers
    must clamp it back into their score interval.
"""

import hashlib
import logging
import random
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform random source yielding floats in [0, 1)."""

    def next(self) -> float:
        ...


def seed_from_string(seed: str) -> int:
    """Derive a stable integer seed from an arbitrary string."""
    return int(hashlib.md5(seed.encode()).hexdigest()[:8], 16)


class SeededRandomSource:
    """
    RandomSource backed by a private `random.Random` instance.

    Args:
        seed: Integer or string seed. String seeds are hashed with md5 so
              request identifiers can be used directly. None seeds from
              system entropy.

    Example:
        >>> rng = SeededRandomSource("session-42")
        >>> 0.0 <= rng.next() < 1.0
        True
    """

    def __init__(self, seed: Optional[Union[int, str]] = None):
        if isinstance(seed, str):
            seed = seed_from_string(seed)
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        return self._random.random()


class SequenceRandomSource:
    """
    RandomSource that replays a fixed sequence of draws, cycling when exhausted.

    Used for deterministic tests: SequenceRandomSource([0.5]) returns 0.5
    for every draw.
    """

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceRandomSource needs at least one value")
        for v in self.values:
            if not (0.0 <= v < 1.0):
                raise ValueError(f"Random draws must lie in [0, 1), got {v}")
        self._index = 0
        self.draws = 0

    def next(self) -> float:
        value = self.values[self._index]
        self._index = (self._index + 1) % len(self.values)
        self.draws += 1
        return value


def clamp(value: float, lo: float, hi: float) -> float:
    """Bound value to the closed interval [lo, hi]."""
    if lo > hi:
        raise ValueError(f"Invalid interval: lo={lo} > hi={hi}")
    return max(lo, min(hi, value))


def wrap_longitude(lng: float) -> float:
    """Wrap a longitude in degrees into [-180, 180)."""
    wrapped = (lng + 180.0) % 360.0 - 180.0
    # float modulo of a tiny negative value can round up to 360
    return wrapped - 360.0 if wrapped >= 180.0 else wrapped


def bound_position(lat: float, lng: float) -> Tuple[float, float]:
    """Clamp latitude to [-90, 90] and wrap longitude into [-180, 180)."""
    return clamp(lat, -90.0, 90.0), wrap_longitude(lng)


def weighted_sum(terms: Sequence[Tuple[float, float]]) -> float:
    """
    Combine (value, weight) pairs into sum(value * weight).

    Args:
        terms: Sequence of (value, weight) tuples

    Returns:
        The weighted sum, 0.0 for an empty sequence
    """
    if not terms:
        return 0.0

    values = np.array([t[0] for t in terms], dtype=np.float64)
    weights = np.array([t[1] for t in terms], dtype=np.float64)

    return float(np.dot(values, weights))


def inject_noise(value: float, magnitude: float, rng: RandomSource) -> float:
    """
    Perturb value by at most `magnitude` in either direction.

    Consumes exactly one draw from rng. The result is not clamped.
    """
    if magnitude < 0:
        raise ValueError(f"Noise magnitude must be non-negative, got {magnitude}")
    return value + (rng.next() - 0.5) * 2 * magnitude
