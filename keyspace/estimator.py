"""
keyspace.estimator

Strength estimator:
- count_combinations(alphabet_size, length): alphabet_size ** length
- key_bits(combinations): floor(log2(combinations))
- estimate(presence, length) / analyze(password): StrengthResult

Combinations are exact Python ints, so very long passwords never overflow
and the bit count is derived from the integer itself rather than a float log.
"""

import logging
from dataclasses import dataclass

from .charset import CategoryPresence, classify

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrengthResult:
    combinations: int
    bits: int
    alphabet_size: int
    length: int


def count_combinations(alphabet_size: int, length: int) -> int:
    """
    Number of passwords of `length` characters over an alphabet of
    `alphabet_size` symbols. A zero length gives 1, including 0 ** 0.
    """
    if alphabet_size < 0:
        raise ValueError("alphabet_size must be >= 0")
    if length < 0:
        raise ValueError("length must be >= 0")
    return alphabet_size ** length


def key_bits(combinations: int) -> int:
    """floor(log2(combinations)); 0 for an empty search space."""
    if combinations < 0:
        raise ValueError("combinations must be >= 0")
    if combinations == 0:
        return 0
    return combinations.bit_length() - 1


def estimate(presence: CategoryPresence, length: int) -> StrengthResult:
    alphabet_size = presence.alphabet_size
    combinations = count_combinations(alphabet_size, length)
    bits = key_bits(combinations)
    if combinations == 0:
        log.warning("empty alphabet for a %d-character password; reporting 0 bits", length)
    return StrengthResult(
        combinations=combinations,
        bits=bits,
        alphabet_size=alphabet_size,
        length=length,
    )


def analyze(password: str) -> StrengthResult:
    """Classify `password` and estimate the size of its search space."""
    presence = classify(password)
    log.debug(
        "classified %d characters: %s",
        len(password),
        ", ".join(sorted(c.value for c in presence.categories)) or "none",
    )
    return estimate(presence, len(password))
