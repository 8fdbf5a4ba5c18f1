"""
Password strength estimation from character-set coverage.
"""

from .charset import ALPHABET_SIZES, Category, CategoryPresence, classify
from .estimator import StrengthResult, analyze, estimate

__all__ = [
    "ALPHABET_SIZES",
    "Category",
    "CategoryPresence",
    "classify",
    "StrengthResult",
    "analyze",
    "estimate",
]
