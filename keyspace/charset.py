"""
keyspace.charset

Character-set classifier:
- Category: the seven disjoint character classes a password can draw from
- ALPHABET_SIZES: assumed number of symbols in each class
- classify(password): which classes occur at least once in the password

Only 7-bit ASCII is modelled. Anything else (accented letters, emoji,
bytes >= 128) lands in OTHER with an alphabet size of 1, which underestimates
its real alphabet on purpose.
"""

import enum
import string
from dataclasses import dataclass
from typing import Dict, FrozenSet, Sequence


class Category(enum.Enum):
    DIGIT = "digit"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    PUNCTUATION = "punctuation"
    SPACE = "space"
    TAB = "tab"
    OTHER = "other"


ALPHABET_SIZES: Dict[Category, int] = {
    Category.DIGIT: 10,
    Category.LOWERCASE: 26,
    Category.UPPERCASE: 26,
    Category.PUNCTUATION: 32,
    Category.SPACE: 1,
    Category.TAB: 1,
    Category.OTHER: 1,  # arbitrary; non-ASCII alphabets are much larger
}

# first match wins
CLASSIFICATION_ORDER = (
    Category.DIGIT,
    Category.LOWERCASE,
    Category.UPPERCASE,
    Category.PUNCTUATION,
    Category.SPACE,
    Category.TAB,
    Category.OTHER,
)

_MEMBERS: Dict[Category, FrozenSet[str]] = {
    Category.DIGIT: frozenset(string.digits),
    Category.LOWERCASE: frozenset(string.ascii_lowercase),
    Category.UPPERCASE: frozenset(string.ascii_uppercase),
    Category.PUNCTUATION: frozenset(string.punctuation),
    Category.SPACE: frozenset(" "),
    Category.TAB: frozenset("\t"),
}


def matches(category: Category, ch: str) -> bool:
    """True if `ch` belongs to `category`. OTHER is whatever no other class claims."""
    if category is Category.OTHER:
        return not any(ch in members for members in _MEMBERS.values())
    return ch in _MEMBERS[category]


def classify_char(ch: str, order: Sequence[Category] = CLASSIFICATION_ORDER) -> Category:
    for category in order:
        if matches(category, ch):
            return category
    return Category.OTHER


@dataclass(frozen=True)
class CategoryPresence:
    """Which categories occur at least once in a password."""

    categories: FrozenSet[Category] = frozenset()

    def __contains__(self, category: Category) -> bool:
        return category in self.categories

    @property
    def alphabet_size(self) -> int:
        return sum(ALPHABET_SIZES[c] for c in self.categories)

    def flags(self) -> Dict[Category, bool]:
        return {c: c in self.categories for c in Category}


def classify(password: str, order: Sequence[Category] = CLASSIFICATION_ORDER) -> CategoryPresence:
    """
    Scan the password once and mark each category seen.
    An empty password gives an empty presence set.
    """
    found = set()
    for ch in password:
        found.add(classify_char(ch, order))
    return CategoryPresence(frozenset(found))
