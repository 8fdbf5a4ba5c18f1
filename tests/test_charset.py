import itertools
import string

from keyspace.charset import (
    ALPHABET_SIZES,
    CLASSIFICATION_ORDER,
    Category,
    classify,
    classify_char,
)
from keyspace.estimator import analyze

SINGLE_CLASS = {
    Category.DIGIT: "12345",
    Category.LOWERCASE: "hello",
    Category.UPPERCASE: "HELLO",
    Category.PUNCTUATION: "!@#$%",
    Category.SPACE: "   ",
    Category.TAB: "\t\t",
    Category.OTHER: "\x80\xe9ü",
}


def test_each_class_sets_exactly_one_flag():
    for category, pw in SINGLE_CLASS.items():
        presence = classify(pw)
        flags = presence.flags()
        assert [c for c, on in flags.items() if on] == [category]
        result = analyze(pw)
        assert result.combinations == ALPHABET_SIZES[category] ** len(pw)


def test_empty_password_has_no_flags():
    presence = classify("")
    assert not any(presence.flags().values())
    assert presence.alphabet_size == 0


def test_mixed_classes():
    presence = classify("aB3!")
    assert Category.LOWERCASE in presence
    assert Category.UPPERCASE in presence
    assert Category.DIGIT in presence
    assert Category.PUNCTUATION in presence
    assert Category.SPACE not in presence
    assert presence.alphabet_size == 94


def test_ascii_only_tests():
    # Unicode digits and letters are not ASCII, so they count as other
    assert classify_char("٣") is Category.OTHER  # arabic-indic three
    assert classify_char("é") is Category.OTHER
    assert classify_char("É") is Category.OTHER
    assert classify_char("\n") is Category.OTHER
    assert classify_char(" ") is Category.SPACE
    assert classify_char("\t") is Category.TAB


def test_punctuation_alphabet_matches_table():
    assert len(string.punctuation) == ALPHABET_SIZES[Category.PUNCTUATION]
    assert all(classify_char(c) is Category.PUNCTUATION for c in string.punctuation)


def test_classification_is_idempotent():
    pw = "Tr0ub4dor &3\té"
    assert classify(pw) == classify(pw)
    assert analyze(pw) == analyze(pw)


def test_priority_order_does_not_matter():
    chars = [chr(i) for i in range(0x20, 0x7F)] + ["\t"]
    expected = {ch: classify_char(ch) for ch in chars}
    for order in itertools.permutations(CLASSIFICATION_ORDER):
        for ch in chars:
            assert classify_char(ch, order) is expected[ch]
    assert classify("".join(chars), order=tuple(reversed(CLASSIFICATION_ORDER))) == classify("".join(chars))
