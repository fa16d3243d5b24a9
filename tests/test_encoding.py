import pytest

from dc3lcs.encoding import (
    AlphabetError,
    LCSError,
    SeparatorError,
    encode,
    padded,
    zeros,
)


def test_padded():
    assert padded([5, 6]) == [5, 6, 0, 0, 0]
    assert padded([]) == [0, 0, 0]
    assert zeros(2) == [0, 0, 0, 0, 0]


def test_encode():
    encoded = encode("ab", "b")
    assert encoded.values == [2, 3, 1, 3, 0, 0, 0]
    assert (encoded.n, encoded.m, encoded.length) == (2, 1, 4)
    assert encoded.alphabet == 3


def test_encode_empty():
    encoded = encode("", "")
    assert encoded.values == [1, 0, 0, 0]
    assert encoded.length == 1
    assert encoded.alphabet == 1


def test_encode_low_ordinals():
    # a NUL character still sorts after the separator
    encoded = encode("\x00\x01", b"\x00")
    assert encoded.values == [2, 3, 1, 2, 0, 0, 0]


def test_encode_sparse_alphabet():
    encoded = encode("a一", "a")
    assert encoded.values == [2, 3, 1, 2, 0, 0, 0]
    assert encoded.alphabet == 3


def test_encode_ints():
    encoded = encode([-5, 10], [10])
    assert encoded.values == [2, 17, 1, 17, 0, 0, 0]


def test_encode_generic_symbols():
    encoded = encode([("b",), ("a",)], [("c",)])
    assert encoded.values == [3, 2, 1, 4, 0, 0, 0]


def test_encode_unordered_symbols():
    with pytest.raises(AlphabetError):
        encode([1, "a"], [])
    with pytest.raises(LCSError):
        encode([{1}, {2}], [])


def test_explicit_separator():
    assert encode("abc", "de", "$").values == encode("abc", "de").values
    assert encode(b"ab", b"c", 0).values == encode(b"ab", b"c").values


def test_bad_separator():
    examples = [
        ("a$b", "c", "$"),
        ("abc", "B", "~"),
        ("abc", "d", "$$"),
        ("abc", "d", 36),
        (b"\x00a", b"", 0),
        ([2, 3], [1], 1),
    ]
    for a, b, separator in examples:
        with pytest.raises(SeparatorError):
            encode(a, b, separator)


def test_separator_on_empty_inputs():
    assert encode("", "", "$").values == [1, 0, 0, 0]
