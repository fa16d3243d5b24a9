"""
Alphabet encoding.
Turns two sequences into the integer array the suffix array builder
works on: A, the separator, B, then three zero sentinels.
"""
from dataclasses import dataclass
from typing import List

from .utils import to_int_keys

# DC3 compares triples, so it reads up to two symbols past any position
SENTINEL_PADDING = 3
SENTINEL = 0
SEPARATOR = 1
FIRST_SYMBOL = 2
# above this span (and twice the input length) ordinals are made dense
MIN_DENSE_SPAN = 256


class LCSError(ValueError):
    pass


class SeparatorError(LCSError):
    """The separator occurs in an input or does not sort first"""


class AlphabetError(LCSError):
    """The symbols have no total order, so no separator can be derived"""


@dataclass
class Encoded:
    values: List[int]
    n: int
    m: int
    length: int
    alphabet: int


def padded(values):
    """Copy of values followed by the zero sentinels"""
    return list(values) + [SENTINEL] * SENTINEL_PADDING


def zeros(length):
    """Zero-filled array with room for length values and the sentinels"""
    return [SENTINEL] * (length + SENTINEL_PADDING)


def ordinals(seq):
    """Characters become their code points, everything else is kept"""
    if isinstance(seq, str):
        return [ord(c) for c in seq]
    return list(seq)


def dense(symbols):
    try:
        return to_int_keys(symbols)
    except TypeError as e:
        raise AlphabetError(f"symbols cannot be ordered: {e}") from e


def check_separator(separator, symbols, textual=False):
    if textual:
        if not isinstance(separator, str) or len(separator) != 1:
            raise SeparatorError(
                f"separator must be a single character, got {separator!r}"
            )
    value = ord(separator) if textual else separator
    try:
        if value in symbols:
            raise SeparatorError(f"separator {separator!r} occurs in the input")
        if symbols and not value < min(symbols):
            raise SeparatorError(
                f"separator {separator!r} must sort before every symbol"
            )
    except TypeError as e:
        raise AlphabetError(f"separator cannot be ordered: {e}") from e


def encode(a, b, separator=None) -> Encoded:
    """
    Encode A ++ [separator] ++ B.

    Real symbols are shifted to start at FIRST_SYMBOL so the separator
    can always be SEPARATOR, smaller than all of them, and the sentinels
    can be 0. An explicit separator is only validated.
    """
    first = ordinals(a)
    second = ordinals(b)
    symbols = first + second
    if separator is not None:
        check_separator(
            separator, symbols, isinstance(a, str) or isinstance(b, str)
        )

    n, m = len(first), len(second)
    length = n + m + 1
    if not all(isinstance(x, int) for x in symbols):
        symbols = dense(symbols)
    elif symbols and max(symbols) - min(symbols) > max(MIN_DENSE_SPAN, 2 * length):
        symbols = dense(symbols)

    lo = min(symbols, default=0)
    shifted = [x - lo + FIRST_SYMBOL for x in symbols]
    values = padded(shifted[:n] + [SEPARATOR] + shifted[n:])
    return Encoded(values=values, n=n, m=m, length=length, alphabet=max(values))
