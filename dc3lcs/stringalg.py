"""
String algorithms.
The goal of the file is to compute the length of the longest common
substring of two sequences in linear time.
"""
from .dc3 import suffix_array
from .encoding import encode
from .utils import inverse_array


def kasai(s, sa, n=None):
    """
    constructs the lcp array
    O(n)

    s: sequence
    sa: suffix array of s[:n]
    returns: lcp where lcp[r] is the length of the longest common prefix
    of the suffixes sa[r] and sa[r + 1], 0 for the last one
    """
    if n is None:
        n = len(sa)
    k = 0
    lcp = [0] * n
    rank = inverse_array(sa)
    for i in range(n):
        if rank[i] == n - 1:
            k = 0
            continue
        j = sa[rank[i] + 1]
        while i + k < n and j + k < n and s[i + k] == s[j + k]:
            k += 1
        lcp[rank[i]] = k
        if k:
            k -= 1
    return lcp


def extract_lcs(sa, lcp, n, m):
    """
    Longest lcp between neighbours of the suffix array that start on
    different sides of the separator at position n.
    """
    best = 0
    # sa[0] is the separator, it sorts first
    for i in range(1, n + m):
        if (sa[i] < n and sa[i + 1] < n) or (sa[i] > n and sa[i + 1] > n):
            continue
        best = max(best, lcp[i])
    return best


def lcs_length(a, b, separator=None):
    """
    Length of the longest common substring of a and b.

    a, b: str, bytes or sequences of mutually comparable symbols
    separator: optional symbol reserved by the caller, it must not occur
    in a or b and must sort before all their symbols
    """
    encoded = encode(a, b, separator)
    sa = suffix_array(encoded.values, encoded.length, encoded.alphabet)
    lcp = kasai(encoded.values, sa, encoded.length)
    return extract_lcs(sa, lcp, encoded.n, encoded.m)
