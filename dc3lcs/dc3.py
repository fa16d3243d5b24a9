"""
Suffix array construction with the DC3 (skew) algorithm.
O(n) for an integer alphabet bounded by n.

Karkkainen, Sanders, Burkhardt, "Linear work suffix array construction"
"""
from .encoding import zeros


def radix_pass(s, indices, offset, k):
    """
    stable counting sort of indices by the key s[i + offset]
    k: largest key
    """
    count = [0] * (k + 1)
    for i in indices:
        count[s[i + offset]] += 1
    total = 0
    for c in range(k + 1):
        count[c], total = total, total + count[c]
    out = [0] * len(indices)
    for i in indices:
        key = s[i + offset]
        out[count[key]] = i
        count[key] += 1
    return out


def leq(a1, a2, b1, b2):
    return a1 < b1 or (a1 == b1 and a2 <= b2)


def leq3(a1, a2, a3, b1, b2, b3):
    return a1 < b1 or (a1 == b1 and leq(a2, a3, b2, b3))


def suffix_array(s, n, k):
    """
    suffix array of s[:n]
    O(n)

    s: list of ints >= 1, followed by at least 3 zero sentinels
    n: number of symbols to sort
    k: largest symbol
    """
    if n == 0:
        return []
    if n == 1:
        return [0]

    n0, n1, n2 = (n + 2) // 3, (n + 1) // 3, n // 3
    n02 = n0 + n2

    # positions i % 3 != 0, with a dummy at n when n % 3 == 1
    sample = [i for i in range(n + n0 - n1) if i % 3 != 0]
    sample = radix_pass(s, sample, 2, k)
    sample = radix_pass(s, sample, 1, k)
    sample = radix_pass(s, sample, 0, k)

    # name the triples; mod 1 positions go left, mod 2 positions right
    names = zeros(n02)
    name = 0
    last = None
    for p in sample:
        triple = (s[p], s[p + 1], s[p + 2])
        if triple != last:
            name += 1
            last = triple
        if p % 3 == 1:
            names[p // 3] = name
        else:
            names[p // 3 + n0] = name

    if name < n02:
        sa12 = suffix_array(names, n02, name)
        for rank, t in enumerate(sa12, 1):
            names[t] = rank
    else:
        sa12 = [0] * n02
        for t in range(n02):
            sa12[names[t] - 1] = t

    # i % 3 == 0 suffixes are ordered by the rank of i + 1, then by s[i]
    sa0 = radix_pass(s, [3 * t for t in sa12 if t < n0], 0, k)

    def position(t):
        return 3 * t + 1 if t < n0 else 3 * (t - n0) + 2

    out = []
    # the dummy has the smallest name, skip it
    u, v = n0 - n1, 0
    while u < n02 and v < n0:
        t = sa12[u]
        i = position(t)
        j = sa0[v]
        if t < n0:
            smaller = leq(s[i], names[t + n0], s[j], names[j // 3])
        else:
            smaller = leq3(
                s[i], s[i + 1], names[t - n0 + 1],
                s[j], s[j + 1], names[j // 3 + n0],
            )
        if smaller:
            out.append(i)
            u += 1
        else:
            out.append(j)
            v += 1
    out.extend(position(t) for t in sa12[u:])
    out.extend(sa0[v:])
    return out
