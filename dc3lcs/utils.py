def to_int_keys(l):
    """
    l: iterable of mutually comparable keys
    returns: a list with dense integer keys, equal keys sharing the same
    integer and the order of the keys preserved
    """
    seen = set()
    ls = []
    for e in l:
        if not e in seen:
            ls.append(e)
            seen.add(e)
    ls.sort()
    index = {v: i for i, v in enumerate(ls)}
    return [index[v] for v in l]


def inverse_array(l):
    """Inverse of the permutation l: ans[l[i]] == i"""
    n = len(l)
    ans = [0] * n
    for i in range(n):
        ans[l[i]] = i
    return ans
