from rangesum.resolve import QueryKind


def naive_sum(data, left, right):
    ret = 0
    for i in range(left, right + 1):
        ret += int(data[i])
    return ret


def naive_alternating_sum(data, left, right):
    # sign is relative to left, not to the absolute index
    ret = 0
    sign = 1
    for i in range(left, right + 1):
        ret += sign * int(data[i])
        sign = -sign
    return ret


def naive_resolve_all(data, queries):
    results = []
    for kind, left, right in queries:
        if kind == QueryKind.SUM:
            results.append(naive_sum(data, left, right))
        else:
            results.append(naive_alternating_sum(data, left, right))
    return results
