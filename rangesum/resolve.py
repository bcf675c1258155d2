import enum
import typing
import numpy as np
import numba

from rangesum.errors import RangeOutOfBounds


class QueryKind(enum.IntEnum):
    SUM = 1
    ALTERNATING_SUM = 2


class Query(typing.NamedTuple):
    kind: QueryKind
    left: int
    right: int


# plain ints so the batch kernel can compare against them
SUM = int(QueryKind.SUM)
ALTERNATING_SUM = int(QueryKind.ALTERNATING_SUM)


@numba.njit(cache=True)
def range_sum(prefix, left, right):
    # right inclusive
    s = prefix[right]
    if left > 0:
        s -= prefix[left - 1]
    return s


@numba.njit(cache=True)
def orient(raw, left):
    """
    alt carries signs fixed by the global index parity, so data[left]
    entered raw negatively whenever left is odd. Flip it so the range
    always starts with a positive term.
    """
    if left % 2 == 1:
        return -raw
    return raw


@numba.njit(cache=True)
def alternating_range_sum(alt, left, right):
    raw = alt[right]
    if left > 0:
        raw -= alt[left - 1]
    return orient(raw, left)


@numba.njit(cache=True)
def _resolve_batch(prefix, alt, kinds, lefts, rights):
    num_queries = kinds.size
    out = np.zeros(num_queries, dtype=np.int64)
    for j in range(num_queries):
        if kinds[j] == SUM:
            out[j] = range_sum(prefix, lefts[j], rights[j])
        else:
            out[j] = alternating_range_sum(alt, lefts[j], rights[j])
    return out


def check_bounds(left, right, n, position=None):
    if n == 0 or left < 0 or right > n - 1 or left > right:
        raise RangeOutOfBounds(left, right, n, position)


def resolve(query, tables):
    kind, left, right = query
    check_bounds(left, right, tables.n)
    if kind == QueryKind.SUM:
        return int(range_sum(tables.prefix, left, right))
    if kind == QueryKind.ALTERNATING_SUM:
        return int(alternating_range_sum(tables.alt, left, right))
    raise ValueError(f"unknown query kind {kind!r}")


def resolve_all(queries, tables):
    """
    Answers every query in order. All ranges are checked before any
    answer is computed, so one bad range aborts the whole batch.
    """
    num_queries = len(queries)
    kinds = np.zeros(num_queries, dtype=np.int64)
    lefts = np.zeros(num_queries, dtype=np.int64)
    rights = np.zeros(num_queries, dtype=np.int64)
    for j, (kind, left, right) in enumerate(queries):
        if kind not in (SUM, ALTERNATING_SUM):
            raise ValueError(f"unknown query kind {kind!r}")
        check_bounds(left, right, tables.n, position=j)
        kinds[j] = kind
        lefts[j] = left
        rights[j] = right

    if num_queries == 0:
        return []
    return _resolve_batch(tables.prefix, tables.alt, kinds, lefts, rights).tolist()
