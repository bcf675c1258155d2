import numpy as np
import pytest

import rangesum.prefix as prefix
import rangesum.resolve as res
import rangesum.legacy.naive as naive
from rangesum.errors import RangeOutOfBounds
from rangesum.resolve import Query, QueryKind


def random_queries(rng, n, num_queries):
    lefts = rng.integers(0, n, size=num_queries)
    rights = rng.integers(0, n, size=num_queries)
    lefts, rights = np.minimum(lefts, rights), np.maximum(lefts, rights)
    kinds = rng.integers(1, 3, size=num_queries)
    return [
        Query(QueryKind(int(k)), int(l), int(r)) for k, l, r in zip(kinds, lefts, rights)
    ]


class TestOrient:
    def test_even_left_keeps_sign(self):
        assert res.orient(5, 0) == 5
        assert res.orient(-5, 2) == -5

    def test_odd_left_flips_sign(self):
        assert res.orient(5, 1) == -5
        assert res.orient(-3, 3) == 3

    def test_zero(self):
        assert res.orient(0, 1) == 0


class TestScenario:
    def setup_method(self):
        self.tables = prefix.preprocess([1, 2, 3, 4, 5])

    def test_sum(self):
        assert res.resolve(Query(QueryKind.SUM, 1, 3), self.tables) == 9

    def test_alternating_full(self):
        q = Query(QueryKind.ALTERNATING_SUM, 0, 4)
        assert res.resolve(q, self.tables) == 3

    def test_alternating_odd_left(self):
        # 2 - 3 + 4, the raw global value is -3
        q = Query(QueryKind.ALTERNATING_SUM, 1, 3)
        raw = self.tables.alt[3] - self.tables.alt[0]
        assert raw == -3
        assert res.resolve(q, self.tables) == 3

    def test_out_of_bounds_not_clamped(self):
        with pytest.raises(RangeOutOfBounds) as info:
            res.resolve(Query(QueryKind.SUM, 2, 10), self.tables)
        assert info.value.left == 2
        assert info.value.right == 10
        assert info.value.n == 5

    def test_batch(self):
        queries = [
            Query(QueryKind.SUM, 1, 3),
            Query(QueryKind.ALTERNATING_SUM, 0, 4),
            Query(QueryKind.ALTERNATING_SUM, 1, 3),
        ]
        assert res.resolve_all(queries, self.tables) == [9, 3, 3]


class TestBoundaries:
    def test_single_element_ranges(self, rng):
        data = rng.integers(-50, 50, size=20)
        tables = prefix.preprocess(data)
        for i in range(data.size):
            assert res.resolve(Query(QueryKind.SUM, i, i), tables) == data[i]
            q = Query(QueryKind.ALTERNATING_SUM, i, i)
            assert res.resolve(q, tables) == data[i]

    def test_left_zero(self):
        tables = prefix.preprocess([4, 6, 1])
        assert res.range_sum(tables.prefix, 0, 2) == 11
        assert res.alternating_range_sum(tables.alt, 0, 2) == -1

    @pytest.mark.parametrize(
        "left, right",
        [(-1, 2), (0, 5), (3, 2), (5, 5)],
    )
    def test_invalid_ranges(self, left, right):
        tables = prefix.preprocess([1, 2, 3, 4, 5])
        for kind in QueryKind:
            with pytest.raises(RangeOutOfBounds):
                res.resolve(Query(kind, left, right), tables)

    def test_empty_sequence(self):
        tables = prefix.preprocess([])
        with pytest.raises(RangeOutOfBounds):
            res.resolve(Query(QueryKind.SUM, 0, 0), tables)
        with pytest.raises(RangeOutOfBounds):
            res.resolve_all([Query(QueryKind.ALTERNATING_SUM, 0, 0)], tables)

    def test_empty_batch(self):
        tables = prefix.preprocess([1, 2])
        assert res.resolve_all([], tables) == []

    def test_unknown_kind(self):
        tables = prefix.preprocess([1, 2])
        with pytest.raises(ValueError):
            res.resolve_all([(7, 0, 1)], tables)


class TestBatchAbort:
    def test_whole_batch_fails(self):
        tables = prefix.preprocess([1, 2, 3, 4, 5])
        queries = [
            Query(QueryKind.SUM, 0, 1),
            Query(QueryKind.SUM, 2, 10),
            Query(QueryKind.SUM, 1, 2),
        ]
        with pytest.raises(RangeOutOfBounds) as info:
            res.resolve_all(queries, tables)
        assert info.value.position == 1


class TestAgainstNaive:
    @pytest.mark.parametrize("n", [1, 2, 3, 10, 101])
    def test_random(self, rng, n):
        data = rng.integers(-1000, 1000, size=n)
        queries = random_queries(rng, n, 200)
        tables = prefix.preprocess(data)
        assert res.resolve_all(queries, tables) == naive.naive_resolve_all(data, queries)

    def test_all_ranges(self, rng):
        data = rng.integers(-10, 10, size=13)
        tables = prefix.preprocess(data)
        for left in range(data.size):
            for right in range(left, data.size):
                assert res.range_sum(tables.prefix, left, right) == naive.naive_sum(
                    data, left, right
                )
                assert res.alternating_range_sum(
                    tables.alt, left, right
                ) == naive.naive_alternating_sum(data, left, right)

    def test_single_matches_batch(self, rng):
        data = rng.integers(-1000, 1000, size=50)
        queries = random_queries(rng, data.size, 50)
        tables = prefix.preprocess(data)
        single = [res.resolve(q, tables) for q in queries]
        assert single == res.resolve_all(queries, tables)


class TestIdempotence:
    def test_repeat(self, rng):
        data = rng.integers(-1000, 1000, size=64)
        queries = random_queries(rng, data.size, 100)
        tables = prefix.preprocess(data)
        first = res.resolve_all(queries, tables)
        for _ in range(3):
            assert res.resolve_all(queries, tables) == first
        assert np.array_equal(tables.prefix, np.cumsum(data))

    def test_results_are_ints(self):
        tables = prefix.preprocess([1, 2, 3])
        out = res.resolve_all([Query(QueryKind.SUM, 0, 2)], tables)
        assert type(out[0]) is int
        assert type(res.resolve(Query(QueryKind.SUM, 0, 2), tables)) is int
