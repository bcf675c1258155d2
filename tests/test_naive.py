import rangesum.legacy.naive as naive
from rangesum.resolve import Query, QueryKind


class TestNaive:
    def test_sum(self):
        assert naive.naive_sum([1, 2, 3, 4, 5], 1, 3) == 9

    def test_alternating_starts_positive(self):
        data = [1, 2, 3, 4, 5]
        assert naive.naive_alternating_sum(data, 0, 4) == 3
        assert naive.naive_alternating_sum(data, 1, 3) == 3
        assert naive.naive_alternating_sum(data, 1, 4) == -2

    def test_batch(self):
        queries = [
            Query(QueryKind.SUM, 1, 3),
            Query(QueryKind.ALTERNATING_SUM, 3, 3),
        ]
        assert naive.naive_resolve_all([1, 2, 3, 4, 5], queries) == [9, 4]
