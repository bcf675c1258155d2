"""
Validation of the input object served by the input endpoint::

    {"token": "...", "data": [1, 2, 3], "query": [{"type": "1", "range": [0, 2]}]}

Query type "1" is a plain range sum and "2" an alternating range sum.
"""
import dataclasses
import numpy as np

from rangesum.errors import MalformedInput
from rangesum.resolve import Query, QueryKind


QUERY_TYPES = {
    "1": QueryKind.SUM,
    "2": QueryKind.ALTERNATING_SUM,
}

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


@dataclasses.dataclass(frozen=True)
class Payload:
    token: str
    data: np.ndarray
    queries: list


def _is_int(value):
    # json decodes true/false to bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def parse_data(data):
    if not isinstance(data, list):
        raise MalformedInput(f"'data' must be an array, got {type(data).__name__}")
    for i, value in enumerate(data):
        if not _is_int(value):
            raise MalformedInput(f"data[{i}] is not an integer: {value!r}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise MalformedInput(f"data[{i}] does not fit in 64 bits: {value}")
    # bounds every prefix, alt entry and every difference the resolver takes
    if sum(abs(value) for value in data) > INT64_MAX:
        raise MalformedInput("running sums of data do not fit in 64 bits")
    return np.array(data, dtype=np.int64)


def parse_query(position, item):
    if not isinstance(item, dict):
        raise MalformedInput(f"query {position} is not an object")
    try:
        kind = QUERY_TYPES[item["type"]]
    except KeyError:
        raise MalformedInput(
            f"query {position} has an unknown type {item.get('type')!r}"
        ) from None
    except TypeError:
        raise MalformedInput(
            f"query {position} has an unhashable type {item['type']!r}"
        ) from None
    bounds = item.get("range")
    if not (
        isinstance(bounds, list) and len(bounds) == 2 and all(map(_is_int, bounds))
    ):
        raise MalformedInput(f"query {position} range must be [l, r], got {bounds!r}")
    left, right = bounds
    return Query(kind, left, right)


def parse_queries(queries):
    if not isinstance(queries, list):
        raise MalformedInput(f"'query' must be an array, got {type(queries).__name__}")
    return [parse_query(j, item) for j, item in enumerate(queries)]


def parse_payload(obj):
    if not isinstance(obj, dict):
        raise MalformedInput(f"payload must be an object, got {type(obj).__name__}")
    missing = [key for key in ("token", "data", "query") if key not in obj]
    if missing:
        raise MalformedInput(f"payload is missing {', '.join(missing)}")
    token = obj["token"]
    if not isinstance(token, str):
        raise MalformedInput("'token' must be a string")
    if "\r" in token or "\n" in token:
        raise MalformedInput("'token' must not contain line breaks")

    return Payload(
        token=token,
        data=parse_data(obj["data"]),
        queries=parse_queries(obj["query"]),
    )
