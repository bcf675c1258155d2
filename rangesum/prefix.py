import dataclasses
import numpy as np
import numba


@numba.njit(cache=True)
def prefix_arrays(data):
    """
    Single left to right pass over data returning (prefix, alt).
    prefix[i] is the sum of data[0..i], alt[i] is the same sum with
    odd (absolute) indices subtracted.
    """
    n = data.size
    prefix = np.zeros(n, dtype=np.int64)
    alt = np.zeros(n, dtype=np.int64)
    if n == 0:
        return prefix, alt

    prefix[0] = data[0]
    alt[0] = data[0]
    for i in range(1, n):
        prefix[i] = prefix[i - 1] + data[i]
        if i % 2 == 0:
            alt[i] = alt[i - 1] + data[i]
        else:
            alt[i] = alt[i - 1] - data[i]

    return prefix, alt


@dataclasses.dataclass(frozen=True)
class Tables:
    prefix: np.ndarray
    alt: np.ndarray

    @property
    def n(self):
        return self.prefix.size


def as_sequence(sequence):
    data = np.ascontiguousarray(sequence, dtype=np.int64)
    if data.ndim != 1:
        raise ValueError(f"sequence must be one dimensional, got shape {data.shape}")
    return data


def preprocess(sequence):
    data = as_sequence(sequence)
    prefix, alt = prefix_arrays(data)
    # tables are shared read-only between resolutions
    prefix.flags.writeable = False
    alt.flags.writeable = False
    return Tables(prefix, alt)
