class RangeQueryError(Exception):
    """Base class for every failure raised by rangesum."""


class MalformedInput(RangeQueryError, ValueError):
    pass


class RangeOutOfBounds(RangeQueryError, IndexError):
    def __init__(self, left, right, n, position=None):
        self.left = left
        self.right = right
        self.n = n
        self.position = position
        where = "" if position is None else f"query {position}: "
        super().__init__(
            f"{where}range [{left}, {right}] is outside [0, {n - 1}]"
            if n > 0
            else f"{where}range [{left}, {right}] against an empty sequence"
        )


class TransportFailure(RangeQueryError):
    def __init__(self, url, message, status=None):
        self.url = url
        self.status = status
        super().__init__(f"{message}: {url}")
