import re
import sys

import numpy as np

from .errors import SizeMismatchError, MatrixReadError

DTYPE = np.int64
MIN_WIDTH = 2
EMPTY_TEXT = "[empty matrix]"

_INT_TOKEN = re.compile(r"[+-]?\d+")
_INT_MIN = int(np.iinfo(DTYPE).min)
_INT_MAX = int(np.iinfo(DTYPE).max)


def wrap_int(value):
    # two's complement wraparound to 64 bits
    return (value - _INT_MIN) % (1 << 64) + _INT_MIN


def parse_int(token):
    """Return the integer in token, or None if it is not a 64-bit decimal integer."""
    if not _INT_TOKEN.fullmatch(token):
        return None
    value = int(token)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


class Matrix:
    """Square n x n integer matrix stored flat in row-major order.

    Element (r, c) lives at offset r * n + c. Every Matrix owns its storage;
    arithmetic and copy() always allocate a fresh array.
    """

    def __init__(self, size=0):
        if size < 0:
            raise ValueError(f"matrix size must be non-negative, got {size}")
        self.n = int(size)
        self.data = np.zeros(self.n * self.n, dtype=DTYPE)

    @classmethod
    def identity(cls, size):
        m = cls(size)
        for i in range(size):
            m.set_at(i, i, 1)
        return m

    @classmethod
    def from_rows(cls, rows):
        rows = [list(r) for r in rows]
        m = cls(len(rows))
        for r, row in enumerate(rows):
            if len(row) != m.n:
                raise ValueError("rows must form a square matrix")
            for c, value in enumerate(row):
                m.set_at(r, c, value)
        return m

    def size(self):
        return self.n

    # No bounds check: callers guarantee 0 <= row, col < n.
    def at(self, row, col):
        return int(self.data[row * self.n + col])

    def set_at(self, row, col, value):
        self.data[row * self.n + col] = value

    def __getitem__(self, key):
        row, col = key
        return self.at(row, col)

    def __setitem__(self, key, value):
        row, col = key
        self.set_at(row, col, value)

    def copy(self):
        m = Matrix()
        m.n = self.n
        m.data = self.data.copy()
        return m

    def to_rows(self):
        return [[self.at(i, j) for j in range(self.n)] for i in range(self.n)]

    def format(self):
        if self.n == 0:
            return EMPTY_TEXT + "\n"

        max_width = max(len(str(int(v))) for v in self.data)
        if max_width < MIN_WIDTH:
            max_width = MIN_WIDTH

        lines = []
        for i in range(self.n):
            lines.append("".join(str(self.at(i, j)).rjust(max_width + 1) for j in range(self.n)))
        return "\n".join(lines) + "\n"

    def print(self, sink=None):
        if sink is None:
            sink = sys.stdout
        sink.write(self.format())

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"Matrix({self.to_rows()!r})"

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.n == other.n and np.array_equal(self.data, other.data)

    def sum_main_diagonal(self):
        total = 0
        for i in range(self.n):
            total += self.at(i, i)
        return wrap_int(total)

    def sum_secondary_diagonal(self):
        total = 0
        for i in range(self.n):
            total += self.at(i, self.n - 1 - i)
        return wrap_int(total)

    def add(self, other):
        if self.n != other.n:
            raise SizeMismatchError("addition", self.n, other.n)
        result = self.copy()
        # int64 array addition wraps on overflow
        result.data += other.data
        return result

    def multiply(self, other):
        if self.n != other.n:
            raise SizeMismatchError("multiplication", self.n, other.n)
        n = self.n
        result = Matrix(n)
        for i in range(n):
            for j in range(n):
                total = 0
                for k in range(n):
                    total += self.at(i, k) * other.at(k, j)
                result.set_at(i, j, wrap_int(total))
        return result

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __mul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def read_from(self, tokens):
        """Fill the matrix in row-major order from an iterator of string tokens.

        Stops at the first missing or non-integer token and raises
        MatrixReadError. Values written before the failure stay in place.
        """
        tokens = iter(tokens)
        expected = self.n * self.n
        for count in range(expected):
            token = next(tokens, None)
            if token is None:
                raise MatrixReadError("unexpected end of input", values_read=count, expected=expected)
            value = parse_int(token)
            if value is None:
                raise MatrixReadError(f"not an integer: {token!r}", values_read=count, expected=expected)
            self.data[count] = value
        return self
