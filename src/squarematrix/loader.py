from pathlib import Path

from .errors import InputConfigError, MatrixReadError
from .matrix import Matrix, parse_int


def iter_tokens(stream):
    for line in stream:
        yield from line.split()


def read_dimension(tokens):
    token = next(tokens, None)
    n = parse_int(token) if token is not None else None
    if n is None or n <= 0:
        raise InputConfigError("first value in file must be a positive integer N.")
    return n


def load_matrices(path):
    """Read N followed by two N x N matrices A and B from a text file."""
    path = Path(path)
    try:
        f = path.open("r", encoding="utf-8")
    except OSError as e:
        raise InputConfigError(f"could not open file '{path}'.", details={"reason": str(e)}) from e

    with f:
        tokens = iter_tokens(f)
        try:
            n = read_dimension(tokens)
            a = Matrix(n)
            b = Matrix(n)
            try:
                a.read_from(tokens)
                b.read_from(tokens)
            except MatrixReadError as e:
                raise MatrixReadError(
                    "not enough matrix data in file.",
                    values_read=e.values_read,
                    expected=e.expected,
                ) from e
        except (UnicodeDecodeError, OSError) as e:
            raise InputConfigError(f"could not read file '{path}'.", details={"reason": str(e)}) from e

    return a, b
