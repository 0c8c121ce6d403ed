from .matrix import parse_int


def read_ints(prompt, count, defaults, stdin, stdout, notice):
    """Prompt for `count` integers on one line.

    Falls back to `defaults` (and prints `notice`) on EOF, too few tokens
    or a non-integer among the first `count` tokens. Extra tokens are ignored.
    """
    stdout.write(prompt)
    stdout.flush()

    line = stdin.readline()
    values = [parse_int(t) for t in line.split()[:count]]
    if len(values) < count or any(v is None for v in values):
        stdout.write(notice + "\n")
        return tuple(defaults)
    return tuple(values)


def ask_rows(stdin, stdout, defaults=(0, 1)):
    r1, r2 = defaults
    return read_ints(
        f"\nEnter two row indices to swap (0-based, default {r1} {r2}): ",
        2, defaults, stdin, stdout,
        f"Using default row indices {r1} and {r2}.",
    )


def ask_columns(stdin, stdout, defaults=(0, 1)):
    c1, c2 = defaults
    return read_ints(
        f"\nEnter two column indices to swap (0-based, default {c1} {c2}): ",
        2, defaults, stdin, stdout,
        f"Using default column indices {c1} and {c2}.",
    )


def ask_update(stdin, stdout, defaults=(0, 0, 100)):
    row, col, value = defaults
    return read_ints(
        f"\nEnter row, column, and new value to update (default {row} {col} {value}): ",
        3, defaults, stdin, stdout,
        f"Using default (row={row}, col={col}, value={value}).",
    )
