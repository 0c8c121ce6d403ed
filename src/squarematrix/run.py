import logging
import sys

from .errors import InputConfigError, MatrixReadError, SizeMismatchError
from .loader import load_matrices
from .logger import open_session, log_event
from .prompts import ask_rows, ask_columns, ask_update
from .transforms import swap_rows, swap_columns, update_element

logger = logging.getLogger(__name__)


def _pick(value, fallback):
    return tuple(value) if value is not None else tuple(fallback)


def _show(title, matrix, out):
    out.write(f"\n{title}:\n")
    matrix.print(out)


def _diagonals(name, matrix, out):
    out.write(f"\nDiagonal sums for Matrix {name}:\n")
    out.write(f"Main diagonal sum:      {matrix.sum_main_diagonal()}\n")
    out.write(f"Secondary diagonal sum: {matrix.sum_secondary_diagonal()}\n")


def run_app(cfg, args, stdin=None, stdout=None, stderr=None):
    """Run the full matrix session and return the process exit status."""
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    defaults = cfg["defaults"]
    session_cfg = cfg["session_log"]
    report_cfg = cfg["report"]

    filename = args.file
    if filename is None:
        out.write("Enter input filename: ")
        out.flush()
        filename = stdin.readline().strip()

    try:
        a, b = load_matrices(filename)
    except (InputConfigError, MatrixReadError) as e:
        err.write(f"Error: {e.message}\n")
        logger.debug("load failed: %s", e.details)
        return 1

    session = None
    if args.log_session or session_cfg["enabled"]:
        session = open_session(session_cfg["directory"])
        logger.info("session log at %s", session)
    log_event(session, "loaded", f"{filename} n={a.size()}")

    _show("Matrix A", a, out)
    _show("Matrix B", b, out)

    try:
        c = a + b
        _show("A + B", c, out)
        log_event(session, "add", "ok")
    except SizeMismatchError as e:
        err.write(f"Addition error: {e.message}\n")
        log_event(session, "add_error", e.message)

    try:
        d = a * b
        _show("A * B", d, out)
        log_event(session, "multiply", "ok")
    except SizeMismatchError as e:
        err.write(f"Multiplication error: {e.message}\n")
        log_event(session, "multiply_error", e.message)

    _diagonals("A", a, out)
    if report_cfg["diagonals_for_b"]:
        _diagonals("B", b, out)

    interactive = not args.no_prompt

    if args.rows is not None or not interactive:
        r1, r2 = _pick(args.rows, defaults["swap_rows"])
    else:
        r1, r2 = ask_rows(stdin, out, tuple(defaults["swap_rows"]))
    _show(f"Matrix A with rows {r1} and {r2} swapped", swap_rows(a, r1, r2), out)
    log_event(session, "swap_rows", f"{r1} {r2}")

    if args.cols is not None or not interactive:
        c1, c2 = _pick(args.cols, defaults["swap_columns"])
    else:
        c1, c2 = ask_columns(stdin, out, tuple(defaults["swap_columns"]))
    _show(f"Matrix A with columns {c1} and {c2} swapped", swap_columns(a, c1, c2), out)
    log_event(session, "swap_columns", f"{c1} {c2}")

    if args.update is not None or not interactive:
        ur, uc, val = _pick(args.update, defaults["update"])
    else:
        ur, uc, val = ask_update(stdin, out, tuple(defaults["update"]))
    _show(f"Matrix A after update at ({ur}, {uc}) = {val}", update_element(a, ur, uc, val), out)
    log_event(session, "update", f"{ur} {uc} {val}")

    _show("Original Matrix A (unchanged)", a, out)
    return 0
