import argparse
import logging
import sys

from src.squarematrix.config import load_config
from src.squarematrix.errors import InputConfigError
from src.squarematrix.matrix import parse_int
from src.squarematrix.run import run_app


def int64_arg(text):
    value = parse_int(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"{text!r} is not a 64-bit integer")
    return value


def build_parser():
    p = argparse.ArgumentParser(description="Add, multiply and transform two square integer matrices.")
    p.add_argument("--file", "-f", default=None, help="data file: N followed by two N x N matrices")
    p.add_argument("--config", default=None, help="JSON config file merged over the defaults")
    p.add_argument("--rows", type=int64_arg, nargs=2, metavar=("R1", "R2"), default=None)
    p.add_argument("--cols", type=int64_arg, nargs=2, metavar=("C1", "C2"), default=None)
    p.add_argument("--update", type=int64_arg, nargs=3, metavar=("ROW", "COL", "VALUE"), default=None)
    p.add_argument("--no-prompt", action="store_true", help="never prompt; use configured defaults")
    p.add_argument("--log-session", action="store_true", help="write a CSV session log")
    p.add_argument("--log-level", default=None)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except InputConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    level = args.log_level if args.log_level is not None else cfg["log_level"]
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(message)s",
        stream=sys.stderr,
    )

    return run_app(cfg, args)


if __name__ == "__main__":
    sys.exit(main())
