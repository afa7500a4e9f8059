"""Print the build configuration of the first interpreter matching the requested spec."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING

from ._builtin import Builtin

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._config import InterpreterConfig


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="python -m python_config", description=__doc__)
    parser.add_argument(
        "-p",
        "--python",
        dest="python",
        metavar="SPEC",
        action="append",
        default=[],
        help="interpreter requirement such as 3, 3.11, pypy3 or cpython3-64, may be repeated (default: 3)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="seconds to wait for each interpreter")
    parser.add_argument("-v", "--verbose", action="store_true", help="log discovery progress")
    return parser


def render(config: InterpreterConfig) -> str:
    return "\n".join(
        (
            f"interpreter version: {config.version}",
            f"interpreter path: {config.executable}",
            f"libdir: {config.libdir}",
            f"shared: {config.shared}",
            f"base prefix: {config.base_prefix}",
            f"ld_version: {config.ld_version}",
            f"pointer width: {config.calcsize_pointer}",
        ),
    )


def run(args: Sequence[str] | None = None) -> int:
    options = build_parser().parse_args(args)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    python_spec = options.python or ["3"]
    try:
        config = Builtin(python_spec, timeout=options.timeout).interpreter
    except ValueError as exception:
        print(exception, file=sys.stderr)
        return 2
    if config is None:
        print(f"No Python {' or '.join(python_spec)} interpreter found", file=sys.stderr)
        return 1
    print(render(config))
    return 0


if __name__ == "__main__":
    sys.exit(run())
