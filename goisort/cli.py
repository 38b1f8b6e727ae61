from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .config import resolve_settings
from .errors import GoisortUserError, LengthMismatchError, RewriteError
from .reformat import reformat
from .rewrite import rewrite
from .version import tool_version

# -------------------- Logging setup --------------------

_LOG = logging.getLogger("goisort.cli")


def _setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug or os.environ.get("GOISORT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


# -------------------- Argument parsing --------------------

class _ArgumentParser(argparse.ArgumentParser):
    """argparse with exit status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="goisort",
        description="Small and opinionated Go import sorter",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument(
        "-l", "--local_package",
        default=None,
        metavar="PKG",
        help="import path of the local package (e.g. github.com/peterebden/goisort)",
    )
    p.add_argument(
        "-w", "--write",
        action="store_true",
        help="rewrite the files in-place",
    )
    p.add_argument(
        "--stdlib-file",
        default=None,
        metavar="FILE",
        help="standard library package list (output of `go list std`)",
    )
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="FILE",
        help="config file (default: ./.goisort.yaml if present)",
    )
    p.add_argument("--debug", action="store_true", help="verbose logging to stderr")
    p.add_argument("files", nargs="+", type=Path, help="files to sort imports in")
    return p


def _process(files: List[Path], local_package: str, stdlib, write: bool) -> None:
    for filename in files:
        changes = reformat(filename, local_package, stdlib)
        if not changes.needed:
            _LOG.debug("%s: imports already sorted", filename)
            continue
        if write:
            try:
                rewrite(filename, filename, changes)
            except LengthMismatchError as e:
                raise RewriteError(filename, e) from e
            _LOG.debug("%s: rewrote imports (lines %d-%d)", filename, changes.start_line, changes.end_line)
        else:
            sys.stdout.write(f"{filename}\n")


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.debug)

    try:
        settings = resolve_settings(
            ns.config,
            local_package=ns.local_package,
            write=ns.write,
            stdlib_file=ns.stdlib_file,
        )
        _LOG.debug("local package %r, write=%s", settings.local_package, settings.write)
        _process(ns.files, settings.local_package, settings.stdlib(), settings.write)
    except GoisortUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
