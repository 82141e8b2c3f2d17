# argparse only
from __future__ import annotations

import argparse
from pathlib import Path

from nextest_summary import __version__

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nextest-summary",
        description="Extract summaries from the default (human-readable) output format of `cargo nextest`.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--ini", default=None, help="Path to an INI file (overrides APP_INI).")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Override the [logging] level from the INI file.",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    show = sub.add_parser("show", help="Read a single file and display its summary.")
    show.add_argument(
        "infile",
        type=Path,
        help="Path to a file in the `cargo nextest` human-readable output format.",
    )

    batch = sub.add_parser(
        "batch",
        help="Read a directory of files. Write their summaries in a (usually other) directory.",
    )
    batch.add_argument(
        "indir",
        type=Path,
        help="Path to a directory of files in the `cargo nextest` human-readable output format.",
    )
    batch.add_argument(
        "outdir",
        type=Path,
        help="Path to directory in which output files consisting only of summaries will be created.",
    )

    sub.add_parser("serve", help="Serve summaries over HTTP using the [flask] INI settings.")

    return parser
