"""
FARS Command-Line Interface

Exposes two subcommands:

    fars summarize --years 2013 2014 2015 [...]   Monthly accident counts
    fars map       --state 33 --year 2013 [...]   State accident map (HTML)

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.  Yearly files are looked up in ``--data-dir``
(default: the current directory).

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\n❌  Error: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Print (or write as CSV) the month-by-year accident count table.

    Exits with status 1 when none of the requested years could be loaded.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import fars_summarize_years

    table = fars_summarize_years(args.years, data_dir=args.data_dir)

    if table.shape[1] == 1:
        _die(
            f"No data found for years {', '.join(map(str, args.years))} "
            f"in {args.data_dir or Path.cwd()}"
        )

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(out_path, index=False)
        print(f"✅  Summary saved → {out_path}")
    else:
        print(table.to_string(index=False))

    missing = table.shape[1] - 1 < len(args.years)
    if missing:
        print("⚠️   Some years were skipped (see warnings above).", file=sys.stderr)


def handle_map(args: argparse.Namespace) -> None:
    """Build the accident map for one state/year and write it as HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.reports.generators import fars_map_state

    output = Path(args.output or f"fars_map_{args.state}_{args.year}.html")

    try:
        fig = fars_map_state(
            args.state, args.year, data_dir=args.data_dir, output=output,
        )
    except (OSError, ValueError) as exc:
        # missing/corrupt file, bad columns, unknown state code
        _die(str(exc))

    if fig is None:
        print(f"ℹ️   No accidents to plot for state {args.state} in {args.year}.")
        return
    print(f"✅  Map saved → {output}")


# ===========================================================================
# Argument parser construction
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the top-level argument parser.

    Returns:
        Configured ``ArgumentParser`` with ``summarize`` and ``map``
        subcommands attached.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description=(
            "FARS – Fatality Analysis Reporting System accident tools\n"
            "Monthly summaries and state maps from accident_<YYYY>.csv.bz2 files."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for library messages (default: WARNING).",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="<command>")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        type=int,
        metavar="YYYY",
        help="One or more data years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory containing accident_<YYYY>.csv.bz2 files (default: cwd).",
    )
    p_sum.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="Write the table as CSV instead of printing it.",
    )
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map accident locations for one state and year.",
    )
    p_map.add_argument(
        "--state",
        required=True,
        type=int,
        metavar="CODE",
        help="FARS state code, e.g. 33 for New Hampshire.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        type=int,
        metavar="YYYY",
        help="Data year.",
    )
    p_map.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help="Directory containing accident_<YYYY>.csv.bz2 files (default: cwd).",
    )
    p_map.add_argument(
        "--output",
        default=None,
        metavar="FILE",
        help="HTML output path (default: fars_map_<state>_<year>.html).",
    )
    p_map.set_defaults(func=handle_map)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_format=args.json_logs)
    args.func(args)


if __name__ == "__main__":
    main()
