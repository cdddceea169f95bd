"""Command-line entry point for measuring a native library with Bloaty."""

import argparse
import logging
from pathlib import Path

from native_sizes.compute_config_hash import compute_config_hash
from native_sizes.extract_native_library_entries import (
    extract_native_library_entries,
)
from native_sizes.load_config import load_config
from native_sizes.resolve_tool_path import resolve_tool_path
from native_sizes.size_report import SizeReport


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    ap = argparse.ArgumentParser(
        description="Break a native library down by compiled unit using Bloaty.",
    )
    ap.add_argument(
        "library",
        type=Path,
        help="Stripped native library (.so) to analyze",
    )
    ap.add_argument(
        "--debug-file",
        type=Path,
        help="Unstripped copy of the library carrying debug symbols",
    )
    ap.add_argument(
        "--bloaty",
        help="Path to the bloaty executable (default: look it up on PATH)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON size report to this path",
    )
    ap.add_argument(
        "--top",
        type=int,
        help="Number of largest units to print",
    )
    ap.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the analysis and print the largest compiled units."""
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(message)s",
    )

    try:
        library_bytes = args.library.read_bytes()
    except OSError as e:
        ap.error(f"cannot read {args.library}: {e}")

    config = load_config(args.config)
    top = args.top if args.top is not None else config["report"]["top"]
    if top < 0:
        ap.error(f"--top must not be negative: {top}")

    bloaty_cfg = config["bloaty"]
    tool_path = resolve_tool_path(
        bloaty_cfg["tool_name"], override=args.bloaty or bloaty_cfg["path"]
    )

    entries = extract_native_library_entries(
        library_bytes,
        args.debug_file,
        tool_path,
        data_source=bloaty_cfg["data_source"],
        max_rows=bloaty_cfg["max_rows"],
    )

    report = SizeReport(str(args.library), compute_config_hash(config))
    report.add_entries(entries)

    for entry in report.top(top):
        print(f"{entry.size:>12}  {entry.name}")
    total = report.compute_stats()["total_size"]
    print(f"Total: {total} bytes in {len(entries)} units")

    if args.report:
        report.generate_report(args.report)
        print(f"Report written to: {args.report}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
