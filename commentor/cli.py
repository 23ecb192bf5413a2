"""CLI for reporting and fixing undocumented C# members."""

import argparse
import sys
from pathlib import Path

from commentor.codefix import FIX_TITLE
from commentor.logging import setup_logging
from commentor.runner import analyze_paths, fix_paths
from commentor.settings import Settings, settings as default_settings


def main(argv: list[str] | None = None, settings: Settings = default_settings) -> int:
    """Entry point with check/fix subcommands."""
    parser = argparse.ArgumentParser(prog="commentor", description="Find and document undocumented C# members")
    parser.add_argument("--log-level", help="Override log level (DEBUG, INFO, WARNING, ...)")
    subparsers = parser.add_subparsers(dest="command")

    check = subparsers.add_parser("check", help="Report undocumented members")
    check.add_argument("paths", nargs="+", type=Path, help="Files or directories to analyze")
    check.add_argument("--json", action="store_true", help="Emit one JSON finding per line")

    fix = subparsers.add_parser("fix", help=f"{FIX_TITLE} to undocumented members")
    fix.add_argument("paths", nargs="+", type=Path, help="Files or directories to fix")
    fix.add_argument("--dry-run", action="store_true", help="Report what would change without writing")

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    if args.log_level:
        setup_logging(level=args.log_level.upper())

    if args.command == "check":
        return _run_check(args.paths, settings, as_json=args.json)
    return _run_fix(args.paths, settings, dry_run=args.dry_run)


def _run_check(paths: list[Path], settings: Settings, as_json: bool) -> int:
    """Print findings; exit 1 when any member is undocumented."""
    results = analyze_paths(paths, settings)
    total = 0
    for findings in results.values():
        for finding in findings:
            print(finding.model_dump_json() if as_json else str(finding))
            total += 1
    if not as_json:
        print(f"\n{total} undocumented members in {len(results)} files", file=sys.stderr)
    return 1 if total else 0


def _run_fix(paths: list[Path], settings: Settings, dry_run: bool) -> int:
    """Apply fixes per file and print a summary line for each changed file."""
    reports = fix_paths(paths, settings, dry_run=dry_run)
    exit_code = 0
    for report in reports:
        if report.error:
            print(f"  error {report.path}: {report.error}", file=sys.stderr)
            exit_code = 1
            continue
        if report.failed_count:
            exit_code = 1
            for finding, message in report.result.failed if report.result else ():
                print(f"  failed {finding.location}: {message}", file=sys.stderr)
        if report.applied_count:
            verb = "would document" if dry_run else "documented"
            print(f"  {verb} {report.applied_count} members in {report.path}")

    applied = sum(report.applied_count for report in reports)
    print(f"\n{'Would document' if dry_run else 'Documented'} {applied} members in {len(reports)} files")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
