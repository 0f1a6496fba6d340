"""
nuaudit CLI — Command-line interface for parsing audit exports.
"""

import argparse
import sys
from pathlib import Path

from nuaudit import __version__
from nuaudit.core.context import AuditRequest
from nuaudit.core.engine import get_engine
from nuaudit.grammar.profile import list_profiles
from nuaudit.ir.schema import AuditReport
from nuaudit.ir.serialization import report_to_json, to_json


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="nuaudit",
        description="Degree audit parser",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"nuaudit {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse an audit export")
    parse_parser.add_argument(
        "input",
        type=str,
        help="Path to audit text file (use - for stdin)",
    )
    parse_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    parse_parser.add_argument(
        "--format",
        choices=["json", "report", "summary"],
        default="json",
        help="Output format: json (default, AuditResult), report (with diagnostics and trace), summary (text)",
    )
    parse_parser.add_argument(
        "--raw",
        action="store_true",
        help="Keep every listed course line (skip deduplication)",
    )
    parse_parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Format profile name or YAML path (default: neu_web_audit, or NUAUDIT_PROFILE env var)",
    )

    # Logging configuration
    parse_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or NUAUDIT_LOG_LEVEL env var)",
    )
    parse_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,grammar,extract,transform,system). Default: all",
    )

    # Profiles command
    subparsers.add_parser("profiles", help="List bundled format profiles")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "parse":
        return run_parse(args)

    if args.command == "profiles":
        for name in list_profiles():
            print(name)
        return 0

    return 0


def run_parse(args: argparse.Namespace) -> int:
    """Run parse command."""
    # Configure logging first
    from nuaudit.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(
        level=args.log_level,
        channels=channels,
        force=True,
    )

    # Get input text
    if args.input == "-":
        text = sys.stdin.read()
    else:
        path = Path(args.input)
        if not path.exists():
            print(f"nuaudit: no such file: {args.input}", file=sys.stderr)
            return 1
        text = path.read_text()

    pipeline_id = "raw" if args.raw else "default"
    request = AuditRequest(text=text, profile=args.profile)
    report = get_engine().transform(request, pipeline_id)

    if args.format == "report":
        output = report_to_json(report)
    elif args.format == "summary":
        output = format_summary(report)
    elif report.result is not None:
        output = to_json(report.result)
    else:
        output = ""

    # Diagnostics go to stderr unless they are part of the output
    if args.format != "report":
        for diag in report.diagnostics:
            location = f" line {diag.line}" if diag.line is not None else ""
            print(f"[{diag.level.value}] {diag.code}{location}: {diag.message}", file=sys.stderr)

    # Write output
    if args.output:
        Path(args.output).write_text(output)
    elif output:
        print(output)

    return 0 if report.status.value in ("success", "partial") else 1


def format_summary(report: AuditReport) -> str:
    """Human-readable overview of a parsed audit."""
    lines = [
        "=" * 60,
        f"AUDIT SUMMARY ({report.status.value})",
        "=" * 60,
    ]

    result = report.result
    if result is None:
        lines.append("No result: the audit could not be parsed.")
        return "\n".join(lines)

    grad = result.grad_date.isoformat() if result.grad_date else "(none)"
    year = result.audit_year if result.audit_year is not None else "(none)"
    lines.append(f"Graduation date: {grad}")
    lines.append(f"Catalog year:    {year}")
    lines.append(f"Majors:          {', '.join(result.majors) or '(none)'}")
    lines.append(f"Minors:          {', '.join(result.minors) or '(none)'}")

    lines.append("")
    lines.append("NUPath")
    for label, bucket in (
        ("complete", result.complete_nupaths),
        ("in progress", result.ip_nupaths),
        ("required", result.required_nupaths),
    ):
        codes = ", ".join(category.value for category in bucket) or "(none)"
        lines.append(f"  {label:<12} {codes}")

    lines.append("")
    lines.append(f"Completed courses ({len(result.complete_courses)})")
    for course in result.complete_courses:
        lines.append(f"  {course.term_id}  {course.subject} {course.class_id}  {course.name}")

    lines.append(f"In-progress courses ({len(result.ip_courses)})")
    for course in result.ip_courses:
        lines.append(f"  {course.term_id}  {course.subject} {course.class_id}  {course.name}")

    lines.append(f"Required course options ({len(result.required_courses)})")
    for entry in result.required_courses:
        subject = entry.subject or "?"
        span = f"{entry.class_id}-{entry.class_id_2}" if entry.class_id_2 is not None else str(entry.class_id)
        lines.append(f"  {subject} {span}")

    s = result.summary
    lines.append("")
    lines.append(
        f"Earned {s.earned_hours:.2f} hours over {s.courses_taken} courses; "
        f"attempted {s.attempted_hours:.2f}, {s.quality_points:.2f} points, GPA {s.gpa:.3f}"
    )
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
