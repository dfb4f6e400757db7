"""Command line entry point: render the check results and comment on the PR."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, ReportInputs, load_settings
from .context import RunContext
from .formatter import ReportFormatter
from .publisher import CommentPermissionError, CommentPublishError, GhCommentPublisher

PROG = "comment-check-results"


def fail(message: str, code: int = 1) -> int:
    """Fail."""
    print(f"::error::{PROG}: {message}", file=sys.stderr)
    return code


def notice(message: str) -> None:
    """Notice."""
    print(f"::notice::{message}", file=sys.stderr)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse args."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Post a PR comment summarizing format, validate and security scan results.",
    )
    parser.add_argument(
        "--workspace",
        default=None,
        help="Directory holding the scan report (default: env GITHUB_WORKSPACE).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file overriding the comment's display text.",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Also write the rendered markdown to this path.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Render only; do not post the comment.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main."""
    args = parse_args(argv)

    try:
        settings = load_settings(Path(args.config) if args.config else None)
        inputs = ReportInputs.from_env(workspace=args.workspace)
        context = RunContext.from_env()
    except ConfigError as exc:
        return fail(str(exc), code=2)

    formatter = ReportFormatter(publisher=GhCommentPublisher(), context=context, settings=settings)

    try:
        body = formatter.render(inputs)
    except OSError as exc:
        return fail(f"unable to read scan report: {exc}")
    except UnicodeDecodeError as exc:
        return fail(f"scan report is not valid UTF-8: {exc}")

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(body, encoding="utf-8")
        except OSError as exc:
            return fail(f"unable to write {output_path}: {exc}")

    if args.dry_run:
        if not args.output:
            print(body)
        notice("dry run: comment not posted")
        return 0

    try:
        formatter.post(body)
    except ConfigError as exc:
        return fail(str(exc), code=2)
    except CommentPermissionError as exc:
        return fail(str(exc))
    except CommentPublishError as exc:
        return fail(f"gh command failed: {exc.stderr.strip() or exc}")

    notice(f"Posted check results to {context.repository}#{context.issue_number}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
