"""Turn pull-request references like ``(#123)`` in a changelog into Markdown links."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

_PR_REFERENCE = re.compile(r"\(#([0-9]+)\)")

DEFAULT_CHANGELOG = "../CHANGELOG.md"


def link_pr_numbers(text: str, base_url: str) -> str:
    """Replace every ``(#N)`` in ``text`` with ``[#N](base_url/N)``."""
    return _PR_REFERENCE.sub(
        lambda match: f"[#{match.group(1)}]({base_url}/{match.group(1)})", text
    )


def rewrite_file(path: str | Path, base_url: str) -> None:
    """Rewrite the file at ``path`` in place with its pull-request references linked."""
    target = Path(path)
    content = target.read_text(encoding="utf-8")
    target.write_text(link_pr_numbers(content, base_url), encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="changelog-links",
        description="Link pull-request numbers in a Markdown changelog.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_CHANGELOG,
        help=f"the changelog to rewrite (default: {DEFAULT_CHANGELOG})",
    )
    parser.add_argument(
        "--base-url",
        required=True,
        help="URL that pull-request numbers are appended to",
    )
    args = parser.parse_args(argv)
    rewrite_file(args.path, args.base_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())