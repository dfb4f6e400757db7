"""Markdown helpers for the check report comment.

Keep surface area small: table rows, code fences and <details> blocks.
"""

from __future__ import annotations

from typing import Sequence

RULE = "---"


def bold(text: str) -> str:
    return f"**{text}**"


def code(text: str) -> str:
    return f"`{text}`"


def table_header(columns: Sequence[str]) -> list[str]:
    """Header row plus the delimiter row, padded to the column names."""
    return [
        table_row(columns),
        "|" + "|".join("-" * (len(col) + 2) for col in columns) + "|",
    ]


def table_row(cells: Sequence[str]) -> str:
    """Table row."""
    return "| " + " | ".join(cells) + " |"


def code_block(text: str) -> list[str]:
    return ["```", text, "```"]


def details_block(
    body_lines: list[str],
    *,
    summary: str = "Details",
) -> list[str]:
    """Details block."""
    return [
        "<details>",
        f"<summary>{summary}</summary>",
        "",
        *body_lines,
        "</details>",
    ]
