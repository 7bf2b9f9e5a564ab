"""Markdown and front-matter helpers shared by the note generators."""

import datetime
import json
import re
from collections.abc import Mapping
from typing import Any

import yaml
from bs4 import BeautifulSoup

FRONTMATTER_DELIMITER = "---"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9 _-]")


def pad_number(n: int, width: int) -> str:
    """Left-pad ``n`` with zeros to ``width`` digits."""
    return str(n).zfill(width)


def strip_html(html: str) -> str:
    """Reduce an HTML fragment to its text content.

    Nested tags are flattened; the text between them, including the
    spaces separating words, is kept as-is.

    Args:
        html: Translation text that may contain markup such as ``<sup>``.

    Returns:
        Plain text with no tag markers.
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "lxml")
    return soup.get_text().strip()


def sanitize_filename(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9 _-]`` with ``_``."""
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, str):
        # JSON strings are valid double-quoted YAML scalars
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        return json.dumps(value, ensure_ascii=False)
    raise TypeError(f"Unsupported front-matter value: {value!r}")


def format_frontmatter(fields: Mapping[str, Any]) -> str:
    """Render a flat key/value mapping as a YAML front-matter block.

    Keys keep their insertion order. Strings are double-quoted and lists
    are written in flow style, so the block reads back with PyYAML into
    the same scalars and lists.

    Args:
        fields: Mapping of front-matter keys to scalars or lists.

    Returns:
        The block including both ``---`` delimiters and a trailing newline.
    """
    lines = [FRONTMATTER_DELIMITER]
    for key, value in fields.items():
        lines.append(f"{key}: {_format_value(value)}")
    lines.append(FRONTMATTER_DELIMITER)
    return "\n".join(lines) + "\n"


def read_frontmatter(text: str) -> dict[str, Any]:
    """Parse the front-matter block at the top of a note.

    Returns an empty dict when the note has no front-matter or when the
    block is not a YAML mapping.
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return {}

    for end, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONTMATTER_DELIMITER:
            break
    else:
        return {}

    data = yaml.safe_load("\n".join(lines[1:end]))
    return data if isinstance(data, dict) else {}
