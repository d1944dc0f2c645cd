"""Incremental maintenance of the GitBook ``SUMMARY.md`` index.

The index is a list of lines made of sections: a ``## <category>`` heading
followed by entry lines (``- [<title>](<file>)``).  A section ends at the
next heading or at the first blank line after its entries.

:func:`register_entry` is a pure transformation over those lines.
:class:`SummaryIndex` is the thin file adapter around it that performs one
full load, mutate and overwrite cycle per registration.

Guarantees:

- an output filename is linked at most once in the whole document, so
  registering the same example again is a no-op;
- existing sections never move; new categories are appended at the end;
- within a section, entries keep registration order (new ones go last).
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import NamedTuple

from ..catalog import ExampleDescriptor
from ..utils import read_source

DEFAULT_SUMMARY = "# Table of Contents\n\n## Overview\n\n- [Introduction](README.md)\n\n"

_HEADING_RE = re.compile(r"^##\s+(.+?)\s*$")
_ENTRY_RE = re.compile(r"^\s*[-*]\s+\[(.+?)\]\((.+?)\)")


class IndexEntry(NamedTuple):
    """One parsed entry line of the index."""

    category: str
    title: str
    target: str


# ---------------------------------------------------------------------------
# Pure line transformations
# ---------------------------------------------------------------------------


def entry_line(example: ExampleDescriptor) -> str:
    """Return the index line linking *example*'s title to its rendered page."""
    return f"- [{example.title}]({example.output_filename})"


def heading_line(category: str) -> str:
    return f"## {category}"


def references(line: str, filename: str) -> bool:
    """True if *line* mentions *filename* as a whole file name.

    This is narrower than a plain substring test: ``x.md`` matches
    ``(x.md)`` and ``(docs/x.md)`` but not ``(index.md)``, so an unrelated
    page whose name merely ends with the filename is not taken for an
    existing entry.
    """
    pattern = r"(?<![\w.-])" + re.escape(filename) + r"(?![\w.-])"
    return re.search(pattern, line) is not None


def is_registered(lines: list[str], filename: str) -> bool:
    """True if any line, in any section, references *filename* (see :func:`references`)."""
    return any(references(line, filename) for line in lines)


def register_entry(lines: list[str], example: ExampleDescriptor) -> tuple[list[str], bool]:
    """Insert *example*'s entry into *lines*.

    The input list is never modified.

    Args:
        lines: The document split on ``"\\n"`` (a trailing newline shows up as
            a final empty string).
        example: The example to register.

    Returns:
        ``(new_lines, changed)``.  ``changed`` is ``False`` when the output
        filename was already referenced anywhere in the document.
    """
    if is_registered(lines, example.output_filename):
        return list(lines), False

    entry = entry_line(example)
    heading = heading_line(example.category)
    heading_idx = next(
        (idx for idx, line in enumerate(lines) if line.strip() == heading), None
    )

    if heading_idx is None:
        return _append_section(lines, heading, entry), True
    return _insert_into_section(lines, heading_idx, entry), True


def _append_section(lines: list[str], heading: str, entry: str) -> list[str]:
    body = list(lines)
    while body and not body[-1].strip():
        body.pop()
    return body + ["", heading, "", entry, ""]


def _insert_into_section(lines: list[str], heading_idx: int, entry: str) -> list[str]:
    n = len(lines)

    # Blank lines directly under the heading separate it from its entries;
    # they do not close the section.
    start = heading_idx + 1
    while start < n and not lines[start].strip():
        start += 1

    if start >= n or lines[start].startswith("#"):
        # Empty section: put the entry under the heading.
        return lines[: heading_idx + 1] + ["", entry, ""] + lines[start:]

    end = start
    while end < n and lines[end].strip() and not lines[end].startswith("#"):
        end += 1
    return lines[:end] + [entry] + lines[end:]


def parse_entries(lines: list[str]) -> list[IndexEntry]:
    """Return every entry line with the category it sits under."""
    entries: list[IndexEntry] = []
    category = ""
    for line in lines:
        heading = _HEADING_RE.match(line)
        if heading:
            category = heading.group(1)
            continue
        entry = _ENTRY_RE.match(line)
        if entry:
            entries.append(IndexEntry(category, entry.group(1), entry.group(2)))
    return entries


# ---------------------------------------------------------------------------
# File adapter
# ---------------------------------------------------------------------------


class SummaryIndex:
    """``SUMMARY.md`` on disk.

    Each :meth:`register` call is a complete read, transform and
    whole-file-overwrite cycle.  Callers that register several examples must
    do so one after the other; there is no locking.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def initialize(self) -> bool:
        """Write the default header if the file is absent.

        Returns:
            ``True`` if the file was created by this call.
        """
        if self.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(DEFAULT_SUMMARY, encoding="utf-8")
        return True

    def load(self) -> list[str]:
        """Read the document as lines, creating it with the default header first."""
        self.initialize()
        return read_source(self.path).split("\n")

    def save(self, lines: list[str]) -> None:
        self.path.write_text("\n".join(lines), encoding="utf-8")

    def register(self, example: ExampleDescriptor) -> bool:
        """Add *example* to the index unless it is already listed.

        Returns:
            ``True`` if the document was rewritten, ``False`` for the
            idempotent no-op.

        Raises:
            OSError: If the document cannot be read or written.
            UnreadableSourceError: If the document is not valid UTF-8.
        """
        updated, changed = register_entry(self.load(), example)
        if changed:
            self.save(updated)
        return changed

    def entries(self) -> list[IndexEntry]:
        if not self.exists():
            return []
        return parse_entries(read_source(self.path).split("\n"))
