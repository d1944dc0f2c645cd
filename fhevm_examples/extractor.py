"""Heuristic extraction of names and summaries from Solidity sources.

This is not a parser.  It relies on the positional regularity of contract
declarations: the ``contract`` keyword opens a line (optionally indented),
followed by the name and then either an ``is`` inheritance clause or the
opening brace of the body.
"""

from __future__ import annotations

import re

_CONTRACT_DECL_RE = re.compile(r"^\s*contract\s+(\w+)(?:\s+is\s+|\s*\{)", re.MULTILINE)
_DOC_COMMENT_RE = re.compile(r"/\*\*\s*\n\s*\*\s*(.+?)\s*\n")
_NOTICE_RE = re.compile(r"@notice\s+(.+)")


def extract_contract_name(source: str) -> str | None:
    """Return the name of the first contract declared in *source*.

    Examples::

        extract_contract_name("contract Counter {")          -> "Counter"
        extract_contract_name("  contract Vote is Config {") -> "Vote"
        extract_contract_name("// contract Fake {")          -> None
    """
    match = _CONTRACT_DECL_RE.search(source)
    return match.group(1) if match else None


def extract_description(source: str) -> str:
    """Return a one-line summary taken from the source's documentation.

    Prefers the first line of the first ``/** ... */`` block, then the text of
    the first ``@notice`` tag.  Returns an empty string if neither exists.
    """
    comment = _DOC_COMMENT_RE.search(source)
    if comment:
        return comment.group(1)
    notice = _NOTICE_RE.search(source)
    if notice:
        return notice.group(1).strip()
    return ""
