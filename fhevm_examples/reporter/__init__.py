"""Documentation output for the FHEVM example catalog.

Renders one GitBook page per example and maintains the ``SUMMARY.md`` table
of contents that lists them by category.
"""

from fhevm_examples.reporter.docs_generator import BatchResult, DocsGenerator
from fhevm_examples.reporter.example_docs import render_example_doc
from fhevm_examples.reporter.summary import (
    DEFAULT_SUMMARY,
    IndexEntry,
    SummaryIndex,
    entry_line,
    register_entry,
)

__all__ = [
    "BatchResult",
    "DEFAULT_SUMMARY",
    "DocsGenerator",
    "IndexEntry",
    "SummaryIndex",
    "entry_line",
    "register_entry",
    "render_example_doc",
]
