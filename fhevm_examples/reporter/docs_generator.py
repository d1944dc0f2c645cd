"""Documentation flow: render example pages and keep ``SUMMARY.md`` current.

Single examples are rendered and registered in one go.  A batch run renders
every example first and only then updates the index, one registration at a
time, so no two index updates ever overlap.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ..catalog import EXAMPLES, ExampleDescriptor, get_example
from ..config import Settings
from ..errors import ExampleKitError, SourceNotFoundError
from ..utils import (
    print_banner,
    print_error,
    print_info,
    print_success,
    print_warning,
    read_source,
    write_text,
)
from .example_docs import render_example_doc
from .summary import SummaryIndex


class BatchResult(BaseModel):
    """Outcome of :meth:`DocsGenerator.generate_all`."""

    generated: list[str] = Field(default_factory=list, description="Identifiers rendered")
    failed: dict[str, str] = Field(
        default_factory=dict, description="Identifier -> error message"
    )
    registered: list[str] = Field(
        default_factory=list, description="Identifiers newly added to the index"
    )

    @property
    def success(self) -> bool:
        return not self.failed


class DocsGenerator:
    """Renders GitBook pages for examples and maintains the index."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.summary = SummaryIndex(self.settings.summary_path)

    # -- Public API --------------------------------------------------------

    def render(self, identifier: str) -> str:
        """Return the markdown page for *identifier* without writing it.

        Raises:
            UnknownExampleError: The identifier is not registered.
            SourceNotFoundError: The contract file is missing.
            UnreadableSourceError: A source file is not valid UTF-8.
        """
        example = get_example(identifier)
        contract_source = self._read_required(example.contract)
        test_source = self._read_optional(example.test)
        if test_source is None:
            print_info("Test file not found, generating docs without test code")
        return render_example_doc(example, contract_source, test_source)

    def generate(self, identifier: str, update_summary: bool = True) -> Path:
        """Render *identifier*'s page to its output path.

        Args:
            identifier: Key in the descriptor table.
            update_summary: Also register the page in ``SUMMARY.md``.

        Returns:
            Path of the written page.
        """
        example = get_example(identifier)
        print_info(f"Generating documentation for: {example.title}")

        markdown = self.render(identifier)
        output = write_text(self.settings.resolve(example.output_path), markdown)
        print_success(f"Documentation generated: {example.output_path}")

        if update_summary:
            self.register(example)

        print_banner(f'Documentation for "{example.title}" generated successfully!')
        return output

    def register(self, example: ExampleDescriptor) -> bool:
        """Add *example* to ``SUMMARY.md``; returns ``False`` if already listed."""
        if not self.summary.exists():
            print_warning(f"Creating new {self.settings.summary_name}")
        if self.summary.register(example):
            print_success(f"Updated {self.settings.summary_name}")
            return True
        print_info(f"Example already in {self.settings.summary_name}")
        return False

    def generate_all(self) -> BatchResult:
        """Render every example, then register each one in the index.

        A failure to render or write one example (missing or undecodable
        source, filesystem error) is recorded and does not stop the batch.
        Index updates run afterwards, sequentially, for every example in
        table order.
        """
        print_info("Generating documentation for all examples...")
        result = BatchResult()

        for identifier in EXAMPLES:
            try:
                self.generate(identifier, update_summary=False)
            except (ExampleKitError, OSError) as exc:
                print_error(f"Failed to generate docs for {identifier}: {exc}")
                result.failed[identifier] = str(exc)
            else:
                result.generated.append(identifier)

        print_info(f"Updating {self.settings.summary_name}...")
        for identifier, example in EXAMPLES.items():
            if self.register(example):
                result.registered.append(identifier)

        print_banner(f"Generated {len(result.generated)} documentation files")
        if result.failed:
            print_error(f"Failed: {len(result.failed)}")
        return result

    # -- Helpers -----------------------------------------------------------

    def _read_required(self, relative: str) -> str:
        path = self.settings.resolve(relative)
        if not path.is_file():
            raise SourceNotFoundError(relative, what="File")
        return read_source(path, relative)

    def _read_optional(self, relative: str) -> str | None:
        path = self.settings.resolve(relative)
        if not path.is_file():
            return None
        return read_source(path, relative)
