"""Exception hierarchy for the FHEVM example kit.

Library code raises these; only the CLI entry point catches them, prints a
single message and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class ExampleKitError(Exception):
    """Base class for every fatal condition raised by the kit."""


class NotFoundError(ExampleKitError):
    """Something that was asked for does not exist."""


class UnknownExampleError(NotFoundError):
    """Raised when an example identifier is not in the descriptor table."""

    def __init__(self, identifier: str, available: list[str]) -> None:
        self.identifier = identifier
        self.available = list(available)
        listing = "\n".join(f"  - {name}" for name in self.available)
        super().__init__(
            f"Unknown example: {identifier}\n\nAvailable examples:\n{listing}"
        )


class SourceNotFoundError(NotFoundError):
    """Raised when a required source file or directory is missing."""

    def __init__(self, path: str | Path, what: str = "Source") -> None:
        self.path = Path(path)
        super().__init__(f"{what} not found: {path}")


class PreconditionError(ExampleKitError):
    """Raised before any write when the filesystem is not in the expected state."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class ExtractionError(ExampleKitError):
    """Raised when no contract declaration can be found in a source file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Could not extract contract name from contract file: {path}")


class UnreadableSourceError(ExampleKitError):
    """Raised when a source file exists but is not valid UTF-8 text."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not read source file {path}: {reason}")
