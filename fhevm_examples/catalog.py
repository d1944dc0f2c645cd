"""Descriptor table for every example the kit knows how to build.

The table is populated once at import time and only read afterwards.  Look
examples up by identifier with :func:`get_example`.
"""

from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import UnknownExampleError

_KEBAB_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class ExampleDescriptor(BaseModel):
    """Immutable description of one example project."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., description="Unique kebab-case key, e.g. 'fhe-counter'")
    title: str = Field(..., description="Human-readable title used in docs and the index")
    description: str = Field(default="", description="Free-text summary")
    category: str = Field(..., description="Index section the example is listed under")
    contract: str = Field(..., description="Contract source path, relative to the project root")
    test: str = Field(..., description="Companion test path, relative to the project root")
    output: Optional[str] = Field(
        default=None, description="Rendered doc path; defaults to docs/<identifier>.md"
    )

    @field_validator("identifier")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not _KEBAB_RE.match(value):
            raise ValueError(f"identifier must be kebab-case, got {value!r}")
        return value

    @property
    def output_path(self) -> str:
        """Effective relative path of the rendered documentation page."""
        return self.output or f"docs/{self.identifier}.md"

    @property
    def output_filename(self) -> str:
        """Basename of :attr:`output_path`; this is what the index links to."""
        return PurePosixPath(self.output_path).name

    @property
    def test_filename(self) -> str:
        return PurePosixPath(self.test).name


def _example(**kwargs: str) -> tuple[str, ExampleDescriptor]:
    descriptor = ExampleDescriptor(**kwargs)
    return descriptor.identifier, descriptor


EXAMPLES: dict[str, ExampleDescriptor] = dict(
    [
        # Basic
        _example(
            identifier="fhe-counter",
            title="FHE Counter",
            description=(
                "Simple FHE counter demonstrating encrypted arithmetic operations "
                "(add, subtract, compare)"
            ),
            category="Basic - Arithmetic",
            contract="contracts/FHECounter.sol",
            test="test/Counter.ts",
        ),
        _example(
            identifier="counter-comparison",
            title="Counter Comparison",
            description=(
                "Comparison between regular counter and FHE counter to understand "
                "encryption benefits"
            ),
            category="Basic - Arithmetic",
            contract="contracts/Counter.sol",
            test="test/Counter.ts",
        ),
        # Encryption
        _example(
            identifier="encryption-single",
            title="Encrypt a Single Value",
            description="Encrypt single values with input proofs and proper validation",
            category="Encryption",
            contract="contracts/EncryptionExample.sol",
            test="test/FHEExamples.ts",
        ),
        _example(
            identifier="encryption-multiple",
            title="Encrypt Multiple Values",
            description="Batch encryption of multiple values with different data types",
            category="Encryption",
            contract="contracts/EncryptionExample.sol",
            test="test/FHEExamples.ts",
        ),
        # Decryption
        _example(
            identifier="decryption-user",
            title="User Decryption",
            description="User-only decryption patterns for private data access",
            category="Decryption",
            contract="contracts/DecryptionExample.sol",
            test="test/FHEExamples.ts",
        ),
        _example(
            identifier="decryption-public",
            title="Public Decryption",
            description="Public decryption with oracle patterns for transparent reveals",
            category="Decryption",
            contract="contracts/DecryptionExample.sol",
            test="test/FHEExamples.ts",
        ),
        # Access control
        _example(
            identifier="access-control",
            title="Access Control",
            description="FHE.allow and FHE.allowThis patterns for permission management",
            category="Access Control",
            contract="contracts/AccessControlExample.sol",
            test="test/FHEExamples.ts",
        ),
        _example(
            identifier="anti-patterns",
            title="Anti-Patterns",
            description="Common mistakes with FHE and correct alternatives for each",
            category="Best Practices",
            contract="contracts/AntiPatterns.sol",
            test="test/FHEExamples.ts",
        ),
        # Advanced
        _example(
            identifier="privacy-prediction-basic",
            title="Privacy Prediction Platform - Basic",
            description=(
                "This example demonstrates how to build a confidential prediction "
                "platform using FHEVM, allowing users to make encrypted predictions "
                "on future events."
            ),
            category="Advanced - Prediction Markets",
            contract="contracts/PrivacyGuess.sol",
            test="test/PrivacyGuess.ts",
            output="docs/privacy-prediction-basic.md",
        ),
        _example(
            identifier="privacy-prediction-fhe",
            title="Privacy Prediction Platform - FHE Enhanced",
            description=(
                "This example shows an advanced FHE-based prediction platform with "
                "multi-round support, enhanced privacy features, and batch operations."
            ),
            category="Advanced - Prediction Markets",
            contract="contracts/PrivacyGuessFHESimple.sol",
            test="test/PrivacyGuessFHESimple.ts",
            output="docs/privacy-prediction-fhe.md",
        ),
    ]
)


def get_example(identifier: str) -> ExampleDescriptor:
    """Return the descriptor for *identifier*.

    Raises:
        UnknownExampleError: If the identifier is not registered.  The error
            carries every valid identifier so callers can show them.
    """
    try:
        return EXAMPLES[identifier]
    except KeyError:
        raise UnknownExampleError(identifier, sorted(EXAMPLES)) from None


def list_examples(category: str | None = None) -> list[ExampleDescriptor]:
    """Return descriptors in table order, optionally limited to one category."""
    return [d for d in EXAMPLES.values() if category is None or d.category == category]


def categories() -> list[str]:
    """Distinct categories in the order they first appear in the table."""
    seen: list[str] = []
    for descriptor in EXAMPLES.values():
        if descriptor.category not in seen:
            seen.append(descriptor.category)
    return seen
