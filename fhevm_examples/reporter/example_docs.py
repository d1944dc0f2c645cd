"""GitBook documentation page for a single example.

Produces a markdown page with the example's overview, key concepts, a
placement hint, a tab group holding the contract and (when available) its
test, static usage snippets, and privacy notes.  The output depends only on
the inputs, so re-rendering unchanged sources gives byte-identical pages.
"""

from __future__ import annotations

from ..catalog import ExampleDescriptor
from ..extractor import extract_contract_name, extract_description

FALLBACK_CONTRACT_NAME = "Contract"

KEY_CONCEPTS: tuple[tuple[str, str], ...] = (
    ("Encrypted Predictions", "Using FHE to keep predictions private until reveal"),
    ("Commit-Reveal Scheme", "Two-phase protocol for prediction integrity"),
    ("Event Management", "Creating and managing prediction events"),
    ("Access Control", "Proper permission handling for decryption"),
    ("Result Verification", "Transparent verification after event finalization"),
)

PRIVACY_NOTES: tuple[tuple[str, str], ...] = (
    ("Encrypted Storage", "Predictions are stored as hashed commitments"),
    ("Integrity Verification", "Commit-reveal ensures predictions can't be changed"),
    ("Access Control", "Only predictors can reveal their own predictions"),
    ("Transparent Results", "Event outcomes and verification are on-chain"),
)

# (heading, code lines) pairs for the "Usage Patterns" section.
USAGE_PATTERNS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Creating a Prediction Event",
        (
            "const tx = await contract.createEvent(",
            '  "Will Bitcoin reach $100k in 2026?",',
            '  "Predict whether Bitcoin will reach the $100,000 milestone",',
            "  30 * 24 * 60 * 60 // 30 days",
            ");",
        ),
    ),
    (
        "Making an Encrypted Prediction",
        (
            "// Make a prediction (true = yes, false = no)",
            "await contract.makePrediction(eventId, true);",
        ),
    ),
    (
        "Finalizing and Revealing",
        (
            "// After event ends, finalize with actual outcome",
            "await contract.finalizeEvent(eventId, true);",
            "",
            "// Reveal your prediction",
            "await contract.revealPrediction(eventId, true);",
        ),
    ),
)


def render_example_doc(
    example: ExampleDescriptor,
    contract_source: str,
    test_source: str | None = None,
) -> str:
    """Render the documentation page for *example*.

    Args:
        example: Descriptor supplying title, description and file names.
        contract_source: Full text of the contract; always embedded.
        test_source: Full text of the companion test.  When ``None`` or empty
            the test tab is left out entirely.

    Returns:
        The markdown document.
    """
    contract_name = extract_contract_name(contract_source) or FALLBACK_CONTRACT_NAME
    description = example.description or extract_description(contract_source)

    sections: list[str] = []

    # Title & overview
    sections.append(f"# {example.title}")
    sections.append("")
    sections.append(description)
    sections.append("")

    sections.append("## Key Concepts")
    sections.append("")
    sections.append("This example demonstrates:")
    sections.append("")
    for name, text in KEY_CONCEPTS:
        sections.append(f"- **{name}**: {text}")
    sections.append("")

    sections.extend(_hint_block())

    # Source tabs
    sections.append("{% tabs %}")
    sections.append("")
    sections.extend(_tab(f"{contract_name}.sol", "solidity", contract_source))
    if test_source:
        sections.extend(_tab(example.test_filename, "typescript", test_source))
    sections.append("{% endtabs %}")
    sections.append("")

    sections.append("## Usage Patterns")
    sections.append("")
    for heading, code in USAGE_PATTERNS:
        sections.append(f"### {heading}")
        sections.append("")
        sections.append("```javascript")
        sections.extend(code)
        sections.append("```")
        sections.append("")

    sections.append("## Privacy & Security")
    sections.append("")
    for name, text in PRIVACY_NOTES:
        sections.append(f"- **{name}**: {text}")
    sections.append("")

    return "\n".join(sections)


def _hint_block() -> list[str]:
    return [
        '{% hint style="info" %}',
        "To run this example correctly, make sure the files are placed in the "
        "following directories:",
        "",
        "- `.sol` file → `<your-project-root-dir>/contracts/`",
        "- `.ts` file → `<your-project-root-dir>/test/`",
        "",
        "This ensures Hardhat can compile and test your contracts as expected.",
        "{% endhint %}",
        "",
    ]


def _tab(title: str, language: str, source: str) -> list[str]:
    return [
        f'{{% tab title="{title}" %}}',
        "",
        f"```{language}",
        source.rstrip("\n"),
        "```",
        "",
        "{% endtab %}",
        "",
    ]
