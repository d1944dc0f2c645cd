"""Command-line entry point for the FHEVM example kit.

Usage::

    fhevm-examples materialize fhe-counter ./my-counter
    fhevm-examples render privacy-prediction-basic
    fhevm-examples render --all
    fhevm-examples list --category Encryption
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fhevm_examples.catalog import categories, list_examples
from fhevm_examples.config import Settings
from fhevm_examples.errors import ExampleKitError
from fhevm_examples.reporter import DocsGenerator
from fhevm_examples.scaffolder import ExampleGenerator
from fhevm_examples.utils import print_error, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fhevm-examples",
        description="FHEVM example kit -- scaffold example projects and generate their docs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fhevm-examples materialize privacy-prediction-basic ./my-prediction-platform\n"
            "  fhevm-examples render privacy-prediction-basic\n"
            "  fhevm-examples render --all\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Project root holding contracts/, test/ and docs/ (default: current directory)",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Hardhat template to copy (default: ../fhevm-hardhat-template-main)",
    )
    parser.add_argument(
        "--output-root",
        default=None,
        help="Parent directory for generated examples (default: ./output)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    materialize = sub.add_parser("materialize", help="Create a standalone example project")
    materialize.add_argument("example", help="Example identifier")
    materialize.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help="Destination directory (must not exist; default: <output-root>/fhevm-<example>)",
    )

    render = sub.add_parser("render", help="Generate GitBook documentation")
    target = render.add_mutually_exclusive_group(required=True)
    target.add_argument("example", nargs="?", default=None, help="Example identifier")
    target.add_argument("--all", action="store_true", help="Generate docs for every example")
    render.add_argument(
        "--no-summary",
        action="store_true",
        help="Do not register the page in SUMMARY.md",
    )

    list_cmd = sub.add_parser("list", help="List the available examples")
    list_cmd.add_argument(
        "--category",
        choices=categories(),
        default=None,
        help="Only list examples in this category",
    )
    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    return Settings.from_env(
        root_dir=Path(args.root) if args.root else None,
        template_dir=Path(args.template_dir) if args.template_dir else None,
        output_root=Path(args.output_root) if args.output_root else None,
    )


def _list_examples(category: str | None = None) -> None:
    rows = [(d.identifier, d.title, d.category) for d in list_examples(category)]
    print_summary_table(rows, columns=("Example", "Title", "Category"), title="Available examples")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    if args.command == "list":
        _list_examples(args.category)
        return 0

    try:
        settings = _settings_from_args(args)
        if args.command == "materialize":
            ExampleGenerator(settings).create(args.example, args.output_dir)
            return 0

        docs = DocsGenerator(settings)
        if args.all:
            return 0 if docs.generate_all().success else 1
        docs.generate(args.example, update_summary=not args.no_summary)
        return 0
    except (ExampleKitError, OSError) as exc:
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
