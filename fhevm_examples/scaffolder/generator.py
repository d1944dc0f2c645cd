"""Standalone example project generation.

Takes an example identifier, copies the shared Hardhat template into a new
directory, drops the example's contract and test into it, and writes the
derived deploy script, ``package.json`` and README.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from ..catalog import ExampleDescriptor, get_example
from ..config import Settings
from ..errors import ExtractionError, PreconditionError, SourceNotFoundError
from ..extractor import extract_contract_name
from ..materializer import materialize
from ..utils import (
    console,
    display_path,
    ensure_dir,
    print_banner,
    print_info,
    print_step,
    print_success,
    read_source,
)
from .config_gen import ConfigSynthesizer

# Created when no template directory is available.
BASIC_STRUCTURE: tuple[str, ...] = ("contracts", "test", "scripts")


class ExampleGenerator:
    """Builds one standalone example project per call to :meth:`create`.

    All fatal conditions (unknown example, missing contract, existing
    destination, unreadable contract name) are detected before anything is
    written.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.synthesizer = ConfigSynthesizer()

    def default_output_dir(self, identifier: str) -> Path:
        return self.settings.output_path / f"fhevm-{identifier}"

    # -- Public API --------------------------------------------------------

    def create(self, identifier: str, output_dir: str | Path | None = None) -> Path:
        """Generate the example project for *identifier*.

        Args:
            identifier: Key in the descriptor table.
            output_dir: Destination directory; must not exist.  Defaults to
                ``<output_root>/fhevm-<identifier>``.

        Returns:
            Path to the generated project root.

        Raises:
            UnknownExampleError: The identifier is not registered.
            SourceNotFoundError: The contract file is missing.
            PreconditionError: The destination already exists.
            UnreadableSourceError: The contract file is not valid UTF-8.
            ExtractionError: No contract declaration in the contract file.
        """
        example = get_example(identifier)
        destination = Path(output_dir) if output_dir else self.default_output_dir(identifier)

        contract_path = self.settings.resolve(example.contract)
        test_path = self.settings.resolve(example.test)
        if not contract_path.is_file():
            raise SourceNotFoundError(example.contract, what="Contract")
        if destination.exists():
            raise PreconditionError(f"Output directory already exists: {destination}", destination)

        contract_name = extract_contract_name(read_source(contract_path, example.contract))
        if contract_name is None:
            raise ExtractionError(example.contract)

        print_info(f"Creating FHEVM example: {identifier}")
        print_info(f"Output directory: {destination}")

        print_step(1, "Setting up template structure")
        self._prepare_structure(destination)

        print_step(2, "Copying contract")
        target = ensure_dir(destination / "contracts") / f"{contract_name}.sol"
        shutil.copyfile(contract_path, target)
        print_success(f"Contract copied: {target.name}")

        print_step(3, "Copying test")
        if self._copy_test(test_path, destination) is None:
            print_info("Test file not found, skipping...")

        print_step(4, "Generating configuration and README")
        self.synthesizer.write_all(destination, contract_name, example)
        print_success("Configuration updated")
        print_success("README.md generated")

        self._print_next_steps(example, destination)
        return destination

    # -- Steps -------------------------------------------------------------

    def _prepare_structure(self, destination: Path) -> None:
        template = self.settings.template_path
        if template.is_dir():
            copied = materialize(template, destination, self.settings.exclude_names)
            print_success(f"Template copied ({len(copied)} files)")
            return

        for name in BASIC_STRUCTURE:
            (destination / name).mkdir(parents=True, exist_ok=True)
        print_success("Basic structure created")

    def _copy_test(self, test_path: Path, destination: Path) -> Path | None:
        if not test_path.is_file():
            return None
        target = ensure_dir(destination / "test") / test_path.name
        shutil.copyfile(test_path, target)
        print_success(f"Test copied: {target.name}")
        return target

    def _print_next_steps(self, example: ExampleDescriptor, destination: Path) -> None:
        print_banner(f'FHEVM example "{example.identifier}" created successfully!')
        console.print()
        console.print("[bold yellow]Next steps:[/bold yellow]")
        console.print(f"  cd {display_path(destination)}", markup=False, highlight=False)
        console.print("  npm install")
        console.print("  npm run compile")
        console.print("  npm run test")
