"""Derived files for a generated example project.

Produces the Hardhat deploy script, ``package.json`` and ``README.md`` from
the extracted contract name and the example descriptor.  Every render method
is pure: the same inputs always give byte-identical output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..catalog import ExampleDescriptor
from ..utils import write_text
from .templates import TemplateRenderer

PACKAGE_VERSION = "1.0.0"

PACKAGE_SCRIPTS: dict[str, str] = {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "deploy": "hardhat run scripts/deploy.ts",
    "lint": "eslint . --ext .ts",
    "format": "prettier --write .",
}

PACKAGE_DEV_DEPENDENCIES: dict[str, str] = {
    "@fhevm/solidity": "^0.9.1",
    "@fhevm/hardhat-plugin": "^0.3.0-1",
    "@nomicfoundation/hardhat-toolbox": "^2.0.0",
    "@types/node": "^20.0.0",
    "hardhat": "^2.19.0",
    "typescript": "^5.0.0",
    "ethers": "^5.7.0",
}


class ConfigSynthesizer:
    """Generates the deploy script, package manifest and README."""

    # Output file (relative to the project root) -> template name
    _TEMPLATES: dict[str, str] = {
        "scripts/deploy.ts": "deploy.ts.j2",
        "README.md": "README.md.j2",
    }

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Pure renderers ----------------------------------------------------

    def render_deploy_script(self, contract_name: str) -> str:
        """Return a Hardhat deploy script for *contract_name*."""
        return self.renderer.render(
            self._TEMPLATES["scripts/deploy.ts"], self._deploy_context(contract_name)
        )

    def build_package_manifest(self, example: ExampleDescriptor) -> dict[str, Any]:
        """Return the ``package.json`` payload for *example*.

        The key set is fixed; only ``name`` and ``description`` depend on the
        descriptor.
        """
        return {
            "name": f"fhevm-{example.identifier}",
            "version": PACKAGE_VERSION,
            "description": example.description,
            "scripts": dict(PACKAGE_SCRIPTS),
            "devDependencies": dict(PACKAGE_DEV_DEPENDENCIES),
        }

    def render_package_json(self, example: ExampleDescriptor) -> str:
        return json.dumps(self.build_package_manifest(example), indent=2) + "\n"

    def render_readme(self, example: ExampleDescriptor, contract_name: str) -> str:
        """Return the generated project's README."""
        return self.renderer.render(
            self._TEMPLATES["README.md"], self._readme_context(example, contract_name)
        )

    # -- Writer ------------------------------------------------------------

    def write_all(
        self,
        output_dir: str | Path,
        contract_name: str,
        example: ExampleDescriptor,
    ) -> dict[str, Path]:
        """Write every derived file into *output_dir*.

        Existing files (for instance the template's own ``package.json``) are
        overwritten.

        Returns:
            Mapping of descriptive name to written file path.
        """
        root = Path(output_dir)
        return {
            "deploy": self.renderer.render_to_file(
                self._TEMPLATES["scripts/deploy.ts"],
                root / "scripts" / "deploy.ts",
                self._deploy_context(contract_name),
            ),
            "package": write_text(root / "package.json", self.render_package_json(example)),
            "readme": self.renderer.render_to_file(
                self._TEMPLATES["README.md"],
                root / "README.md",
                self._readme_context(example, contract_name),
            ),
        }

    # -- Template contexts -------------------------------------------------

    @staticmethod
    def _deploy_context(contract_name: str) -> dict[str, Any]:
        return {"contract_name": contract_name}

    @staticmethod
    def _readme_context(example: ExampleDescriptor, contract_name: str) -> dict[str, Any]:
        return {"example": example, "contract_name": contract_name}
