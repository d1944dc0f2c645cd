"""FHEVM example kit configuration.

Typed settings for both flows (scaffolding and documentation).  Settings use
a Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .materializer import DEFAULT_EXCLUDES


class Settings(BaseModel):
    """Global settings for the example kit.

    Relative paths are resolved against :attr:`root_dir`, the project that
    holds ``contracts/``, ``test/`` and ``docs/``.
    """

    root_dir: Path = Field(default=Path("."))
    template_dir: Path = Field(
        default=Path("../fhevm-hardhat-template-main"),
        description="Hardhat template copied into every generated example",
    )
    output_root: Path = Field(
        default=Path("output"),
        description="Parent directory for generated examples when none is given",
    )
    docs_dir: str = Field(default="docs")
    summary_name: str = Field(default="SUMMARY.md")
    exclude_names: frozenset[str] = Field(default=DEFAULT_EXCLUDES)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    def resolve(self, relative: str | Path) -> Path:
        """Resolve *relative* against the project root (absolute paths pass through)."""
        path = Path(relative)
        if path.is_absolute():
            return path
        return self.root_dir / path

    @property
    def template_path(self) -> Path:
        """Absolute-or-root-relative location of the Hardhat template."""
        return self.resolve(self.template_dir)

    @property
    def output_path(self) -> Path:
        return self.resolve(self.output_root)

    @property
    def docs_path(self) -> Path:
        """Directory that holds rendered docs and the index."""
        return self.resolve(self.docs_dir)

    @property
    def summary_path(self) -> Path:
        """Path to the GitBook ``SUMMARY.md`` table of contents."""
        return self.docs_path / self.summary_name

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the settings to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Settings":
        """Load previously-saved settings from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            FHEVM_EXAMPLES_ROOT, FHEVM_EXAMPLES_TEMPLATE_DIR,
            FHEVM_EXAMPLES_OUTPUT, FHEVM_EXAMPLES_EXCLUDE (comma-separated).

        Keyword arguments whose value is not ``None`` take precedence over the
        environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FHEVM_EXAMPLES_ROOT"):
            kwargs["root_dir"] = Path(os.environ["FHEVM_EXAMPLES_ROOT"])
        if os.environ.get("FHEVM_EXAMPLES_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["FHEVM_EXAMPLES_TEMPLATE_DIR"])
        if os.environ.get("FHEVM_EXAMPLES_OUTPUT"):
            kwargs["output_root"] = Path(os.environ["FHEVM_EXAMPLES_OUTPUT"])
        if os.environ.get("FHEVM_EXAMPLES_EXCLUDE"):
            names = os.environ["FHEVM_EXAMPLES_EXCLUDE"].split(",")
            kwargs["exclude_names"] = frozenset(n.strip() for n in names if n.strip())

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
