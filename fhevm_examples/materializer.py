"""Copy a project template into a fresh directory, skipping build output.

The copy is single-shot: preconditions are checked before anything is written,
but a failure halfway through leaves whatever was already copied in place.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from pathlib import Path

from .errors import PreconditionError, SourceNotFoundError

# Directory names that never belong in a generated example.
DEFAULT_EXCLUDES: frozenset[str] = frozenset(
    {"node_modules", "artifacts", "cache", "coverage", "types", "dist", ".git"}
)


def materialize(
    source_dir: str | Path,
    dest_dir: str | Path,
    exclude_names: Iterable[str] = DEFAULT_EXCLUDES,
) -> list[Path]:
    """Recursively copy *source_dir* into a new *dest_dir*.

    Directories whose name is in *exclude_names* are skipped entirely: nothing
    is created for them on the destination side.  Only directories are
    matched; a regular file called ``cache`` is still copied.  File contents
    are copied byte for byte.

    Args:
        source_dir: Existing directory to copy from.
        dest_dir: Destination that must not exist yet.
        exclude_names: Directory names to leave out.

    Returns:
        Destination paths of every copied file, in copy order.

    Raises:
        SourceNotFoundError: If *source_dir* does not exist.
        PreconditionError: If *source_dir* is not a directory or *dest_dir*
            already exists.
    """
    source = Path(source_dir)
    dest = Path(dest_dir)
    excluded = frozenset(exclude_names)

    if not source.exists():
        raise SourceNotFoundError(source, what="Template directory")
    if not source.is_dir():
        raise PreconditionError(f"Template path is not a directory: {source}", source)
    if dest.exists():
        raise PreconditionError(f"Output directory already exists: {dest}", dest)

    copied: list[Path] = []
    _copy_tree(source, dest, excluded, copied)
    return copied


def _copy_tree(source: Path, dest: Path, excluded: frozenset[str], copied: list[Path]) -> None:
    dest.mkdir(parents=True)
    for child in sorted(source.iterdir(), key=lambda p: p.name):
        target = dest / child.name
        if child.is_dir():
            if child.name in excluded:
                continue
            _copy_tree(child, target, excluded, copied)
        else:
            shutil.copyfile(child, target)
            copied.append(target)
