"""Copy the template tree into a new project directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .config import MANIFEST_NAME
from .variants import VariantProfile

__all__ = [
    "ExclusionPolicy",
    "VariantExclusion",
    "copy_tree",
    "is_empty_directory",
]


LOGGER = logging.getLogger(__name__)


class ExclusionPolicy(Protocol):
    """Decides which template entries are left out of a copy."""

    def should_skip(self, path: Path) -> bool:
        """Return ``True`` when the entry at absolute ``path`` must not be copied."""


@dataclass(slots=True)
class VariantExclusion:
    """Skip the raw manifest and the paths a variant does not use."""

    template_dir: Path
    excluded: frozenset[Path] = field(default_factory=frozenset)

    @classmethod
    def for_profile(
        cls,
        template_dir: str | Path,
        profile: VariantProfile,
    ) -> "VariantExclusion":
        root = Path(template_dir).resolve()
        relative = [MANIFEST_NAME, *profile.excluded_paths]
        return cls(root, frozenset(root / entry for entry in relative))

    def should_skip(self, path: Path) -> bool:
        return Path(path).resolve() in self.excluded


def is_empty_directory(path: str | Path) -> bool:
    """Return ``True`` when ``path`` is absent or a directory with no entries."""

    path = Path(path)
    if not path.exists():
        return True
    if not path.is_dir():
        return False
    return next(path.iterdir(), None) is None


def copy_tree(
    source: str | Path,
    destination: str | Path,
    exclude: ExclusionPolicy | None = None,
) -> list[Path]:
    """Copy every entry under ``source`` into ``destination``.

    Entries for which ``exclude.should_skip`` returns ``True`` are left out
    together with their subtree. Nothing is rolled back when an ``OSError``
    interrupts the copy. Returns the destination path of every copied file.
    """

    source = Path(source).resolve()
    destination = Path(destination)
    if not source.is_dir():
        raise FileNotFoundError(source)

    destination.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    _copy_entries(source, destination, exclude, copied)
    LOGGER.debug("copied %d files from %s to %s", len(copied), source, destination)
    return copied


def _copy_entries(
    source: Path,
    destination: Path,
    exclude: ExclusionPolicy | None,
    copied: list[Path],
) -> None:
    for entry in sorted(source.iterdir()):
        if exclude is not None and exclude.should_skip(entry):
            LOGGER.debug("skipping %s", entry)
            continue

        target = destination / entry.name
        if entry.is_dir():
            target.mkdir(parents=True, exist_ok=True)
            _copy_entries(entry, target, exclude, copied)
            continue

        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(entry, target)
        copied.append(target)
