"""Custom exception types raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class StarterError(RuntimeError):
    """Base class for failures that abort the scaffolding run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TemplateNotFoundError(StarterError):
    """Raised when the bundled template directory cannot be located."""

    def __init__(self, template_dir: Path) -> None:
        super().__init__(f"Template directory not found in package: {template_dir}")
        self.template_dir = template_dir


class TargetNotEmptyError(StarterError):
    """Raised when the target directory already holds files."""

    def __init__(self, target: Path) -> None:
        super().__init__(
            f"Target directory is not empty: {target}. "
            "Please specify an empty directory or a new name."
        )
        self.target = target


class ManifestError(StarterError):
    """Raised when the package manifest cannot be read, parsed or written."""
