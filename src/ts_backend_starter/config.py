"""Configuration shared by the scaffolder and the command line interface."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_TEMPLATE_DIR = PACKAGE_ROOT / "template"
MANIFEST_NAME = "package.json"

TEMPLATE_DIR_ENV = "TS_STARTER_TEMPLATE_DIR"
PACKAGE_MANAGER_ENV = "TS_STARTER_PACKAGE_MANAGER"


@dataclass(slots=True)
class ProjectConfig:
    """Resolved settings for one scaffolding run.

    Attributes
    ----------
    target:
        Absolute path of the directory that becomes the project root.
    name:
        Project name written to the manifest. Always the base name of
        :attr:`target`.
    template_dir:
        Directory holding the template tree copied into :attr:`target`.
    package_manager:
        Executable used for ``install`` and ``run dev``.
    """

    target: Path
    name: str
    template_dir: Path = DEFAULT_TEMPLATE_DIR
    package_manager: str = "npm"

    @classmethod
    def from_target(
        cls,
        target: str | Path = ".",
        *,
        cwd: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for ``target``.

        Parameters
        ----------
        target:
            Path given on the command line. Relative paths are resolved
            against ``cwd`` (the process working directory by default).
        cwd:
            Base directory for relative targets.
        environ:
            Mapping consulted for ``TS_STARTER_TEMPLATE_DIR`` and
            ``TS_STARTER_PACKAGE_MANAGER``. Defaults to ``os.environ``.
        """

        environ = os.environ if environ is None else environ
        base = Path(cwd) if cwd is not None else Path.cwd()
        resolved = (base / Path(target).expanduser()).resolve()

        template_dir = DEFAULT_TEMPLATE_DIR
        if environ.get(TEMPLATE_DIR_ENV):
            template_dir = Path(environ[TEMPLATE_DIR_ENV]).expanduser().resolve()

        package_manager = environ.get(PACKAGE_MANAGER_ENV, "").strip() or "npm"

        return cls(
            target=resolved,
            name=resolved.name,
            template_dir=template_dir,
            package_manager=package_manager,
        )

    @property
    def template_manifest(self) -> Path:
        """Path of the manifest shipped with the template."""

        return self.template_dir / MANIFEST_NAME

    @property
    def target_manifest(self) -> Path:
        """Path the regenerated manifest is written to."""

        return self.target / MANIFEST_NAME
