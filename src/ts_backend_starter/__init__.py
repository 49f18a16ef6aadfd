"""Scaffold TypeScript Express backends from a bundled template.

The package copies its ``template`` directory into a new project, rewrites
the project's ``package.json`` for the chosen database (MongoDB or
PostgreSQL) and runs the package manager. Everything is usable both
programmatically and via the ``ts-backend-starter`` command.
"""

from __future__ import annotations

from .config import ProjectConfig
from .errors import ManifestError, StarterError, TargetNotEmptyError, TemplateNotFoundError
from .manifest import build_manifest, generate_manifest
from .materialize import ExclusionPolicy, VariantExclusion, copy_tree
from .scaffold import ProjectScaffolder, ScaffoldResult
from .variants import Variant, VariantProfile

__all__ = [
    "ExclusionPolicy",
    "ManifestError",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldResult",
    "StarterError",
    "TargetNotEmptyError",
    "TemplateNotFoundError",
    "Variant",
    "VariantExclusion",
    "VariantProfile",
    "build_manifest",
    "copy_tree",
    "generate_manifest",
]

__version__ = "0.1.0"
