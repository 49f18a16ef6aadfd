"""Generate the project's ``package.json`` from the template manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from .errors import ManifestError
from .variants import Variant, foreign_dependency_names, profile_for

__all__ = ["DEFAULT_DESCRIPTION", "build_manifest", "generate_manifest", "load_manifest"]


LOGGER = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "TypeScript Express backend generated by ts-backend-starter"


def load_manifest(path: str | Path) -> dict[str, Any]:
    """Read and parse the manifest at ``path``."""

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"template manifest not found: {path}") from exc
    except OSError as exc:
        raise ManifestError(f"cannot read template manifest {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"template manifest {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"template manifest {path} must contain a JSON object")
    return data


def _merge_section(
    current: Any,
    additions: Mapping[str, str],
    removals: set[str],
) -> dict[str, str]:
    section = dict(current) if isinstance(current, Mapping) else {}
    for name in removals:
        section.pop(name, None)
    section.update(additions)
    return {name: section[name] for name in sorted(section)}


def build_manifest(
    template: Mapping[str, Any],
    project_name: str,
    variant: Variant | str,
) -> dict[str, Any]:
    """Return a manifest derived from ``template`` for ``variant``.

    ``name`` and ``description`` are overridden, dependencies owned by other
    variants are removed and those of ``variant`` are inserted. Other fields
    keep their values and order.
    """

    profile = profile_for(variant)
    removals = foreign_dependency_names(variant)

    manifest = dict(template)
    manifest["name"] = project_name
    manifest["description"] = DEFAULT_DESCRIPTION
    manifest["dependencies"] = _merge_section(
        template.get("dependencies"), profile.dependencies, removals
    )
    dev = _merge_section(template.get("devDependencies"), profile.dev_dependencies, removals)
    if dev or "devDependencies" in template:
        manifest["devDependencies"] = dev
    return manifest


def generate_manifest(
    template_manifest_path: str | Path,
    project_name: str,
    variant: Variant | str,
    target_path: str | Path,
) -> dict[str, Any]:
    """Write the manifest for ``project_name`` to ``target_path``.

    Raises :class:`ManifestError` when the template manifest is missing or
    malformed, or when the result cannot be written.
    """

    template = load_manifest(template_manifest_path)
    manifest = build_manifest(template, project_name, variant)

    target_path = Path(target_path)
    try:
        target_path.write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot write {target_path}: {exc}") from exc

    LOGGER.debug("wrote manifest for %s (%s) to %s", project_name, Variant(variant).value, target_path)
    return manifest
