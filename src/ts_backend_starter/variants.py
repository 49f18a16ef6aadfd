"""Database variants offered by the scaffolder and their static profiles."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_VARIANT",
    "PROFILES",
    "Variant",
    "VariantProfile",
    "foreign_dependency_names",
    "profile_for",
]


class Variant(str, Enum):
    """Mutually exclusive database integrations."""

    MONGODB = "mongodb"
    POSTGRESQL = "postgresql"


class VariantProfile(BaseModel):
    """Files and dependencies that belong to one :class:`Variant`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    variant: Variant = Field(..., description="Variant described by this profile.")
    label: str = Field(..., description="Name shown in the selection prompt.")
    description: str = Field("", description="Short hint shown next to the label.")
    dependencies: Dict[str, str] = Field(default_factory=dict, description="Runtime packages added to the manifest.")
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, description="Development packages added to the manifest.")
    excluded_paths: Tuple[str, ...] = Field(default=(), description="Template-relative paths left out of the project.")
    post_install: List[str] | None = Field(None, description="Command run inside the project after installing dependencies.")

    def package_names(self) -> set[str]:
        """Return every package name this profile contributes."""

        return set(self.dependencies) | set(self.dev_dependencies)


PROFILES: Dict[Variant, VariantProfile] = {
    Variant.MONGODB: VariantProfile(
        variant=Variant.MONGODB,
        label="MongoDB",
        description="document store via mongoose",
        dependencies={"mongoose": "^8.9.5"},
    ),
    Variant.POSTGRESQL: VariantProfile(
        variant=Variant.POSTGRESQL,
        label="PostgreSQL",
        description="relational store via Prisma",
        dependencies={"@prisma/client": "^6.3.1"},
        dev_dependencies={"prisma": "^6.3.1"},
        excluded_paths=("database",),
        post_install=["npx", "prisma", "init"],
    ),
}

DEFAULT_VARIANT = Variant.MONGODB


def profile_for(variant: Variant | str) -> VariantProfile:
    """Return the profile registered for ``variant``.

    ``variant`` may be given as its string value, e.g. ``"postgresql"``.
    """

    return PROFILES[Variant(variant)]


def foreign_dependency_names(variant: Variant | str) -> set[str]:
    """Package names owned by every variant other than ``variant``."""

    selected = Variant(variant)
    names: set[str] = set()
    for other, profile in PROFILES.items():
        if other is not selected:
            names |= profile.package_names()
    return names - PROFILES[selected].package_names()
