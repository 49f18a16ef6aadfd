"""Create a backend project from the bundled template."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .config import ProjectConfig
from .errors import TargetNotEmptyError, TemplateNotFoundError
from .manifest import generate_manifest
from .materialize import VariantExclusion, copy_tree, is_empty_directory
from .process import CommandRunner, run_best_effort, run_command
from .variants import Variant, profile_for

__all__ = ["ProjectScaffolder", "ScaffoldResult"]


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of a scaffolding run.

    ``installed`` and ``schema_initialized`` are ``None`` when the step did
    not run.
    """

    target: Path
    variant: Variant
    files: list[Path] = field(default_factory=list)
    installed: bool | None = None
    schema_initialized: bool | None = None


@dataclass(slots=True)
class ProjectScaffolder:
    """Copy the template, write the manifest and run the setup commands."""

    runner: CommandRunner

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self.runner = runner or run_command

    def prepare(self, config: ProjectConfig) -> None:
        """Check the template and make sure ``config.target`` is an empty directory.

        Nothing inside an existing target is touched when this raises.
        """

        if not config.template_dir.is_dir():
            raise TemplateNotFoundError(config.template_dir)

        config.target.mkdir(parents=True, exist_ok=True)
        if not is_empty_directory(config.target):
            raise TargetNotEmptyError(config.target)

    def create(self, config: ProjectConfig, variant: Variant | str) -> ScaffoldResult:
        """Materialize the template for ``variant`` and write ``package.json``."""

        variant = Variant(variant)
        profile = profile_for(variant)
        exclusion = VariantExclusion.for_profile(config.template_dir, profile)

        files = copy_tree(config.template_dir, config.target, exclusion)
        generate_manifest(config.template_manifest, config.name, variant, config.target_manifest)
        files.append(config.target_manifest)

        LOGGER.info("scaffolded %s (%s) with %d files", config.target, variant.value, len(files))
        return ScaffoldResult(target=config.target, variant=variant, files=files)

    def run(
        self,
        config: ProjectConfig,
        select_variant: Callable[[], Variant | str],
        *,
        install: bool = True,
    ) -> ScaffoldResult:
        """Run every step up to, but not including, the dev server.

        ``select_variant`` is only called once the target passed its checks,
        so an interrupted selection leaves the filesystem untouched.
        """

        self.prepare(config)
        result = self.create(config, select_variant())
        if install:
            self.install(config, result)
        return result

    def install(self, config: ProjectConfig, result: ScaffoldResult) -> ScaffoldResult:
        """Install dependencies, then run the variant's post-install command."""

        result.installed = run_best_effort(
            [config.package_manager, "install"], config.target, runner=self.runner
        )

        post_install = profile_for(result.variant).post_install
        if post_install:
            result.schema_initialized = run_best_effort(
                post_install, config.target, runner=self.runner
            )
        return result

    def start_dev_server(self, config: ProjectConfig) -> int:
        """Run ``<package manager> run dev`` and return its exit code.

        A child killed by signal N reports ``128 + N``, as a shell would.
        """

        returncode = self.runner([config.package_manager, "run", "dev"], config.target)
        if returncode < 0:
            return 128 - returncode
        return returncode
