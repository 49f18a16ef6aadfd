"""Command line interface for ts-backend-starter."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .config import ProjectConfig
from .errors import StarterError
from .scaffold import ProjectScaffolder, ScaffoldResult
from .selector import Option, confirm, select_option
from .variants import DEFAULT_VARIANT, PROFILES, Variant

LOGGER = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ts-backend-starter",
        description="Scaffold a TypeScript Express backend into a new directory.",
        epilog=(
            "If target-directory is omitted, the current directory is used. "
            "The directory must be empty or not exist yet."
        ),
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=".",
        metavar="target-directory",
        help="Directory the template is copied into",
    )
    parser.add_argument(
        "--database",
        choices=[variant.value for variant in Variant],
        help="Database integration to use instead of asking interactively",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager after copying the template",
    )
    start = parser.add_mutually_exclusive_group()
    start.add_argument(
        "--start",
        dest="start",
        action="store_true",
        default=None,
        help="Start the development server without asking",
    )
    start.add_argument(
        "--no-start",
        dest="start",
        action="store_false",
        help="Do not offer to start the development server",
    )
    parser.set_defaults(start=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _prompt_variant(database: str | None) -> Variant:
    if database:
        return Variant(database)
    if not _interactive():
        LOGGER.info("stdin is not a terminal, using %s", DEFAULT_VARIANT.value)
        return DEFAULT_VARIANT

    options = [
        Option(profile.label, variant, profile.description)
        for variant, profile in PROFILES.items()
    ]
    return select_option(options, "Choose a database")


def _print_next_steps(target_arg: str, result: ScaffoldResult, package_manager: str) -> None:
    print("\nNext steps:")
    steps = [f"cd {target_arg}"]
    if not result.installed:
        steps.append(f"{package_manager} install")
    if result.variant is Variant.POSTGRESQL and not result.schema_initialized:
        steps.append("npx prisma init")
    steps.append("Create .env from example.env and update values")
    steps.append(f"{package_manager} run dev")
    for number, step in enumerate(steps, start=1):
        print(f"{number}) {step}")


def _report(result: ScaffoldResult, package_manager: str) -> None:
    print("\n✔ Project scaffolded successfully!")
    print(f"→ Location: {result.target}")
    print(f"→ Database: {PROFILES[result.variant].label}")
    if result.installed is False:
        print(
            f"Warning: dependency installation failed. Run '{package_manager} install' manually.",
            file=sys.stderr,
        )
    if result.schema_initialized is False:
        print(
            "Warning: Prisma initialization failed. Run 'npx prisma init' manually.",
            file=sys.stderr,
        )


def _run(args: argparse.Namespace) -> int:
    config = ProjectConfig.from_target(args.target)
    scaffolder = ProjectScaffolder()

    result = scaffolder.run(
        config,
        lambda: _prompt_variant(args.database),
        install=not args.skip_install,
    )
    _report(result, config.package_manager)

    start = args.start
    if start is None:
        start = _interactive() and confirm("Start the development server now?", default=False)

    if start:
        print(f"\nStarting development server with '{config.package_manager} run dev'...")
        return scaffolder.start_dev_server(config)

    _print_next_steps(args.target, result, config.package_manager)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return _run(args)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except (StarterError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
