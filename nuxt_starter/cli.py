"""Command-line entry point for ``nuxt-starter`` / ``python -m nuxt_starter``.

Usage::

    nuxt-starter my-app
    nuxt-starter .                      # scaffold into the (empty) cwd
    nuxt-starter my-app --package-manager pnpm --skip-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.markup import escape

from nuxt_starter import __version__
from nuxt_starter.config import DEFAULT_TARGET, Settings
from nuxt_starter.errors import ScaffoldError
from nuxt_starter.scaffolder import ProjectScaffolder, ScaffoldResult
from nuxt_starter.scaffolder.package_manager import KNOWN_MANAGERS
from nuxt_starter.utils import (
    console,
    print_error,
    print_info,
    print_next_steps,
    print_success,
    print_warning,
    set_verbose,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nuxt-starter",
        description="Create a Nuxt + TailwindCSS project from the bundled template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nuxt-starter my-app\n"
            "  nuxt-starter . --package-manager pnpm\n"
            "  nuxt-starter my-app --skip-install\n"
        ),
    )
    parser.add_argument(
        "target",
        nargs="?",
        default=DEFAULT_TARGET,
        help=f"Project directory, or '.' for the current one (default: {DEFAULT_TARGET})",
    )
    parser.add_argument(
        "--package-manager",
        choices=KNOWN_MANAGERS,
        default=None,
        help="Package manager to install with (default: detected from the launcher)",
    )
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Use a different template directory",
    )
    parser.add_argument(
        "--registry",
        default=None,
        help="npm registry base URL (default: https://registry.npmjs.org)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Patch the project but do not install dependencies",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Print diagnostic output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Merge parsed CLI arguments over the environment-derived settings."""
    return Settings.from_env(
        target=args.target,
        template_dir=args.template,
        registry_url=args.registry,
        package_manager=args.package_manager,
        install=False if args.skip_install else None,
        verbose=args.verbose or None,
    )


def report(result: ScaffoldResult) -> None:
    """Print the closing summary for a finished run."""
    if result.installed:
        print_success("✅ Installation complete!")
    else:
        print_warning("Skipped dependency installation.")
    print_next_steps(result.next_steps)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = settings_from_args(args)
    except (ValidationError, ValueError) as exc:
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        sys.exit(1)

    set_verbose(settings.verbose)
    location = "the current directory" if settings.in_current_dir else escape(settings.target)
    print_info(f"🚀 Creating Nuxt + TailwindCSS project in {location}...")

    scaffolder = ProjectScaffolder(settings)
    try:
        result = asyncio.run(scaffolder.run())
    except ScaffoldError as exc:
        console.print(f"[bold red]❌ Error:[/bold red] {escape(str(exc))}")
        sys.exit(1)

    report(result)


if __name__ == "__main__":
    main()
