"""Entry point for the Dockerfile generator.

This module provides the main() function and command-line interface that
resolves the selected profiles and categories, renders the Dockerfile and
optionally builds and runs the image.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from loguru import logger
from rich.console import Console
from rich.markup import escape

from dcgen import __version__, constants
from dcgen.config import BuildConfig, build_config
from dcgen.exceptions import CommandError, EngineNotFoundError, GenerationError, ValidationError
from dcgen.file_manager import FileManager
from dcgen.logging_utils import setup_logging
from dcgen.registry import category_names, profile_names
from dcgen.renderer import render_dockerfile
from dcgen.resolver import ResolvedPackages, resolve
from dcgen.runner import build_and_run, detect_container_tool, image_tag

console = Console(soft_wrap=True, highlight=False, emoji=False)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        """Print the usage error and help, then exit with status 1."""
        self.print_help(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Argument parser.

    """
    parser = ArgumentParser(
        prog=constants.PROG_NAME,
        allow_abbrev=False,
        description="Generate a development container Dockerfile from profiles and categories.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Profiles: {' | '.join(profile_names())}\n"
            f"Categories: {' '.join(category_names())}\n"
            "\n"
            "Examples:\n"
            "  %(prog)s --profile WebDev --zsh\n"
            '  %(prog)s --base debian:12 --categories "C Python" --dry-run\n'
            "  %(prog)s --profile Embedded --user dev --uid 1001 --build-run"
        ),
    )
    parser.add_argument(
        "--base",
        default=constants.DEFAULT_BASE,
        metavar="<image>",
        help=f"Base image (default: {constants.DEFAULT_BASE})",
    )
    parser.add_argument(
        "--profile",
        dest="profiles",
        action="append",
        default=[],
        metavar="<profile>",
        help="Predefined profile (can be repeated)",
    )
    parser.add_argument(
        "--categories",
        default="",
        metavar='"<list>"',
        help='Space-separated categories, e.g. "C Python Node Database"',
    )
    parser.add_argument(
        "--user",
        default=constants.DEFAULT_USER,
        metavar="<name>",
        help=f"Username (default: {constants.DEFAULT_USER})",
    )
    parser.add_argument(
        "--uid",
        default=constants.DEFAULT_UID,
        metavar="<uid>",
        help=f"User ID (default: {constants.DEFAULT_UID})",
    )
    parser.add_argument(
        "--workdir",
        default=constants.DEFAULT_WORKDIR,
        metavar="<path>",
        help=f"Working directory (default: {constants.DEFAULT_WORKDIR})",
    )
    parser.add_argument(
        "--zsh",
        action="store_true",
        help="Install zsh and recommended plugins (syntax highlighting, autosuggestions)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print Dockerfile to stdout instead of writing",
    )
    parser.add_argument(
        "--build-run",
        action="store_true",
        help="Build and run the container after generation",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def print_summary(config: BuildConfig, profiles: list[str], resolved: ResolvedPackages) -> None:
    """Print a human readable summary of a generated Dockerfile."""

    def joined(items: list[str] | tuple[str, ...]) -> str:
        return escape(" ".join(items)) if items else "none"

    console.print("[bold green]Dockerfile generated successfully![/bold green]")
    console.print(f"   Base: {escape(config.base_image)}")
    console.print(f"   User: {escape(config.user_name)} (uid: {config.uid})")
    console.print(f"   Profiles: {joined(profiles)}")
    console.print(f"   Categories: {joined(resolved.categories)}")
    console.print(f"   Packages: {joined(resolved.packages)}")


def run(args: argparse.Namespace) -> None:
    """Generate the Dockerfile and optionally build and run it.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments

    Raises
    ------
    ValidationError
        If the uid is malformed
    GenerationError
        If the Dockerfile cannot be written
    EngineNotFoundError
        If a build is requested and no container engine is installed
    CommandError
        If the image build or container run fails

    """
    config = build_config(
        base_image=args.base,
        user_name=args.user,
        uid=args.uid,
        workdir=args.workdir,
        install_zsh=args.zsh,
    )
    resolved = resolve(config.base_image, args.profiles, args.categories, install_zsh=config.install_zsh)
    content = render_dockerfile(config, resolved.packages)

    if args.dry_run:
        sys.stdout.write(content)
        return

    path = FileManager.write_dockerfile(content)
    logger.debug(f"Wrote {path}")
    print_summary(config, args.profiles, resolved)

    if args.build_run:
        tool = detect_container_tool()
        build_and_run(image_tag(config.user_name), tool)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the Dockerfile generator.

    Parses command line arguments, sets up logging and runs the generator.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command line arguments, by default ``sys.argv[1:]``

    Raises
    ------
    SystemExit
        With status 0 on success and 1 on any fatal error

    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.debug or constants.DEBUG_MODE)

    try:
        run(args)
    except GenerationError as e:
        logger.error(f"Error generating Dockerfile: {e}")
        sys.exit(1)
    except (ValidationError, EngineNotFoundError, CommandError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user.")
        sys.exit(130)

    sys.exit(0)


if __name__ == "__main__":
    main()
