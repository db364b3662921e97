"""Build and run the generated image with a local container engine."""

from __future__ import annotations

import shutil
import subprocess

from loguru import logger

from dcgen.constants import CONTAINER_TOOLS, IMAGE_TAG_FORMAT
from dcgen.exceptions import CommandError, EngineNotFoundError


def detect_container_tool() -> str:
    """Find the container engine to use.

    Returns
    -------
    str
        The first of podman or docker found on the PATH

    Raises
    ------
    EngineNotFoundError
        If neither engine is installed

    """
    for tool in CONTAINER_TOOLS:
        if shutil.which(tool):
            logger.debug(f"Found container engine: {tool}")
            return tool

    msg = "Neither Docker nor Podman found on your system. Please install one of them."
    raise EngineNotFoundError(msg)


def image_tag(user_name: str) -> str:
    """Build the image tag for a user's container."""
    return IMAGE_TAG_FORMAT.format(user=user_name)


def run_command(command: list[str], error_msg: str) -> None:
    """Run a container engine command, attached to the terminal.

    Parameters
    ----------
    command : list[str]
        The command to execute as a list of strings
    error_msg : str
        Message of the raised error if the command fails

    Raises
    ------
    CommandError
        If the command exits with a non-zero status or cannot be started

    """
    logger.debug(f"Running command: {' '.join(command)}")

    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError as e:
        msg = f"{error_msg} (exit code {e.returncode})"
        raise CommandError(msg) from e
    except OSError as e:
        msg = f"{error_msg}: {e}"
        raise CommandError(msg) from e


def build_and_run(tag: str, tool: str) -> None:
    """Build the image from the current directory and start a container.

    Parameters
    ----------
    tag : str
        Image tag to build and run
    tool : str
        Container engine binary

    Raises
    ------
    CommandError
        If the build or the run fails; the run is not attempted after a failed build

    """
    logger.info(f"Using {tool} to build and run the container with tag: {tag}")

    logger.info(f"Building image: {tag}")
    run_command([tool, "build", "-t", tag, "."], "Image build failed")

    logger.info(f"Running container: {tag}")
    run_command([tool, "run", "--rm", "-it", tag], "Container run failed")
