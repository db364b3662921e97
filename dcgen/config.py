"""Build configuration for the Dockerfile generator."""

from __future__ import annotations

import re
from typing import NamedTuple

from loguru import logger

from dcgen.constants import (
    DEFAULT_BASE,
    DEFAULT_UID,
    DEFAULT_USER,
    DEFAULT_WORKDIR,
    TESTED_BASE_IMAGES,
)
from dcgen.exceptions import ValidationError

UID_PATTERN = re.compile(r"^[0-9]+$")


class BuildConfig(NamedTuple):
    """Settings that, together with the resolved packages, determine the Dockerfile."""

    base_image: str = DEFAULT_BASE
    user_name: str = DEFAULT_USER
    uid: str = DEFAULT_UID
    workdir: str = DEFAULT_WORKDIR
    install_zsh: bool = False

    @property
    def home(self) -> str:
        """Home directory of the container user."""
        return f"/home/{self.user_name}"


def validate_uid(uid: str) -> str:
    """Validate and normalize a user ID.

    Parameters
    ----------
    uid : str
        The raw user ID, surrounding whitespace is ignored

    Returns
    -------
    str
        The trimmed user ID

    Raises
    ------
    ValidationError
        If the user ID is not a non-negative integer

    """
    trimmed = uid.strip()
    if not UID_PATTERN.match(trimmed):
        msg = f"uid must be numeric: '{trimmed}'"
        raise ValidationError(msg)
    return trimmed


def check_base_image(base_image: str) -> bool:
    """Warn when a base image is outside the tested set.

    Parameters
    ----------
    base_image : str
        Base image reference

    Returns
    -------
    bool
        True if the image is one of the tested base images

    """
    if base_image in TESTED_BASE_IMAGES:
        return True

    logger.warning(f"'{base_image}' is not in the officially tested base images.")
    logger.warning(f"Tested images: {' '.join(TESTED_BASE_IMAGES)}")
    logger.warning("Continuing anyway...")
    return False


def build_config(
    base_image: str = DEFAULT_BASE,
    user_name: str = DEFAULT_USER,
    uid: str = DEFAULT_UID,
    workdir: str = DEFAULT_WORKDIR,
    install_zsh: bool = False,
) -> BuildConfig:
    """Validate raw settings and build a BuildConfig.

    The user ID is validated before the base image is checked so that a
    malformed uid fails without any other output.

    Raises
    ------
    ValidationError
        If the user ID is malformed

    """
    valid_uid = validate_uid(uid)
    check_base_image(base_image)
    return BuildConfig(
        base_image=base_image,
        user_name=user_name,
        uid=valid_uid,
        workdir=workdir,
        install_zsh=install_zsh,
    )
