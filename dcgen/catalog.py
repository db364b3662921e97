"""Package catalog for the supported base image families.

Each family maps abstract tool names to the concrete package names of its
package manager and carries the commands needed to install packages and
create users on images of that family.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple


class ImageFamily(Enum):
    """Groups of base images sharing a package manager and user tooling."""

    ALPINE = "alpine"
    DEBIAN = "debian"


class PackageFamily(NamedTuple):
    """Package names and commands for one base image family."""

    family: ImageFamily
    packages: Mapping[str, str]
    install_cmd: str
    update_cmd: str
    clean_cmd: str
    add_user_cmd: str
    default_shell: str
    zsh_shell: str = "/bin/zsh"
    single_step_install: bool = False
    frontend_arg: str | None = None

    def lookup(self, tool: str) -> str | None:
        """Look up the package providing a tool.

        Parameters
        ----------
        tool : str
            Abstract tool identifier, e.g. ``"netcat"``

        Returns
        -------
        str | None
            The package name for this family, or None if the tool is unknown

        """
        return self.packages.get(tool)


ALPINE = PackageFamily(
    family=ImageFamily.ALPINE,
    packages=MappingProxyType(
        {
            # C
            "gcc": "gcc",
            "make": "make",
            "clang": "clang",
            "build-base": "build-base",
            "valgrind": "valgrind",
            # Python
            "python3": "python3",
            "python3-pip": "py3-pip",
            "ipython": "py3-ipython",
            "jupyter": "py3-jupyterlab",
            "numpy": "py3-numpy",
            "pandas": "py3-pandas",
            "matplotlib": "py3-matplotlib",
            # Node
            "nodejs": "nodejs",
            "npm": "npm",
            "yarn": "yarn",
            # Editors
            "nano": "nano",
            "neovim": "neovim",
            # Network
            "curl": "curl",
            "wget": "wget",
            "netcat": "netcat-openbsd",
            "tcpdump": "tcpdump",
            "nmap": "nmap",
            # Debugging/RE
            "gdb": "gdb",
            "strace": "strace",
            "ltrace": "ltrace",
            "binutils": "binutils",
            "radare2": "radare2",
            "file": "file",
            "readelf": "binutils",
            "lsof": "lsof",
            "objdump": "binutils",
            # Rust
            "rust": "rust",
            "cargo": "cargo",
            "rustfmt": "rustfmt",
            "rust-analyzer": "rust-analyzer",
            # Database
            "sqlite": "sqlite",
            "postgresql-client": "postgresql-client",
            "redis-tools": "redis",
            # Base
            "bash": "bash",
            "git": "git",
            "ca-certificates": "ca-certificates",
            "zsh": "zsh",
        }
    ),
    install_cmd="apk add --no-cache",
    update_cmd="true",
    clean_cmd="true",
    add_user_cmd="adduser -D -u",
    default_shell="/bin/ash",
    single_step_install=True,
)

DEBIAN = PackageFamily(
    family=ImageFamily.DEBIAN,
    packages=MappingProxyType(
        {
            # C
            "gcc": "gcc",
            "make": "make",
            "clang": "clang",
            "build-base": "build-essential",
            "valgrind": "valgrind",
            # Python
            "python3": "python3",
            "python3-pip": "python3-pip",
            "ipython": "ipython3",
            "jupyter": "jupyter-notebook",
            "numpy": "python3-numpy",
            "pandas": "python3-pandas",
            "matplotlib": "python3-matplotlib",
            # Node
            "nodejs": "nodejs",
            "npm": "npm",
            "yarn": "yarnpkg",
            # Editors
            "nano": "nano",
            "neovim": "neovim",
            # Network
            "curl": "curl",
            "wget": "wget",
            "netcat": "netcat-traditional",
            "tcpdump": "tcpdump",
            "nmap": "nmap",
            # Debugging/RE
            "gdb": "gdb",
            "strace": "strace",
            "ltrace": "ltrace",
            "binutils": "binutils",
            "file": "file",
            "readelf": "binutils",
            "lsof": "lsof",
            "objdump": "binutils",
            # Rust
            "rust": "rustc",
            "cargo": "cargo",
            # Database
            "sqlite": "sqlite3",
            "postgresql-client": "postgresql-client",
            "redis-tools": "redis-tools",
            # Base
            "bash": "bash",
            "git": "git",
            "ca-certificates": "ca-certificates",
            "zsh": "zsh",
        }
    ),
    install_cmd="apt-get install -y --no-install-recommends",
    update_cmd="apt-get update",
    clean_cmd="rm -rf /var/lib/apt/lists/*",
    add_user_cmd="useradd -m -u",
    default_shell="/bin/bash",
    frontend_arg="DEBIAN_FRONTEND=noninteractive",
)

CATALOGS: Mapping[ImageFamily, PackageFamily] = MappingProxyType(
    {
        ImageFamily.ALPINE: ALPINE,
        ImageFamily.DEBIAN: DEBIAN,
    }
)


def family_for_image(base_image: str) -> ImageFamily:
    """Determine the image family of a base image.

    Anything that is not an Alpine image is treated as Debian-like.

    Parameters
    ----------
    base_image : str
        Base image reference, e.g. ``"alpine:3.18"``

    Returns
    -------
    ImageFamily
        The family whose package manager the image uses

    """
    if base_image.startswith(ImageFamily.ALPINE.value):
        return ImageFamily.ALPINE
    return ImageFamily.DEBIAN


def catalog_for_image(base_image: str) -> PackageFamily:
    """Get the package catalog for a base image."""
    return CATALOGS[family_for_image(base_image)]
