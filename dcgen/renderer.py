"""Dockerfile rendering.

Each section of the Dockerfile is produced by a small function returning a
list of lines. ``render_dockerfile`` concatenates them, so conditional
sections either contribute their lines (including the blank line that
separates them) or nothing at all.
"""

from __future__ import annotations

from collections.abc import Sequence

from dcgen.catalog import PackageFamily, catalog_for_image
from dcgen.config import BuildConfig
from dcgen.constants import PROG_NAME

OH_MY_ZSH_INSTALLER = "https://raw.githubusercontent.com/ohmyzsh/ohmyzsh/master/tools/install.sh"
ZSH_PLUGINS = (
    ("zsh-autosuggestions", "https://github.com/zsh-users/zsh-autosuggestions"),
    ("zsh-syntax-highlighting", "https://github.com/zsh-users/zsh-syntax-highlighting.git"),
)

# Appended to every install invocation
INSTALL_EXTRAS = "git curl"

CONTINUATION = " \\"
INDENT = "    "


def default_shell(config: BuildConfig, catalog: PackageFamily) -> str:
    """Select the login shell for the container user.

    Parameters
    ----------
    config : BuildConfig
        Build settings
    catalog : PackageFamily
        Package catalog of the base image

    Returns
    -------
    str
        The zsh path when zsh is installed, otherwise the family's default shell

    """
    if config.install_zsh:
        return catalog.zsh_shell
    return catalog.default_shell


def render_header(config: BuildConfig, generator: str = PROG_NAME) -> list[str]:
    """Render the FROM and LABEL instructions."""
    return [
        f"FROM {config.base_image}",
        f'LABEL maintainer="{config.user_name}"{CONTINUATION}',
        f'      description="Dev container generated by {generator}"',
    ]


def render_frontend(catalog: PackageFamily) -> list[str]:
    """Render the noninteractive frontend argument for families that need one."""
    if catalog.frontend_arg is None:
        return []
    return ["", f"ARG {catalog.frontend_arg}"]


def render_install(catalog: PackageFamily, packages: Sequence[str]) -> list[str]:
    """Render the package installation block.

    Parameters
    ----------
    catalog : PackageFamily
        Package catalog of the base image
    packages : Sequence[str]
        Resolved package names

    Returns
    -------
    list[str]
        A single install command for single-step families, otherwise an
        update, install and clean chain; empty when there are no packages

    """
    if not packages:
        return []

    install = f"{catalog.install_cmd} {' '.join(packages)} {INSTALL_EXTRAS}"
    lines = ["", "# Install packages"]
    if catalog.single_step_install:
        lines.append(f"RUN {install}")
    else:
        lines.extend(
            [
                f"RUN {catalog.update_cmd} &&{CONTINUATION}",
                f"{INDENT}{install} &&{CONTINUATION}",
                f"{INDENT}{catalog.clean_cmd}",
            ]
        )
    return lines


def render_user(config: BuildConfig, catalog: PackageFamily, shell: str) -> list[str]:
    """Render user creation, working directory and build context copy."""
    owner = f"{config.uid}:{config.uid}"
    return [
        "",
        "# Create user",
        f"RUN getent passwd {config.user_name} || "
        f"{catalog.add_user_cmd} {config.uid} -s {shell} {config.user_name}",
        f"RUN mkdir -p {config.workdir} && chown -R {owner} {config.workdir}",
        f"WORKDIR {config.workdir}",
        f"ENV HOME={config.home}",
        f"COPY --chown={owner} . {config.workdir}",
    ]


def render_zsh(config: BuildConfig) -> list[str]:
    """Render the Oh-My-Zsh and plugin installation block.

    Every step is guarded so rebuilding over an existing home directory is
    harmless: Oh-My-Zsh and each plugin are only installed when missing and
    ``.zshrc`` is only edited when it exists.
    """
    if not config.install_zsh:
        return []

    home = config.home
    plugin_dir = "$ZSH_CUSTOM/plugins"
    plugin_names = " ".join(name for name, _ in ZSH_PLUGINS)

    lines = [
        "",
        f"# Install Oh-My-Zsh + plugins for {config.user_name}",
        f"RUN ZSH_CUSTOM={home}/.oh-my-zsh/custom &&{CONTINUATION}",
        f"{INDENT}if [ ! -d {home}/.oh-my-zsh ]; then{CONTINUATION}",
        f'{INDENT}{INDENT}sh -c "$(curl -fsSL {OH_MY_ZSH_INSTALLER})" "" --unattended;{CONTINUATION}',
        f"{INDENT}fi &&{CONTINUATION}",
        f"{INDENT}mkdir -p {plugin_dir} &&{CONTINUATION}",
    ]
    for name, url in ZSH_PLUGINS:
        lines.append(
            f'{INDENT}[ ! -d "{plugin_dir}/{name}" ] && git clone {url} {plugin_dir}/{name}'
            f' || echo "{name} already installed" &&{CONTINUATION}'
        )
    lines.extend(
        [
            f"{INDENT}if [ -f {home}/.zshrc ]; then{CONTINUATION}",
            f"{INDENT}{INDENT}sed -i 's/plugins=(git)/plugins=(git {plugin_names})/' {home}/.zshrc;{CONTINUATION}",
            f"{INDENT}fi &&{CONTINUATION}",
            f"{INDENT}chown -R {config.uid}:{config.uid} {home}",
        ]
    )
    return lines


def render_footer(config: BuildConfig, shell: str) -> list[str]:
    """Render the runtime user and default command."""
    return [
        "",
        "# Default user and shell",
        f"USER {config.uid}",
        f'CMD ["{shell}"]',
    ]


def render_dockerfile(config: BuildConfig, packages: Sequence[str], generator: str = PROG_NAME) -> str:
    """Render the complete Dockerfile.

    Parameters
    ----------
    config : BuildConfig
        Validated build settings
    packages : Sequence[str]
        Resolved, deduplicated package names
    generator : str, optional
        Program name recorded in the image description label

    Returns
    -------
    str
        Dockerfile text terminated by a newline

    """
    catalog = catalog_for_image(config.base_image)
    shell = default_shell(config, catalog)

    lines = [
        *render_header(config, generator),
        *render_frontend(catalog),
        *render_install(catalog, packages),
        *render_user(config, catalog, shell),
        *render_zsh(config),
        *render_footer(config, shell),
    ]
    return "\n".join(lines) + "\n"
