"""Resolve profiles and categories into an ordered package list.

Resolution walks profile -> categories -> tools -> packages. Unknown names at
any level are logged as warnings and skipped so the rest of the selection
still resolves.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from loguru import logger

from dcgen.catalog import catalog_for_image
from dcgen.constants import BASELINE_PACKAGES, ZSH_PACKAGE
from dcgen.registry import category_tools, profile_categories


class ResolvedPackages(NamedTuple):
    """Outcome of a resolution run."""

    packages: tuple[str, ...]
    categories: tuple[str, ...]
    unknown_profiles: tuple[str, ...] = ()
    unknown_categories: tuple[str, ...] = ()
    unknown_tools: tuple[str, ...] = ()


def unique(items: Iterable[str]) -> list[str]:
    """Remove duplicates while keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def expand_profiles(profiles: Iterable[str], unknown: list[str]) -> list[str]:
    """Expand profiles into their categories, in selection order.

    Parameters
    ----------
    profiles : Iterable[str]
        Profile identifiers, surrounding whitespace is ignored
    unknown : list[str]
        Receives every profile that is not registered

    Returns
    -------
    list[str]
        Concatenated category lists, duplicates included

    """
    categories: list[str] = []
    for raw_profile in profiles:
        profile = raw_profile.strip()
        cats = profile_categories(profile)
        if cats is None:
            logger.warning(f"Unknown profile '{profile}'")
            unknown.append(profile)
            continue
        logger.debug(f"Profile '{profile}' expands to {list(cats)}")
        categories.extend(cats)
    return categories


def expand_categories(categories: Iterable[str], unknown: list[str]) -> list[str]:
    """Expand categories into their tools, keeping category order."""
    tools: list[str] = []
    for category in categories:
        cat_tools = category_tools(category)
        if cat_tools is None:
            logger.warning(f"Unknown category '{category}'")
            unknown.append(category)
            continue
        tools.extend(cat_tools)
    return tools


def resolve(
    base_image: str,
    profiles: Iterable[str] = (),
    categories: str = "",
    install_zsh: bool = False,
) -> ResolvedPackages:
    """Resolve the package list for a base image.

    Parameters
    ----------
    base_image : str
        Base image reference, selects the package catalog
    profiles : Iterable[str], optional
        Selected profile identifiers, by default none
    categories : str, optional
        Whitespace separated category identifiers, by default ""
    install_zsh : bool, optional
        Whether zsh is added to the package list, by default False

    Returns
    -------
    ResolvedPackages
        Deduplicated packages in walk order, the categories walked and the
        names that were skipped

    """
    catalog = catalog_for_image(base_image)
    unknown_profiles: list[str] = []
    unknown_categories: list[str] = []
    unknown_tools: list[str] = []

    selected = expand_profiles(profiles, unknown_profiles)
    selected.extend(categories.split())
    selected = unique(selected)
    logger.debug(f"Selected categories: {selected}")

    packages: list[str] = []
    for tool in expand_categories(selected, unknown_categories):
        package = catalog.lookup(tool)
        if package is None:
            logger.warning(f"Tool '{tool}' not found in {catalog.family.value} package map, skipping.")
            unknown_tools.append(tool)
            continue
        packages.append(package)

    packages.extend(BASELINE_PACKAGES)
    if install_zsh:
        packages.append(ZSH_PACKAGE)

    resolved = unique(packages)
    logger.debug(f"Resolved packages: {resolved}")

    return ResolvedPackages(
        packages=tuple(resolved),
        categories=tuple(selected),
        unknown_profiles=tuple(unknown_profiles),
        unknown_categories=tuple(unknown_categories),
        unknown_tools=tuple(unknown_tools),
    )
