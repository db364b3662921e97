"""Category and profile registries.

Categories group abstract tools by functional area and profiles group
categories into development stacks. Both tables are read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Reserved self-test fixture, resolves to a small fixed package set
TEST_FIXTURE = "test"

CATEGORIES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "C": ("gcc", "make", "clang", "build-base", "gdb", "strace", "ltrace", "binutils", "valgrind"),
        "Rust": ("rust", "cargo", "rustfmt", "clippy", "rust-analyzer"),
        "Python": ("python3", "python3-pip", "ipython", "jupyter", "numpy", "pandas", "matplotlib"),
        "Node": ("nodejs", "npm", "yarn"),
        "Editors": ("nano", "neovim"),
        "Network": ("curl", "wget", "netcat", "tcpdump", "nmap", "git", "ca-certificates"),
        "Debugging/RE": ("gdb", "strace", "ltrace", "radare2", "file", "readelf", "lsof", "objdump", "valgrind"),
        "Database": ("sqlite", "postgresql-client", "redis-tools"),
        TEST_FIXTURE: ("git", "curl", "ca-certificates", "nano", "binutils"),
    }
)

PROFILES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "WebDev": ("Node", "Python", "Editors", "Network", "Database"),
        "Embedded": ("C", "Rust", "Editors", "Network", "Debugging/RE"),
        "DataScience": ("Python", "Editors", "Database"),
        "RE": ("Debugging/RE", "C", "Editors", "Network"),
        "FullStack": ("Node", "Python", "Editors", "Database", "Network", "C", "Rust", "Debugging/RE"),
        TEST_FIXTURE: (TEST_FIXTURE,),
    }
)


def category_tools(category: str) -> tuple[str, ...] | None:
    """Get the tools of a category.

    Parameters
    ----------
    category : str
        Category identifier, e.g. ``"Python"``

    Returns
    -------
    tuple[str, ...] | None
        Tool identifiers in declaration order, or None for an unknown category

    """
    return CATEGORIES.get(category)


def profile_categories(profile: str) -> tuple[str, ...] | None:
    """Get the categories of a profile.

    Parameters
    ----------
    profile : str
        Profile identifier, e.g. ``"WebDev"``

    Returns
    -------
    tuple[str, ...] | None
        Category identifiers in declaration order, or None for an unknown profile

    """
    return PROFILES.get(profile)


def category_names() -> list[str]:
    """List the known categories in declaration order."""
    return list(CATEGORIES)


def profile_names() -> list[str]:
    """List the known profiles in declaration order."""
    return list(PROFILES)
