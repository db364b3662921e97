"""Dev Container Dockerfile Generator.

This package resolves development profiles and categories into base-image
specific package lists and renders a Dockerfile for a development container.
"""

from __future__ import annotations

__version__ = "1.0.0"
