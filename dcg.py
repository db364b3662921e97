#!/usr/bin/env python3
"""Dev Container Dockerfile Generator - Entry Point.

Generates a Dockerfile for a development container from predefined profiles
and categories. The functionality lives in the dcgen package.
"""

from __future__ import annotations

from dcgen.main import main

if __name__ == "__main__":
    main()
