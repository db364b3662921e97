"""Constants used throughout the Dockerfile generator."""

from __future__ import annotations

import os

# Global debug flag - can be set via environment variable or command line
DEBUG_MODE = os.getenv("DEBUG", "false").lower() in ("true", "1", "yes", "on")

# Console log level, overridden by --debug
LOG_LEVEL = os.getenv("DCGEN_LOG_LEVEL", "INFO").upper()

PROG_NAME = "dcg"

# Build defaults
DEFAULT_BASE = "alpine:3.18"
DEFAULT_USER = "devuser"
DEFAULT_UID = "1000"
DEFAULT_WORKDIR = "/workspace"

# Base images the generated Dockerfiles are tested against
TESTED_BASE_IMAGES = ("alpine:3.18", "debian:12", "debian:bookworm")

# Always installed, regardless of profile or category selection
BASELINE_PACKAGES = ("git", "ca-certificates", "bash", "curl")
ZSH_PACKAGE = "zsh"

DOCKERFILE_NAME = "Dockerfile"

# Container engines, in order of preference
CONTAINER_TOOLS = ("podman", "docker")
IMAGE_TAG_FORMAT = "{user}_container:latest"
