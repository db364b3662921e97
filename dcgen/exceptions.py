"""Exceptions raised by the Dockerfile generator."""

from __future__ import annotations


class DcgenError(Exception):
    """Base exception for Dockerfile generator operations."""


class ValidationError(DcgenError):
    """Raised when user supplied build settings are malformed."""


class GenerationError(DcgenError):
    """Raised when the Dockerfile cannot be generated or written."""


class EngineNotFoundError(DcgenError):
    """Raised when no supported container engine is on the PATH."""


class CommandError(DcgenError):
    """Raised when a container engine command fails."""
