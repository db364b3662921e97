"""Test configuration and fixtures for the Dockerfile generator tests."""

from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from dcgen.config import BuildConfig


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop log sinks added during a test, they may point at captured streams."""
    yield
    logger.remove()


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def warnings_log() -> Generator[list[str], None, None]:
    """Collect the messages of WARNING and higher log records."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def alpine_config() -> BuildConfig:
    """Default build settings on Alpine."""
    return BuildConfig()


@pytest.fixture
def debian_config() -> BuildConfig:
    """Default build settings on Debian."""
    return BuildConfig(base_image="debian:12")


@pytest.fixture
def expected_alpine_test_dockerfile() -> str:
    """Dockerfile for the test profile with default settings."""
    return """FROM alpine:3.18
LABEL maintainer="devuser" \\
      description="Dev container generated by dcg"

# Install packages
RUN apk add --no-cache git curl ca-certificates nano binutils bash git curl

# Create user
RUN getent passwd devuser || adduser -D -u 1000 -s /bin/ash devuser
RUN mkdir -p /workspace && chown -R 1000:1000 /workspace
WORKDIR /workspace
ENV HOME=/home/devuser
COPY --chown=1000:1000 . /workspace

# Default user and shell
USER 1000
CMD ["/bin/ash"]
"""
