"""File output for the Dockerfile generator."""

from __future__ import annotations

from pathlib import Path

from dcgen.constants import DOCKERFILE_NAME
from dcgen.exceptions import GenerationError


class FileManager:
    """Manages file operations for the generator."""

    @staticmethod
    def write_dockerfile(content: str, target_dir: Path | None = None) -> Path:
        """Write the generated Dockerfile.

        Parameters
        ----------
        content : str
            Rendered Dockerfile text
        target_dir : Path | None, optional
            Directory to write into, by default the current directory

        Returns
        -------
        Path
            Path of the written Dockerfile

        Raises
        ------
        GenerationError
            If the file cannot be written

        """
        target = (target_dir or Path.cwd()) / DOCKERFILE_NAME
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"Could not write {target}: {e}"
            raise GenerationError(msg) from e
        return target
