"""Errors raised while generating a project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class FiberGenError(Exception):
    """Base class for every failure that aborts a generation run."""


class TemplateNotFoundError(FiberGenError):
    """A template identifier is missing from the template store."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"template not found: {template_id}")


class DirectoryCreationError(FiberGenError):
    """A project directory could not be created."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        super().__init__(f"error creating directory {path}: {reason}")


class FileWriteError(FiberGenError):
    """A generated file could not be written."""

    def __init__(self, path: Path, reason: OSError) -> None:
        self.path = path
        super().__init__(f"error creating file {path}: {reason}")


class ExternalCommandError(FiberGenError):
    """The module initialization command failed.

    ``output`` holds the combined stdout/stderr of the command, unmodified.
    ``returncode`` is ``None`` when the command could not be started at all.
    """

    def __init__(self, command: Sequence[str], returncode: int | None, output: str) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.output = output
        super().__init__(f"error running '{' '.join(self.command)}': {output}")
