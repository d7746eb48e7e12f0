"""Shared types for the generation pipeline."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum


class Stage(str, Enum):
    """Stages of a generation run, in order. Any failure aborts the run."""

    START = "start"
    DIRECTORIES_CREATED = "directories-created"
    FILES_WRITTEN = "files-written"
    MODULE_INITIALIZED = "module-initialized"
    DONE = "done"

    @property
    def label(self) -> str:
        labels: dict[Stage, str] = {
            Stage.START: "Creating",
            Stage.DIRECTORIES_CREATED: "Directories",
            Stage.FILES_WRITTEN: "Files",
            Stage.MODULE_INITIALIZED: "Successfully initialized Go module",
            Stage.DONE: "Done!",
        }
        return labels[self]


StageCallback = Callable[[Stage, object], None]
"""Progress hook called as ``on_stage(stage, detail)`` after each stage."""
