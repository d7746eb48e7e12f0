"""Writes a project layout to disk and runs module initialization."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path

from fibergen.core.config import GeneratorConfig
from fibergen.core.errors import DirectoryCreationError, FileWriteError
from fibergen.core.gomod import init_module
from fibergen.core.layout import ProjectLayout
from fibergen.core.store import TemplateStore
from fibergen.core.types import Stage, StageCallback


@dataclass(kw_only=True)
class GenerationResult:
    """
    Outcome of a successful run.

    Attributes:
        root: Project root directory.
        directories: Directories ensured on disk.
        files: Files written, in write order.
        output: Combined output of the module initialization command.
    """

    root: Path
    directories: list[Path] = field(default_factory=list)
    files: list[Path] = field(default_factory=list)
    output: str = ""


def render_files(
    layout: ProjectLayout,
    store: TemplateStore,
    project_name: str,
    placeholder: str,
) -> dict[Path, bytes]:
    """Render every mapped template in memory. Nothing touches the disk."""
    return {
        dest: store.render(template_id, placeholder, project_name)
        for dest, template_id in layout.files
    }


def create_directories(directories: Iterable[Path]) -> list[Path]:
    """Create each directory and its missing parents. Existing directories are fine."""
    created: list[Path] = []
    for directory in directories:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreationError(directory, exc) from exc
        created.append(directory)
    return created


def write_files(contents: Mapping[Path, bytes], file_mode: int = 0o644) -> list[Path]:
    """
    Write rendered contents to their destinations, overwriting existing files.

    Stops at the first failure. Files written before it stay on disk.
    """
    written: list[Path] = []
    for path, content in contents.items():
        try:
            path.write_bytes(content)
            os.chmod(path, file_mode)
        except OSError as exc:
            raise FileWriteError(path, exc) from exc
        written.append(path)
    return written


def materialize(
    layout: ProjectLayout,
    store: TemplateStore,
    project_name: str,
    *,
    config: GeneratorConfig,
    on_stage: StageCallback | None = None,
) -> GenerationResult:
    """Render all templates, create the directory set, then write every file."""
    contents = render_files(layout, store, project_name, config.placeholder)

    result = GenerationResult(root=layout.root)
    result.directories = create_directories(layout.directories)
    if on_stage is not None:
        on_stage(Stage.DIRECTORIES_CREATED, result.directories)

    result.files = write_files(contents, config.file_mode)
    if on_stage is not None:
        on_stage(Stage.FILES_WRITTEN, result.files)
    return result


def generate_project(
    project_name: str,
    *,
    root: Path | None = None,
    store: TemplateStore | None = None,
    config: GeneratorConfig | None = None,
    on_stage: StageCallback | None = None,
) -> GenerationResult:
    """
    Generate a project named ``project_name``.

    Creates the directory set, writes every template with the project name
    substituted, then runs the module initialization command in the project
    root. The first failure aborts the run and is raised unchanged; nothing
    already created is removed.

    Args:
        project_name: Placeholder value and module name.
        root: Project root. Defaults to ``Path(project_name)``.
        store: Template source. Defaults to the bundled templates.
        config: Generation settings.
        on_stage: Called after each completed stage.

    Returns:
        Paths created and the module initialization output.
    """
    config = config or GeneratorConfig()
    store = store if store is not None else TemplateStore.from_package()
    layout = ProjectLayout.for_root(root if root is not None else Path(project_name))

    def notify(stage: Stage, detail: object) -> None:
        if on_stage is not None:
            on_stage(stage, detail)

    notify(Stage.START, layout.root)
    result = materialize(layout, store, project_name, config=config, on_stage=on_stage)

    result.output = init_module(layout.root, project_name, config.init_command)
    notify(Stage.MODULE_INITIALIZED, result.output)

    notify(Stage.DONE, result)
    return result
