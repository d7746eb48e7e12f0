"""Core project generation building blocks."""

from fibergen.core.config import PLACEHOLDER, GeneratorConfig
from fibergen.core.errors import (
    DirectoryCreationError,
    ExternalCommandError,
    FiberGenError,
    FileWriteError,
    TemplateNotFoundError,
)
from fibergen.core.gomod import GO_MOD_INIT, init_module
from fibergen.core.layout import DIRECTORIES, PATH_MAPPING, ProjectLayout
from fibergen.core.materialize import (
    GenerationResult,
    create_directories,
    generate_project,
    materialize,
    render_files,
    write_files,
)
from fibergen.core.store import TemplateStore
from fibergen.core.substitute import substitute
from fibergen.core.types import Stage, StageCallback

__all__ = [
    "DIRECTORIES",
    "GO_MOD_INIT",
    "PATH_MAPPING",
    "PLACEHOLDER",
    "DirectoryCreationError",
    "ExternalCommandError",
    "FiberGenError",
    "FileWriteError",
    "GenerationResult",
    "GeneratorConfig",
    "ProjectLayout",
    "Stage",
    "StageCallback",
    "TemplateNotFoundError",
    "TemplateStore",
    "create_directories",
    "generate_project",
    "init_module",
    "materialize",
    "render_files",
    "substitute",
    "write_files",
]
