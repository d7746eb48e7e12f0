"""Directory set and destination-to-template mapping of a generated project."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

DIRECTORIES: tuple[str, ...] = (
    "views",
    "public/css",
    "public/js",
    "public/lib",
    "routes",
    "controllers",
)

PATH_MAPPING: tuple[tuple[str, str], ...] = (
    ("views/index.html", "html/index.html"),
    ("public/css/style.css", "css/style.css"),
    ("public/js/app.js", "js/index.js"),
    ("public/lib/htmx.min.js", "lib/htmx.min.js"),
    ("routes/userRoutes.go", "go/userRoutes.go"),
    ("controllers/CreateUserHandler.go", "go/userHandler.go"),
    ("app.go", "go/app.go"),
    ("Makefile", "Makefile"),
)

DESCRIPTIONS: dict[str, str] = {
    "views/index.html": "htmx page",
    "public/css/style.css": "stylesheet",
    "public/js/app.js": "client script",
    "public/lib/htmx.min.js": "htmx loader",
    "routes/userRoutes.go": "route registration",
    "controllers/CreateUserHandler.go": "request handler",
    "app.go": "Fiber entry point",
    "Makefile": "build targets",
}


def _normalized(path: Path) -> Path:
    return Path(os.path.normpath(path))


@dataclass(frozen=True, kw_only=True)
class ProjectLayout:
    """
    Concrete paths of a project rooted at ``root``.

    Attributes:
        root: Project root directory.
        directories: Directories to create, in creation order.
        files: ``(destination, template_id)`` pairs, one per generated file.
    """

    root: Path
    directories: tuple[Path, ...]
    files: tuple[tuple[Path, str], ...]

    def __post_init__(self) -> None:
        root = _normalized(self.root)
        for path in (*self.directories, *(dest for dest, _ in self.files)):
            if _normalized(path) == root or not _normalized(path).is_relative_to(root):
                raise ValueError(f"{path} lies outside the project root {self.root}.")
        missing = {dest.parent for dest, _ in self.files} - {self.root, *self.directories}
        if missing:
            raise ValueError(f"no directory declared for {sorted(map(str, missing))}.")

    @classmethod
    def for_root(
        cls,
        root: Path,
        directories: tuple[str, ...] = DIRECTORIES,
        mapping: tuple[tuple[str, str], ...] = PATH_MAPPING,
    ) -> ProjectLayout:
        """Resolve the relative directory set and path mapping against ``root``."""
        return cls(
            root=root,
            directories=tuple(root / d for d in directories),
            files=tuple((root / dest, template_id) for dest, template_id in mapping),
        )

    @property
    def template_ids(self) -> list[str]:
        return [template_id for _, template_id in self.files]
