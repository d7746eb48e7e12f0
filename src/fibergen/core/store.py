"""Read-only store of the template files bundled with fiber-gen."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
import importlib.resources as ilr
from importlib.resources.abc import Traversable
from types import MappingProxyType

from fibergen.core.errors import TemplateNotFoundError
from fibergen.core.substitute import substitute

SCAFFOLD_PACKAGE = "fibergen"
SCAFFOLD_DIR = "scaffold"


def _walk(node: Traversable, prefix: str) -> Iterator[tuple[str, bytes]]:
    for child in node.iterdir():
        template_id = f"{prefix}{child.name}"
        if child.is_dir():
            yield from _walk(child, f"{template_id}/")
        elif child.is_file() and not child.name.startswith((".", "__")):
            yield template_id, child.read_bytes()


class TemplateStore(Mapping[str, bytes]):
    """
    Immutable mapping of template identifier to raw template bytes.

    Identifiers are slash-separated paths relative to the scaffold directory,
    e.g. ``"go/app.go"``. The store is filled once and never mutated.
    """

    def __init__(self, templates: Mapping[str, bytes]) -> None:
        self._templates: Mapping[str, bytes] = MappingProxyType(dict(templates))

    @classmethod
    def from_package(
        cls, package: str = SCAFFOLD_PACKAGE, directory: str = SCAFFOLD_DIR
    ) -> TemplateStore:
        """Load every file bundled under ``package/directory``."""
        root = ilr.files(package) / directory
        return cls(dict(_walk(root, "")))

    def __getitem__(self, template_id: str) -> bytes:
        return self._templates[template_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def resolve(self, template_id: str) -> bytes:
        """Return the raw content for ``template_id`` or raise ``TemplateNotFoundError``."""
        if not template_id:
            raise ValueError("template_id must be a non-empty string.")
        try:
            return self._templates[template_id]
        except KeyError:
            raise TemplateNotFoundError(template_id) from None

    def render(self, template_id: str, placeholder: str, value: str) -> bytes:
        """Resolve ``template_id`` and substitute ``value`` for ``placeholder``, as bytes."""
        return substitute(self.resolve(template_id), placeholder, value)
