"""Typer CLI application for fiber-gen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, cast

from rich.console import Console
from rich.markup import escape
from typer import Exit, Option, Typer

import fibergen
from fibergen.core.errors import FiberGenError
from fibergen.core.layout import DESCRIPTIONS
from fibergen.core.materialize import generate_project
from fibergen.core.types import Stage, StageCallback

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)


def _relative(path: Path, root: Path) -> str:
    return path.relative_to(root).as_posix()


def _stage_reporter(name: str, root: Path) -> StageCallback:
    """Build a progress printer for the project ``name`` rooted at ``root``."""

    def report(stage: Stage, detail: object) -> None:
        if stage is Stage.START:
            _console.print(
                f"[bold green]◇[/]  {stage.label} {escape(root.as_posix())}/...", soft_wrap=True
            )
        elif stage is Stage.DIRECTORIES_CREATED:
            _console.print(f"[bold green]◇[/]  {stage.label}")
            for directory in cast("list[Path]", detail):
                _console.print(f"[dim]│[/]  {escape(_relative(directory, root))}/", soft_wrap=True)
        elif stage is Stage.FILES_WRITTEN:
            _console.print(f"[bold green]◇[/]  {stage.label}")
            for path in cast("list[Path]", detail):
                rel = _relative(path, root)
                desc = DESCRIPTIONS.get(rel, "")
                desc_str = f" [dim]— {desc}[/]" if desc else ""
                _console.print(f"[dim]│[/]  {escape(rel)}{desc_str}", soft_wrap=True)
            _console.print("[dim]│[/]")
        elif stage is Stage.MODULE_INITIALIZED:
            _console.print(f"[bold green]◇[/]  {stage.label}: {escape(name)}", soft_wrap=True)
            for line in str(detail).splitlines():
                _console.print(f"[dim]│  {escape(line)}[/]", soft_wrap=True)
            _console.print("[dim]│[/]")

    return report


@app.command()
def generate(
    name: Annotated[
        str,
        Option(
            "--name",
            "-n",
            help="Project name. Used as the directory and the Go module name.",
            show_default=False,
        ),
    ],
) -> None:
    """Generate a Go Fiber + htmx project."""
    root = Path(name)

    _console.print()
    _console.print(f"[bold cyan]●[/]  fiber-gen v{fibergen.__version__}")
    _console.print("[dim]│[/]")

    try:
        generate_project(name, root=root, on_stage=_stage_reporter(name, root))
    except FiberGenError as exc:
        _err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", soft_wrap=True)
        raise Exit(code=1) from None

    _console.print(
        f"[bold cyan]●[/]  {Stage.DONE.label} cd {escape(name)} && make run", soft_wrap=True
    )
    _console.print()


def main() -> None:
    app()
