"""Runs the module initialization command inside a generated project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import subprocess

from fibergen.core.errors import ExternalCommandError

GO_MOD_INIT: tuple[str, ...] = ("go", "mod", "init")


def init_module(
    project_root: Path,
    module_name: str,
    command: Sequence[str] = GO_MOD_INIT,
) -> str:
    """
    Run ``command`` with ``module_name`` appended, inside ``project_root``.

    Blocks until the command exits. There is no timeout.

    Args:
        project_root: Working directory for the command.
        module_name: Sole argument passed to the command.
        command: Executable and leading arguments.

    Returns:
        The combined stdout/stderr text of a successful run.

    Raises:
        ExternalCommandError: The command exited non-zero or could not be started.
    """
    argv = [*command, module_name]
    try:
        result = subprocess.run(
            argv,
            cwd=project_root,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ExternalCommandError(argv, None, str(exc)) from exc

    if result.returncode != 0:
        raise ExternalCommandError(argv, result.returncode, result.stdout)
    return result.stdout
