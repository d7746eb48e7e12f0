"""Tests for fibergen.core.gomod — module initialization command."""

from __future__ import annotations

from pathlib import Path
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from conftest import python_command
from fibergen.core.errors import ExternalCommandError
from fibergen.core.gomod import GO_MOD_INIT, init_module


class TestInitModule:
    def test_success_returns_output(self, tmp_path: Path) -> None:
        output = init_module(tmp_path, "demo", python_command("import sys; print(sys.argv[1])"))
        assert output.strip() == "demo"

    def test_runs_in_project_root(self, tmp_path: Path) -> None:
        init_module(
            tmp_path,
            "demo",
            python_command("import sys; open('go.mod', 'w').write('module ' + sys.argv[1])"),
        )
        assert (tmp_path / "go.mod").read_text() == "module demo"

    def test_non_zero_exit_raises_with_combined_output(self, tmp_path: Path) -> None:
        code = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr); sys.exit(3)"
        with pytest.raises(ExternalCommandError) as exc_info:
            init_module(tmp_path, "demo", python_command(code))

        err = exc_info.value
        assert err.returncode == 3
        assert "out" in err.output
        assert "err" in err.output
        assert err.command[-1] == "demo"

    def test_missing_executable_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExternalCommandError) as exc_info:
            init_module(tmp_path, "demo", ("fiber-gen-no-such-binary",))
        assert exc_info.value.returncode is None

    def test_missing_working_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExternalCommandError):
            init_module(tmp_path / "absent", "demo", python_command("pass"))

    @patch("fibergen.core.gomod.subprocess.run")
    def test_default_command_is_go_mod_init(self, mock_run: MagicMock, tmp_path: Path) -> None:
        mock_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=0, stdout="go: creating new go.mod: module demo\n"
        )

        output = init_module(tmp_path, "demo")

        assert "module demo" in output
        args, kwargs = mock_run.call_args
        assert args[0] == [*GO_MOD_INIT, "demo"]
        assert args[0] == ["go", "mod", "init", "demo"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["stderr"] == subprocess.STDOUT
