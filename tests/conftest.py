"""Shared fixtures for the fiber-gen test suite."""

from __future__ import annotations

import sys

import pytest

from fibergen.core.config import GeneratorConfig
from fibergen.core.store import TemplateStore


def python_command(code: str) -> tuple[str, ...]:
    """Stand-in for ``go mod init``: runs ``code`` with the module name as ``sys.argv[1]``."""
    return (sys.executable, "-c", code)


@pytest.fixture(scope="session")
def store() -> TemplateStore:
    return TemplateStore.from_package()


@pytest.fixture
def ok_config() -> GeneratorConfig:
    return GeneratorConfig(
        init_command=python_command(
            "import sys; print('go: creating new go.mod: module', sys.argv[1])"
        )
    )


@pytest.fixture
def failing_config() -> GeneratorConfig:
    return GeneratorConfig(
        init_command=python_command(
            "import sys; print('go: invalid module path'); "
            "print('stderr line', file=sys.stderr); sys.exit(1)"
        )
    )
