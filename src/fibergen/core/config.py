"""Configuration for project generation."""

from __future__ import annotations

from dataclasses import dataclass

from fibergen.core.gomod import GO_MOD_INIT

PLACEHOLDER = "{AppName}"
"""Marker replaced with the project name in every template."""


@dataclass(frozen=True, kw_only=True)
class GeneratorConfig:
    """
    Settings for a generation run.

    Attributes:
        placeholder: Literal token replaced with the project name in template text.
        init_command: Module initialization command. The project name is appended
            as its final argument.
        file_mode: Permission bits applied to every written file.
    """

    placeholder: str = PLACEHOLDER
    init_command: tuple[str, ...] = GO_MOD_INIT
    file_mode: int = 0o644

    def __post_init__(self) -> None:
        if not self.placeholder:
            raise ValueError("placeholder must be a non-empty string.")
        if not self.init_command:
            raise ValueError("init_command must name at least an executable.")
        if not (0 <= self.file_mode <= 0o777):
            raise ValueError(f"file_mode must be within 0o000..0o777, got {oct(self.file_mode)}.")
