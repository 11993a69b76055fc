"""Resolved runtime options for trycmd."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from trycmd.constants import DEFAULT_SHELL


class ColorMode(str, Enum):
    """When to colorize the result message."""

    NEVER = "never"
    ALWAYS = "always"
    AUTO = "auto"


class TryOptions(BaseModel):
    """Options settable from the command line or the environment."""

    interactive: bool = False
    color: ColorMode = ColorMode.NEVER
    shell: str = DEFAULT_SHELL
    verbose: bool = False
    debug: bool = False
    help: bool = False
    command: list[str] = Field(default_factory=list)

    @field_validator("shell", mode="before")
    @classmethod
    def _default_shell(cls, value: str | None) -> str:
        return value or DEFAULT_SHELL

    @property
    def has_command(self) -> bool:
        return bool(self.command)
