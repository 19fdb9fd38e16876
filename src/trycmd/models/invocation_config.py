"""Configuration model for a single trycmd invocation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from trycmd.constants import DEFAULT_SHELL


class ColorMode(str, Enum):
    """When the result banner is colorized."""

    NEVER = "never"
    ALWAYS = "always"
    AUTO = "auto"


class InvocationConfig(BaseModel):
    """Fully resolved options for one run of a subcommand."""

    model_config = ConfigDict(frozen=True)

    shell: str = Field(default=DEFAULT_SHELL, min_length=1)
    interactive: bool = False
    color: ColorMode = ColorMode.AUTO
    verbose: bool = False
    debug: bool = False
    subcommand: tuple[str, ...] = ()
