"""Model package for trycmd."""

from trycmd.models.invocation_config import ColorMode, InvocationConfig
from trycmd.models.shell_command import ShellCommand

__all__ = [
    "ColorMode",
    "InvocationConfig",
    "ShellCommand",
]
