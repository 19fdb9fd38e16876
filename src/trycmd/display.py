"""Result banner and shell-safe argument printing."""

import re
import sys
from collections.abc import Iterable
from typing import TextIO

from trycmd.constants import BOLD_GREEN, BOLD_RED, DIVIDER_LINE, RESET
from trycmd.intl import Labels
from trycmd.models import ColorMode, InvocationConfig

# Anything outside [0-9A-Za-z_./-] must be quoted to survive a POSIX shell.
_UNSAFE_CHAR_RE = re.compile(r"[^0-9A-Za-z_./-]")


def quote_arg(arg: str) -> str:
    """Return ``arg`` as a single POSIX shell word.

    Safe arguments are returned unchanged. Otherwise each run of text between
    single quotes is wrapped in single quotes and each single quote becomes
    ``\\'``, so ``a'b'c`` is printed as ``'a'\\''b'\\''c'``.
    """
    if not _UNSAFE_CHAR_RE.search(arg):
        return arg
    return "\\'".join(f"'{part}'" if part else "" for part in arg.split("'"))


def pretty_print_arg(arg: str, stream: TextIO) -> None:
    """Print a single argument, quoted as necessary."""
    stream.write(quote_arg(arg))


def format_argv(prefix: str, argv: Iterable[str]) -> str:
    return prefix + "".join(f" {quote_arg(arg)}" for arg in argv)


def print_argv(prefix: str, argv: Iterable[str], stream: TextIO) -> None:
    """Print a labelled argument list followed by a newline."""
    stream.write(format_argv(prefix, argv) + "\n")


def color_enabled(mode: ColorMode, stream: TextIO) -> bool:
    """Return whether ANSI color output should be written to ``stream``."""
    mode = ColorMode(mode)
    if mode is ColorMode.NEVER:
        return False
    if mode is ColorMode.ALWAYS:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, style: str, colored: bool) -> str:
    return f"{style}{text}{RESET}" if colored else text


def show_result(
    config: InvocationConfig,
    exit_status: int,
    stream: TextIO | None = None,
    labels: Labels | None = None,
) -> int:
    """Print the result banner for a finished subcommand and return its status."""
    stream = stream if stream is not None else sys.stdout
    labels = labels if labels is not None else Labels()
    colored = color_enabled(config.color, stream)

    if exit_status == 0:
        style, label = BOLD_GREEN, labels.success
    else:
        style, label = BOLD_RED, labels.failed.format(status=exit_status)

    stream.write(_paint(DIVIDER_LINE, style, colored) + "\n")
    print_argv(_paint(label, style, colored), config.subcommand, stream)
    stream.write(_paint(DIVIDER_LINE, style, colored) + "\n")
    stream.flush()
    return exit_status
