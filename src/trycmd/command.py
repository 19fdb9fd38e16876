"""Build the shell argument vector used to run a subcommand.

The subcommand is handed to the shell as::

    <shell> [-i] -c -- '<cmd> "$@"' <cmd> <arg_1> ... <arg_n>

The first positional word after the script becomes the shell's ``$0`` and
the rest become ``"$@"``, so arguments reach the program exactly as given
and never pass through word splitting or globbing. ``-i`` makes aliases
and other interactive-only definitions available to ``<cmd>``.

Building is a two-pass contract: ask for the required buffer size, allocate
one buffer of exactly that size, then fill it.
"""

import logging
import os

from trycmd.errors import InternalError
from trycmd.models import InvocationConfig, ShellCommand

log = logging.getLogger(__name__)

SHELL_OPT_INTERACTIVE = "-i"
SHELL_OPT_COMMAND = "-c"
SHELL_OPTS_END = "--"
SCRIPT_SUFFIX = '"$@"'


def _shell_words(config: InvocationConfig) -> list[bytes]:
    """Return the encoded words of the shell command, in exec order."""
    if not config.subcommand:
        raise ValueError("cannot build a shell command without a subcommand")

    words = [config.shell]
    if config.interactive:
        words.append(SHELL_OPT_INTERACTIVE)
    words.extend([SHELL_OPT_COMMAND, SHELL_OPTS_END])
    words.append(f"{config.subcommand[0]} {SCRIPT_SUFFIX}")
    words.extend(config.subcommand)
    return [os.fsencode(word) for word in words]


def make_shell_command(
    config: InvocationConfig, buffer: bytearray | memoryview | None = None
) -> tuple[int, ShellCommand | None]:
    """Size, and when ``buffer`` is large enough, write the shell command.

    Returns ``(required_size, command)``. ``command`` is None, and ``buffer``
    is left untouched, when no buffer is given or it is smaller than
    ``required_size``. Bytes of ``buffer`` past ``required_size`` are never
    written.
    """
    words = _shell_words(config)
    required = sum(len(word) + 1 for word in words) + 1
    buflen = 0 if buffer is None else len(buffer)
    log.debug("make_shell_command: buflen=%d required=%d", buflen, required)
    if buffer is None or buflen < required:
        return required, None

    view = memoryview(buffer)[:required]
    spans: list[tuple[int, int]] = []
    pos = 0
    for word in words:
        end = pos + len(word)
        view[pos:end] = word
        view[end] = 0
        spans.append((pos, end))
        pos = end + 1
    # End-of-vector sentinel.
    view[pos] = 0
    pos += 1

    if pos != required:
        raise InternalError(f"shell command wrote {pos} bytes, expected {required}")
    return required, ShellCommand(buffer=view, spans=tuple(spans))


def build_shell_command(config: InvocationConfig) -> ShellCommand:
    """Build the shell command for ``config`` in a single exact-size buffer."""
    required, _ = make_shell_command(config)
    buffer = bytearray(required)
    written, command = make_shell_command(config, buffer)
    if written != required or command is None:
        raise InternalError(
            f"shell command size changed between passes ({required} -> {written})"
        )
    return command
