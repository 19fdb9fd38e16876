"""Spawn a subcommand inside a shell and translate how it ended."""

import logging
import os
import sys
from typing import TextIO

from trycmd.command import build_shell_command
from trycmd.constants import EXIT_ABNORMAL, EXIT_COMMAND_NOT_FOUND, SIGNAL_BASE
from trycmd.display import print_argv
from trycmd.errors import InternalError
from trycmd.intl import Labels
from trycmd.models import InvocationConfig, ShellCommand

log = logging.getLogger(__name__)


def exit_status_from_wait(status: int) -> int:
    """Map a raw ``waitpid`` status to the exit code a shell would report."""
    if os.WIFEXITED(status):
        return os.WEXITSTATUS(status)
    if os.WIFSIGNALED(status):
        return SIGNAL_BASE + os.WTERMSIG(status)
    return EXIT_ABNORMAL


def _spawn_and_wait(command: ShellCommand) -> int:
    """Fork, exec ``command`` in the child and return its raw wait status."""
    argv = command.argv_bytes
    # Unflushed output would otherwise be written twice.
    sys.stdout.flush()
    sys.stderr.flush()

    pid = os.fork()
    if pid == 0:
        # Child process: only exits through exec or os._exit.
        try:
            os.execv(argv[0], argv)
        except OSError as e:
            os.write(2, f"try: {command.executable}: {e.strerror}\n".encode(errors="replace"))
        finally:
            os._exit(EXIT_COMMAND_NOT_FOUND)

    log.debug("waitpid(%d)", pid)
    try:
        wait_pid, status = os.waitpid(pid, 0)
    except ChildProcessError as e:
        raise InternalError(f"lost track of child process {pid}") from e
    if wait_pid != pid:
        raise InternalError(f"waitpid returned pid {wait_pid}, expected {pid}")
    log.debug("child status is %d", status)
    return status


def run_subcommand(
    config: InvocationConfig,
    labels: Labels | None = None,
    stream: TextIO | None = None,
) -> int:
    """Run the configured subcommand and return its shell-style exit status."""
    labels = labels if labels is not None else Labels()
    command = build_shell_command(config)

    if config.verbose or config.debug:
        print_argv(labels.echo_prefix, command.argv, stream if stream is not None else sys.stderr)

    log.debug("spawning %s", command.executable)
    result = exit_status_from_wait(_spawn_and_wait(command))
    log.debug("returning %d", result)
    return result
