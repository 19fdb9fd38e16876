"""Shared constants for trycmd."""

BOLD_GREEN = "\033[1;32m"
BOLD_RED = "\033[1;31m"
RESET = "\033[0m"

DIVIDER_LINE = "=" * 78

DEFAULT_SHELL = "/bin/sh"

# Added to the signal number when a subcommand dies from a signal, as Bash does.
SIGNAL_BASE = 128

# Bash reports an unresolvable command this way.
EXIT_COMMAND_NOT_FOUND = 127

# Catch-all for a child that neither exited nor was killed by a signal.
EXIT_ABNORMAL = 255
