"""Top-level CLI: parse options, run the subcommand, show the result."""

import argparse
import logging
import sys
from typing import NoReturn, TextIO

from trycmd import __version__
from trycmd.config import getenv_int, load_config
from trycmd.constants import DEFAULT_SHELL
from trycmd.display import show_result
from trycmd.intl import load_labels
from trycmd.models import ColorMode
from trycmd.subcmd import run_subcommand

log = logging.getLogger("trycmd")

# Long options that consume the following word as their value.
VALUE_OPTIONS = frozenset({"--color", "--shell"})

ENVIRONMENT_HELP = f"""\
environment:
  TRY_INTERACTIVE=1     always execute commands in an interactive subshell
  TRY_COLOR=WHEN        default for --color
  TRY_SHELL=PATH        the shell to use (falls back to SHELL, then {DEFAULT_SHELL})
  TRY_DEBUG=1           print diagnostic output on stderr
"""


class UsageParser(argparse.ArgumentParser):
    """Argument parser that answers a bad option with the full help and status 1."""

    def error(self, message: str) -> NoReturn:
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        self.print_help(sys.stdout)
        raise SystemExit(1)


def _keep_undecodable_bytes(stream: TextIO) -> None:
    """Let arguments that were not valid in the locale encoding print as their raw bytes."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def build_parser() -> argparse.ArgumentParser:
    """Build the option parser; the subcommand is split off beforehand."""
    parser = UsageParser(
        prog="try",
        usage="%(prog)s [-ivdhV] [--color WHEN] [--shell PATH] [--] [COMMAND] [ARG_1] ... [ARG_N]",
        description="Run a command, display a standard result and pass on its exit status.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        default=None,
        help="Execute the command in an interactive subshell",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (echoes the command being run)",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--color",
        choices=[mode.value for mode in ColorMode],
        metavar="WHEN",
        help="Colorize the result: never, always or auto (default: auto)",
    )
    parser.add_argument("--shell", metavar="PATH", help="Shell used to run the command")
    return parser


def split_command(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split ``argv`` into (try options, subcommand).

    Options end at ``--`` or at the first word that is not an option.
    """
    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "--":
            return argv[:idx], argv[idx + 1 :]
        if arg == "-" or not arg.startswith("-"):
            break
        if arg in VALUE_OPTIONS:
            idx += 1
        idx += 1
    return argv[:idx], argv[idx:]


def main(argv: list[str] | None = None) -> int:
    """Run ``try`` and return the exit status to pass on."""
    options, subcommand = split_command(list(sys.argv[1:] if argv is None else argv))
    parser = build_parser()
    args = parser.parse_args(options)

    debug = args.debug or getenv_int("TRY_DEBUG") != 0
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(
            subcommand,
            interactive=args.interactive,
            color=args.color,
            shell=args.shell,
            verbose=args.verbose,
            debug=debug,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not config.subcommand:
        parser.print_help(sys.stdout)
        return 1

    _keep_undecodable_bytes(sys.stdout)
    _keep_undecodable_bytes(sys.stderr)
    labels = load_labels()
    result = run_subcommand(config, labels=labels)
    result = show_result(config, result, sys.stdout, labels)
    log.debug("exiting with status %d", result)
    return result


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
