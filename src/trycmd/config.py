"""Resolve an InvocationConfig from the environment and command-line flags."""

import logging
import os
import re
import shutil

from trycmd.constants import DEFAULT_SHELL
from trycmd.models import ColorMode, InvocationConfig

log = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def getenv_int(key: str) -> int:
    """Return the leading integer of an environment value, or 0.

    Mirrors ``atoi``: ``"2"`` is 2, ``"1x"`` is 1, ``"yes"`` and unset are 0.
    """
    value = os.environ.get(key)
    if value is None:
        return 0
    match = _LEADING_INT_RE.match(value)
    return int(match.group(1)) if match else 0


def _resolve_executable(candidate: str) -> str:
    """Resolve a bare shell name on PATH; paths are returned as given."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        return candidate
    return shutil.which(candidate) or candidate


def resolve_shell(override: str | None = None) -> str:
    """Return the shell to host subcommands in.

    Preference: ``override``, then ``TRY_SHELL``, then ``SHELL``, then
    ``/bin/sh``. Empty values are ignored; others are used exactly as given.
    """
    for candidate in (
        override,
        os.environ.get("TRY_SHELL"),
        os.environ.get("SHELL"),
    ):
        if candidate:
            return _resolve_executable(candidate)
    return DEFAULT_SHELL


def resolve_color(override: str | None = None) -> ColorMode:
    """Return the color mode; raises ValueError for an unknown mode."""
    requested = override or os.environ.get("TRY_COLOR", "").strip()
    if requested:
        return ColorMode(requested.lower())
    if os.environ.get("NO_COLOR") is not None:
        return ColorMode.NEVER
    return ColorMode.AUTO


def load_config(
    subcommand: list[str] | tuple[str, ...],
    *,
    interactive: bool | None = None,
    color: str | None = None,
    shell: str | None = None,
    verbose: bool = False,
    debug: bool | None = None,
) -> InvocationConfig:
    """Build the configuration for one run.

    Explicit arguments take precedence over ``TRY_INTERACTIVE``,
    ``TRY_COLOR``, ``TRY_SHELL``/``SHELL`` and ``TRY_DEBUG``.
    """
    if interactive is None:
        interactive = getenv_int("TRY_INTERACTIVE") != 0
    if debug is None:
        debug = getenv_int("TRY_DEBUG") != 0

    config = InvocationConfig(
        shell=resolve_shell(shell),
        interactive=interactive,
        color=resolve_color(color),
        verbose=verbose,
        debug=debug,
        subcommand=tuple(subcommand),
    )
    log.debug("config=%s", config)
    return config
