"""Unit tests for trycmd.config and the configuration model."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from trycmd.config import getenv_int, load_config, resolve_color, resolve_shell
from trycmd.models import ColorMode, InvocationConfig

ENV_KEYS = ["TRY_INTERACTIVE", "TRY_COLOR", "TRY_SHELL", "TRY_DEBUG", "SHELL", "NO_COLOR"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestGetenvInt:
    def test_unset_is_zero(self):
        assert getenv_int("TRY_INTERACTIVE") == 0

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", 1), ("0", 0), ("2", 2), ("1x", 1), (" -3", -3), ("+4", 4), ("yes", 0), ("", 0)],
    )
    def test_parses_leading_integer(self, monkeypatch, value, expected):
        monkeypatch.setenv("TRY_INTERACTIVE", value)
        assert getenv_int("TRY_INTERACTIVE") == expected


class TestResolveShell:
    def test_defaults_to_bin_sh(self):
        assert resolve_shell() == "/bin/sh"

    def test_empty_shell_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("SHELL", "")
        assert resolve_shell() == "/bin/sh"

    def test_uses_shell_env(self, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/bash")
        assert resolve_shell() == "/bin/bash"

    def test_try_shell_beats_shell(self, monkeypatch):
        monkeypatch.setenv("SHELL", "/bin/bash")
        monkeypatch.setenv("TRY_SHELL", "/bin/zsh")
        assert resolve_shell() == "/bin/zsh"

    def test_override_beats_environment(self, monkeypatch):
        monkeypatch.setenv("TRY_SHELL", "/bin/zsh")
        assert resolve_shell("/bin/dash") == "/bin/dash"

    def test_path_with_surrounding_spaces_is_kept_verbatim(self, monkeypatch):
        monkeypatch.setenv("TRY_SHELL", " /opt/my shells/sh ")
        assert resolve_shell() == " /opt/my shells/sh "

    def test_override_is_not_stripped(self):
        assert resolve_shell("/opt/shell /sh") == "/opt/shell /sh"

    @patch("trycmd.config.shutil.which", return_value="/usr/bin/zsh")
    def test_bare_name_is_resolved_on_path(self, mock_which):
        assert resolve_shell("zsh") == "/usr/bin/zsh"
        mock_which.assert_called_once_with("zsh")

    @patch("trycmd.config.shutil.which", return_value=None)
    def test_unresolvable_bare_name_is_kept(self, _which):
        assert resolve_shell("nosuchshell") == "nosuchshell"


class TestResolveColor:
    def test_defaults_to_auto(self):
        assert resolve_color() is ColorMode.AUTO

    def test_reads_try_color(self, monkeypatch):
        monkeypatch.setenv("TRY_COLOR", "Always")
        assert resolve_color() is ColorMode.ALWAYS

    def test_no_color_selects_never(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        assert resolve_color() is ColorMode.NEVER

    def test_try_color_beats_no_color(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("TRY_COLOR", "auto")
        assert resolve_color() is ColorMode.AUTO

    def test_override_beats_environment(self, monkeypatch):
        monkeypatch.setenv("TRY_COLOR", "always")
        assert resolve_color("never") is ColorMode.NEVER

    def test_invalid_mode_raises(self, monkeypatch):
        monkeypatch.setenv("TRY_COLOR", "sometimes")
        with pytest.raises(ValueError):
            resolve_color()


class TestLoadConfig:
    def test_defaults(self):
        config = load_config(["ls", "-l"])
        assert config == InvocationConfig(
            shell="/bin/sh",
            interactive=False,
            color=ColorMode.AUTO,
            verbose=False,
            debug=False,
            subcommand=("ls", "-l"),
        )

    def test_try_interactive_env(self, monkeypatch):
        monkeypatch.setenv("TRY_INTERACTIVE", "1")
        assert load_config(["ls"]).interactive is True

    def test_try_interactive_zero_is_off(self, monkeypatch):
        monkeypatch.setenv("TRY_INTERACTIVE", "0")
        assert load_config(["ls"]).interactive is False

    def test_explicit_interactive_beats_env(self, monkeypatch):
        monkeypatch.setenv("TRY_INTERACTIVE", "1")
        assert load_config(["ls"], interactive=False).interactive is False

    def test_try_debug_env(self, monkeypatch):
        monkeypatch.setenv("TRY_DEBUG", "1")
        assert load_config(["ls"]).debug is True

    def test_empty_subcommand_is_allowed(self):
        assert load_config([]).subcommand == ()


class TestInvocationConfig:
    def test_is_immutable(self):
        config = InvocationConfig(subcommand=("true",))
        with pytest.raises(ValidationError):
            config.verbose = True

    def test_rejects_empty_shell(self):
        with pytest.raises(ValidationError):
            InvocationConfig(shell="")

    def test_rejects_unknown_color(self):
        with pytest.raises(ValidationError):
            InvocationConfig(color="sometimes")

    def test_coerces_color_strings(self):
        assert InvocationConfig(color="never").color is ColorMode.NEVER
