"""Unit tests for trycmd.cli.parser."""

import io
import logging
from unittest.mock import patch

import pytest

from trycmd.cli.parser import print_usage, read_options, split_command
from trycmd.constants import DEFAULT_SHELL
from trycmd.errors import UsageError
from trycmd.models import ColorMode


class TestSplitCommand:
    def test_options_then_command(self):
        assert split_command(["-v", "ls", "-l"]) == (["-v"], ["ls", "-l"])

    def test_double_dash_ends_options(self):
        assert split_command(["-i", "--", "-v", "x"]) == (["-i"], ["-v", "x"])

    def test_options_after_command_belong_to_command(self):
        assert split_command(["grep", "-v", "--", "x"]) == ([], ["grep", "-v", "--", "x"])

    def test_lone_dash_is_a_command(self):
        assert split_command(["-v", "-"]) == (["-v"], ["-"])

    def test_only_options(self):
        assert split_command(["-h"]) == (["-h"], [])

    def test_empty(self):
        assert split_command([]) == ([], [])


class TestReadOptions:
    def test_defaults(self):
        options = read_options(["true"])
        assert options.interactive is False
        assert options.color is ColorMode.NEVER
        assert options.shell == DEFAULT_SHELL
        assert options.verbose is False
        assert options.debug is False
        assert options.help is False
        assert options.command == ["true"]

    def test_short_flags(self):
        options = read_options(["-i", "-v", "-h", "ls"])
        assert options.interactive is True
        assert options.verbose is True
        assert options.help is True
        assert options.command == ["ls"]

    def test_bundled_short_flags(self):
        options = read_options(["-iv", "ls"])
        assert options.interactive is True
        assert options.verbose is True

    def test_long_flags(self):
        options = read_options(["--interactive", "--verbose", "--help"])
        assert options.interactive is True
        assert options.verbose is True
        assert options.help is True
        assert options.command == []

    def test_command_arguments_are_literal(self):
        options = read_options(["--", "-v", "$HOME", "a b"])
        assert options.verbose is False
        assert options.command == ["-v", "$HOME", "a b"]

    def test_debug_is_threaded_through(self):
        assert read_options(["ls"], debug=True).debug is True

    @pytest.mark.parametrize("flag", ["--color", "--colour"])
    def test_color_without_value_is_always(self, flag):
        assert read_options([flag, "ls"]).color is ColorMode.ALWAYS

    @pytest.mark.parametrize("when", ["never", "always", "auto"])
    def test_color_with_value(self, when):
        assert read_options([f"--color={when}", "ls"]).color is ColorMode(when)
        assert read_options([f"--colour={when}", "ls"]).color is ColorMode(when)

    def test_invalid_color_is_a_usage_error(self):
        with pytest.raises(UsageError):
            read_options(["--color=sometimes", "ls"])

    def test_unknown_option_is_a_usage_error(self):
        with pytest.raises(UsageError):
            read_options(["-x", "ls"])

    def test_color_value_must_be_attached(self):
        options = read_options(["--color", "always", "x"])
        assert options.color is ColorMode.ALWAYS
        assert options.command == ["always", "x"]

    @pytest.mark.parametrize("prefix", ["--col", "--verb", "--inter"])
    def test_abbreviated_long_options_are_usage_errors(self, prefix):
        with pytest.raises(UsageError):
            read_options([prefix, "ls"])


class TestEnvironment:
    @patch.dict("os.environ", {"TRY_INTERACTIVE": "1"}, clear=False)
    def test_try_interactive(self):
        assert read_options(["ls"]).interactive is True

    @patch.dict("os.environ", {"TRY_INTERACTIVE": "0"}, clear=False)
    def test_try_interactive_zero(self):
        assert read_options(["ls"]).interactive is False

    @patch.dict("os.environ", {"TRY_INTERACTIVE": "0"}, clear=False)
    def test_flag_overrides_environment(self):
        assert read_options(["-i", "ls"]).interactive is True

    @patch.dict("os.environ", {"TRY_COLOR": "auto"}, clear=False)
    def test_try_color(self):
        assert read_options(["ls"]).color is ColorMode.AUTO

    @patch.dict("os.environ", {"TRY_COLOR": "auto"}, clear=False)
    def test_color_flag_overrides_environment(self):
        assert read_options(["--color=never", "ls"]).color is ColorMode.NEVER

    @patch.dict("os.environ", {"TRY_COLOR": "purple"}, clear=False)
    def test_invalid_try_color_degrades_to_never(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="trycmd"):
            options = read_options(["ls"])
        assert options.color is ColorMode.NEVER
        assert "TRY_COLOR" in caplog.text

    @patch.dict("os.environ", {"SHELL": "/bin/bash"}, clear=False)
    def test_shell_from_environment(self):
        assert read_options(["ls"]).shell == "/bin/bash"

    @patch.dict("os.environ", {"SHELL": ""}, clear=False)
    def test_empty_shell_uses_default(self):
        assert read_options(["ls"]).shell == DEFAULT_SHELL


class TestPrintUsage:
    def test_lists_options_and_environment(self):
        out = io.StringIO()
        print_usage(out)
        text = out.getvalue()
        assert text.startswith("usage: try [-ivh]")
        for item in ("--interactive", "--color", "--verbose", "--help"):
            assert item in text

    def test_color_value_is_shown_attached(self):
        out = io.StringIO()
        print_usage(out)
        text = out.getvalue()
        assert "--color[=WHEN], --colour[=WHEN]" in text
        assert "--color [WHEN]" not in text
        for item in ("TRY_INTERACTIVE", "TRY_COLOR", "TRY_DEBUG", "SHELL="):
            assert item in text
