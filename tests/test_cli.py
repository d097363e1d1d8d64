"""Tests for CLI argument parsing."""

import pytest

from burnttoast import cli


def test_help_includes_commands() -> None:
    parser = cli._build_parser()
    help_text = parser.format_help()
    for command in ("notify", "silent", "snooze", "shoulder-tap", "header", "remove", "alert"):
        assert command in help_text
    assert "--powershell" in help_text


def test_parser_requires_command() -> None:
    parser = cli._build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])
    assert excinfo.value.code == 2


def test_common_options_survive_subcommand_parsing() -> None:
    parser = cli._build_parser()
    args = parser.parse_args(["--verbose", "--powershell", "pwsh", "notify", "--text", "a"])
    assert args.verbose is True
    assert args.powershell == "pwsh"
    assert cli._collect_overrides(args) == {
        "powershell": {"executable": "pwsh", "verbose": True}
    }


def test_text_option_repeats() -> None:
    parser = cli._build_parser()
    args = parser.parse_args(["silent", "--text", "Title", "--text", "Body"])
    assert args.text == ["Title", "Body"]
    assert cli._collect_overrides(args) == {}


def test_shoulder_tap_rejects_identifier() -> None:
    parser = cli._build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["shoulder-tap", "tap.gif", "me@example.com", "--id", "x"])
    assert excinfo.value.code == 2

    args = parser.parse_args(["snooze", "--id", "x"])
    assert args.id == "x"
