"""CLI dispatch tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path

import pytest

from burnttoast import cli
from burnttoast.config import DEFAULT_CONFIG
from burnttoast.errors import UserInputError
from burnttoast.notify import BurntToast


class RecordingRunner:
    def __init__(self) -> None:
        self.commands: list[str] = []

    def run(self, command: str) -> None:
        self.commands.append(command)


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> RecordingRunner:
    recording = RecordingRunner()
    settings_seen: list[object] = []

    def make_toaster(settings):  # noqa: ANN001
        settings_seen.append(settings)
        return BurntToast(settings, runner=recording)

    monkeypatch.setattr(cli, "BurntToast", make_toaster)
    monkeypatch.setattr(cli, "setup_logging", lambda _config: None)
    monkeypatch.setattr(cli, "DEFAULT_CONFIG_PATH", tmp_path / "absent.json")
    recording.settings_seen = settings_seen  # type: ignore[attr-defined]
    return recording


def test_notify_command(runner: RecordingRunner) -> None:
    result = cli.main(["notify", "--text", "CI", "--text", "Build done", "--id", "job-1"])
    assert result == 0
    assert runner.commands == [
        '$(New-BurntToastNotification -Text "CI","Build done" -Sound "Default" '
        '-UniqueIdentifier "job-1")'
    ]


def test_snooze_silent_with_header(runner: RecordingRunner) -> None:
    result = cli.main(
        ["snooze", "--silent", "--text", "wake", "--header-id", "h", "--header-title", "Later"]
    )
    assert result == 0
    command = runner.commands[0]
    assert '-Header $(New-BTHeader -Id "h" -Title "Later")' in command
    assert command.endswith("-Silent -SnoozeAndDismiss)")


def test_header_command_prints_expression(
    runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["header", "builds", "Builds"]) == 0
    assert capsys.readouterr().out.strip() == '$(New-BTHeader -Id "builds" -Title "Builds")'
    assert runner.commands == []


def test_shoulder_tap_and_remove(runner: RecordingRunner) -> None:
    assert cli.main(["shoulder-tap", "tap.gif", "me@example.com"]) == 0
    assert cli.main(["remove", "--tag", "t1"]) == 0
    assert runner.commands == [
        '$(New-BurntToastShoulderTap -Image "tap.gif" -Person "me@example.com")',
        'Remove-BTNotification -Tag "t1"',
    ]


def test_alert_command_uses_config(runner: RecordingRunner, tmp_path: Path) -> None:
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["toast"]["app_logo"] = "icon.png"
    config["alert"]["remove_enabled"] = True
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps(config), encoding="utf-8")

    assert cli.main(["alert", "--message", "Reminder", "--id", "r1", "--persistent", "--config", str(config_path)]) == 0
    assert cli.main([f"--config={config_path}", "alert", "--id", "r1", "--remove"]) == 0

    shown, removed = runner.commands
    assert '-AppLogo "icon.png"' in shown
    assert shown.endswith("-SnoozeAndDismiss)")
    assert removed == 'Remove-BTNotification -Group "r1"'


def test_alert_remove_disabled_by_default(runner: RecordingRunner) -> None:
    assert cli.main(["alert", "--id", "r1", "--remove"]) == 0
    assert runner.commands == []


def test_overrides_reach_settings(runner: RecordingRunner) -> None:
    assert cli.main(["--powershell", "pwsh", "silent", "--verbose"]) == 0
    settings = runner.settings_seen[-1]  # type: ignore[attr-defined]
    assert settings.powershell == "pwsh"
    assert settings.verbose is True


def test_input_errors_return_one(
    runner: RecordingRunner, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["remove"]) == 1
    assert "Input error: remove needs --group or --tag." in capsys.readouterr().err

    assert cli.main(["notify", "--header-id", "only-id"]) == 1
    assert runner.commands == []


def test_missing_config_file_is_reported(
    runner: RecordingRunner, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert cli.main(["--config", str(tmp_path / "nope.json"), "notify"]) == 1
    assert "Config error" in capsys.readouterr().err


def test_missing_powershell_is_reported(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    def fake_run(command, **_kwargs):  # noqa: ANN001
        raise FileNotFoundError(2, "No such file", command[0])

    monkeypatch.setattr(cli, "setup_logging", lambda _config: None)
    monkeypatch.setattr(cli, "DEFAULT_CONFIG_PATH", tmp_path / "absent.json")
    monkeypatch.setattr("burnttoast.powershell.subprocess.run", fake_run)

    assert cli.main(["--powershell", "no-such-shell", "notify", "--text", "x"]) == 1
    assert "Runtime error: PowerShell executable not found: no-such-shell" in capsys.readouterr().err


def test_extract_config_arg_rejects_missing_value() -> None:
    with pytest.raises(UserInputError, match="Missing value"):
        cli._extract_config_arg(["--config"])


def test_extract_config_arg_rejects_empty_value() -> None:
    with pytest.raises(UserInputError, match="Config path cannot be empty"):
        cli._extract_config_arg(["--config", ""])
    with pytest.raises(UserInputError, match="Config path cannot be empty"):
        cli._extract_config_arg(["--config="])
