"""Command-line interface for burnttoast."""

from __future__ import annotations

import argparse
import copy
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from burnttoast.alert_style import AlertRecord, BurntToastAlertStyle
from burnttoast.config import DEFAULT_CONFIG, ToastSettings, apply_overrides, load_config
from burnttoast.errors import (
    BurntToastRuntimeError,
    ConfigError,
    PowerShellNotFoundError,
    UserInputError,
    format_error,
)
from burnttoast.logging_utils import setup_logging
from burnttoast.notify import BurntToast

DEFAULT_CONFIG_PATH = Path("config") / "burnttoast.json"
logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the burnttoast CLI entrypoint."""
    parser = _build_parser()
    try:
        cleaned_argv, config_path = _extract_config_arg(argv)
        args = parser.parse_args(cleaned_argv)
        args.config = config_path

        config = apply_overrides(_load_config_or_defaults(config_path), _collect_overrides(args))
        setup_logging(config)
        logger.debug("Loaded config from %s", config_path or "defaults")

        settings = ToastSettings.from_config(config)
        toaster = BurntToast(settings)
        return _dispatch(args, toaster, settings)
    except (ConfigError, UserInputError, BurntToastRuntimeError) as exc:
        print(format_error(exc), file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(format_error(PowerShellNotFoundError(exc.filename)), file=sys.stderr)
        return 1
    except Exception as exc:
        print(format_error(exc), file=sys.stderr)
        return 1


def _dispatch(args: argparse.Namespace, toaster: BurntToast, settings: ToastSettings) -> int:
    if args.command == "header":
        print(toaster.header(args.header_id, args.header_title))
        return 0
    if args.command == "remove":
        if not args.group and not args.tag:
            raise UserInputError("remove needs --group or --tag.")
        toaster.remove(group=args.group, tag=args.tag)
        return 0
    if args.command == "alert":
        _handle_alert(args, toaster, settings)
        return 0

    header = _header_from_args(args, toaster)
    text = args.text or None
    if args.command == "notify":
        toaster.notify(
            text,
            app_logo=args.app_logo,
            sound=args.sound or settings.default_sound,
            header=header,
            unique_identifier=args.id,
        )
        return 0
    if args.command == "silent":
        toaster.notify_silent(
            text, app_logo=args.app_logo, header=header, unique_identifier=args.id
        )
        return 0
    if args.command == "snooze":
        if args.silent:
            toaster.notify_snooze_and_dismiss_silent(
                text, app_logo=args.app_logo, header=header, unique_identifier=args.id
            )
        else:
            toaster.notify_snooze_and_dismiss(
                text,
                app_logo=args.app_logo,
                sound=args.sound or settings.default_sound,
                header=header,
                unique_identifier=args.id,
            )
        return 0
    if args.command == "shoulder-tap":
        toaster.shoulder_tap(
            args.image, args.person, text, app_logo=args.app_logo, header=header
        )
        return 0

    raise UserInputError(f"Unknown command: {args.command}")


def _build_parser() -> argparse.ArgumentParser:
    common_parser = argparse.ArgumentParser(add_help=False)
    _add_common_options(common_parser)

    parser = argparse.ArgumentParser(
        prog="burnttoast",
        description="Show Windows toast notifications through BurntToast.",
        parents=[common_parser],
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH.as_posix()} if present).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    toast_parser = argparse.ArgumentParser(add_help=False)
    _add_toast_options(toast_parser)

    notify_parser = subparsers.add_parser(
        "notify",
        help="Show a notification with sound.",
        parents=[common_parser, toast_parser],
    )
    notify_parser.add_argument("--sound", default=None, help="BurntToast sound name.")
    _add_identity_option(notify_parser)

    silent_parser = subparsers.add_parser(
        "silent",
        help="Show a silent notification.",
        parents=[common_parser, toast_parser],
    )
    _add_identity_option(silent_parser)

    snooze_parser = subparsers.add_parser(
        "snooze",
        help="Show a notification with snooze and dismiss buttons.",
        parents=[common_parser, toast_parser],
    )
    snooze_parser.add_argument("--sound", default=None, help="BurntToast sound name.")
    snooze_parser.add_argument(
        "--silent", action="store_true", help="Do not play a sound."
    )
    _add_identity_option(snooze_parser)

    tap_parser = subparsers.add_parser(
        "shoulder-tap",
        help="Show a My People shoulder tap.",
        parents=[common_parser, toast_parser],
    )
    tap_parser.add_argument("image", help="Path or URI of the shoulder tap image.")
    tap_parser.add_argument("person", help="Contact to tap, e.g. an email address.")

    header_parser = subparsers.add_parser(
        "header",
        help="Print a New-BTHeader expression.",
        parents=[common_parser],
    )
    header_parser.add_argument("header_id", help="Header identifier.")
    header_parser.add_argument("header_title", help="Header title.")

    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove notifications by group or tag.",
        parents=[common_parser],
    )
    remove_parser.add_argument("--group", default=None, help="Notification group.")
    remove_parser.add_argument("--tag", default=None, help="Notification tag.")

    alert_parser = subparsers.add_parser(
        "alert",
        help="Send or remove an alert through the alert style.",
        parents=[common_parser],
    )
    alert_parser.add_argument("--message", default="", help="Alert message.")
    alert_parser.add_argument("--title", default=None, help="Alert title.")
    alert_parser.add_argument("--id", default=None, help="Alert identifier.")
    alert_parser.add_argument(
        "--persistent", action="store_true", help="Use snooze and dismiss buttons."
    )
    alert_parser.add_argument(
        "--remove", action="store_true", help="Remove the alert instead of showing it."
    )

    return parser


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--powershell", default=argparse.SUPPRESS, help="PowerShell executable (default: powershell)."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log each PowerShell command before running it.",
    )


def _add_toast_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--text",
        action="append",
        default=None,
        help="Notification line; repeat for title and body lines.",
    )
    parser.add_argument("--app-logo", dest="app_logo", default=None, help="Path to logo image.")
    parser.add_argument("--header-id", dest="header_id", default=None, help="Header identifier.")
    parser.add_argument("--header-title", dest="header_title", default=None, help="Header title.")


def _add_identity_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--id", default=None, help="Unique identifier for later removal.")


def _collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    powershell: dict[str, Any] = {}
    if getattr(args, "powershell", None) is not None:
        powershell["executable"] = args.powershell
    if getattr(args, "verbose", None):
        powershell["verbose"] = True
    if powershell:
        overrides["powershell"] = powershell
    return overrides


def _load_config_or_defaults(config_path: str | None) -> dict[str, Any]:
    if config_path is not None:
        return load_config(config_path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(str(DEFAULT_CONFIG_PATH))
    return copy.deepcopy(DEFAULT_CONFIG)


def _header_from_args(args: argparse.Namespace, toaster: BurntToast) -> str | None:
    if args.header_id is None and args.header_title is None:
        return None
    if not args.header_id or not args.header_title:
        raise UserInputError("--header-id and --header-title must be given together.")
    return toaster.header(args.header_id, args.header_title)


def _handle_alert(args: argparse.Namespace, toaster: BurntToast, settings: ToastSettings) -> None:
    style = BurntToastAlertStyle(toaster, settings)
    record = AlertRecord(
        message=args.message,
        title=args.title,
        identifier=args.id,
        persistent=args.persistent,
    )
    if args.remove:
        style.remove(record)
    else:
        style.notify(record)


def _extract_config_arg(argv: Sequence[str] | None) -> tuple[list[str], str | None]:
    """Allow --config to appear before or after subcommands."""
    if argv is None:
        argv_list = list(sys.argv[1:])
    else:
        argv_list = list(argv)

    config_path: str | None = None
    cleaned: list[str] = []
    index = 0

    while index < len(argv_list):
        value = argv_list[index]
        if value == "--config":
            if index + 1 >= len(argv_list):
                raise UserInputError("Missing value for --config.")
            config_path = argv_list[index + 1]
            if not config_path:
                raise UserInputError("Config path cannot be empty.")
            index += 2
            continue
        if value.startswith("--config="):
            config_path = value.split("=", 1)[1]
            if not config_path:
                raise UserInputError("Config path cannot be empty.")
            index += 1
            continue

        cleaned.append(value)
        index += 1

    return cleaned, config_path


__all__ = ["main"]
