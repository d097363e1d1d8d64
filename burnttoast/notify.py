"""Windows toast notifications through the BurntToast PowerShell module."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from burnttoast.command import (
    build_command,
    build_invocation,
    join_multiline_text,
    quote_and_sanitize,
)
from burnttoast.config import ToastSettings
from burnttoast.powershell import PowerShellRunner

ToastText = str | Sequence[str] | None
SWITCH = ""
logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    def run(self, command: str) -> None: ...


@dataclass(frozen=True)
class NotificationParams:
    """Arguments for ``New-BurntToastNotification``."""

    text: ToastText = None
    app_logo: str | None = None
    sound: str | None = None
    header: str | None = None
    unique_identifier: str | None = None
    silent: bool = False
    snooze_and_dismiss: bool = False

    def to_arguments(self) -> list[tuple[str, str | None]]:
        return [
            ("Text", join_multiline_text(self.text)),
            ("AppLogo", quote_and_sanitize(self.app_logo)),
            ("Sound", quote_and_sanitize(self.sound)),
            ("Header", self.header or None),
            ("UniqueIdentifier", quote_and_sanitize(self.unique_identifier)),
            ("Silent", SWITCH if self.silent else None),
            ("SnoozeAndDismiss", SWITCH if self.snooze_and_dismiss else None),
        ]


@dataclass(frozen=True)
class ShoulderTapParams:
    """Arguments for ``New-BurntToastShoulderTap``."""

    image: str | None
    person: str | None
    text: ToastText = None
    app_logo: str | None = None
    header: str | None = None

    def to_arguments(self) -> list[tuple[str, str | None]]:
        return [
            ("Image", quote_and_sanitize(self.image)),
            ("Person", quote_and_sanitize(self.person)),
            ("Text", join_multiline_text(self.text)),
            ("AppLogo", quote_and_sanitize(self.app_logo)),
            ("Header", self.header or None),
        ]


@dataclass(frozen=True)
class HeaderParams:
    """Arguments for ``New-BTHeader``."""

    identifier: str | None
    title: str | None

    def to_arguments(self) -> list[tuple[str, str | None]]:
        return [
            ("Id", quote_and_sanitize(self.identifier)),
            ("Title", quote_and_sanitize(self.title)),
        ]


class BurntToast:
    """Build and run BurntToast commands with explicit settings.

    ``header`` values are expressions returned by :meth:`header` and are
    embedded unquoted. Every other text argument is sanitized here, so callers
    pass raw strings.
    """

    def __init__(self, settings: ToastSettings, runner: CommandRunner | None = None) -> None:
        self.settings = settings
        self.runner = runner or PowerShellRunner(settings.powershell, verbose=settings.verbose)

    def notify(
        self,
        text: ToastText = None,
        *,
        app_logo: str | None = None,
        sound: str | None = None,
        header: str | None = None,
        unique_identifier: str | None = None,
    ) -> None:
        """Show a notification that plays a sound."""
        self._show(
            NotificationParams(
                text=text,
                app_logo=self._logo(app_logo),
                sound=sound,
                header=header,
                unique_identifier=unique_identifier,
            )
        )

    def notify_silent(
        self,
        text: ToastText = None,
        *,
        app_logo: str | None = None,
        header: str | None = None,
        unique_identifier: str | None = None,
    ) -> None:
        """Show a notification without sound."""
        self._show(
            NotificationParams(
                text=text,
                app_logo=self._logo(app_logo),
                header=header,
                unique_identifier=unique_identifier,
                silent=True,
            )
        )

    def notify_snooze_and_dismiss(
        self,
        text: ToastText = None,
        *,
        app_logo: str | None = None,
        sound: str | None = None,
        header: str | None = None,
        unique_identifier: str | None = None,
    ) -> None:
        """Show a notification with snooze and dismiss buttons that plays a sound."""
        self._show(
            NotificationParams(
                text=text,
                app_logo=self._logo(app_logo),
                sound=sound,
                header=header,
                unique_identifier=unique_identifier,
                snooze_and_dismiss=True,
            )
        )

    def notify_snooze_and_dismiss_silent(
        self,
        text: ToastText = None,
        *,
        app_logo: str | None = None,
        header: str | None = None,
        unique_identifier: str | None = None,
    ) -> None:
        """Show a silent notification with snooze and dismiss buttons."""
        self._show(
            NotificationParams(
                text=text,
                app_logo=self._logo(app_logo),
                header=header,
                unique_identifier=unique_identifier,
                silent=True,
                snooze_and_dismiss=True,
            )
        )

    def shoulder_tap(
        self,
        image: str | None,
        person: str | None,
        text: ToastText = None,
        *,
        app_logo: str | None = None,
        header: str | None = None,
    ) -> None:
        """Show a My People shoulder tap for ``person`` with an animated ``image``."""
        params = ShoulderTapParams(
            image=image,
            person=person,
            text=text,
            app_logo=self._logo(app_logo),
            header=header,
        )
        self.runner.run(build_invocation("BurntToastShoulderTap", params.to_arguments()))

    def header(self, identifier: str | None, title: str | None) -> str:
        """Return a ``New-BTHeader`` expression for use as another call's header.

        Absent values are left out of the expression like any other argument.
        """
        return build_invocation("BTHeader", HeaderParams(identifier, title).to_arguments())

    def remove(self, *, group: str | None = None, tag: str | None = None) -> None:
        """Remove notifications matching a group and/or tag.

        With neither given the bare cmdlet clears every notification BurntToast
        shows under its default app id.
        """
        arguments = [
            ("Group", quote_and_sanitize(group or None)),
            ("Tag", quote_and_sanitize(tag or None)),
        ]
        self.runner.run(build_command("Remove-BTNotification", arguments))

    def _show(self, params: NotificationParams) -> None:
        command = build_invocation("BurntToastNotification", params.to_arguments())
        logger.debug("Showing toast (silent=%s snooze=%s).", params.silent, params.snooze_and_dismiss)
        self.runner.run(command)

    def _logo(self, app_logo: str | None) -> str | None:
        return app_logo if app_logo is not None else self.settings.app_logo


__all__ = [
    "BurntToast",
    "CommandRunner",
    "HeaderParams",
    "NotificationParams",
    "ShoulderTapParams",
]
