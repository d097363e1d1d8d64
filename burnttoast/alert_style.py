"""Alert style that routes generic alerts to BurntToast notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol

from burnttoast.config import ToastSettings
from burnttoast.notify import BurntToast

AlertCallback = Callable[["AlertRecord"], None]
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertRecord:
    message: str
    title: str | None = None
    identifier: str | None = None
    persistent: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AlertRecord":
        """Build a record from a router payload; ``id`` is accepted for ``identifier``."""
        identifier = data.get("identifier", data.get("id"))
        title = data.get("title")
        return cls(
            message=str(data.get("message") or ""),
            title=str(title) if title is not None else None,
            identifier=str(identifier) if identifier is not None else None,
            persistent=bool(data.get("persistent", False)),
        )


class AlertRouter(Protocol):
    """The part of an alert router this style registers with."""

    def define_style(
        self,
        name: str,
        *,
        title: str,
        notifier: AlertCallback,
        remover: AlertCallback,
    ) -> None: ...


class BurntToastAlertStyle:
    """Notifier and remover pair backed by :class:`BurntToast`."""

    title = "Notify using BurntToast"

    def __init__(self, toaster: BurntToast, settings: ToastSettings | None = None) -> None:
        self.toaster = toaster
        self.settings = settings or toaster.settings

    def notify(self, record: AlertRecord | Mapping[str, Any]) -> None:
        record = _as_record(record)
        text = [line for line in (record.title, record.message) if line is not None]
        if record.persistent:
            self.toaster.notify_snooze_and_dismiss(
                text,
                app_logo=self.settings.app_logo,
                sound=self.settings.default_sound,
                unique_identifier=record.identifier,
            )
        else:
            self.toaster.notify(
                text,
                app_logo=self.settings.app_logo,
                sound=self.settings.default_sound,
                unique_identifier=record.identifier,
            )

    def remove(self, record: AlertRecord | Mapping[str, Any]) -> None:
        record = _as_record(record)
        if not record.identifier or not self.settings.remove_enabled:
            return
        logger.debug("Removing notifications in group %s.", record.identifier)
        self.toaster.remove(group=record.identifier)

    def register(self, router: AlertRouter, name: str | None = None) -> None:
        """Register this style's callbacks with an alert router."""
        router.define_style(
            name or self.settings.style_name,
            title=self.title,
            notifier=self.notify,
            remover=self.remove,
        )


def _as_record(record: AlertRecord | Mapping[str, Any]) -> AlertRecord:
    if isinstance(record, AlertRecord):
        return record
    return AlertRecord.from_mapping(record)


__all__ = ["AlertRecord", "AlertRouter", "BurntToastAlertStyle"]
