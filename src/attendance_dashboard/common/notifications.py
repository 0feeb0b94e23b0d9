from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from flask import flash

from ..core.enums import NotificationLevel


@dataclass(frozen=True)
class Notification:
    """Transient, dismissible message shown to the user."""

    level: NotificationLevel
    message: str

    @classmethod
    def success(cls, message: str) -> "Notification":
        return cls(NotificationLevel.SUCCESS, message)

    @classmethod
    def warning(cls, message: str) -> "Notification":
        return cls(NotificationLevel.WARNING, message)

    @classmethod
    def danger(cls, message: str) -> "Notification":
        return cls(NotificationLevel.DANGER, message)


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError


class FlashNotifier:
    """Delivers notifications through Flask's message flashing."""

    def notify(self, notification: Notification) -> None:
        flash(notification.message, notification.level.value)
