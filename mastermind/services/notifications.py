"""
Notification sinks for registration outcomes.

The registration controller only calls ``notify(title, description, variant)``
and ignores the return value; how the message reaches the visitor is up to
the sink.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from flask import flash

NORMAL = "normal"
DESTRUCTIVE = "destructive"
VARIANTS = (NORMAL, DESTRUCTIVE)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = NORMAL

    def to_dict(self) -> dict:
        return asdict(self)


class FlashNotifier:
    """Queue notifications as Flask flashed messages, category = variant."""

    def notify(self, title: str, description: str, variant: str = NORMAL) -> None:
        flash(Notification(title, description, variant).to_dict(), variant)


class NotificationLog:
    """Keeps every notification in memory (JSON API and tests)."""

    def __init__(self):
        self.notifications: list[Notification] = []

    def notify(self, title: str, description: str, variant: str = NORMAL) -> None:
        self.notifications.append(Notification(title, description, variant))

    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None
