"""
Notifier: transient status messages shown next to a form.

A loading notice is opened when a request goes out and later replaced, under
the same id, by a success or error notice.
"""
import enum
import itertools
from dataclasses import dataclass
from typing import Optional

from app.core.logging import get_logger

logger = get_logger(__name__)


class NotificationKind(str, enum.Enum):
    LOADING = "LOADING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Notification:
    id: str
    kind: NotificationKind
    message: str


class Notifier:
    def __init__(self):
        self._ids = itertools.count(1)
        self.active: dict[str, Notification] = {}
        self.history: list[Notification] = []

    def _show(self, kind: NotificationKind, message: str, notification_id: Optional[str]) -> str:
        notification_id = notification_id or f"notice-{next(self._ids)}"
        notification = Notification(notification_id, kind, message)
        self.active[notification_id] = notification
        self.history.append(notification)
        logger.debug("notification", id=notification_id, kind=kind.value, message=message)
        return notification_id

    def loading(self, message: str) -> str:
        return self._show(NotificationKind.LOADING, message, None)

    def success(self, message: str, notification_id: Optional[str] = None) -> str:
        return self._show(NotificationKind.SUCCESS, message, notification_id)

    def error(self, message: str, notification_id: Optional[str] = None) -> str:
        return self._show(NotificationKind.ERROR, message, notification_id)

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None
