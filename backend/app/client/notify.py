from dataclasses import dataclass
from enum import Enum
from typing import List
import logging

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    title: str
    message: str


class LogNotifier:
    """Уведомления в лог (по умолчанию, когда нет UI)"""

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        level = logging.ERROR if kind == NotificationKind.ERROR else logging.INFO
        logger.log(level, "[%s] %s: %s", NotificationKind(kind).value, title, message)


class InMemoryNotifier:
    """Сохраняет уведомления по порядку, например для панели тостов"""

    def __init__(self):
        self.notifications: List[Notification] = []

    def notify(self, kind: NotificationKind, title: str, message: str) -> None:
        self.notifications.append(Notification(NotificationKind(kind), title, message))

    @property
    def kinds(self) -> List[NotificationKind]:
        return [n.kind for n in self.notifications]
