import logging
from dataclasses import dataclass
from typing import Callable, List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""
    variant: str = "default"  # "default" | "destructive"


class Notifier:
    """토스트 대기열. 실패는 전부 여기로 모이고 예외로 번지지 않는다."""

    def __init__(self):
        self._queue: List[Notification] = []
        self._listeners: List[Callable[[Notification], None]] = []

    def subscribe(self, listener: Callable[[Notification], None]) -> None:
        self._listeners.append(listener)

    def notify(self, title: str, description: str = "", variant: str = "default") -> Notification:
        n = Notification(title, description, variant)
        self._queue.append(n)
        log = logger.warning if variant == "destructive" else logger.info
        log("[toast] %s: %s", title, description)
        for listener in self._listeners:
            listener(n)
        return n

    def error(self, title: str, description: str = "") -> Notification:
        return self.notify(title, description, "destructive")

    @property
    def pending(self) -> List[Notification]:
        return list(self._queue)

    def drain(self) -> List[Notification]:
        out, self._queue = self._queue, []
        return out
