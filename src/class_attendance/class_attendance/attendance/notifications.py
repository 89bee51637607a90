from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    level: str


class QueueNotifier:
    """Collects notifications until the UI layer drains them."""

    def __init__(self):
        self._pending: List[Notification] = []

    def notify(self, *, title: str, description: str, level: str) -> None:
        logger.debug(f"notify[{level}] {title}: {description}")
        self._pending.append(Notification(title=title, description=description, level=level))

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        out, self._pending = self._pending, []
        return out
