from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .attendance.http_repository import HttpAttendanceGateway
from .attendance.model import SessionTimes
from .attendance.notifications import QueueNotifier
from .attendance.view import AttendanceView
from .core.constants import DEFAULT_REQUEST_TIMEOUT, DEFAULT_SESSION_TIME_IN, DEFAULT_SESSION_TIME_OUT


@dataclass(frozen=True)
class Container:
    gateway: HttpAttendanceGateway
    notifier: QueueNotifier
    attendance_view: AttendanceView


def build_container(*, api_config: dict, token_provider: Optional[Callable[[], Optional[str]]] = None) -> Container:
    token = api_config.get("token")
    gateway = HttpAttendanceGateway(
        str(api_config["base_url"]),
        token_provider=token_provider or (lambda: token),
        timeout=float(api_config.get("timeout", DEFAULT_REQUEST_TIMEOUT)),
    )
    session = SessionTimes(
        time_in=str(api_config.get("session_time_in") or DEFAULT_SESSION_TIME_IN),
        time_out=str(api_config.get("session_time_out") or DEFAULT_SESSION_TIME_OUT),
    )
    notifier = QueueNotifier()
    attendance_view = AttendanceView(gateway, notifier, session=session)

    return Container(
        gateway=gateway,
        notifier=notifier,
        attendance_view=attendance_view,
    )
