"""
requests-based gateway for the attendance REST API.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT
from ..core.exceptions import ApiError
from ..roster.model import SchoolClass, Student
from .model import AttendanceRecord, AttendanceSummary

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], Optional[str]]


class HttpAttendanceGateway:
    """Talks to `{base_url}/attendance`, `/students` and `/classes`."""

    def __init__(
        self,
        base_url: str,
        *,
        token_provider: Optional[TokenProvider] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token_provider = token_provider or (lambda: None)
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _filter_params(date: str, class_id: Optional[int]) -> dict:
        params = {"date": date}
        if class_id is not None and class_id != "":
            params["classId"] = class_id
        return params

    @staticmethod
    def _error_message(response) -> Optional[str]:
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return None

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.request(method, url, headers=self._headers(), timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise ApiError(None) from e

        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.warning(f"{method} {url} returned {response.status_code}: {message}")
            raise ApiError(message, status_code=response.status_code)

        # 201/204 may come back without a body; the write still succeeded.
        try:
            return response.json()
        except ValueError:
            return None

    def _parse_list(self, data: Any, parser) -> list:
        if not isinstance(data, list):
            raise ApiError("Invalid response from server")
        try:
            return [parser(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed item in response: {e}")
            raise ApiError("Invalid response from server") from e

    def list_records(self, *, date: str, class_id: Optional[int] = None) -> Sequence[AttendanceRecord]:
        data = self._request("GET", "/attendance", params=self._filter_params(date, class_id))
        return self._parse_list(data, AttendanceRecord.from_api)

    def get_summary(self, *, date: str, class_id: Optional[int] = None) -> AttendanceSummary:
        data = self._request("GET", "/attendance/summary", params=self._filter_params(date, class_id))
        if not isinstance(data, dict):
            raise ApiError("Invalid response from server")
        try:
            return AttendanceSummary.from_api(data)
        except (TypeError, ValueError) as e:
            raise ApiError("Invalid response from server") from e

    def list_students(self) -> Sequence[Student]:
        return self._parse_list(self._request("GET", "/students"), Student.from_api)

    def list_classes(self) -> Sequence[SchoolClass]:
        return self._parse_list(self._request("GET", "/classes"), SchoolClass.from_api)

    def create_record(self, payload: dict) -> Optional[dict]:
        return self._request("POST", "/attendance", json=payload)

    def create_bulk(self, payload: dict) -> Optional[dict]:
        return self._request("POST", "/attendance/bulk", json=payload)
