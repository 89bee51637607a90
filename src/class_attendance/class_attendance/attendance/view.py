"""Attendance view controller.

Owns the view state (filters, fetched collections, dialogs) and runs the
fetch -> mutate -> refetch cycle against the attendance API. Every failure is
recovered here; commands report success with a bool.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, fields
from typing import List, Optional, Tuple

from ..common.datetime_utils import require_iso_date, today_iso
from ..core.constants import (
    MSG_BULK_FAILED,
    MSG_FETCH_RECORDS_FAILED,
    MSG_MARK_FAILED,
    MSG_MARK_SUCCESS,
)
from ..core.enums import AttendanceStatus, DialogState
from ..core.exceptions import ApiError, ValidationError
from ..roster.model import SchoolClass, Student
from ..roster.query import roster_for_class, unmarked_students
from .builder import build_bulk_payload, build_single_payload
from .model import AttendanceRecord, AttendanceSummary, BulkDraft, BulkEntry, MarkDraft, SessionTimes
from .notifications import QueueNotifier
from .repository import AttendanceGateway, Notifier

logger = logging.getLogger(__name__)

_UNSET = object()
_MARK_FIELDS = {f.name for f in fields(MarkDraft)}

FilterKey = Tuple[str, Optional[int]]


@dataclass
class MarkDialog:
    state: DialogState = DialogState.CLOSED
    draft: MarkDraft = field(default_factory=MarkDraft)
    error: Optional[str] = None


@dataclass
class BulkDialog:
    state: DialogState = DialogState.CLOSED
    draft: BulkDraft = field(default_factory=BulkDraft)
    error: Optional[str] = None


def _normalize_class_id(value) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Class must be a number")


class AttendanceView:
    def __init__(
        self,
        gateway: AttendanceGateway,
        notifier: Optional[Notifier] = None,
        *,
        session: Optional[SessionTimes] = None,
        selected_date: Optional[str] = None,
    ):
        self._gateway = gateway
        self._notifier = notifier or QueueNotifier()
        self._session = session or SessionTimes()
        self._lock = threading.Lock()

        self.selected_date: str = selected_date or today_iso()
        self.selected_class_id: Optional[int] = None

        self.records: List[AttendanceRecord] = []
        self.summary: Optional[AttendanceSummary] = None
        self.students: List[Student] = []
        self.classes: List[SchoolClass] = []
        self.loading = False

        self.mark = MarkDialog(draft=MarkDraft.blank(self.selected_date))
        self.bulk = BulkDialog()

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    # ---- derived views -------------------------------------------------

    @property
    def filter_key(self) -> FilterKey:
        return (self.selected_date, self.selected_class_id)

    @property
    def roster(self) -> List[Student]:
        return roster_for_class(self.students, self.classes, self.selected_class_id)

    @property
    def unmarked(self) -> List[Student]:
        return unmarked_students(self.roster, self.records)

    @property
    def can_open_bulk(self) -> bool:
        return self.selected_class_id is not None

    @property
    def can_submit_mark(self) -> bool:
        d = self.mark.draft
        return self.mark.state == DialogState.OPEN and bool(d.student_id and d.class_id and d.date)

    @property
    def can_submit_bulk(self) -> bool:
        return self.bulk.state == DialogState.OPEN and bool(self.unmarked)

    # ---- fetching ------------------------------------------------------

    def mount(self) -> None:
        """Initial load: rosters and classes once, then the filtered data."""
        self.fetch_students()
        self.fetch_classes()
        self.refresh()

    def fetch_students(self) -> None:
        try:
            self.students = list(self._gateway.list_students())
        except ApiError as e:
            logger.error(f"Error fetching students: {e}")

    def fetch_classes(self) -> None:
        try:
            self.classes = list(self._gateway.list_classes())
        except ApiError as e:
            logger.error(f"Error fetching classes: {e}")

    def fetch_records(self) -> None:
        key = self.filter_key
        self.loading = True
        try:
            records = self._gateway.list_records(date=key[0], class_id=key[1])
        except ApiError as e:
            logger.error(f"Error fetching attendance: {e}")
            if key == self.filter_key:
                self._notify_error(MSG_FETCH_RECORDS_FAILED)
            return
        finally:
            if key == self.filter_key:
                self.loading = False

        if key != self.filter_key:
            logger.debug(f"Discarding records for stale filters {key}")
            return
        self.records = list(records)

    def fetch_summary(self) -> None:
        key = self.filter_key
        try:
            summary = self._gateway.get_summary(date=key[0], class_id=key[1])
        except ApiError as e:
            logger.error(f"Error fetching attendance summary: {e}")
            return

        if key != self.filter_key:
            logger.debug(f"Discarding summary for stale filters {key}")
            return
        self.summary = summary

    def refresh(self) -> None:
        """Records first, then summary; the view is consistent once both return."""
        self.fetch_records()
        self.fetch_summary()

    def set_filters(self, *, date=_UNSET, class_id=_UNSET) -> bool:
        """Apply date and/or class together and refetch once."""
        try:
            new_date = self.selected_date if date is _UNSET else require_iso_date(date)
            new_class = self.selected_class_id if class_id is _UNSET else _normalize_class_id(class_id)
        except ValidationError as e:
            self._notify_error(str(e))
            return False

        if (new_date, new_class) == self.filter_key:
            return True

        # Bulk entries belong to the roster of the filters they were made under.
        if self.bulk.state == DialogState.SUBMITTING:
            self._notify_error("Bulk attendance is being submitted")
            return False
        if self.bulk.state == DialogState.OPEN:
            logger.info("Filters changed with bulk dialog open; discarding bulk draft")
            self.bulk = BulkDialog()

        self.selected_date = new_date
        self.selected_class_id = new_class
        logger.info(f"Filters changed: date={new_date} class={new_class}")
        self.refresh()
        return True

    def set_date(self, value: str) -> bool:
        return self.set_filters(date=value)

    def set_class(self, value) -> bool:
        return self.set_filters(class_id=value)

    # ---- single mark dialog -------------------------------------------

    def open_mark_dialog(self) -> None:
        self.mark = MarkDialog(state=DialogState.OPEN, draft=MarkDraft.blank(self.selected_date))

    def cancel_mark_dialog(self) -> None:
        if self.mark.state == DialogState.SUBMITTING:
            return
        self.mark = MarkDialog(draft=MarkDraft.blank(self.selected_date))

    def update_mark_draft(self, **changes) -> None:
        if self.mark.state != DialogState.OPEN:
            raise ValidationError("Mark attendance dialog is not open")
        unknown = set(changes) - _MARK_FIELDS
        if unknown:
            raise ValidationError(f"Unknown field(s): {', '.join(sorted(unknown))}")
        if "status" in changes:
            changes["status"] = AttendanceStatus.parse(changes["status"]).value
        for name, value in changes.items():
            setattr(self.mark.draft, name, "" if value is None else str(value))

    def submit_mark(self) -> bool:
        if not self._claim(self.mark):
            logger.warning(f"Ignoring mark submission while dialog is {self.mark.state.value}")
            return False

        try:
            payload = build_single_payload(self.mark.draft)
        except ValidationError as e:
            self.mark.state = DialogState.OPEN
            self.mark.error = str(e)
            self._notify_error(str(e))
            return False

        self.mark.error = None
        try:
            self._gateway.create_record(payload)
        except ApiError as e:
            logger.error(f"Error marking attendance: {e}")
            self.mark.state = DialogState.OPEN
            self.mark.error = e.user_message(MSG_MARK_FAILED)
            self._notify_error(self.mark.error)
            return False

        self.refresh()
        self.mark = MarkDialog(draft=MarkDraft.blank(self.selected_date))
        self._notifier.notify(title="Success", description=MSG_MARK_SUCCESS, level="success")
        return True

    # ---- bulk dialog ----------------------------------------------------

    def open_bulk_dialog(self) -> bool:
        if not self.can_open_bulk:
            self._notify_error("Select a class first")
            return False
        self.bulk = BulkDialog(state=DialogState.OPEN)
        return True

    def cancel_bulk_dialog(self) -> None:
        if self.bulk.state == DialogState.SUBMITTING:
            return
        self.bulk = BulkDialog()

    def bulk_entry(self, student_id: int) -> BulkEntry:
        return self.bulk.draft.get(student_id)

    def set_bulk_status(self, student_id: int, status) -> None:
        self._require_bulk_open()
        self.bulk.draft.set_status(student_id, AttendanceStatus.parse(status))

    def set_bulk_remarks(self, student_id: int, remarks: str) -> None:
        self._require_bulk_open()
        self.bulk.draft.set_remarks(student_id, remarks)

    def submit_bulk(self) -> bool:
        if not self._claim(self.bulk):
            logger.warning(f"Ignoring bulk submission while dialog is {self.bulk.state.value}")
            return False

        try:
            payload = build_bulk_payload(
                self.bulk.draft,
                class_id=self.selected_class_id,
                date=self.selected_date,
                session=self._session,
            )
        except ValidationError as e:
            self.bulk.state = DialogState.OPEN
            self.bulk.error = str(e)
            self._notify_error(str(e))
            return False

        count = len(payload["attendanceRecords"])
        self.bulk.error = None
        try:
            self._gateway.create_bulk(payload)
        except ApiError as e:
            logger.error(f"Error bulk marking attendance: {e}")
            self.bulk.state = DialogState.OPEN
            self.bulk.error = e.user_message(MSG_BULK_FAILED)
            self._notify_error(self.bulk.error)
            return False

        self.refresh()
        self.bulk = BulkDialog()
        self._notifier.notify(
            title="Success",
            description=f"Bulk attendance marked for {count} students",
            level="success",
        )
        return True

    # ---- helpers --------------------------------------------------------

    def _claim(self, dialog) -> bool:
        """Move an OPEN dialog to SUBMITTING; False if someone else got there first."""
        with self._lock:
            if dialog.state != DialogState.OPEN:
                return False
            dialog.state = DialogState.SUBMITTING
            return True

    def _require_bulk_open(self) -> None:
        if self.bulk.state != DialogState.OPEN:
            raise ValidationError("Bulk attendance dialog is not open")

    def _notify_error(self, description: str) -> None:
        self._notifier.notify(title="Error", description=description, level="error")
