from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from .presenter import serialize_view


def register(app: Flask, container) -> None:
    view = container.attendance_view
    notifier = container.notifier

    def _state(ok: bool = True, status: int = 200):
        body = serialize_view(view)
        body["success"] = ok
        body["notifications"] = [asdict(n) for n in notifier.drain()]
        return jsonify(body), status

    def _payload() -> dict:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}

    @app.route("/attendance/view", methods=["GET"], endpoint="attendance_view")
    def attendance_view():
        return _state()

    @app.route("/attendance/refresh", methods=["POST"], endpoint="attendance_refresh")
    def attendance_refresh():
        view.refresh()
        return _state()

    @app.route("/attendance/filters", methods=["POST"], endpoint="attendance_filters")
    def attendance_filters():
        data = _payload()
        kwargs = {}
        if "date" in data:
            kwargs["date"] = data["date"]
        if "class_id" in data:
            kwargs["class_id"] = data["class_id"]
        ok = view.set_filters(**kwargs)
        return _state(ok, 200 if ok else 400)

    @app.route("/attendance/mark/open", methods=["POST"], endpoint="attendance_mark_open")
    def attendance_mark_open():
        view.open_mark_dialog()
        return _state()

    @app.route("/attendance/mark/cancel", methods=["POST"], endpoint="attendance_mark_cancel")
    def attendance_mark_cancel():
        view.cancel_mark_dialog()
        return _state()

    @app.route("/attendance/mark/draft", methods=["POST"], endpoint="attendance_mark_draft")
    def attendance_mark_draft():
        try:
            view.update_mark_draft(**_payload())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return _state()

    @app.route("/attendance/mark/submit", methods=["POST"], endpoint="attendance_mark_submit")
    def attendance_mark_submit():
        ok = view.submit_mark()
        return _state(ok, 200 if ok else 400)

    @app.route("/attendance/bulk/open", methods=["POST"], endpoint="attendance_bulk_open")
    def attendance_bulk_open():
        ok = view.open_bulk_dialog()
        return _state(ok, 200 if ok else 400)

    @app.route("/attendance/bulk/cancel", methods=["POST"], endpoint="attendance_bulk_cancel")
    def attendance_bulk_cancel():
        view.cancel_bulk_dialog()
        return _state()

    @app.route("/attendance/bulk/entry", methods=["POST"], endpoint="attendance_bulk_entry")
    def attendance_bulk_entry():
        data = _payload()
        try:
            student_id = int(data.get("student_id"))
            if "status" in data:
                view.set_bulk_status(student_id, data["status"])
            if "remarks" in data:
                view.set_bulk_remarks(student_id, data["remarks"])
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "student_id must be a number"}), 400
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return _state()

    @app.route("/attendance/bulk/submit", methods=["POST"], endpoint="attendance_bulk_submit")
    def attendance_bulk_submit():
        ok = view.submit_bulk()
        return _state(ok, 200 if ok else 400)
