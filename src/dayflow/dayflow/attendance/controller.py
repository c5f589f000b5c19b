from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import admin_required, current_identity, login_required, parse_body, query_int
from ..container import Container
from .schemas import AttendanceUpdateRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        return jsonify(container.attendance_service.check_in(current_identity().user_id))

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        return jsonify(container.attendance_service.check_out(current_identity().user_id))

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        return jsonify(container.attendance_service.today(current_identity().user_id))

    @app.route("/api/attendance/weekly", methods=["GET"], endpoint="attendance_weekly")
    @login_required
    def attendance_weekly():
        start = parse_optional_date(request.args.get("startDate"))
        return jsonify(container.attendance_service.weekly(current_identity().user_id, start=start))

    @app.route("/api/attendance/all", methods=["GET"], endpoint="attendance_all")
    @admin_required
    def attendance_all():
        rows = container.attendance_service.range_for_user(
            start=parse_optional_date(request.args.get("startDate")),
            end=parse_optional_date(request.args.get("endDate")),
            user_id=query_int("userId"),
        )
        return jsonify(rows)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="attendance_update")
    @admin_required
    def attendance_update(attendance_id: int):
        body = parse_body(AttendanceUpdateRequest)
        record = container.attendance_service.admin_update(
            attendance_id,
            status=body.status,
            check_in=body.check_in,
            check_out=body.check_out,
            notes=body.notes,
        )
        return jsonify({"message": "Attendance updated successfully", "attendance": record})
