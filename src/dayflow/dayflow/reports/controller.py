from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import admin_required, current_identity, login_required, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/analytics", methods=["GET"], endpoint="reports_analytics")
    @admin_required
    def reports_analytics():
        return jsonify(container.report_service.analytics())

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="reports_attendance")
    @admin_required
    def reports_attendance():
        report = container.report_service.attendance_report(
            start=parse_optional_date(request.args.get("startDate")),
            end=parse_optional_date(request.args.get("endDate")),
            user_id=query_int("userId"),
        )
        return jsonify(report)

    @app.route("/api/reports/salary-slip/<int:user_id>", methods=["GET"], endpoint="reports_salary_slip")
    @login_required
    def reports_salary_slip(user_id: int):
        slip = container.report_service.salary_slip(
            current=current_identity(),
            user_id=user_id,
            month=query_int("month"),
            year=query_int("year"),
        )
        return jsonify(slip)
