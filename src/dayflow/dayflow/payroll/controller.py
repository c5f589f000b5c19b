from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_identity, login_required, parse_body, query_int
from ..container import Container
from .schemas import PayrollStatusRequest, PayrollUpdateRequest, PayrollUpsertRequest, SalaryRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/my-payroll", methods=["GET"], endpoint="payroll_mine")
    @login_required
    def payroll_mine():
        rows = container.payroll_service.mine(
            current_identity().user_id,
            year=query_int("year"),
            month=query_int("month"),
        )
        return jsonify(rows)

    @app.route("/api/payroll/all", methods=["GET"], endpoint="payroll_all")
    @admin_required
    def payroll_all():
        rows = container.payroll_service.all(
            user_id=query_int("userId"),
            year=query_int("year"),
            month=query_int("month"),
        )
        return jsonify(rows)

    @app.route("/api/payroll", methods=["POST"], endpoint="payroll_upsert")
    @admin_required
    def payroll_upsert():
        body = parse_body(PayrollUpsertRequest)
        record = container.payroll_service.upsert(
            user_id=body.user_id,
            month=body.month,
            year=body.year,
            base_salary=body.base_salary,
            allowances=body.allowances,
            deductions=body.deductions,
            status=body.status,
        )
        return jsonify({"message": "Payroll saved successfully", "payroll": record})

    @app.route("/api/payroll/<int:payroll_id>", methods=["PUT"], endpoint="payroll_update")
    @admin_required
    def payroll_update(payroll_id: int):
        body = parse_body(PayrollUpdateRequest)
        record = container.payroll_service.update_fields(
            payroll_id,
            base_salary=body.base_salary,
            allowances=body.allowances,
            deductions=body.deductions,
            status=body.status,
        )
        return jsonify({"message": "Payroll updated successfully", "payroll": record})

    @app.route("/api/payroll/<int:payroll_id>/status", methods=["PUT"], endpoint="payroll_status")
    @admin_required
    def payroll_status(payroll_id: int):
        body = parse_body(PayrollStatusRequest)
        container.payroll_service.set_status(payroll_id, body.status)
        return jsonify({"message": "Payroll status updated successfully"})

    @app.route("/api/payroll/salary/<int:user_id>", methods=["PUT"], endpoint="payroll_salary")
    @admin_required
    def payroll_salary(user_id: int):
        body = parse_body(SalaryRequest)
        container.payroll_service.set_base_salary(user_id, body.salary)
        return jsonify({"message": "Salary updated successfully"})
