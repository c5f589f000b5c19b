from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import admin_required, current_identity, login_required, parse_body
from ..container import Container
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from .schemas import LeaveCreateRequest, LeaveDecisionRequest


def _status_filter():
    raw = (request.args.get("status") or "").strip()
    if not raw:
        return None
    try:
        return LeaveStatus(raw)
    except ValueError:
        raise ValidationError(f"Unknown leave status {raw!r}")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave", methods=["POST"], endpoint="leave_submit")
    @login_required
    def leave_submit():
        body = parse_body(LeaveCreateRequest)
        request_id = container.leave_service.submit(
            user_id=current_identity().user_id,
            leave_type=body.leave_type,
            start_date=body.start_date,
            end_date=body.end_date,
            remarks=body.remarks,
        )
        return jsonify({"message": "Leave request submitted successfully", "id": request_id}), 201

    @app.route("/api/leave/my-leaves", methods=["GET"], endpoint="leave_mine")
    @login_required
    def leave_mine():
        return jsonify(container.leave_service.list_mine(current_identity().user_id))

    @app.route("/api/leave/all", methods=["GET"], endpoint="leave_all")
    @admin_required
    def leave_all():
        return jsonify(container.leave_service.list_all(status=_status_filter()))

    @app.route("/api/leave/<int:request_id>/approve", methods=["PUT"], endpoint="leave_decide")
    @admin_required
    def leave_decide(request_id: int):
        body = parse_body(LeaveDecisionRequest)
        container.leave_service.decide(
            request_id,
            status=body.status,
            decider_id=current_identity().user_id,
            admin_comment=body.admin_comment,
        )
        return jsonify({"message": f"Leave request {body.status.value} successfully"})
