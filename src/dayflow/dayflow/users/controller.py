from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_identity, issue_token, login_required, parse_body
from ..container import Container
from .schemas import ProfileUpdateRequest, SignInRequest, SignUpRequest


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        body = parse_body(SignUpRequest)
        user_id = container.auth_service.sign_up(
            employee_id=body.employee_id,
            username=body.username,
            email=str(body.email),
            phone=body.phone,
            password=body.password,
            role=body.role,
        )
        return jsonify({"message": "User created successfully", "userId": user_id}), 201

    @app.route("/api/auth/signin", methods=["POST"], endpoint="signin")
    def signin():
        body = parse_body(SignInRequest)
        user = container.auth_service.sign_in(str(body.email), body.password)
        return jsonify({"token": issue_token(user), "user": user})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"user": container.auth_service.me(current_identity().user_id)})

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @admin_required
    def list_employees():
        return jsonify(container.employee_service.list_employees())

    @app.route("/api/employees/<int:user_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(user_id: int):
        return jsonify(container.employee_service.get_employee(current=current_identity(), user_id=user_id))

    @app.route("/api/employees/<int:user_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(user_id: int):
        body = parse_body(ProfileUpdateRequest)
        profile = container.employee_service.update_profile(
            current=current_identity(),
            user_id=user_id,
            changes=body.model_dump(exclude_unset=True),
        )
        return jsonify({"message": "Profile updated successfully", "profile": profile})

    @app.route("/api/employees/<int:user_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(user_id: int):
        container.employee_service.delete_employee(current=current_identity(), user_id=user_id)
        return jsonify({"message": "Employee deleted successfully"})
