"""Shared HTTP helpers for the JSON controllers.

Token verification is delegated to flask-jwt-extended; this module turns the
verified claims into an ``Identity`` and maps domain errors to JSON responses.
"""
from __future__ import annotations

import logging
from functools import wraps
from typing import Optional, Type, TypeVar

from flask import Flask, jsonify, request
from flask_jwt_extended import JWTManager, create_access_token, get_jwt, get_jwt_identity, jwt_required
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import HTTPException

from ..core.enums import Role
from ..core.exceptions import DomainError, RequestValidationError, ValidationError
from ..users.model import Identity

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def issue_token(user: dict) -> str:
    """Signed access token embedding user id (subject), role and email."""
    return create_access_token(
        identity=str(user["id"]),
        additional_claims={"role": user["role"], "email": user["email"]},
    )


def current_identity() -> Identity:
    claims = get_jwt()
    return Identity(user_id=int(get_jwt_identity()), role=Role(claims["role"]))


def login_required(view):
    return jwt_required()(view)


def admin_required(view):
    @wraps(view)
    @jwt_required()
    def wrapper(*args, **kwargs):
        if not current_identity().is_admin:
            return error_response("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def parse_body(model: Type[ModelT]) -> ModelT:
    """Validate the JSON body against ``model`` before it reaches a service."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        raise RequestValidationError(
            [
                {
                    "field": ".".join(str(p) for p in err["loc"]) or "body",
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
        )


def query_int(name: str) -> Optional[int]:
    raw = request.args.get(name)
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Query parameter {name!r} must be an integer")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(RequestValidationError)
    def _request_invalid(e: RequestValidationError):
        return jsonify({"errors": e.errors}), 400

    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return error_response(str(e), e.status_code)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if bool(app.config.get("DEBUG", False)):
            return error_response(str(e), 500)
        return error_response("Internal server error", 500)


def init_jwt(app: Flask) -> JWTManager:
    jwt = JWTManager(app)

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return error_response("Access token required", 401)

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        return error_response("Invalid or expired token", 401)

    @jwt.expired_token_loader
    def _expired_token(jwt_header, jwt_payload):
        return error_response("Invalid or expired token", 401)

    return jwt
