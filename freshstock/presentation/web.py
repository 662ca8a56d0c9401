"""
Request/response plumbing shared by every blueprint.

Success envelope: {"data": <payload>}
Error envelope:   {"code": <status symbol>, "message": <text>}
"""

import logging
from dataclasses import fields
from typing import Optional, Type

from flask import jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

from freshstock import db
from freshstock.domain.optional import Present
from freshstock.errors import BadRequest, BodyInvalid, FreshStockError
from freshstock.presentation.schemas import INT64_MAX, INT64_MIN
from freshstock.utils.logger import log_event

STATUS_SYMBOLS = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "unprocessable_entity",
    500: "internal_server_error",
}


def status_symbol(status: int) -> str:
    if status in STATUS_SYMBOLS:
        return STATUS_SYMBOLS[status]
    return HTTP_STATUS_CODES.get(status, "unknown").lower().replace(" ", "_")


def _render(value):
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [_render(item) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def success(data, status: int = 200):
    """
    Wrap a domain value in the success envelope.

    A missing or empty sequence always renders as an empty list.
    """
    return jsonify({"data": _render(data)}), status


def no_content():
    return "", 204


def error_response(status: int, message: str):
    return jsonify({"code": status_symbol(status), "message": message}), status


def parse_id(raw: str, message: str) -> int:
    """
    Parse an integer path or query id.

    Raises:
        BadRequest: With the entity's bad-id message
    """
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise BadRequest(message) from None
    if not INT64_MIN <= value <= INT64_MAX:
        raise BadRequest(message)
    return value


def query_id(message: str, name: str = "id") -> Optional[int]:
    """Optional integer id from the query string; absent or empty means None"""
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    return parse_id(raw, message)


def query_text(name: str = "id") -> Optional[str]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    return raw


def describe_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "body"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def bind_json(schema: Type[BaseModel], missing_status: int = 422, invalid_status: int = 422,
              message: Optional[str] = None, missing_message: Optional[str] = None) -> BaseModel:
    """
    Bind the JSON body against a request schema.

    Args:
        schema: Pydantic model to validate against
        missing_status: Status when a required field is absent
        invalid_status: Status for any other failure (unparseable JSON, wrong type)
        message: Fixed client message for every binding failure; defaults to
            the validation text
        missing_message: Fixed client message for missing fields; defaults to message

    Returns:
        The validated schema instance

    Raises:
        BodyInvalid: With the status chosen by the rules above
    """
    payload = request.get_json(silent=True)
    if payload is None:
        raise BodyInvalid(message or "request body must be valid JSON", status_code=invalid_status)
    try:
        return schema.model_validate(payload)
    except ValidationError as error:
        if any(detail["type"] == "missing" for detail in error.errors()):
            raise BodyInvalid(
                missing_message or message or describe_validation_error(error),
                status_code=missing_status,
            ) from error
        raise BodyInvalid(message or describe_validation_error(error), status_code=invalid_status) from error


def to_snapshot(body: BaseModel, snapshot_class, **extra):
    """Build a new entity snapshot (id None) from a create request"""
    values = body.model_dump()
    values.update(extra)
    values.setdefault("id", None)
    names = {f.name for f in fields(snapshot_class)}
    return snapshot_class(**{name: value for name, value in values.items() if name in names})


def to_patch(body: BaseModel, patch_class):
    """Wrap every field the client sent with a non-null value in Present"""
    names = {f.name for f in fields(patch_class)}
    values = body.model_dump(exclude_unset=True)
    return patch_class(**{
        name: Present(value)
        for name, value in values.items()
        if name in names and value is not None
    })


def register_error_handlers(app):
    """Render and log every error that escapes a view"""

    @app.errorhandler(FreshStockError)
    def handle_domain_error(error):
        db.session.rollback()
        status = error.status_code
        level = logging.ERROR if status >= 500 else logging.WARNING
        log_event(f"{request.method} {request.path} -> {status}: {error.message}", origin=error, level=level)
        # 5xx bodies never carry storage diagnostics
        message = "" if status >= 500 else error.message
        return error_response(status, message)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        log_event(f"{request.method} {request.path} -> {error.code}: {error.description}", level=logging.WARNING)
        return error_response(error.code, error.description)

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        log_event(
            f"{request.method} {request.path} -> 500: {type(error).__name__}: {error}",
            origin=error, include_traceback=True,
        )
        return error_response(500, "")
