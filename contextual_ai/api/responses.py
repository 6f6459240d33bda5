"""
Response envelope and error mapping shared by the routers.

Every endpoint answers with ``{success, data | error, message?}``.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from fastapi import HTTPException
from pydantic import ValidationError

ERROR_MESSAGES = {
    "INTERNAL_ERROR": "Internal server error",
}

SUCCESS_MESSAGES = {
    "SESSION_CREATED": "Learning session created successfully",
    "SESSION_UPDATED": "Learning session updated successfully",
    "SESSION_ENDED": "Learning session ended successfully",
    "CONTENT_GENERATED": "Content generated successfully",
    "CONTEXT_UPDATED": "Context updated successfully",
    "PERSONAL_UPDATED": "Personal data updated successfully",
}


def envelope(data: Any = None, message: Optional[str] = None) -> dict[str, Any]:
    """Successful response body."""
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def error_body(error: str, fields: Optional[list[str]] = None) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": error}
    if fields:
        body["fields"] = fields
    return body


def _field_path(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


def describe_validation_errors(errors: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Turn pydantic error dicts into an error body.

    Missing fields are listed as "Missing required fields: a, b"; any other
    problem is reported as "Invalid request" with the offending fields.
    """
    missing = [_field_path(err["loc"]) for err in errors if err.get("type") == "missing"]
    if missing:
        return error_body(f"Missing required fields: {', '.join(missing)}", missing)

    invalid = list(dict.fromkeys(_field_path(err["loc"]) for err in errors))
    return error_body("Invalid request", invalid)


def validation_http_error(exc: ValidationError) -> HTTPException:
    """400 for a pydantic ValidationError raised inside an endpoint."""
    return HTTPException(status_code=400, detail=describe_validation_errors(exc.errors()))
