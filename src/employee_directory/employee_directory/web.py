"""Shared helpers for the JSON controllers."""
from __future__ import annotations

import logging
from typing import Any, Dict

from flask import jsonify, request

from .core.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/api/employees"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (ConflictError, 400),
    (NotFoundError, 404),
    (AuthenticationError, 401),
)


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 500


def error_response(error: DomainError, *, action: str):
    status = status_for(error)
    if status >= 500:
        logger.error("Error %s: %s", action, error)
        return jsonify({"error": f"Error {action}", "details": str(error)}), 500

    logger.warning("Rejected %s: %s", action, error)
    return jsonify({"error": str(error)}), status
