from __future__ import annotations

from functools import wraps

from flask import jsonify, request
from loguru import logger

from ..core.exceptions import NotFoundError, ValidationError


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_errors(view):
    """Map domain errors raised by a view to JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return error_response(str(e), 400)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception(f"[API] {request.method} {request.path} failed")
            return error_response("Internal Server Error", 500)

    return wrapper
