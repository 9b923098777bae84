from __future__ import annotations

from functools import wraps

from flask import current_app, g, jsonify, request

from ..core.constants import DEFAULT_IDENTITY_HEADER


def student_required(view):
    """Resolve the student id forwarded by the identity provider into ``g.student_id``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        header = current_app.config.get("IDENTITY_HEADER", DEFAULT_IDENTITY_HEADER)
        student_id = (request.headers.get(header) or "").strip()
        if not student_id:
            return json_error("Authentication required", 401)
        g.student_id = student_id
        return view(*args, **kwargs)

    return wrapper


def json_error(message: str, status: int, **extra):
    return jsonify({"success": False, "message": message, **extra}), status
