from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..common.web import json_error, student_required
from ..container import Container
from ..core.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="subjects_list")
    @student_required
    def subjects_list():
        try:
            subjects = container.subject_service.list_enrolled_subjects(g.student_id)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while listing subjects")
            return json_error("Internal error while listing subjects", 500)
        return jsonify({"success": True, "subjects": [s.to_dict() for s in subjects]}), 200

    @app.route("/api/subjects", methods=["POST"], endpoint="subjects_add")
    @student_required
    def subjects_add():
        data = request.get_json(silent=True) or {}
        try:
            subject = container.subject_service.add_subject(
                g.student_id,
                name=data.get("name") or "",
                code=data.get("code") or "",
            )
            return jsonify({"success": True, "subject": subject.to_dict()}), 201
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while adding subject")
            return json_error("Internal error while adding subject", 500)

    @app.route("/api/subjects/<int:subject_id>", methods=["DELETE"], endpoint="subjects_remove")
    @student_required
    def subjects_remove(subject_id: int):
        try:
            container.subject_service.remove_subject(g.student_id, subject_id)
            return jsonify({"success": True}), 200
        except ValidationError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while removing subject")
            return json_error("Internal error while removing subject", 500)
