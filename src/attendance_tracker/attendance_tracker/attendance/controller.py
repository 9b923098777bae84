from __future__ import annotations

import logging

from flask import Flask, g, jsonify, request

from ..common.web import json_error, student_required
from ..container import Container
from ..core.enums import RecordOutcome
from ..core.exceptions import ConflictNotice, StorageError, ValidationError
from .trend import trend_chart_series

logger = logging.getLogger(__name__)


def _parse_overwrite(value):
    if value is None or isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/conflict", methods=["GET"], endpoint="attendance_conflict")
    @student_required
    def attendance_conflict():
        try:
            exists = container.ledger_service.check_conflict(
                g.student_id,
                request.args.get("subject_id"),
                request.args.get("date") or "",
            )
            return jsonify({"success": True, "exists": exists}), 200
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while checking attendance conflict")
            return json_error("Internal error while checking attendance", 500)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_record")
    @student_required
    def attendance_record():
        data = request.get_json(silent=True) or {}
        try:
            outcome = container.ledger_service.record_attendance(
                g.student_id,
                data.get("subject_id"),
                data.get("date"),
                data.get("status"),
                data.get("notes"),
                overwrite=_parse_overwrite(data.get("overwrite")),
            )
            status_code = 201 if outcome == RecordOutcome.CREATED else 200
            return jsonify({"success": True, "outcome": outcome.value}), status_code
        except ConflictNotice as e:
            return json_error(
                "Attendance record already exists for this date. Resubmit with overwrite to update it.",
                409,
                existing=e.existing.to_dict(),
            )
        except ValidationError as e:
            logger.warning("Attendance rejected for %s: %s", g.student_id, e)
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while recording attendance")
            return json_error("Internal error while recording attendance", 500)

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @student_required
    def attendance_summary():
        try:
            summaries = container.aggregator.summarize(
                g.student_id,
                sort_by_percentage=request.args.get("sort") == "percentage",
            )
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while summarizing attendance")
            return json_error("Internal error while loading summary", 500)

        items = [
            {
                "subject_id": s.subject_id,
                "subject_name": s.subject_name,
                "subject_code": s.subject_code,
                "classes_attended": s.classes_attended,
                "total_classes": s.total_classes,
                "attendance_percentage": s.attendance_percentage,
                "risk_tier": container.classifier.classify(s.attendance_percentage).value,
            }
            for s in summaries
        ]
        return jsonify({"success": True, "summary": items}), 200

    @app.route("/api/attendance/trend/<int:subject_id>", methods=["GET"], endpoint="attendance_trend")
    @student_required
    def attendance_trend(subject_id: int):
        try:
            points = container.trend_builder.trend(g.student_id, subject_id)
        except ValidationError as e:
            return json_error(str(e), 400)
        except StorageError as e:
            return json_error(str(e), 503)
        except Exception:
            logger.exception("Unexpected error while building attendance trend")
            return json_error("Internal error while loading trend", 500)

        return jsonify(
            {
                "success": True,
                "points": [
                    {
                        "date": p.date.strftime("%Y-%m-%d"),
                        "present_count": p.present_count,
                        "absent_count": p.absent_count,
                        "late_count": p.late_count,
                        "total_count": p.total_count,
                        "daily_percentage": p.daily_percentage,
                    }
                    for p in points
                ],
                "chart": trend_chart_series(points),
            }
        ), 200
