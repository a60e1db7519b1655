from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/faculty/<faculty_id>/schedule", methods=["GET"], endpoint="faculty_schedule")
    def faculty_schedule(faculty_id: str):
        which = request.args.get("day") or "today"
        try:
            board = container.schedule_service.daily_board(faculty_id, which)
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        return jsonify({"success": True, "day": which, "schedules": board})

    @app.route("/faculty/<faculty_id>/schedule", methods=["POST"], endpoint="faculty_schedule_create")
    def faculty_schedule_create(faculty_id: str):
        data = request.get_json(silent=True) or {}
        try:
            session_id, draft = container.schedule_service.create(
                faculty_id,
                which=data.get("day") or request.args.get("day") or "today",
                year=data.get("year"),
                department=data.get("department"),
                section=data.get("section"),
                start_time=data.get("start_time"),
                end_time=data.get("end_time"),
                subject_code=data.get("subject_code"),
                venue=data.get("venue"),
            )
        except ValidationError as e:
            logger.info("Create rejected for faculty %s: %s", faculty_id, e)
            return jsonify({"success": False, "error": str(e)}), 400

        return jsonify({"success": True, "id": session_id, "schedule": draft.to_payload()}), 201

    @app.route(
        "/faculty/<faculty_id>/schedule/<session_id>/cancel",
        methods=["POST"],
        endpoint="faculty_schedule_cancel",
    )
    def faculty_schedule_cancel(faculty_id: str, session_id: str):
        which = request.args.get("day") or "today"
        try:
            found = container.schedule_service.find(faculty_id, session_id, which)
            if found is None:
                return jsonify({"success": False, "error": "Class not found"}), 404

            container.schedule_service.cancel(found.session)
        except ValidationError as e:
            logger.info("Cancel rejected for session %s: %s", session_id, e)
            return jsonify({"success": False, "error": str(e)}), 400

        return jsonify({"success": True})
