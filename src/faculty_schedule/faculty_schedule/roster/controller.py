from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from . import operations
from .model import Roster

logger = logging.getLogger(__name__)


def _roster_response(roster: Roster, **extra):
    body = {
        "success": True,
        "roster": roster.to_dict(),
        "summary": operations.summarize(roster).to_dict(),
    }
    body.update(extra)
    return jsonify(body)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, code: int = 400):
        return jsonify({"success": False, "error": message}), code

    @app.route("/faculty/<faculty_id>/schedule/<session_id>/roster", methods=["POST"], endpoint="roster_open")
    def roster_open(faculty_id: str, session_id: str):
        which = request.args.get("day") or "today"
        try:
            found = container.schedule_service.find(faculty_id, session_id, which)
            if found is None:
                return _error("Class not found", 404)

            opened = container.attendance_service.open_roster(found.session)
        except ValidationError as e:
            return _error(str(e))

        return _roster_response(
            opened.roster,
            topic=opened.topic,
            source=opened.source,
            view_only=found.session.completed,
        )

    @app.route("/roster/toggle", methods=["POST"], endpoint="roster_toggle")
    def roster_toggle():
        data = request.get_json(silent=True) or {}
        try:
            roster = operations.roster_from_payload(data)
            index = data.get("index")
            if not isinstance(index, int) or isinstance(index, bool):
                raise ValidationError("index must be an integer")
            roster = operations.toggle(roster, index)
        except ValidationError as e:
            return _error(str(e))

        return _roster_response(roster)

    @app.route("/roster/invert", methods=["POST"], endpoint="roster_invert")
    def roster_invert():
        data = request.get_json(silent=True) or {}
        try:
            roster = operations.invert_all(operations.roster_from_payload(data))
        except ValidationError as e:
            return _error(str(e))

        return _roster_response(roster)

    @app.route("/roster/summary", methods=["POST"], endpoint="roster_summary")
    def roster_summary():
        data = request.get_json(silent=True) or {}
        try:
            roster = operations.roster_from_payload(data)
        except ValidationError as e:
            return _error(str(e))

        return _roster_response(roster, can_submit=operations.can_submit(data.get("topic"), roster))

    @app.route("/faculty/<faculty_id>/schedule/<session_id>/attendance", methods=["POST"], endpoint="roster_submit")
    def roster_submit(faculty_id: str, session_id: str):
        which = request.args.get("day") or "today"
        data = request.get_json(silent=True) or {}
        try:
            found = container.schedule_service.find(faculty_id, session_id, which)
            if found is None:
                return _error("Class not found", 404)

            submission = container.attendance_service.submit(
                found.session,
                faculty_id=faculty_id,
                topic=data.get("topic"),
                roster=operations.roster_from_payload(data),
            )
        except ValidationError as e:
            logger.info("Attendance submission rejected for session %s: %s", session_id, e)
            return _error(str(e))

        return jsonify({"success": True, "submission": submission.to_payload()})
