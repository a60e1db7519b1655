from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .roster.controller import register as register_roster
from .roster.repository import AttendanceHistory, AttendanceTransport, StudentDirectory
from .sessions.controller import register as register_sessions
from .sessions.repository import ScheduleFeed


def create_app(
    *,
    schedule_feed: ScheduleFeed,
    student_directory: StudentDirectory,
    attendance_history: AttendanceHistory,
    attendance_transport: AttendanceTransport,
) -> Flask:
    """Build the API around the remote collaborators supplied by the caller."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)

    grace_minutes = int(getattr(settings, "GRACE_MINUTES"))
    default_roster_size = int(getattr(settings, "DEFAULT_ROSTER_SIZE"))
    logger.info(
        "settings=%s grace_minutes=%d default_roster_size=%d",
        settings_module,
        grace_minutes,
        default_roster_size,
    )

    container = build_container(
        schedule_feed=schedule_feed,
        student_directory=student_directory,
        attendance_history=attendance_history,
        attendance_transport=attendance_transport,
        grace_minutes=grace_minutes,
        default_roster_size=default_roster_size,
    )
    app.extensions["faculty_schedule"] = container

    register_sessions(app, container)
    register_roster(app, container)

    return app
