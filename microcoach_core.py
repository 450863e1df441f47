import os
import json
from datetime import datetime

from flask import current_app, request

APP_NAME = "MicroCoach"

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_FILE = os.environ.get("MICROCOACH_LOG_FILE", os.path.join(BASE_DIR, "logs.jsonl"))
DATA_DIR = os.environ.get("MICROCOACH_DATA_DIR", os.path.join(BASE_DIR, "workout_app", "data"))


def log_action(username, action, details=None):
    """Append a single log entry to the activity log (logs.jsonl)."""
    entry = {
        "timestamp": datetime.now().strftime("%d/%m/%Y %H:%M"),
        "username": username or "anonymous",
        "action": action,
        "ip": request.remote_addr,
        "path": request.path,
        "details": details or {},
        "user_agent": request.headers.get("User-Agent", ""),
    }

    log_file = current_app.config.get("ACTIVITY_LOG", LOG_FILE)
    try:
        with open(log_file, "a") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError:
        # Don't break the app if logging fails
        pass


def current_user(data: dict = None) -> str:
    """User id from the JSON body or query string, "default" when absent."""
    user = (data or {}).get("user") or request.args.get("user") or ""
    return str(user).strip() or "default"
