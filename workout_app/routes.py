import logging
import random
import time
from datetime import datetime
from urllib.parse import quote

from flask import current_app, jsonify, request

from . import workout_bp
from .generate import InvalidRoutineRequest, UnknownIntensity, generate_routine
from .storage import (
    JsonStreakStore,
    append_jsonl,
    ensure_data_files,
    load_last_workout,
    load_settings,
)
from .streak import record_workout

from microcoach_core import APP_NAME, DATA_DIR, current_user, log_action

logger = logging.getLogger(__name__)

SHARE_TEXT = f"Try {APP_NAME} - 5-min workouts!"


def _paths():
    return ensure_data_files(current_app.config.get("DATA_DIR", DATA_DIR))


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _rng():
    seed = current_app.config.get("RANDOM_SEED")
    return random.Random(seed) if seed is not None else random.Random()


def _parse_total(value):
    if value is None or value == "":
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return value


@workout_bp.route("/generate-workout", methods=["POST"])
def generate_workout():
    data = _json_body()
    user = current_user(data)
    intensity = data.get("level") or data.get("intensity") or request.args.get("intensity") or "regular"
    playlist = data.get("playlist") or request.args.get("playlist")

    paths = _paths()
    settings = load_settings(paths["settings"])
    total_seconds = _parse_total(data.get("total_seconds", request.args.get("total_seconds")))
    if total_seconds is None:
        total_seconds = settings["total_seconds"]

    try:
        routine = generate_routine(
            intensity,
            total_seconds=total_seconds,
            playlist=playlist,
            rng=_rng(),
            config=settings["intensity_config"],
            min_seconds=settings["min_seconds"],
        )
    except UnknownIntensity as e:
        log_action(user, "generate_unknown_intensity", {"intensity": e.intensity})
        return jsonify({"error": "unknown_intensity", "message": str(e)}), 400
    except InvalidRoutineRequest as e:
        log_action(user, "generate_invalid", {"message": str(e)})
        return jsonify({"error": "invalid_request", "message": str(e)}), 400
    except Exception:
        logger.exception("generate error")
        return jsonify({"error": "generate_failed"}), 500

    log_action(user, "generate_workout", {
        "intensity": routine["intensity_label"],
        "steps": [s["name"] for s in routine["main"]],
    })
    return jsonify(routine)


@workout_bp.route("/save-workout", methods=["POST"])
def save_workout():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "invalid_payload"}), 400

    user = current_user(payload)
    entry = {
        "id": int(time.time() * 1000),
        "created_at": datetime.now().isoformat(),
        "user": user,
        "payload": payload,
    }
    if not append_jsonl(_paths()["saved"], entry):
        logger.error("save error: could not write saved workout for %s", user)
        return jsonify({"error": "save_failed"}), 500

    log_action(user, "save_workout", {"id": entry["id"]})
    return jsonify({"ok": True, "id": entry["id"]})


@workout_bp.route("/workouts/last", methods=["GET"])
def last_workout():
    user = current_user()
    entry = load_last_workout(_paths()["saved"], user)
    if entry is None:
        return jsonify({"error": "not_found"}), 404
    return jsonify(entry)


@workout_bp.route("/streak", methods=["GET"])
def get_streak():
    user = current_user()
    return jsonify(JsonStreakStore(_paths()["streaks"], user).load())


@workout_bp.route("/streak", methods=["POST"])
def mark_streak():
    user = current_user(_json_body())
    try:
        state = record_workout(JsonStreakStore(_paths()["streaks"], user))
    except OSError:
        logger.exception("streak error")
        return jsonify({"error": "streak_failed"}), 500

    log_action(user, "streak_marked", state)
    return jsonify(state)


@workout_bp.route("/share-link", methods=["GET"])
def share_link():
    user = current_user()
    bot = current_app.config.get("BOT_USERNAME") or ""
    app_url = f"https://t.me/{bot}?start=ref_{quote(user, safe='')}"
    share_url = (
        f"https://telegram.me/share/url?url={quote(app_url, safe='')}"
        f"&text={quote(SHARE_TEXT, safe='')}"
    )
    log_action(user, "share_link")
    return jsonify({"app_url": app_url, "share_url": share_url, "text": SHARE_TEXT})


@workout_bp.route("/create-invoice", methods=["POST"])
def create_invoice():
    user = current_user(_json_body())
    bot = current_app.config.get("BOT_USERNAME") or ""
    payment_url = f"https://t.me/{bot}" if bot else "https://t.me"
    log_action(user, "create_invoice")
    return jsonify({
        "payment_url": payment_url,
        "message": "Fallback invoice: donations are handled in the bot chat.",
    })
