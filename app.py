#!/usr/bin/env python3
import os
import time
import logging
import threading
from datetime import datetime, timezone

from flask import Flask, jsonify, send_from_directory
import requests

from workout_app import workout_bp
from microcoach_core import APP_NAME, BASE_DIR, DATA_DIR, LOG_FILE

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("microcoach")

app = Flask(__name__)
app.register_blueprint(workout_bp, url_prefix="/api")


# ───────────── Config ─────────────
app.config["DATA_DIR"] = DATA_DIR
app.config["ACTIVITY_LOG"] = LOG_FILE
app.config["BOT_USERNAME"] = os.environ.get("BOT_USERNAME", "")
app.config["PUBLIC_URL"] = os.environ.get("PUBLIC_URL", "").rstrip("/")

# Built client bundle (optional)
FRONTEND_DIST = os.environ.get("FRONTEND_DIST", os.path.join(BASE_DIR, "frontend", "dist"))

PORT = int(os.environ.get("PORT", "10000"))


# ───────────── Telegram bot token check ─────────────
TELEGRAM_API = "https://api.telegram.org"
BOT_VERIFY_TIMEOUT = float(os.environ.get("BOT_VERIFY_TIMEOUT", "7"))


def verify_bot_token(token, attempts=3, sleep=time.sleep):
    """Call getMe until Telegram accepts the token. Waits 1s, 2s, 4s... between tries."""
    token = (token or "").strip()
    if not token:
        logger.info("BOT_TOKEN not provided. Skipping bot startup.")
        return False

    for attempt in range(attempts):
        try:
            r = requests.get(f"{TELEGRAM_API}/bot{token}/getMe", timeout=BOT_VERIFY_TIMEOUT)
            payload = r.json() if r.content else None
            if r.ok and payload and payload.get("ok"):
                logger.info("BOT_TOKEN verified for @%s", (payload.get("result") or {}).get("username"))
                return True
            logger.warning("getMe rejected token (HTTP %s)", r.status_code)
        except (requests.RequestException, ValueError) as e:
            logger.warning("getMe failed: %s", e)
        if attempt < attempts - 1:
            sleep(2 ** attempt)

    logger.error("BOT_TOKEN verification failed. Bot features stay disabled.")
    return False


# ───────────── Routes ─────────────
@app.route("/health")
def health():
    return jsonify({"ok": True, "app": APP_NAME, "time": datetime.now(timezone.utc).isoformat()})


@app.route("/")
def index():
    if os.path.exists(os.path.join(FRONTEND_DIST, "index.html")):
        return send_from_directory(FRONTEND_DIST, "index.html")
    return (
        "Frontend not found. Build it and place at frontend/dist, then restart the server.",
        200,
        {"Content-Type": "text/plain; charset=utf-8"},
    )


if __name__ == "__main__":
    # Token check runs beside the server so a slow Telegram API never blocks startup
    threading.Thread(
        target=verify_bot_token, args=(os.environ.get("BOT_TOKEN", ""),), daemon=True
    ).start()
    app.run(host="0.0.0.0", port=PORT, debug=os.environ.get("FLASK_DEBUG", "false").lower() == "true")
