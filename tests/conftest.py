import sys
from pathlib import Path

import pytest

# Repo root holds app.py and microcoach_core.py
sys.path.insert(0, str(Path(__file__).parent.parent))


class ManualScheduler:
    """Scheduler that never fires on its own; tests call runner.tick()."""

    def __init__(self):
        self.active = []
        self.callbacks = []
        self.registered = 0

    def every(self, seconds, callback):
        handle = object()
        self.active.append(handle)
        self.callbacks.append(callback)
        self.registered += 1
        return handle

    def cancel(self, handle):
        if handle in self.active:
            self.active.remove(handle)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def app(tmp_path):
    from app import app as flask_app

    flask_app.config["TESTING"] = True
    flask_app.config["DATA_DIR"] = str(tmp_path / "data")
    flask_app.config["ACTIVITY_LOG"] = str(tmp_path / "logs.jsonl")
    flask_app.config["BOT_USERNAME"] = "PocketedCoach_bot"
    flask_app.config["RANDOM_SEED"] = None
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
