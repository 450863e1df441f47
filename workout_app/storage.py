import os
import json
import copy
import threading

from .defaults import DEFAULT_INTENSITY_CONFIG, DEFAULT_MIN_SECONDS, DEFAULT_TOTAL_SECONDS

DEFAULT_SETTINGS = {
    "intensity_config": DEFAULT_INTENSITY_CONFIG,
    "total_seconds": DEFAULT_TOTAL_SECONDS,
    "min_seconds": DEFAULT_MIN_SECONDS,
}

EMPTY_STREAK = {"count": 0, "last": None}

_write_lock = threading.Lock()


def data_paths(data_dir: str) -> dict:
    return {
        "saved": os.path.join(data_dir, "saved_workouts.jsonl"),
        "streaks": os.path.join(data_dir, "streaks.json"),
        "settings": os.path.join(data_dir, "settings.json"),
    }


def ensure_data_files(data_dir: str) -> dict:
    os.makedirs(data_dir, exist_ok=True)
    paths = data_paths(data_dir)

    if not os.path.exists(paths["saved"]):
        # JSON Lines file makes it easy to append
        with open(paths["saved"], "w") as f:
            f.write("")

    if not os.path.exists(paths["streaks"]):
        with open(paths["streaks"], "w") as f:
            json.dump({}, f, indent=2)

    if not os.path.exists(paths["settings"]):
        with open(paths["settings"], "w") as f:
            json.dump(DEFAULT_SETTINGS, f, indent=2)

    return paths


def load_json(path: str, fallback):
    try:
        with open(path, "r") as f:
            return json.load(f)
    except (OSError, ValueError):
        return fallback


def save_json(path: str, data):
    tmp_path = path + ".tmp"
    with open(tmp_path, "w") as f:
        json.dump(data, f, indent=2)
    os.replace(tmp_path, path)


def append_jsonl(path: str, entry: dict) -> bool:
    """
    Append a single entry to a JSONL file. Returns False if the write failed.
    """
    try:
        with _write_lock, open(path, "a") as f:
            f.write(json.dumps(entry) + "\n")
        return True
    except OSError:
        return False


def read_jsonl(path: str) -> list:
    entries = []
    if not os.path.exists(path):
        return entries
    try:
        with open(path, "r") as f:
            for line in f:
                if not line.strip():
                    continue
                try:
                    entries.append(json.loads(line))
                except json.JSONDecodeError:
                    continue
    except OSError:
        pass
    return entries


def load_last_workout(path: str, user: str = None):
    """Most recent saved workout, optionally only for `user`."""
    for entry in reversed(read_jsonl(path)):
        if user is None or entry.get("user") == user:
            return entry
    return None


def _load_settings_dict(path: str) -> dict:
    data = load_json(path, DEFAULT_SETTINGS)
    return copy.deepcopy(data) if isinstance(data, dict) else {}


def merge_intensity_config(raw) -> dict:
    """Overlay a stored intensity config on the defaults; malformed parts fall back."""
    raw = raw if isinstance(raw, dict) else {}
    cfg = {label: dict(entry) for label, entry in raw.items() if isinstance(entry, dict)}
    # Ensure keys for each intensity
    for label, defaults in DEFAULT_INTENSITY_CONFIG.items():
        cfg[label] = {**defaults, **cfg.get(label, {})}
    return cfg


def load_intensity_config(path: str) -> dict:
    return merge_intensity_config(_load_settings_dict(path).get("intensity_config"))


def load_settings(path: str) -> dict:
    data = _load_settings_dict(path)
    data["intensity_config"] = merge_intensity_config(data.get("intensity_config"))
    data.setdefault("total_seconds", DEFAULT_TOTAL_SECONDS)
    data.setdefault("min_seconds", DEFAULT_MIN_SECONDS)
    return data


def save_settings(path: str, settings: dict):
    save_json(path, settings)


class MemoryStreakStore:
    """Streak state kept in memory; used by tests and one-off sessions."""

    def __init__(self, state: dict = None):
        self._state = dict(state or EMPTY_STREAK)

    def load(self) -> dict:
        return dict(self._state)

    def save(self, state: dict):
        self._state = dict(state)


class JsonStreakStore:
    """
    Per-user streak state inside a shared JSON file, {user: {"count", "last"}}.

    Last write wins; the file is rewritten atomically on every save.
    """

    def __init__(self, path: str, user: str = None):
        self.path = path
        self.user = user or "default"

    def load(self) -> dict:
        data = load_json(self.path, {})
        state = data.get(self.user) if isinstance(data, dict) else None
        if not isinstance(state, dict):
            return dict(EMPTY_STREAK)
        return {"count": int(state.get("count") or 0), "last": state.get("last")}

    def save(self, state: dict):
        with _write_lock:
            data = load_json(self.path, {})
            if not isinstance(data, dict):
                data = {}
            data[self.user] = {"count": state.get("count", 0), "last": state.get("last")}
            save_json(self.path, data)
