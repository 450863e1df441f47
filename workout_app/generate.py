import logging
import random
import re
from urllib.parse import quote

from .defaults import (
    DEFAULT_BASE_SECONDS,
    DEFAULT_COOLDOWN_POOL,
    DEFAULT_INTENSITY,
    DEFAULT_INTENSITY_CONFIG,
    DEFAULT_MIN_SECONDS,
    DEFAULT_PLAYLISTS,
    DEFAULT_POOLS,
    DEFAULT_REPS,
    DEFAULT_TOTAL_SECONDS,
)

logger = logging.getLogger(__name__)

YOUTUBE_SEARCH_URL = "https://www.youtube.com/results?search_query="


class UnknownIntensity(ValueError):
    """Raised when an intensity label has no pool in the catalog."""

    def __init__(self, intensity):
        super().__init__(f"Unknown intensity: {intensity!r}")
        self.intensity = intensity


class InvalidRoutineRequest(ValueError):
    """Raised for malformed generator arguments (negative totals, bad counts)."""


def normalize_intensity(intensity) -> str:
    key = str(intensity or "").strip().lower()
    return key or DEFAULT_INTENSITY


def get_pool(intensity, catalog: dict = None) -> list:
    pools = DEFAULT_POOLS if catalog is None else catalog
    key = normalize_intensity(intensity)
    if key not in pools:
        raise UnknownIntensity(key)
    return pools[key]


def slugify(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")


def _check_seconds(value, label: str):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRoutineRequest(f"{label} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidRoutineRequest(f"{label} must not be negative, got {value}")


def _check_min_seconds(value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidRoutineRequest(f"min_seconds must be a positive integer, got {value!r}")


def _weight(item: dict):
    base = item.get("base")
    if base is None:
        return DEFAULT_BASE_SECONDS
    return max(0, base)


def pick_unique(pool: list, count: int, rng: random.Random = None) -> list:
    """
    Pick up to `count` distinct entries from `pool`, uniformly at random.

    Returns copies so callers can annotate them without touching the catalog.
    """
    if count < 0:
        raise InvalidRoutineRequest(f"count must not be negative, got {count}")
    rng = rng or random.Random()
    shuffled = list(pool)
    rng.shuffle(shuffled)
    return [dict(entry) for entry in shuffled[:count]]


def allocate_durations(items: list, total_seconds: int, min_seconds: int = DEFAULT_MIN_SECONDS) -> list:
    """
    Split `total_seconds` across the time-based items proportionally to their base.

    Every share is rounded half-up and clamped to `min_seconds`. The rounding
    error left over is then settled on the last time item: a surplus goes to
    it entirely, a deficit is taken from it down to the floor and any rest
    from the earlier time items, walking backwards. The time durations always
    sum to `total_seconds` exactly.

    Rep-based items keep their base as the rep count. A zero total drops the
    time items, and all-zero weights split the total evenly.
    """
    _check_seconds(total_seconds, "total_seconds")
    _check_min_seconds(min_seconds)

    result = []
    for item in items:
        step = dict(item)
        step["unit"] = step.get("unit") or "time"
        if step["unit"] != "time":
            step["duration_or_reps"] = int(step.get("base") or DEFAULT_REPS)
        result.append(step)

    time_steps = [s for s in result if s["unit"] == "time"]
    if not time_steps:
        return result
    if total_seconds == 0:
        return [s for s in result if s["unit"] != "time"]
    if len(time_steps) * min_seconds > total_seconds:
        raise InvalidRoutineRequest(
            f"{len(time_steps)} exercises need at least {len(time_steps) * min_seconds}s, "
            f"only {total_seconds}s available"
        )

    weights = [_weight(s) for s in time_steps]
    total_weight = sum(weights)
    if total_weight <= 0:
        weights = [1] * len(time_steps)
        total_weight = len(time_steps)

    for step, weight in zip(time_steps, weights):
        share = total_seconds * weight / total_weight
        step["duration_or_reps"] = max(min_seconds, int(share + 0.5))

    diff = total_seconds - sum(s["duration_or_reps"] for s in time_steps)
    if diff > 0:
        time_steps[-1]["duration_or_reps"] += diff
    else:
        for step in reversed(time_steps):
            if diff == 0:
                break
            take = min(step["duration_or_reps"] - min_seconds, -diff)
            step["duration_or_reps"] -= take
            diff += take

    return result


def _to_step(item: dict) -> dict:
    return {
        "name": item["name"],
        "slug": item.get("slug") or slugify(item["name"]),
        "unit": item.get("unit") or "time",
        "duration_or_reps": int(item["duration_or_reps"]),
        "notes": item.get("notes") or "",
    }


def build_block(pool: list, count: int, total_seconds: int, min_seconds: int, rng: random.Random) -> list:
    """Select, allocate and reorder one block of steps against its own total."""
    if total_seconds == 0 or count == 0 or not pool:
        return []

    floor = min(min_seconds, total_seconds)
    count = min(count, total_seconds // floor)

    picked = pick_unique(pool, count, rng)
    allocated = allocate_durations(picked, total_seconds, floor)

    # Reorder so long and short exercises are not grouped by weight
    rng.shuffle(allocated)
    return [_to_step(item) for item in allocated]


def build_playlist(intensity: str, playlist=None, playlists: dict = None) -> list:
    playlists = DEFAULT_PLAYLISTS if playlists is None else playlists
    entry = playlists.get(str(playlist or "").strip().lower())
    if entry:
        return [dict(entry)]

    query = quote(f"{intensity} workout mix 5 minutes", safe="")
    return [{
        "title": f"{intensity} mix",
        "hint": f"{intensity} playlist",
        "reference": YOUTUBE_SEARCH_URL + query,
    }]


def generate_routine(
    intensity=None,
    total_seconds: int = None,
    playlist=None,
    rng: random.Random = None,
    catalog: dict = None,
    cooldown_pool: list = None,
    config: dict = None,
    min_seconds: int = DEFAULT_MIN_SECONDS,
) -> dict:
    rng = rng or random.Random()
    key = normalize_intensity(intensity)
    pool = get_pool(key, catalog)

    total = DEFAULT_TOTAL_SECONDS if total_seconds is None else total_seconds
    _check_seconds(total, "total_seconds")
    _check_min_seconds(min_seconds)

    settings = (DEFAULT_INTENSITY_CONFIG if config is None else config).get(key) or {}
    count = settings.get("count", 5)
    cooldown_count = settings.get("cooldown_count", 0)
    cooldown_seconds = settings.get("cooldown_seconds", 0)
    _check_seconds(count, "count")
    _check_seconds(cooldown_count, "cooldown_count")
    _check_seconds(cooldown_seconds, "cooldown_seconds")

    main = build_block(pool, count, total, min_seconds, rng)

    cooldown = []
    if cooldown_count and cooldown_seconds:
        cooldown_pool = DEFAULT_COOLDOWN_POOL if cooldown_pool is None else cooldown_pool
        cooldown = build_block(cooldown_pool, cooldown_count, cooldown_seconds, min_seconds, rng)

    total_duration = sum(
        s["duration_or_reps"] for s in main + cooldown if s["unit"] == "time"
    )

    logger.debug(
        "Generated %s routine: %d main / %d cooldown steps, %ss",
        key, len(main), len(cooldown), total_duration,
    )

    return {
        "total_duration_seconds": total_duration,
        "total_duration_minutes": round(total_duration / 60, 1),
        "intensity_label": key,
        "main": main,
        "cooldown": cooldown,
        "playlist": build_playlist(key, playlist),
    }
