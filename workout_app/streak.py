from datetime import date, timedelta


def update_streak(state: dict, today: date = None) -> dict:
    """
    Count consecutive days with a finished workout.

    A second workout on the same day leaves the streak alone, a workout the
    day after the last one extends it, anything else starts over at 1.
    """
    today = today or date.today()
    today_iso = today.isoformat()
    yesterday_iso = (today - timedelta(days=1)).isoformat()

    last = (state or {}).get("last")
    count = int((state or {}).get("count") or 0)

    if last == today_iso:
        return {"count": count, "last": last}
    if last == yesterday_iso:
        return {"count": count + 1, "last": today_iso}
    return {"count": 1, "last": today_iso}


def record_workout(store, today: date = None) -> dict:
    state = update_streak(store.load(), today)
    store.save(state)
    return state


def streak_recorder(store, today_func=None):
    """on_complete callback for SessionRunner that bumps the streak in `store`."""
    def on_complete(_runner):
        record_workout(store, today_func() if today_func else None)
    return on_complete
