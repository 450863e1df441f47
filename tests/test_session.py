"""Tests for the countdown session runner."""
import copy
import threading

from workout_app.session import COMPLETED, IDLE, PAUSED, RUNNING, SessionRunner, ThreadTicker


def _routine(*durations, cooldown=()):
    def step(i, d):
        return {"name": chr(ord("A") + i), "unit": "time", "duration_or_reps": d, "notes": ""}

    main = [step(i, d) for i, d in enumerate(durations)]
    cool = [step(len(durations) + i, d) for i, d in enumerate(cooldown)]
    return {"main": main, "cooldown": cool}


def test_full_run_completes(scheduler):
    routine = _routine(2, 1)
    runner = SessionRunner(routine, scheduler=scheduler)
    runner.start()
    assert runner.state == RUNNING
    assert runner.active_index == 0
    assert runner.remaining == 2

    for _ in range(3):
        runner.tick()

    assert runner.state == COMPLETED
    assert all(s["completed"] for s in runner.steps)
    assert scheduler.active == []


def test_advances_through_cooldown(scheduler):
    runner = SessionRunner(_routine(1, cooldown=(2,)), scheduler=scheduler)
    runner.start()
    runner.tick()
    assert runner.active_index == 1
    assert runner.steps[1]["name"] == "B"
    runner.tick()
    runner.tick()
    assert runner.state == COMPLETED


def test_routine_is_not_mutated(scheduler):
    routine = _routine(1, 1)
    snapshot = copy.deepcopy(routine)
    runner = SessionRunner(routine, scheduler=scheduler)
    runner.start()
    runner.tick()
    runner.tick()
    assert routine == snapshot


def test_pause_and_resume(scheduler):
    runner = SessionRunner(_routine(5), scheduler=scheduler)
    runner.start()
    runner.tick()
    runner.pause()
    assert runner.state == PAUSED
    assert scheduler.active == []

    runner.tick()
    assert runner.remaining == 4

    runner.resume()
    assert runner.state == RUNNING
    assert len(scheduler.active) == 1
    runner.tick()
    assert runner.remaining == 3


def test_pause_twice_is_noop(scheduler):
    runner = SessionRunner(_routine(5), scheduler=scheduler)
    runner.start()
    runner.pause()
    runner.pause()
    assert runner.state == PAUSED
    assert runner.remaining == 5


def test_stop_when_idle_is_noop(scheduler):
    runner = SessionRunner(_routine(5), scheduler=scheduler)
    runner.stop()
    runner.stop()
    assert runner.state == IDLE
    assert runner.active_index == -1


def test_start_after_stop_resumes_first_incomplete(scheduler):
    runner = SessionRunner(_routine(1, 3, 2), scheduler=scheduler)
    runner.start()
    runner.tick()
    runner.stop()
    assert runner.state == IDLE
    assert runner.steps[0]["completed"]

    runner.start()
    assert runner.active_index == 1
    assert runner.remaining == 3


def test_start_after_completion_restarts(scheduler):
    runner = SessionRunner(_routine(1), scheduler=scheduler)
    runner.start()
    runner.tick()
    assert runner.state == COMPLETED

    runner.start()
    assert runner.state == RUNNING
    assert runner.active_index == 0
    assert not runner.steps[0]["completed"]


def test_start_while_paused_resumes(scheduler):
    runner = SessionRunner(_routine(4), scheduler=scheduler)
    runner.start()
    runner.tick()
    runner.pause()
    runner.start()
    assert runner.state == RUNNING
    assert runner.remaining == 3


def test_single_tick_registration(scheduler):
    runner = SessionRunner(_routine(4), scheduler=scheduler)
    runner.start()
    runner.start()
    runner.pause()
    runner.resume()
    runner.resume()
    assert len(scheduler.active) == 1
    assert scheduler.registered == 2


def test_empty_routine_stays_idle(scheduler):
    runner = SessionRunner({"main": [], "cooldown": []}, scheduler=scheduler)
    runner.start()
    assert runner.state == IDLE
    assert scheduler.registered == 0


def test_zero_length_step_completes_on_first_tick(scheduler):
    runner = SessionRunner(_routine(0, 1), scheduler=scheduler)
    runner.start()
    runner.tick()
    assert runner.steps[0]["completed"]
    assert runner.active_index == 1


def test_on_complete_called_once(scheduler):
    calls = []
    runner = SessionRunner(_routine(1), scheduler=scheduler, on_complete=calls.append)
    runner.start()
    runner.tick()
    runner.tick()
    assert calls == [runner]


def test_total_remaining(scheduler):
    runner = SessionRunner(_routine(3, 4), scheduler=scheduler)
    assert runner.total_remaining() == 7
    runner.start()
    runner.tick()
    assert runner.total_remaining() == 6
    assert SessionRunner({"main": []}, scheduler=scheduler).total_remaining() == 300


def test_cancelled_registration_cannot_advance(scheduler):
    runner = SessionRunner(_routine(10), scheduler=scheduler)
    runner.start()
    runner.pause()
    runner.resume()
    first, second = scheduler.callbacks

    # A callback from the registration cancelled by pause() fires late
    first()
    assert runner.state == RUNNING
    assert runner.remaining == 10

    second()
    assert runner.remaining == 9


def test_callback_after_stop_and_restart_is_ignored(scheduler):
    runner = SessionRunner(_routine(3, 3), scheduler=scheduler)
    runner.start()
    runner.stop()
    runner.start()
    stale, live = scheduler.callbacks
    stale()
    stale()
    assert runner.remaining == 3
    live()
    assert runner.remaining == 2


def test_thread_ticker_runs_to_completion(monkeypatch):
    monkeypatch.setattr("workout_app.session.TICK_SECONDS", 0.01)
    done = threading.Event()
    runner = SessionRunner(_routine(1, 1), scheduler=ThreadTicker(), on_complete=lambda r: done.set())
    runner.start()
    assert done.wait(2.0)
    assert runner.state == COMPLETED
