import threading
import time

import pytest

from utils.once import RunOnce


def test_runs_once_across_sequential_calls():
    calls = []
    once = RunOnce()

    once(lambda: calls.append(1))
    once(lambda: calls.append(2))

    assert calls == [1]
    assert once.done


def test_concurrent_callers_wait_for_the_first_run():
    once = RunOnce()
    calls = []
    finished_before_return = []
    barrier = threading.Barrier(8)

    def slow_seed():
        time.sleep(0.05)
        calls.append(threading.get_ident())

    def caller():
        barrier.wait()
        once(slow_seed)
        finished_before_return.append(len(calls))

    threads = [threading.Thread(target=caller) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert finished_before_return == [1] * 8


def test_first_error_is_reraised_and_never_retried():
    once = RunOnce()
    attempts = []

    def failing():
        attempts.append(1)
        raise RuntimeError("seed failed")

    with pytest.raises(RuntimeError, match="seed failed"):
        once(failing)
    with pytest.raises(RuntimeError, match="seed failed"):
        once(failing)

    assert attempts == [1]


def test_interrupted_first_run_is_reported_not_treated_as_success():
    once = RunOnce()
    calls = []

    def interrupted():
        calls.append(1)
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        once(interrupted)
    with pytest.raises(KeyboardInterrupt):
        once(interrupted)

    assert calls == [1]
    assert once.done
