"""
utils/once.py
-------------
A one-shot guard for work that must run exactly once per owner,
no matter how many threads ask for it at the same time.
"""

import threading
from typing import Callable, Optional


class RunOnce:
    """
    Run a callable at most once.

    The first caller runs the callable while holding the lock; concurrent
    callers block on the lock until it finishes. Once the work is done every
    caller, now and later, observes the same outcome: a normal return, or the
    exception raised by the first run. The callable is never run again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._done = False
        self._error: Optional[BaseException] = None

    @property
    def done(self) -> bool:
        return self._done

    def __call__(self, func: Callable[[], None]) -> None:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        func()
                    except BaseException as e:
                        self._error = e
                    finally:
                        self._done = True

        if self._error is not None:
            raise self._error
