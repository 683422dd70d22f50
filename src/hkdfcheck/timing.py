import json
import threading
import time

from zope.interface import implementer

from ._interfaces import ITiming


class Event:
    def __init__(self, name, when, **details):
        self._name = name
        self._start = time.time() if when is None else float(when)
        self._stop = None
        self._details = details

    def detail(self, **details):
        self._details.update(details)

    def finish(self, when=None, **details):
        self._stop = time.time() if when is None else float(when)
        self.detail(**details)

    def as_dict(self):
        return dict(name=self._name, start=self._start, stop=self._stop,
                    details=self._details)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        self.finish()


@implementer(ITiming)
class DebugTiming:
    """Collects named, timestamped events for --dump-timing."""

    def __init__(self):
        self._events = []
        # files may be run from the thread pool
        self._lock = threading.Lock()

    def add(self, name, when=None, **details):
        ev = Event(name, when, **details)
        with self._lock:
            self._events.append(ev)
        return ev

    def events(self):
        with self._lock:
            return [e.as_dict() for e in self._events]

    def write(self, fn, stderr):
        with open(fn, "wt") as f:
            json.dump(self.events(), f, indent=1)
            f.write("\n")
        print(f"Timing data written to {fn}", file=stderr)
