import json
import threading

import attr
from twisted.python import log
from zope.interface import implementer

from ._interfaces import IReporter


@implementer(IReporter)
class Reporter:
    """
    Collects VectorFailure records. A record never stops the run; the
    caller looks at everything once all vectors have been judged.
    """

    def __init__(self):
        self._records = []
        self._lock = threading.Lock()
        self.judged = 0

    def add(self, record):
        log.msg("FAIL " + record.describe())
        with self._lock:
            self._records.append(record)

    def count(self, n=1):
        with self._lock:
            self.judged += n

    def records(self):
        with self._lock:
            return sorted(self._records, key=lambda r: (r.filename, r.tcId))

    @property
    def failed(self):
        with self._lock:
            return bool(self._records)

    def summarize(self, out):
        records = self.records()
        if not records:
            print("OK: %d vectors passed" % self.judged, file=out)
            return
        for r in records:
            print("FAIL: " + r.describe(), file=out)
        print("%d of %d vectors failed" % (len(records), self.judged),
              file=out)

    def write(self, fn, stderr):
        with open(fn, "wt") as f:
            json.dump(dict(judged=self.judged,
                           failures=[attr.asdict(r) for r in self.records()]),
                      f, indent=1)
            f.write("\n")
        print(f"Report written to {fn}", file=stderr)
