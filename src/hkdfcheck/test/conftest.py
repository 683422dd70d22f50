import gc

import pytest
from twisted.python import log

from . import common


@pytest.fixture(scope="session")
def reactor():
    from twisted.internet import reactor
    yield reactor


@pytest.fixture
def corpus_dir(tmp_path):
    """
    A vector directory holding the RFC5869 vectors for SHA-1 and SHA-256
    plus boundary vectors for every hash.
    """
    d = str(tmp_path)
    for hash_name in ("SHA-1", "SHA-256", "SHA-384", "SHA-512"):
        tests = common.rfc_vectors(hash_name)
        n = len(tests)
        limit = 255 * {"SHA-1": 20, "SHA-256": 32,
                       "SHA-384": 48, "SHA-512": 64}[hash_name]
        tests.append(common.make_vector(n + 1, hash_name, size=limit,
                                        comment="maximal size"))
        tests.append(common.make_vector(n + 2, hash_name, size=limit + 1,
                                        result="invalid",
                                        comment="size too large"))
        common.write_document(d, hash_name, tests)
    return d


class Observer:
    def __init__(self):
        self.messages = []
        self.failures = []

    def __call__(self, event_dict):
        if event_dict.get("isError"):
            self.failures.append(event_dict["failure"])
        else:
            self.messages.append(" ".join(str(m) for m in
                                          event_dict.get("message", ())))

    def assert_empty(self):
        assert [] == self.failures


@pytest.fixture
def observe_log():
    observer = Observer()
    gc.collect()
    log.addObserver(observer)

    yield observer

    log.removeObserver(observer)
    observer.assert_empty()
