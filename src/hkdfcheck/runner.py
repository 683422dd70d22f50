from attr import attrib, attrs
from attr.validators import instance_of, is_callable
from twisted.internet import defer
from twisted.internet.threads import deferToThreadPool
from twisted.python import log

from . import _interfaces, classify, hashes
from .classify import Outcome
from .errors import DerivationFailed
from .timing import DebugTiming
from .util import provides


def derive_vector(derive, hash_constructor, vector):
    """
    Run one vector through an HKDF primitive.

    Asking for ``vector.size`` bytes either yields exactly that many or
    fails; a primitive that hands back fewer bytes than requested is
    treated like an exhausted stream.
    """
    try:
        output = derive(hash_constructor, vector.ikm, vector.salt,
                        vector.info, vector.size)
    except DerivationFailed as e:
        return Outcome(error=str(e) or "derivation failed")
    if len(output) != vector.size:
        return Outcome(error="short read: got %d of %d bytes"
                       % (len(output), vector.size))
    return Outcome(output=output)


@attrs
class VectorRunner:
    """
    Judge every vector of a corpus against one HKDF primitive.

    ``should_pass`` is the injected policy mapping (result, flags) to the
    expected success; failures go to ``reporter`` and never interrupt the
    run. Fatal errors (unknown hash, unknown result label) propagate.
    """
    _derive = attrib(validator=is_callable())
    _should_pass = attrib(validator=is_callable())
    _reporter = attrib(validator=provides(_interfaces.IReporter))
    _timing = attrib(validator=provides(_interfaces.ITiming),
                     factory=DebugTiming)
    _verdicts = attrib(validator=instance_of(dict), factory=dict, init=False)

    def run_file(self, vf):
        hash_constructor = hashes.resolve(vf.hash_name)
        counts = {classify.PASS: 0,
                  classify.CLASSIFICATION_MISMATCH: 0,
                  classify.OUTPUT_MISMATCH: 0}
        with self._timing.add("run", file=vf.filename) as ev:
            for vector in vf.vectors():
                wanted_pass = self._should_pass(vector.result, vector.flags)
                outcome = derive_vector(self._derive, hash_constructor,
                                        vector)
                verdict, failure = classify.classify(
                    vf.filename, vector, wanted_pass, outcome)
                counts[verdict] += 1
                if failure is not None:
                    self._reporter.add(failure)
            ev.detail(**{k.replace("-", "_"): v for k, v in counts.items()})
        self._reporter.count(sum(counts.values()))
        log.msg("%s: %d passed, %d classification mismatches,"
                " %d output mismatches"
                % (vf.filename, counts[classify.PASS],
                   counts[classify.CLASSIFICATION_MISMATCH],
                   counts[classify.OUTPUT_MISMATCH]))
        self._verdicts[vf.filename] = counts
        return counts

    def run_corpus(self, corpus):
        for vf in corpus:
            self.run_file(vf)
        return self._reporter

    def run_corpus_threaded(self, reactor, corpus, threadpool=None):
        """
        Like run_corpus, but each file runs in a worker thread. Returns a
        Deferred that fires with the reporter once every file is done, or
        errbacks with the first fatal error.
        """
        # resolve up front so a bad hash fails before any work starts
        for vf in corpus:
            hashes.resolve(vf.hash_name)
        if threadpool is None:
            threadpool = reactor.getThreadPool()
        ds = [deferToThreadPool(reactor, threadpool, self.run_file, vf)
              for vf in corpus]
        d = defer.gatherResults(ds, consumeErrors=True)

        def _unwrap(f):
            f.trap(defer.FirstError)
            return f.value.subFailure
        d.addErrback(_unwrap)
        d.addCallback(lambda _: self._reporter)
        return d

    def verdicts(self):
        return dict(self._verdicts)
