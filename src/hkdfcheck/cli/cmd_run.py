from .. import primitives
from ..policy import Policy, load_policy
from ..report import Reporter
from ..runner import VectorRunner
from ..vectors import load_corpus


def build_runner(cfg, reporter):
    derive = primitives.get(cfg.primitive)
    policy = load_policy(cfg.policy) if cfg.policy else Policy()
    return VectorRunner(derive, policy.should_pass, reporter, cfg.timing)


def run(reactor, cfg):
    """
    Load the corpus, judge every vector, print the summary. Raises
    SystemExit(1) if any vector failed; setup errors propagate.
    """
    with cfg.timing.add("load"):
        corpus = load_corpus(cfg.vectors, cfg.files)
    reporter = Reporter()
    runner = build_runner(cfg, reporter)

    if cfg.jobs > 1:
        reactor.suggestThreadPoolSize(cfg.jobs)
        d = runner.run_corpus_threaded(reactor, corpus)
        d.addCallback(_finish, cfg)
        return d
    runner.run_corpus(corpus)
    return _finish(reporter, cfg)


def _finish(reporter, cfg):
    reporter.summarize(cfg.stdout)
    if cfg.report:
        reporter.write(cfg.report, cfg.stderr)
    if reporter.failed:
        raise SystemExit(1)
