import os
import sys
import time
start = time.time()

from textwrap import dedent, fill  # noqa: E402

import click  # noqa: E402
from twisted.internet.defer import inlineCallbacks, maybeDeferred  # noqa: E402
from twisted.internet.task import react  # noqa: E402
from twisted.python import log  # noqa: E402
from twisted.python.failure import Failure  # noqa: E402

from .. import __version__  # noqa: E402
from ..errors import HarnessError  # noqa: E402
from ..primitives import DEFAULT_PRIMITIVE, PRIMITIVES  # noqa: E402
from ..timing import DebugTiming  # noqa: E402
from ..vectors import FILE_HASH_ALGORITHMS  # noqa: E402

top_import_finish = time.time()


class Config(object):
    """
    Union of config options that we pass down to (sub) commands.
    """

    def __init__(self):
        # This only holds attributes which are *not* set by CLI arguments.
        self.timing = DebugTiming()
        self.cwd = os.getcwd()
        self.stdout = sys.stdout
        self.stderr = sys.stderr


# top-level command ("hkdfcheck ...")
@click.group()
@click.option(
    "--dump-timing",
    type=str,
    default=None,
    metavar="FILE.json",
    help="(debug) write timing data to file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="log progress to stderr",
)
@click.version_option(
    message="hkdfcheck %(version)s",
    version=__version__,
)
@click.pass_context
def hkdfcheck(context, verbose, dump_timing):
    """
    Check an HKDF implementation against the Wycheproof test vectors.
    """
    context.obj = cfg = Config()
    cfg.verbose = verbose
    cfg.dump_timing = dump_timing


@inlineCallbacks
def _dispatch_command(reactor, cfg, command):
    """
    Internal helper. This calls the given command (a one-argument
    callable taking the reactor) and interprets any errors for the user.
    """
    cfg.timing.add("command dispatch")
    cfg.timing.add(
        "import", when=start, which="top").finish(when=top_import_finish)
    if cfg.verbose:
        log.startLogging(cfg.stderr, setStdout=False)

    try:
        yield maybeDeferred(command, reactor)
    except HarnessError as e:
        msg = fill("ERROR: " + dedent(e.__doc__).strip())
        print(msg, file=cfg.stderr)
        print(str(e), file=cfg.stderr)
        raise SystemExit(2)
    except SystemExit:
        _write_timing(cfg)
        raise
    except Exception as e:
        Failure().printTraceback(file=cfg.stderr)
        print("ERROR:", str(e), file=cfg.stderr)
        raise SystemExit(2)

    _write_timing(cfg)


def _write_timing(cfg):
    cfg.timing.add("exit")
    if cfg.dump_timing:
        cfg.timing.write(cfg.dump_timing, cfg.stderr)


@hkdfcheck.command()
@click.pass_context
def help(context, **kwargs):
    print(context.find_root().get_help())


# hkdfcheck run
@hkdfcheck.command()
@click.option(
    "--vectors",
    required=True,
    envvar="HKDFCHECK_VECTORS",
    metavar="DIR",
    type=click.Path(file_okay=False, path_type=str),
    help="directory holding the hkdf_sha*_test.json files",
)
@click.option(
    "--file",
    "files",
    multiple=True,
    metavar="NAME",
    help="only run this vector file (may be repeated)",
)
@click.option(
    "--primitive",
    default=DEFAULT_PRIMITIVE,
    envvar="HKDFCHECK_PRIMITIVE",
    type=click.Choice(sorted(PRIMITIVES)),
    help="HKDF implementation under test",
)
@click.option(
    "--policy",
    default=None,
    envvar="HKDFCHECK_POLICY",
    metavar="FILE.json",
    help="allowlist of flags for which 'acceptable' vectors must pass",
)
@click.option(
    "--jobs",
    "-j",
    default=1,
    type=click.IntRange(min=1),
    metavar="N",
    help="run vector files in N worker threads",
)
@click.option(
    "--report",
    default=None,
    metavar="FILE.json",
    help="write every failure record to this file",
)
@click.pass_obj
def run(cfg, **kwargs):
    """Judge every test vector and report the ones that fail"""
    for name, value in kwargs.items():
        setattr(cfg, name, value)
    with cfg.timing.add("import", which="cmd_run"):
        from . import cmd_run

    return go(cmd_run.run, cfg)


# this intermediate function can be mocked by tests that need to build a
# Config object
def go(f, cfg):
    # note: react() does not return
    return react(_dispatch_command, (cfg, lambda reactor: f(reactor, cfg)))


@hkdfcheck.command()
@click.pass_obj
def files(cfg):
    """List the vector files and the hash each one exercises"""
    for fn in sorted(FILE_HASH_ALGORITHMS):
        print("%-24s %s" % (fn, FILE_HASH_ALGORITHMS[fn]), file=cfg.stdout)
