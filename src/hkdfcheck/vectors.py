import json
import os
from binascii import unhexlify
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from attrs import field, frozen
from twisted.python import log

from .errors import MalformedHexError, UnknownVectorFileError, VectorLoadError
from .hashes import resolve

RESULTS = ("valid", "invalid", "acceptable")

# which hash each file of the corpus exercises
FILE_HASH_ALGORITHMS = {
    "hkdf_sha1_test.json": "SHA-1",
    "hkdf_sha256_test.json": "SHA-256",
    "hkdf_sha384_test.json": "SHA-384",
    "hkdf_sha512_test.json": "SHA-512",
}


def decode_hex(hexstr):
    """
    Decode a hex field of a test vector.

    :raises MalformedHexError: if ``hexstr`` is not a string of hex digit
        pairs
    """
    if not isinstance(hexstr, str):
        raise MalformedHexError("expected a hex string, got %r" % (hexstr,))
    try:
        return unhexlify(hexstr.encode("ascii"))
    except (ValueError, UnicodeEncodeError) as e:
        raise MalformedHexError("%r: %s" % (hexstr, e))


@frozen
class TestVector:
    __test__ = False  # not a pytest class

    tcId: int
    comment: str
    flags: Tuple[str, ...]
    ikm: bytes
    salt: bytes
    info: bytes
    okm: bytes
    result: str
    size: int


@frozen
class TestGroup:
    __test__ = False

    keySize: int
    tests: Tuple[TestVector, ...]
    type: Optional[str] = None


@frozen
class VectorFile:
    """
    One parsed corpus document. Everything below it is immutable and all
    hex fields are already decoded, so a run never touches the source
    JSON again.
    """
    filename: str
    algorithm: str
    hash_name: str
    generatorVersion: str
    numberOfTests: int
    testGroups: Tuple[TestGroup, ...]
    header: Tuple[str, ...] = field(factory=tuple, eq=False)
    notes: Mapping = field(factory=lambda: MappingProxyType({}), eq=False)

    def vectors(self):
        for group in self.testGroups:
            for vector in group.tests:
                yield vector


def _parse_vector(tv):
    result = tv["result"]
    if result not in RESULTS:
        raise ValueError("tcId %s: unknown result %r" % (tv.get("tcId"), result))
    tcId = tv["tcId"]
    if type(tcId) is not int:
        raise ValueError("bad tcId %r" % (tcId,))
    size = tv["size"]
    if type(size) is not int or size < 0:
        raise ValueError("tcId %s: bad size %r" % (tv.get("tcId"), size))
    return TestVector(
        tcId=tcId,
        comment=tv.get("comment", ""),
        flags=tuple(tv.get("flags", ())),
        ikm=decode_hex(tv.get("ikm", "")),
        salt=decode_hex(tv.get("salt", "")),
        info=decode_hex(tv.get("info", "")),
        okm=decode_hex(tv.get("okm", "")),
        result=result,
        size=size,
    )


def parse(filename, hash_name, root):
    """
    Build a VectorFile from an already-decoded JSON document.

    :raises VectorLoadError: when required keys are missing or hold the
        wrong kind of value
    :raises MalformedHexError: when a hex field does not decode
    """
    try:
        groups = tuple(
            TestGroup(
                keySize=tg.get("keySize", 0),
                type=tg.get("type"),
                tests=tuple(_parse_vector(tv) for tv in tg["tests"]),
            )
            for tg in root["testGroups"]
        )
        vf = VectorFile(
            filename=filename,
            algorithm=root.get("algorithm", ""),
            hash_name=hash_name,
            generatorVersion=root.get("generatorVersion", ""),
            numberOfTests=root.get("numberOfTests", 0),
            testGroups=groups,
            header=tuple(root.get("header", ())),
            notes=MappingProxyType(dict(root.get("notes") or {})),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise VectorLoadError(filename, "malformed document: %r" % (e,))
    count = sum(len(g.tests) for g in groups)
    if vf.numberOfTests and vf.numberOfTests != count:
        log.msg("%s: header says %d tests, found %d"
                % (filename, vf.numberOfTests, count))
    return vf


def load(vector_dir, filename):
    """
    Read and parse one file of the corpus.

    :param str vector_dir: directory holding the corpus
    :param str filename: a key of FILE_HASH_ALGORITHMS

    :raises UnknownVectorFileError: if ``filename`` is not in the table
    :raises VectorLoadError: if the file is missing, unreadable or not JSON
    """
    try:
        hash_name = FILE_HASH_ALGORITHMS[filename]
    except KeyError:
        raise UnknownVectorFileError(filename)
    path = os.path.join(vector_dir, filename)
    try:
        with open(path, "rb") as f:
            root = json.loads(f.read().decode("utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise VectorLoadError(path, e)
    except ValueError as e:
        raise VectorLoadError(path, "not JSON: %s" % (e,))
    if not isinstance(root, dict):
        raise VectorLoadError(path, "top level is not an object")
    vf = parse(filename, hash_name, root)
    log.msg("loaded %s (%s, generator %s)"
            % (filename, vf.algorithm, vf.generatorVersion))
    return vf


def load_corpus(vector_dir, filenames=None):
    """
    Load every file named in ``filenames`` (default: the whole table) and
    check that the hash each one needs is known. All setup errors surface
    here, before any derivation runs.
    """
    if not filenames:
        filenames = sorted(FILE_HASH_ALGORITHMS)
    corpus = []
    for fn in filenames:
        vf = load(vector_dir, fn)
        resolve(vf.hash_name)
        corpus.append(vf)
    return corpus
