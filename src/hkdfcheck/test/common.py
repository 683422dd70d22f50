import json
import os
from binascii import hexlify, unhexlify

from hkdf import Hkdf

from .. import hashes
from ..cli.cli import Config
from ..vectors import FILE_HASH_ALGORITHMS

# (hash, IKM, salt, info, L, OKM) from RFC5869 appendix A
RFC5869 = [
    ("SHA-256",
     "0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b",
     "000102030405060708090a0b0c",
     "f0f1f2f3f4f5f6f7f8f9",
     42,
     ("3cb25f25faacd57a90434f64d0362f2a"
      "2d2d0a90cf1a5a4c5db02d56ecc4c5bf"
      "34007208d5b887185865")),
    ("SHA-256",
     ("000102030405060708090a0b0c0d0e0f"
      "101112131415161718191a1b1c1d1e1f"
      "202122232425262728292a2b2c2d2e2f"
      "303132333435363738393a3b3c3d3e3f"
      "404142434445464748494a4b4c4d4e4f"),
     ("606162636465666768696a6b6c6d6e6f"
      "707172737475767778797a7b7c7d7e7f"
      "808182838485868788898a8b8c8d8e8f"
      "909192939495969798999a9b9c9d9e9f"
      "a0a1a2a3a4a5a6a7a8a9aaabacadaeaf"),
     ("b0b1b2b3b4b5b6b7b8b9babbbcbdbebf"
      "c0c1c2c3c4c5c6c7c8c9cacbcccdcecf"
      "d0d1d2d3d4d5d6d7d8d9dadbdcdddedf"
      "e0e1e2e3e4e5e6e7e8e9eaebecedeeef"
      "f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff"),
     82,
     ("b11e398dc80327a1c8e7f78c596a4934"
      "4f012eda2d4efad8a050cc4c19afa97c"
      "59045a99cac7827271cb41c65e590e09"
      "da3275600c2f09b8367793a9aca3db71"
      "cc30c58179ec3e87c14c01d5c1f3434f"
      "1d87")),
    ("SHA-256",
     "0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b",
     "",
     "",
     42,
     ("8da4e775a563c18f715f802a063c5a31"
      "b8a11f5c5ee1879ec3454e5f3c738d2d"
      "9d201395faa4b61a96c8")),
    ("SHA-1",
     "0b0b0b0b0b0b0b0b0b0b0b",
     "000102030405060708090a0b0c",
     "f0f1f2f3f4f5f6f7f8f9",
     42,
     ("085a01ea1b10f36933068b56efa5ad81"
      "a4f14b822f5b091568a9cdd4f155fda2"
      "c22e422478d305f3f896")),
    ("SHA-1",
     "0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b",
     "",
     "",
     42,
     ("0ac1af7002b3d761d1e55298da9d0506"
      "b9ae52057220a306e07b6b87e8df21d0"
      "ea00033de03984d34918")),
    ("SHA-1",
     "0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c0c",
     "",
     "",
     42,
     ("2c91117204d745f3500d636a62f64f0a"
      "b3bae548aa53d423b0d1f27ebba6f5e5"
      "673a081d70cce7acfc48")),
]

FILENAMES = {v: k for k, v in FILE_HASH_ALGORITHMS.items()}


def hexstr(b):
    return hexlify(b).decode("ascii")


def reference_okm(hash_name, ikm, salt, info, size):
    # the 'hkdf' package, used as an independent second opinion
    return Hkdf(salt, ikm, hash=hashes.resolve(hash_name)).expand(info, size)


def make_vector(tcId, hash_name="SHA-256", ikm=b"\x0b" * 16, salt=b"",
                info=b"", size=32, result="valid", okm=None, comment="",
                flags=()):
    if okm is None:
        if size <= hashes.max_output_length(hash_name):
            okm = reference_okm(hash_name, ikm, salt, info, size)
        else:
            okm = b""
    return dict(tcId=tcId, comment=comment, flags=list(flags),
                ikm=hexstr(ikm), salt=hexstr(salt), info=hexstr(info),
                okm=hexstr(okm), result=result, size=size)


def rfc_vectors(hash_name):
    return [make_vector(i + 1, hash_name, unhexlify(ikm), unhexlify(salt),
                        unhexlify(info), size, okm=unhexlify(okm),
                        comment="RFC 5869")
            for i, (h, ikm, salt, info, size, okm) in enumerate(RFC5869)
            if h == hash_name]


def make_document(hash_name, tests, keySize=128):
    return dict(
        algorithm="HKDF-" + hash_name,
        generatorVersion="0.8r12",
        header=["Test vectors of type HkdfTest test the HKDF."],
        notes={},
        numberOfTests=len(tests),
        schema="hkdf_test_schema.json",
        testGroups=[dict(keySize=keySize, type="HkdfTest", tests=tests)],
    )


def write_document(dirname, hash_name, tests, filename=None):
    fn = filename or FILENAMES[hash_name]
    with open(os.path.join(dirname, fn), "w") as f:
        json.dump(make_document(hash_name, tests), f)
    return fn


def config(vectors, **kwargs):
    cfg = Config()
    cfg.verbose = False
    cfg.dump_timing = None
    cfg.vectors = vectors
    cfg.files = ()
    cfg.primitive = "cryptography"
    cfg.policy = None
    cfg.jobs = 1
    cfg.report = None
    for name, value in kwargs.items():
        setattr(cfg, name, value)
    return cfg
