"""
The HKDF implementations the harness can be pointed at.

Each primitive is a function ``derive(hash_constructor, ikm, salt, info,
size)`` returning the output keying material, or raising
DerivationFailed when the implementation refuses the request. The hash
constructor is a hashlib one (see hashes.resolve).
"""
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf import hkdf as crypto_hkdf
from hkdf import Hkdf

from .errors import DerivationFailed, UnknownPrimitiveError

_CRYPTOGRAPHY_HASHES = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


def cryptography_derive(hash_constructor, ikm, salt, info, size):
    algorithm = _CRYPTOGRAPHY_HASHES[hash_constructor().name]()
    try:
        # the length check happens in the constructor
        kdf = crypto_hkdf.HKDF(algorithm, size, salt, info)
        return kdf.derive(ikm)
    except ValueError as e:
        raise DerivationFailed(str(e))


def hkdf_derive(hash_constructor, ikm, salt, info, size):
    try:
        return Hkdf(salt, ikm, hash=hash_constructor).expand(info, size)
    except Exception as e:
        # hkdf signals "too long" with a bare Exception; anything more
        # specific is a bug, not a refusal
        if type(e) is not Exception:
            raise
        raise DerivationFailed(str(e))


PRIMITIVES = {
    "cryptography": cryptography_derive,
    "hkdf": hkdf_derive,
}

DEFAULT_PRIMITIVE = "cryptography"


def get(name):
    try:
        return PRIMITIVES[name]
    except KeyError:
        raise UnknownPrimitiveError(name)
