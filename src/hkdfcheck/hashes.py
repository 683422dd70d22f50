import hashlib

from .errors import UnknownHashError

# canonical names, as used in the corpus, to hashlib constructors
HASH_CONSTRUCTORS = {
    "SHA-1": hashlib.sha1,
    "SHA-256": hashlib.sha256,
    "SHA-384": hashlib.sha384,
    "SHA-512": hashlib.sha512,
}


def resolve(name):
    """
    Return a zero-argument constructor for the named hash.

    Each call of the constructor yields a fresh hash state, which is what
    HMAC (and therefore HKDF) expects as its digest argument.

    :param str name: one of ``SHA-1``, ``SHA-256``, ``SHA-384``, ``SHA-512``

    :raises UnknownHashError: for any other name
    """
    try:
        return HASH_CONSTRUCTORS[name]
    except KeyError:
        raise UnknownHashError(name)


def output_length(name):
    return resolve(name)().digest_size


def max_output_length(name):
    # RFC5869 section 2.3: L <= 255*HashLen
    return 255 * output_length(name)
