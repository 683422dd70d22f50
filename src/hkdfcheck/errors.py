class HarnessError(Exception):
    """Parent class for all errors that abort a conformance run"""


class VectorLoadError(HarnessError):
    """
    A test-vector file could not be read or parsed. The corpus is missing
    or corrupt, so none of its vectors can be judged.
    """

    def __init__(self, resource, reason):
        self.resource = resource
        self.reason = reason

    def __str__(self):
        return "%s: %s" % (self.resource, self.reason)


class MalformedHexError(HarnessError):
    """
    A test vector contains a field that is not valid hex. This is corpus
    corruption, not a property of the implementation under test.
    """


class UnknownHashError(HarnessError):
    """
    The harness was asked for a hash algorithm it does not know. Only
    SHA-1, SHA-256, SHA-384 and SHA-512 are supported.
    """


class UnknownResultError(HarnessError):
    """
    A test vector carries a result label other than 'valid', 'invalid' or
    'acceptable'.
    """


class UnknownVectorFileError(HarnessError):
    """
    The requested vector file has no entry in the file-to-algorithm table,
    so the hash it exercises is unknown.
    """


class UnknownPrimitiveError(HarnessError):
    """
    There is no HKDF implementation registered under that name. Run
    'hkdfcheck run --help' to see the available choices.
    """


class DerivationFailed(Exception):
    """The HKDF implementation refused to produce the requested output."""
