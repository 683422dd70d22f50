from typing import Optional

from attrs import frozen

from .util import bytes_to_hexstr

PASS = "pass"
CLASSIFICATION_MISMATCH = "classification-mismatch"
OUTPUT_MISMATCH = "output-mismatch"


@frozen
class Outcome:
    """What one derivation produced: output bytes, or the refusal."""
    output: Optional[bytes] = None
    error: Optional[str] = None

    @property
    def succeeded(self):
        return self.error is None


@frozen
class VectorFailure:
    filename: str
    tcId: int
    result: str
    comment: str
    kind: str
    wanted_pass: bool
    detail: str

    def describe(self):
        return "%s tcid: %d, type: %s, comment: %r, %s" % (
            self.filename, self.tcId, self.result, self.comment, self.detail)


def classify(filename, vector, wanted_pass, outcome):
    """
    Judge one derivation against the expectation.

    Returns a ``(verdict, failure)`` pair, where ``failure`` is a
    VectorFailure for the two mismatch verdicts and None for PASS. The
    output is only compared when success was both wanted and achieved.
    """
    def failure(kind, detail):
        return VectorFailure(filename=filename, tcId=vector.tcId,
                             result=vector.result, comment=vector.comment,
                             kind=kind, wanted_pass=wanted_pass,
                             detail=detail)

    if outcome.succeeded != wanted_pass:
        got = "success" if outcome.succeeded else outcome.error
        return CLASSIFICATION_MISMATCH, failure(
            CLASSIFICATION_MISMATCH,
            "wanted success: %s, got: %s" % (wanted_pass, got))
    if not wanted_pass:
        return PASS, None
    if outcome.output != vector.okm:
        return OUTPUT_MISMATCH, failure(
            OUTPUT_MISMATCH,
            "output bytes don't match: got %s, want %s"
            % (bytes_to_hexstr(outcome.output), bytes_to_hexstr(vector.okm)))
    return PASS, None
