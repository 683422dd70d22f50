import json

from attr import attrib, attrs

from .errors import UnknownResultError, VectorLoadError


@attrs(frozen=True)
class Policy:
    """
    Decide whether a vector is expected to derive successfully.

    'valid' vectors must pass and 'invalid' ones must fail. An
    'acceptable' vector is rejected unless one of its flags appears in
    ``flags_should_pass``; the first such flag decides.
    """
    flags_should_pass = attrib(factory=dict, converter=dict)

    def should_pass(self, result, flags):
        if result == "valid":
            return True
        if result == "invalid":
            return False
        if result == "acceptable":
            for flag in flags:
                if flag in self.flags_should_pass:
                    return bool(self.flags_should_pass[flag])
            return False
        raise UnknownResultError(result)


def load_policy(fn):
    """
    Read an allowlist document of the form::

        {"flags": {"SomeFlag": true, "OtherFlag": false}}
    """
    try:
        with open(fn, "rb") as f:
            data = json.loads(f.read().decode("utf-8"))
        flags = data["flags"]
        if not isinstance(flags, dict):
            raise TypeError("'flags' must be an object")
    except (OSError, ValueError, KeyError, TypeError) as e:
        raise VectorLoadError(fn, "bad policy file: %r" % (e,))
    return Policy(flags)
