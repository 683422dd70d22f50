from binascii import hexlify

from attr import attrib, attrs


def bytes_to_hexstr(b):
    assert isinstance(b, bytes)
    return hexlify(b).decode("ascii")


@attrs(repr=False, slots=True, hash=True)
class _ProvidesValidator:
    interface = attrib()

    def __call__(self, inst, attr, value):
        if not self.interface.providedBy(value):
            raise TypeError(
                f"'{attr.name}' must provide {self.interface!r},"
                f" but {value!r} does not",
                attr,
                self.interface,
                value,
            )

    def __repr__(self):
        return f"<provides validator for interface {self.interface!r}>"


def provides(interface):
    """
    An attrs validator requiring the value to provide a zope interface.

    :raises TypeError: naming the attribute, the interface and the value
    """
    return _ProvidesValidator(interface)
