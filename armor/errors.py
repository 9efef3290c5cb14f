# armor/errors.py
# Error type for header values a collection would refuse (control characters).


class InvalidHeaderValue(ValueError):
    """Raised when a header value cannot be sent on the wire."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid value for header {name!r}: {value!r}")


def _is_forbidden(ch: str) -> bool:
    code = ord(ch)
    return (code < 0x20 and ch != "\t") or code == 0x7F  # HTAB is legal in field values


def validate_header_value(name: str, value: str) -> str:
    """Return ``value`` unchanged, or raise InvalidHeaderValue."""
    if any(_is_forbidden(ch) for ch in value):
        raise InvalidHeaderValue(name, value)
    return value
