# armor/headers.py
# Security header table and the protections that write it into a response's headers.
# Adapted from helmet (https://helmetjs.github.io/).

from enum import Enum
from typing import Iterable, NamedTuple, Optional, Tuple

from .errors import validate_header_value


class HardeningRule(NamedTuple):
    name: str
    value: str


class FrameOptions(Enum):
    """Frameguard level for ``X-Frame-Options``."""

    SAME_ORIGIN = "sameorigin"
    DENY = "deny"


# Minimal rule set applied by `apply()`
CORE_RULES: Tuple[HardeningRule, ...] = (
    HardeningRule("X-Content-Type-Options", "nosniff"),
    HardeningRule("X-XSS-Protection", "1; mode=block"),
)

HSTS_MAX_AGE = 5184000  # 60 days


class HeaderHardener:
    """Write a fixed set of headers into a header collection.

    Existing values for the same names are overwritten, so applying the same
    hardener twice leaves the collection as applying it once. Names listed in
    ``remove`` are dropped after the rules are written.

    ``headers`` is anything with item assignment, ``in`` and ``del`` by name:
    ``werkzeug.datastructures.Headers`` (case-insensitive), a plain dict, etc.
    """

    def __init__(self, rules: Iterable[HardeningRule] = CORE_RULES, remove: Iterable[str] = ()):
        self.rules = tuple(HardeningRule(*rule) for rule in rules)
        self.remove = tuple(remove)

    def apply(self, headers) -> None:
        # Validate the whole table first so a bad value never leaves a half-written collection
        for rule in self.rules:
            validate_header_value(rule.name, rule.value)
        for rule in self.rules:
            headers[rule.name] = rule.value
        for name in self.remove:
            if name in headers:
                del headers[name]

    def __repr__(self) -> str:
        return f"HeaderHardener(rules={self.rules!r}, remove={self.remove!r})"


_core = HeaderHardener()


def apply(headers) -> None:
    """Set ``X-Content-Type-Options: nosniff`` and ``X-XSS-Protection: 1; mode=block``."""
    _core.apply(headers)


def _set(headers, name: str, value: str) -> None:
    headers[name] = validate_header_value(name, value)


def _frame_value(guard: Optional[FrameOptions]) -> str:
    return (guard or FrameOptions.SAME_ORIGIN).value


def dns_prefetch_control(headers) -> None:
    """Set ``X-DNS-Prefetch-Control: on``."""
    _set(headers, "X-DNS-Prefetch-Control", "on")


def dont_sniff_mimetype(headers) -> None:
    """Stop browsers from guessing ("sniffing") the MIME type."""
    _set(headers, "X-Content-Type-Options", "nosniff")


def frameguard(headers, guard: Optional[FrameOptions] = None) -> None:
    """Mitigate clickjacking with ``X-Frame-Options`` (``sameorigin`` unless told ``deny``)."""
    _set(headers, "X-Frame-Options", _frame_value(guard))


def hide_powered_by(headers) -> None:
    """Drop ``X-Powered-By`` so the stack behind the site is less obvious."""
    if "X-Powered-By" in headers:
        del headers["X-Powered-By"]


def hsts(headers) -> None:
    """Set ``Strict-Transport-Security`` to keep HTTPS users on HTTPS.

    It does not move plain HTTP users over; it tells HTTPS users to stick
    around for the next 60 days.
    """
    _set(headers, "Strict-Transport-Security", f"max-age={HSTS_MAX_AGE}")


def xss_filter(headers) -> None:
    """Turn on the legacy reflected-XSS filter in browsers that have one."""
    _set(headers, "X-XSS-Protection", "1; mode=block")


def full_hardener(guard: Optional[FrameOptions] = None) -> HeaderHardener:
    """Hardener equivalent to running every protection above in order."""
    return HeaderHardener(
        rules=(
            HardeningRule("X-DNS-Prefetch-Control", "on"),
            HardeningRule("X-Content-Type-Options", "nosniff"),
            HardeningRule("X-Frame-Options", _frame_value(guard)),
            HardeningRule("Strict-Transport-Security", f"max-age={HSTS_MAX_AGE}"),
            HardeningRule("X-XSS-Protection", "1; mode=block"),
        ),
        remove=("X-Powered-By",),
    )


_full = full_hardener()


def armor(headers) -> None:
    """Apply all protections."""
    _full.apply(headers)
