# armor/csp.py
# Content-Security-Policy builder.
# Docs: https://helmetjs.github.io/docs/csp/
#       https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Security-Policy
#
#   policy = csp.new()
#   policy.default_src(Source.SAME_ORIGIN, "areweasyncyet.rs").object_src(Source.NONE)
#   policy.apply(resp.headers)

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel

from .errors import validate_header_value


class Source(Enum):
    """Source expressions (https://content-security-policy.com)."""

    SAME_ORIGIN = "'self'"
    SRC = "'src'"
    NONE = "'none'"
    UNSAFE_INLINE = "'unsafe-inline'"
    DATA = "data:"
    MEDIASTREAM = "mediastream:"
    HTTPS = "https:"
    BLOB = "blob:"
    FILESYSTEM = "filesystem:"
    STRICT_DYNAMIC = "'strict-dynamic'"
    UNSAFE_EVAL = "'unsafe-eval'"
    WILDCARD = "*"

    def __str__(self) -> str:
        return self.value


SourceLike = Union[Source, str]


class ReportToEndpoint(BaseModel):
    url: str


class ReportTo(BaseModel):
    """One ``report-to`` endpoint group."""

    group: Optional[str] = None
    max_age: int
    endpoints: List[ReportToEndpoint]
    include_subdomains: Optional[bool] = None


def _source(value: SourceLike) -> str:
    return value.value if isinstance(value, Source) else str(value)


class ContentSecurityPolicy:
    """Chainable builder for the ``Content-Security-Policy`` header."""

    def __init__(self):
        self._flags: List[str] = []  # entries without sources
        self._directives: Dict[str, List[str]] = {}
        self._report_only = False

    @classmethod
    def default(cls) -> "ContentSecurityPolicy":
        """``script-src 'self'`` and ``object-src 'self'``.

        Rendered sorted like every policy: ``object-src 'self'; script-src 'self'``.
        """
        return cls().script_src(Source.SAME_ORIGIN).object_src(Source.SAME_ORIGIN)

    def _insert(self, directive: str, sources: Iterable[SourceLike]) -> "ContentSecurityPolicy":
        self._directives.setdefault(directive, []).extend(_source(s) for s in sources)
        return self

    # --- source directives -------------------------------------------------
    def base_uri(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("base-uri", sources)

    def connect_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("connect-src", sources)

    def default_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("default-src", sources)

    def font_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("font-src", sources)

    def form_action(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("form-action", sources)

    def frame_ancestors(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("frame-ancestors", sources)

    def frame_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("frame-src", sources)

    def img_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("img-src", sources)

    def media_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("media-src", sources)

    def object_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("object-src", sources)

    def plugin_types(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("plugin-types", sources)

    def require_sri_for(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("require-sri-for", sources)

    def report_uri(self, *uris: str) -> "ContentSecurityPolicy":
        return self._insert("report-uri", uris)

    def sandbox(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("sandbox", sources)

    def script_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("script-src", sources)

    def style_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("style-src", sources)

    def worker_src(self, *sources: SourceLike) -> "ContentSecurityPolicy":
        return self._insert("worker-src", sources)

    # --- flag directives ---------------------------------------------------
    def block_all_mixed_content(self) -> "ContentSecurityPolicy":
        self._flags.append("block-all-mixed-content")
        return self

    def upgrade_insecure_requests(self) -> "ContentSecurityPolicy":
        self._flags.append("upgrade-insecure-requests")
        return self

    def report_to(self, endpoints: Iterable[ReportTo]) -> "ContentSecurityPolicy":
        """Add one ``report-to {json}`` entry per endpoint group."""
        for endpoint in endpoints:
            self._flags.append(f"report-to {endpoint.model_dump_json(exclude_none=True)}")
        return self

    def report_only(self) -> "ContentSecurityPolicy":
        """Send as ``Content-Security-Policy-Report-Only`` instead."""
        self._report_only = True
        return self

    @property
    def header_name(self) -> str:
        if self._report_only:
            return "Content-Security-Policy-Report-Only"
        return "Content-Security-Policy"

    def value(self) -> str:
        """Render the policy; entries are sorted so output does not depend on call order."""
        entries = list(self._flags)
        entries.extend(" ".join([name, *sources]) for name, sources in self._directives.items())
        return "; ".join(sorted(entries))

    def apply(self, headers) -> None:
        """Set the policy header on ``headers``, replacing any previous value."""
        name = self.header_name
        headers[name] = validate_header_value(name, self.value())

    def __repr__(self) -> str:
        return f"ContentSecurityPolicy({self.header_name}: {self.value()!r})"


def new() -> ContentSecurityPolicy:
    """Empty policy builder."""
    return ContentSecurityPolicy()
