# armor/__init__.py
# HTTP security headers, adapted from helmet (https://helmetjs.github.io/).
#
#   from werkzeug.datastructures import Headers
#   headers = Headers()
#   armor.apply(headers)
#   headers["X-Content-Type-Options"]  # "nosniff"

from . import csp
from .csp import ContentSecurityPolicy
from .errors import InvalidHeaderValue
from .headers import (
    CORE_RULES,
    FrameOptions,
    HardeningRule,
    HeaderHardener,
    apply,
    armor,
    dns_prefetch_control,
    dont_sniff_mimetype,
    frameguard,
    full_hardener,
    hide_powered_by,
    hsts,
    xss_filter,
)

__all__ = [
    "CORE_RULES",
    "ContentSecurityPolicy",
    "FrameOptions",
    "HardeningRule",
    "HeaderHardener",
    "InvalidHeaderValue",
    "apply",
    "armor",
    "csp",
    "dns_prefetch_control",
    "dont_sniff_mimetype",
    "frameguard",
    "full_hardener",
    "hide_powered_by",
    "hsts",
    "xss_filter",
]
