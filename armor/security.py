# armor/security.py
# Flask hook: harden every response's headers (values here win over whatever the view set)

from typing import Optional

from flask import Flask, Response

from .config import load_settings
from .csp import ContentSecurityPolicy
from .errors import validate_header_value
from .headers import FrameOptions, HeaderHardener, full_hardener


def _hardener_for(settings) -> HeaderHardener:
    if settings.protections == "all":
        return full_hardener(FrameOptions(settings.frame_options))
    return HeaderHardener()


def register_security_headers(app: Flask, policy: Optional[ContentSecurityPolicy] = None) -> None:
    """Attach security headers (and an optional CSP) on all responses."""
    if app.config.get("_ARMOR_HEADERS_INIT", False):
        return  # idempotent for reloader

    settings = load_settings(app.config)
    hardener = _hardener_for(settings)
    csp_header = None
    if policy is not None:
        # Rendered once: later changes to the builder do not reach live responses
        name = policy.header_name
        csp_header = (name, validate_header_value(name, policy.value()))

    @app.after_request
    def _security_headers(resp: Response) -> Response:
        hardener.apply(resp.headers)
        if csp_header is not None:
            resp.headers[csp_header[0]] = csp_header[1]
        return resp

    app.logger.info(
        "security.headers.registered",
        extra={
            "event": "security.headers.registered",
            "protections": settings.protections,
            "headers": [rule.name for rule in hardener.rules],
        },
    )
    app.config["_ARMOR_HEADERS_INIT"] = True
