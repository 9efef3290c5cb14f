# armor/app.py
# Demo Flask app: JSON logging + hardened responses + /health

from typing import Optional

from flask import Flask, jsonify

from .config import load_settings
from .csp import ContentSecurityPolicy
from .observability import init_logging
from .security import register_security_headers


def create_app(policy: Optional[ContentSecurityPolicy] = None, **config) -> Flask:
    app = Flask(__name__)
    app.config.update(config)

    # ---------------------- Cross-cutting initialization ----------------------
    init_logging(app, load_settings(app.config).log_level)
    register_security_headers(app, policy)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    return app
