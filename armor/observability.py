# armor/observability.py
# JSON logging for apps wiring armor in; events go through app.logger with extra={"event": ...}

import sys
import logging

from pythonjsonlogger.json import JsonFormatter


def _json_formatter() -> logging.Formatter:
    return JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(event)s %(protections)s %(headers)s"
    )


def init_logging(app, level: str = "INFO") -> None:
    if app.config.get("_ARMOR_LOGGING_INIT", False):
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_json_formatter())
    app.logger.handlers.clear()
    app.logger.addHandler(handler)
    app.logger.setLevel(level)
    app.logger.propagate = False
    app.config["_ARMOR_LOGGING_INIT"] = True
