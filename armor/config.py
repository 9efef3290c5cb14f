# armor/config.py
# Settings for the Flask hook: Flask config wins, then env / .env.

import os
from typing import Any, Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()  # load .env for local dev

_KEYS = {
    "protections": "ARMOR_PROTECTIONS",
    "frame_options": "ARMOR_FRAME_OPTIONS",
    "log_level": "ARMOR_LOG_LEVEL",
}


class ArmorSettings(BaseModel):
    protections: Literal["core", "all"] = "core"  # "all" adds frameguard, HSTS, DNS prefetch, powered-by removal
    frame_options: Literal["sameorigin", "deny"] = "sameorigin"
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"


def load_settings(config: Optional[Mapping[str, Any]] = None) -> ArmorSettings:
    """Build settings from ``config`` (e.g. ``app.config``) falling back to the environment.

    Raises pydantic.ValidationError on unknown values.
    """
    config = config or {}
    values = {}
    for field, key in _KEYS.items():
        raw = config.get(key, os.getenv(key))
        if raw is None:
            continue
        raw = str(raw).strip()
        values[field] = raw.upper() if field == "log_level" else raw.lower()
    return ArmorSettings(**values)
