# keyspace/config.py
"""
Optional settings for keyspace.
Read from JSON in %APPDATA%/Keyspace/config.json (Windows) or ~/.keyspace/config.json (fallback).
Nothing is written; a missing file means defaults.
"""

import os
import json
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .prompt import DEFAULT_MAX_ATTEMPTS

log = logging.getLogger(__name__)


@dataclass
class Settings:
    # echo the password while it is typed
    show_password: bool = True
    # failed entries before giving up; 0 means keep asking
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    # how input bytes are decoded
    encoding: str = "utf-8"


def _config_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Keyspace")
    return os.path.join(os.path.expanduser("~"), ".keyspace")


def config_path() -> str:
    return os.path.join(_config_dir(), "config.json")


def _valid(name: str, value: Any) -> bool:
    if name == "show_password":
        return isinstance(value, bool)
    if name == "max_attempts":
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if name == "encoding":
        if not isinstance(value, str):
            return False
        try:
            b"".decode(value)
        except LookupError:
            return False
        return True
    return False


def settings_from_dict(data: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    values = {}
    for key, value in data.items():
        if key not in known:
            log.warning("ignoring unknown setting %r", key)
        elif not _valid(key, value):
            log.warning("ignoring invalid value for %r: %r", key, value)
        else:
            values[key] = value
    return Settings(**values)


def load_config(path: Optional[str] = None) -> Settings:
    p = path or config_path()
    if not os.path.exists(p):
        return Settings()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("could not read settings from %s: %s", p, e)
        return Settings()
    if not isinstance(data, dict):
        log.warning("settings in %s must be a JSON object", p)
        return Settings()
    return settings_from_dict(data)
