# passgen/config.py
"""
Settings for the passgen command line.
Settings are read as JSON from $PASSGEN_CONFIG, else %APPDATA%/passgen/config.json (Windows)
or ~/.passgen/config.json (fallback). The file is optional and never written by passgen.
"""

import os
import json
import logging
from typing import Dict, Any, Optional

log = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "default_length": 10,
    "placement": "front_back",  # or "uniform"
    "log_level": "WARNING",
    "copies": 1,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "passgen")
    return os.path.join(os.path.expanduser("~"), ".passgen")

def config_path() -> str:
    override = os.getenv("PASSGEN_CONFIG")
    if override:
        return override
    return os.path.join(_appdata_dir(), "config.json")

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    p = path or config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        log.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out
