from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from core.points import ParsePolicy

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


@dataclass
class Settings:
    """
    Runtime configuration for the points API.

    Parameters
    ----------
    host : str
        Interface uvicorn binds to.
    port : int
        Listening port.
    parse_policy : ParsePolicy
        What scoring does with an unparseable total/price/date/time.
    log_level : str
        Root log level name.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    parse_policy: ParsePolicy = ParsePolicy.STRICT
    log_level: str = "INFO"


def load_settings(source: Union[str, Path, Dict[str, Any], None] = None) -> Settings:
    """
    Load Settings from a YAML file, a dict, or nothing.

    Environment variables (POINTS_HOST, POINTS_PORT, POINTS_PARSE_POLICY,
    POINTS_LOG_LEVEL) override whatever the source provides.
    """
    raw: Dict[str, Any] = {}

    if isinstance(source, dict):
        raw = source
    elif source is not None:
        path = Path(source)
        if path.is_file():
            raw = _load_yaml(path)

    return Settings(
        host=str(os.environ.get("POINTS_HOST", raw.get("host", DEFAULT_HOST))),
        port=int(os.environ.get("POINTS_PORT", raw.get("port", DEFAULT_PORT))),
        parse_policy=parse_policy(os.environ.get("POINTS_PARSE_POLICY", raw.get("parse_policy", "strict"))),
        log_level=str(os.environ.get("POINTS_LOG_LEVEL", raw.get("log_level", "INFO"))).upper(),
    )


def parse_policy(value: Optional[str]) -> ParsePolicy:
    normalized = (value or "").strip().lower()
    try:
        return ParsePolicy(normalized)
    except ValueError:
        allowed = ", ".join(p.value for p in ParsePolicy)
        raise ValueError(f"Invalid parse policy: {value!r} (expected one of: {allowed})") from None


def _load_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}
