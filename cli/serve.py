# cli/serve.py
from __future__ import annotations

import argparse
import dataclasses
from typing import List, Optional

import uvicorn

from infra.api.app import create_app
from infra.api.logging_setup import configure_logging
from infra.api.settings import Settings, load_settings, parse_policy


def build_settings(argv: Optional[List[str]] = None) -> Settings:
    ap = argparse.ArgumentParser(description="Run the receipt points API")
    ap.add_argument("--config", default=None, help="YAML settings file")
    ap.add_argument("--host", default=None)
    ap.add_argument("--port", type=int, default=None)
    ap.add_argument("--parse-policy", choices=["strict", "lenient"], default=None)
    ap.add_argument("--log-level", default=None)

    args = ap.parse_args(argv)

    settings = load_settings(args.config)
    overrides = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.parse_policy is not None:
        overrides["parse_policy"] = parse_policy(args.parse_policy)
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(settings, **overrides)


def main(argv: Optional[List[str]] = None) -> None:
    settings = build_settings(argv)
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
