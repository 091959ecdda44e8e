"""Run the sentiment REST API with uvicorn."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import uvicorn

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sentiscope.api.app import create_app
from sentiscope.config import DEFAULT_CONFIG_PATH, configure_logging, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the sentiment analysis API.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    parser.add_argument("--host", default=None, help="Bind address (defaults to api.host).")
    parser.add_argument("--port", type=int, default=None, help="Port (defaults to api.port).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    try:
        cfg = load_config(args.config)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    configure_logging(cfg)

    api_cfg = cfg.get("api") or {}
    host = args.host or api_cfg.get("host", "127.0.0.1")
    port = args.port or int(api_cfg.get("port", 5000))
    uvicorn.run(create_app(cfg), host=host, port=port)


if __name__ == "__main__":
    main()
