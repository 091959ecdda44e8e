"""Analyze a single text from the command line and print JSON."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sentiscope.config import DEFAULT_CONFIG_PATH, configure_logging, load_config
from sentiscope.providers.chain import build_analyzer
from sentiscope.sentiment.lexicon import build_lexicon_config
from sentiscope.sentiment.scoring import analyze


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify the sentiment of a text.")
    parser.add_argument("text", help="Text to analyze.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    parser.add_argument("--remote", action="store_true", help="Try the configured remote providers first.")
    parser.add_argument("--explain", action="store_true", help="Include the local scoring breakdown.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    configure_logging(cfg)

    result = build_analyzer(cfg, use_remote=args.remote).analyze(args.text)
    payload = result.to_dict()
    if args.explain:
        _, breakdown = analyze(args.text, build_lexicon_config(cfg))
        payload["breakdown"] = asdict(breakdown)
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
