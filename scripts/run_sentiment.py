"""Score a CSV of texts with the lexicon-based sentiment scorer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

import pandas as pd

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sentiscope.config import DEFAULT_CONFIG_PATH, configure_logging, load_config, resolve_path
from sentiscope.sentiment.aggregate import add_sentiment, label_summary, load_texts_csv


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run lexicon-based sentiment scoring over a CSV file.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    parser.add_argument("--input", type=Path, default=None, help="CSV to score (defaults to sentiment.raw_path).")
    parser.add_argument("--text-column", default=None, help="Column holding the text.")
    parser.add_argument("--output", type=Path, default=None, help="Where to write the scored CSV.")
    parser.add_argument("--demo", action="store_true", help="Generate a tiny demo dataset if the input is missing.")
    return parser.parse_args(argv)


def ensure_demo_data(path: Path, cfg: Dict[str, Any]) -> None:
    """Create a small demo dataset."""
    sentiment_cfg = cfg.get("sentiment") or {}
    text_col = sentiment_cfg.get("text_column", "text")

    data = [
        {"id": 1, text_col: "I absolutely love this product"},
        {"id": 2, text_col: "This is terrible and awful"},
        {"id": 3, text_col: "The product was not bad"},
        {"id": 4, text_col: "Meh, I am unsure about the new release"},
        {"id": 5, text_col: "Support was really helpful and friendly"},
        {"id": 6, text_col: "Shipping was slow and the box arrived broken"},
    ]

    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(data).to_csv(path, index=False)
    print(f"Demo sentiment data written to {path}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(1)
    configure_logging(cfg)

    sentiment_cfg = cfg.get("sentiment") or {}
    text_col = args.text_column or sentiment_cfg.get("text_column", "text")
    cfg = {**cfg, "sentiment": {**sentiment_cfg, "text_column": text_col}}

    raw_path = resolve_path(args.input or sentiment_cfg.get("raw_path", "data/raw/texts.csv"))
    if not raw_path.exists():
        if args.demo:
            ensure_demo_data(raw_path, cfg)
        else:
            print(f"Input data not found at {raw_path}. Use --demo to generate sample data.", file=sys.stderr)
            sys.exit(1)

    df = load_texts_csv(raw_path, text_col=text_col)
    df = add_sentiment(df, cfg)

    output_path = args.output
    if output_path is None:
        output_path = Path(sentiment_cfg.get("output_dir", "reports")) / "sentiment_scored.csv"
    output_path = resolve_path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    summary = label_summary(df)
    counts = {label: summary[label] for label in ("positive", "negative", "neutral")}
    print("Sentiment scoring complete.")
    print(f"Scored rows written to {output_path}")
    print(f"Label counts: {counts}")
    print(f"Average confidence: {summary['average_confidence']:.3f}")


if __name__ == "__main__":
    main()
