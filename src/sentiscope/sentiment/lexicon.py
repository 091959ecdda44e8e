"""Weighted sentiment lexicon and scorer configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Tuple

# Tables are ordered: partial matching takes the first hit in definition order.
POSITIVE_WEIGHTS: Dict[str, float] = {
    # Strong
    "amazing": 2.0,
    "fantastic": 2.0,
    "excellent": 2.0,
    "outstanding": 2.0,
    "spectacular": 2.0,
    "incredible": 2.0,
    "wonderful": 2.0,
    "brilliant": 2.0,
    "superb": 2.0,
    "phenomenal": 2.0,
    "marvelous": 2.0,
    "magnificent": 2.0,
    "exceptional": 2.0,
    "terrific": 2.0,
    "fabulous": 2.0,
    "perfect": 2.0,
    "awesome": 2.0,
    "love": 2.0,
    # Moderate
    "great": 1.5,
    "good": 1.5,
    "nice": 1.5,
    "pleasant": 1.5,
    "satisfied": 1.5,
    "happy": 1.5,
    "delighted": 1.5,
    "impressed": 1.5,
    "beautiful": 1.5,
    "lovely": 1.5,
    "enjoy": 1.5,
    "helpful": 1.5,
    "friendly": 1.5,
    # Mild
    "like": 1.0,
    "easy": 1.0,
    "recommend": 1.0,
    "decent": 1.0,
    "fine": 1.0,
    "pretty": 1.0,
    # Weak
    "okay": 0.5,
    "ok": 0.5,
    "alright": 0.5,
    "fair": 0.5,
}

NEGATIVE_WEIGHTS: Dict[str, float] = {
    # Strong
    "terrible": -2.0,
    "awful": -2.0,
    "horrible": -2.0,
    "disgusting": -2.0,
    "pathetic": -2.0,
    "dreadful": -2.0,
    "appalling": -2.0,
    "atrocious": -2.0,
    "abysmal": -2.0,
    "catastrophic": -2.0,
    "hate": -2.0,
    "worst": -2.0,
    # Moderate
    "bad": -1.5,
    "poor": -1.5,
    "disappointing": -1.5,
    "frustrating": -1.5,
    "annoying": -1.5,
    "useless": -1.5,
    "waste": -1.5,
    "broken": -1.5,
    "ridiculous": -1.5,
    "stupid": -1.5,
    "overpriced": -1.5,
    "boring": -1.5,
    "confusing": -1.5,
    "crappy": -1.5,
    "garbage": -1.5,
    # Mild
    "dislike": -1.0,
    "slow": -1.0,
    "unhelpful": -1.0,
    "rude": -1.0,
    "inadequate": -1.0,
    "inferior": -1.0,
    "buggy": -1.0,
    "irritating": -1.0,
    # Weak
    "mediocre": -0.5,
}

NEUTRAL_INDICATORS: Tuple[str, ...] = (
    "neutral",
    "unsure",
    "uncertain",
    "maybe",
    "perhaps",
    "somewhat",
    "kind of",
    "sort of",
    "not sure",
    "undecided",
    "mixed",
    "average",
    "moderate",
    "typical",
    "standard",
    "regular",
    "normal",
    "usual",
    "ordinary",
    "so-so",
    "meh",
    "nothing special",
    "not bad",
    "not good",
    "could be better",
    "could be worse",
)

NEGATIONS = frozenset({"not", "no", "never", "nothing", "nowhere", "neither", "nobody", "none", "hardly", "barely"})
INTENSIFIERS = frozenset(
    {"very", "extremely", "really", "quite", "pretty", "rather", "totally", "completely", "absolutely", "definitely"}
)
# Multi-word entries never match a single token; they are kept for parity with the indicator list.
DIMINISHERS = frozenset({"slightly", "somewhat", "a bit", "a little", "kind of", "sort of", "rather", "fairly"})


def _frozen_table(table: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(word).lower(): float(weight) for word, weight in table.items()})


@dataclass(frozen=True)
class LexiconConfig:
    """Static tables, modifier sets and thresholds used by the scorer."""

    positive: Mapping[str, float] = field(default_factory=lambda: _frozen_table(POSITIVE_WEIGHTS))
    negative: Mapping[str, float] = field(default_factory=lambda: _frozen_table(NEGATIVE_WEIGHTS))
    neutral_indicators: Tuple[str, ...] = NEUTRAL_INDICATORS
    negations: FrozenSet[str] = NEGATIONS
    intensifiers: FrozenSet[str] = INTENSIFIERS
    diminishers: FrozenSet[str] = DIMINISHERS

    weak_threshold: float = 0.3
    strong_threshold: float = 1.0

    partial_weight: float = 0.7
    partial_min_length: int = 4
    negation_multiplier: float = -0.8
    intensifier_multiplier: float = 1.3
    diminisher_multiplier: float = 0.6
    context_window: int = 2

    min_confidence: float = 0.3
    max_confidence: float = 0.95
    short_text_tokens: int = 3
    short_text_factor: float = 0.8
    long_text_tokens: int = 20
    long_text_factor: float = 1.1

    def __post_init__(self) -> None:
        # Coerce caller-supplied tables so the scoring pass can never mutate them.
        object.__setattr__(self, "positive", _frozen_table(self.positive))
        object.__setattr__(self, "negative", _frozen_table(self.negative))
        object.__setattr__(self, "neutral_indicators", tuple(p.lower() for p in self.neutral_indicators))
        for name in ("negations", "intensifiers", "diminishers"):
            object.__setattr__(self, name, frozenset(w.lower() for w in getattr(self, name)))
        if self.weak_threshold < 0 or self.strong_threshold < self.weak_threshold:
            raise ValueError("thresholds must satisfy 0 <= weak_threshold <= strong_threshold")
        if self.context_window < 0:
            raise ValueError("context_window must be non-negative")


DEFAULT_LEXICON = LexiconConfig()

_TABLE_KEYS = {"positive", "negative"}
_SET_KEYS = {"neutral_indicators", "negations", "intensifiers", "diminishers"}


def _merge_table(base: Mapping[str, float], extra: Any, replace_all: bool) -> Dict[str, float]:
    if not isinstance(extra, Mapping):
        raise ValueError("lexicon word tables must be mappings of word to weight.")
    merged: Dict[str, float] = {} if replace_all else dict(base)
    for word, weight in extra.items():
        merged[str(word).lower()] = float(weight)
    return merged


def _merge_words(base: Iterable[str], extra: Any, replace_all: bool) -> list[str]:
    if isinstance(extra, str) or not isinstance(extra, Iterable):
        raise ValueError("lexicon word sets must be lists of strings.")
    words = [] if replace_all else list(base)
    for word in extra:
        word = str(word).lower()
        if word not in words:
            words.append(word)
    return words


def build_lexicon_config(cfg: Dict[str, Any] | None = None) -> LexiconConfig:
    """Build a ``LexiconConfig`` from the ``sentiment.lexicon`` config section.

    Word tables and sets are extended by default; set ``replace: true`` in the
    section to use only the configured entries. Scalar keys override the
    matching ``LexiconConfig`` fields.
    """
    lexicon_cfg = ((cfg or {}).get("sentiment") or {}).get("lexicon") or {}
    if not isinstance(lexicon_cfg, Mapping):
        raise ValueError("sentiment.lexicon must be a mapping.")
    if not lexicon_cfg:
        return DEFAULT_LEXICON

    replace_all = bool(lexicon_cfg.get("replace", False))
    scalar_fields = {f.name for f in fields(LexiconConfig)} - _TABLE_KEYS - _SET_KEYS
    overrides: Dict[str, Any] = {}

    for key, value in lexicon_cfg.items():
        if key == "replace":
            continue
        if key in _TABLE_KEYS:
            overrides[key] = _merge_table(getattr(DEFAULT_LEXICON, key), value, replace_all)
        elif key in _SET_KEYS:
            overrides[key] = _merge_words(getattr(DEFAULT_LEXICON, key), value, replace_all)
        elif key in scalar_fields:
            field_type = type(getattr(DEFAULT_LEXICON, key))
            try:
                overrides[key] = field_type(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid value for lexicon setting {key}: {value!r}") from exc
        else:
            raise ValueError(f"Unknown lexicon setting: {key}")

    return replace(DEFAULT_LEXICON, **overrides)
