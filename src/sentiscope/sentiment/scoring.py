"""Lexicon-based sentiment scoring with context modifiers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sentiscope.sentiment.lexicon import DEFAULT_LEXICON, LexiconConfig
from sentiscope.sentiment.types import AnalysisResult

NON_WORD_RE = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class ScoreBreakdown:
    """Intermediate counters of one scoring pass."""

    token_count: int
    word_count: int
    sentiment_word_count: int
    neutral_count: int
    total_score: float
    normalized_score: float
    sentiment_density: float
    neutral_density: float


def clean_text(text: str) -> str:
    """Lowercase and replace punctuation with whitespace."""
    return NON_WORD_RE.sub(" ", (text or "").lower())


def tokenize(text: str) -> List[str]:
    return clean_text(text).split()


def count_neutral_phrases(cleaned: str, lexicon: LexiconConfig = DEFAULT_LEXICON) -> int:
    """Count words of every neutral indicator occurring anywhere in the cleaned text."""
    count = 0
    for phrase in lexicon.neutral_indicators:
        if phrase in cleaned:
            count += len(phrase.split(" "))
    return count


def _partial_weight(token: str, table, lexicon: LexiconConfig) -> float:
    for key, weight in table.items():
        if len(key) >= lexicon.partial_min_length and (key in token or token in key):
            return weight * lexicon.partial_weight
    return 0.0


def match_token(token: str, lexicon: LexiconConfig = DEFAULT_LEXICON) -> float:
    """Return the raw lexicon weight of a token, or 0.0 when nothing matches.

    Exact hits return the table weight. Otherwise the first lexicon key that
    contains the token, or is contained in it, contributes its weight scaled by
    ``partial_weight``. The positive table is scanned before the negative one.
    """
    if token in lexicon.positive:
        return lexicon.positive[token]
    if token in lexicon.negative:
        return lexicon.negative[token]

    if len(token) < lexicon.partial_min_length:
        return 0.0
    weight = max(0.0, _partial_weight(token, lexicon.positive, lexicon))
    if weight == 0:
        weight = min(0.0, _partial_weight(token, lexicon.negative, lexicon))
    return weight


def context_multiplier(tokens: Sequence[str], index: int, lexicon: LexiconConfig = DEFAULT_LEXICON) -> float:
    """Combined negation and intensity multiplier from the tokens preceding ``index``."""
    window = tokens[max(0, index - lexicon.context_window) : index]
    modifier = 1.0

    for prev in window:
        if prev in lexicon.negations:
            modifier *= lexicon.negation_multiplier
            break

    for prev in window:
        if prev in lexicon.intensifiers:
            modifier *= lexicon.intensifier_multiplier
            break
        if prev in lexicon.diminishers:
            modifier *= lexicon.diminisher_multiplier
            break

    return modifier


def label_for_score(score: float, threshold: float = DEFAULT_LEXICON.weak_threshold) -> str:
    """Map a score to a label; ``[-threshold, threshold]`` is neutral."""
    if -threshold <= score <= threshold:
        return "neutral"
    if score > threshold:
        return "positive"
    return "negative"


def classify(breakdown: ScoreBreakdown, lexicon: LexiconConfig = DEFAULT_LEXICON) -> Tuple[str, float]:
    """Return ``(label, confidence)`` for a completed scoring pass."""
    normalized = breakdown.normalized_score
    magnitude = abs(normalized)
    weak = lexicon.weak_threshold
    strong = lexicon.strong_threshold

    if breakdown.neutral_count > 0 and magnitude < weak:
        label, confidence = "neutral", min(0.7 + breakdown.neutral_density, 0.9)
    elif magnitude < weak:
        label, confidence = "neutral", max(0.5, 0.8 - magnitude)
    elif normalized >= strong:
        label = "positive"
        confidence = min(0.6 + (normalized - strong) * 0.2 + breakdown.sentiment_density, 0.95)
    elif normalized <= -strong:
        label = "negative"
        confidence = min(0.6 + (magnitude - strong) * 0.2 + breakdown.sentiment_density, 0.95)
    elif normalized > weak:
        label, confidence = "positive", min(0.5 + normalized * 0.3 + breakdown.sentiment_density, 0.85)
    elif normalized < -weak:
        label, confidence = "negative", min(0.5 + magnitude * 0.3 + breakdown.sentiment_density, 0.85)
    else:
        # Only reachable on the exact threshold boundary.
        label, confidence = "neutral", 0.6

    if breakdown.token_count < lexicon.short_text_tokens:
        confidence *= lexicon.short_text_factor
    elif breakdown.token_count > lexicon.long_text_tokens:
        confidence = min(confidence * lexicon.long_text_factor, lexicon.max_confidence)

    confidence = max(lexicon.min_confidence, min(confidence, lexicon.max_confidence))
    return label, confidence


def analyze(text: str, lexicon: LexiconConfig = DEFAULT_LEXICON) -> Tuple[AnalysisResult, ScoreBreakdown]:
    """Score text and return the result together with its breakdown."""
    cleaned = clean_text(text)
    tokens = cleaned.split()

    neutral_count = count_neutral_phrases(cleaned, lexicon)
    total_score = 0.0
    word_count = 0
    sentiment_word_count = 0

    for idx, tok in enumerate(tokens):
        if tok in lexicon.neutral_indicators:
            neutral_count += 1
            continue

        weight = match_token(tok, lexicon)
        if weight == 0:
            continue
        sentiment_word_count += 1

        total_score += weight * context_multiplier(tokens, idx, lexicon)
        word_count += 1

    token_count = len(tokens)
    normalized = total_score / math.sqrt(word_count) if word_count > 0 else 0.0
    breakdown = ScoreBreakdown(
        token_count=token_count,
        word_count=word_count,
        sentiment_word_count=sentiment_word_count,
        neutral_count=neutral_count,
        total_score=total_score,
        normalized_score=normalized,
        sentiment_density=sentiment_word_count / max(token_count, 1),
        neutral_density=neutral_count / max(token_count, 1),
    )
    label, confidence = classify(breakdown, lexicon)
    return AnalysisResult(sentiment=label, score=normalized, confidence=confidence), breakdown


def score(text: str, lexicon: LexiconConfig = DEFAULT_LEXICON) -> AnalysisResult:
    """Classify text as positive, negative or neutral with a score and confidence."""
    result, _ = analyze(text, lexicon)
    return result
