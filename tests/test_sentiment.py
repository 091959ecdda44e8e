"""Tests for lexicon-based sentiment scoring."""

from __future__ import annotations

import pytest

from sentiscope.sentiment.lexicon import DEFAULT_LEXICON, LexiconConfig
from sentiscope.sentiment.scoring import (
    analyze,
    context_multiplier,
    label_for_score,
    match_token,
    score,
    tokenize,
)


def _mini_lexicon(**overrides) -> LexiconConfig:
    params = dict(
        positive={"good": 1.0},
        negative={"bad": -1.0},
        neutral_indicators=(),
        negations={"not"},
        intensifiers={"very"},
        diminishers={"slightly"},
    )
    params.update(overrides)
    return LexiconConfig(**params)


def test_tokenize_strips_punctuation_and_case() -> None:
    assert tokenize("It's GREAT, really!!") == ["it", "s", "great", "really"]
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_is_neutral(text: str) -> None:
    result = score(text)

    assert result.sentiment == "neutral"
    assert result.score == 0
    assert result.confidence == pytest.approx(0.64)


def test_intensifier_boosts_strong_positive() -> None:
    result = score("I absolutely love this product")

    assert result.sentiment == "positive"
    assert result.score == pytest.approx(2.6)
    assert result.confidence == pytest.approx(0.95)


def test_two_strong_negatives() -> None:
    result, breakdown = analyze("This is terrible and awful")

    assert result.sentiment == "negative"
    assert breakdown.word_count == 2
    assert result.score == pytest.approx(-4 / 2**0.5)
    # 0.6 + (2.83 - 1) * 0.2 + 2/5 caps at 0.95
    assert result.confidence == pytest.approx(0.95)


def test_strong_negative_confidence_formula() -> None:
    lex = _mini_lexicon(negative={"bad": -1.5})
    result = score("the service here was bad and we left quite quickly", lex)

    assert result.sentiment == "negative"
    assert result.score == pytest.approx(-1.5)
    assert result.confidence == pytest.approx(0.6 + 0.5 * 0.2 + 1 / 10)


def test_mild_negative_confidence_formula() -> None:
    lex = _mini_lexicon(negative={"bad": -0.5})
    result = score("this product is really quite bad", lex)

    assert result.sentiment == "negative"
    assert result.score == pytest.approx(-0.5)
    assert result.confidence == pytest.approx(0.5 + 0.5 * 0.3 + 1 / 6)


def test_weak_score_without_indicators_is_neutral() -> None:
    lex = _mini_lexicon(positive={"good": 0.2})

    result = score("this is good", lex)
    assert result.sentiment == "neutral"
    assert result.score == pytest.approx(0.2)
    assert result.confidence == pytest.approx(0.6)

    short = score("good", lex)
    assert short.confidence == pytest.approx(0.6 * 0.8)


def test_negated_mild_negative_is_not_negative() -> None:
    result, breakdown = analyze("The product was not bad")

    assert result.sentiment != "negative"
    assert result.score == pytest.approx(1.2)
    # "not bad" is also a neutral phrase
    assert breakdown.neutral_count == 2


def test_weak_word_above_threshold_outweighs_neutral_phrase() -> None:
    result, breakdown = analyze("It's okay, nothing special")

    assert breakdown.neutral_count == 2
    assert result.score == pytest.approx(0.5)
    assert result.sentiment == "positive"
    assert result.confidence == pytest.approx(0.85)


def test_negation_flips_polarity() -> None:
    assert score("good").sentiment == "positive"

    negated = score("not good")
    assert negated.sentiment in {"neutral", "negative"}
    assert negated.score == pytest.approx(-1.2)


def test_case_insensitive() -> None:
    assert score("AMAZING") == score("Amazing") == score("amazing")


def test_idempotent() -> None:
    text = "The support team was very helpful, but shipping was slow."
    assert score(text) == score(text)


@pytest.mark.parametrize("base", ["I love this", "great service", "The staff were friendly and helpful"])
def test_adding_strong_positive_never_lowers_score(base: str) -> None:
    before = score(base).score
    after = score(f"{base} amazing").score

    assert after >= before


@pytest.mark.parametrize(
    "text",
    [
        "",
        "a",
        "meh",
        "good",
        "terrible terrible terrible terrible",
        "not not not not bad",
        "absolutely amazing wonderful fantastic brilliant superb " * 10,
        "I'm unsure, maybe it could be better or could be worse, kind of average",
        "?!.,;:",
    ],
)
def test_confidence_always_clamped(text: str) -> None:
    result = score(text)

    assert 0.3 <= result.confidence <= 0.95
    assert result.sentiment in {"positive", "negative", "neutral"}


def test_single_word_neutral_indicator_is_double_counted() -> None:
    result, breakdown = analyze("meh")

    assert breakdown.neutral_count == 2
    assert result.sentiment == "neutral"
    assert result.confidence == pytest.approx(0.72)


def test_modifier_multipliers() -> None:
    lex = _mini_lexicon()

    assert score("very good", lex).score == pytest.approx(1.3)
    assert score("slightly good", lex).score == pytest.approx(0.6)
    assert score("not very good", lex).score == pytest.approx(-1.04)
    assert score("very slightly good", lex).score == pytest.approx(1.3)


def test_context_window_is_two_tokens() -> None:
    lex = _mini_lexicon()
    tokens = ["not", "x", "y", "good"]

    assert context_multiplier(tokens, 3, lex) == 1.0
    assert context_multiplier(tokens, 2, lex) == pytest.approx(-0.8)
    assert score("not x y good", lex).score == pytest.approx(1.0)


def test_token_can_be_sentiment_word_and_intensifier() -> None:
    result, breakdown = analyze("pretty good")

    assert breakdown.word_count == 2
    assert breakdown.total_score == pytest.approx(1.0 + 1.5 * 1.3)
    assert result.sentiment == "positive"


def test_partial_match_uses_definition_order() -> None:
    lex = _mini_lexicon(positive={"lovely": 1.5, "love": 2.0})

    assert match_token("lovel", lex) == pytest.approx(1.5 * 0.7)
    assert match_token("loves", lex) == pytest.approx(2.0 * 0.7)


def test_partial_match_on_default_lexicon() -> None:
    assert match_token("broke") == pytest.approx(-1.5 * 0.7)
    assert match_token("hateful") == pytest.approx(-2.0 * 0.7)
    assert match_token("product") == 0.0


def test_partial_match_min_length() -> None:
    assert match_token("s") == 0.0
    assert match_token("the") == 0.0

    literal = LexiconConfig(partial_min_length=1)
    assert match_token("s", literal) == pytest.approx(2.0 * 0.7)
    assert match_token("the", literal) == pytest.approx(-2.0 * 0.7)


def test_exact_threshold_boundary_is_neutral() -> None:
    lex = _mini_lexicon(positive={"good": 0.3})
    result = score("good", lex)

    assert result.sentiment == "neutral"
    assert result.confidence == pytest.approx(0.6 * 0.8)


def test_long_text_confidence_boost_is_capped() -> None:
    text = " ".join(["fine"] + ["word"] * 24)
    result, breakdown = analyze(text)

    assert breakdown.token_count > 20
    assert result.sentiment == "positive"
    # strong positive at exactly 1.0: 0.6 + 0 + 1/25, then * 1.1
    assert result.confidence == pytest.approx(0.64 * 1.1)


def test_label_for_score_inclusive_band() -> None:
    assert label_for_score(0.3) == "neutral"
    assert label_for_score(-0.3) == "neutral"
    assert label_for_score(0.31) == "positive"
    assert label_for_score(-0.31) == "negative"
    assert label_for_score(0.05, threshold=0.0) == "positive"


def test_lexicon_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_LEXICON.positive["stellar"] = 2.0  # type: ignore[index]

    score("I love it")
    assert "stellar" not in DEFAULT_LEXICON.positive
