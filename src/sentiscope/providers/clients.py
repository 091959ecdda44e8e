"""Remote sentiment provider clients.

Each client normalizes the provider's native response into a
``SourcedResult`` so it can stand in for a local score.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol

import requests
from requests import RequestException

from sentiscope.sentiment.scoring import label_for_score
from sentiscope.sentiment.types import SourcedResult

MEANINGCLOUD_ENDPOINT = "https://api.meaningcloud.com/sentiment-2.1"
HUGGINGFACE_ENDPOINT = "https://api-inference.huggingface.co/models"
HUGGINGFACE_MODEL = "cardiffnlp/twitter-roberta-base-sentiment-latest"
TWINWORD_HOST = "twinword-sentiment-analysis.p.rapidapi.com"

MEANINGCLOUD_SCORE_TAGS = {"P+": 1.0, "P": 0.5, "NEU": 0.0, "NONE": 0.0, "N": -0.5, "N+": -1.0}
HUGGINGFACE_LABELS = {
    "label_0": "negative",
    "label_1": "neutral",
    "label_2": "positive",
    "negative": "negative",
    "neutral": "neutral",
    "positive": "positive",
}


class ProviderError(RuntimeError):
    """Raised when a remote provider cannot produce a result."""


class SentimentProvider(Protocol):
    name: str

    def analyze(self, text: str) -> SourcedResult:
        """Score text remotely."""
        ...


def _json(response: requests.Response, provider: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ProviderError(f"Invalid response from {provider}.") from exc


def parse_meaningcloud(data: Dict[str, Any]) -> SourcedResult:
    if not isinstance(data, dict):
        raise ProviderError("Unexpected MeaningCloud response shape.")
    status = data.get("status") or {}
    if not isinstance(status, dict):
        raise ProviderError(f"Unexpected MeaningCloud status: {status}")
    if str(status.get("code", "0")) != "0":
        raise ProviderError(f"MeaningCloud error: {status.get('msg', 'unknown error')}")

    tag = str(data.get("score_tag", "NONE")).upper()
    if tag not in MEANINGCLOUD_SCORE_TAGS:
        raise ProviderError(f"Unexpected MeaningCloud score_tag: {tag}")
    value = MEANINGCLOUD_SCORE_TAGS[tag]

    sentiment = "neutral"
    if value > 0.1:
        sentiment = "positive"
    elif value < -0.1:
        sentiment = "negative"

    try:
        confidence = float(data.get("confidence", 0)) / 100
    except (TypeError, ValueError) as exc:
        raise ProviderError("MeaningCloud confidence is not numeric.") from exc

    return SourcedResult(
        sentiment=sentiment,
        score=value,
        confidence=max(0.0, min(confidence, 1.0)),
        source="meaningcloud",
        provider_label=tag,
    )


def parse_huggingface(data: Any) -> SourcedResult:
    # The inference API wraps per-input results in an outer list.
    rows = data[0] if isinstance(data, list) and data and isinstance(data[0], list) else data
    if not isinstance(rows, list) or not rows:
        raise ProviderError("Unexpected Hugging Face response shape.")

    scores = {"positive": 0.0, "negative": 0.0, "neutral": 0.0}
    try:
        for row in rows:
            label = HUGGINGFACE_LABELS.get(str(row["label"]).lower())
            if label:
                scores[label] = float(row["score"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ProviderError("Malformed Hugging Face label scores.") from exc

    positive, negative, neutral = scores["positive"], scores["negative"], scores["neutral"]
    sentiment, confidence = "neutral", neutral
    if positive > negative and positive > neutral:
        sentiment, confidence = "positive", positive
    elif negative > positive and negative > neutral:
        sentiment, confidence = "negative", negative

    top_label = max(scores, key=scores.get)
    return SourcedResult(
        sentiment=sentiment,
        score=positive - negative,
        confidence=confidence,
        source="huggingface",
        provider_label=top_label,
    )


def parse_twinword(data: Dict[str, Any], threshold: float) -> SourcedResult:
    if not isinstance(data, dict):
        raise ProviderError("Unexpected Twinword response shape.")
    try:
        value = float(data.get("score") or 0.0)
        ratio = data.get("ratio")
        confidence = abs(float(ratio)) if ratio is not None else 0.5
    except (TypeError, ValueError) as exc:
        raise ProviderError("Twinword score is not numeric.") from exc

    return SourcedResult(
        sentiment=label_for_score(value, threshold),
        score=value,
        confidence=min(confidence, 1.0),
        source="twinword",
        provider_label=data.get("type") or "neutral",
    )


@dataclass
class MeaningCloudClient:
    api_key: str
    endpoint: str = MEANINGCLOUD_ENDPOINT
    lang: str = "en"
    timeout_seconds: int = 10
    name: str = "meaningcloud"

    def analyze(self, text: str) -> SourcedResult:
        payload = {"key": self.api_key, "txt": text, "lang": self.lang}
        try:
            response = requests.post(self.endpoint, data=payload, timeout=self.timeout_seconds)
            response.raise_for_status()
        except RequestException as exc:
            raise ProviderError(f"MeaningCloud request failed: {exc}") from exc
        return parse_meaningcloud(_json(response, "MeaningCloud"))


@dataclass
class HuggingFaceClient:
    token: str
    model: str = HUGGINGFACE_MODEL
    endpoint: str = HUGGINGFACE_ENDPOINT
    timeout_seconds: int = 30
    name: str = "huggingface"

    def analyze(self, text: str) -> SourcedResult:
        url = f"{self.endpoint.rstrip('/')}/{self.model}"
        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            response = requests.post(url, json={"inputs": text}, headers=headers, timeout=self.timeout_seconds)
            response.raise_for_status()
        except RequestException as exc:
            raise ProviderError(f"Hugging Face request failed: {exc}") from exc
        return parse_huggingface(_json(response, "Hugging Face"))


@dataclass
class TwinwordClient:
    api_key: str
    host: str = TWINWORD_HOST
    threshold: float = 0.3
    timeout_seconds: int = 10
    name: str = "twinword"

    def analyze(self, text: str) -> SourcedResult:
        url = f"https://{self.host}/analyze/"
        headers = {"X-RapidAPI-Key": self.api_key.strip(), "X-RapidAPI-Host": self.host}
        try:
            response = requests.get(url, params={"text": text}, headers=headers, timeout=self.timeout_seconds)
        except RequestException as exc:
            raise ProviderError(f"Twinword network error: {exc}") from exc

        if response.status_code == 403:
            raise ProviderError("Invalid API key or insufficient permissions")
        if response.status_code == 429:
            raise ProviderError("Rate limit exceeded. Try again later.")
        if not response.ok:
            raise ProviderError(f"API Error: {response.status_code} - {response.reason}")
        return parse_twinword(_json(response, "Twinword"), self.threshold)
