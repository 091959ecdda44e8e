"""Provider chain with local lexicon fallback."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from sentiscope.providers.clients import (
    HuggingFaceClient,
    MeaningCloudClient,
    ProviderError,
    SentimentProvider,
    TwinwordClient,
)
from sentiscope.sentiment.lexicon import DEFAULT_LEXICON, LexiconConfig, build_lexicon_config
from sentiscope.sentiment.scoring import score
from sentiscope.sentiment.types import SourcedResult

logger = logging.getLogger(__name__)

LOCAL_SOURCE = "local"
DEFAULT_KEY_ENVS = {
    "meaningcloud": "MEANINGCLOUD_API_KEY",
    "huggingface": "HUGGINGFACE_TOKEN",
    "twinword": "RAPIDAPI_KEY",
}


@dataclass
class FallbackAnalyzer:
    """Try remote providers in order and fall back to the local scorer."""

    providers: Sequence[SentimentProvider] = field(default_factory=list)
    lexicon: LexiconConfig = DEFAULT_LEXICON

    def analyze_local(self, text: str) -> SourcedResult:
        return SourcedResult.from_analysis(score(text, self.lexicon), LOCAL_SOURCE)

    def analyze(self, text: str) -> SourcedResult:
        for provider in self.providers:
            try:
                return provider.analyze(text)
            except ProviderError as exc:
                logger.warning("%s provider failed: %s", provider.name, exc)
        return self.analyze_local(text)


def _build_provider(name: str, key: str, provider_cfg: Dict[str, Any]) -> SentimentProvider:
    timeout = provider_cfg.get("timeout_seconds")
    if name == "meaningcloud":
        client = MeaningCloudClient(api_key=key, lang=provider_cfg.get("lang", "en"))
    elif name == "huggingface":
        client = HuggingFaceClient(token=key)
        if provider_cfg.get("model"):
            client.model = provider_cfg["model"]
    elif name == "twinword":
        client = TwinwordClient(api_key=key, threshold=float(provider_cfg.get("threshold", 0.3)))
    else:
        raise ValueError(f"Unsupported sentiment provider: {name}")
    if timeout:
        client.timeout_seconds = int(timeout)
    return client


def build_providers(cfg: Dict[str, Any]) -> List[SentimentProvider]:
    """Build the enabled providers whose API keys are present in the environment."""
    providers_cfg = cfg.get("providers") or []
    if not isinstance(providers_cfg, list):
        raise ValueError("providers must be a list of provider settings.")

    providers: List[SentimentProvider] = []
    for provider_cfg in providers_cfg:
        name = str(provider_cfg.get("name", "")).lower()
        if name not in DEFAULT_KEY_ENVS:
            raise ValueError(f"Unsupported sentiment provider: {name}")
        if not provider_cfg.get("enabled", False):
            continue
        key_env = provider_cfg.get("api_key_env") or DEFAULT_KEY_ENVS[name]
        key = os.getenv(key_env, "").strip()
        if not key:
            logger.warning("Skipping %s provider: %s is not set", name, key_env)
            continue
        providers.append(_build_provider(name, key, provider_cfg))
    return providers


def build_analyzer(cfg: Dict[str, Any], use_remote: bool = True) -> FallbackAnalyzer:
    providers = build_providers(cfg) if use_remote else []
    return FallbackAnalyzer(providers=providers, lexicon=build_lexicon_config(cfg))
