from dataclasses import dataclass

from jobform.core.config import settings

DEFAULT_MODELS = {
    "gemini": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str


def load_ai_config() -> AIConfig:
    provider = settings.ai_provider
    model = (settings.ai_model or DEFAULT_MODELS[provider]).strip()
    return AIConfig(provider=provider, model=model)
