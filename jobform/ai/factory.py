from jobform.ai.config import load_ai_config
from jobform.ai.types import DocumentAIClient

from jobform.ai.providers.gemini_provider import GeminiProvider
from jobform.ai.providers.openai_provider import OpenAIProvider


def get_document_client() -> DocumentAIClient:
    cfg = load_ai_config()

    if cfg.provider == "gemini":
        return GeminiProvider(model=cfg.model)

    if cfg.provider == "openai":
        return OpenAIProvider(model=cfg.model)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
