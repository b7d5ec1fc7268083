from __future__ import annotations

import os
from typing import Optional

from google import genai
from google.genai import types

from jobform.schemas.application import ParsedResumeData


class GeminiProvider:
    provider_name = "gemini"

    def __init__(self, model: str, api_key: Optional[str] = None):
        self._model = model
        self._api_key = api_key
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if self._client is not None:
            return self._client
        key = (self._api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip()
        if not key:
            raise RuntimeError("GEMINI_API_KEY is missing")
        self._client = genai.Client(api_key=key)
        return self._client

    async def complete_document(self, *, content: bytes, mime_type: str, prompt: str) -> str:
        response = await self._get_client().aio.models.generate_content(
            model=self._model,
            contents=[
                types.Part.from_bytes(data=content, mime_type=mime_type),
                prompt,
            ],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=ParsedResumeData,
            ),
        )
        return response.text or ""
