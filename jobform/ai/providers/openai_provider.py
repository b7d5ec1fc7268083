from __future__ import annotations

import base64
import os
from typing import Optional

from openai import AsyncOpenAI


class OpenAIProvider:
    provider_name = "openai"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        temperature: float = 0.1,
    ):
        self._model = model
        self._api_key = api_key
        self._base_url = base_url
        self._temperature = temperature
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        if self._client is not None:
            return self._client
        key = (self._api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")
        # One attempt per import, awaited until the service answers.
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=(self._base_url or os.getenv("OPENAI_BASE_URL") or None),
            timeout=None,
            max_retries=0,
        )
        return self._client

    @staticmethod
    def _document_part(content: bytes, mime_type: str) -> dict:
        encoded = base64.b64encode(content).decode("utf-8")
        data_url = f"data:{mime_type};base64,{encoded}"
        if mime_type == "application/pdf":
            return {"type": "file", "file": {"filename": "resume.pdf", "file_data": data_url}}
        return {"type": "image_url", "image_url": {"url": data_url}}

    async def complete_document(self, *, content: bytes, mime_type: str, prompt: str) -> str:
        response = await self._get_client().chat.completions.create(
            model=self._model,
            messages=[
                {
                    "role": "system",
                    "content": "You extract applicant details from resumes. Return a JSON object only.",
                },
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        self._document_part(content, mime_type),
                    ],
                },
            ],
            temperature=self._temperature,
            response_format={"type": "json_object"},
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
