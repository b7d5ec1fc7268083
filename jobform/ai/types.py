from typing import Protocol


class DocumentAIClient(Protocol):
    provider_name: str

    async def complete_document(self, *, content: bytes, mime_type: str, prompt: str) -> str: ...
