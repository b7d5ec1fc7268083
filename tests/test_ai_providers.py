import asyncio
import os
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from jobform.ai.providers.gemini_provider import GeminiProvider  # noqa: E402
from jobform.ai.providers.openai_provider import OpenAIProvider  # noqa: E402
from jobform.ai.resume_import import DocumentImportAdapter, ExtractionFailedError  # noqa: E402


def _openai_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class GeminiProviderTests(unittest.TestCase):
    def test_sends_document_and_returns_text(self):
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=SimpleNamespace(text='{"first_name": "Alex"}'))
        with patch("jobform.ai.providers.gemini_provider.genai.Client", return_value=client) as client_cls:
            provider = GeminiProvider(model="gemini-2.5-flash", api_key="test-key")
            text = asyncio.run(provider.complete_document(content=b"%PDF-1.7", mime_type="application/pdf", prompt="extract"))

        self.assertEqual(text, '{"first_name": "Alex"}')
        client_cls.assert_called_once_with(api_key="test-key")
        kwargs = client.aio.models.generate_content.await_args.kwargs
        self.assertEqual(kwargs["model"], "gemini-2.5-flash")
        self.assertEqual(kwargs["contents"][1], "extract")
        self.assertEqual(kwargs["config"].response_mime_type, "application/json")

    def test_missing_key_is_an_extraction_failure(self):
        with patch.dict(os.environ, {"GEMINI_API_KEY": "", "API_KEY": ""}):
            adapter = DocumentImportAdapter(GeminiProvider(model="gemini-2.5-flash"))
            with self.assertRaises(ExtractionFailedError) as ctx:
                asyncio.run(adapter.extract(b"img", "image/png"))
        self.assertIn("GEMINI_API_KEY", str(ctx.exception))


class OpenAIProviderTests(unittest.TestCase):
    def _run(self, mime_type, content="{}"):
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=_openai_response(content))
        with patch("jobform.ai.providers.openai_provider.AsyncOpenAI", return_value=client) as client_cls:
            provider = OpenAIProvider(model="gpt-4o-mini", api_key="sk-test")
            text = asyncio.run(provider.complete_document(content=b"data", mime_type=mime_type, prompt="extract"))
        return text, client_cls, client.chat.completions.create.await_args.kwargs

    def test_single_attempt_client(self):
        _text, client_cls, _kwargs = self._run("image/png")
        self.assertEqual(client_cls.call_args.kwargs["max_retries"], 0)
        self.assertIsNone(client_cls.call_args.kwargs["timeout"])

    def test_pdf_is_sent_as_file_part(self):
        _text, _cls, kwargs = self._run("application/pdf")
        part = kwargs["messages"][1]["content"][1]
        self.assertEqual(part["type"], "file")
        self.assertTrue(part["file"]["file_data"].startswith("data:application/pdf;base64,"))
        self.assertEqual(kwargs["response_format"], {"type": "json_object"})

    def test_image_is_sent_as_data_url(self):
        _text, _cls, kwargs = self._run("image/webp")
        part = kwargs["messages"][1]["content"][1]
        self.assertEqual(part["type"], "image_url")
        self.assertTrue(part["image_url"]["url"].startswith("data:image/webp;base64,"))

    def test_null_content_becomes_empty_text(self):
        text, _cls, _kwargs = self._run("image/png", content=None)
        self.assertEqual(text, "")

    def test_missing_key_is_an_extraction_failure(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": ""}):
            adapter = DocumentImportAdapter(OpenAIProvider(model="gpt-4o-mini"))
            with self.assertRaises(ExtractionFailedError):
                asyncio.run(adapter.extract(b"img", "image/png"))


if __name__ == "__main__":
    unittest.main()
