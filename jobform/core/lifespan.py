from contextlib import asynccontextmanager
import logging

from jobform.ai.factory import get_document_client
from jobform.ai.resume_import import DocumentImportAdapter
from jobform.core.config import settings
from jobform.core.draft_store import DraftStore, SqliteKeyValueStore
from jobform.services.application_service import ApplicationController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    backend = SqliteKeyValueStore(settings.draft_store_db_path)
    importer = DocumentImportAdapter(get_document_client())
    app.state.controller = ApplicationController(
        DraftStore(backend, settings.draft_store_key),
        importer,
        save_message_ttl_seconds=settings.save_message_ttl_seconds,
    )
    logger.info(
        "application_ready provider=%s draft_db=%s",
        settings.ai_provider,
        settings.draft_store_db_path,
    )
    yield
    backend.close()
