from fastapi import APIRouter

from jobform.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Liveness plus the configured resume import provider.")
async def health_check():
    return {"status": "healthy", "resume_import_provider": settings.ai_provider}
