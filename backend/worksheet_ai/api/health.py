from fastapi import APIRouter

from worksheet_ai.core.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    settings = get_settings()
    return {"status": "healthy", "provider": settings.llm_provider}
