from fastapi import APIRouter

from vibes.config import settings

router = APIRouter()


@router.get("/health")
async def health():
    return {"status": "ok", "environment": settings.environment}
