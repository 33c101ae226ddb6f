from fastapi import APIRouter, Depends

from ..config import Settings
from ..deps import get_settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "model": settings.model, "provider": settings.provider_label}
