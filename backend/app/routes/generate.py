import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import Settings
from ..deps import get_completion_client, get_settings
from ..errors import ValidationError
from ..schemas import GenerateRequest
from ..services.completion import CompletionClient
from ..services.generation import generate_website

log = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate")
async def generate(
    data: GenerateRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
):
    try:
        website = await generate_website(data=data, client=client, settings=settings)
    except ValidationError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except Exception as exc:
        log.exception("Generation error")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Failed to generate website",
                "details": str(exc),
            },
        )
    return {"success": True, "website": website}
