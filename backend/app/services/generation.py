from typing import Any, Dict

from ..config import Settings
from ..errors import ValidationError
from ..schemas import GenerateRequest, RefineRequest
from .completion import CompletionClient
from .normalizer import parse_website_json
from .prompts import build_generation_prompt, build_refinement_prompt, system_prompt


def validate_generate(data: GenerateRequest) -> None:
    if not data.prompt or not data.prompt.strip():
        raise ValidationError("Prompt is required")


def validate_refine(data: RefineRequest) -> None:
    if not (data.original_prompt and data.original_prompt.strip()) or not (
        data.refinement and data.refinement.strip()
    ):
        raise ValidationError("Original prompt and refinement are required")


async def generate_website(*, data: GenerateRequest, client: CompletionClient, settings: Settings) -> Dict[str, Any]:
    validate_generate(data)
    user_prompt = build_generation_prompt(
        prompt=data.prompt,
        style=data.style,
        color_scheme=data.color_scheme,
    )
    raw = await client.complete(system_prompt(settings), user_prompt)
    return parse_website_json(raw)


async def refine_website(*, data: RefineRequest, client: CompletionClient, settings: Settings) -> Dict[str, Any]:
    validate_refine(data)
    user_prompt = build_refinement_prompt(
        original_prompt=data.original_prompt,
        current_code=data.current_code,
        refinement=data.refinement,
    )
    raw = await client.complete(system_prompt(settings), user_prompt)
    return parse_website_json(raw)
