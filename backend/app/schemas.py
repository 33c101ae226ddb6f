from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so a missing prompt can be answered with 400 instead of 422
    prompt: Optional[str] = Field(None, description="Natural-language description of the website")
    style: Optional[str] = Field(None, description="Optional design style preference")
    color_scheme: Optional[str] = Field(
        None,
        alias="colorScheme",
        description="Optional color scheme preference",
    )


class RefineRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_prompt: Optional[str] = Field(None, alias="originalPrompt", description="Prompt the site was generated from")
    current_code: Any = Field(None, alias="currentCode", description="Previously returned website bundle")
    refinement: Optional[str] = Field(None, description="Change to apply to the current site")


class WebsiteBundle(BaseModel):
    # Unknown keys returned by the model are relayed to the caller untouched
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    html: str
    css: str = ""
    js: str = ""
    title: str = ""
    description: str = ""
    components: List[Any] = Field(default_factory=list)
    full_html: Optional[str] = Field(None, alias="fullHtml")

    @field_validator("css", "js", "title", "description", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("components", mode="before")
    @classmethod
    def _null_components(cls, value: Any) -> Any:
        return [] if value is None else value
