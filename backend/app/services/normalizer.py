import json
import re
from typing import Any, Dict

import pydantic

from ..errors import ParseError, SchemaError
from ..schemas import WebsiteBundle


_JSON_FENCE_RE = re.compile(r"```json\n?([\s\S]*?)\n?```")
_ANY_FENCE_RE = re.compile(r"```\n?([\s\S]*?)\n?```")

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title}</title>
  <style>{css}</style>
</head>
<body>
{html}
<script>{js}</script>
</body>
</html>"""


def extract_json_text(raw: str) -> str:
    """Pick the substring of a model reply that should hold the JSON object.

    A ```json fence wins over any other fence; without fences the text is
    used as is. Both matches are non-greedy, so the first fence is taken.
    """
    m = _JSON_FENCE_RE.search(raw) or _ANY_FENCE_RE.search(raw)
    return m.group(1) if m else raw


def build_full_html(bundle: WebsiteBundle) -> str:
    if "<!DOCTYPE" in bundle.html:
        return bundle.html
    return _DOCUMENT_TEMPLATE.format(
        title=bundle.title,
        css=bundle.css,
        html=bundle.html,
        js=bundle.js,
    )


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back to the caller
    raise ParseError(f"Invalid JSON constant: {name}")


def parse_website_json(raw: str) -> Dict[str, Any]:
    text = extract_json_text(raw or "")
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise SchemaError(f"Expected a JSON object, got {type(data).__name__}")
    if "html" not in data:
        raise SchemaError("Website JSON is missing the 'html' field")
    try:
        bundle = WebsiteBundle.model_validate(data)
    except pydantic.ValidationError as exc:
        raise SchemaError(str(exc)) from exc

    bundle.full_html = build_full_html(bundle)
    return bundle.model_dump(by_alias=True)
