class WebsiteError(Exception):
    """Base class for failures raised while producing a website bundle."""


class ValidationError(WebsiteError):
    """A required request field is missing or blank."""


class UpstreamError(WebsiteError):
    """The completion service call failed or returned an error payload."""


class ParseError(WebsiteError):
    """The model output was not valid JSON after fence stripping."""


class SchemaError(WebsiteError):
    """The parsed model output is not a usable website bundle."""
