"""
Error taxonomy for URL parsing and template compilation.

Both families derive from ValueError so callers can catch them the same way
they would any malformed-input error.
"""

from typing import Optional


class URLParseError(ValueError):
    """Base class for structural URL parse failures."""

    code = "parse_error"
    message = "Malformed URL"

    def __init__(self, raw: Optional[str] = None, detail: Optional[str] = None):
        self.raw = raw
        self.detail = detail
        text = self.message if detail is None else f"{self.message}: {detail}"
        super().__init__(text)


class EmptyInputError(URLParseError):
    code = "empty_input"
    message = "Empty URL"


class InvalidSchemeError(URLParseError):
    code = "invalid_scheme"
    message = "Invalid scheme"


class InvalidPortError(URLParseError):
    code = "invalid_port"
    message = "Invalid port"


class MissingHostError(URLParseError):
    code = "missing_host"
    message = "Missing host"


class MalformedAuthorityError(URLParseError):
    code = "malformed_authority"
    message = "Malformed authority"


class TemplateError(ValueError):
    """Base class for template compilation failures."""

    code = "template_error"
    message = "Invalid template"

    def __init__(self, template: str, position: int):
        self.template = template
        self.position = position
        super().__init__(f"{self.message} at position {position}")


class EmptyFieldNameError(TemplateError):
    code = "empty_field_name"
    message = "Empty field name in placeholder"


class UnclosedPlaceholderError(TemplateError):
    code = "unclosed_placeholder"
    message = "Unclosed placeholder"
