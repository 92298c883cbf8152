from typing import Optional


class StorefrontError(Exception):
    """Base class for storefront domain errors."""


class ValidationError(StorefrontError):
    """Raised when a section create/patch payload has a bad shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(StorefrontError):
    pass


class DecodeError(StorefrontError):
    """Content payload could not be normalized to a mapping."""


class PriceParseError(StorefrontError):
    """A price field is not a decimal number."""

    def __init__(self, field: str, value):
        super().__init__(f"Unparsable {field}: {value!r}")
        self.field = field
        self.value = value
