from typing import Optional


class CieloError(Exception):
    """Base Cielo client error."""
    pass


class CieloValidationError(CieloError):
    """Request cannot be turned into a feed URL."""
    pass


class MissingRequiredField(CieloValidationError):
    """A field the feed API requires was not set."""
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}")
        self.field = field


class CieloConfigError(CieloError):
    """Provider is not configured (no API key)."""
    pass


class CieloApiError(CieloError):
    """Feed API answered with a non-success status."""
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
