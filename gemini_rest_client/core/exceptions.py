"""Exceptions raised by the Gemini REST client.

Every failure surfaces as a ``GeminiApiException`` subclass so callers can
catch the whole family at once, or a single ``kind`` when they care.
"""
from typing import Any, Optional


class GeminiApiException(RuntimeError):
    """Base exception for Gemini client errors."""
    kind = "gemini"


class InvalidInputError(GeminiApiException):
    """Raised when a prompt item cannot be turned into a request part."""
    kind = "invalid_input"


class NetworkError(GeminiApiException):
    """
    Raised when a file referenced by URL could not be downloaded.

    Attributes:
        url: The URL that failed.
    """
    kind = "network"

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class TransportError(GeminiApiException):
    """Raised on connection, TLS, DNS or timeout failures talking to the API."""
    kind = "transport"


class HttpError(GeminiApiException):
    """
    Raised when the API answers with a non-success status code.

    Attributes:
        status_code: HTTP status returned by the API.
        raw_body: Response body as text.
    """
    kind = "http"

    def __init__(self, status_code: int, raw_body: str):
        super().__init__(f"HTTP Error {status_code}: {raw_body}")
        self.status_code = status_code
        self.raw_body = raw_body


class ApiError(GeminiApiException):
    """
    Raised when a successful HTTP response carries an ``error`` object.

    Attributes:
        code: Remote error code.
        remote_message: Remote error message.
    """
    kind = "api"

    def __init__(self, code: Any, remote_message: Optional[str]):
        super().__init__(f"Gemini API Error (Code: {code}): {remote_message}")
        self.code = code
        self.remote_message = remote_message


class DecodeError(GeminiApiException):
    """Raised when the response body is not valid JSON."""
    kind = "decode"

    def __init__(self, parser_message: str, raw_body: str):
        super().__init__(f"JSON Decoding Error: {parser_message}\nRaw Response: {raw_body}")
        self.parser_message = parser_message
        self.raw_body = raw_body
