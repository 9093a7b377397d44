"""
Client library for the Gemini generateContent REST API.

Builds requests from text and file prompts (by path, base64 or URL), sends a
single HTTP call per prompt and returns plain text or the JSON block embedded
in the reply, optionally keeping a running conversation history.
"""

from .session import GeminiSession
from .models.api_models import (
    TextPrompt,
    FileByPathPrompt,
    FileByBase64Prompt,
    FileByUrlPrompt,
    TextPart,
    InlinePart,
    HistoryMessage,
    GenerationConfigPy,
    ResponseType,
)
from .core.exceptions import (
    GeminiApiException,
    InvalidInputError,
    NetworkError,
    TransportError,
    HttpError,
    ApiError,
    DecodeError,
)
from .core.logging_utils import setup_logging, MemoryLogHandler

__version__ = "1.0.0"

__all__ = [
    "GeminiSession",
    # Prompt items
    "TextPrompt",
    "FileByPathPrompt",
    "FileByBase64Prompt",
    "FileByUrlPrompt",
    # Parts and history
    "TextPart",
    "InlinePart",
    "HistoryMessage",
    "GenerationConfigPy",
    "ResponseType",
    # Errors
    "GeminiApiException",
    "InvalidInputError",
    "NetworkError",
    "TransportError",
    "HttpError",
    "ApiError",
    "DecodeError",
    # Logging
    "setup_logging",
    "MemoryLogHandler",
]
