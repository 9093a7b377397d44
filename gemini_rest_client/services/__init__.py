"""
Request/response pipeline services.

Prompt normalization (with MIME resolution), history bookkeeping, REST
request building, the HTTP exchange and response extraction.
"""

from .history_store import HistoryStore
from .prompt_normalizer import PromptNormalizer, coerce_prompt_item
from .request_builder import prepare_gemini_rest_api_request
from .api_gateway import GeminiApiGateway
from .response_extractor import ResponseExtractor, extract_json_from_markdown

__all__ = [
    "HistoryStore",
    "PromptNormalizer",
    "coerce_prompt_item",
    "prepare_gemini_rest_api_request",
    "GeminiApiGateway",
    "ResponseExtractor",
    "extract_json_from_markdown",
]
