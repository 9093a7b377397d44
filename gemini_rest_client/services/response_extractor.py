# -*- coding: utf-8 -*-
"""
Response extraction.

Decodes the generateContent body, surfaces remote errors, records the model
reply in history and shapes the answer for the caller: trimmed text, or the
JSON block embedded in a markdown reply.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional, Union

import orjson

from ..core.exceptions import ApiError, DecodeError
from ..models.api_models import HistoryMessage, ResponseType, TextPart
from .history_store import HistoryStore

logger = logging.getLogger("GeminiRestClient.Services.ResponseExtractor")

_JSON_BLOCK_PATTERN = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)

NO_JSON_BLOCK_MESSAGE = "No JSON block found."


def decode_response_body(raw_body: str) -> Any:
    try:
        return orjson.loads(raw_body)
    except orjson.JSONDecodeError as e:
        raise DecodeError(str(e), raw_body) from e


def extract_answer_text(data: Any) -> Optional[str]:
    """
    extract_answer_text(data) -> candidates[0].content.parts[0].text, or None when absent.
    Raises ApiError when the body carries an `error` object.
    """
    if not isinstance(data, dict):
        return None

    if data.get("error") is not None:
        error = data["error"]
        if isinstance(error, dict):
            raise ApiError(error.get("code"), error.get("message"))
        raise ApiError(None, str(error))

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) else None


def extract_json_from_markdown(markdown: Optional[str]) -> Any:
    """
    Find a ```json ... ``` block and decode it.

    Returns the decoded value, or a descriptive string when no block is found
    or the block is not valid JSON.
    """
    if not markdown:
        return NO_JSON_BLOCK_MESSAGE
    match = _JSON_BLOCK_PATTERN.search(markdown)
    if not match:
        return NO_JSON_BLOCK_MESSAGE
    try:
        return orjson.loads(match.group(1))
    except orjson.JSONDecodeError as e:
        return f"Invalid JSON: {e}"


class ResponseExtractor:
    def __init__(self, history: HistoryStore):
        self.history = history

    def extract(self, raw_body: str, response_type: Union[ResponseType, str] = ResponseType.TEXT) -> Any:
        data = decode_response_body(raw_body)
        answer = extract_answer_text(data)
        if answer is None:
            logger.warning("Response carried no candidate text")

        self.history.append(HistoryMessage(role="model", content=TextPart(text=answer) if answer is not None else None))

        if ResponseType(response_type) == ResponseType.OBJECT:
            return extract_json_from_markdown(answer)
        return (answer or "").strip()
