# -*- coding: utf-8 -*-
"""
Gemini REST API request builder.

- Replays stored history as REST "contents" (one single-part turn per message).
- Appends the current call's parts as the final user turn.
- Builds generationConfig, including thinkingConfig for thinking models.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.config import (
    DEFAULT_RESPONSE_MIME_TYPE,
    DEFAULT_TEMPERATURE,
    DEFAULT_THINKING_BUDGET,
    DEFAULT_TOP_P,
    GEMINI_API_VERSION,
    GOOGLE_API_BASE_URL,
)
from ..models.api_models import GenerationConfigPy, HistoryMessage, InlinePart, TextPart
from ..utils.helpers import is_thinking_model, strip_query_string

logger = logging.getLogger("GeminiRestClient.Services.RequestBuilder")


def build_target_url(model_id: str, api_key: str, base_url: Optional[str] = None) -> str:
    """
    build_target_url(model_id, api_key) -> str
    `base_url` may be a bare host or already include the `/<version>/models/<model>:generateContent` path.
    """
    base = (base_url or GOOGLE_API_BASE_URL).rstrip("/")
    if ":generateContent" in base:
        return f"{base}?key={api_key}"
    return f"{base}/{GEMINI_API_VERSION}/models/{model_id}:generateContent?key={api_key}"


def build_generation_config(
    model_id: str,
    overrides: Optional[GenerationConfigPy] = None,
    thinking_model_ids: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    generation_config_rest: Dict[str, Any] = {
        "temperature": DEFAULT_TEMPERATURE,
        "responseMimeType": DEFAULT_RESPONSE_MIME_TYPE,
        "topP": DEFAULT_TOP_P,
    }

    thinking_budget = DEFAULT_THINKING_BUDGET
    if overrides:
        if overrides.temperature is not None:
            generation_config_rest["temperature"] = overrides.temperature
        if overrides.top_p is not None:
            generation_config_rest["topP"] = overrides.top_p
        if overrides.response_mime_type is not None:
            generation_config_rest["responseMimeType"] = overrides.response_mime_type
        if overrides.thinking_budget is not None:
            thinking_budget = overrides.thinking_budget

    # Only the designated thinking models accept a thinking budget
    if is_thinking_model(model_id, thinking_model_ids):
        generation_config_rest["thinkingConfig"] = {"thinkingBudget": thinking_budget}

    return generation_config_rest


def convert_history_to_rest_contents(history: Sequence[HistoryMessage]) -> List[Dict[str, Any]]:
    """
    convert_history_to_rest_contents(history) -> List[dict]
    Each stored message becomes its own {"role", "parts": [part]} turn, in stored order.
    A model reply that carried no text is replayed with empty parts.
    """
    rest_api_contents: List[Dict[str, Any]] = []

    for i, msg in enumerate(history):
        if msg.content is None:
            logger.debug(f"History message from role {msg.role} at index {i} has no content; replaying empty parts.")
            rest_api_contents.append({"role": msg.role, "parts": []})
            continue
        rest_api_contents.append({"role": msg.role, "parts": [msg.content.to_rest()]})

    return rest_api_contents


def prepare_gemini_rest_api_request(
    current_parts: Sequence[Union[TextPart, InlinePart]],
    history: Sequence[HistoryMessage],
    model_id: str,
    api_key: str,
    base_url: Optional[str] = None,
    generation_config: Optional[GenerationConfigPy] = None,
    thinking_model_ids: Optional[Iterable[str]] = None,
) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build a generateContent request:
    - Target URL with the API key as query parameter
    - JSON content-type header
    - 'contents': replayed history (possibly empty) followed by the current user turn
    - generationConfig with fixed defaults
    """
    target_url = build_target_url(model_id, api_key, base_url)
    headers = {"Content-Type": "application/json"}

    contents = convert_history_to_rest_contents(history)
    if history:
        logger.info(f"Replaying {len(contents)} history turn(s) ahead of the current turn")
    contents.append({"role": "user", "parts": [part.to_rest() for part in current_parts]})

    json_payload: Dict[str, Any] = {
        "contents": contents,
        "generationConfig": build_generation_config(model_id, generation_config, thinking_model_ids),
    }

    logger.info(f"Prepared Gemini REST API request for model {model_id}. URL: {strip_query_string(target_url)} "
                f"Payload keys: {list(json_payload.keys())}")
    logger.debug(f"generationConfig in REST payload: {json_payload['generationConfig']}")

    return target_url, headers, json_payload
