# -*- coding: utf-8 -*-
"""
Prompt normalization.

Turns the heterogeneous prompt items a caller passes to ``send_prompt`` into
uniform request parts, doing all file I/O (read, download, base64) and MIME
validation on the way. Every produced part is recorded as its own user
message in the session history, in input order.
"""

from __future__ import annotations

import base64
import logging
import os
from typing import Any, List, Optional, Sequence, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from ..core.config import FILE_FETCH_TIMEOUT
from ..core.exceptions import InvalidInputError, NetworkError
from ..models.api_models import (
    BasePromptItem,
    FileByBase64Prompt,
    FileByPathPrompt,
    FileByUrlPrompt,
    HistoryMessage,
    InlinePart,
    PromptItem,
    TextPart,
    TextPrompt,
)
from .history_store import HistoryStore
from .mime_resolver import (
    resolve_base64_mime_type,
    resolve_content_mime_type,
    strip_data_url_prefix,
)

logger = logging.getLogger("GeminiRestClient.Services.PromptNormalizer")

Part = Union[TextPart, InlinePart]
RawPrompt = Union[str, BasePromptItem, dict]

_prompt_item_adapter = TypeAdapter(PromptItem)


def coerce_prompt_item(raw: Any) -> Optional[BasePromptItem]:
    """
    Map caller input onto a prompt item model.

    Accepts bare strings, prompt item models, dicts in the model shape
    (``{"type": "file_url", "url": ...}``) and the legacy dict shape
    (``{"type": "file", "base64"|"url"|"path": ...}``). Returns None for
    anything else.
    """
    if isinstance(raw, str):
        return TextPrompt(text=raw)
    if isinstance(raw, BasePromptItem):
        return raw
    if not isinstance(raw, dict) or "type" not in raw:
        return None

    item_type = raw.get("type")
    try:
        if item_type == "file":
            # Legacy shape: base64 takes precedence over url, url over path
            if raw.get("base64") is not None:
                return FileByBase64Prompt(data=raw["base64"], mime_type=raw.get("mimeType"))
            if raw.get("url") is not None:
                return FileByUrlPrompt(url=raw["url"])
            if raw.get("path") is not None:
                return FileByPathPrompt(path=raw["path"])
            return None
        return _prompt_item_adapter.validate_python(raw)
    except ValidationError as e:
        logger.debug(f"Prompt item failed validation: {e.error_count()} error(s)")
        return None


def encode_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("utf-8")


def download_file(client: httpx.Client, url: str, timeout: float = FILE_FETCH_TIMEOUT) -> bytes:
    """
    download_file(client, url) -> response body bytes
    Any transport failure or non-2xx status raises NetworkError.
    """
    try:
        response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise NetworkError(f"Failed to download file from URL: {url} ({e})", url=url) from e
    return response.content


class PromptNormalizer:
    def __init__(self, history: HistoryStore, http_client: httpx.Client, fetch_timeout: float = FILE_FETCH_TIMEOUT):
        self.history = history
        self.http_client = http_client
        self.fetch_timeout = fetch_timeout

    def normalize(self, prompts: Union[RawPrompt, Sequence[RawPrompt]]) -> List[Part]:
        """
        normalize(prompts) -> List[Part]
        Parts come out in input order. History is appended as each part is
        produced, so a failure on a later item leaves earlier entries in place.
        """
        if isinstance(prompts, (str, BasePromptItem, dict)):
            prompts = [prompts]

        parts: List[Part] = []
        for i, raw in enumerate(prompts):
            item = coerce_prompt_item(raw)
            if item is None:
                logger.warning(f"Unrecognized prompt item at index {i} ({type(raw).__name__}). Skipping.")
                continue

            part = self._normalize_item(item)
            parts.append(part)
            self.history.append(HistoryMessage(role="user", content=part))

        logger.info(f"Normalized {len(parts)} part(s) from {len(prompts)} prompt item(s)")
        return parts

    def _normalize_item(self, item: BasePromptItem) -> Part:
        if isinstance(item, TextPrompt):
            return TextPart(text=item.text)
        if isinstance(item, FileByBase64Prompt):
            return self._from_base64(item)
        if isinstance(item, FileByUrlPrompt):
            return self._from_url(item)
        if isinstance(item, FileByPathPrompt):
            return self._from_path(item)
        raise InvalidInputError(f"Invalid input: unsupported prompt item type: {type(item).__name__}")

    def _from_base64(self, item: FileByBase64Prompt) -> InlinePart:
        mime_type = resolve_base64_mime_type(item.data, item.mime_type)
        base64_data = strip_data_url_prefix(item.data)
        logger.debug(f"Base64 part: mime={mime_type}, b64_len={len(base64_data)}")
        return InlinePart(mime_type=mime_type, base64_data=base64_data)

    def _from_url(self, item: FileByUrlPrompt) -> InlinePart:
        content = download_file(self.http_client, item.url, self.fetch_timeout)
        mime_type = resolve_content_mime_type(content, source=item.url)
        logger.debug(f"URL part: mime={mime_type}, bytes={len(content)}")
        return InlinePart(mime_type=mime_type, base64_data=encode_base64(content))

    def _from_path(self, item: FileByPathPrompt) -> InlinePart:
        if not os.path.isfile(item.path):
            raise InvalidInputError(f"Invalid input: File not found at path: {item.path}")
        with open(item.path, "rb") as f:
            content = f.read()
        mime_type = resolve_content_mime_type(content, source=item.path)
        logger.debug(f"Path part: mime={mime_type}, bytes={len(content)}")
        return InlinePart(mime_type=mime_type, base64_data=encode_base64(content))
