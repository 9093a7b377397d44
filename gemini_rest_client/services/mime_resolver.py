# -*- coding: utf-8 -*-
"""
MIME type resolution for inline file parts.

- Parses `data:<mime>;base64,` prefixes on base64 payloads.
- Sniffs MIME types from file content (magic signatures) only.
- Validates against the inline allow-list (image/* and application/pdf).
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.config import (
    FALLBACK_MIME_TYPE,
    SUPPORTED_INLINE_MIME_PREFIXES,
    SUPPORTED_INLINE_MIME_TYPES,
)
from ..core.exceptions import InvalidInputError

logger = logging.getLogger("GeminiRestClient.Services.MimeResolver")

DATA_URL_SCHEME = "data:"

# (offset, signature, mime)
_MAGIC_SIGNATURES = [
    (0, b"\x89PNG\r\n\x1a\n", "image/png"),
    (0, b"\xff\xd8\xff", "image/jpeg"),
    (0, b"GIF87a", "image/gif"),
    (0, b"GIF89a", "image/gif"),
    (0, b"BM", "image/bmp"),
    (0, b"II*\x00", "image/tiff"),
    (0, b"MM\x00*", "image/tiff"),
    (0, b"\x00\x00\x01\x00", "image/vnd.microsoft.icon"),
    (0, b"%PDF-", "application/pdf"),
]

# ISO-BMFF brands found at offset 8 after the "ftyp" box marker
_FTYP_BRANDS = {
    b"heic": "image/heic",
    b"heix": "image/heic",
    b"heim": "image/heic",
    b"heis": "image/heic",
    b"mif1": "image/heif",
    b"msf1": "image/heif",
    b"avif": "image/avif",
    b"avis": "image/avif",
}


def detect_mime_type_from_data_url(value: str) -> Optional[str]:
    """
    detect_mime_type_from_data_url("data:image/png;base64,iVBO...") -> "image/png"
    Returns None when there is no comma, no `data:` scheme, or the MIME segment is empty.
    """
    if not isinstance(value, str):
        return None
    head, sep, _ = value.partition(",")
    if not sep or not head.startswith(DATA_URL_SCHEME):
        return None
    mime = head[len(DATA_URL_SCHEME):].split(";", 1)[0].strip()
    return mime or None


def strip_data_url_prefix(value: str) -> str:
    """Return the payload after the first comma when `value` carries a data-URL header."""
    head, sep, remainder = value.partition(",")
    if sep and head.startswith(DATA_URL_SCHEME):
        return remainder
    return value


def sniff_mime_type(data: bytes) -> str:
    """
    Guess a MIME type from the leading bytes of `data`.

    Returns application/octet-stream when no signature matches.
    """
    for offset, signature, mime in _MAGIC_SIGNATURES:
        if data[offset:offset + len(signature)] == signature:
            return mime

    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"

    if data[4:8] == b"ftyp":
        brand_mime = _FTYP_BRANDS.get(data[8:12])
        if brand_mime:
            return brand_mime

    head = data[:512].lstrip().lower()
    if head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head):
        return "image/svg+xml"

    return FALLBACK_MIME_TYPE


def is_supported_mime_type(mime_type: Optional[str]) -> bool:
    if not mime_type:
        return False
    return mime_type in SUPPORTED_INLINE_MIME_TYPES or any(
        mime_type.startswith(prefix) for prefix in SUPPORTED_INLINE_MIME_PREFIXES
    )


def validate_mime_type(mime_type: str) -> str:
    if not is_supported_mime_type(mime_type):
        raise InvalidInputError(
            f"Invalid input: Unsupported MIME type for file: {mime_type}. "
            "Supported types are image/* and application/pdf."
        )
    return mime_type


def resolve_base64_mime_type(data: str, explicit_mime_type: Optional[str] = None) -> str:
    """An explicit annotation wins over the data-URL prefix; no detection beyond that."""
    mime_type = explicit_mime_type or detect_mime_type_from_data_url(data)
    if not mime_type:
        raise InvalidInputError(
            "Invalid input: MIME type is required for Base64 files without a data URL prefix "
            "(image/* or application/pdf)."
        )
    return validate_mime_type(mime_type)


def resolve_content_mime_type(data: bytes, source: Optional[str] = None) -> str:
    """
    Sniff and validate the MIME type of downloaded or read bytes.

    Only the content decides; file names and Content-Type headers are not trusted.
    """
    mime_type = sniff_mime_type(data)
    logger.debug(f"Sniffed '{mime_type}' from {len(data)} byte(s) of {source or 'content'}")
    return validate_mime_type(mime_type)
