import pytest

from gemini_rest_client.core.exceptions import InvalidInputError
from gemini_rest_client.services.mime_resolver import (
    detect_mime_type_from_data_url,
    resolve_base64_mime_type,
    resolve_content_mime_type,
    sniff_mime_type,
    strip_data_url_prefix,
    validate_mime_type,
)

from .conftest import PDF_BYTES, PNG_BYTES


@pytest.mark.parametrize(
    "value, expected",
    [
        ("data:image/png;base64,iVBORw0KGgo", "image/png"),
        ("data:application/pdf;base64,JVBERi0", "application/pdf"),
        ("data:image/jpeg,abc", "image/jpeg"),
        ("iVBORw0KGgo", None),
        ("data:image/png;base64", None),
        ("data:;base64,abc", None),
        ("image/png;base64,abc", None),
    ],
)
def test_detect_mime_type_from_data_url(value, expected):
    assert detect_mime_type_from_data_url(value) == expected


def test_strip_data_url_prefix_keeps_remainder_after_first_comma():
    assert strip_data_url_prefix("data:image/png;base64,AAA,BBB") == "AAA,BBB"
    assert strip_data_url_prefix("AAAA") == "AAAA"


def test_sniff_common_signatures():
    assert sniff_mime_type(PNG_BYTES) == "image/png"
    assert sniff_mime_type(b"\xff\xd8\xff\xe0\x00\x10JFIF") == "image/jpeg"
    assert sniff_mime_type(b"GIF89a\x01\x00") == "image/gif"
    assert sniff_mime_type(b"RIFF\x24\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert sniff_mime_type(b"\x00\x00\x00\x18ftypheic\x00\x00") == "image/heic"
    assert sniff_mime_type(PDF_BYTES) == "application/pdf"
    assert sniff_mime_type(b'<?xml version="1.0"?>\n<svg xmlns="x"/>') == "image/svg+xml"


def test_sniff_falls_back_to_octet_stream():
    assert sniff_mime_type(b"plain words") == "application/octet-stream"
    assert sniff_mime_type(b"") == "application/octet-stream"


def test_validate_mime_type_allow_list():
    assert validate_mime_type("image/webp") == "image/webp"
    assert validate_mime_type("application/pdf") == "application/pdf"
    with pytest.raises(InvalidInputError, match="Unsupported MIME type for file: text/plain"):
        validate_mime_type("text/plain")


def test_explicit_mime_type_wins_over_prefix():
    assert resolve_base64_mime_type("data:image/png;base64,AAAA", "image/jpeg") == "image/jpeg"


def test_base64_without_prefix_or_annotation_requires_mime_type():
    with pytest.raises(InvalidInputError, match="MIME type is required"):
        resolve_base64_mime_type("iVBORw0KGgo")


def test_content_mime_type_is_decided_by_the_bytes_alone():
    assert resolve_content_mime_type(PNG_BYTES, source="notes.txt") == "image/png"
    assert resolve_content_mime_type(PDF_BYTES, source="https://example.com/paper") == "application/pdf"


@pytest.mark.parametrize("data, source", [
    (b"plain words", "fake.png"),
    (b"", "https://example.com/x.png"),
    (b"<html></html>", "page.pdf"),
])
def test_content_mime_type_rejects_unrecognized_bytes_whatever_the_name(data, source):
    with pytest.raises(InvalidInputError, match="application/octet-stream"):
        resolve_content_mime_type(data, source=source)
