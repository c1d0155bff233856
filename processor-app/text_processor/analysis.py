"""Validation and analysis of uploaded plain-text payloads.

Everything here is pure: the functions take the request body and the declared
content type and either return an ``AnalysisResult`` or raise one of the
``TextValidationError`` subclasses. Persistence is left to the caller.
"""

import base64
import binascii
import re

from text_processor.exceptions import (
    EmptyPayloadError,
    InvalidContentTypeError,
    InvalidEncodingError,
    MissingPayloadError,
    NoTextContentError,
    PayloadTooLargeError,
    WhitespaceOnlyError,
)
from text_processor.models import AnalysisResult

MAX_PAYLOAD_BYTES = 1024 * 1024
MAX_STORED_CHARS = 1000
TRUNCATION_MARKER = "..."
PLAIN_TEXT = "text/plain"

# U+FEFF counts as whitespace, so a byte order mark never survives trimming.
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")
_WORD_SEPARATOR = re.compile(r"[\s\ufeff]+")


def _trim(text: str) -> str:
    return _EDGE_WHITESPACE.sub("", text)


def is_plain_text(content_type: str | None) -> bool:
    """Return True when the declared content type denotes plain text."""
    return bool(content_type) and PLAIN_TEXT in content_type.lower()


def decode_payload(body: bytes, base64_encoded: bool = False) -> bytes:
    """Return the payload bytes, undoing a base64 transport encoding if flagged.

    Raises:
        InvalidEncodingError: if the body is flagged as base64 but malformed.
    """
    if not base64_encoded:
        return body
    try:
        return base64.b64decode(body)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError() from exc


def normalize_text(raw: str) -> str:
    """Unify line endings to ``\\n`` and strip outer whitespace."""
    return _trim(raw.replace("\r\n", "\n").replace("\r", "\n"))


def count_words(text: str) -> int:
    return sum(1 for token in _WORD_SEPARATOR.split(text) if token)


def count_lines(text: str) -> int:
    return sum(1 for line in text.split("\n") if _trim(line))


def truncate_for_storage(text: str, limit: int = MAX_STORED_CHARS) -> str:
    """Cap text at ``limit`` characters, appending a marker when cut."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_MARKER


def validate_and_analyze(
    body: bytes | None,
    content_type: str | None,
    base64_encoded: bool = False,
) -> AnalysisResult:
    """Validate an uploaded payload and compute its word and line counts.

    Checks run in a fixed order and the first failure wins: missing body,
    content type, encoding, empty payload, size limit, whitespace-only text,
    and finally an empty analysis.

    Args:
        body: Raw request body as received.
        content_type: Declared ``Content-Type`` header, if any.
        base64_encoded: Whether ``body`` is base64 text rather than raw bytes.

    Raises:
        TextValidationError: the specific subclass for the violated check.
    """
    if not body:
        raise MissingPayloadError()

    if not is_plain_text(content_type):
        raise InvalidContentTypeError()

    payload = decode_payload(body, base64_encoded)

    if len(payload) == 0:
        raise EmptyPayloadError()

    if len(payload) > MAX_PAYLOAD_BYTES:
        raise PayloadTooLargeError(len(payload))

    raw_text = payload.decode("utf-8", errors="replace")
    if not _trim(raw_text):
        raise WhitespaceOnlyError()

    normalized = normalize_text(raw_text)
    word_count = count_words(normalized)
    line_count = count_lines(normalized)

    # Unreachable while the counters share _trim's notion of whitespace.
    if word_count == 0 and line_count == 0:
        raise NoTextContentError()

    return AnalysisResult(
        normalized_text=normalized,
        text_content=truncate_for_storage(normalized),
        word_count=word_count,
        line_count=line_count,
    )
