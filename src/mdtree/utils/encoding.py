#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/encoding.py
"""Character encoding detection for Markdown read from bytes.

Files and stdin arrive as bytes. Valid UTF-8 is taken as is; anything else
is decoded with a chardet guess and then a fixed list of fallback
encodings, so that a document saved in a legacy encoding still parses
instead of failing.
"""

from __future__ import annotations

import logging
from typing import IO

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS: tuple[str, ...] = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect the character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of leading bytes handed to chardet
    confidence_threshold : float, default 0.7
        Minimum confidence (0.0-1.0) required to trust the guess

    Returns
    -------
    str | None
        Detected encoding name, or None when chardet has no guess or its
        confidence is below the threshold

    """
    sample = data[:sample_size]
    result = chardet.detect(sample)

    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)

    if confidence < confidence_threshold:
        logger.debug("chardet confidence %.2f below threshold %s", confidence, confidence_threshold)
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: list[str] | tuple[str, ...] | None = None,
    use_chardet: bool = True,
) -> str:
    """Decode binary data as text with automatic encoding detection.

    Strategies, in order:
    1. Strict UTF-8, dropping a leading byte order mark
    2. chardet-based detection (when ``use_chardet`` is true)
    3. Each fallback encoding in turn
    4. UTF-8 with replacement characters

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : list or tuple of str, optional
        Encodings to try after detection. Defaults to
        ``("utf-8", "utf-8-sig", "latin-1")``.
    use_chardet : bool, default True
        Whether to try chardet-based detection first

    Returns
    -------
    str
        Decoded text

    Examples
    --------
    >>> read_text_with_encoding_detection("café".encode("latin-1"), use_chardet=False)
    'café'

    """
    if fallback_encodings is None:
        fallback_encodings = DEFAULT_FALLBACK_ENCODINGS

    # Valid UTF-8 wins over any chardet guess
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    if use_chardet:
        detected_encoding = detect_encoding(data)
        if detected_encoding:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError) as e:
                logger.debug("Failed to decode with chardet-detected encoding %s: %s", detected_encoding, e)

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError as e:
            logger.debug("Failed to decode with %s: %s", encoding, e)
            continue
        except LookupError as e:
            logger.debug("Unknown encoding %s: %s", encoding, e)
            continue
        logger.debug("Decoded with encoding: %s", encoding)
        return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream to a string.

    Binary content goes through ``read_text_with_encoding_detection``; text
    content is returned as-is.

    Raises
    ------
    TypeError
        If ``stream.read()`` returns something other than bytes or str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")


__all__ = [
    "DEFAULT_FALLBACK_ENCODINGS",
    "detect_encoding",
    "read_text_with_encoding_detection",
    "normalize_stream_to_text",
]
