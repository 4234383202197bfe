"""Supporting utilities for mdtree."""

from mdtree.utils.encoding import detect_encoding, normalize_stream_to_text, read_text_with_encoding_detection

__all__ = ["detect_encoding", "normalize_stream_to_text", "read_text_with_encoding_detection"]
