"""
Fixed-width text chunker.

Splits text into consecutive, non-overlapping windows of a fixed number of
characters. Joining the windows in order gives back the input exactly.

Dependencies: None
System role: Chunking stage of the retrieval pipeline
"""

DEFAULT_CHUNK_SIZE = 500


def chunk_text(text: str, size: int = DEFAULT_CHUNK_SIZE) -> list[str]:
    """
    Split text into fixed-size chunks.

    Windows may split words; only the last one can be shorter than ``size``.

    Args:
        text: Source text
        size: Characters per chunk

    Returns:
        list[str]: Ordered chunks, empty for empty text

    Raises:
        ValueError: When size is not positive
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")

    return [text[i:i + size] for i in range(0, len(text), size)]
