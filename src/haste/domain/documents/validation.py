"""Content validation for new documents"""

from .errors import EmptyContentError, ContentTooLargeError


def content_size_bytes(content: str) -> int:
    """Size of content as stored, in UTF-8 bytes

    Example:
        >>> content_size_bytes("abc")
        3
        >>> content_size_bytes("é")
        2
    """
    return len(content.encode("utf-8"))


def is_blank(content: str) -> bool:
    """True for empty or whitespace-only content"""
    return not content or not content.strip()


def validate_content(content: str, max_size: int) -> None:
    """Validate content before it is stored

    Args:
        content: Document text
        max_size: Maximum allowed size in bytes

    Raises:
        EmptyContentError: If content is empty or whitespace-only
        ContentTooLargeError: If content exceeds max_size bytes
    """
    if is_blank(content):
        raise EmptyContentError()

    size_bytes = content_size_bytes(content)
    if size_bytes > max_size:
        raise ContentTooLargeError(size_bytes, max_size)
