"""Base64 codec with fixed-width line wrapping for MIME bodies."""

from base64 import b64encode

CRLF = "\r\n"
MAX_LINE_LENGTH = 76


def wrap(text: str, width: int = MAX_LINE_LENGTH) -> str:
    """Splits text into lines of `width` characters joined by CRLF.

    The last line carries no terminator; callers framing a MIME part
    append the final CRLF themselves.

    Args:
        text (str): Text to wrap, usually base64 output.
        width (int, optional): Maximum line length. Defaults to `MAX_LINE_LENGTH`.

    Returns:
        str: The wrapped text.
    """
    if len(text) <= width:
        return text
    return CRLF.join(text[i:i + width] for i in range(0, len(text), width))


def encode(data: bytes) -> str:
    """Encodes bytes as standard padded base64, wrapped to `MAX_LINE_LENGTH`.

    Example:
        >>> encode(b"Hello")
        'SGVsbG8='
    """
    return wrap(b64encode(data).decode("ascii"))
