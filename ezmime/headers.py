"""Header formatting and RFC 2047 encoded words."""

from base64 import b64encode

from .codec import CRLF
from .models import Recipient

ENCODED_WORD_PREFIX = "=?UTF-8?B?"
ENCODED_WORD_SUFFIX = "?="


def _is_printable_ascii(text: str) -> bool:
    # TAB is the only control character allowed to stay literal
    return text.isascii() and not any((ord(c) < 32 and c != "\t") or c == "\x7f" for c in text)


def _encoded_word(text: str) -> str:
    payload = b64encode(text.encode("utf-8")).decode("ascii")
    return f"{ENCODED_WORD_PREFIX}{payload}{ENCODED_WORD_SUFFIX}"


def encode_header_value(text: str) -> str:
    """Encodes a header value as an RFC 2047 encoded word when needed.

    Printable ASCII text is returned unchanged. Anything else, including
    ASCII text carrying CR, LF or other control characters, becomes a single
    `=?UTF-8?B?...?=` word over the UTF-8 bytes of the text. Long values
    are not split into several words, so very long non-ASCII subjects can
    exceed the recommended header line length.

    Args:
        text (str): Header value.

    Returns:
        str: The value, safe to place in a header line.
    """
    if _is_printable_ascii(text):
        return text
    return _encoded_word(text)


def encode_parameter_value(text: str) -> str:
    """Encodes a quoted header parameter such as an attachment filename.

    Like `encode_header_value`, but double quotes and backslashes also force
    an encoded word so the value cannot end the quoted string early.
    """
    if '"' in text or "\\" in text:
        return _encoded_word(text)
    return encode_header_value(text)


def format_header(name: str, value: str) -> str:
    """Renders one header line.

    Args:
        name (str): Header field name, e.g. `"Subject"`.
        value (str): Already encoded field value.

    Returns:
        str: `"Name: value"` terminated by CRLF.
    """
    return f"{name}: {value}{CRLF}"


def format_address(recipient: Recipient) -> str:
    """Renders a recipient as `Name <address>` or `<address>`."""
    if recipient.name is not None:
        return f"{encode_header_value(recipient.name)} <{recipient.address}>"
    return f"<{recipient.address}>"
