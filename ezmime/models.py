"""Value types describing message recipients, attachments and body kinds."""

from dataclasses import dataclass
from enum import Enum
from mimetypes import guess_type
from os.path import basename
from typing import Callable

from .utils import validate_path

MimeProvider = Callable[[str], tuple[str | None, str | None]]


class TextType(Enum):
    """Kinds of body text and their MIME types."""

    PLAIN = "text/plain"
    HTML = "text/html"

    @property
    def mime(self) -> str:
        return self.value


@dataclass(frozen=True)
class Recipient:
    """A single message recipient.

    Attributes:
        address (str): Mailbox address, passed through verbatim.
        name (str | None): Optional display name, may contain non-ASCII text.
    """

    address: str
    name: str | None = None


@dataclass(frozen=True)
class Attachment:
    """A file part of a message.

    Attributes:
        filename (str): Name announced in the part headers.
        media_type (str): MIME type of the payload, e.g. `"application/pdf"`.
        data (bytes): Raw payload.
    """

    filename: str
    media_type: str
    data: bytes

    @classmethod
    def from_path(
        cls,
        path: str,
        filename: str | None = None,
        media_type: str | None = None,
        mime_provider: MimeProvider | None = guess_type,
    ) -> "Attachment":
        """Loads an attachment from disk.

        Args:
            path (str): Path to the file.
            filename (str, optional): Name to announce. Defaults to the basename of `path`.
            media_type (str, optional): MIME type. Guessed with `mime_provider` when omitted.
            mime_provider (callable, optional): `mimetypes.guess_type`-like lookup.

        Returns:
            Attachment: The loaded attachment.

        Raises:
            ValueError: If no media type is given and none can be guessed.
            FileNotFoundError: If the file does not exist.

        Example:
            Attachment.from_path("reports/monthly_report.pdf")
        """
        validate_path(path)

        if media_type is None:
            if mime_provider is None:
                raise ValueError("No media type given and no MIME provider configured.")
            media_type, _ = mime_provider(path)
            if media_type is None:
                raise ValueError(f"Could not determine the media type of '{path}'.")

        with open(path, "rb") as f:
            data = f.read()

        return cls(filename or basename(path), media_type, data)
