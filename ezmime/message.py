import logging
from mimetypes import guess_type
from typing import Callable

from jinja2 import Template  # type: ignore

from . import codec
from .boundary import generate_boundary
from .codec import CRLF
from .headers import encode_header_value, encode_parameter_value, format_address, format_header
from .models import Attachment, MimeProvider, Recipient, TextType
from .utils import validate_template

logger = logging.getLogger(__name__)


class Message:
    """Builds an RFC 5322 / MIME message and serializes it for SMTP.

    A message starts out single-part: its content type is the MIME type
    of the body text. Adding the first attachment switches it, once and for
    good, to `multipart/mixed` with a freshly generated boundary. Body text
    and attachments are always sent base64 encoded, and non-ASCII header
    text is sent as RFC 2047 encoded words.

    Instances are not thread-safe.

    Example:
        message = Message()
        message.set_from("me@domain.com")
        message.add_recipient(Recipient("you@domain.com", "Jöhn"))
        message.set_subject("Monthly report")
        message.set_text("Please find the report attached.")
        message.add_file("reports/monthly_report.pdf")
        raw = message.serialize()
    """

    def __init__(
        self,
        boundary_factory: Callable[[], str] = generate_boundary,
        mime_provider: MimeProvider | None = guess_type,
    ):
        """Initializes an empty message.

        Args:
            boundary_factory (callable, optional): Produces the multipart boundary
                token. Called at most once, on the first attachment.
            mime_provider (callable, optional): `mimetypes.guess_type`-like lookup
                used by `add_file` when no media type is given.
        """
        self.boundary_factory = boundary_factory
        self.mime_provider = mime_provider

        self.sender = None
        self.recipients: list[Recipient] = []
        self.subject = None
        self.text = None
        self.text_type = TextType.PLAIN
        self.attachments: list[Attachment] = []
        self._boundary = None

    @property
    def boundary(self) -> str | None:
        """The multipart boundary token, or `None` while single-part."""
        return self._boundary

    @property
    def is_multipart(self) -> bool:
        return self._boundary is not None

    @property
    def content_type(self) -> str:
        if self.is_multipart:
            return f'multipart/mixed; boundary="{self._boundary}"'
        return self.text_type.mime

    def set_from(self, address: str) -> None:
        """Sets the `From` header. The address is passed through verbatim."""
        self.sender = address

    def add_recipient(self, recipient: Recipient | str, name: str | None = None) -> None:
        """Appends a recipient to the `To` header.

        Args:
            recipient (Recipient | str): A `Recipient`, or a bare address.
            name (str, optional): Display name, used only with a bare address.

        Example:
            add_recipient(Recipient("user@domain.com", "User"))
            add_recipient("user@domain.com", "User")
        """
        if not isinstance(recipient, Recipient):
            recipient = Recipient(recipient, name)
        self.recipients.append(recipient)

    def set_subject(self, text: str) -> None:
        """Sets the subject, sent as an encoded word when it is not printable ASCII."""
        self.subject = text

    def set_text(self, text: str, text_type: TextType = TextType.PLAIN) -> None:
        """Sets the body text.

        Args:
            text (str): Body content.
            text_type (TextType, optional): `PLAIN` or `HTML`. Defaults to `PLAIN`.

        Raises:
            ValueError: If `text` is not a string.
        """
        if not isinstance(text, str):
            raise ValueError("Text must be a string.")
        self.text_type = text_type
        self.text = text

    def use_template(self, file: str, text_type: TextType = TextType.HTML, **variables) -> None:
        """Renders a Jinja2 template file into the body text.

        Args:
            file (str): Path to the template.
            text_type (TextType, optional): Body kind. Defaults to `HTML`.
            **variables: Values for the template placeholders.

        Raises:
            ValueError: If the file is not a valid template.
            FileNotFoundError: If the file does not exist.

        Example:
            use_template("templates/welcome.html", name="John")
        """
        validate_template(file)

        with open(file, "r", encoding="utf-8") as f:
            text = Template(f.read()).render(**variables)
        self.set_text(text, text_type)

    def add_attachment(self, attachment: Attachment) -> bool:
        """Appends an attachment, switching the message to multipart on first use.

        Returns:
            bool: Whether the attachment was added. Always `True`.
        """
        if self._boundary is None:
            self._boundary = self.boundary_factory()
            logger.debug("Message switched to multipart with boundary %s", self._boundary)

        self.attachments.append(attachment)
        logger.debug("Attached %s (%s, %d bytes)", attachment.filename, attachment.media_type, len(attachment.data))
        return True

    def add_file(self, path: str, filename: str | None = None, media_type: str | None = None) -> bool:
        """Loads a file from disk and attaches it.

        Loading errors propagate before the message is touched.

        Args:
            path (str): Path to the file.
            filename (str, optional): Name to announce. Defaults to the basename.
            media_type (str, optional): MIME type. Guessed when omitted.

        Returns:
            bool: Result of `add_attachment`.

        Raises:
            ValueError: If the media type cannot be determined.
            FileNotFoundError: If the file does not exist.
        """
        attachment = Attachment.from_path(path, filename, media_type, self.mime_provider)
        return self.add_attachment(attachment)

    def _delimiter(self, closing: bool = False) -> str:
        if self._boundary is None:
            return ""
        return f"--{self._boundary}{'--' if closing else ''}{CRLF}"

    def serialize(self) -> str:
        """Serializes the message into its wire form.

        Attachments are emitted before the body text. The result uses CRLF
        line endings. `From` and `To` addresses are passed through verbatim,
        everything else is ASCII by construction.

        Returns:
            str: Headers and body of the complete message.
        """
        parts = []

        if self.sender is not None:
            parts.append(format_header("From", self.sender))

        to = ",".join(format_address(recipient) for recipient in self.recipients)
        parts.append(format_header("To", to))

        if self.subject is not None:
            parts.append(format_header("Subject", encode_header_value(self.subject)))

        parts.append(format_header("Content-Type", self.content_type))
        parts.append(format_header("MIME-Version", "1.0"))
        parts.append(CRLF)

        for attachment in self.attachments:
            filename = encode_parameter_value(attachment.filename)
            parts.append(self._delimiter())
            parts.append(format_header("Content-Type", f'{attachment.media_type}; name="{filename}"'))
            parts.append(format_header("Content-Transfer-Encoding", "base64"))
            parts.append(format_header("Content-Disposition", f'attachment; filename="{filename}"'))
            parts.append(CRLF)
            parts.append(codec.encode(attachment.data))
            parts.append(CRLF)

        if self.text is not None:
            parts.append(self._delimiter())
            parts.append(format_header("Content-Type", f"{self.text_type.mime}; charset=utf-8"))
            parts.append(format_header("Content-Transfer-Encoding", "base64"))
            parts.append(CRLF)
            parts.append(codec.encode(self.text.encode("utf-8")))
            parts.append(CRLF)

        parts.append(self._delimiter(closing=True))
        return "".join(parts)

    def as_bytes(self) -> bytes:
        """Returns the serialized message as ASCII bytes for SMTP `DATA`.

        Raises:
            UnicodeEncodeError: If a `From` or `To` address is not ASCII.
        """
        return self.serialize().encode("ascii")

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"<Message from={self.sender!r} subject={self.subject!r} "
            f"recipients={len(self.recipients)} attachments={len(self.attachments)}>"
        )
