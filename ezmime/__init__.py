"""EZMime package initialization module.

This package builds well-formed RFC 5322 / MIME e-mail messages and sends
them over SMTP. Messages carry a sender, recipients, a subject, a plain
text or HTML body and file attachments; they are serialized with base64
bodies, RFC 2047 encoded headers and `multipart/mixed` framing whenever
attachments are present.

Modules:
    message (module): The `Message` builder and its serializer.
    models (module): `Recipient`, `Attachment` and `TextType` value types.
    codec (module): Base64 encoding with line wrapping.
    headers (module): Header formatting and encoded words.
    boundary (module): Multipart boundary generation.
    reply_codes (module): SMTP reply code lookup.
    sender (module): SMTP delivery of serialized messages.
    utils (module): Validation helpers for files and configuration.

Example:
    from ezmime import MailSender, Message, Recipient

    message = Message()
    message.add_recipient(Recipient("recipient@domain.com", "Recipient"))
    message.set_subject("Hello!")
    message.set_text("This is a test email.")
    message.add_file("report.pdf")

    smtp = {"server": "smtp.domain.com", "port": 587}
    sender = {"email": "me@domain.com", "password": "secret"}
    MailSender(smtp, sender).send(message)
"""

from .message import Message
from .models import Attachment, Recipient, TextType
from .reply_codes import ReplyCode
from .sender import MailSender, SendError

__all__ = ["Attachment", "MailSender", "Message", "Recipient", "ReplyCode", "SendError", "TextType"]
