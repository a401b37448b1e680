import pytest

from ezmime import Attachment, Message, Recipient

BOUNDARY = "----=_MailPart123.456"


@pytest.fixture
def message() -> Message:
    """A message with a fixed boundary token."""
    return Message(boundary_factory=lambda: BOUNDARY)


@pytest.fixture
def recipient() -> Recipient:
    return Recipient("b@y.com", "Bó")


@pytest.fixture
def text_attachment() -> Attachment:
    return Attachment("a.txt", "text/plain", b"abc")
