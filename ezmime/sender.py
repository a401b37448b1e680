import logging
from copy import copy
from smtplib import SMTP, SMTP_SSL, SMTPException, SMTPRecipientsRefused, SMTPResponseException
from typing import Union

from .message import Message
from .reply_codes import ReplyCode
from .utils import validate_protocol_config, validate_sender

logger = logging.getLogger(__name__)


class SendError(RuntimeError):
    """Raised when the SMTP server cannot be reached or refuses the session.

    Attributes:
        reply (ReplyCode): Classified server reply, `UNKNOWN` when there was none.
    """

    def __init__(self, message: str, reply: ReplyCode = ReplyCode.UNKNOWN):
        super().__init__(message)
        self.reply = reply


def classify(error: Exception) -> ReplyCode:
    """Maps an smtplib exception to a `ReplyCode`."""
    if isinstance(error, SMTPResponseException):
        return ReplyCode.find(error.smtp_code)
    if isinstance(error, SMTPRecipientsRefused) and error.recipients:
        code, _ = next(iter(error.recipients.values()))
        return ReplyCode.find(code)
    return ReplyCode.UNKNOWN


class MailSender:
    """Delivers serialized `Message` objects over SMTP.

    Example:
        smtp = {"server": "smtp.domain.com", "port": 587}
        sender = {"email": "me@domain.com", "password": "secret"}

        mailer = MailSender(smtp, sender)
        result = mailer.send(message)
    """

    def __init__(self, smtp: dict, sender: dict, timeout: float = 30):
        """Initializes the sender with SMTP and credential settings.

        Args:
            smtp (dict): SMTP configuration with keys:
                - `server` (str): SMTP server hostname or IP.
                - `port` (int): Port. 465 uses implicit TLS, anything else STARTTLS.
            sender (dict): Credentials with keys:
                - `email` (str): Login and default envelope sender.
                - `password` (str): Login password.
            timeout (float, optional): Socket timeout in seconds. Defaults to 30.

        Raises:
            ValueError: If either dictionary is invalid.
        """
        validate_protocol_config(smtp)
        validate_sender(sender)

        self.smtp_server = smtp["server"]
        self.smtp_port = smtp["port"]

        self.sender_email = sender["email"]
        self.sender_password = sender["password"]

        self.timeout = timeout

    def _connect(self) -> Union[SMTP, SMTP_SSL]:
        """Opens an authenticated SMTP session.

        Raises:
            SendError: If the connection or authentication fails.
        """
        smtp = None
        try:
            if self.smtp_port == 465:
                smtp = SMTP_SSL(self.smtp_server, self.smtp_port, timeout=self.timeout)
            else:
                smtp = SMTP(self.smtp_server, self.smtp_port, timeout=self.timeout)
                smtp.starttls()

            smtp.login(self.sender_email, self.sender_password)
        except (SMTPException, OSError) as e:
            if smtp is not None:
                smtp.close()
            raise SendError(f"Failed to connect or authenticate to the SMTP server: {e}", classify(e)) from e

        logger.debug("Connected to %s:%s as %s", self.smtp_server, self.smtp_port, self.sender_email)
        return smtp

    def send(self, message: Message, recipients: list[str] | None = None) -> dict:
        """Sends a message to each recipient individually.

        When the message has no `From`, a copy carrying the configured sender
        is sent instead. The caller's message is never modified.

        Args:
            message (Message): The message to send.
            recipients (list[str], optional): Envelope recipients. Defaults to
                the addresses of the message recipients.

        Returns:
            dict: Summary of send results:
                - `"sent"` (list): Accepted addresses.
                - `"failed"` (dict): Rejected addresses mapped to their `ReplyCode`.

        Raises:
            ValueError: If there is nobody to send to.
            SendError: If the SMTP session cannot be established or is lost
                while sending.
        """
        if recipients is None:
            recipients = [recipient.address for recipient in message.recipients]
        if not recipients:
            raise ValueError("Message has no recipients.")

        if message.sender is None:
            message = copy(message)
            message.set_from(self.sender_email)

        payload = message.as_bytes()
        result = {"sent": [], "failed": {}}

        try:
            with self._connect() as smtp:
                for recipient in recipients:
                    try:
                        smtp.sendmail(message.sender, [recipient], payload)
                    except (SMTPRecipientsRefused, SMTPResponseException) as e:
                        reply = classify(e)
                        logger.warning("Server rejected %s: %s", recipient, reply.name)
                        result["failed"][recipient] = reply
                    else:
                        result["sent"].append(recipient)
        except (SMTPException, OSError) as e:
            raise SendError(f"SMTP session failed while sending: {e}", classify(e)) from e

        logger.info("Sent message to %d of %d recipients", len(result["sent"]), len(recipients))
        return result
