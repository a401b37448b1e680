"""SMTP reply codes (RFC 5321) used by the transport."""

from enum import IntEnum


class ReplyCode(IntEnum):
    """Known SMTP reply codes.

    Lookup is total: any value that is not a known code maps to `UNKNOWN`.

    Example:
        >>> ReplyCode.find(250)
        <ReplyCode.MAIL_ACTION_OKAY: 250>
        >>> ReplyCode.find(299)
        <ReplyCode.UNKNOWN: -1>
    """

    UNKNOWN = -1
    SERVICE_READY = 220
    QUIT = 221
    AUTH_SUCCESS = 235
    MAIL_ACTION_OKAY = 250
    AUTH_CONTINUE = 334
    START_INPUT = 354
    SERVICE_UNAVAILABLE = 421
    COMMAND_UNRECOGNIZED = 500
    SYNTAX_ERROR = 501
    COMMAND_NOT_IMPLEMENTED = 502
    BAD_SEQUENCE_OF_COMMANDS = 503
    COMMAND_PARAM_NOT_IMPLEMENTED = 504
    ACCESS_DENIED = 530
    AUTH_FAILURE = 535
    MAIL_ACTION_FAIL = 550
    MAIL_ACTION_EXCEEDED_STORAGE = 552
    TRANSACTION_FAILED = 554

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @classmethod
    def find(cls, code) -> "ReplyCode":
        """Looks up the reply code for a numeric server reply.

        Args:
            code (int): Three-digit SMTP reply code.

        Returns:
            ReplyCode: The matching member, or `UNKNOWN` for anything unrecognized.
        """
        try:
            return cls._value2member_map_.get(code, cls.UNKNOWN)
        except TypeError:
            return cls.UNKNOWN

    @property
    def code(self) -> int:
        """The numeric reply code, -1 for `UNKNOWN`."""
        return int(self)

    def is_(self, code: int) -> bool:
        """Whether this member stands for the numeric reply `code`."""
        return self.value == code

    @property
    def is_positive(self) -> bool:
        """Whether the code is a 2xx or 3xx reply."""
        return 200 <= self.value < 400
