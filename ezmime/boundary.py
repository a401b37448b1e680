"""Multipart boundary tokens."""

from secrets import randbelow

BOUNDARY_PREFIX = "----=_MailPart"
MAX_TOKEN_VALUE = 2**31 - 1


def generate_boundary() -> str:
    """Returns a fresh multipart boundary token.

    The token is `BOUNDARY_PREFIX` followed by two independent random
    integers in `[0, 2**31 - 1]` drawn from the OS CSPRNG. Collisions are
    not checked for.

    Example:
        >>> generate_boundary()  # doctest: +SKIP
        '----=_MailPart1804289383.846930886'
    """
    first = randbelow(MAX_TOKEN_VALUE + 1)
    second = randbelow(MAX_TOKEN_VALUE + 1)
    return f"{BOUNDARY_PREFIX}{first}.{second}"
