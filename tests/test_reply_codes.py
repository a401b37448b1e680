import pytest

from ezmime import ReplyCode


class TestReplyCode:
    @pytest.mark.parametrize(
        "code, expected",
        [
            (220, ReplyCode.SERVICE_READY),
            (221, ReplyCode.QUIT),
            (250, ReplyCode.MAIL_ACTION_OKAY),
            (334, ReplyCode.AUTH_CONTINUE),
            (354, ReplyCode.START_INPUT),
            (421, ReplyCode.SERVICE_UNAVAILABLE),
            (503, ReplyCode.BAD_SEQUENCE_OF_COMMANDS),
            (535, ReplyCode.AUTH_FAILURE),
            (554, ReplyCode.TRANSACTION_FAILED),
        ],
    )
    def test_known_codes(self, code, expected):
        assert ReplyCode.find(code) is expected
        assert ReplyCode.find(code).code == code

    @pytest.mark.parametrize("code", [0, 199, 299, 451, 999, -5, "250", None])
    def test_unknown_codes_map_to_sentinel(self, code):
        assert ReplyCode.find(code) is ReplyCode.UNKNOWN

    def test_constructor_is_total(self):
        assert ReplyCode(999) is ReplyCode.UNKNOWN

    def test_is(self):
        assert ReplyCode.MAIL_ACTION_OKAY.is_(250)
        assert not ReplyCode.MAIL_ACTION_OKAY.is_(550)

    def test_is_positive(self):
        assert ReplyCode.START_INPUT.is_positive
        assert not ReplyCode.MAIL_ACTION_FAIL.is_positive
        assert not ReplyCode.UNKNOWN.is_positive
