import pytest

from ezmime.utils import validate_protocol_config, validate_sender


class TestValidateProtocolConfig:
    def test_valid(self):
        validate_protocol_config({"server": "smtp.domain.com", "port": 587})

    @pytest.mark.parametrize(
        "config",
        [
            None,
            {},
            {"server": "smtp.domain.com"},
            {"server": "", "port": 587},
            {"server": "smtp.domain.com", "port": "587"},
            {"server": "smtp.domain.com", "port": 70000},
            {"server": "smtp.domain.com", "port": True},
        ],
    )
    def test_invalid(self, config):
        with pytest.raises(ValueError):
            validate_protocol_config(config)


class TestValidateSender:
    def test_valid(self):
        validate_sender({"email": "me@domain.com", "password": "secret"})

    @pytest.mark.parametrize("sender", [[], {"email": "me@domain.com"}, {"email": 1, "password": "x"}])
    def test_invalid(self, sender):
        with pytest.raises(ValueError):
            validate_sender(sender)
