from base64 import b64decode

import pytest

from ezmime import Recipient
from ezmime.headers import encode_header_value, encode_parameter_value, format_address, format_header


class TestEncodeHeaderValue:
    @pytest.mark.parametrize("text", ["", "Hi", "Monthly report: 100% done", "a@x.com"])
    def test_ascii_is_unchanged(self, text):
        assert encode_header_value(text) == text

    @pytest.mark.parametrize("text", ["Bó", "Relatório mensal", "日本語", "emoji 🎉"])
    def test_non_ascii_becomes_encoded_word(self, text):
        encoded = encode_header_value(text)

        assert encoded.startswith("=?UTF-8?B?")
        assert encoded.endswith("?=")
        inner = encoded[len("=?UTF-8?B?"):-len("?=")]
        assert b64decode(inner).decode("utf-8") == text

    @pytest.mark.parametrize("text", ["Hi\r\nBcc: evil@x.com", "line\nbreak", "bell\x07", "del\x7f"])
    def test_control_characters_are_encoded(self, text):
        encoded = encode_header_value(text)

        assert encoded.startswith("=?UTF-8?B?")
        assert "\r" not in encoded and "\n" not in encoded
        assert b64decode(encoded[len("=?UTF-8?B?"):-len("?=")]).decode("utf-8") == text

    def test_tab_is_kept(self):
        assert encode_header_value("a\tb") == "a\tb"

    def test_long_value_is_a_single_word(self):
        encoded = encode_header_value("ç" * 200)
        assert encoded.count("=?UTF-8?B?") == 1
        assert "\r\n" not in encoded


class TestFormatting:
    def test_format_header(self):
        assert format_header("Subject", "Hi") == "Subject: Hi\r\n"

    def test_address_without_name(self):
        assert format_address(Recipient("b@y.com")) == "<b@y.com>"

    def test_address_with_ascii_name(self):
        assert format_address(Recipient("b@y.com", "Bob")) == "Bob <b@y.com>"

    def test_address_with_non_ascii_name(self):
        assert format_address(Recipient("b@y.com", "Bó")) == "=?UTF-8?B?QsOz?= <b@y.com>"

    def test_address_name_with_line_break_is_encoded(self):
        rendered = format_address(Recipient("b@y.com", "Bob\r\nBcc: evil@x.com"))
        assert rendered.startswith("=?UTF-8?B?")
        assert "\n" not in rendered


class TestEncodeParameterValue:
    def test_plain_filename_is_unchanged(self):
        assert encode_parameter_value("report.pdf") == "report.pdf"

    @pytest.mark.parametrize("filename", ["relatório.pdf", 'say "hi".txt', "back\\slash.txt", "a\r\nb.txt"])
    def test_unsafe_filenames_are_encoded(self, filename):
        encoded = encode_parameter_value(filename)

        assert encoded.startswith("=?UTF-8?B?")
        assert encoded.isascii()
        assert '"' not in encoded and "\\" not in encoded
        assert b64decode(encoded[len("=?UTF-8?B?"):-len("?=")]).decode("utf-8") == filename
