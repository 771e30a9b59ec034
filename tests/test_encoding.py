"""
Tests for encoding helpers.
"""
import pytest

from fetch_request import AuthType, InvalidArgumentError, MissingValueError
from fetch_request.encoding import coerce_to_string, encode_auth, escape_data, mask_value


def test_escape_data():
    assert escape_data("plain") == "plain"
    assert escape_data("a b") == "a%20b"
    assert escape_data("a+b/c?d#e") == "a%2Bb%2Fc%3Fd%23e"
    assert escape_data("日本") == "%E6%97%A5%E6%9C%AC"


def test_coerce_to_string():
    assert coerce_to_string(None) == ""
    assert coerce_to_string(True) == "true"
    assert coerce_to_string(False) == "false"
    assert coerce_to_string(3) == "3"
    assert coerce_to_string("x") == "x"


class TestEncodeAuth:
    def test_basic(self):
        headers = encode_auth("basic", username="alice", password="secret")
        assert headers == {"Authorization": "Basic YWxpY2U6c2VjcmV0"}

    def test_basic_enum(self):
        headers = encode_auth(AuthType.BASIC, username="u", password="p")
        assert headers == {"Authorization": "Basic dTpw"}

    def test_bearer(self):
        assert encode_auth("Bearer", token="sk-123") == {"Authorization": "Bearer sk-123"}

    def test_none(self):
        assert encode_auth("none") == {}

    def test_missing_credentials(self):
        with pytest.raises(MissingValueError):
            encode_auth("basic", username="alice")
        with pytest.raises(MissingValueError):
            encode_auth("bearer")

    def test_unsupported(self):
        with pytest.raises(InvalidArgumentError):
            encode_auth("hmac")


def test_mask_value():
    assert mask_value(None) == "<empty>"
    assert mask_value("short") == "*****"
    assert mask_value("Bearer sk-1234567") == "Bearer sk-*******"
