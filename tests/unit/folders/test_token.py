"""Unit tests for folders/token.py — page token encoding and validation."""

import base64

import pytest

from org_folders.folders.token import InvalidTokenError, decode_token, encode_token


def _b64(payload: bytes) -> str:
    return base64.urlsafe_b64encode(payload).decode("ascii")


class TestEncodeToken:
    def test_encodes_decimal_offset_as_base64(self) -> None:
        assert encode_token(5) == "NQ=="
        assert encode_token(10) == "MTA="

    def test_zero_offset(self) -> None:
        assert decode_token(encode_token(0)) == 0

    def test_large_offset(self) -> None:
        assert decode_token(encode_token(10**30)) == 10**30

    def test_negative_offset_raises(self) -> None:
        with pytest.raises(ValueError):
            encode_token(-1)


class TestDecodeToken:
    def test_decodes_standard_padding(self) -> None:
        assert decode_token("NQ==") == 5

    def test_literal_invalid_token_is_rejected(self) -> None:
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_token("invalidToken")
        assert exc_info.value.token == "invalidToken"

    def test_non_base64_characters_rejected(self) -> None:
        with pytest.raises(InvalidTokenError):
            decode_token("not base64!")

    def test_bad_padding_rejected(self) -> None:
        with pytest.raises(InvalidTokenError):
            decode_token("NQ=")

    def test_non_ascii_input_rejected(self) -> None:
        with pytest.raises(InvalidTokenError):
            decode_token("NQ==é")

    def test_offset_beyond_int_conversion_limit_rejected(self) -> None:
        token = _b64(b"9" * 5000)

        with pytest.raises(InvalidTokenError) as exc_info:
            decode_token(token)
        assert exc_info.value.token == token

    @pytest.mark.parametrize(
        "payload",
        [b"-1", b"abc", b" 5", b"+5", b"5_0", b"1.5", b"", "٥".encode()],
    )
    def test_non_decimal_payload_rejected(self, payload: bytes) -> None:
        with pytest.raises(InvalidTokenError):
            decode_token(_b64(payload))

    def test_invalid_token_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="invalid token"):
            decode_token("@@@@")
