"""
Tests for the base64 codec.

Decoding is intentionally permissive: malformed input yields the bytes
that can be recovered rather than an error.
"""

import base64
import os

import pytest

from billbridge.application.codec import decode_base64, encode_base64


class TestDecodeValidInput:
    @pytest.mark.parametrize(
        "data",
        [b"", b"a", b"ab", b"abc", b"Hello, World!", bytes(range(256)), os.urandom(1000)],
    )
    def test_reconstructs_original_bytes(self, data):
        assert decode_base64(base64.b64encode(data).decode()) == data

    def test_reencoding_gives_normalized_input(self):
        text = base64.b64encode(b"%PDF-1.7 fake pdf").decode()
        assert encode_base64(decode_base64(text)) == text

    def test_missing_padding_is_accepted(self):
        assert decode_base64("SGVsbG8") == b"Hello"

    def test_whitespace_and_newlines_ignored(self):
        wrapped = "SGVs\nbG8s\r\nIFdv cmxk IQ=="
        assert decode_base64(wrapped) == b"Hello, World!"

    def test_urlsafe_alphabet_accepted(self):
        data = b"\xfb\xff\xbf"
        assert decode_base64(base64.urlsafe_b64encode(data).decode()) == data


class TestDecodeIsPermissive:
    """Malformed input never raises."""

    def test_invalid_characters_are_skipped(self):
        result = decode_base64("invalid-base64!!!")
        assert isinstance(result, bytes)
        assert len(result) > 0

    def test_stops_at_first_padding(self):
        assert decode_base64("SGk=garbage") == b"Hi"

    def test_dangling_character_is_dropped(self):
        # 5 chars: the last one carries only 6 bits and is discarded
        assert decode_base64("QUJDR") == b"ABC"

    @pytest.mark.parametrize("text", ["", "!!!!", "====", "a", "é€"])
    def test_never_raises(self, text):
        assert isinstance(decode_base64(text), bytes)


def test_encode_is_standard_padded():
    assert encode_base64(b"Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="
