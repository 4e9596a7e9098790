"""Tests for multipart encoding and header precedence."""

from billbridge.infrastructure.http.multipart import encode_multipart, merge_headers


class TestEncodeMultipart:
    def test_single_attachment_part(self):
        body = encode_multipart(b"Hello, World!", "test.txt", "text/plain")

        assert body.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert body.headers["Content-Length"] == str(len(body.content))
        assert b'name="attachment"; filename="test.txt"' in body.content
        assert b"Content-Type: text/plain" in body.content
        assert b"\r\n\r\nHello, World!\r\n" in body.content
        assert body.content.rstrip().endswith(f"--{body.boundary}--".encode())

    def test_binary_content_kept_intact(self):
        payload = bytes(range(256)) * 4
        body = encode_multipart(payload, "blob.bin", "application/octet-stream")
        assert payload in body.content

    def test_boundary_differs_per_body(self):
        first = encode_multipart(b"x", "a.txt", "text/plain")
        second = encode_multipart(b"x", "a.txt", "text/plain")
        assert first.boundary != second.boundary


class TestMergeHeaders:
    FRAMING = {"Content-Type": "multipart/form-data; boundary=abc", "Content-Length": "42"}

    def test_framing_wins_over_conflicting_caller_headers(self):
        merged = merge_headers(
            self.FRAMING,
            {"content-type": "application/json", "CONTENT-LENGTH": "1", "Authorization": "Bearer t"},
        )

        assert merged == {
            "Authorization": "Bearer t",
            "Content-Type": "multipart/form-data; boundary=abc",
            "Content-Length": "42",
        }

    def test_other_caller_headers_pass_through_unchanged(self):
        caller = {"Authorization": "Zoho-oauthtoken abc", "Accept": "*/*", "X-Custom-Header": "value"}
        merged = merge_headers(self.FRAMING, caller)
        for name, value in caller.items():
            assert merged[name] == value

    def test_no_caller_headers(self):
        assert merge_headers(self.FRAMING, None) == self.FRAMING
