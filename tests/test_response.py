"""Tests for bundled.http.response: chainable Response and StreamingResponse."""

from bundled.http.response import Response, StreamingResponse


class ClosableChunks:
    def __init__(self, *chunks: bytes) -> None:
        self.chunks = chunks
        self.closed = False

    def __iter__(self):
        return iter(self.chunks)

    def close(self) -> None:
        self.closed = True


class TestResponse:
    def test_defaults(self) -> None:
        response = Response("hello")
        assert response.status == 200
        assert response.content_type == "text/plain; charset=utf-8"
        assert response.headers == ()

    def test_with_methods_return_new_objects(self) -> None:
        original = Response("x")
        changed = original.with_status(404).with_header("X-A", "1").with_content_type(None)

        assert original.status == 200
        assert original.headers == ()
        assert changed.status == 404
        assert changed.headers == (("X-A", "1"),)
        assert changed.content_type is None

    def test_with_headers(self) -> None:
        response = Response().with_headers({"Expires": "-1", "Pragma": "no-cache"})
        assert response.headers == (("Expires", "-1"), ("Pragma", "no-cache"))

    def test_header_lookup(self) -> None:
        response = Response().with_header("Cache-Control", "public")
        assert response.header("cache-control") == "public"
        assert response.header("pragma") is None

    def test_body_conversions(self) -> None:
        assert Response("é").body_bytes == "é".encode()
        assert Response(b"abc").text == "abc"


class TestStreamingResponse:
    def test_chainable(self) -> None:
        response = StreamingResponse(chunks=[b"a"]).with_status(201).with_header("X-B", "2")

        assert response.status == 201
        assert response.header("x-b") == "2"
        assert response.content_type is None

    def test_close_delegates_to_chunks(self) -> None:
        chunks = ClosableChunks(b"a")
        StreamingResponse(chunks=chunks).close()
        assert chunks.closed

    def test_close_without_closable_chunks(self) -> None:
        StreamingResponse(chunks=[b"a", b"b"]).close()
