"""Tests for bundled.http.headers: immutable, case-insensitive Headers."""

from bundled.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    return Headers.from_pairs(*pairs)


class TestHeaders:
    def test_getitem_case_insensitive(self) -> None:
        h = _h(("If-Modified-Since", "Fri, 01 Mar 2024 12:00:00 GMT"))
        assert h["if-modified-since"] == "Fri, 01 Mar 2024 12:00:00 GMT"
        assert h["IF-MODIFIED-SINCE"] == "Fri, 01 Mar 2024 12:00:00 GMT"

    def test_get_missing(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "ACCEPT" in h
        assert "x-missing" not in h
        assert 42 not in h

    def test_first_value_wins(self) -> None:
        h = _h(("Accept", "text/css"), ("accept", "*/*"))
        assert h["accept"] == "text/css"
        assert h.get_all("Accept") == ["text/css", "*/*"]

    def test_get_all_missing(self) -> None:
        assert _h().get_all("accept") == []

    def test_iter_and_len(self) -> None:
        h = _h(("Accept", "a"), ("Host", "b"), ("ACCEPT", "c"))
        assert list(h) == ["accept", "host"]
        assert len(h) == 2

    def test_from_raw_bytes(self) -> None:
        h = Headers(((b"Host", b"example.com"),))
        assert h["host"] == "example.com"

    def test_repr(self) -> None:
        assert repr(_h(("Host", "x"))) == "Headers({'host': 'x'})"
