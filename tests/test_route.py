"""Tests for mockroute.routing.route — descriptors and pre-rendered routes."""

import json

import pytest

from mockroute.errors import ConfigurationError
from mockroute.latency import Latency
from mockroute.routing.route import (
    DEFAULT_CONTENT_TYPE,
    RenderedRoute,
    RouteDescriptor,
    merge_headers,
    render_body,
    validate_header,
)


class TestRouteDescriptor:
    def test_defaults(self) -> None:
        desc = RouteDescriptor("/ping")

        assert desc.status_code == 200
        assert dict(desc.headers) == {}
        assert desc.body is None
        assert desc.latency == Latency(0, 0)

    def test_frozen(self) -> None:
        desc = RouteDescriptor("/ping")
        with pytest.raises(AttributeError):
            desc.uri = "/pong"  # type: ignore[misc]

    def test_headers_are_read_only(self) -> None:
        source = {"X-A": "1"}
        desc = RouteDescriptor("/ping", headers=source)

        source["X-B"] = "2"

        assert dict(desc.headers) == {"X-A": "1"}
        with pytest.raises(TypeError):
            desc.headers["X-C"] = "3"  # type: ignore[index]


class TestRenderBody:
    def test_none_means_no_body(self) -> None:
        assert render_body(None) is None

    def test_compact_json(self) -> None:
        assert render_body({"a": 1, "b": [1, 2]}) == b'{"a":1,"b":[1,2]}'

    @pytest.mark.parametrize("value", [0, False, "", [], {}])
    def test_falsy_values_still_render(self, value: object) -> None:
        assert render_body(value) == json.dumps(value).encode()

    def test_unicode_is_utf8(self) -> None:
        assert render_body({"msg": "héllo"}) == '{"msg":"héllo"}'.encode()

    def test_unserializable_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            render_body({"s": {1, 2}})

    def test_nan_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            render_body(float("nan"))


class TestMergeHeaders:
    def test_default_only(self) -> None:
        assert merge_headers({}) == (("Content-Type", DEFAULT_CONTENT_TYPE),)

    def test_extra_header_added(self) -> None:
        merged = dict(merge_headers({"X-Custom": "v"}))
        assert merged == {"Content-Type": DEFAULT_CONTENT_TYPE, "X-Custom": "v"}

    def test_same_name_overrides_case_insensitively(self) -> None:
        merged = merge_headers({"content-type": "text/plain"})
        assert merged == (("content-type", "text/plain"),)


class TestValidateHeader:
    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("X-Custom", "value"),
            ("Content-Type", "text/plain"),
            ("X-Latin", "caf\u00e9"),
            ("X-Empty", ""),
        ],
    )
    def test_valid(self, name: str, value: str) -> None:
        validate_header(name, value)

    @pytest.mark.parametrize("name", ["Bad Name", "", "X:Colon", "X-Caf\u00e9", "X\nY"])
    def test_invalid_name(self, name: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid header name"):
            validate_header(name, "v")

    @pytest.mark.parametrize("value", ["a\r\nX-Injected: 1", "line\nbreak", "cr\r"])
    def test_line_breaks_rejected(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="Invalid value"):
            validate_header("X-Custom", value)

    def test_non_latin1_value_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="latin-1"):
            validate_header("X-Mood", "\U0001f600")

    def test_merge_headers_validates(self) -> None:
        with pytest.raises(ConfigurationError):
            merge_headers({"Bad Name": "v"})

class TestRenderedRoute:
    def test_from_descriptor(self) -> None:
        desc = RouteDescriptor("/a", status_code=201, body={"a": 1}, latency=Latency(5, 2))
        route = RenderedRoute.from_descriptor(desc)

        assert route.uri == "/a"
        assert route.body_bytes == b'{"a":1}'
        assert route.latency == Latency(5, 2)
        assert route.headers == (("Content-Type", DEFAULT_CONTENT_TYPE),)

    def test_error_names_route(self) -> None:
        desc = RouteDescriptor("/bad", body=object())
        with pytest.raises(ConfigurationError, match="/bad"):
            RenderedRoute.from_descriptor(desc)

    @pytest.mark.parametrize(
        ("headers", "fragment"),
        [
            ({"Bad Name": "v"}, "Invalid header name"),
            ({"X-Mood": "\U0001f600"}, "latin-1"),
            ({"X-Split": "a\r\nb"}, "Invalid value"),
        ],
    )
    def test_invalid_header_names_route(self, headers: dict[str, str], fragment: str) -> None:
        desc = RouteDescriptor("/hdr", headers=headers)
        with pytest.raises(ConfigurationError) as exc_info:
            RenderedRoute.from_descriptor(desc)
        message = str(exc_info.value)
        assert "/hdr" in message
        assert fragment in message
