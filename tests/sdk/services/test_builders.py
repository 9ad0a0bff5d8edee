import json

import httpx
import pytest

from goget import (
    InvalidURLError,
    MalformedBodyError,
    Req,
    build_request,
    build_response,
    resolve_url,
)


class TestBuildRequest:
    def test_templates_url_and_serializes_body(self):
        req = Req(
            url="http://{hostname}/posts/{id}",
            method="post",
            params={"hostname": "localhost", "id": 7},
            data={"title": "Hello"},
            headers={"x-api-key": "abc"},
        )

        request = build_request(req)

        assert request.method == "POST"
        assert request.url == "http://localhost/posts/7"
        assert request.content == b'{"title":"Hello"}'
        assert request.headers["x-api-key"] == "abc"

    def test_no_content_type_is_added(self):
        request = build_request(Req(url="http://a.test", method="POST", data=[1]))
        assert "content-type" not in request.headers

    def test_no_body_without_data(self):
        request = build_request(Req(url="http://a.test"))
        assert request.content == b""

    def test_falsy_data_is_sent(self):
        assert build_request(Req(url="http://a.test", data=0)).content == b"0"
        assert build_request(Req(url="http://a.test", data={})).content == b"{}"

    def test_non_ascii_body_is_utf8(self):
        request = build_request(Req(url="http://a.test", data={"name": "Zoë"}))
        assert json.loads(request.content.decode("utf-8")) == {"name": "Zoë"}

    def test_arbitrary_method(self):
        assert build_request(Req(url="http://a.test", method="purge")).method == "PURGE"

    def test_missing_param_keeps_placeholder_name(self):
        request = build_request(Req(url="http://{hostname}/v1"))
        assert request.url == "http://hostname/v1"

    def test_custom_encoder_is_used(self):
        def encode_id(value):
            return f"id-{value}"

        req = Req(url="http://a.test/{id}", params={"id": 3}, encode=encode_id)
        assert build_request(req).url == "http://a.test/id-3"

    def test_relative_url_requires_base(self):
        with pytest.raises(InvalidURLError) as exc_info:
            build_request(Req(url="/users"))
        assert exc_info.value.url == "/users"

    def test_relative_url_with_base(self):
        request = build_request(Req(url="users/{id}", params={"id": 1}), base_url="http://a.test/v1/")
        assert request.url == "http://a.test/v1/users/1"

    def test_empty_url_is_invalid(self):
        with pytest.raises(InvalidURLError):
            build_request(Req())

    def test_resolve_url(self):
        url = resolve_url(Req(url="https://{host}", params={"host": "b.test"}))
        assert isinstance(url, httpx.URL)
        assert url.host == "b.test"


class TestBuildResponse:
    @pytest.mark.anyio
    async def test_builds_descriptor(self):
        req = Req(url="http://localhost", method="POST")
        response = httpx.Response(
            201,
            json={"id": 1, "title": "Hello"},
            headers={"X-Response-Time": "99"},
            request=httpx.Request("POST", "http://localhost/?test=1"),
        )

        resp = await build_response(response, req)

        assert resp.status == 201
        assert resp.url == "http://localhost/?test=1"
        assert resp.data == {"id": 1, "title": "Hello"}
        assert resp.headers["x-response-time"] == "99"
        assert all(key == key.lower() for key in resp.headers)
        assert resp.req is req

    @pytest.mark.anyio
    async def test_malformed_body(self):
        response = httpx.Response(
            200,
            content=b"<html>not json</html>",
            request=httpx.Request("GET", "http://a.test"),
        )

        with pytest.raises(MalformedBodyError) as exc_info:
            await build_response(response, Req(url="http://a.test"))

        assert exc_info.value.status_code == 200
        assert exc_info.value.body == "<html>not json</html>"

    @pytest.mark.anyio
    async def test_empty_body_is_malformed(self):
        response = httpx.Response(204, request=httpx.Request("GET", "http://a.test"))

        with pytest.raises(MalformedBodyError):
            await build_response(response, Req(url="http://a.test"))
