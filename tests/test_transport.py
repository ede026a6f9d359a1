"""Tests for the httpx-backed transport."""

import logging

import httpx
import pytest

from instagraph.core.exceptions import ApiError, ParsingError
from instagraph.core.transport import HttpTransport, redact

URL = "https://graph.instagram.com/me/?access_token=secret&fields=id"


def make_transport(handler):
    return HttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))


class TestHttpTransport:

    def test_get_json(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "1"})

        with make_transport(handler) as transport:
            assert transport.get_json(URL) == {"id": "1"}

        assert str(seen[0].url) == URL
        assert seen[0].method == "GET"
        assert seen[0].headers["User-Agent"].startswith("instagraph/")

    def test_text_javascript_body_is_decoded(self):
        def handler(request):
            return httpx.Response(200, text='{"id": "1"}', headers={"Content-Type": "text/javascript"})

        assert make_transport(handler).get_json(URL) == {"id": "1"}

    def test_post_form(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "99"})

        result = make_transport(handler).post_form(URL, {"creation_id": "5"})

        assert result == {"id": "99"}
        assert seen[0].method == "POST"
        assert seen[0].content == b"creation_id=5"

    def test_delete_with_empty_body(self):
        def handler(request):
            assert request.method == "DELETE"
            return httpx.Response(204)

        assert make_transport(handler).delete_url(URL) is None

    def test_invalid_json_raises_parsing_error(self):
        transport = make_transport(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(ParsingError):
            transport.get_json(URL)


class TestApiErrors:

    def test_provider_error_object(self):
        body = {
            "error": {
                "message": "Invalid OAuth access token.",
                "type": "OAuthException",
                "code": 190,
                "fbtrace_id": "AbC",
            }
        }
        transport = make_transport(lambda request: httpx.Response(400, json=body))

        with pytest.raises(ApiError) as exc_info:
            transport.get_json(URL)

        error = exc_info.value
        assert error.status_code == 400
        assert error.code == 190
        assert error.error_type == "OAuthException"
        assert error.message == "Invalid OAuth access token."
        assert error.error == body["error"]

    def test_non_json_error_body(self):
        transport = make_transport(lambda request: httpx.Response(502, text="Bad Gateway"))

        with pytest.raises(ApiError) as exc_info:
            transport.get_json(URL)

        assert exc_info.value.status_code == 502
        assert exc_info.value.error == "Bad Gateway"
        assert exc_info.value.code is None

    def test_empty_error_body(self):
        transport = make_transport(lambda request: httpx.Response(404))

        with pytest.raises(ApiError) as exc_info:
            transport.delete_url(URL)

        assert exc_info.value.error is None
        assert "404" in str(exc_info.value)

    def test_error_log_hides_token(self, caplog):
        transport = make_transport(lambda request: httpx.Response(500, json={}))

        with caplog.at_level(logging.DEBUG, logger="instagraph"):
            with pytest.raises(ApiError):
                transport.get_json(URL)

        assert "secret" not in caplog.text
        assert "500" in caplog.text


class TestRedact:

    def test_masks_access_token(self):
        redacted = httpx.URL(redact(URL))
        assert redacted.params["access_token"] == "***"
        assert redacted.params["fields"] == "id"

    def test_leaves_client_id(self):
        url = "https://graph.instagram.com/1/?client_id=abc"
        assert redact(url) == url
