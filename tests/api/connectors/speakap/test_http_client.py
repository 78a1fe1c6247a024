"""Testes do cliente da API Speakap contra httpx.MockTransport."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from api.connectors.speakap.api_errors import REQUEST_FAILED_CODE, UNEXPECTED_REPLY_CODE
from api.connectors.speakap.http_base import SpeakapApiConfig
from api.connectors.speakap.http_client import SpeakapApiClient, create_speakap_api_client
from api.connectors.speakap.models import ApiCallOptions
from config.settings import SpeakapSettings

Handler = Callable[[httpx.Request], httpx.Response]


def _client(
    handler: Handler,
    *,
    app_id: str | None = "app",
    app_secret: str | None = "secret",
    **config: object,
) -> tuple[SpeakapApiClient, list[httpx.Request]]:
    captured: list[httpx.Request] = []

    def _recording(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return handler(request)

    api = SpeakapApiClient(
        SpeakapApiConfig(
            scheme=str(config.pop("scheme", "https")),
            hostname="api.speakap.io",
            app_id=app_id,
            app_secret=app_secret,
            transport=httpx.MockTransport(_recording),
            **config,  # type: ignore[arg-type]
        )
    )
    return api, captured


def _json_response(status_code: int, payload: object) -> Handler:
    return lambda request: httpx.Response(status_code, json=payload)


class TestResponseClassification:
    """Classificação por status code."""

    @pytest.mark.asyncio
    async def test_204_returns_true_without_parsing(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204, content=b"not json"))

        result = await api.get("/networks/42/user/7/")

        assert result.ok is True
        assert result.error is None
        assert result.result is True
        assert str(captured[0].url) == "https://api.speakap.io/networks/42/user/7/"

    @pytest.mark.asyncio
    async def test_200_returns_parsed_json(self) -> None:
        api, _ = _client(_json_response(200, {"EID": "7", "name": "Jane"}))

        error, result = await api.get("/networks/42/user/7/")

        assert error is None
        assert result == {"EID": "7", "name": "Jane"}

    @pytest.mark.asyncio
    async def test_201_is_success(self) -> None:
        api, _ = _client(_json_response(201, {"EID": "m1"}))

        error, result = await api.post("/networks/42/messages/", {"body": "x"})

        assert error is None
        assert result == {"EID": "m1"}

    @pytest.mark.asyncio
    async def test_json_null_body_is_success(self) -> None:
        api, _ = _client(lambda request: httpx.Response(200, content=b"null"))

        result = await api.get("/networks/42/")

        assert result.ok is True
        assert result.result is None

    @pytest.mark.asyncio
    async def test_404_passes_platform_error_through(self) -> None:
        api, _ = _client(_json_response(404, {"code": 1, "message": "Not Found"}))

        error, result = await api.get("/networks/42/user/7/")

        assert result is None
        assert error is not None
        assert error.code == 1
        assert error.message == "Not Found"
        assert error.payload == {"code": 1, "message": "Not Found"}
        assert error.is_transport_failure is False
        assert error.is_unexpected_reply is False

    @pytest.mark.asyncio
    async def test_200_with_non_json_body_is_unexpected_reply(self) -> None:
        api, _ = _client(lambda request: httpx.Response(200, content=b"not json"))

        error, result = await api.get("/networks/42/")

        assert result is None
        assert error is not None
        assert error.code == UNEXPECTED_REPLY_CODE
        assert error.message == "Unexpected Reply"
        assert error.description == "not json"
        assert error.is_unexpected_reply is True

    @pytest.mark.asyncio
    async def test_error_status_with_non_json_body_is_unexpected_reply(self) -> None:
        api, _ = _client(lambda request: httpx.Response(502, content=b"<html>Bad Gateway</html>"))

        error, _ = await api.get("/networks/42/")

        assert error is not None
        assert error.code == UNEXPECTED_REPLY_CODE
        assert error.description == "<html>Bad Gateway</html>"

    @pytest.mark.asyncio
    async def test_error_status_with_non_object_json_is_unexpected_reply(self) -> None:
        api, _ = _client(lambda request: httpx.Response(500, content=b"[1, 2]"))

        error, _ = await api.get("/networks/42/")

        assert error is not None
        assert error.code == UNEXPECTED_REPLY_CODE
        assert error.description == "[1, 2]"

    @pytest.mark.asyncio
    async def test_empty_success_body_is_unexpected_reply(self) -> None:
        api, _ = _client(lambda request: httpx.Response(200, content=b""))

        error, _ = await api.get("/networks/42/")

        assert error is not None
        assert error.code == UNEXPECTED_REPLY_CODE
        assert error.description == ""


class TestTransportFailure:
    """Falhas de transporte viram erro -1000."""

    @pytest.mark.asyncio
    async def test_connect_error_is_request_failed(self) -> None:
        failure = httpx.ConnectError("connection refused")

        def _raise(request: httpx.Request) -> httpx.Response:
            raise failure

        api, captured = _client(_raise)

        error, result = await api.get("/networks/42/")

        assert result is None
        assert error is not None
        assert error.code == REQUEST_FAILED_CODE
        assert error.message == "Request Failed"
        assert error.request_error is failure
        assert error.is_transport_failure is True
        assert len(captured) == 1

    @pytest.mark.asyncio
    async def test_timeout_is_request_failed(self) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        api, _ = _client(_raise)

        error, _ = await api.delete("/networks/42/messages/1/")

        assert error is not None
        assert error.code == REQUEST_FAILED_CODE
        assert isinstance(error.request_error, httpx.ReadTimeout)

    @pytest.mark.asyncio
    async def test_no_retry_on_server_error(self) -> None:
        api, captured = _client(_json_response(503, {"code": 503, "message": "Unavailable"}))

        error, _ = await api.get("/networks/42/")

        assert error is not None
        assert error.code == 503
        assert len(captured) == 1


class TestRequestHeaders:
    """Headers de autenticação, Accept e conteúdo."""

    @pytest.mark.asyncio
    async def test_default_accept_and_bearer_token(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.get("/networks/42/")

        request = captured[0]
        assert request.method == "GET"
        assert request.headers["accept"] == "application/vnd.speakap.api-v1.1+json"
        assert request.headers["authorization"] == "Bearer app_secret"
        assert "content-type" not in request.headers

    @pytest.mark.asyncio
    async def test_api_version_changes_accept(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204), api_version="1.2")

        await api.get("/networks/42/")

        assert captured[0].headers["accept"] == "application/vnd.speakap.api-v1.2+json"

    @pytest.mark.asyncio
    async def test_no_authorization_without_credentials(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204), app_secret=None)

        await api.get("/networks/42/")

        assert "authorization" not in captured[0].headers

    @pytest.mark.asyncio
    async def test_per_call_options_override_defaults(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204), app_id=None, app_secret=None)
        options = ApiCallOptions(
            accept="application/json",
            access_token="user-token",
            content_type="application/merge-patch+json",
        )

        await api.put("/networks/42/messages/1/", {"commentable": False}, options)

        request = captured[0]
        assert request.headers["accept"] == "application/json"
        assert request.headers["authorization"] == "Bearer user-token"
        assert request.headers["content-type"] == "application/merge-patch+json; charset=utf-8"

    @pytest.mark.asyncio
    async def test_query_string_is_kept(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.get("/networks/42/timeline/?embed=messages.author")

        assert str(captured[0].url) == (
            "https://api.speakap.io/networks/42/timeline/?embed=messages.author"
        )

    @pytest.mark.asyncio
    async def test_http_scheme(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204), scheme="http")

        await api.get("/networks/42/")

        assert captured[0].url.scheme == "http"

    @pytest.mark.asyncio
    async def test_timeout_is_applied_when_configured(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204), timeout_seconds=2.5)

        await api.get("/networks/42/")

        assert captured[0].extensions["timeout"]["read"] == 2.5


class TestRequestBodies:
    """Serialização de corpo por método."""

    @pytest.mark.asyncio
    async def test_post_serializes_json(self) -> None:
        api, captured = _client(_json_response(201, {"EID": "m1"}))
        data = {
            "body": "test 123",
            "messageType": "update",
            "recipient": {"type": "network", "EID": "42"},
        }

        await api.post("/networks/42/messages/", data)

        request = captured[0]
        assert request.method == "POST"
        assert json.loads(request.content) == data
        assert request.headers["content-type"] == "application/json; charset=utf-8"
        assert request.headers["content-length"] == str(len(request.content))

    @pytest.mark.asyncio
    async def test_content_length_counts_utf8_bytes(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.request("POST", "/networks/42/messages/", '{"body":"für"}')

        request = captured[0]
        assert request.content == '{"body":"für"}'.encode()
        assert request.headers["content-length"] == "15"

    @pytest.mark.asyncio
    async def test_put_serializes_json(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        error, result = await api.put("/networks/42/messages/1/", {"commentable": False})

        assert (error, result) == (None, True)
        assert captured[0].method == "PUT"
        assert json.loads(captured[0].content) == {"commentable": False}

    @pytest.mark.asyncio
    async def test_post_action_form_encodes_data(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.post_action("/networks/42/messages/1/markread", {"reason": "x y", "note": "it's"})

        request = captured[0]
        assert request.content == b"reason=x%20y&note=it's"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded; charset=utf-8"
        assert request.headers["content-length"] == str(len(request.content))

    @pytest.mark.asyncio
    async def test_post_action_without_data_sends_no_body(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.post_action("/networks/42/messages/1/markread")

        request = captured[0]
        assert request.method == "POST"
        assert request.content == b""
        assert "content-type" not in request.headers

    @pytest.mark.asyncio
    async def test_post_action_respects_content_type_override(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.post_action(
            "/networks/42/actions/sync",
            {"a": "1"},
            ApiCallOptions(content_type="text/plain"),
        )

        assert captured[0].headers["content-type"] == "text/plain; charset=utf-8"

    @pytest.mark.asyncio
    async def test_get_and_delete_send_no_body(self) -> None:
        api, captured = _client(lambda request: httpx.Response(204))

        await api.get("/networks/42/")
        await api.delete("/networks/42/messages/1/")

        assert [request.method for request in captured] == ["GET", "DELETE"]
        assert all(request.content == b"" for request in captured)


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/missing/"):
            return httpx.Response(404, json={"code": 1, "message": "Not Found"})
        return httpx.Response(200, json={"path": request.url.path})

    api, captured = _client(_handler)

    results = await asyncio.gather(
        api.get("/networks/1/"),
        api.get("/networks/missing/"),
        api.get("/networks/2/"),
    )

    assert results[0].result == {"path": "/networks/1/"}
    assert results[1].error is not None and results[1].error.code == 1
    assert results[2].result == {"path": "/networks/2/"}
    assert len(captured) == 3


def test_create_speakap_api_client_from_settings() -> None:
    settings = SpeakapSettings(
        scheme="http",
        hostname="localhost:8000",
        app_id="app",
        app_secret="secret",
        api_version="1.2",
        request_timeout_seconds=10.0,
    )

    api = create_speakap_api_client(settings)

    assert api.config.base_url == "http://localhost:8000"
    assert api.config.access_token == "app_secret"
    assert api.config.default_accept == "application/vnd.speakap.api-v1.2+json"
    assert api.config.timeout_seconds == 10.0


def test_create_speakap_api_client_without_credentials() -> None:
    api = create_speakap_api_client(SpeakapSettings(app_id="", app_secret=""))

    assert api.config.app_id is None
    assert api.config.access_token is None
