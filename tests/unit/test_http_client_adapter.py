import asyncio
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from dataproc_client.client.http_client_adapter import HttpClientAdapter
from dataproc_client.submission.exceptions import (
    NetworkError,
    ResponseValidationError,
    ServiceError,
)
from dataproc_client.submission.models import SubmissionPayload

Handler = Callable[[httpx.Request], httpx.Response]


def _run(handler: Handler, call: Callable[[HttpClientAdapter], Any]) -> Any:
    async def scenario() -> Any:
        adapter = HttpClientAdapter(
            base_url="http://testserver",
            timeout_seconds=5,
            transport=httpx.MockTransport(handler),
        )
        try:
            return await call(adapter)
        finally:
            await adapter.aclose()

    return asyncio.run(scenario())


def _respond(status_code: int, **kwargs: Any) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, **kwargs)

    return handler


def _process(payload: SubmissionPayload, token: str | None = "tok"):
    return lambda adapter: adapter.process(payload, token=token)


class TestProcessRequest:
    def test_posts_json_with_bearer_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        _run(handler, _process(SubmissionPayload({"data": ["A"]}), token="abc"))

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/bfhl"
        assert request.headers["Authorization"] == "Bearer abc"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"data": ["A"], "file_b64": ""}

    def test_omits_authorization_without_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={})

        _run(handler, _process(SubmissionPayload({}), token=None))

        assert "Authorization" not in seen[0].headers

    def test_returns_decoded_body(self) -> None:
        body = _run(
            _respond(201, json={"is_success": True}),
            _process(SubmissionPayload({})),
        )
        assert body == {"is_success": True}


class TestProcessErrors:
    def test_uses_server_error_text(self) -> None:
        handler = _respond(422, json={"error": "roll_number missing"})
        with pytest.raises(ServiceError) as exc_info:
            _run(handler, _process(SubmissionPayload({})))
        assert exc_info.value.message == "roll_number missing"
        assert exc_info.value.status_code == 422

    def test_generic_message_without_error_field(self) -> None:
        handler = _respond(500, json={"detail": "boom"})
        with pytest.raises(ServiceError) as exc_info:
            _run(handler, _process(SubmissionPayload({})))
        assert exc_info.value.message == "Processing failed"

    def test_generic_message_for_non_json_error(self) -> None:
        handler = _respond(502, text="<html>Bad Gateway</html>")
        with pytest.raises(ServiceError, match="Processing failed"):
            _run(handler, _process(SubmissionPayload({})))

    def test_non_json_success_body_raises(self) -> None:
        handler = _respond(200, text="ok")
        with pytest.raises(ResponseValidationError):
            _run(handler, _process(SubmissionPayload({})))

    def test_connection_failure_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(NetworkError) as exc_info:
            _run(handler, _process(SubmissionPayload({})))
        assert "connection refused" in exc_info.value.detail

    def test_timeout_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(NetworkError):
            _run(handler, _process(SubmissionPayload({})))

    def test_corrupt_encoded_body_raises_validation_error(self) -> None:
        handler = _respond(200, headers={"Content-Encoding": "gzip"}, content=b"not gzip")
        with pytest.raises(ResponseValidationError) as exc_info:
            _run(handler, _process(SubmissionPayload({})))
        assert "could not be decoded" in exc_info.value.detail

    def test_redirect_loop_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.TooManyRedirects("Exceeded maximum allowed redirects.", request=request)

        with pytest.raises(NetworkError):
            _run(handler, _process(SubmissionPayload({})))


class TestGetOperationCode:
    def test_returns_code(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"operation_code": 1})

        code = _run(handler, lambda adapter: adapter.get_operation_code(token="abc"))

        assert code == 1
        assert seen[0].method == "GET"
        assert seen[0].headers["Authorization"] == "Bearer abc"

    def test_rejects_missing_code(self) -> None:
        handler = _respond(200, json={"code": "x"})
        with pytest.raises(ResponseValidationError):
            _run(handler, lambda adapter: adapter.get_operation_code(token=None))

    def test_surfaces_service_error(self) -> None:
        handler = _respond(401, json={"error": "Unauthorized"})
        with pytest.raises(ServiceError, match="Unauthorized"):
            _run(handler, lambda adapter: adapter.get_operation_code(token=None))
