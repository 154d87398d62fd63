from collections.abc import Mapping
from typing import Any

import httpx

from dataproc_client.client.base import BaseProcessingClient
from dataproc_client.logging.logger import Log
from dataproc_client.submission.exceptions import (
    NetworkError,
    ResponseValidationError,
    ServiceError,
)

_NO_BODY = object()


class HttpClientAdapter(BaseProcessingClient):
    """Processing client built on an httpx async connection pool."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        process_path: str = "/bfhl",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._process_path = process_path
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def process(self, payload: Mapping[str, Any], *, token: str | None) -> Any:
        response = await self._send(
            "POST",
            json=dict(payload),
            headers=self._auth_headers(token),
        )
        Log.info(f"POST {self._process_path} -> {response.status_code}")
        return self._decode(response)

    async def get_operation_code(self, *, token: str | None) -> int:
        response = await self._send("GET", headers=self._auth_headers(token))
        Log.info(f"GET {self._process_path} -> {response.status_code}")
        body = self._decode(response)
        code = body.get("operation_code") if isinstance(body, dict) else None
        if not isinstance(code, int) or isinstance(code, bool):
            raise ResponseValidationError(detail="'operation_code' must be an integer")
        return code

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _send(self, method: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, self._process_path, **kwargs)
        except httpx.DecodingError as exc:
            raise ResponseValidationError(
                detail=f"Processing service response could not be decoded: {exc}"
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(detail=f"Processing service network error: {exc}") from exc

    @staticmethod
    def _auth_headers(token: str | None) -> dict[str, str]:
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = _NO_BODY

        if response.is_success:
            if body is _NO_BODY:
                raise ResponseValidationError(
                    status_code=response.status_code,
                    detail="Success response body is not JSON",
                )
            return body

        message = None
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            message = body["error"] or None
        raise ServiceError(
            message,
            status_code=response.status_code,
            detail=f"HTTP {response.status_code}",
        )
