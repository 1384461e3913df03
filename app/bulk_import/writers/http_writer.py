from typing import Any

import httpx
import structlog

from app.bulk_import.schemas import ImportRequest
from app.bulk_import.writers.base import RecordWriter
from app.exceptions import ImportFailedError

logger = structlog.get_logger()


class HttpRecordWriter(RecordWriter):
    """Posts the import request as JSON to the writer's bulk-import endpoint."""

    def __init__(
        self,
        url: str,
        api_key: str = "",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def write(self, request: ImportRequest) -> dict[str, Any]:
        payload = request.model_dump(mode="json", by_alias=True)

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                resp = await client.post(self._url, json=payload, headers=self._headers())
            except httpx.HTTPError as exc:
                logger.error("writer_request_failed", url=self._url, error=str(exc))
                raise ImportFailedError(f"Record writer is unreachable: {exc}") from exc

        if not resp.is_success:
            logger.error(
                "writer_error_status", url=self._url, status=resp.status_code, body=resp.text[:500]
            )
            raise ImportFailedError(f"Record writer answered with HTTP {resp.status_code}")

        try:
            body = resp.json()
        except ValueError as exc:
            logger.error("writer_invalid_json", url=self._url, body=resp.text[:500])
            raise ImportFailedError("Record writer returned a response that is not JSON") from exc

        if not isinstance(body, dict):
            logger.error("writer_response_not_object", url=self._url)
            raise ImportFailedError("Record writer returned an unexpected response")
        return body
