import logging
from typing import Any

import httpx

from app.clients.errors import GENERIC_ERROR_MESSAGE, RecordsApiError, TransportError
from app.core.config import settings
from app.services.spreadsheet import XLSX_MEDIA_TYPE

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response) -> str:
    try:
        detail = resp.json().get("detail")
    except (ValueError, AttributeError):
        detail = None

    if isinstance(detail, str) and detail:
        return detail
    # FastAPI validation errors: list of {"msg": ...}
    if isinstance(detail, list):
        message = "; ".join(
            str(item.get("msg", item)) for item in detail if isinstance(item, dict)
        )
        if message:
            return message
    return GENERIC_ERROR_MESSAGE


class RecordsApi:
    """
    Synchronous client for the records REST API.

    Pass an existing `httpx.Client` (for example FastAPI's `TestClient`) to
    reuse its base URL and transport; otherwise one is built from settings.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        self._client = client or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.HTTP_TIMEOUT,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RecordsApi":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.RequestError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise TransportError(f"Could not reach the server: {exc}") from exc

        if resp.is_error:
            message = _error_message(resp)
            logger.warning("%s %s -> %d: %s", method, path, resp.status_code, message)
            raise RecordsApiError(message, status_code=resp.status_code)
        return resp.json()

    def list_records(self) -> list[dict[str, Any]]:
        return self._request("GET", "/records")

    def create_record(self, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("POST", "/records", json=data)

    def update_record(self, record_id: str, data: dict[str, Any]) -> dict[str, Any]:
        return self._request("PUT", f"/records/{record_id}", json=data)

    def delete_record(self, record_id: str) -> None:
        self._request("DELETE", f"/records/{record_id}")

    def column_colors(self) -> dict[str, str]:
        return self._request("GET", "/column-colors")

    def update_column_color(self, field: str, color: str) -> None:
        self._request("POST", "/update-column-color", json={"field": field, "color": color})

    def update_row_colors(self, ids: list[str], color: str) -> int:
        result = self._request(
            "POST", "/update-row-colors", json={"ids": [str(i) for i in ids], "color": color}
        )
        return result.get("updated") or 0

    def upload_excel(self, filename: str, content: bytes) -> int:
        result = self._request(
            "POST", "/upload-excel", files={"file": (filename, content, XLSX_MEDIA_TYPE)}
        )
        return result["imported"]
