"""e-Tax reprint service client.

Two endpoints, one request each:
- `search/reprint`: form-encoded query, JSON answer (returned as raw text).
- `download/zipFiles`: multipart request, binary ZIP answer.

HTTP status codes are not interpreted. Whatever body comes back is handed
to the caller; only transport failures raise (`NetworkError`).
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import DateRange
from core.errors import NetworkError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search/reprint"
DOWNLOAD_PATH = "/download/zipFiles"

# The service expects the literal string "null" when no smart card is used.
SMART_CARD_PLACEHOLDER = "null"
DOCUMENT_TYPE = "PDF"


class EtaxClient:
    """Thin client over the e-Tax backend API.

    The underlying `httpx.AsyncClient` is built from settings; `transport`
    replaces the network layer (e.g. `httpx.MockTransport`). Close it with
    `aclose()` or use the client as an async context manager.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = build_async_client(self._settings, transport=transport)

    @property
    def search_url(self) -> str:
        return self._settings.api_base_url.rstrip("/") + SEARCH_PATH

    @property
    def download_url(self) -> str:
        return self._settings.api_base_url.rstrip("/") + DOWNLOAD_PATH

    async def __aenter__(self) -> "EtaxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search_reprint(self, tax_id: str, date_range: DateRange) -> str:
        """Query the reprint list for `tax_id` within `date_range`."""

        form = {
            "taxId": tax_id,
            "docDateFrom": date_range.doc_date_from,
            "docDateTo": date_range.doc_date_to,
            "smartCardNo": SMART_CARD_PLACEHOLDER,
        }
        url = self.search_url
        logger.debug("POST %s taxId=%s from=%s to=%s", url, tax_id, form["docDateFrom"], form["docDateTo"])
        try:
            resp = await self._client.post(url, data=form)
        except httpx.HTTPError as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        logger.debug("Search answered HTTP %s (%d bytes)", resp.status_code, len(resp.content))
        return resp.text

    async def download_zip(self, listfile_json: str) -> bytes:
        """Request the ZIP bundle for the documents in `listfile_json`."""

        # (None, value) makes httpx send plain text parts, without a filename.
        parts = {
            "listfile": (None, listfile_json.encode("utf-8")),
            "type": (None, DOCUMENT_TYPE.encode("utf-8")),
        }
        url = self.download_url
        logger.debug("POST %s (listfile: %d chars)", url, len(listfile_json))
        try:
            resp = await self._client.post(url, files=parts)
        except httpx.HTTPError as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc

        logger.debug(
            "Download answered HTTP %s (%s, %d bytes)",
            resp.status_code,
            resp.headers.get("content-type", "unknown type"),
            len(resp.content),
        )
        return resp.content
