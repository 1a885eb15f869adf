from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from adapters.etax_client import EtaxClient
from adapters.http_client import build_async_client
from core.config import AppSettings

API_BASE_URL = "https://etax.test/backend/api"
ZIP_BYTES = b"PK\x03\x04fake-zip-content"


def reprint_record(index: int) -> dict:
    return {
        "invoiceHdrId": 1000 + index,
        "docNo": f"INV-2024-{index:04d}",
        "docDate": f"2024-01-{index + 1:02d}",
        "fileName": f"INV-2024-{index:04d}.pdf",
        "filePath": f"/data/etax/2024/01/INV-2024-{index:04d}.pdf",
        "fileType": "PDF",
        "docType": "T02",
        "amount": 35.0,
    }


class FakeEtaxService:
    """In-memory stand-in for the e-Tax backend, served through `httpx.MockTransport`."""

    def __init__(self, records: list[dict] | None = None) -> None:
        self.search_body: str | bytes = json.dumps({"reprintList": records or []})
        self.search_status = 200
        self.zip_body = ZIP_BYTES
        self.zip_status = 200
        self.requests: list[httpx.Request] = []
        self.fail_with: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with
        if request.url.path.endswith("/search/reprint"):
            return httpx.Response(self.search_status, content=self.search_body)
        if request.url.path.endswith("/download/zipFiles"):
            return httpx.Response(
                self.zip_status,
                content=self.zip_body,
                headers={"content-type": "application/zip"},
            )
        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def build_client(self, settings: AppSettings | None = None, *, transport=None) -> httpx.AsyncClient:
        """Stand-in for `build_async_client` that always routes to this service."""

        return build_async_client(settings, transport=self.transport)


@pytest.fixture
def settings(tmp_path):
    return AppSettings(_env_file=None, api_base_url=API_BASE_URL, output_dir=tmp_path)


@pytest.fixture
def service():
    return FakeEtaxService([reprint_record(0), reprint_record(1)])


@pytest.fixture
def etax_client(settings, service):
    return EtaxClient(settings, transport=service.transport)


@pytest.fixture
def fixed_today():
    return date(2024, 3, 15)
