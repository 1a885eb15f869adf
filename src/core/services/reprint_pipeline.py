"""Reprint orchestration.

This module runs the whole flow: resolve the search window, query the
service, map the reprint list and, unless disabled, download and save the
ZIP bundle. The CLI only translates arguments and renders output, which
keeps side effects (printing, tables) out of the flow and makes it
reusable from tests or other entry points.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable

import httpx

from adapters.etax_client import EtaxClient
from adapters.zip_writer import resolve_output_path, write_zip
from core.config import AppSettings
from core.date_range import resolve_date_range
from core.domain.models import DocumentRecord, ReprintResult
from core.services.reprint_mapper import map_search_response

logger = logging.getLogger(__name__)


@dataclass
class ReprintRequest:
    """Parameters that control one reprint run."""

    tax_id: str
    since: str | None = None
    until: str | None = None
    download: bool = True
    filename: str | None = None
    today: date | None = None


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, confirmation)."""

    record: Callable[[DocumentRecord], None] | None = None
    searched: Callable[[int], None] | None = None
    saved: Callable[[Path], None] | None = None


async def run_reprint(
    request: ReprintRequest,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    hooks: PipelineHooks | None = None,
) -> ReprintResult:
    """Execute search → map → (download → write) once.

    Dates are resolved before any request is sent, so an invalid date never
    reaches the network. Every error propagates to the caller unchanged.
    """

    settings = settings or AppSettings()
    hooks = hooks or PipelineHooks()

    date_range = resolve_date_range(request.since, request.until, today=request.today)
    logger.debug("Search window %s → %s", date_range.doc_date_from, date_range.doc_date_to)

    async with EtaxClient(settings, transport=transport) as etax:
        body = await etax.search_reprint(request.tax_id, date_range)
        records, listfile = map_search_response(body, on_record=hooks.record)
        if hooks.searched:
            hooks.searched(len(records))

        result = ReprintResult(
            tax_id=request.tax_id,
            date_range=date_range,
            records=records,
            listfile=listfile,
        )
        if not request.download:
            logger.debug("Download skipped")
            return result

        content = await etax.download_zip(listfile)

    output_path = resolve_output_path(
        tax_id=request.tax_id,
        date_range=date_range,
        filename=request.filename,
        output_dir=settings.output_dir,
    )
    write_zip(content=content, output_path=output_path)
    if hooks.saved:
        hooks.saved(output_path)

    return result.model_copy(update={"output_path": output_path})
