"""Search response → download request mapping.

The search endpoint answers with `{"reprintList": [...]}`. The download
endpoint wants the same documents under different key names. This module
owns that projection and nothing else: no I/O, no printing. Progress
output is delegated to an optional callback.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterable

from core.domain.models import DocumentRecord, DownloadRecord
from core.errors import RemoteSchemaError, ResponseParseError

logger = logging.getLogger(__name__)

REPRINT_LIST_KEY = "reprintList"


def parse_reprint_list(text: str) -> list[DocumentRecord]:
    """Parse the raw search response into document records.

    A missing or non-array `reprintList` is a broken remote contract and
    raises `RemoteSchemaError`; it is never read as "no documents".
    Elements themselves are not checked.
    """

    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResponseParseError(f"Search response is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise RemoteSchemaError(
            f"Search response must be a JSON object, got {type(payload).__name__}"
        )
    if REPRINT_LIST_KEY not in payload:
        raise RemoteSchemaError(f"Search response has no {REPRINT_LIST_KEY!r} field")

    items = payload[REPRINT_LIST_KEY]
    if not isinstance(items, list):
        raise RemoteSchemaError(
            f"{REPRINT_LIST_KEY!r} must be an array, got {type(items).__name__}"
        )

    # A non-object element has none of the fields; it goes out as an all-null record.
    records = [
        DocumentRecord.model_validate(item) if isinstance(item, dict) else DocumentRecord()
        for item in items
    ]

    logger.debug("Parsed %d record(s) from %s", len(records), REPRINT_LIST_KEY)
    return records


def to_download_record(record: DocumentRecord) -> DownloadRecord:
    return DownloadRecord.from_document(record)


def build_listfile(records: Iterable[DocumentRecord]) -> str:
    """Serialize records as the compact JSON array expected in `listfile`."""

    wire = [to_download_record(record).to_wire() for record in records]
    return json.dumps(wire, ensure_ascii=False, separators=(",", ":"))


def map_search_response(
    text: str,
    on_record: Callable[[DocumentRecord], None] | None = None,
) -> tuple[list[DocumentRecord], str]:
    """Parse a search response and build the download `listfile`.

    `on_record` is called once per record, in response order, before the
    list is serialized.
    """

    records = parse_reprint_list(text)
    if on_record is not None:
        for record in records:
            on_record(record)
    return records, build_listfile(records)
