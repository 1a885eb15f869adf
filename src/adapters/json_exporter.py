"""JSON export of search results.

Why JSON:
- Interoperability with bookkeeping scripts and pipelines.
- Keeps a record of what was matched even when the ZIP is not downloaded.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import DateRange, DocumentRecord


def export_records_json(
    *,
    records: Iterable[DocumentRecord],
    date_range: DateRange,
    tax_id: str,
    output_path: Path,
) -> Path:
    """Export matched records (service field names) as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "taxId": tax_id,
        "docDateFrom": date_range.doc_date_from,
        "docDateTo": date_range.doc_date_to,
        "reprintList": [record.model_dump(mode="json", by_alias=True) for record in records],
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
