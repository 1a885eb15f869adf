"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the per-record line and the summary table be tested on their own.
"""

from __future__ import annotations

import json
from typing import Any, Iterable

from rich.table import Table
from rich.text import Text

from core.domain.models import DocumentRecord


def _as_json(value: Any) -> str:
    """Render a value the way it appeared in the response: strings quoted, missing as null."""

    return json.dumps(value, ensure_ascii=False)


def _cell(value: Any) -> Text:
    # Text, not str: values come from the server and must not be read as markup.
    return Text("-" if value is None else str(value))


def format_record_line(record: DocumentRecord) -> str:
    """Progress line printed for each matched document."""

    return (
        f"docDate: {_as_json(record.doc_date)}, "
        f"docNo: {_as_json(record.doc_no)}, "
        f"fileName: {_as_json(record.file_name)}"
    )


def build_records_table(records: Iterable[DocumentRecord]) -> Table:
    """Rich table summarizing the reprint list."""

    table = Table(title="Tax Documents")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Doc No", style="white")
    table.add_column("Type", style="magenta")
    table.add_column("File", style="green")
    for index, record in enumerate(records, start=1):
        table.add_row(
            str(index),
            _cell(record.doc_date),
            _cell(record.doc_no),
            _cell(record.doc_type),
            _cell(record.file_name),
        )
    return table
