"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Field aliases map the service's camelCase wire names onto Python names
  in one place, for both directions (search response in, download
  request out).
- Serialization of the download list stays declarative.

Note:
- Record values are typed `Any` on purpose: the service's values are passed
  through verbatim and never coerced.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.clock import GMT_PLUS_7, format_compact, format_timestamp


class DocumentRecord(BaseModel):
    """A matched tax document as returned in the service's `reprintList`.

    Keys missing from the response map to `None`; unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    invoice_hdr_id: Any = Field(
        default=None,
        alias="invoiceHdrId",
        description="Invoice header identifier on the service side.",
    )
    doc_no: Any = Field(
        default=None,
        alias="docNo",
        description="Document number.",
    )
    doc_date: Any = Field(
        default=None,
        alias="docDate",
        description="Document date as rendered by the service.",
    )
    file_name: Any = Field(
        default=None,
        alias="fileName",
        description="Stored file name of the document.",
    )
    file_path: Any = Field(
        default=None,
        alias="filePath",
        description="Stored file path of the document.",
    )
    file_type: Any = Field(
        default=None,
        alias="fileType",
        description="File type marker of the document.",
    )
    doc_type: Any = Field(
        default=None,
        alias="docType",
        description="Tax document type code.",
    )


class DownloadRecord(BaseModel):
    """Narrowed projection of a `DocumentRecord` sent to the ZIP endpoint.

    Field order matches the order of the `listfile` JSON objects.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    invoice_hdr_id: Any = Field(default=None, alias="invoiceHdr_id")
    doc_no: Any = Field(default=None, alias="docNo")
    file_type: Any = Field(default=None, alias="fileType")
    file_path_pdf: Any = Field(default=None, alias="filePathPDF")
    file_name_pdf: Any = Field(default=None, alias="fileNamePDF")
    doc_type: Any = Field(default=None, alias="docType")

    @classmethod
    def from_document(cls, record: DocumentRecord) -> "DownloadRecord":
        return cls(
            invoice_hdr_id=record.invoice_hdr_id,
            doc_no=record.doc_no,
            file_type=record.file_type,
            file_path_pdf=record.file_path,
            file_name_pdf=record.file_name,
            doc_type=record.doc_type,
        )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class DateRange(BaseModel):
    """Search window: start-of-day and end-of-day instants in GMT+0700.

    Both ends are rendered in two formats: the human-readable timestamp used
    by the search endpoint, and the compact date used in file names.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(..., description="Start-of-day instant (00:00:00).")
    end: datetime = Field(..., description="End-of-day instant (23:59:59).")

    @field_validator("start", "end")
    @classmethod
    def require_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            raise ValueError("date range boundaries must be timezone-aware")
        return value.astimezone(GMT_PLUS_7)

    @property
    def doc_date_from(self) -> str:
        return format_timestamp(self.start)

    @property
    def doc_date_to(self) -> str:
        return format_timestamp(self.end)

    @property
    def compact_from(self) -> str:
        return format_compact(self.start)

    @property
    def compact_to(self) -> str:
        return format_compact(self.end)


class ReprintResult(BaseModel):
    """Outcome of one reprint run."""

    tax_id: str
    date_range: DateRange
    records: list[DocumentRecord] = Field(default_factory=list)
    listfile: str = Field(
        default="[]",
        description="JSON array sent (or that would be sent) as `listfile`.",
    )
    output_path: Path | None = Field(
        default=None,
        description="Where the ZIP was written; None when the download was skipped.",
    )
