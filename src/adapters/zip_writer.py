"""ZIP archive output.

Why in adapters:
- Writing to disk is an infrastructure detail; the core only produces the
  bytes and the names.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from core.domain.models import DateRange
from core.errors import OutputWriteError

logger = logging.getLogger(__name__)

FILENAME_PREFIX = "TaxDocuments"
GENERATED_AT_FORMAT = "%Y%m%d%H%M%S"


def default_zip_filename(
    tax_id: str,
    date_range: DateRange,
    generated_at: datetime | None = None,
) -> str:
    """`TaxDocuments_<taxID>_<from>_<to>_<generated>.zip`.

    The generation timestamp uses the machine's local time, unlike the
    search window which is always GMT+0700.
    """

    generated_at = generated_at or datetime.now()
    stamp = generated_at.strftime(GENERATED_AT_FORMAT)
    return f"{FILENAME_PREFIX}_{tax_id}_{date_range.compact_from}_{date_range.compact_to}_{stamp}.zip"


def resolve_output_path(
    *,
    tax_id: str,
    date_range: DateRange,
    filename: str | None,
    output_dir: Path,
    generated_at: datetime | None = None,
) -> Path:
    """A custom filename is used as given; a generated one goes to `output_dir`."""

    if filename:
        return Path(filename)
    return output_dir / default_zip_filename(tax_id, date_range, generated_at)


def write_zip(*, content: bytes, output_path: Path) -> Path:
    """Create (or truncate) `output_path` and write all of `content`."""

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(content)
    except OSError as exc:
        raise OutputWriteError(str(output_path), exc.strerror or str(exc)) from exc

    logger.debug("Wrote %d bytes to %s", len(content), output_path)
    return output_path
