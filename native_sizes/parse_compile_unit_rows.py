"""Logic for parsing Bloaty CSV output into size entries."""

import logging
from collections.abc import Iterable

from native_sizes.models import AnalysisEntry
from native_sizes.strip_traversal_prefix import strip_traversal_prefix

logger = logging.getLogger(__name__)

COLUMN_COUNT = 3


def parse_compile_unit_rows(lines: Iterable[str]) -> list[AnalysisEntry]:
    """Convert ``unit,vmsize,filesize`` rows into entries.

    Rows with the wrong number of columns or a non-numeric last column are
    skipped. This includes Bloaty's own header row.
    """
    rows: list[AnalysisEntry] = []
    for line in lines:
        cols = line.split(",")
        if len(cols) != COLUMN_COUNT:
            continue

        raw_size = cols[-1].strip().removeprefix("+")
        if not raw_size.isdecimal():
            continue
        size = int(raw_size)

        rows.append(AnalysisEntry(strip_traversal_prefix(cols[0]), size, size))

    logger.info("Parsed %d native library entries", len(rows))
    return rows
