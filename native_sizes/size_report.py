"""Logic for summarizing native library entries into a JSON report."""

import json
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from native_sizes.models import AnalysisEntry


class SizeReport:
    """Collects the entries of one analysis run and summarizes them."""

    def __init__(self, library: str, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.library = library
        self.config_hash = config_hash
        self.entries: list[AnalysisEntry] = []
        self.start_time = time.time()

    def add_entries(self, entries: Iterable[AnalysisEntry]) -> None:
        """Add parsed entries to the report."""
        self.entries.extend(entries)

    def sorted_entries(self) -> list[AnalysisEntry]:
        """Return entries ordered by size, largest first, then by name."""
        return sorted(self.entries, key=lambda e: (-e.size, e.name))

    def top(self, n: int) -> list[AnalysisEntry]:
        """Return the n largest entries."""
        return self.sorted_entries()[:n]

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "library": self.library,
                "total_entries": len(self.entries),
            },
            "entries": [
                {
                    "name": e.name,
                    "size": e.size,
                    "compressed_size": e.compressed_size,
                }
                for e in self.sorted_entries()
            ],
            "stats": self.compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def compute_stats(self) -> dict[str, Any]:
        """Summarize totals, the largest entry and the median size."""
        sizes = sorted(e.size for e in self.entries)

        median_size: float = 0.0
        if sizes:
            mid = len(sizes) // 2
            if len(sizes) % 2 == 0:
                median_size = (sizes[mid - 1] + sizes[mid]) / 2
            else:
                median_size = sizes[mid]

        largest = self.top(1)
        return {
            "total_size": sum(sizes),
            "total_compressed_size": sum(e.compressed_size for e in self.entries),
            "largest_entry": largest[0].name if largest else None,
            "median_size": median_size,
        }
