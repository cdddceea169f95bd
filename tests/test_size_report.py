"""Tests for the SizeReport logic."""

import json
from pathlib import Path

from native_sizes.models import AnalysisEntry
from native_sizes.size_report import SizeReport


def test_size_report_generation(tmp_path: Path) -> None:
    """Verify that the size report is generated correctly."""
    report = SizeReport("libfoo.so", "hash123")
    report.add_entries(
        [
            AnalysisEntry("a.c", 10, 10),
            AnalysisEntry("c.c", 30, 30),
            AnalysisEntry("b.c", 20, 20),
        ]
    )

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    assert output_file.exists()
    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["config_hash"] == "hash123"
    assert content["meta"]["library"] == "libfoo.so"
    assert content["meta"]["total_entries"] == 3  # noqa: PLR2004
    assert [e["name"] for e in content["entries"]] == ["c.c", "b.c", "a.c"]

    stats = content["stats"]
    assert stats["total_size"] == 60  # noqa: PLR2004
    assert stats["total_compressed_size"] == 60  # noqa: PLR2004
    assert stats["largest_entry"] == "c.c"
    assert stats["median_size"] == 20  # noqa: PLR2004


def test_size_report_top_breaks_ties_by_name() -> None:
    """Verify that equal sizes are ordered by name."""
    report = SizeReport("lib.so", "h")
    report.add_entries([AnalysisEntry("z.c", 5, 5), AnalysisEntry("a.c", 5, 5)])
    assert [e.name for e in report.top(2)] == ["a.c", "z.c"]
    assert [e.name for e in report.top(1)] == ["a.c"]


def test_size_report_empty_stats() -> None:
    """Verify that an empty report produces zeroed stats."""
    stats = SizeReport("lib.so", "h").compute_stats()
    assert stats["total_size"] == 0
    assert stats["largest_entry"] is None
    assert stats["median_size"] == 0
