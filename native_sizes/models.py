"""Data models for native library size entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisEntry:
    """Represents one compiled unit reported by Bloaty."""

    name: str  # source path, traversal prefix stripped
    size: int
    compressed_size: int
