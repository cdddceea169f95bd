"""Logic for trimming build-relative traversal prefixes from unit paths."""

TRAVERSAL_MARKER = "../.."


def strip_traversal_prefix(path: str, marker: str = TRAVERSAL_MARKER) -> str:
    """Drop everything up to and including the last traversal marker.

    A single path separator directly after the marker is dropped as well, so
    ``./../../src/foo.cc`` becomes ``src/foo.cc``. Paths without the marker
    are returned unchanged.
    """
    _, sep, tail = path.rpartition(marker)
    if not sep:
        return path
    if tail.startswith("/"):
        tail = tail[1:]
    return tail
