"""Logic for locating the Bloaty executable on the host."""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TOOL_NAME = "bloaty"


def resolve_tool_path(
    tool_name: str = DEFAULT_TOOL_NAME,
    lookup: Callable[[str], str | None] | None = None,
    override: str | Path | None = None,
) -> Path | None:
    """Find the analysis tool, returning ``None`` when it is not installed.

    Resolve once and pass the result to ``extract_native_library_entries``.
    """
    if override:
        logger.info("Using %s at: %s", tool_name, override)
        return Path(override)

    found = (lookup or shutil.which)(tool_name)
    if not found:
        logger.info(
            "Could not find %s. Install Bloaty for more information about "
            "native libraries.",
            tool_name,
        )
        return None

    logger.info("%s detected at: %s", tool_name, found)
    return Path(found)
