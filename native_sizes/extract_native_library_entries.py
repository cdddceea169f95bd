"""Logic for measuring the compiled units of a native library with Bloaty."""

import logging
import shlex
import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path

from native_sizes.build_bloaty_command import build_bloaty_command
from native_sizes.models import AnalysisEntry
from native_sizes.parse_compile_unit_rows import parse_compile_unit_rows
from native_sizes.run_command_lines import run_command_lines

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str | Path]], list[str]]


def extract_native_library_entries(
    library_bytes: bytes,
    debug_file: Path | None,
    tool_path: Path | None,
    *,
    data_source: str = "compileunits",
    max_rows: int = 0,
    runner: Runner = run_command_lines,
) -> list[AnalysisEntry]:
    """Analyze the compiled units of a stripped library using its debug file.

    Returns an empty list when the tool or the debug file is unavailable.
    """
    logger.info("Parsing unstripped library at: %s", debug_file)
    if tool_path is None or debug_file is None:
        logger.info("Unable to parse library")
        return []

    tmp = tempfile.NamedTemporaryFile(prefix="native-lib", suffix=".so", delete=False)
    tmp_path = Path(tmp.name)

    try:
        with tmp:
            tmp.write(library_bytes)

        command = build_bloaty_command(
            tool_path, debug_file, tmp_path, data_source, max_rows
        )
        logger.info("Running bloaty command: %s", shlex.join(command))
        return parse_compile_unit_rows(runner(command))
    finally:
        tmp_path.unlink(missing_ok=True)
