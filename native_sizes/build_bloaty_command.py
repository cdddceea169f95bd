"""Logic for assembling Bloaty command lines."""

from pathlib import Path


def build_bloaty_command(
    tool_path: Path,
    debug_file: Path,
    binary: Path,
    data_source: str = "compileunits",
    max_rows: int = 0,
) -> list[str]:
    """Build the argument vector for a CSV breakdown of ``binary``.

    ``-n 0`` disables Bloaty's row truncation so every unit is reported.
    """
    return [
        str(tool_path),
        f"--debug-file={debug_file.absolute()}",
        str(binary.absolute()),
        "-d",
        data_source,
        "-n",
        str(max_rows),
        "--csv",
    ]
