"""Logic for fingerprinting the settings that shape an analysis run."""

import hashlib
import json
from typing import Any

# Keys under "bloaty" that change which rows Bloaty reports. Where the tool
# lives and how many rows the CLI prints do not.
OUTPUT_KEYS = ("data_source", "max_rows")


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 over the Bloaty settings that affect reported entries.

    Two reports with the same hash were produced with the same breakdown.
    """
    bloaty = config.get("bloaty", {})
    relevant = {key: bloaty.get(key) for key in OUTPUT_KEYS}
    payload = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
