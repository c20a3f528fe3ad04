"""JSON snapshot of the filtered activity list."""

import json
import logging
from pathlib import Path
from typing import Any

from terminus_tracker.errors import IoError

logger = logging.getLogger(__name__)


def write_snapshot(activities: list[dict[str, Any]], path: Path) -> Path:
    """Overwrite the snapshot at path with the given activities."""
    path = Path(path)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(activities, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error(f"Failed to write snapshot {path}: {e}")
        raise IoError(f"Failed to write snapshot {path}: {e}") from e

    logger.info(f"Activities saved to {path}")
    return path
