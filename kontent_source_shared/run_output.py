"""
Run Output — The folder a standalone source run writes its files to.

Every run gets OUTPUT_DIR/<YYYYMMDD_HHMM>_<provider>/, named from the time the
run started. The folder is created on the first write, so nothing is left on
disk by a run that never gets as far as saving.
"""

import json
import os
import re
from datetime import datetime
from typing import Any, Optional


class RunOutput:
    """Paths and JSON writing for one run's output folder.

    Attributes:
        run_dir: Full path of this run's folder (may not exist yet).
    """

    def __init__(self, base_dir: str, provider_name: str, started_at: Optional[datetime] = None):
        started_at = started_at or datetime.now()
        label = re.sub(r"[^A-Za-z0-9_-]", "_", provider_name)
        self.run_dir = os.path.join(base_dir, f"{started_at:%Y%m%d_%H%M}_{label}")

    def path(self, filename: str) -> str:
        """Return the path of a file in the run folder, creating the folder."""
        os.makedirs(self.run_dir, exist_ok=True)
        return os.path.join(self.run_dir, filename)

    def write_json(self, filename: str, data: Any) -> str:
        path = self.path(filename)
        with open(path, "w") as f:
            json.dump(data, f, indent=2, default=str)
        return path
