from __future__ import annotations

import json
import os
import threading
import time
from typing import Any, Dict, Optional, TextIO

from rover_grid.rover import Rover


class TelemetryLogger:
    """Structured JSONL logger for rover telemetry.

    Thread-safe, append-only logging of dict records, one JSON object per line.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._lock = threading.Lock()
        self._fp: Optional[TextIO] = open(self.path, "a", encoding="utf-8")

    def log_step(self, record: Dict[str, Any]) -> None:
        """Append a single telemetry record to the JSONL file."""
        if self._fp is None:
            return
        line = json.dumps(record, separators=(",", ":"))
        with self._lock:
            self._fp.write(line + "\n")
            self._fp.flush()

    def log_rover(self, event: str, rover: Rover, **extra: Any) -> None:
        """Record a rover snapshot tagged with ``event`` (e.g. "landed", "moved")."""
        record: Dict[str, Any] = {"t": time.time(), "event": event}
        record.update(rover.to_dict())
        record["text"] = str(rover)
        record.update(extra)
        self.log_step(record)

    def close(self) -> None:
        if self._fp is not None:
            self._fp.close()
            self._fp = None

    def __enter__(self) -> TelemetryLogger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
