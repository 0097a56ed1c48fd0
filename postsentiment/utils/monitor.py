"""
Execution monitor: node status transitions and timings kept in shared["monitor"].
"""
from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


RUNNING = "running"
COMPLETED = "completed"
FAILED = "failed"


def _timestamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def init_monitor(shared: Dict[str, Any]) -> Dict[str, Any]:
    """Return shared["monitor"], filling in any missing keys."""
    monitor = shared.setdefault("monitor", {})
    if not monitor.get("start_time"):
        monitor["start_time"] = _timestamp()
    for key, default in (("current_node", ""), ("execution_log", []),
                         ("error_log", []), ("durations", {}), ("node_started", {})):
        monitor.setdefault(key, default)
    return monitor


def update_status(
    shared: Dict[str, Any],
    *,
    node_name: str,
    status: str,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Log one status transition of ``node_name``.

    A ``running`` entry starts the node's clock; ``completed`` and ``failed``
    entries carry the elapsed seconds since then.
    """
    monitor = init_monitor(shared)
    monitor["current_node"] = node_name

    entry: Dict[str, Any] = {
        "time": _timestamp(),
        "node": node_name,
        "status": status,
        "error": error or "",
    }
    if status == RUNNING:
        monitor["node_started"][node_name] = time.perf_counter()
    else:
        started = monitor["node_started"].pop(node_name, None)
        if started is not None:
            entry["elapsed"] = round(time.perf_counter() - started, 4)
            monitor["durations"][node_name] = entry["elapsed"]

    monitor["execution_log"].append(entry)
    if status == FAILED:
        monitor["error_log"].append(entry)
        logger.error(f"[{node_name}] failed: {error}")
    else:
        logger.debug(f"[{node_name}] {status} {entry.get('elapsed', '')}")
    return entry
