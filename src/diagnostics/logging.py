"""Structured selection event logging helper"""
import json
from typing import Dict, Any, Optional, List
from datetime import datetime, UTC


def log_selection_event(
    event_type: str,
    payload: Dict[str, Any],
    logger: Optional[List[Dict]] = None,
    timestamp: Optional[datetime] = None,
    echo: bool = True
) -> Dict[str, Any]:
    """
    Log a structured selection event.

    Args:
        event_type: Type of event (e.g., "selection_complete", "input_rejected", "mode_fallback")
        payload: Event-specific data (operation, n, mode, comparisons, depth, ...)
        logger: Optional list to append to (e.g., an engine's event_log)
        timestamp: Optional timestamp (defaults to now)
        echo: Also print the event as a JSON line

    Returns:
        Structured log entry dict
    """
    if timestamp is None:
        timestamp = datetime.now(UTC)

    log_entry = {
        'timestamp': timestamp.isoformat() if hasattr(timestamp, 'isoformat') else str(timestamp),
        'event_type': event_type,
        **payload
    }

    if logger is not None:
        logger.append(log_entry)

    if echo:
        print(f"[SELECTION_LOG] {event_type}: {json.dumps(payload, default=str)}")

    return log_entry
