"""
Event logging for the docs MCP server.

Events are written to stderr because stdout carries the stdio transport.
"""
import sys
import json
import hashlib
import datetime
from typing import Dict, Any


def log_event(event_type: str, details: Dict[str, Any]) -> str:
    """
    Log a server event.

    Args:
        event_type: Type of event (e.g. "document_missing")
        details: Additional details about the event

    Returns:
        str: Event ID for reference
    """
    timestamp = datetime.datetime.now().isoformat()
    payload = json.dumps(details, sort_keys=True, default=str)
    event_id = hashlib.md5(f"{timestamp}:{event_type}:{payload}".encode()).hexdigest()[:8]
    message = f"EVENT [{timestamp}] [{event_id}] {event_type}: {payload}"
    print(message, file=sys.stderr)
    return event_id
