"""Telemetry events emitted once per nuked (or failed) resource.

Sinks are passed explicitly to the nukers. No network backend is shipped;
LoggingEventSink writes events to the log and RecordingEventSink keeps them
in memory for the run summary and for tests.
"""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class TelemetryEvent:
    """A single named event with free-form properties."""

    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "properties": dict(self.properties),
            "timestamp": self.timestamp.isoformat(),
        }


class EventSink:
    """Base sink. Subclasses override ``emit``; the base discards events."""

    def track(self, name: str, properties: dict[str, Any] | None = None) -> TelemetryEvent:
        """Build an event and hand it to the sink."""
        event = TelemetryEvent(name=name, properties=properties or {})
        self.emit(event)
        return event

    def emit(self, event: TelemetryEvent) -> None:
        pass


class LoggingEventSink(EventSink):
    """Writes events to a stdlib logger at DEBUG level."""

    def __init__(self, event_logger: logging.Logger | None = None):
        self.logger = event_logger or logger

    def emit(self, event: TelemetryEvent) -> None:
        props = ", ".join(f"{k}={v}" for k, v in event.properties.items())
        self.logger.debug(f"Telemetry event '{event.name}' ({props})")


class RecordingEventSink(EventSink):
    """Keeps every event in memory, optionally forwarding to another sink."""

    def __init__(self, forward_to: EventSink | None = None):
        self.events: list[TelemetryEvent] = []
        self.forward_to = forward_to

    def emit(self, event: TelemetryEvent) -> None:
        self.events.append(event)
        if self.forward_to is not None:
            self.forward_to.emit(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]

    def clear(self) -> None:
        self.events.clear()
