"""Telemetry event sinks for nuke operations."""

from nuker.telemetry.events import (
    EventSink,
    LoggingEventSink,
    RecordingEventSink,
    TelemetryEvent,
)

__all__ = ["EventSink", "LoggingEventSink", "RecordingEventSink", "TelemetryEvent"]
