"""
Planner trace events.

The planner reports what it does (time advanced, vehicle assigned, package
packed) to an optional sink. Rendering those events as narrative text is left
to the presentation layer.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)


class TraceEventKind(Enum):
    PLANNING_STARTED = "planning_started"
    TIME_ADVANCED = "time_advanced"
    VEHICLE_ASSIGNED = "vehicle_assigned"
    PACKAGE_PACKED = "package_packed"
    PLANNING_COMPLETED = "planning_completed"


@dataclass(frozen=True)
class TraceEvent:
    kind: TraceEventKind
    time: float
    vehicle_id: Optional[int] = None
    package_ids: Tuple[str, ...] = ()
    details: Dict = field(default_factory=dict)

    def __str__(self):
        parts = [f"{self.kind.value} @ {self.time:.2f}h"]
        if self.vehicle_id is not None:
            parts.append(f"vehicle={self.vehicle_id}")
        if self.package_ids:
            parts.append(f"packages={'+'.join(self.package_ids)}")
        return " ".join(parts)


class TraceSink:
    """Receives planner events. The base sink drops them."""

    def emit(self, event: TraceEvent):
        pass


class NullTraceSink(TraceSink):
    pass


class RecordingTraceSink(TraceSink):
    """Keeps every event in memory, in emission order"""

    def __init__(self):
        self.events: List[TraceEvent] = []

    def emit(self, event: TraceEvent):
        self.events.append(event)

    def events_of(self, kind: TraceEventKind) -> List[TraceEvent]:
        return [e for e in self.events if e.kind == kind]

    def clear(self):
        self.events.clear()

    def __len__(self):
        return len(self.events)


class LoggingTraceSink(TraceSink):
    """Forwards events to a logger at DEBUG level"""

    def __init__(self, log: logging.Logger = None, level: int = logging.DEBUG):
        self.log = log or logger
        self.level = level

    def emit(self, event: TraceEvent):
        self.log.log(self.level, "%s %s", event, event.details or "")
