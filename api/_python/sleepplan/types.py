"""
Data structures for plan generation and timeline display.

All minute fields are absolute offsets from a reference midnight: they
can exceed 1440 (next day) or go negative (previous day). Clock strings
are always derived from them, never stored separately.
"""

from dataclasses import dataclass
from typing import Any, Literal

from .clock_math import minutes_to_time

# =============================================================================
# Windows
# =============================================================================

StrategyKind = Literal["shift", "wake"]

SegmentType = Literal[
    "sleep",  # Main sleep
    "nap",  # Pre-shift anchor nap
    "work",  # Shift
    "nadir",  # Afternoon alertness dip
    "caffeine",  # Caffeine permitted
    "light-control",  # Seek light (wake) / sunglasses (legacy shift)
    "vampire-mode",  # Avoid light before sleep
    "metabolic-green",  # Complex carbs
    "metabolic-yellow",  # Protein/fats only
    "metabolic-red",  # Fasting
]

TrackName = Literal["schedule", "metabolic", "protocol"]

# Layout track each segment type is drawn on
SEGMENT_TRACKS: dict[SegmentType, TrackName] = {
    "sleep": "schedule",
    "nap": "schedule",
    "work": "schedule",
    "nadir": "schedule",
    "metabolic-green": "metabolic",
    "metabolic-yellow": "metabolic",
    "metabolic-red": "metabolic",
    "caffeine": "protocol",
    "vampire-mode": "protocol",
    "light-control": "protocol",
}


@dataclass(frozen=True)
class TimeWindow:
    """
    An advisory interval [start_minutes, end_minutes).

    Midnight-crossing windows have end_minutes > 1440; end never precedes
    start. Zero width is allowed (a clamped, empty window).
    """

    start_minutes: int
    end_minutes: int

    def __post_init__(self) -> None:
        if self.end_minutes < self.start_minutes:
            raise ValueError(
                f"Window ends before it starts: {self.start_minutes} > {self.end_minutes}"
            )

    @property
    def start_time(self) -> str:
        return minutes_to_time(self.start_minutes)

    @property
    def end_time(self) -> str:
        return minutes_to_time(self.end_minutes)

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def is_empty(self) -> bool:
        """True for a zero-width (clamped) window."""
        return self.end_minutes == self.start_minutes

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_minutes": self.start_minutes,
            "end_minutes": self.end_minutes,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }


@dataclass(frozen=True)
class MetabolicZones:
    """Feeding traffic light leading into the pre-sleep fast."""

    green: TimeWindow  # Complex carbs OK
    yellow: TimeWindow  # Protein/fats only
    red: TimeWindow  # Fasting

    def to_dict(self) -> dict[str, Any]:
        return {
            "green": self.green.to_dict(),
            "yellow": self.yellow.to_dict(),
            "red": self.red.to_dict(),
        }


# =============================================================================
# Plan
# =============================================================================


@dataclass(frozen=True)
class Plan:
    """
    One complete set of advisory windows derived from a single anchor.

    Windows shared by both strategies are always present. Strategy-specific
    windows are None when they don't apply (e.g., anchor_nap on a wake plan).
    """

    strategy: StrategyKind

    # Common to both strategies
    main_sleep: TimeWindow
    caffeine_window: TimeWindow
    vampire_mode: TimeWindow
    metabolic: MetabolicZones

    # Shift strategy (shift is also set on wake plans with an overlay)
    shift: TimeWindow | None = None
    shift_times: tuple[str, str] | None = None  # Raw anchor inputs, "HH:MM"
    shift_duration_hours: float | None = None
    anchor_nap: TimeWindow | None = None
    sunglasses: TimeWindow | None = None  # Legacy, superseded by vampire_mode

    # Wake strategy
    wake_time: str | None = None  # Raw anchor input, "HH:MM"
    light_anchor: TimeWindow | None = None
    nadir_dip: TimeWindow | None = None

    @property
    def sleep_start(self) -> int:
        """Primary sleep-start instant (absolute minutes)."""
        return self.main_sleep.start_minutes

    @property
    def sleep_start_time(self) -> str:
        return self.main_sleep.start_time

    @property
    def caffeine_cutoff(self) -> str:
        """Clock time after which no more caffeine."""
        return self.caffeine_window.end_time

    @property
    def shift_start_time(self) -> str | None:
        return self.shift.start_time if self.shift else None

    @property
    def shift_end_time(self) -> str | None:
        return self.shift.end_time if self.shift else None

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation with minutes and clock strings."""

        def window(w: TimeWindow | None) -> dict[str, Any] | None:
            return w.to_dict() if w is not None else None

        return {
            "strategy": self.strategy,
            "wake_time": self.wake_time,
            "shift_times": list(self.shift_times) if self.shift_times else None,
            "shift_start": self.shift.start_minutes if self.shift else None,
            "shift_end": self.shift.end_minutes if self.shift else None,
            "shift_start_time": self.shift_start_time,
            "shift_end_time": self.shift_end_time,
            "shift_duration_hours": self.shift_duration_hours,
            "sleep_start": self.sleep_start,
            "sleep_start_time": self.sleep_start_time,
            "caffeine_cutoff": self.caffeine_cutoff,
            "main_sleep": self.main_sleep.to_dict(),
            "caffeine_window": self.caffeine_window.to_dict(),
            "vampire_mode": self.vampire_mode.to_dict(),
            "metabolic": self.metabolic.to_dict(),
            "anchor_nap": window(self.anchor_nap),
            "sunglasses": window(self.sunglasses),
            "light_anchor": window(self.light_anchor),
            "nadir_dip": window(self.nadir_dip),
        }


# =============================================================================
# Timeline
# =============================================================================


@dataclass(frozen=True)
class Segment:
    """A labelled piece of a window, guaranteed to sit inside one display cycle."""

    label: str
    start_minutes: int
    end_minutes: int
    type: SegmentType

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "start_minutes": self.start_minutes,
            "end_minutes": self.end_minutes,
            "start_time": minutes_to_time(self.start_minutes),
            "end_time": minutes_to_time(self.end_minutes),
            "type": self.type,
        }


@dataclass(frozen=True)
class Timeline:
    """Segments projected onto [timeline_start, timeline_end]."""

    segments: tuple[Segment, ...]
    timeline_start: int
    timeline_end: int

    def segments_by_track(self) -> dict[TrackName, list[Segment]]:
        """Group segments into layout tracks, preserving order."""
        tracks: dict[TrackName, list[Segment]] = {
            "schedule": [],
            "metabolic": [],
            "protocol": [],
        }
        for segment in self.segments:
            tracks[SEGMENT_TRACKS[segment.type]].append(segment)
        return tracks

    def to_dict(self) -> dict[str, Any]:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "timeline_start": self.timeline_start,
            "timeline_end": self.timeline_end,
        }
